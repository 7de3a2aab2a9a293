#!/usr/bin/env python3
"""FastAPI server exposing decoded SNSS session files as JSON.

Decodes every session file under a directory at startup and serves
summaries, full command lists and a URL keyword search.

Usage:
    python3 session_server.py --sessions ~/.config/chromium/Default/Sessions --port 8000
"""

import argparse
import os
import sys

import uvicorn
from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse

from snssdump.batch import find_session_files
from snssdump.emitter import command_to_dict
from snssdump.errors import SnssError
from snssdump.session_index import SessionIndex
from snssdump.snss_reader import read_snss


app = FastAPI(title="SNSS Session Inspector")

# Global state loaded at startup
sessions = {}   # relpath -> (header, commands, SessionIndex)
failures = {}   # relpath -> error message


def load_sessions(sessions_dir, strict=False):
    """Decode all session files under sessions_dir into the global state."""
    sessions.clear()
    failures.clear()

    print(f"Loading sessions from {sessions_dir}...")
    for filepath in find_session_files(sessions_dir):
        relpath = os.path.relpath(filepath, sessions_dir)
        try:
            header, commands = read_snss(filepath, strict=strict)
        except (SnssError, OSError) as e:
            failures[relpath] = f"{type(e).__name__}: {e}"
            print(f"Warning: could not decode {relpath}: {e}", file=sys.stderr)
            continue
        index = SessionIndex()
        index.add_commands(commands)
        sessions[relpath] = (header, commands, index)
    print(f"  {len(sessions)} sessions, {len(failures)} failures")


def url_search(query, limit=30):
    """Case-insensitive multi-term match over every decoded URL."""
    terms = [t for t in query.lower().split() if t]
    if not terms:
        return []

    results = []
    for relpath in sorted(sessions):
        index = sessions[relpath][2]
        for tab_id, url in index.all_urls():
            lowered = url.lower()
            if all(term in lowered for term in terms):
                results.append({'file': relpath, 'tab_id': tab_id, 'url': url})
                if len(results) >= limit:
                    return results
    return results


@app.get('/api/status')
async def api_status():
    """Check what was loaded."""
    return JSONResponse({
        'ok': True,
        'sessions': len(sessions),
        'failures': len(failures),
    })


@app.get('/api/sessions')
async def api_sessions():
    """List decoded session files with their summaries."""
    return JSONResponse({
        'sessions': [
            {'file': relpath, 'version': header.version, 'summary': index.summary()}
            for relpath, (header, commands, index) in sorted(sessions.items())
        ],
        'failures': [
            {'file': relpath, 'error': message}
            for relpath, message in sorted(failures.items())
        ],
    })


@app.get('/api/session')
async def api_session(path: str = Query(..., description='Session file path relative to the sessions directory')):
    """Return the decoded commands of one session file."""
    if path in failures:
        return JSONResponse({'error': failures[path], 'file': path}, status_code=422)
    if path not in sessions:
        return JSONResponse({'error': 'unknown session file', 'file': path}, status_code=404)

    header, commands, index = sessions[path]
    return JSONResponse({
        'file': path,
        'version': header.version,
        'commands': [command_to_dict(cmd) for cmd in commands],
    })


@app.get('/api/urls')
async def api_urls(
    q: str = Query('', description='Search terms'),
    limit: int = Query(30, ge=1, le=500, description='Max results'),
):
    """Search decoded navigation URLs."""
    if not q.strip():
        return JSONResponse({'results': [], 'query': q})
    return JSONResponse({'results': url_search(q, limit=limit), 'query': q})


def main():
    parser = argparse.ArgumentParser(description='SNSS session inspection server')
    parser.add_argument('--sessions', default='.', help='Directory containing session files')
    parser.add_argument('--port', type=int, default=8000, help='Port to listen on')
    parser.add_argument('--host', default='127.0.0.1', help='Host to bind to')
    parser.add_argument('--strict', action='store_true',
                        help='Reject records with undecoded trailing bytes')
    args = parser.parse_args()

    if not os.path.isdir(args.sessions):
        print(f"Error: {args.sessions} is not a directory", file=sys.stderr)
        sys.exit(1)

    load_sessions(args.sessions, strict=args.strict)

    print(f"Serving on http://{args.host}:{args.port}")
    uvicorn.run(app, host=args.host, port=args.port)


if __name__ == '__main__':
    main()
