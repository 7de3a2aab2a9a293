"""Batch decoding of every session file under a directory."""

import fnmatch
import json
import os
import sys
import time

from tqdm import tqdm

from .errors import SnssError
from .snss_reader import read_snss
from .session_index import summarize

# Base names used for session and tab restore snapshots
DEFAULT_PATTERNS = (
    'Session_*', 'Tabs_*',
    'Current Session', 'Last Session',
    'Current Tabs', 'Last Tabs',
    '*.snss',
)


def find_session_files(root: str, patterns=DEFAULT_PATTERNS):
    """Collect session file paths under root, sorted."""
    found = []
    for dirpath, dirs, fnames in os.walk(root):
        for fn in fnames:
            if any(fnmatch.fnmatch(fn, p) for p in patterns):
                found.append(os.path.join(dirpath, fn))
    found.sort()
    return found


def scan_directory(root: str, strict=False, progress=True, patterns=DEFAULT_PATTERNS):
    """Decode all session files under root.

    Returns {'files': [...], 'failures': [...]}. A file that fails to
    decode is recorded in 'failures' and the scan continues.
    """
    paths = find_session_files(root, patterns)
    files = []
    failures = []

    for filepath in tqdm(paths, desc="Decoding sessions", disable=not progress):
        relpath = os.path.relpath(filepath, root)
        try:
            header, commands = read_snss(filepath, strict=strict)
        except (SnssError, OSError) as e:
            failures.append({
                'file': relpath,
                'error': type(e).__name__,
                'message': str(e),
            })
            if progress:
                tqdm.write(f"  FAIL: {relpath} - {type(e).__name__}: {e}", file=sys.stderr)
            continue

        files.append({
            'file': relpath,
            'version': header.version,
            'summary': summarize(commands),
        })

    return {'files': files, 'failures': failures}


def write_index(result: dict, path: str):
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(result, f, ensure_ascii=False, indent=2)


def run_scan(root: str, output_path=None, strict=False):
    """Scan a directory, print progress and optionally write the JSON index."""
    print(f"Scanning session files in {root}...")
    t0 = time.time()
    result = scan_directory(root, strict=strict)
    t1 = time.time()
    print(f"  Decoded {len(result['files'])} files "
          f"({len(result['failures'])} failures) in {t1 - t0:.1f}s")

    if output_path:
        write_index(result, output_path)
        print(f"  Index written to {output_path}")
    return result
