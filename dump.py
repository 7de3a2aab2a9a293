#!/usr/bin/env python3
"""CLI entry point for the SNSS session decoder."""

import argparse
import logging
import sys

from snssdump.errors import SnssError
from snssdump.snss_reader import read_snss
from snssdump.emitter import emit_text, emit_json, emit_xml
from snssdump.session_index import SessionIndex
from snssdump.batch import run_scan


def _read(filename, strict):
    try:
        return read_snss(filename, strict=strict)
    except (SnssError, OSError) as e:
        print(f"Error: {filename}: {e}", file=sys.stderr)
        sys.exit(1)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Decode browser SNSS session restore files'
    )
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log every decoded field')
    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # 'dump' command - decode a single file
    dump_parser = subparsers.add_parser('dump', help='Print the commands of a session file')
    dump_parser.add_argument('file', help='Session file to decode')
    dump_parser.add_argument('-o', '--output', help='Output file (default: stdout)')
    dump_parser.add_argument('--format', choices=['text', 'json', 'xml'], default='text',
                             help='Output format (default: text)')
    dump_parser.add_argument('--strict', action='store_true',
                             help='Reject records with undecoded trailing bytes')

    # 'info' command - show file info
    info_parser = subparsers.add_parser('info', help='Show session file info')
    info_parser.add_argument('file', help='Session file to inspect')
    info_parser.add_argument('--strict', action='store_true',
                             help='Reject records with undecoded trailing bytes')

    # 'scan' command - batch decode a directory
    scan_parser = subparsers.add_parser('scan', help='Decode all session files in a directory')
    scan_parser.add_argument('directory', help='Directory to search for session files')
    scan_parser.add_argument('-o', '--output', help='Write the JSON index to this file')
    scan_parser.add_argument('--strict', action='store_true',
                             help='Reject records with undecoded trailing bytes')

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format='%(levelname)s %(name)s: %(message)s')

    if args.command == 'dump':
        header, commands = _read(args.file, args.strict)

        if args.format == 'json':
            output = emit_json(header, commands, source_path=args.file)
        elif args.format == 'xml':
            output = emit_xml(header, commands, source_path=args.file)
        else:
            output = emit_text(commands)

        if args.output:
            with open(args.output, 'w', encoding='utf-8') as f:
                f.write(output)
            print(f"Written to {args.output}")
        else:
            print(output)

    elif args.command == 'info':
        header, commands = _read(args.file, args.strict)
        index = SessionIndex()
        index.add_commands(commands)
        print(f"File: {args.file}")
        print(f"Version: {header.version}")
        print(f"Commands: {index.total}")
        print(f"Groups: {index.groups}")
        print("Command types:")
        for name, count in sorted(index.counts.items()):
            print(f"  {name}: {count}")
        print("Tabs:")
        for tab_id in index.tab_ids():
            print(f"  {tab_id}:")
            for url in index.tab_urls(tab_id):
                print(f"    {url}")

    elif args.command == 'scan':
        run_scan(args.directory, output_path=args.output, strict=args.strict)

    else:
        parser.print_help()


if __name__ == '__main__':
    main()
