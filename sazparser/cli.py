# Copyright 2025 Jesse Bate (https://github.com/jbatesy)
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Command-line interface for sazparser.
"""

import argparse
import os
import sys
from typing import Optional

from .archive import list_entries
from .errors import SazError
from .models import OUTPUT_FORMATS
from .parser import SazParser


def print_listing(saz_file: str) -> None:
    """Print one line per archive entry, flagging unsafe names."""
    for i, info in enumerate(list_entries(saz_file)):
        if info.path is None:
            print(f"Entry {i} has a suspicious path: {info.name!r}")
            continue
        if info.comment:
            print(f"Entry {i} comment: {info.comment}")
        if info.is_dir:
            print(f"Entry {i} is a directory with name \"{info.path}\"")
        else:
            print(f"Entry {i} is a file with name \"{info.path}\" ({info.size} bytes)")


def main(args: Optional[list] = None) -> int:
    """
    Main entry point for the sazparser CLI.

    Args:
        args: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="sazparser",
        description="Extract HTTP sessions from Fiddler SAZ capture archives.",
        epilog="Examples:\n"
               "  sazparser capture.saz -o sessions.json\n"
               "  sazparser capture.saz --format yaml --no-contents\n"
               "  sazparser capture.saz --list",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "saz_file",
        metavar="SAZ_FILE",
        help="Path to the input SAZ archive",
    )

    parser.add_argument(
        "-o", "--output",
        metavar="FILE",
        help="Output file (default: stdout)",
    )

    parser.add_argument(
        "-f", "--format",
        choices=OUTPUT_FORMATS,
        default="json",
        help="Output format (default: json)",
    )

    parser.add_argument(
        "--indent",
        metavar="N",
        type=int,
        default=2,
        help="Indentation level (default: 2, use 0 for compact JSON)",
    )

    parser.add_argument(
        "--no-contents",
        action="store_true",
        help="Exclude raw request/response text from the output",
    )

    parser.add_argument(
        "--list",
        action="store_true",
        help="List the archive entries instead of extracting sessions",
    )

    parser.add_argument(
        "--progress",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Show a progress line while extracting sessions (default: off)",
    )

    parser.add_argument(
        "--parallel",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Extract sessions in parallel",
    )

    parser.add_argument(
        "--workers",
        type=int,
        default=0,
        metavar="N",
        help="Number of parallel workers when --parallel is enabled (default: auto)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress progress and non-essential output",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0",
    )

    parsed_args = parser.parse_args(args)

    if not os.path.exists(parsed_args.saz_file):
        print(f"Error: SAZ file not found: {parsed_args.saz_file}", file=sys.stderr)
        return 1

    if parsed_args.quiet:
        parsed_args.progress = False

    try:
        if parsed_args.list:
            print_listing(parsed_args.saz_file)
            return 0

        saz_parser = SazParser(
            parallel=parsed_args.parallel,
            parallel_workers=parsed_args.workers if parsed_args.workers > 0 else None,
            progress=parsed_args.progress,
        )

        if parsed_args.verbose:
            print(f"Processing: {parsed_args.saz_file}", file=sys.stderr)

        sessions = saz_parser.parse(parsed_args.saz_file)

        if parsed_args.verbose:
            print(f"Extracted {len(sessions)} sessions", file=sys.stderr)

        include_contents = not parsed_args.no_contents
        if parsed_args.output:
            sessions.save(
                parsed_args.output,
                fmt=parsed_args.format,
                indent=parsed_args.indent,
                include_contents=include_contents,
            )
            if parsed_args.verbose:
                print(f"Output written to: {parsed_args.output}", file=sys.stderr)
        else:
            print(sessions.dumps(
                parsed_args.format,
                indent=parsed_args.indent,
                include_contents=include_contents,
            ))

        return 0

    except SazError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 130

    except Exception as e:
        if parsed_args.verbose:
            import traceback
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
