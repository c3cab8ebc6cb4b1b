"""Command-line interface for bininfo."""

import argparse
import json
import logging
import sys
from typing import List, Optional

from . import __version__
from .exceptions import (
    BinaryNotFoundError,
    ContentHashError,
    FileOpenError,
    NotAPEImageError,
    TruncatedFileError,
    VersionInfoUnavailableError,
)
from .models import BinaryReport
from .report import inspect_file

USAGE = "bininfo -file filePath [md5]"

# Exit codes
EXIT_OK = 0
EXIT_USAGE = 1
EXIT_NOT_FOUND = 2
EXIT_BAD_IMAGE = 3
EXIT_NO_VERSION = 4
EXIT_IO_ERROR = 5

ERROR_EXIT_CODES = (
    (BinaryNotFoundError, EXIT_NOT_FOUND),
    (TruncatedFileError, EXIT_BAD_IMAGE),
    (NotAPEImageError, EXIT_BAD_IMAGE),
    (VersionInfoUnavailableError, EXIT_NO_VERSION),
    (FileOpenError, EXIT_IO_ERROR),
    (ContentHashError, EXIT_IO_ERROR),
)


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def print_report(report: BinaryReport, as_json: bool = False) -> None:
    """Print inspection report."""
    if as_json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        print(report.to_line())


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = _ArgumentParser(
        prog="bininfo",
        usage=USAGE,
        description=(
            "Report the target architecture, file version and optional MD5 "
            "of a Windows PE executable or DLL."
        ),
    )

    parser.add_argument(
        "-file",
        dest="file",
        metavar="PATH",
        help="PE executable or DLL to inspect",
    )

    parser.add_argument(
        "md5",
        nargs="?",
        choices=["md5"],
        help="Also print the MD5 digest of the file",
    )

    parser.add_argument(
        "-md5",
        dest="md5_flag",
        action="store_true",
        help=argparse.SUPPRESS,
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Output report as JSON",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log header parsing details to stderr",
    )

    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def exit_code_for(error: Exception) -> int:
    """Map an inspection error to its process exit code."""
    for error_type, code in ERROR_EXIT_CODES:
        if isinstance(error, error_type):
            return code
    return EXIT_IO_ERROR


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if not args.file:
        print(USAGE)
        return EXIT_USAGE

    try:
        report = inspect_file(args.file, with_md5=bool(args.md5 or args.md5_flag))
    except (
        BinaryNotFoundError,
        FileOpenError,
        TruncatedFileError,
        NotAPEImageError,
        VersionInfoUnavailableError,
        ContentHashError,
    ) as e:
        print(e, file=sys.stderr)
        return exit_code_for(e)

    print_report(report, as_json=args.json)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
