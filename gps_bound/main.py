"""
Main entry point for the bound application.

Usage: bound <source-dir> <dest-dir> <latTopLeft> <lonTopLeft> <latBottomRight> <lonBottomRight>

Copies every image in source-dir whose EXIF GPS position lies inside the
rectangle spanned by the top-left and bottom-right corners into dest-dir.
"""

import sys
from typing import Optional, Sequence

from .binder import DirectoryBinder
from .config import FatalConfigError, parse_arguments
from .locator import GPSLocator
from .logger import Logger

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_COPY_FAILED = 2


def fatal(message: str) -> int:
    # Messages can quote undecodable file names
    encoding = getattr(sys.stdout, "encoding", None) or "utf-8"
    message = message.encode(encoding, errors="replace").decode(encoding)
    print(f"bound: fatal error: {message}")
    return EXIT_FATAL


def run(argv: Sequence[str]) -> int:
    """
    Run bound with the given arguments.

    Args:
        argv: Arguments without the program name

    Returns:
        Process exit status
    """
    try:
        config = parse_arguments(argv)
    except FatalConfigError as e:
        return fatal(str(e))

    logger = Logger(config.log_level, config.log_file, config.show_progress)
    log = logger.get_logger(__name__)

    try:
        binder = DirectoryBinder(locator=GPSLocator(), logger=logger)
        report = binder.bind(config.source_dir, config.dest_dir, config.bounds, dry_run=config.dry_run)
    except OSError as e:
        log.error(f"Error during directory scan: {e}")
        return fatal(str(e))
    except Exception as e:
        log.error(f"Unexpected error: {e}")
        return fatal(str(e))

    if not report.ok:
        log.error(f"{len(report.failed)} file(s) could not be copied")
        return EXIT_COPY_FAILED
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None):
    """Main entry point for the application."""
    if argv is None:
        argv = sys.argv[1:]
    sys.exit(run(argv))


if __name__ == "__main__":
    main()
