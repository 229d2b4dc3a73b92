#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
folder-to-text: dump every text file under the given paths into one file.

Each text file found is written to output.txt in the current directory as

    <path/to/file>
    ...content...
    </path/to/file>

Usage:
python -m folder_to_text src README.md
folder-to-text --strict .
"""

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from folder_to_text.config import AggregatorConfig, load_config
from folder_to_text.emitter import FileEmitter, RunReport
from folder_to_text.exception_handler import ErrorCategory, ExceptionHandler
from folder_to_text.resolver import resolve

logger = logging.getLogger(__name__)

# Exit statuses
EXIT_OK = 0
EXIT_USAGE = 1
EXIT_OUTPUT_FAILED = 1
EXIT_PARTIAL_FAILURE = 2


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="folder-to-text",
        description="Concatenate every text file under the given paths into a single output.txt",
    )
    parser.add_argument("paths", nargs="*", metavar="path",
                        help="file or directory to include")
    parser.add_argument("--strict", action="store_true",
                        help="exit with status 2 if any file or path could not be processed")
    return parser


def run(paths: Sequence[str], config: AggregatorConfig,
        exception_handler: Optional[ExceptionHandler] = None) -> RunReport:
    """
    Run the pipeline over `paths` and write the output artifact.

    Raises OSError only when the output file cannot be created; every other
    failure is recorded in the exception handler and the run carries on.
    """
    exception_handler = exception_handler or ExceptionHandler()

    # 'wb' truncates any previous dump; unbuffered, so write errors belong to one file
    with open(config.output_path, 'wb', buffering=0) as outfile:
        emitter = FileEmitter(outfile, config, exception_handler)
        resolve(paths, emitter)

    report = emitter.report
    logger.info(
        f"Wrote {report.files_written} files, skipped {report.files_skipped} non-text files, "
        f"{report.failures} failures"
    )
    return report


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = load_config()
    setup_logging(config.log_level)
    exception_handler = ExceptionHandler()

    if not args.paths:
        parser.print_usage(sys.stderr)
        exception_handler.report(ErrorCategory.USAGE, "at least one path is required")
        return EXIT_USAGE

    try:
        run(args.paths, config, exception_handler)
    except OSError as e:
        exception_handler.handle_exception(e, ErrorCategory.OUTPUT, path=config.output_path)
        return EXIT_OUTPUT_FAILED

    if exception_handler.has_failures():
        stats = exception_handler.get_error_statistics()
        breakdown = {k: v for k, v in stats['category_breakdown'].items() if v}
        logger.warning(f"{stats['total_errors']} problems during the run: {breakdown}")

    print(f"Text file contents written to '{config.output_path.name}'.")

    if args.strict and exception_handler.has_failures():
        return EXIT_PARTIAL_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
