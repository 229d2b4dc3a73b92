import logging
from pathlib import Path
from typing import Iterable

from folder_to_text.emitter import FileEmitter
from folder_to_text.exception_handler import ErrorCategory
from folder_to_text.walker import walk_files

logger = logging.getLogger(__name__)


def resolve_path(arg: str, emitter: FileEmitter) -> None:
    """Dispatch a single command-line argument to the walker or the emitter."""
    handler = emitter.exception_handler
    input_path = Path(arg)

    try:
        exists = input_path.exists()
    except OSError as e:
        handler.handle_exception(e, ErrorCategory.PATH_NOT_FOUND, path=arg)
        emitter.report.failures += 1
        return

    if not exists:
        handler.report(ErrorCategory.PATH_NOT_FOUND, "path does not exist", path=arg)
        emitter.report.failures += 1
        return

    if input_path.is_dir():
        logger.info(f"Scanning directory: {input_path}")
        for filepath in walk_files(arg, emitter.config.excluded_names):
            emitter.emit(filepath)
    elif input_path.is_file():
        emitter.emit(arg)
    else:
        handler.report(ErrorCategory.PATH_WRONG_KIND, "path is neither a file nor a directory", path=arg)
        emitter.report.failures += 1


def resolve(paths: Iterable[str], emitter: FileEmitter) -> None:
    """Process every argument in order; a failing argument never stops the others."""
    for arg in paths:
        resolve_path(arg, emitter)
