import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional, Union

from folder_to_text.config import AggregatorConfig
from folder_to_text.content_type import decode, is_text
from folder_to_text.exception_handler import ErrorCategory, ExceptionHandler

logger = logging.getLogger(__name__)


def display_path(path: Union[str, Path], base: Path) -> str:
    """
    Label used in the open/close tags for `path`.

    An absolute path below `base` is shown relative to it. Anything else, a
    relative argument or an absolute path outside `base`, is shown exactly as
    given, so a single dump can mix relative and absolute labels.
    """
    path = os.fspath(path)
    if os.path.isabs(path):
        try:
            return str(Path(path).relative_to(base))
        except ValueError:
            pass
    return path


@dataclass
class RunReport:
    """Counters for one run of the pipeline."""
    output_path: Path
    files_written: int = 0
    files_skipped: int = 0
    failures: int = 0


class FileEmitter:
    """Appends one tagged block per textual file to an open output stream.

    `output` is a binary stream. Each write goes straight to it, so opening the
    output file unbuffered makes a full disk show up on the file being written.
    """

    def __init__(self, output: BinaryIO, config: AggregatorConfig,
                 exception_handler: Optional[ExceptionHandler] = None):
        self.output = output
        self.config = config
        self.exception_handler = exception_handler or ExceptionHandler()
        self.report = RunReport(output_path=config.output_path)
        self._output_resolved = self._resolve(config.output_path)

    @staticmethod
    def _resolve(path: Union[str, Path]) -> Optional[Path]:
        try:
            return Path(path).resolve()
        except OSError:
            return None

    def _fail(self, exception: BaseException, category: ErrorCategory, path: Union[str, Path]) -> bool:
        self.exception_handler.handle_exception(exception, category, path=path)
        self.report.failures += 1
        return False

    def _write(self, text: str) -> None:
        view = memoryview(text.encode("utf-8"))
        while view:
            view = view[self.output.write(view):]

    def emit(self, path: Union[str, Path]) -> bool:
        """Write the block for `path` if it is text. Returns True if a block was written."""
        if self._output_resolved is not None and self._resolve(path) == self._output_resolved:
            logger.debug(f"Skipping the output file itself: {path}")
            self.report.files_skipped += 1
            return False

        try:
            infile = open(path, 'rb')
        except OSError as e:
            return self._fail(e, ErrorCategory.OPEN, path)

        with infile:
            try:
                sample = infile.read(self.config.sample_size)
            except OSError as e:
                return self._fail(e, ErrorCategory.READ, path)

            content_type = self.config.classifier(sample)
            if not is_text(content_type):
                logger.debug(f"Skipping non-text file ({content_type.value}): {path}")
                self.report.files_skipped += 1
                return False

            try:
                data = sample + infile.read()
            except OSError as e:
                return self._fail(e, ErrorCategory.READ, path)

        try:
            content = decode(data, content_type)
        except UnicodeDecodeError as e:
            return self._fail(e, ErrorCategory.DECODE, path)

        label = display_path(path, self.config.base_dir)

        try:
            self._write(f"<{label}>\n")
            self._write(f"{content}\n")
            self._write(f"</{label}>\n\n")
        except (OSError, UnicodeEncodeError) as e:
            return self._fail(e, ErrorCategory.WRITE, path)

        logger.debug(f"Wrote {label} ({content_type.value}, {len(data)} bytes)")
        self.report.files_written += 1
        return True
