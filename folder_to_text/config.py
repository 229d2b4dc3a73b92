import os
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Optional

from dotenv import load_dotenv

from folder_to_text.content_type import Classifier, inspect

logger = logging.getLogger(__name__)

# --- CONFIGURATION ---
# Fixed for every command-line run; only code and tests build other configs.

# 1. Output File (created in the working directory)
OUTPUT_FILENAME = "output.txt"

# 2. Excluded Directories
EXCLUDE_DIRS: FrozenSet[str] = frozenset({'.git'})

# 3. Number of leading bytes used to classify a file
SAMPLE_SIZE = 512

# 4. Environment
LOG_LEVEL_ENV = "FOLDER_TO_TEXT_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass
class AggregatorConfig:
    """Everything one run of the pipeline needs besides the input paths."""
    output_path: Path = field(default_factory=lambda: Path.cwd() / OUTPUT_FILENAME)
    excluded_names: FrozenSet[str] = EXCLUDE_DIRS
    sample_size: int = SAMPLE_SIZE
    base_dir: Path = field(default_factory=Path.cwd)
    classifier: Classifier = inspect
    log_level: str = DEFAULT_LOG_LEVEL


def load_config(base_dir: Optional[Path] = None) -> AggregatorConfig:
    """
    Build the configuration for a command-line run.

    Loads a .env file from the working directory when one exists, the same way
    the project scripts do, then reads the log level from the environment. The
    output location and exclusion set are not configurable from outside.
    """
    base_dir = Path(base_dir) if base_dir is not None else Path.cwd()

    dotenv_path = base_dir / '.env'
    if dotenv_path.exists():
        load_dotenv(dotenv_path=dotenv_path)

    log_level = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        logger.warning(f"Unknown {LOG_LEVEL_ENV}={log_level!r}, using {DEFAULT_LOG_LEVEL}")
        log_level = DEFAULT_LOG_LEVEL

    return AggregatorConfig(
        output_path=base_dir / OUTPUT_FILENAME,
        base_dir=base_dir,
        log_level=log_level,
    )
