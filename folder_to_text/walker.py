import os
from pathlib import Path
from typing import AbstractSet, Iterator, Union

from folder_to_text.config import EXCLUDE_DIRS


def is_excluded(path: Path, excluded_names: AbstractSet[str] = EXCLUDE_DIRS) -> bool:
    """True when any segment of `path` is exactly one of the excluded names."""
    return any(part in excluded_names for part in Path(path).parts)


def walk_files(root: Union[str, Path], excluded_names: AbstractSet[str] = EXCLUDE_DIRS) -> Iterator[str]:
    """
    Lazily yield the regular files below `root`.

    Excluded directories are pruned before descending, so nothing beneath them
    is ever listed. Paths are joined onto `root` as given, so a root of "."
    yields "./name". Symlinked directories are not followed. Directories that
    cannot be listed are skipped without a message.
    """
    root = os.fspath(root)
    if is_excluded(Path(root), excluded_names):
        return

    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in excluded_names)

        for filename in sorted(filenames):
            if filename in excluded_names:
                continue
            filepath = os.path.join(dirpath, filename)
            if not os.path.isfile(filepath):
                continue
            yield filepath
