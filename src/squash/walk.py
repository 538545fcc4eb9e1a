# ABOUTME: Deterministic recursive directory traversal yielding files to archive
# ABOUTME: Wraps traversal failures in WalkError with the offending path and depth
"""Directory traversal"""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

logger = logging.getLogger(__name__)


class WalkError(Exception):
    """Failure while walking a directory tree"""

    def __init__(self, path: Path | None, depth: int, cause: OSError):
        super().__init__(path, depth, cause)
        self.path = path
        self.depth = depth
        self.cause = cause

    def __str__(self):
        if self.path is not None:
            return f"IO error for operation on {self.path}: {self.cause}"
        return f"IO error: {self.cause}"


def _depth(root: Path, path: Path) -> int:
    try:
        return len(path.relative_to(root).parts)
    except ValueError:
        return 0


def walk_files(root, follow_links: bool = False) -> Iterator[Path]:
    """
    Yield every file below root, sorted within each directory.

    Args:
        root: File or directory to walk; a file yields only itself
        follow_links: Descend into symlinked directories

    Raises:
        WalkError: If root is missing or a directory cannot be read
    """
    root = Path(root)

    try:
        is_dir = root.is_dir() if follow_links else (root.is_dir() and not root.is_symlink())
        if not is_dir:
            root.lstat()
            yield root
            return
    except OSError as e:
        raise WalkError(root, 0, e) from e

    def on_error(err: OSError):
        path = Path(err.filename) if err.filename else None
        depth = _depth(root, path) if path is not None else 0
        raise WalkError(path, depth, err) from err

    for dirpath, dirnames, filenames in os.walk(root, onerror=on_error, followlinks=follow_links):
        # Sort in place so os.walk descends in a stable order
        dirnames.sort()
        current = Path(dirpath)
        for name in sorted(filenames):
            yield current / name

    logger.debug(f"Finished walking {root}")
