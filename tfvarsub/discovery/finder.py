"""Deterministic recursive file discovery by extension."""

import fnmatch
from pathlib import Path
from typing import Iterator, List, Sequence, Union


def find_files(
    root: Union[str, Path],
    extension: str,
    exclude: Sequence[str] = ()
) -> List[Path]:
    """Find files under root whose last suffix is exactly ``extension``.

    Entries are visited depth-first in lexical order, files and directories
    interleaved, so the result order is stable across runs and platforms.

    Args:
        root: Directory to search (a matching file is returned alone)
        extension: Suffix including the dot, e.g. '.tfvars'
        exclude: Glob patterns for directory names that are not entered

    Returns:
        Matching paths in visit order

    Raises:
        FileNotFoundError: If root does not exist
    """
    root = Path(root)
    if not root.exists():
        raise FileNotFoundError(f"Root directory not found: {root}")

    if not root.is_dir():
        return [root] if root.suffix == extension else []

    return [path for path in _walk(root, exclude) if path.suffix == extension]


def _walk(directory: Path, exclude: Sequence[str]) -> Iterator[Path]:
    """Yield files below directory in lexical depth-first order."""
    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        if entry.is_dir() and not entry.is_symlink():
            if any(fnmatch.fnmatch(entry.name, pattern) for pattern in exclude):
                continue
            yield from _walk(entry, exclude)
        elif entry.is_file():
            yield entry
