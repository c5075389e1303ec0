from __future__ import annotations
from pathlib import Path
from typing import Iterable, List, Sequence, Union
import fnmatch


def normalize_path(path: Union[Path, str]) -> Path:
    """Resolve a path to its absolute, symlink-free form.

    Example:
        >>> normalize_path("./relative/dir")
        PosixPath('/home/user/relative/dir')
    """
    if not isinstance(path, Path):
        path = Path(path)
    return path.resolve()


def normalize_extensions(extensions: Iterable[str]) -> List[str]:
    """Lowercase extensions and give each a leading dot ("txt" -> ".txt")."""
    result: List[str] = []
    for ext in extensions:
        ext = ext.strip().lower()
        if not ext:
            continue
        if not ext.startswith('.'):
            ext = '.' + ext
        if ext not in result:
            result.append(ext)
    return result


def is_ignored(name: str, ignore_patterns: Sequence[str]) -> bool:
    return any(fnmatch.fnmatch(name, pat) for pat in ignore_patterns)


__all__ = ["normalize_path", "normalize_extensions", "is_ignored"]
