import os
from pathlib import Path
from typing import Iterator

# never descended into when walking a source tree
SKIP_DIRS = {".git", "__pycache__", ".venv", "venv", "node_modules", ".mypy_cache", ".pytest_cache"}


def resolve(path: str, root: str) -> Path:
    """resolve path below root, refusing anything that escapes it"""
    base = Path(root).resolve()
    full_path = (base / path).resolve()
    if not full_path.is_relative_to(base):
        raise ValueError(f"path {path} escapes safe root")
    return full_path


def read(path: str, root: str) -> str:
    """read a utf-8 source file from below root"""
    full_path = resolve(path, root)
    if not full_path.is_file():
        raise FileNotFoundError(f"file not found: {path}")

    with open(full_path, "r", encoding="utf-8") as f:
        return f.read()


def walk(root: str) -> Iterator[str]:
    """yield posix paths (relative to root) of every regular file, sorted"""
    base = Path(root)
    for dirpath, dirnames, filenames in os.walk(base):
        # prune in place so os.walk skips them
        dirnames[:] = sorted(d for d in dirnames if d not in SKIP_DIRS)
        for name in sorted(filenames):
            full_path = Path(dirpath) / name
            if full_path.is_file():
                yield full_path.relative_to(base).as_posix()
