import logging
import os
from typing import Iterable, List, Tuple

from .models import CodeFile

DEFAULT_SUFFIXES = (".py",)


def load_from_file(path: str) -> CodeFile:
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return CodeFile(name=os.path.basename(path), content=f.read())


def load_from_dir(dir_path: str, suffixes: Tuple[str, ...] = DEFAULT_SUFFIXES) -> List[CodeFile]:
    """
    Walk dir_path and load every file whose name ends with one of suffixes.
    Names are relative to dir_path; results are sorted by name.
    """
    acc: List[CodeFile] = []
    for root, _, files in os.walk(dir_path):
        for f in sorted(files):
            if not f.lower().endswith(suffixes):
                continue
            full = os.path.join(root, f)
            try:
                code = load_from_file(full)
            except OSError as e:
                # Skip unreadable files but continue
                logging.warning("Skipping %s: %s", full, e)
                continue
            code.name = os.path.relpath(full, dir_path)
            acc.append(code)
    acc.sort(key=lambda c: c.name)
    return acc


def load_paths(paths: Iterable[str], suffixes: Tuple[str, ...] = DEFAULT_SUFFIXES) -> List[CodeFile]:
    """
    Files are loaded as given; directories are expanded with load_from_dir.
    A file reached twice (same resolved path) is kept once, at its first position.
    """
    acc: List[CodeFile] = []
    seen = set()
    for p in paths:
        if os.path.isdir(p):
            found = [(os.path.join(p, c.name), c) for c in load_from_dir(p, suffixes)]
            logging.info("Loaded %d file(s) from %s", len(found), p)
        else:
            found = [(p, load_from_file(p))]
        for full, code in found:
            key = os.path.realpath(full)
            if key in seen:
                logging.info("Skipping duplicate %s", full)
                continue
            seen.add(key)
            acc.append(code)
    return acc
