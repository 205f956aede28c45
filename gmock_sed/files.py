"""
files.py: Find C++ files and run search/rewrite over their contents.
"""
import io
import logging
import os
from concurrent.futures import ProcessPoolExecutor
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from .rewrite import ReplaceMode, ReplaceSummary, RewriteOptions, rewrite
from .search import SearchMode, SearchSummary, search

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def is_cpp(path: Path, extensions: Iterable[str]) -> bool:
    # Suffixes are case sensitive: `.C` is C++, `.c` is not.
    return path.suffix[1:] in set(extensions)


def find_cpp_files(root: Path, extensions: Iterable[str], max_depth: int = 50) -> List[Path]:
    """Return C++ files under *root*, at most *max_depth* levels deep.

    Files directly inside *root* are at depth 1.
    """
    extensions = set(extensions)
    if root.is_file():
        return [root] if is_cpp(root, extensions) else []
    found = []
    for dirpath, dirnames, filenames in os.walk(root):
        depth = len(Path(dirpath).relative_to(root).parts) + 1
        if depth >= max_depth:
            dirnames[:] = []
        if depth > max_depth:
            continue
        dirnames.sort()
        for f in sorted(filenames):
            p = Path(dirpath) / f
            if is_cpp(p, extensions):
                found.append(p)
    return found


def read_source(path: Path) -> str:
    """Read *path*, treating unreadable files as empty."""
    try:
        with io.open(path, 'r', encoding='utf-8', newline='') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Skipping %s: %s", path, e)
        return ''


def write_source(path: Path, summary: ReplaceSummary) -> bool:
    if summary.suggestion is None:
        return False
    with io.open(path, 'w', encoding='utf-8', newline='') as f:
        f.write(summary.suggestion)
    return True



def search_file(path: Path, mode: SearchMode) -> SearchSummary:
    return search(read_source(path), mode)


def rewrite_file(path: Path, mode: ReplaceMode, options: RewriteOptions) -> Optional[ReplaceSummary]:
    """Rewrite the contents of *path*; None when the file is empty or unreadable."""
    source = read_source(path)
    if not source:
        return None
    return rewrite(source, mode, options)


def _init_worker(level: int) -> None:
    # spawned workers start with an unconfigured root logger
    logging.basicConfig(level=level, format=LOG_FORMAT)


def _run_all(func, args: List[tuple], jobs: int) -> list:
    """Call *func* on every argument tuple, in worker processes when jobs > 1.

    Results come back in the order of *args*.
    """
    if jobs <= 1 or len(args) <= 1:
        return [func(*a) for a in args]
    level = logging.getLogger().getEffectiveLevel()
    with ProcessPoolExecutor(max_workers=jobs, initializer=_init_worker, initargs=(level,)) as pool:
        return list(pool.map(func, *zip(*args)))


def search_many(paths: Sequence[Path], mode: SearchMode, jobs: int = 1) -> List[SearchSummary]:
    return _run_all(search_file, [(p, mode) for p in paths], jobs)


def rewrite_many(paths: Sequence[Path], mode: ReplaceMode, options: RewriteOptions,
                 jobs: int = 1) -> List[Optional[ReplaceSummary]]:
    """Rewrite every file in *paths*; skipped (empty or unreadable) files give None."""
    return _run_all(rewrite_file, [(p, mode, options) for p in paths], jobs)
