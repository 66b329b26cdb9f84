from __future__ import annotations
import logging
import os
from typing import Iterable, Iterator, List, Optional

from . import config as CFG
from .errors import InvalidSymbolError
from .models import LoadReport
from .normalize import normalize_word
from .trie import PrefixIndex

log = logging.getLogger(__name__)

PROGRESS_EVERY_WORDS = 100_000


def iter_tokens(text: str) -> Iterator[str]:
    """Whitespace-separated tokens, in file order."""
    for line in text.splitlines():
        yield from line.split()


def _iter_txt_files(root: str) -> List[str]:
    """All *.txt under root, sorted for a stable load order."""
    out: List[str] = []
    suffix = CFG.GLOB_PATTERN.lstrip("*").lower()
    for dirpath, _, filenames in os.walk(root):
        for fn in filenames:
            if fn.lower().endswith(suffix):
                out.append(os.path.join(dirpath, fn))
    out.sort()
    return out


def load_words(index: PrefixIndex, words: Iterable[str], *, strict: bool = False,
               source: str = "<words>") -> LoadReport:
    """
    Normalize and insert each token.
    Rejected tokens (symbols outside the alphabet) are logged and skipped unless
    strict=True, in which case the InvalidSymbolError propagates.
    """
    report = LoadReport(sources=[source])
    for token in words:
        word = normalize_word(token)
        if not word:
            report.skipped += 1
            continue
        if word in index:
            report.duplicates += 1
            continue
        try:
            index.insert(word)
        except InvalidSymbolError as exc:
            if strict:
                raise
            log.warning("Skipping %r from %s: %s", token, source, exc)
            report.skipped += 1
            continue
        report.inserted += 1
        if CFG.VERBOSE and report.inserted % PROGRESS_EVERY_WORDS == 0:
            log.info("[loaded] words=%s", f"{report.inserted:,}")
    return report


def load_file(index: PrefixIndex, path: str, *, strict: bool = False) -> LoadReport:
    with open(path, "r", encoding=CFG.ENCODING, errors="ignore") as f:
        text = f.read()
    report = load_words(index, iter_tokens(text), strict=strict, source=path)
    log.info("Loaded %s words from %s (%d duplicates, %d skipped)",
             f"{report.inserted:,}", path, report.duplicates, report.skipped)
    return report


def load_paths(index: PrefixIndex, paths: Iterable[str], *, strict: bool = False) -> LoadReport:
    """
    Load every path: files directly, directories by scanning for *.txt.
    A path that does not exist raises FileNotFoundError.
    """
    total = LoadReport()
    for p in paths:
        if os.path.isdir(p):
            files = _iter_txt_files(p)
            if not files:
                log.warning("No %s files under %s", CFG.GLOB_PATTERN, p)
            for fp in files:
                try:
                    total.merge(load_file(index, fp, strict=strict))
                except OSError as exc:
                    log.warning("Cannot read %s: %s", fp, exc)
        elif os.path.isfile(p):
            total.merge(load_file(index, p, strict=strict))
        else:
            raise FileNotFoundError(p)
    return total


def find_dictionary(explicit: Optional[str] = None) -> Optional[str]:
    """First existing dictionary among explicit and the configured search paths."""
    candidates = ([explicit] if explicit else []) + list(CFG.DICTIONARY_SEARCH_PATHS)
    for path in candidates:
        if os.path.exists(path):
            return path
    return None
