# wordcomplete/engine.py
from __future__ import annotations

import logging
import time
from typing import Iterable, Optional

from . import config as CFG
from .editor import InteractiveEditor
from .loader import find_dictionary, load_paths, load_words
from .models import Completion, LoadReport, Suggestions
from .normalize import normalize_word
from .trie import PrefixIndex

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - dictionary loading (loader.load_paths / loader.load_words),
      - the prefix index (PrefixIndex),
      - query normalization and timing.

    Public API (used by CLI/Flask/desktop):
      * build(sources, words=...): load dictionary files and/or inline words
      * complete(prefix):          best single completion (Completion)
      * suggest(prefix, top_k):    lexicographic candidates (Suggestions)
      * editor():                  InteractiveEditor bound to the index
      * shutdown():                drop the index
    """

    # ------------- lifecycle -------------

    def __init__(self) -> None:
        self.index: Optional[PrefixIndex] = None
        self.report: Optional[LoadReport] = None

    # /* ~~~ Build the index from dictionary files and/or an inline word list ~~~ */
    def build(
        self,
        sources: Optional[Iterable[str]] = None,
        *,
        words: Optional[Iterable[str]] = None,
        strict: bool = False,
        verbose: bool = False,
    ) -> LoadReport:
        if verbose:
            logging.basicConfig(level=logging.INFO)

        paths = list(sources) if sources is not None else []
        if not paths and words is None:
            found = find_dictionary()
            if found is None:
                raise ValueError(
                    "build(): no dictionary given and none found in "
                    f"{CFG.DICTIONARY_SEARCH_PATHS}"
                )
            paths = [found]

        idx = PrefixIndex()
        report = LoadReport()
        if paths:
            log.info("Loading dictionary from %s", paths)
            report.merge(load_paths(idx, paths, strict=strict))
        if words is not None:
            report.merge(load_words(idx, words, strict=strict))

        # Commit engine state
        self.index = idx
        self.report = report
        log.info("Engine build() complete: words=%d skipped=%d", len(idx), report.skipped)
        return report

    # ------------- query -------------

    # /* ~~~ Best single completion of the word being typed ~~~ */
    def complete(self, prefix: str) -> Completion:
        idx = self._require_index()
        return idx.find_completion(normalize_word(prefix))

    # /* ~~~ Up to top_k completions in lexicographic order, timed ~~~ */
    def suggest(self, prefix: str, *, top_k: int = CFG.TOP_K) -> Suggestions:
        idx = self._require_index()
        q = normalize_word(prefix)
        t0 = time.perf_counter_ns()
        words = idx.all_with_prefix(q, limit=top_k)
        elapsed_us = (time.perf_counter_ns() - t0) // 1000
        log.debug("suggest(%r): %d words in %d us", q, len(words), elapsed_us)
        return Suggestions(prefix=q, words=words, elapsed_us=elapsed_us)

    def editor(self, *, max_suggestions: int = CFG.TOP_K) -> InteractiveEditor:
        return InteractiveEditor(self._require_index(), max_suggestions=max_suggestions)

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self.index = None
        self.report = None
        log.info("Engine shutdown complete")

    # ------------- internals -------------

    def _require_index(self) -> PrefixIndex:
        if self.index is None:
            raise RuntimeError("Engine not initialized. Call build() first.")
        return self.index
