"""Module-level API for the word completion engine (one shared Engine)."""
from __future__ import annotations
import time
from wordcomplete.config import TOP_K
from wordcomplete.engine import Engine
from wordcomplete.models import Completion, Suggestions

_engine: Engine | None = None


def initialize(paths: list[str] | None = None,
               words: list[str] | None = None,
               strict: bool = False,
               verbose: bool = False) -> Engine:
    """
    Build the shared engine from dictionary paths and/or inline words.
    With neither, the first dictionary on the configured search path is used.
    """
    global _engine
    t0 = time.perf_counter()
    eng = Engine()
    report = eng.build(paths or None, words=words, strict=strict, verbose=verbose)
    _engine = eng
    if verbose:
        print(f"[ready] {len(eng.index or ()):,} words "
              f"({report.skipped} skipped) in {time.perf_counter() - t0:.2f}s")
    return eng


def _require() -> Engine:
    if _engine is None:
        raise RuntimeError("Engine not initialized. Call initialize(...) first.")
    return _engine


def complete(prefix: str) -> Completion:
    """Best single completion for prefix."""
    return _require().complete(prefix)


def suggest(prefix: str, k: int = TOP_K) -> Suggestions:
    """Up to k completions for prefix, alphabetical."""
    return _require().suggest(prefix, top_k=k)
