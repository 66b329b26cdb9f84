"""
Word Completion Engine

This package loads a word list into a prefix tree and completes the word a user
is typing, either with the single first match or with a short, alphabetically
ordered list of candidates to choose from.

The package is designed with a clean separation of concerns:
- Dictionary loading and token normalization
- The prefix tree and its two queries
- A key-by-key sentence editor that calls those queries
- Configuration management

Main Classes:
    PrefixIndex: insert(word), all_with_prefix(prefix), first_completion(prefix)
    Engine: build(sources), complete(prefix), suggest(prefix, top_k)

Example Usage:
    from wordcomplete import Engine

    eng = Engine()
    eng.build(["words_alpha.txt"])

    print(eng.complete("ca").word)        # "car"
    print(eng.suggest("ca").words)        # ["car", "cart", "cat", ...]
"""

# wordcomplete/__init__.py
from .engine import Engine  # re-export
from .errors import InvalidSymbolError
from .trie import PrefixIndex

__version__ = "1.0.0"
__all__ = ["Engine", "InvalidSymbolError", "PrefixIndex"]
