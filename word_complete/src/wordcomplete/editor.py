"""
Sentence editor driven one key at a time.

The editor keeps the committed sentence and the word being typed. It performs
no I/O: each feed() returns an EditorEvent telling a terminal (or any other)
driver what to erase and what to draw. Two keys reach the prefix index:

    COMPLETE_KEY  replace the current word with its first completion
    SUGGEST_KEY   list up to max_suggestions completions; the next key picks
                  one by number ("1".."n") or cancels
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from . import config as CFG
from .normalize import normalize_word
from .trie import PrefixIndex

CHAR = "char"
SPACE = "space"
BACKSPACE = "backspace"
COMPLETE = "complete"
CHOOSE = "choose"
NO_SUGGESTIONS = "no_suggestions"
SELECT = "select"
CANCEL = "cancel"
FINISH = "finish"


@dataclass(frozen=True)
class EditorEvent:
    kind: str
    erase: int = 0            # characters of the current word to remove on screen
    text: str = ""            # characters to draw after erasing
    suggestions: List[str] = field(default_factory=list)
    found: bool = False


class InteractiveEditor:
    def __init__(self, index: PrefixIndex, *, max_suggestions: int = CFG.TOP_K,
                 complete_key: str = CFG.COMPLETE_KEY,
                 suggest_key: str = CFG.SUGGEST_KEY) -> None:
        if max_suggestions < 1 or max_suggestions > 9:
            raise ValueError("max_suggestions must be between 1 and 9 (single-key choice)")
        self.index = index
        self.max_suggestions = max_suggestions
        self.complete_key = complete_key
        self.suggest_key = suggest_key
        self.sentence = ""
        self.current_word = ""
        self.pending: Optional[List[str]] = None
        self.done = False

    @property
    def text(self) -> str:
        return self.sentence + self.current_word

    def feed(self, key: str) -> EditorEvent:
        if self.done:
            raise RuntimeError("editor already finished")
        if self.pending is not None:
            return self._choose(key)

        if key in CFG.ENTER_KEYS:
            self.done = True
            return EditorEvent(FINISH, text=self.text)
        if key == " ":
            self.sentence += self.current_word + " "
            self.current_word = ""
            return EditorEvent(SPACE, text=" ")
        if key in CFG.BACKSPACE_KEYS:
            if not self.current_word:
                return EditorEvent(BACKSPACE)
            self.current_word = self.current_word[:-1]
            return EditorEvent(BACKSPACE, erase=1)
        if key == self.complete_key:
            return self._complete()
        if key == self.suggest_key:
            return self._suggest()

        self.current_word += key
        return EditorEvent(CHAR, text=key)

    # ------------- internals -------------

    def _complete(self) -> EditorEvent:
        old = self.current_word
        hit = self.index.find_completion(normalize_word(old))
        if hit.found:
            self.current_word = hit.word
        return EditorEvent(COMPLETE, erase=len(old), text=self.current_word, found=hit.found)

    def _suggest(self) -> EditorEvent:
        words = self.index.all_with_prefix(normalize_word(self.current_word),
                                           limit=self.max_suggestions)
        if not words:
            return EditorEvent(NO_SUGGESTIONS)
        self.pending = words
        return EditorEvent(CHOOSE, suggestions=list(words), found=True)

    def _choose(self, key: str) -> EditorEvent:
        words, self.pending = self.pending or [], None
        if len(key) == 1 and key in "123456789" and int(key) <= len(words):
            old = self.current_word
            self.current_word = words[int(key) - 1]
            return EditorEvent(SELECT, erase=len(old), text=self.current_word,
                               suggestions=words, found=True)
        return EditorEvent(CANCEL, text=self.current_word, suggestions=words)
