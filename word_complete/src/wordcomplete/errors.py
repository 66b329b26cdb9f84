from __future__ import annotations


class InvalidSymbolError(ValueError):
    """A word holds a character outside the index alphabet; nothing was inserted."""

    def __init__(self, word: str, symbol: str, position: int) -> None:
        self.word = word
        self.symbol = symbol
        self.position = position
        super().__init__(
            f"invalid symbol {symbol!r} at position {position} in {word!r}"
        )
