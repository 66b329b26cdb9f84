import os
import string

# Symbols the prefix tree accepts; traversal order follows this string.
ALPHABET: str = string.ascii_lowercase

TOP_K: int = 5
NORMALIZE_CASE: bool = True
FOLD_ACCENTS: bool = True   # "café" -> "cafe" before insertion/lookup

ENCODING: str = "utf-8"
GLOB_PATTERN: str = "*.txt"

# /* ~~~ interactive editor key bindings ~~~ */
COMPLETE_KEY: str = "/"
SUGGEST_KEY: str = "\\"
ENTER_KEYS: tuple[str, ...] = ("\r", "\n")
BACKSPACE_KEYS: tuple[str, ...] = ("\b", "\x7f")

# /* ~~~ dictionaries tried in order when no --dict is given ~~~ */
DICTIONARY_SEARCH_PATHS: list[str] = [
    "words_alpha.txt",
    "words.txt",
    "dictionary.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "..", "words_alpha.txt"),
    "/usr/share/dict/words",
]

VERBOSE: bool = os.environ.get("WORDCOMPLETE_VERBOSE") == "1"
