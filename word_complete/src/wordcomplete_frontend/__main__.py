from __future__ import annotations
import argparse, json, os, sys, time
from dataclasses import asdict
from typing import Iterable, TextIO

from wordcomplete import editor as ed
from wordcomplete.config import COMPLETE_KEY, SUGGEST_KEY, TOP_K
from wordcomplete.engine import Engine
from . import initialize, complete, suggest
from .keys import iter_keys


def _supports_color(out: TextIO) -> bool:
    return out.isatty() and os.environ.get("NO_COLOR", "") == ""

CSI = "\033["
def _c(text: str, code: str, out: TextIO | None = None) -> str:
    if not _supports_color(out or sys.stdout): return text
    return f"{CSI}{code}m{text}{CSI}0m"

def _print_suggestions(words: list[str], out: TextIO | None = None) -> None:
    out = out or sys.stdout
    if not words:
        print(_c("(no matches)", "2;37", out), file=out); return
    for i, w in enumerate(words, start=1):
        print(f"{i}. {w}", file=out)


def run_query(prefix: str, k: int, as_json: bool, out: TextIO | None = None) -> None:
    out = out or sys.stdout
    hit = complete(prefix)
    sug = suggest(prefix, k)
    if as_json:
        print(json.dumps({"completion": asdict(hit), "suggestions": asdict(sug)},
                         ensure_ascii=False, indent=2), file=out)
        return
    status = hit.word if hit.found else _c("(no completion)", "2;37", out)
    print(f"complete: {status}", file=out)
    print(_c(f"suggestions ({sug.elapsed_us} us):", "1;37", out), file=out)
    _print_suggestions(sug.words, out)


def run_interactive(engine: Engine, keys: Iterable[str], k: int = TOP_K,
                    out: TextIO | None = None) -> str:
    """
    Drive an InteractiveEditor from single keys and echo it on a console.
    Returns the finished sentence (also returned when the key stream ends).
    """
    out = out or sys.stdout
    editor = engine.editor(max_suggestions=k)
    print(f"Start typing your sentence (Press '{COMPLETE_KEY}' to auto-complete the current word, "
          f"'{SUGGEST_KEY}' for suggestions, and 'Enter' to finish):", file=out)
    out.write("> "); out.flush()

    for key in keys:
        if key not in ("\r", "\n", "\b", "\x7f") and not key.isprintable():
            continue
        t0 = time.perf_counter_ns()
        ev = editor.feed(key)
        elapsed_us = (time.perf_counter_ns() - t0) // 1000

        if ev.erase:
            out.write("\b \b" * ev.erase)
        if ev.kind == ed.FINISH:
            out.write("\n"); print(f"Final sentence: {ev.text}", file=out)
            return ev.text
        if ev.kind == ed.CHOOSE:
            print(f"\nTime taken to find suggestions: {elapsed_us} microseconds.", file=out)
            print("Suggestions:", file=out)
            _print_suggestions(ev.suggestions, out)
            out.write(f"Choose a suggestion (1-{len(ev.suggestions)}) or press any other key to cancel: ")
        elif ev.kind == ed.NO_SUGGESTIONS:
            print("\nNo suggestions found.", file=out)
            out.write(f"> {editor.text}")
        elif ev.kind in (ed.SELECT, ed.CANCEL):
            out.write(f"\n> {editor.text}")
        else:
            out.write(ev.text)
        out.flush()

    out.write("\n")
    return editor.text


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Word completion CLI (prefix tree backed)")
    p.add_argument("--dict", dest="dicts", nargs="+", default=[],
                   help="Dictionary files or folders of .txt (default: search path)")
    p.add_argument("--words", nargs="+", default=None, help="Inline words to index")
    p.add_argument("-k", type=int, default=TOP_K, help="Max suggestions")
    mode = p.add_mutually_exclusive_group()
    mode.add_argument("--q", default=None, help="Single prefix to run once")
    mode.add_argument("--repl", action="store_true", help="Line-based prefix loop")
    mode.add_argument("--interactive", action="store_true",
                      help="Key-by-key sentence editor (default when no other mode)")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--strict", action="store_true", help="Abort on the first invalid token")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    if args.k < 1:
        p.error("-k must be positive")
    interactive = args.q is None and not args.repl
    if interactive and args.k > 9:
        p.error("--interactive picks suggestions with one key; use -k 9 or less")

    try:
        eng = initialize(args.dicts, words=args.words, strict=args.strict, verbose=args.verbose)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    try:
        if args.q is not None:
            run_query(args.q, args.k, args.json)
        elif args.repl:
            print("Type a prefix (empty line to exit).")
            while True:
                try:
                    q = input("> ").strip()
                except (EOFError, KeyboardInterrupt):
                    print(); break
                if not q:
                    print("Goodbye!"); break
                run_query(q, args.k, args.json)
        else:
            try:
                run_interactive(eng, iter_keys(), k=args.k)
            except KeyboardInterrupt:
                print()
        return 0
    finally:
        eng.shutdown()

if __name__ == "__main__":
    raise SystemExit(main())
