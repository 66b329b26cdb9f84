# app.py
# CustomTkinter GUI for the word completion engine (dark theme).
# - Load a dictionary file OR a folder of .txt word lists.
# - Background loading thread (keeps UI responsive).
# - Tab completes the word being typed; suggestion buttons replace it.

from __future__ import annotations
import threading
from typing import List, Optional

import tkinter.filedialog as fd
import tkinter.messagebox as mb
import customtkinter as ctk

from wordcomplete.config import TOP_K
from wordcomplete.engine import Engine


# -------------------- small helpers --------------------

def shorten_path(p: str, max_chars: int = 60) -> str:
    """Shorten long paths neatly for labels."""
    if len(p) <= max_chars:
        return p
    keep = max_chars // 2 - 3
    return p[:keep] + "..." + p[-keep:]


def split_current_word(text: str) -> tuple[str, str]:
    """Split the entry text into (committed sentence, word being typed)."""
    cut = text.rfind(" ") + 1
    return text[:cut], text[cut:]


# -------------------- main app --------------------

class WordCompleteApp(ctk.CTk):
    """Dark-themed GUI that loads a dictionary and completes words as you type."""

    def __init__(self) -> None:
        super().__init__()

        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        self.title("Word Complete")
        self.geometry("820x560")
        self.minsize(700, 480)

        # State
        self._engine = Engine()
        self._loaded: bool = False
        self._loading_thread: Optional[threading.Thread] = None
        self._search_after_id: Optional[str] = None

        self.font_title = ctk.CTkFont(size=18, weight="bold")
        self.font_label = ctk.CTkFont(size=13)
        self.font_mono = ctk.CTkFont(family="Cascadia Mono, Menlo, Consolas, Courier New", size=13)

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(3, weight=1)  # suggestions
        self.grid_rowconfigure(4, weight=1)  # log

        self._build_header()
        self._build_source_bar()
        self._build_editor()
        self._build_suggestions()
        self._build_log()

        self._set_status("Ready")
        self.protocol("WM_DELETE_WINDOW", self._on_close)

    # --------- UI sections ---------

    def _build_header(self) -> None:
        header = ctk.CTkFrame(self, corner_radius=10)
        header.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 6))
        ctk.CTkLabel(header, text="Word Complete", font=self.font_title).grid(
            row=0, column=0, sticky="w", padx=12, pady=10
        )

    def _build_source_bar(self) -> None:
        bar = ctk.CTkFrame(self, corner_radius=10)
        bar.grid(row=1, column=0, sticky="ew", padx=12, pady=6)
        bar.grid_columnconfigure(2, weight=1)

        ctk.CTkButton(bar, text="Choose Dictionary", command=self._choose_file).grid(
            row=0, column=0, padx=(12, 6), pady=10
        )
        ctk.CTkButton(bar, text="Choose Folder", command=self._choose_folder).grid(
            row=0, column=1, padx=(0, 6), pady=10, sticky="w"
        )

        self.lbl_source = ctk.CTkLabel(bar, text="No dictionary selected", anchor="w", font=self.font_label)
        self.lbl_source.grid(row=0, column=2, sticky="ew", padx=6, pady=10)

        self.progress = ctk.CTkProgressBar(bar, mode="indeterminate", determinate_speed=1.2)
        self.progress.grid(row=0, column=3, sticky="e", padx=(0, 6), pady=10)

        self.lbl_status = ctk.CTkLabel(bar, text="Status: —", anchor="e")
        self.lbl_status.grid(row=0, column=4, sticky="e", padx=12, pady=10)

    def _build_editor(self) -> None:
        box = ctk.CTkFrame(self, corner_radius=10)
        box.grid(row=2, column=0, sticky="ew", padx=12, pady=6)
        box.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(box, text="Sentence:", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=10
        )
        self.entry = ctk.CTkEntry(box, placeholder_text="Type; Tab completes the current word…",
                                  font=self.font_mono)
        self.entry.grid(row=0, column=1, sticky="ew", padx=(6, 12), pady=10)
        self.entry.bind("<KeyRelease>", self._on_text_changed)
        self.entry.bind("<Tab>", self._on_tab)

    def _build_suggestions(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=3, column=0, sticky="nsew", padx=12, pady=6)
        frame.grid_columnconfigure(0, weight=1)

        self.lbl_suggest = ctk.CTkLabel(frame, text="Suggestions", font=self.font_label)
        self.lbl_suggest.grid(row=0, column=0, sticky="w", padx=12, pady=(10, 2))

        self.suggestion_buttons: List[ctk.CTkButton] = []
        for i in range(TOP_K):
            btn = ctk.CTkButton(frame, text="", anchor="w", font=self.font_mono,
                                fg_color="transparent", state="disabled")
            btn.grid(row=i + 1, column=0, sticky="ew", padx=12, pady=2)
            self.suggestion_buttons.append(btn)

    def _build_log(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=4, column=0, sticky="nsew", padx=12, pady=(6, 12))
        frame.grid_columnconfigure(0, weight=1)
        frame.grid_rowconfigure(1, weight=1)

        ctk.CTkLabel(frame, text="Event log", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=(10, 2)
        )
        self.txt_log = ctk.CTkTextbox(frame, height=90, wrap="word", font=ctk.CTkFont(size=12))
        self.txt_log.grid(row=1, column=0, sticky="nsew", padx=12, pady=(0, 12))
        self._log("GUI ready. Choose a dictionary file or folder to begin.")

    # --------- source selection ---------

    def _choose_file(self) -> None:
        path = fd.askopenfilename(
            title="Choose dictionary",
            filetypes=[("Word lists", "*.txt"), ("All files", "*.*")]
        )
        if path:
            self._start_loading(path)

    def _choose_folder(self) -> None:
        path = fd.askdirectory(title="Choose folder of word lists")
        if path:
            self._start_loading(path)

    # --------- loading pipeline (threaded) ---------

    def _start_loading(self, source: str) -> None:
        if self._loading_thread and self._loading_thread.is_alive():
            mb.showinfo("Loading", "A dictionary is already loading. Please wait.")
            return

        self.lbl_source.configure(text=shorten_path(source))
        self._set_status("Loading…")
        self.progress.start()
        self._loaded = False

        self._loading_thread = threading.Thread(
            target=self._load_worker, args=(source,), daemon=True
        )
        self._loading_thread.start()

    def _load_worker(self, source: str) -> None:
        try:
            report = self._engine.build([source])
        except (OSError, ValueError) as exc:
            self.after(0, lambda e=exc: self._on_load_error(e))
            return
        self.after(0, lambda: self._on_load_ok(report.inserted, report.skipped))

    def _on_load_ok(self, n_words: int, n_skipped: int) -> None:
        self.progress.stop()
        self._loaded = True
        self._set_status(f"Loaded {n_words:,} words.")
        self._log(f"Dictionary ready ({n_words} words, {n_skipped} tokens skipped).")
        self.entry.focus_set()

    def _on_load_error(self, exc: Exception) -> None:
        self.progress.stop()
        self._set_status("Error while loading dictionary.")
        self._log(f"ERROR: {exc!r}")
        mb.showerror("Load error", "Failed to load dictionary.\nSee event log for details.")

    # --------- completion ---------

    def _on_text_changed(self, _ev=None) -> None:
        if self._search_after_id is not None:
            self.after_cancel(self._search_after_id)
        self._search_after_id = self.after(120, self._refresh_suggestions)

    def _refresh_suggestions(self) -> None:
        self._search_after_id = None
        _, word = split_current_word(self.entry.get())
        words: List[str] = []
        if word and self._loaded:
            sug = self._engine.suggest(word, top_k=TOP_K)
            words = sug.words
            self.lbl_suggest.configure(text=f"Suggestions ({sug.elapsed_us} µs)")
        for i, btn in enumerate(self.suggestion_buttons):
            if i < len(words):
                w = words[i]
                btn.configure(text=f"{i + 1}. {w}", state="normal",
                              command=lambda w=w: self._replace_current_word(w))
            else:
                btn.configure(text="", state="disabled", command=None)

    def _on_tab(self, _ev=None) -> str:
        _, word = split_current_word(self.entry.get())
        if not self._loaded or not word:
            return "break"
        hit = self._engine.complete(word)
        if hit.found:
            self._replace_current_word(hit.word)
        else:
            self._log(f"No completion for {word!r}.")
        return "break"  # keep focus in the entry

    def _replace_current_word(self, word: str) -> None:
        head, _ = split_current_word(self.entry.get())
        self.entry.delete(0, "end")
        self.entry.insert(0, head + word)
        self.entry.focus_set()
        self._refresh_suggestions()

    # --------- misc UI helpers ---------

    def _set_status(self, text: str) -> None:
        self.lbl_status.configure(text=f"Status: {text}")

    def _log(self, msg: str) -> None:
        self.txt_log.insert("end", msg + "\n")
        self.txt_log.see("end")

    def _on_close(self) -> None:
        self._engine.shutdown()
        self.destroy()


if __name__ == "__main__":
    app = WordCompleteApp()
    app.mainloop()
