from __future__ import annotations
import argparse
from dataclasses import asdict
from flask import Flask, request, jsonify, Response
from wordcomplete.engine import Engine
from wordcomplete.config import TOP_K

app = Flask(__name__)
_engine: Engine | None = None

MAX_K = 50

def _require_engine() -> Engine:
    if _engine is None or _engine.index is None:
        raise RuntimeError("Engine not initialized. Call build() first.")
    return _engine

# ---------- API ----------
@app.get("/api/complete")
def api_complete():
    q = request.args.get("q", "", type=str)
    hit = _require_engine().complete(q)
    return jsonify(asdict(hit))

@app.get("/api/suggest")
def api_suggest():
    q = request.args.get("q", "", type=str)
    k = request.args.get("k", TOP_K, type=int)
    k = max(1, min(MAX_K, k))
    sug = _require_engine().suggest(q, top_k=k)
    return jsonify(asdict(sug))

@app.get("/health")
def health():
    ok = _engine is not None and _engine.index is not None
    words = len(_engine.index) if ok else 0  # type: ignore[union-attr, arg-type]
    return jsonify({"ok": ok, "words": words}), (200 if ok else 503)

@app.errorhandler(RuntimeError)
def not_ready(exc: RuntimeError):
    return jsonify({"error": str(exc)}), 503

# ---------- UI ----------
@app.get("/")
def home():
    # A tiny page: CSS variables + minimal JS, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Word Complete • Flask UI</title>
<style>
:root{
  --bg:#0b0f14;
  --panel:#0f141b;
  --ink:#cfd8e3;
  --muted:#8a94a6;
  --accent:#6ee7ff;
  --border:#1c2530;
  --mark-bg:rgba(110,231,255,.2);
}
*{box-sizing:border-box}
body{
  margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial;
}
.container{ max-width:760px; margin:24px auto; padding:0 16px; }
.card{
  background:var(--panel); border:1px solid var(--border);
  border-radius:16px; padding:18px; box-shadow:0 10px 30px rgba(0,0,0,.25);
}
h1{ font-size:20px; margin:0 0 8px 0; letter-spacing:.3px; }
input{
  width:100%; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:16px;
}
input:focus{ border-color:var(--accent) }
.meta{ color:var(--muted); font-size:13px; margin-top:6px; }
.list{ margin-top:14px; border:1px solid var(--border); border-radius:12px; overflow:clip }
.item{ padding:10px 14px; border-top:1px solid var(--border); cursor:pointer }
.item:first-child{ border-top:none }
.item:hover{ background:#0d131a }
.mark{ background:var(--mark-bg) }
.empty{ padding:18px; text-align:center; color:var(--muted) }
kbd{ background:#111825; border:1px solid var(--border); padding:1px 6px; border-radius:6px }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Word Complete</h1>
      <input id="s" type="text" placeholder="Type a sentence…" autocomplete="off" autofocus />
      <div class="meta" id="stats">Press <kbd>Tab</kbd> to complete the current word; click a suggestion to use it.</div>
      <div class="list" id="out"><div class="empty">Start typing to see suggestions.</div></div>
    </div>
  </div>
<script>
const $ = (sel) => document.querySelector(sel);
const s = $("#s"), out = $("#out"), stats = $("#stats");
let t;
function split(v){ const i = v.lastIndexOf(" "); return [v.slice(0, i+1), v.slice(i+1)]; }
function replaceWord(w){ const [head] = split(s.value); s.value = head + w; s.focus(); refresh(); }
async function refresh(){
  const [, word] = split(s.value);
  if(!word){ out.innerHTML = '<div class="empty">Start typing to see suggestions.</div>'; return; }
  const resp = await fetch(`/api/suggest?q=${encodeURIComponent(word)}`);
  const data = await resp.json();
  stats.textContent = `${data.words.length} suggestions • ${data.elapsed_us} µs`;
  if(!data.words.length){ out.innerHTML = '<div class="empty">No suggestions found.</div>'; return; }
  out.innerHTML = data.words.map((w,i)=>
    `<div class="item" data-w="${w}">${i+1}. <span class="mark">${w.slice(0, data.prefix.length)}</span>${w.slice(data.prefix.length)}</div>`
  ).join("");
  out.querySelectorAll(".item").forEach(el => el.addEventListener("click", () => replaceWord(el.dataset.w)));
}
s.addEventListener("input", () => { clearTimeout(t); t = setTimeout(refresh, 120); });
s.addEventListener("keydown", async (ev) => {
  if(ev.key !== "Tab") return;
  ev.preventDefault();
  const [, word] = split(s.value);
  if(!word) return;
  const data = await (await fetch(`/api/complete?q=${encodeURIComponent(word)}`)).json();
  if(data.found) replaceWord(data.word);
});
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    ap.add_argument("--dict", dest="dicts", nargs="+", default=[])
    ap.add_argument("--strict", action="store_true")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine()
    _engine.build(args.dicts or None, strict=args.strict, verbose=args.verbose)

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
