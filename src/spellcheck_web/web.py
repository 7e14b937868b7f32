from __future__ import annotations
import argparse
import logging
from flask import Flask, request, jsonify, Response
from spellcheck import Engine
from spellcheck import config as CFG
from spellcheck.errors import (
    DictionaryFullError,
    InputValidationError,
    PersistenceError,
)

app = Flask(__name__)
_engine: Engine | None = None
log = logging.getLogger(__name__)

# ---------- API ----------
@app.get("/api/check")
def api_check():
    q = request.args.get("q", "", type=str)
    try:
        result = _engine.check(q)  # type: ignore
    except InputValidationError as exc:
        return jsonify({"error": exc.wire_message}), 400
    return jsonify(result)


@app.post("/api/words")
def api_add_word():
    data = request.get_json(silent=True) or {}
    word = str(data.get("word", ""))
    try:
        added = _engine.add_word(word)  # type: ignore
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400
    except DictionaryFullError:
        return jsonify({"error": "dictionary is full"}), 507
    except PersistenceError:
        # details are in the server log
        return jsonify({"error": "could not save word"}), 500
    return jsonify({"word": word.strip().lower(), "added": added})


@app.get("/health")
def health():
    store = _engine.store if _engine else None
    return jsonify({"ok": store is not None, "words": store.count() if store else 0})

# ---------- UI ----------
@app.get("/")
def home():
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Spell Check • Flask UI</title>
<style>
:root{ --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6; --accent:#6ee7ff; --border:#1c2530; --ok:#45d483; --danger:#ff5d5d; }
*{box-sizing:border-box}
body{ margin:0; background:var(--bg); color:var(--ink); font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Arial; }
.container{ max-width:860px; margin:24px auto; padding:0 16px; }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
input{ width:100%; padding:12px 14px; border-radius:12px; border:1px solid var(--border); background:#0b1117; color:var(--ink); font-size:16px; }
.row{ padding:8px 0; border-bottom:1px solid var(--border); }
.ok{ color:var(--ok) } .bad{ color:var(--danger) } .muted{ color:var(--muted) }
button{ margin-left:8px; padding:4px 10px; border-radius:8px; border:1px solid var(--border); background:#0b1117; color:var(--accent); cursor:pointer; }
</style>
</head>
<body>
<div class="container"><div class="card">
  <h1>Spell check</h1>
  <input id="q" placeholder="Type a line of words…" maxlength="__LIMIT__" autofocus />
  <div id="out"></div>
  <p class="muted" id="final"></p>
</div></div>
<script>
const q = document.getElementById('q'), out = document.getElementById('out'), fin = document.getElementById('final');
let t = null;
async function run(){
  if(!q.value.trim()){ out.innerHTML=''; fin.textContent=''; return; }
  const r = await fetch('/api/check?q=' + encodeURIComponent(q.value));
  const d = await r.json();
  if(!r.ok){ out.innerHTML = '<p class="bad"></p>'; out.firstChild.textContent = d.error; fin.textContent=''; return; }
  out.innerHTML = '';
  for(const tok of d.tokens){
    const div = document.createElement('div'); div.className = 'row';
    const m = tok.matches.map(x => x.word + ' (' + x.distance + ')').join(', ');
    div.innerHTML = '<b></b> <span></span><div class="muted"></div>';
    div.children[0].textContent = String(tok.index).padStart(2,'0') + ': ' + tok.token;
    div.children[1].textContent = tok.exact ? 'Correct word!' : 'not in dictionary';
    div.children[1].className = tok.exact ? 'ok' : 'bad';
    div.children[2].textContent = 'MATCHES: ' + m;
    if(!tok.exact){
      const b = document.createElement('button'); b.textContent = 'add';
      b.onclick = async () => { await fetch('/api/words', {method:'POST', headers:{'Content-Type':'application/json'}, body: JSON.stringify({word: tok.token})}); run(); };
      div.children[1].after(b);
    }
    out.appendChild(div);
  }
  fin.textContent = 'OUTPUT: ' + d.output;
}
q.addEventListener('input', () => { clearTimeout(t); t = setTimeout(run, 150); });
</script>
</body>
</html>
""".replace("__LIMIT__", str(CFG.INPUT_CHARACTER_LIMIT))
    return Response(html, mimetype="text/html")

# ---------- CLI ----------
def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    ap.add_argument("--dict", default=CFG.DICT_FILE)
    ap.add_argument("--db", dest="db", default=None)  # DSN: "file:///path" or "memory://"
    ap.add_argument("-k", type=int, default=CFG.TOP_K)
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine()
    _engine.build(args.dict, db_dsn=args.db, top_k=args.k, verbose=args.verbose)

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
