from __future__ import annotations
import argparse
import json
import logging
import sys

from .config import trace_enabled
from .gematria import decode, encode, is_canonical_gimatria

def cmd_encode(args: argparse.Namespace) -> int:
    rows = [{"n": n, "numeral": encode(n, trace=args.trace)} for n in args.values]
    if args.json:
        print(json.dumps(rows, ensure_ascii=False, indent=2))
        return 0
    for r in rows:
        print(r["numeral"])
    return 0

def cmd_decode(args: argparse.Namespace) -> int:
    rows = [{"numeral": w, "value": decode(w, trace=args.trace)} for w in args.words]
    if args.json:
        print(json.dumps(rows, ensure_ascii=False, indent=2))
        return 0
    for r in rows:
        print(r["value"])
    return 0

def cmd_check(args: argparse.Namespace) -> int:
    rows = []
    for w in args.words:
        value = is_canonical_gimatria(w, trace=args.trace)
        rows.append({"word": w, "value": value, "canonical": value != 0})

    if args.json:
        print(json.dumps(rows, ensure_ascii=False, indent=2))
    else:
        for r in rows:
            verdict = r["value"] if r["canonical"] else "not canonical"
            print(f"{r['word']}  =>  {verdict}")
    return 0 if all(r["canonical"] for r in rows) else 1

def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn
    uvicorn.run(
        "hgimatria.api:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="debug" if args.trace else "info",
    )
    return 0

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="hgimatria", description="Hebrew numerals (gimatria): encode, decode, validate")
    p.add_argument("--trace", action="store_true", default=trace_enabled(),
                   help="Log intermediate encode/decode state to stderr (default from HGIMATRIA_TRACE)")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_enc = sub.add_parser("encode", help="Render integers as canonical numerals")
    p_enc.add_argument("values", type=int, nargs="+", help="Integers to encode")
    p_enc.add_argument("--json", action="store_true", help="Output JSON")
    p_enc.set_defaults(func=cmd_encode)

    p_dec = sub.add_parser("decode", help="Read numerals into integers")
    p_dec.add_argument("words", nargs="+", help="Numeral strings")
    p_dec.add_argument("--json", action="store_true", help="Output JSON")
    p_dec.set_defaults(func=cmd_decode)

    p_chk = sub.add_parser("check", help="Check whether words are canonical numerals")
    p_chk.add_argument("words", nargs="+", help="Candidate words")
    p_chk.add_argument("--json", action="store_true", help="Output JSON")
    p_chk.set_defaults(func=cmd_check)

    p_srv = sub.add_parser("serve", help="Run FastAPI server")
    p_srv.add_argument("--host", default="127.0.0.1")
    p_srv.add_argument("--port", type=int, default=8000)
    p_srv.add_argument("--reload", action="store_true")
    p_srv.set_defaults(func=cmd_serve)

    return p

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.trace:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(name)s: %(message)s")
    return args.func(args)

if __name__ == "__main__":
    raise SystemExit(main())
