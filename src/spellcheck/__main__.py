from __future__ import annotations
import argparse, logging, sys
from . import config as CFG
from .engine import Engine
from .channel import StreamChannel
from .errors import FatalStartupError

log = logging.getLogger("spellcheck")


def _parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Interactive spell-check server")
    p.add_argument("--dict", default=CFG.DICT_FILE, help="Word list (one word per line, append target)")
    p.add_argument("--host", default=CFG.HOST)
    p.add_argument("--port", type=int, default=CFG.PORT_NUMBER)
    p.add_argument("-k", type=int, default=CFG.TOP_K, help="Candidates shown per word")
    p.add_argument("--max-words", type=int, default=CFG.DICT_SIZE, help="Dictionary capacity")
    p.add_argument("--timeout", type=float, default=CFG.READ_TIMEOUT,
                   help="Seconds to wait for client input (default: wait forever)")
    p.add_argument("--repl", action="store_true", help="Run sessions on stdin/stdout instead of serving")
    p.add_argument("--verbose", action="store_true", default=CFG.VERBOSE,
                   help="Debug logging (also SPELLCHECK_VERBOSE=1)")
    return p


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    eng = Engine()
    try:
        try:
            eng.build(args.dict, top_k=args.k, max_size=args.max_words, verbose=args.verbose)
        except FatalStartupError as exc:
            log.error("%s", exc)
            return 1

        if args.repl:
            channel = StreamChannel(sys.stdin, sys.stdout)
            while True:
                s = eng.session(channel)
                if not s.raw:   # EOF or an empty line ends the console
                    break
            return 0

        try:
            eng.serve(args.host, args.port, read_timeout=args.timeout)
        except KeyboardInterrupt:
            print()
        return 0
    finally:
        eng.shutdown()


if __name__ == "__main__":
    raise SystemExit(main())
