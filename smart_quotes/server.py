"""HTTP server for the typesetting API.

Run:
  python -m smart_quotes.server
Then:
  curl -X POST http://127.0.0.1:18080/api/v1/typeset -H 'content-type: application/json' \\
       -d '{"text": "She said \\"hi\\"..."}'
"""

from __future__ import annotations

import argparse
import sys

import uvicorn


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="smart_quotes.server", add_help=True)
    parser.add_argument("--host", default="127.0.0.1", help="Bind host (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=18080, help="Bind port (default: 18080)")
    parser.add_argument("--log-level", default="info", help="uvicorn log level (default: info)")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development)")

    args = parser.parse_args(argv if argv is not None else sys.argv[1:])

    uvicorn.run(
        "smart_quotes.api:app",
        host=args.host,
        port=args.port,
        log_level=args.log_level,
        reload=bool(args.reload),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
