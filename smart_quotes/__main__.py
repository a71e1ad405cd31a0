from __future__ import annotations

from smart_quotes.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
