from __future__ import annotations

from smart_quotes.states import CurlyQuotePolicy
from smart_quotes.typesetting.quotes import classify, render, resolve_direction

ESCAPE_CHAR = "\\"


def convert_implicit(
    text: str,
    *,
    escape: bool = False,
    curly_policy: CurlyQuotePolicy = CurlyQuotePolicy.KEEP,
) -> tuple[str, dict[str, int]]:
    """Turn straight quotes into curly quotes, inferring direction from context.

    - Direction comes from the previous raw input character, not the last
      character written to the output.
    - With `escape`, a backslash directly before a straight quote is removed
      and the quote is kept straight.
    - Already-curly quotes are kept or dropped according to `curly_policy`.
    """

    stats: dict[str, int] = {}
    out: list[str] = []
    prev: str | None = None

    for ch in text:
        quote = classify(ch)
        if quote is None:
            out.append(ch)
        elif not quote.is_straight:
            if curly_policy == CurlyQuotePolicy.DROP:
                stats["curly_quotes_dropped"] = stats.get("curly_quotes_dropped", 0) + 1
            else:
                out.append(ch)
        elif escape and prev == ESCAPE_CHAR and out and out[-1] == ESCAPE_CHAR:
            out.pop()
            out.append(ch)
            stats["quotes_escaped"] = stats.get("quotes_escaped", 0) + 1
        else:
            out.append(render(quote.with_direction(resolve_direction(prev))))
            stats["quotes_converted"] = stats.get("quotes_converted", 0) + 1
        prev = ch

    return "".join(out), stats
