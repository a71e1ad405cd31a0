from __future__ import annotations

from dataclasses import dataclass

from smart_quotes.states import QuoteDirection, QuoteKind


@dataclass(frozen=True)
class Quote:
    # None means a straight (undirected) quote.
    direction: QuoteDirection | None
    kind: QuoteKind

    @property
    def is_straight(self) -> bool:
        return self.direction is None

    def with_direction(self, direction: QuoteDirection) -> Quote:
        return Quote(direction=direction, kind=self.kind)


_CHAR_TO_QUOTE: dict[str, Quote] = {
    "'": Quote(None, QuoteKind.SINGLE),
    '"': Quote(None, QuoteKind.DOUBLE),
    "‘": Quote(QuoteDirection.OPEN, QuoteKind.SINGLE),
    "’": Quote(QuoteDirection.CLOSED, QuoteKind.SINGLE),
    "“": Quote(QuoteDirection.OPEN, QuoteKind.DOUBLE),
    "”": Quote(QuoteDirection.CLOSED, QuoteKind.DOUBLE),
}

_QUOTE_TO_CHAR: dict[Quote, str] = {q: ch for ch, q in _CHAR_TO_QUOTE.items()}

QUOTE_CHARS = frozenset(_CHAR_TO_QUOTE)

# Characters after which a straight quote opens a quotation.
OPENING_CONTEXT = frozenset(" \t\n([{⟨")


def classify(ch: str) -> Quote | None:
    """Return the quote a character stands for, or None for ordinary text."""

    return _CHAR_TO_QUOTE.get(ch)


def render(quote: Quote) -> str:
    return _QUOTE_TO_CHAR[quote]


def resolve_direction(previous: str | None) -> QuoteDirection:
    """Decide whether a straight quote opens or closes, from the character before it.

    - Start of text: open.
    - After whitespace or an opening bracket: open.
    - Anything else: closed.

    Single and double quotes share the rule.
    """

    if previous is None or previous in OPENING_CONTEXT:
        return QuoteDirection.OPEN
    return QuoteDirection.CLOSED
