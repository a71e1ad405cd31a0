from __future__ import annotations

from enum import StrEnum


class QuoteKind(StrEnum):
    SINGLE = "single"
    DOUBLE = "double"


class QuoteDirection(StrEnum):
    OPEN = "open"
    CLOSED = "closed"


class CurlyQuotePolicy(StrEnum):
    KEEP = "keep"
    DROP = "drop"


class CollapseStrategy(StrEnum):
    SCAN = "scan"
    REPLACE = "replace"
