from __future__ import annotations

# LaTeX quoting convention. Order matters: doubled markers go before the
# single characters they are made of.
_EXPLICIT_SUBSTITUTIONS: tuple[tuple[str, str], ...] = (
    ('"', "”"),
    ("``", "“"),
    ("''", "”"),
    ("`", "‘"),
    ("'", "’"),
)


def convert_explicit(text: str) -> tuple[str, int]:
    """Map backtick/apostrophe quote markers to curly quotes, ignoring context."""

    count = 0
    for marker, replacement in _EXPLICIT_SUBSTITUTIONS:
        n = text.count(marker)
        if n:
            text = text.replace(marker, replacement)
            count += n
    return text, count
