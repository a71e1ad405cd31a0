from __future__ import annotations

from smart_quotes.states import CollapseStrategy

EM_DASH = "—"
EN_DASH = "–"
ELLIPSIS = "…"


def _bump(stats: dict[str, int], key: str, n: int = 1) -> None:
    if n:
        stats[key] = stats.get(key, 0) + n


def _collapse_scan(text: str, *, dashes: bool, ellipsis: bool) -> tuple[str, dict[str, int]]:
    stats: dict[str, int] = {}
    out: list[str] = []
    skip = 0
    n = len(text)

    for i, ch in enumerate(text):
        if skip:
            skip -= 1
            continue

        next1 = text[i + 1] if i + 1 < n else None
        next2 = text[i + 2] if i + 2 < n else None

        if dashes and ch == "-":
            if next1 == "-" and next2 == "-":
                out.append(EM_DASH)
                skip = 2
                _bump(stats, "em_dash")
            elif next1 == "-":
                out.append(EN_DASH)
                skip = 1
                _bump(stats, "en_dash")
            else:
                out.append(ch)
        elif ellipsis and ch == "." and next1 == "." and next2 == ".":
            out.append(ELLIPSIS)
            skip = 2
            _bump(stats, "ellipsis")
        else:
            out.append(ch)

    return "".join(out), stats


def _collapse_replace(text: str, *, dashes: bool, ellipsis: bool) -> tuple[str, dict[str, int]]:
    stats: dict[str, int] = {}
    rules: list[tuple[str, str, str]] = []
    if dashes:
        # Triple before double, or "--" would eat into "---".
        rules.append(("---", EM_DASH, "em_dash"))
        rules.append(("--", EN_DASH, "en_dash"))
    if ellipsis:
        rules.append(("...", ELLIPSIS, "ellipsis"))

    for pattern, replacement, key in rules:
        _bump(stats, key, text.count(pattern))
        text = text.replace(pattern, replacement)

    return text, stats


def collapse_punctuation(
    text: str,
    *,
    strategy: CollapseStrategy = CollapseStrategy.SCAN,
    dashes: bool = True,
    ellipsis: bool = True,
) -> tuple[str, dict[str, int]]:
    """Collapse hyphen and period runs into dashes and ellipses.

    `---` becomes an em dash, `--` an en dash and `...` an ellipsis, longest
    match first. Longer runs restart matching after the consumed characters,
    so `-----` becomes an em dash followed by an en dash.
    """

    if strategy == CollapseStrategy.REPLACE:
        return _collapse_replace(text, dashes=dashes, ellipsis=ellipsis)
    return _collapse_scan(text, dashes=dashes, ellipsis=ellipsis)
