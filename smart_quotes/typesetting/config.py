from __future__ import annotations

from dataclasses import dataclass

from smart_quotes.states import CollapseStrategy, CurlyQuotePolicy


@dataclass(frozen=True)
class TypesetConfig:
    # Quote conversion: LaTeX-style markers instead of context inference.
    explicit: bool = False

    # Implicit mode only.
    escape: bool = False
    curly_policy: CurlyQuotePolicy = CurlyQuotePolicy.KEEP

    # Punctuation runs
    collapse_strategy: CollapseStrategy = CollapseStrategy.SCAN
    collapse_dashes: bool = True
    collapse_ellipsis: bool = True
