from __future__ import annotations

import logging
from dataclasses import dataclass

from smart_quotes.typesetting.config import TypesetConfig
from smart_quotes.typesetting.explicit import convert_explicit
from smart_quotes.typesetting.implicit import convert_implicit
from smart_quotes.typesetting.punctuation import collapse_punctuation

logger = logging.getLogger(__name__)


@dataclass
class TypesetResult:
    text: str
    stats: dict[str, int]


def _merge_stats(stats: dict[str, int], more: dict[str, int]) -> None:
    for k, v in more.items():
        stats[k] = stats.get(k, 0) + v


def typeset_text(text: str, config: TypesetConfig | None = None) -> TypesetResult:
    config = config or TypesetConfig()
    stats: dict[str, int] = {}

    if config.explicit:
        text, n = convert_explicit(text)
        if n:
            stats["explicit_quotes"] = n
    else:
        text, quote_stats = convert_implicit(text, escape=config.escape, curly_policy=config.curly_policy)
        _merge_stats(stats, quote_stats)

    text, punct_stats = collapse_punctuation(
        text,
        strategy=config.collapse_strategy,
        dashes=config.collapse_dashes,
        ellipsis=config.collapse_ellipsis,
    )
    _merge_stats(stats, punct_stats)

    logger.debug("typeset %s chars (explicit=%s): %s", len(text), config.explicit, stats)
    return TypesetResult(text=text, stats=stats)


def typeset(text: str, config: TypesetConfig | None = None) -> str:
    return typeset_text(text, config).text
