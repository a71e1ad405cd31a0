from __future__ import annotations

import pytest

from smart_quotes.states import CollapseStrategy, CurlyQuotePolicy
from smart_quotes.typesetting.config import TypesetConfig
from smart_quotes.typesetting.fixer import typeset, typeset_text

SAMPLE = (
    'Lorem ipsum "dolor sit" amet---consectetur adipisicing elit, sed 201--203 do eiusmod\n'
    "tempor incididunt...ut labore et's dolore magna aliqua. Ut enim ad minim veniam,\n"
    "quis nostrud exercitation ullamco 'laboris nisi' ut \"aliquip 'ex' ea\" commodo\n"
    "consequat.\n"
)

SAMPLE_EXPECTED = (
    "Lorem ipsum “dolor sit” amet—consectetur adipisicing elit, sed 201–203 do eiusmod\n"
    "tempor incididunt…ut labore et’s dolore magna aliqua. Ut enim ad minim veniam,\n"
    "quis nostrud exercitation ullamco ‘laboris nisi’ ut “aliquip ‘ex’ ea” commodo\n"
    "consequat.\n"
)


def test_typeset_text_implicit_pipeline_and_stats() -> None:
    out = typeset_text('She said "wait...this---that--other"')
    assert out.text == "She said “wait…this—that–other”"
    assert out.stats == {"quotes_converted": 2, "ellipsis": 1, "em_dash": 1, "en_dash": 1}


@pytest.mark.parametrize("strategy", list(CollapseStrategy))
def test_typeset_sample_paragraph(strategy: CollapseStrategy) -> None:
    assert typeset(SAMPLE, TypesetConfig(collapse_strategy=strategy)) == SAMPLE_EXPECTED


def test_typeset_text_explicit_mode() -> None:
    out = typeset_text("He said ``hello'' -- to `her'...", TypesetConfig(explicit=True))
    assert out.text == "He said “hello” – to ‘her’…"
    assert out.stats == {"explicit_quotes": 4, "en_dash": 1, "ellipsis": 1}


def test_typeset_explicit_mode_ignores_escape_and_curly_policy() -> None:
    cfg = TypesetConfig(explicit=True, escape=True, curly_policy=CurlyQuotePolicy.DROP)
    assert typeset('“x” \\"y', cfg) == "“x” \\”y"


def test_typeset_escape_and_drop_policy() -> None:
    cfg = TypesetConfig(escape=True, curly_policy=CurlyQuotePolicy.DROP)
    out = typeset_text('\\"raw\\" and “curly”...', cfg)
    assert out.text == '"raw" and curly…'
    assert out.stats == {"quotes_escaped": 2, "curly_quotes_dropped": 2, "ellipsis": 1}


def test_typeset_punctuation_only_and_empty_input() -> None:
    assert typeset("") == ""
    assert typeset_text("").stats == {}
    assert typeset("\"'---...'\"") == "“’—…’”"


def test_typeset_collapse_can_be_disabled() -> None:
    cfg = TypesetConfig(collapse_dashes=False, collapse_ellipsis=False)
    assert typeset('"a--b..."', cfg) == "“a--b...”"
