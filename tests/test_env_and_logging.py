from __future__ import annotations

import logging
from pathlib import Path

import pytest

from smart_quotes.env import env_int, env_str, env_truthy
from smart_quotes.logging_setup import default_log_dir, ensure_file_logging


def test_env_helpers(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SQ_TEST_FLAG", " Yes ")
    monkeypatch.setenv("SQ_TEST_INT", "42")
    monkeypatch.setenv("SQ_TEST_BAD_INT", "forty-two")
    monkeypatch.setenv("SQ_TEST_STR", "  value ")
    monkeypatch.delenv("SQ_TEST_MISSING", raising=False)

    assert env_truthy("SQ_TEST_FLAG") is True
    assert env_truthy("SQ_TEST_MISSING") is False
    assert env_int("SQ_TEST_INT", 1) == 42
    assert env_int("SQ_TEST_BAD_INT", 7) == 7
    assert env_int("SQ_TEST_MISSING", 9) == 9
    assert env_str("SQ_TEST_STR") == "value"
    assert env_str("SQ_TEST_MISSING") is None


def test_default_log_dir_honours_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("SMART_QUOTES_LOG_DIR", str(tmp_path / "logs"))
    assert default_log_dir() == tmp_path / "logs"


def test_ensure_file_logging_disabled_by_env(tmp_path: Path) -> None:
    # conftest sets SMART_QUOTES_DISABLE_FILE_LOG for every test.
    log_dir = tmp_path / "logs"
    assert ensure_file_logging(log_dir=log_dir) == log_dir / "smart-quotes.log"
    assert not log_dir.exists()


def test_ensure_file_logging_is_idempotent(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.delenv("SMART_QUOTES_DISABLE_FILE_LOG", raising=False)
    monkeypatch.delenv("SMART_QUOTES_LOG_LEVEL", raising=False)

    root = logging.getLogger()
    before = list(root.handlers)
    try:
        p1 = ensure_file_logging(log_dir=tmp_path)
        p2 = ensure_file_logging(log_dir=tmp_path)
        assert p1 == p2 == (tmp_path / "smart-quotes.log").resolve()

        added = [h for h in root.handlers if h not in before]
        assert len(added) == 1

        logging.getLogger("smart_quotes.test").warning("hello log file")
        added[0].flush()
        assert "hello log file" in p1.read_text(encoding="utf-8")
    finally:
        for h in list(root.handlers):
            if h not in before:
                root.removeHandler(h)
                h.close()
