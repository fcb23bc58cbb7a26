"""Tests for logging setup and serialization helpers."""

from irsource.types import CharRange, DisplayRange, LineFlag
from irsource.utils import configure_logging, resolve_log_level, serialize_to_primitives


class TestResolveLogLevel:
    def test_explicit_level_wins(self, monkeypatch):
        monkeypatch.setenv("IRSOURCE_LOG_LEVEL", "ERROR")
        assert resolve_log_level("info") == "INFO"

    def test_env_level(self, monkeypatch):
        monkeypatch.setenv("IRSOURCE_LOG_LEVEL", "error")
        assert resolve_log_level() == "ERROR"

    def test_debug_flag(self, monkeypatch):
        monkeypatch.delenv("IRSOURCE_LOG_LEVEL", raising=False)
        monkeypatch.setenv("IRSOURCE_DEBUG", "true")
        assert resolve_log_level() == "DEBUG"

    def test_default(self, monkeypatch):
        monkeypatch.delenv("IRSOURCE_LOG_LEVEL", raising=False)
        monkeypatch.delenv("IRSOURCE_DEBUG", raising=False)
        assert resolve_log_level() == "WARNING"

    def test_configure_returns_applied_level(self):
        assert configure_logging("error") == "ERROR"


class TestSerializeToPrimitives:
    def test_line_flags(self):
        assert serialize_to_primitives(LineFlag.DEAD) == ["DEAD"]
        assert serialize_to_primitives(LineFlag.DEAD | LineFlag.LICM) == ["DEAD", "LICM"]

    def test_display_range(self):
        display = DisplayRange(text="  a;", highlight=(2, 3), column=2)
        assert serialize_to_primitives(display) == {
            "text": "  a;",
            "highlight": [2, 3],
            "column": 2,
        }

    def test_nested(self):
        data = {"ranges": [CharRange(0, 4)], "none": None, 1: "x"}
        assert serialize_to_primitives(data) == {
            "ranges": [{"start": 0, "end": 4}],
            "none": None,
            "1": "x",
        }
