"""Tests for the line-oriented console and demo instrument."""

from __future__ import annotations

import io
import logging

import pytest

from scpi_parser.main import DemoInstrument, log_level_from_env, serve_lines


@pytest.fixture
def demo() -> DemoInstrument:
    return DemoInstrument()


def _serve(demo: DemoInstrument, *lines: str) -> str:
    out = io.StringIO()
    serve_lines(demo, [line + "\n" for line in lines], out.write)
    return out.getvalue()


class TestServeLines:
    def test_identity(self, demo):
        assert _serve(demo, "*IDN?") == DemoInstrument.IDENTITY + "\n"

    def test_responses_joined(self, demo):
        assert _serve(demo, "VAR:X 4;X?;:*IDN?") == "4;" + DemoInstrument.IDENTITY + "\n"

    def test_no_output_for_setters(self, demo):
        assert _serve(demo, "VAR:X 9") == ""
        assert _serve(demo, "VAR:X?") == "9\n"

    def test_blank_lines_skipped(self, demo):
        assert _serve(demo, "", "   ", "VAR:X?") == "0\n"

    def test_missing_handler_reported_and_continues(self, demo):
        assert _serve(demo, "BOGUS?", "VAR:X?") == 'ERR "BOGUS?"\n0\n'


class TestDemoInstrument:
    def test_reset(self, demo):
        demo.accept("VAR:X 12")
        demo.accept("*RST")
        assert demo.accept("VAR:X?") == ["0"]

    def test_error_queue(self, demo):
        assert demo.accept("SYST:ERRor?") == ['0,"No error"']
        demo.accept("VAR:X abc")
        assert demo.accept("SYSTem:ERRor?") == ['-104,"Data type error"']
        assert demo.accept("SYST:ERRor?") == ['0,"No error"']

    def test_lowercase_query_segment_needs_full_form(self, demo):
        # "ERRor?" abbreviates to "ERR", so "ERR?" is not a known short form.
        assert _serve(demo, "SYST:ERR?") == 'ERR "SYSTem:ERR?"\n'


class TestLogLevelFromEnv:
    def test_unset_uses_default(self, monkeypatch):
        monkeypatch.delenv("SCPI_LOG_LEVEL", raising=False)
        assert log_level_from_env() == logging.WARNING

    def test_known_name(self, monkeypatch):
        monkeypatch.setenv("SCPI_LOG_LEVEL", "debug")
        assert log_level_from_env() == logging.DEBUG

    def test_unknown_name_falls_back(self, monkeypatch):
        monkeypatch.setenv("SCPI_LOG_LEVEL", "verbose")
        assert log_level_from_env() == logging.WARNING
