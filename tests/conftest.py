"""Shared fixtures for scpi-parser tests."""

from __future__ import annotations

from typing import Sequence

import pytest

from scpi_parser import ScpiParser


class BenchInstrument(ScpiParser):
    """Instrument with a settable variable and two fixed readings."""

    def __init__(self) -> None:
        super().__init__()
        self.var_x = 0
        self.volts_dc = 2.23
        self.amps_ac = 0.123
        self.register("*IDN?", self.idn)
        self.register("VAR:X", self.set_x)
        self.register("VAR:X?", self.get_x)
        self.register("CONCAT", self.concat)
        self.register("MEASure:VOLTage:DC?", self.meas_volts_dc)
        self.register("MEASure:CURRent:AC?", self.meas_current_ac)

    def idn(self, args: Sequence[str]) -> str:
        return "SCPI Test Parser"

    def set_x(self, args: Sequence[str]) -> None:
        if args:
            try:
                self.var_x = int(args[0])
            except ValueError:
                pass
        return None

    def get_x(self, args: Sequence[str]) -> str:
        return str(self.var_x)

    def concat(self, args: Sequence[str]) -> str:
        return " ".join(args)

    def meas_volts_dc(self, args: Sequence[str]) -> str:
        return str(self.volts_dc)

    def meas_current_ac(self, args: Sequence[str]) -> str:
        return str(self.amps_ac)


@pytest.fixture
def instrument() -> BenchInstrument:
    """Provide a fresh BenchInstrument with a 20-entry cache."""
    inst = BenchInstrument()
    inst.set_cache_size_limit(20)
    return inst


@pytest.fixture
def voltmeter() -> ScpiParser:
    """Provide a parser with short-form voltage paths only."""
    parser = ScpiParser()
    parser.register("MEAS:VOLT:DC?", lambda args: "2.23")
    parser.register("MEAS:VOLT:AC?", lambda args: "0.123")
    return parser
