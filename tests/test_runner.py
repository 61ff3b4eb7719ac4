"""Tests for the traced runner."""

import itertools

import pytest
from signalcpu import run_program, RunOptions, signal_strength_sum


class TestSignalStrengthSum:
    """signal_strength_sum tests."""

    def test_picks_one_based_cycles(self):
        """Index is the 1-based position in the sequence."""
        assert signal_strength_sum([5, 6, 7], cycles=(1, 3)) == 1 * 5 + 3 * 7

    def test_cycles_past_end_ignored(self):
        """Cycles beyond the sequence contribute nothing."""
        assert signal_strength_sum([2, 2], cycles=(2, 50)) == 4

    def test_no_cycles(self):
        """No interesting cycles sums to zero."""
        assert signal_strength_sum([1, 2, 3], cycles=()) == 0

    def test_stops_at_last_cycle(self):
        """Infinite sequences are safe."""
        assert signal_strength_sum(itertools.repeat(1), cycles=(20, 60)) == 80


class TestRunner:
    """run_program tests."""

    def test_reference_program(self, reference_program):
        """Reference program sums to 13140."""
        result = run_program(reference_program)
        assert result.status == "ok"
        assert result.signal_strength_sum == 13140
        assert result.cycles_executed == 240
        assert result.final_state["register"] == 17
        assert result.final_state["exhausted"] is True

    def test_reference_trace_values(self, reference_program):
        """Register values at the interesting cycles."""
        result = run_program(reference_program)
        by_cycle = {row["cycle"]: row for row in result.trace}
        assert by_cycle[20]["register"] == 21
        assert by_cycle[20]["signal_strength"] == 420
        assert by_cycle[60]["register"] == 19
        assert by_cycle[100]["register"] == 18
        assert by_cycle[140]["register"] == 21
        assert by_cycle[180]["register"] == 16
        assert by_cycle[220]["register"] == 18

    def test_trace_generation(self, light_program):
        """Trace records one row per cycle with the in-flight instruction."""
        result = run_program(light_program)
        assert result.trace == [
            {"cycle": 1, "register": 1, "instr_text": "noop", "signal_strength": 1},
            {"cycle": 2, "register": 1, "instr_text": "addx 3", "signal_strength": 2},
            {"cycle": 3, "register": 1, "instr_text": "addx 3", "signal_strength": 3},
            {"cycle": 4, "register": 4, "instr_text": "addx -5", "signal_strength": 16},
            {"cycle": 5, "register": 4, "instr_text": "addx -5", "signal_strength": 20},
        ]
        assert result.final_state["register"] == -1

    def test_trace_disabled(self, light_program):
        """Trace can be turned off."""
        result = run_program(light_program, options=RunOptions(trace=False))
        assert result.trace == []
        assert result.cycles_executed == 5

    def test_custom_signal_cycles(self, light_program):
        """Interesting cycles are configurable."""
        result = run_program(light_program, options=RunOptions(signal_cycles=(5, 4, 4)))
        assert result.signal_strength_sum == 36
        assert result.signal_cycles == [4, 5]

    def test_initial_register(self, light_program):
        """Initial register is configurable."""
        result = run_program(light_program, options=RunOptions(initial_register=0))
        assert result.final_state["register"] == -2

    def test_parse_error(self):
        """Parse errors come back as structured error info."""
        result = run_program("noop\naddx five")
        assert result.status == "error"
        assert result.cycles_executed == 0
        assert result.trace == []
        assert result.error.type == "InvalidAmount"
        assert result.error.line_index == 1
        assert result.error.source_text == "addx five"

    def test_cycle_limit(self, reference_program):
        """Runs stop at the cycle limit."""
        result = run_program(reference_program, options=RunOptions(max_cycles=10))
        assert result.status == "error"
        assert result.error.type == "CycleLimitExceeded"
        assert result.cycles_executed == 10
        assert len(result.trace) == 10

    def test_cycle_limit_exact(self, light_program):
        """A program that fits the limit exactly is fine."""
        result = run_program(light_program, options=RunOptions(max_cycles=5))
        assert result.status == "ok"

    def test_cycle_limit_state_matches_trace(self, light_program):
        """On the limit, final state is the last traced cycle."""
        result = run_program(light_program, options=RunOptions(max_cycles=3))
        assert result.status == "error"
        assert result.error.cycle == 4
        last = result.trace[-1]
        assert last["cycle"] == 3
        assert result.final_state["register"] == last["register"] == 1
        assert result.final_state["current"] == last["instr_text"] == "addx 3"
        assert result.final_state["exhausted"] is False

    def test_cycle_limit_exact_applies_last_effect(self, light_program):
        """Exact fit still runs the final addx effect."""
        result = run_program(light_program, options=RunOptions(max_cycles=5))
        assert result.final_state["register"] == -1
        assert result.final_state["exhausted"] is True


class TestAPIFormat:
    """Result dict format tests."""

    def test_success_result_format(self, light_program):
        """Success dict has all fields and no error."""
        data = run_program(light_program).to_dict()
        assert data["status"] == "ok"
        assert set(data) == {
            "status",
            "cycles_executed",
            "final_state",
            "signal_strength_sum",
            "signal_cycles",
            "trace",
        }

    def test_error_result_format(self):
        """Error dict carries error info."""
        data = run_program("halt").to_dict()
        assert data["status"] == "error"
        assert data["error"] == {
            "type": "UnknownInstruction",
            "message": "unknown instruction halt at line 0",
            "cycle": 0,
            "line_index": 0,
            "source_text": "halt",
        }
