"""
Tests for resistor network combination.

Validates:
1. Series total and missing-resistor solves, including negative results
2. Count preconditions (n >= 1, n >= 2)
3. Parallel-2 short-circuit bypass of the guarded division
4. Parallel-2 inverse solves and their singularities
"""

import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from eee_engine import resistors
from eee_engine.models import ErrorKind
from eee_engine.resistors import (
    series_total,
    series_missing,
    parallel_req,
    parallel_r1,
    parallel_r2,
    ResistorGroup,
    SeriesMode,
    ParallelMode,
)


class TestSeries:
    """Test series combination."""

    def test_total(self):
        result = series_total([100.0, 220.0, 330.0])
        assert result.value('Rt') == pytest.approx(650.0)

    def test_single_resistor(self):
        assert series_total([470.0]).value('Rt') == pytest.approx(470.0)

    def test_total_record_lists_every_resistor(self):
        record = series_total([100.0, 220.0, 330.0]).record
        assert record.render() == (
            "Resistors Series: n=3, R1=100.000000 ohm, R2=220.000000 ohm, "
            "R3=330.000000 ohm -> Rt=650.000000 ohm"
        )

    def test_empty_total_rejected(self):
        result = series_total([])
        assert result.error == ErrorKind.DOMAIN
        assert result.reason == "Count must be positive."

    def test_missing(self):
        result = series_missing(total=1000.0, known=[200.0, 300.0])
        assert result.value('R_missing') == pytest.approx(500.0)

    def test_missing_may_be_negative(self):
        """An over-full string gives a negative resistor, not an error."""
        result = series_missing(total=100.0, known=[200.0])
        assert result.ok
        assert result.value('R_missing') == pytest.approx(-100.0)

    def test_missing_needs_two(self):
        result = series_missing(total=1000.0, known=[])
        assert result.error == ErrorKind.DOMAIN
        assert result.reason == "n must be at least 2."

    def test_missing_record(self):
        record = series_missing(total=1000.0, known=[200.0]).record
        assert record.render() == (
            "Resistors Series Missing: n=2, Rt=1000.000000 ohm, R1=200.000000 ohm "
            "-> R_missing=800.000000 ohm"
        )


class TestParallel:
    """Test two-resistor parallel combination."""

    def test_equal_pair(self):
        assert parallel_req(100.0, 100.0).value('Req') == pytest.approx(50.0)

    def test_product_over_sum(self):
        assert parallel_req(1000.0, 4000.0).value('Req') == pytest.approx(800.0)

    @pytest.mark.parametrize("r1, r2", [(0.0, 100.0), (100.0, 0.0), (0.0, 0.0)])
    def test_short_branch(self, r1, r2):
        """Any zero-ohm branch makes Req exactly zero."""
        result = parallel_req(r1, r2)
        assert result.ok
        assert result.value('Req') == 0.0
        assert result.note == "one branch is a short"

    def test_short_bypasses_guard(self, monkeypatch):
        """The short-circuit answer never reaches safe_divide."""
        def _fail(*args):
            raise AssertionError("guarded division used for a short branch")

        monkeypatch.setattr(resistors, 'safe_divide', _fail)
        assert parallel_req(0.0, 100.0).value('Req') == 0.0

    def test_short_display_and_record(self):
        result = parallel_req(0.0, 100.0)
        assert result.display_lines() == ["Req = 0.000000 ohms (one branch is a short)"]
        assert result.record.render().endswith("-> Req=0.000000 ohm (one branch is a short)")

    def test_opposite_values_singular(self):
        result = parallel_req(100.0, -100.0)
        assert result.error == ErrorKind.SINGULARITY
        assert "R1 + R2" in result.reason

    def test_solve_r1(self):
        assert parallel_r1(req=50.0, r2=100.0).value('R1') == pytest.approx(100.0)

    def test_solve_r2(self):
        assert parallel_r2(req=800.0, r1=1000.0).value('R2') == pytest.approx(4000.0)

    def test_req_equal_to_known(self):
        """Req equal to the known branch needs an infinite resistor."""
        result = parallel_r1(req=100.0, r2=100.0)
        assert result.error == ErrorKind.SINGULARITY
        assert result.reason == "R2 must not equal Req (denominator near zero)."

        result = parallel_r2(req=100.0, r1=100.0)
        assert result.reason == "R1 must not equal Req (denominator near zero)."

    def test_round_trip(self):
        req = parallel_req(330.0, 470.0).value('Req')
        assert parallel_r1(req=req, r2=470.0).value('R1') == pytest.approx(330.0)


class TestDispatch:
    """Test group/mode dispatch."""

    def test_series(self):
        result = resistors.solve(ResistorGroup.SERIES, SeriesMode.TOTAL, resistors=[1.0, 2.0])
        assert result.value('Rt') == pytest.approx(3.0)

    def test_parallel(self):
        result = resistors.solve(2, ParallelMode.REQ, r1=10.0, r2=10.0)
        assert result.value('Req') == pytest.approx(5.0)

    def test_unknown_group(self):
        with pytest.raises(ValueError):
            resistors.solve(3, 1, r1=1.0, r2=1.0)
