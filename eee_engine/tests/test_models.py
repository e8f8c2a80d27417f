"""
Tests for result models, unit formatting and the module registry.

Validates:
1. Per-unit display precision (6 decimals, 2 decimals, %.9e)
2. A FormulaResult is success-with-value or failure-with-reason, never both
3. Results and records are immutable
4. Every registered variant's inputs match its solver's parameters
"""

import inspect

import pytest
import sys
import os

from pydantic import ValidationError

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from eee_engine.formatting import Unit, format_value, format_display, format_log
from eee_engine.models import ErrorKind, FormulaResult, LogRecord, Quantity
from eee_engine.registry import (
    InputKind,
    Module,
    get_module,
    get_variant,
    list_modules,
)


class TestFormatting:
    """Test fixed-precision rendering."""

    @pytest.mark.parametrize("unit", [Unit.VOLT, Unit.OHM, Unit.AMP, Unit.WATT, Unit.HERTZ, Unit.SECOND])
    def test_six_decimals(self, unit):
        assert format_value(5, unit) == "5.000000"
        assert format_value(-0.5, unit) == "-0.500000"

    def test_percent(self):
        assert format_value(63.2120558, Unit.PERCENT) == "63.21"

    @pytest.mark.parametrize("unit", [Unit.HENRY, Unit.FARAD])
    def test_scientific(self, unit):
        assert format_value(1.5e-9, unit) == "1.500000000e-09"

    def test_count(self):
        assert format_value(3, Unit.COUNT) == "3"

    def test_display_uses_plural_ohms(self):
        assert format_display('R1', 1000.0, Unit.OHM) == "R1 = 1000.000000 ohms"
        assert format_log('R1', 1000.0, Unit.OHM) == "R1=1000.000000 ohm"

    def test_percent_has_no_space(self):
        assert format_display('charge', 50.0, Unit.PERCENT) == "charge = 50.00%"
        assert format_log('charge', 50.0, Unit.PERCENT) == "charge=50.00%"


class TestFormulaResult:
    """Test the success/failure invariant."""

    def _success(self):
        return FormulaResult.success(
            "Power",
            inputs=[Quantity.of('V', 2.0, Unit.VOLT), Quantity.of('I', 3.0, Unit.AMP)],
            outputs=[Quantity.of('P', 6.0, Unit.WATT)],
        )

    def test_success(self):
        result = self._success()
        assert result.ok
        assert result.error is None
        assert result.reason is None
        assert result.value('P') == 6.0
        assert result.record.outputs == result.outputs

    def test_failure(self):
        result = FormulaResult.domain_error("f>0.")
        assert not result.ok
        assert result.outputs == ()
        assert result.record is None
        assert result.display_lines() == ["Error: f>0."]

    def test_cannot_be_both(self):
        """Outputs plus an error reason is rejected at construction."""
        with pytest.raises(ValidationError):
            FormulaResult(
                outputs=(Quantity.of('P', 1.0, Unit.WATT),),
                error=ErrorKind.DOMAIN,
                reason="nope",
            )

    def test_cannot_be_neither(self):
        with pytest.raises(ValidationError):
            FormulaResult()

    def test_failure_needs_reason(self):
        with pytest.raises(ValidationError):
            FormulaResult(error=ErrorKind.SINGULARITY)

    def test_immutable(self):
        result = self._success()
        with pytest.raises(ValidationError):
            result.reason = "changed"
        with pytest.raises(ValidationError):
            result.record.title = "changed"

    def test_unknown_output(self):
        with pytest.raises(KeyError):
            self._success().value('Q')

    def test_record_without_inputs(self):
        record = LogRecord(title="Constant", outputs=(Quantity.of('x', 1.0, Unit.VOLT),))
        assert record.render() == "Constant: x=1.000000 V"


class TestRegistry:
    """Test the declarative module table."""

    def test_menu_order(self):
        assert [int(m.code) for m in list_modules()] == [1, 2, 3, 4, 5]

    def test_unknown_module(self):
        with pytest.raises(ValueError):
            get_module(9)

    def test_grouped_modules(self):
        assert get_module(Module.RESISTORS).has_groups
        assert get_module(Module.REACTANCE).has_groups
        assert not get_module(Module.POWER).has_groups
        assert not get_module(Module.VOLTAGE_DIVIDER).has_groups

    def test_unknown_variant(self):
        with pytest.raises(ValueError):
            get_variant(Module.REACTANCE, 9, group=1)
        with pytest.raises(ValueError):
            get_module(Module.RESISTORS).get_group(5)

    def test_inputs_match_solver_signatures(self):
        """Every non-count input is a keyword the solver accepts, and vice versa."""
        for module in list_modules():
            for group in module.groups:
                for variant in group.variants:
                    keys = [s.key for s in variant.inputs if s.kind != InputKind.COUNT]
                    params = list(inspect.signature(variant.solve).parameters)
                    assert sorted(keys) == sorted(params), variant.label

    def test_value_lists_follow_their_count(self):
        for module in list_modules():
            for group in module.groups:
                for variant in group.variants:
                    seen = []
                    for spec in variant.inputs:
                        if spec.kind == InputKind.VALUES:
                            assert spec.count_key in seen
                            assert '{i}' in spec.prompt
                        seen.append(spec.key)

    def test_evaluate(self):
        variant = get_variant(Module.VOLTAGE_DIVIDER, 1)
        result = variant.evaluate({'vin': 10.0, 'r1': 1000.0, 'r2': 1000.0})
        assert result.value('Vout') == pytest.approx(5.0)

    def test_evaluate_drops_count(self):
        variant = get_variant(Module.RESISTORS, 1, group=1)
        result = variant.evaluate({'n': 2, 'resistors': [1.0, 2.0]})
        assert result.value('Rt') == pytest.approx(3.0)
