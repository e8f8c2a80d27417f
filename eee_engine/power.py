"""
DC power law.

    P = V·I,  V = P / I,  I = P / V
"""

from enum import Enum

from eee_engine.formatting import Unit
from eee_engine.guards import safe_divide
from eee_engine.models import FormulaResult, Quantity


class PowerMode(int, Enum):
    POWER = 1
    VOLTAGE = 2
    CURRENT = 3


def power(V: float, I: float) -> FormulaResult:
    """P = V·I"""
    return FormulaResult.success(
        "Power",
        inputs=[Quantity.of('V', V, Unit.VOLT), Quantity.of('I', I, Unit.AMP)],
        outputs=[Quantity.of('P', V * I, Unit.WATT)],
    )


def voltage(P: float, I: float) -> FormulaResult:
    """V = P / I"""
    ok, V = safe_divide(P, I)
    if not ok:
        return FormulaResult.singularity("I cannot be zero (or near zero).")

    return FormulaResult.success(
        "Power solve V",
        inputs=[Quantity.of('P', P, Unit.WATT), Quantity.of('I', I, Unit.AMP)],
        outputs=[Quantity.of('V', V, Unit.VOLT)],
    )


def current(P: float, V: float) -> FormulaResult:
    """I = P / V"""
    ok, I = safe_divide(P, V)
    if not ok:
        return FormulaResult.singularity("V cannot be zero (or near zero).")

    return FormulaResult.success(
        "Power solve I",
        inputs=[Quantity.of('P', P, Unit.WATT), Quantity.of('V', V, Unit.VOLT)],
        outputs=[Quantity.of('I', I, Unit.AMP)],
    )


SOLVERS = {
    PowerMode.POWER: power,
    PowerMode.VOLTAGE: voltage,
    PowerMode.CURRENT: current,
}


def solve(mode: PowerMode, **inputs: float) -> FormulaResult:
    """Dispatch to the variant selected by mode."""
    return SOLVERS[PowerMode(mode)](**inputs)
