"""
Resistive voltage divider.

    Vout = Vin · R2 / (R1 + R2)

Each solve-for-X variant rearranges the same equation and routes its single
division through safe_divide(), reporting which quantity made the
denominator vanish.
"""

from enum import Enum

from eee_engine.formatting import Unit
from eee_engine.guards import safe_divide
from eee_engine.models import FormulaResult, Quantity


class DividerMode(int, Enum):
    VOUT = 1
    VIN = 2
    R1 = 3
    R2 = 4


def solve_vout(vin: float, r1: float, r2: float) -> FormulaResult:
    """Vout = Vin · R2 / (R1 + R2)"""
    ok, ratio = safe_divide(r2, r1 + r2)
    if not ok:
        return FormulaResult.singularity("R1 + R2 cannot be zero (or near zero).")

    vout = vin * ratio
    return FormulaResult.success(
        "Voltage Divider (Vout)",
        inputs=[Quantity.of('Vin', vin, Unit.VOLT), Quantity.of('R1', r1, Unit.OHM), Quantity.of('R2', r2, Unit.OHM)],
        outputs=[Quantity.of('Vout', vout, Unit.VOLT)],
    )


def solve_vin(vout: float, r1: float, r2: float) -> FormulaResult:
    """Vin = Vout · (R1 + R2) / R2"""
    ok, gain = safe_divide(r1 + r2, r2)
    if not ok:
        return FormulaResult.singularity("R2 cannot be zero (or near zero).")

    vin = vout * gain
    return FormulaResult.success(
        "Voltage Divider (Vin)",
        inputs=[Quantity.of('Vout', vout, Unit.VOLT), Quantity.of('R1', r1, Unit.OHM), Quantity.of('R2', r2, Unit.OHM)],
        outputs=[Quantity.of('Vin', vin, Unit.VOLT)],
    )


def solve_r1(vin: float, vout: float, r2: float) -> FormulaResult:
    """R1 = R2 · (Vin/Vout − 1)"""
    ok, vin_over_vout = safe_divide(vin, vout)
    if not ok:
        return FormulaResult.singularity("Vout cannot be zero (or near zero).")

    r1 = r2 * (vin_over_vout - 1.0)
    return FormulaResult.success(
        "Voltage Divider (R1)",
        inputs=[Quantity.of('Vin', vin, Unit.VOLT), Quantity.of('Vout', vout, Unit.VOLT), Quantity.of('R2', r2, Unit.OHM)],
        outputs=[Quantity.of('R1', r1, Unit.OHM)],
    )


def solve_r2(vin: float, vout: float, r1: float) -> FormulaResult:
    """R2 = R1 · Vout / (Vin − Vout)"""
    ok, ratio = safe_divide(vout, vin - vout)
    if not ok:
        return FormulaResult.singularity("Vin must not equal Vout (denominator near zero).")

    r2 = r1 * ratio
    return FormulaResult.success(
        "Voltage Divider (R2)",
        inputs=[Quantity.of('Vin', vin, Unit.VOLT), Quantity.of('Vout', vout, Unit.VOLT), Quantity.of('R1', r1, Unit.OHM)],
        outputs=[Quantity.of('R2', r2, Unit.OHM)],
    )


SOLVERS = {
    DividerMode.VOUT: solve_vout,
    DividerMode.VIN: solve_vin,
    DividerMode.R1: solve_r1,
    DividerMode.R2: solve_r2,
}


def solve(mode: DividerMode, **inputs: float) -> FormulaResult:
    """Dispatch to the variant selected by mode."""
    return SOLVERS[DividerMode(mode)](**inputs)
