"""
Resistor network combination.

Series:
    Rt = R1 + R2 + ... + Rn
    R_missing = Rt − (sum of the n−1 known resistors)

Parallel (exactly two resistors):
    Req = R1·R2 / (R1 + R2)
    R1  = Req·R2 / (R2 − Req)
    R2  = Req·R1 / (R1 − Req)

A missing series resistor may come out negative; that is reported as-is.
A zero-ohm branch in the parallel pair is a short, so Req is exactly 0
without going through the guarded division.
"""

from enum import Enum
from typing import List, Sequence

from eee_engine.formatting import Unit
from eee_engine.guards import safe_divide
from eee_engine.models import FormulaResult, Quantity


SERIES_COUNT_REASON = "Count must be positive."
MISSING_COUNT_REASON = "n must be at least 2."


class ResistorGroup(int, Enum):
    SERIES = 1
    PARALLEL = 2


class SeriesMode(int, Enum):
    TOTAL = 1
    MISSING = 2


class ParallelMode(int, Enum):
    REQ = 1
    R1 = 2
    R2 = 3


def _numbered(prefix: str, values: Sequence[float]) -> List[Quantity]:
    return [Quantity.of(f"{prefix}{i}", v, Unit.OHM) for i, v in enumerate(values, start=1)]


# --- Series ---

def series_total(resistors: Sequence[float]) -> FormulaResult:
    """Rt = sum of all resistors (at least one)."""
    if len(resistors) < 1:
        return FormulaResult.domain_error(SERIES_COUNT_REASON)

    total = float(sum(resistors))
    return FormulaResult.success(
        "Resistors Series",
        inputs=[Quantity.of('n', len(resistors), Unit.COUNT)] + _numbered('R', resistors),
        outputs=[Quantity.of('Rt', total, Unit.OHM)],
    )


def series_missing(total: float, known: Sequence[float]) -> FormulaResult:
    """R_missing = Rt − sum(known), for a string of n = len(known) + 1 resistors."""
    n = len(known) + 1
    if n < 2:
        return FormulaResult.domain_error(MISSING_COUNT_REASON)

    missing = total - float(sum(known))
    return FormulaResult.success(
        "Resistors Series Missing",
        inputs=[Quantity.of('n', n, Unit.COUNT), Quantity.of('Rt', total, Unit.OHM)] + _numbered('R', known),
        outputs=[Quantity.of('R_missing', missing, Unit.OHM)],
    )


# --- Parallel (2 resistors) ---

def parallel_req(r1: float, r2: float) -> FormulaResult:
    """Req = R1·R2 / (R1 + R2), or 0 when either branch is a short."""
    inputs = [Quantity.of('R1', r1, Unit.OHM), Quantity.of('R2', r2, Unit.OHM)]

    if r1 == 0.0 or r2 == 0.0:
        return FormulaResult.success(
            "Resistors Parallel(2)",
            inputs=inputs,
            outputs=[Quantity.of('Req', 0.0, Unit.OHM)],
            note="one branch is a short",
        )

    ok, req = safe_divide(r1 * r2, r1 + r2)
    if not ok:
        return FormulaResult.singularity("R1 + R2 cannot be zero (or near zero).")

    return FormulaResult.success(
        "Resistors Parallel(2)",
        inputs=inputs,
        outputs=[Quantity.of('Req', req, Unit.OHM)],
    )


def parallel_r1(req: float, r2: float) -> FormulaResult:
    """R1 = Req·R2 / (R2 − Req)"""
    ok, r1 = safe_divide(req * r2, r2 - req)
    if not ok:
        return FormulaResult.singularity("R2 must not equal Req (denominator near zero).")

    return FormulaResult.success(
        "Resistors Parallel(2) solve R1",
        inputs=[Quantity.of('Req', req, Unit.OHM), Quantity.of('R2', r2, Unit.OHM)],
        outputs=[Quantity.of('R1', r1, Unit.OHM)],
    )


def parallel_r2(req: float, r1: float) -> FormulaResult:
    """R2 = Req·R1 / (R1 − Req)"""
    ok, r2 = safe_divide(req * r1, r1 - req)
    if not ok:
        return FormulaResult.singularity("R1 must not equal Req (denominator near zero).")

    return FormulaResult.success(
        "Resistors Parallel(2) solve R2",
        inputs=[Quantity.of('Req', req, Unit.OHM), Quantity.of('R1', r1, Unit.OHM)],
        outputs=[Quantity.of('R2', r2, Unit.OHM)],
    )


SERIES_SOLVERS = {
    SeriesMode.TOTAL: series_total,
    SeriesMode.MISSING: series_missing,
}

PARALLEL_SOLVERS = {
    ParallelMode.REQ: parallel_req,
    ParallelMode.R1: parallel_r1,
    ParallelMode.R2: parallel_r2,
}


def solve(group: ResistorGroup, mode: int, **inputs) -> FormulaResult:
    """Dispatch to a series or parallel variant."""
    if ResistorGroup(group) == ResistorGroup.SERIES:
        return SERIES_SOLVERS[SeriesMode(mode)](**inputs)
    return PARALLEL_SOLVERS[ParallelMode(mode)](**inputs)
