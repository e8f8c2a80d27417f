"""
RC charge/discharge transient.

    τ          = R·C
    charge%    = 100·(1 − e^(−t/τ))
    discharge% = 100·e^(−t/τ)

Solving for time or for a component inverts the charge curve:
    t = −τ·ln(1 − p)        with p = charge% / 100
    τ = −t / ln(1 − p)

The target percentage must lie strictly inside (0, 100): at 0% the
logarithm is ln(1) = 0 and τ is undefined, at 100% it is ln(0).
"""

from enum import Enum

import numpy as np

from eee_engine.formatting import Unit
from eee_engine.guards import safe_divide
from eee_engine.models import FormulaResult, Quantity


_PERCENT_RANGE = "% must be in (0,100)."
_LN_DOMAIN = "invalid ln() domain."


class TransientMode(int, Enum):
    FROM_RC = 1        # R, C, t -> tau, charge, discharge
    TIME = 2           # R, C, charge -> t
    FROM_TAU = 3       # tau, t -> charge, discharge
    CAPACITANCE = 4    # R, charge, t -> C
    RESISTANCE = 5     # C, charge, t -> R


def _curve(tau: float, t: float):
    """Return (charge%, discharge%) at time t."""
    decay = np.exp(-t / tau)
    return 100.0 * (1.0 - decay), 100.0 * decay


def _tau_for_charge(pct: float, t: float):
    """
    τ that reaches pct% charge after t seconds.

    Returns (FormulaResult error or None, tau).
    """
    ln_arg = 1.0 - pct / 100.0
    if ln_arg <= 0.0:
        return FormulaResult.domain_error(_LN_DOMAIN), 0.0

    ok, tau = safe_divide(-t, np.log(ln_arg))
    if not ok:
        return FormulaResult.singularity("charge % too close to 0 (ln(1 - p) near zero)."), 0.0
    return None, tau


def from_rc(R: float, C: float, t: float) -> FormulaResult:
    """τ, charge% and discharge% for a given R, C at time t."""
    if R <= 0.0 or C <= 0.0:
        return FormulaResult.domain_error("R>0, C>0.")
    if t < 0.0:
        return FormulaResult.domain_error("t>=0.")

    tau = R * C
    if tau <= 0.0:
        return FormulaResult.domain_error("tau = R*C underflows to zero.")

    charge, discharge = _curve(tau, t)
    return FormulaResult.success(
        "RC Transient",
        inputs=[Quantity.of('R', R, Unit.OHM), Quantity.of('C', C, Unit.FARAD), Quantity.of('t', t, Unit.SECOND)],
        outputs=[
            Quantity.of('tau', tau, Unit.SECOND),
            Quantity.of('charge', charge, Unit.PERCENT),
            Quantity.of('discharge', discharge, Unit.PERCENT),
        ],
    )


def time_to_charge(R: float, C: float, pct: float) -> FormulaResult:
    """t = −R·C·ln(1 − p)"""
    if R <= 0.0 or C <= 0.0:
        return FormulaResult.domain_error("R>0, C>0.")
    if pct <= 0.0 or pct >= 100.0:
        return FormulaResult.domain_error(_PERCENT_RANGE)

    ln_arg = 1.0 - pct / 100.0
    if ln_arg <= 0.0:
        return FormulaResult.domain_error(_LN_DOMAIN)

    tau = R * C
    t = -tau * np.log(ln_arg)
    return FormulaResult.success(
        "RC solve t",
        inputs=[Quantity.of('R', R, Unit.OHM), Quantity.of('C', C, Unit.FARAD), Quantity.of('charge', pct, Unit.PERCENT)],
        outputs=[Quantity.of('t', t, Unit.SECOND)],
    )


def from_tau(tau: float, t: float) -> FormulaResult:
    """charge% and discharge% for a known time constant."""
    if tau <= 0.0:
        return FormulaResult.domain_error("tau>0.")
    if t < 0.0:
        return FormulaResult.domain_error("t>=0.")

    charge, discharge = _curve(tau, t)
    return FormulaResult.success(
        "RC from tau,t",
        inputs=[Quantity.of('tau', tau, Unit.SECOND), Quantity.of('t', t, Unit.SECOND)],
        outputs=[Quantity.of('charge', charge, Unit.PERCENT), Quantity.of('discharge', discharge, Unit.PERCENT)],
    )


def capacitance_for_charge(R: float, pct: float, t: float) -> FormulaResult:
    """C = τ / R with τ = −t / ln(1 − p)"""
    if R <= 0.0:
        return FormulaResult.domain_error("R>0.")
    if t < 0.0:
        return FormulaResult.domain_error("t>=0.")
    if pct <= 0.0 or pct >= 100.0:
        return FormulaResult.domain_error(_PERCENT_RANGE)

    error, tau = _tau_for_charge(pct, t)
    if error is not None:
        return error

    ok, C = safe_divide(tau, R)
    if not ok:
        return FormulaResult.singularity("division by zero.")

    return FormulaResult.success(
        "RC solve C",
        inputs=[Quantity.of('R', R, Unit.OHM), Quantity.of('charge', pct, Unit.PERCENT), Quantity.of('t', t, Unit.SECOND)],
        outputs=[Quantity.of('C', C, Unit.FARAD), Quantity.of('tau', tau, Unit.SECOND)],
    )


def resistance_for_charge(C: float, pct: float, t: float) -> FormulaResult:
    """R = τ / C with τ = −t / ln(1 − p)"""
    if C <= 0.0:
        return FormulaResult.domain_error("C>0.")
    if t < 0.0:
        return FormulaResult.domain_error("t>=0.")
    if pct <= 0.0 or pct >= 100.0:
        return FormulaResult.domain_error(_PERCENT_RANGE)

    error, tau = _tau_for_charge(pct, t)
    if error is not None:
        return error

    ok, R = safe_divide(tau, C)
    if not ok:
        return FormulaResult.singularity("division by zero.")

    return FormulaResult.success(
        "RC solve R",
        inputs=[Quantity.of('C', C, Unit.FARAD), Quantity.of('charge', pct, Unit.PERCENT), Quantity.of('t', t, Unit.SECOND)],
        outputs=[Quantity.of('R', R, Unit.OHM), Quantity.of('tau', tau, Unit.SECOND)],
    )


SOLVERS = {
    TransientMode.FROM_RC: from_rc,
    TransientMode.TIME: time_to_charge,
    TransientMode.FROM_TAU: from_tau,
    TransientMode.CAPACITANCE: capacitance_for_charge,
    TransientMode.RESISTANCE: resistance_for_charge,
}


def solve(mode: TransientMode, **inputs: float) -> FormulaResult:
    """Dispatch to the variant selected by mode."""
    return SOLVERS[TransientMode(mode)](**inputs)
