"""
AC reactance and LC resonance.

    X_L = 2π·f·L
    X_C = 1 / (2π·f·C)
    f0  = 1 / (2π·√(L·C))

Domain checks run before any arithmetic; every inverse (and the capacitive
forward form, which is itself a reciprocal) divides through safe_divide().
"""

from enum import Enum

import numpy as np

from eee_engine.formatting import Unit
from eee_engine.guards import safe_divide
from eee_engine.models import FormulaResult, Quantity


_INVALID_DENOMINATOR = "invalid denominator."


class ReactanceGroup(int, Enum):
    INDUCTIVE = 1
    CAPACITIVE = 2
    RESONANCE = 3


class InductiveMode(int, Enum):
    XL = 1
    L = 2
    F = 3


class CapacitiveMode(int, Enum):
    XC = 1
    C = 2
    F = 3


class ResonanceMode(int, Enum):
    F0 = 1
    L = 2
    C = 3


# --- Inductive reactance ---

def inductive_xl(f: float, L: float) -> FormulaResult:
    """X_L = 2π·f·L, with f > 0 and L >= 0."""
    if f <= 0.0 or L < 0.0:
        return FormulaResult.domain_error("f>0, L>=0.")

    xl = 2.0 * np.pi * f * L
    return FormulaResult.success(
        "AC Inductive Reactance",
        inputs=[Quantity.of('f', f, Unit.HERTZ), Quantity.of('L', L, Unit.HENRY)],
        outputs=[Quantity.of('X_L', xl, Unit.OHM)],
    )


def inductive_l(xl: float, f: float) -> FormulaResult:
    """L = X_L / (2π·f)"""
    if f <= 0.0:
        return FormulaResult.domain_error("f>0.")

    ok, L = safe_divide(xl, 2.0 * np.pi * f)
    if not ok:
        return FormulaResult.singularity(_INVALID_DENOMINATOR)

    return FormulaResult.success(
        "AC Inductive Reactance solve L",
        inputs=[Quantity.of('X_L', xl, Unit.OHM), Quantity.of('f', f, Unit.HERTZ)],
        outputs=[Quantity.of('L', L, Unit.HENRY)],
    )


def inductive_f(xl: float, L: float) -> FormulaResult:
    """f = X_L / (2π·L)"""
    if L <= 0.0:
        return FormulaResult.domain_error("L>0.")

    ok, f = safe_divide(xl, 2.0 * np.pi * L)
    if not ok:
        return FormulaResult.singularity(_INVALID_DENOMINATOR)

    return FormulaResult.success(
        "AC Inductive Reactance solve f",
        inputs=[Quantity.of('X_L', xl, Unit.OHM), Quantity.of('L', L, Unit.HENRY)],
        outputs=[Quantity.of('f', f, Unit.HERTZ)],
    )


# --- Capacitive reactance ---

def capacitive_xc(f: float, C: float) -> FormulaResult:
    """X_C = 1 / (2π·f·C), with f > 0 and C > 0."""
    if f <= 0.0 or C <= 0.0:
        return FormulaResult.domain_error("f>0, C>0.")

    ok, xc = safe_divide(1.0, 2.0 * np.pi * f * C)
    if not ok:
        return FormulaResult.singularity(_INVALID_DENOMINATOR)

    return FormulaResult.success(
        "AC Capacitive Reactance",
        inputs=[Quantity.of('f', f, Unit.HERTZ), Quantity.of('C', C, Unit.FARAD)],
        outputs=[Quantity.of('X_C', xc, Unit.OHM)],
    )


def capacitive_c(xc: float, f: float) -> FormulaResult:
    """C = 1 / (2π·f·X_C)"""
    if f <= 0.0 or xc <= 0.0:
        return FormulaResult.domain_error("f>0, X_C>0.")

    ok, C = safe_divide(1.0, 2.0 * np.pi * f * xc)
    if not ok:
        return FormulaResult.singularity(_INVALID_DENOMINATOR)

    return FormulaResult.success(
        "AC Capacitive Reactance solve C",
        inputs=[Quantity.of('X_C', xc, Unit.OHM), Quantity.of('f', f, Unit.HERTZ)],
        outputs=[Quantity.of('C', C, Unit.FARAD)],
    )


def capacitive_f(xc: float, C: float) -> FormulaResult:
    """f = 1 / (2π·C·X_C)"""
    if C <= 0.0 or xc <= 0.0:
        return FormulaResult.domain_error("C>0, X_C>0.")

    ok, f = safe_divide(1.0, 2.0 * np.pi * C * xc)
    if not ok:
        return FormulaResult.singularity(_INVALID_DENOMINATOR)

    return FormulaResult.success(
        "AC Capacitive Reactance solve f",
        inputs=[Quantity.of('X_C', xc, Unit.OHM), Quantity.of('C', C, Unit.FARAD)],
        outputs=[Quantity.of('f', f, Unit.HERTZ)],
    )


# --- LC resonance ---

def resonance_f0(L: float, C: float) -> FormulaResult:
    """f0 = 1 / (2π·√(L·C))"""
    if L <= 0.0 or C <= 0.0:
        return FormulaResult.domain_error("L>0, C>0.")

    ok, f0 = safe_divide(1.0, 2.0 * np.pi * np.sqrt(L * C))
    if not ok:
        return FormulaResult.singularity(_INVALID_DENOMINATOR)

    return FormulaResult.success(
        "Resonance",
        inputs=[Quantity.of('L', L, Unit.HENRY), Quantity.of('C', C, Unit.FARAD)],
        outputs=[Quantity.of('f0', f0, Unit.HERTZ)],
    )


def resonance_l(f0: float, C: float) -> FormulaResult:
    """L = 1 / ((2π·f0)²·C)"""
    if f0 <= 0.0 or C <= 0.0:
        return FormulaResult.domain_error("f0>0, C>0.")

    omega = 2.0 * np.pi * f0
    ok, L = safe_divide(1.0, omega * omega * C)
    if not ok:
        return FormulaResult.singularity(_INVALID_DENOMINATOR)

    return FormulaResult.success(
        "Resonance solve L",
        inputs=[Quantity.of('f0', f0, Unit.HERTZ), Quantity.of('C', C, Unit.FARAD)],
        outputs=[Quantity.of('L', L, Unit.HENRY)],
    )


def resonance_c(f0: float, L: float) -> FormulaResult:
    """C = 1 / ((2π·f0)²·L)"""
    if f0 <= 0.0 or L <= 0.0:
        return FormulaResult.domain_error("f0>0, L>0.")

    omega = 2.0 * np.pi * f0
    ok, C = safe_divide(1.0, omega * omega * L)
    if not ok:
        return FormulaResult.singularity(_INVALID_DENOMINATOR)

    return FormulaResult.success(
        "Resonance solve C",
        inputs=[Quantity.of('f0', f0, Unit.HERTZ), Quantity.of('L', L, Unit.HENRY)],
        outputs=[Quantity.of('C', C, Unit.FARAD)],
    )


INDUCTIVE_SOLVERS = {
    InductiveMode.XL: inductive_xl,
    InductiveMode.L: inductive_l,
    InductiveMode.F: inductive_f,
}

CAPACITIVE_SOLVERS = {
    CapacitiveMode.XC: capacitive_xc,
    CapacitiveMode.C: capacitive_c,
    CapacitiveMode.F: capacitive_f,
}

RESONANCE_SOLVERS = {
    ResonanceMode.F0: resonance_f0,
    ResonanceMode.L: resonance_l,
    ResonanceMode.C: resonance_c,
}


def solve(group: ReactanceGroup, mode: int, **inputs: float) -> FormulaResult:
    """Dispatch to a variant of the inductive, capacitive or resonance family."""
    group = ReactanceGroup(group)
    if group == ReactanceGroup.INDUCTIVE:
        return INDUCTIVE_SOLVERS[InductiveMode(mode)](**inputs)
    if group == ReactanceGroup.CAPACITIVE:
        return CAPACITIVE_SOLVERS[CapacitiveMode(mode)](**inputs)
    return RESONANCE_SOLVERS[ResonanceMode(mode)](**inputs)
