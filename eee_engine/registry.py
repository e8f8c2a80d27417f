"""
Calculator module registry.

Describes every formula module as data: its menu code, its variant groups,
and for each variant the inputs to collect (in prompt order) and the solver
to call. The interactive shell walks this table instead of hard-coding one
menu routine per module.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Optional

from eee_engine import power, rc_transient, reactance, resistors, voltage_divider
from eee_engine.models import FormulaResult


class Module(int, Enum):
    VOLTAGE_DIVIDER = 1
    RESISTORS = 2
    REACTANCE = 3
    RC_TRANSIENT = 4
    POWER = 5


class InputKind(str, Enum):
    REAL = "real"        # one float, passed to the solver
    COUNT = "count"      # one int, sizes a later VALUES input; not passed on
    VALUES = "values"    # a list of floats, passed to the solver


@dataclass(frozen=True)
class InputSpec:
    """One value (or list of values) the user is asked for."""
    key: str
    prompt: str                       # VALUES prompts contain '{i}'
    kind: InputKind = InputKind.REAL
    minimum: Optional[int] = None     # COUNT: smallest acceptable count
    minimum_reason: str = ''          # COUNT: domain error when below minimum
    count_key: Optional[str] = None   # VALUES: which COUNT sizes the list
    count_offset: int = 0             # VALUES: length = count - offset


@dataclass
class VariantSpec:
    """A single solve-for-X mode."""
    code: int
    label: str
    inputs: List[InputSpec]
    solve: Callable[..., FormulaResult]

    def evaluate(self, values: Dict) -> FormulaResult:
        """Call the solver with the collected values (counts are dropped)."""
        kwargs = {
            spec.key: values[spec.key]
            for spec in self.inputs
            if spec.kind != InputKind.COUNT
        }
        return self.solve(**kwargs)


@dataclass
class GroupSpec:
    """A submenu of variants sharing one equation family."""
    code: int
    label: str
    heading: str
    variants: List[VariantSpec]

    def get_variant(self, code: int) -> VariantSpec:
        for variant in self.variants:
            if variant.code == code:
                return variant
        raise ValueError(f"Unknown variant {code} in '{self.label or self.heading}'")


@dataclass
class ModuleSpec:
    """A main-menu entry. Modules with one group skip the group menu."""
    code: Module
    title: str
    menu_label: str
    groups: List[GroupSpec] = field(default_factory=list)

    @property
    def has_groups(self) -> bool:
        return len(self.groups) > 1

    def get_group(self, code: int) -> GroupSpec:
        for group in self.groups:
            if group.code == code:
                return group
        raise ValueError(f"Unknown group {code} in '{self.title}'")


def _real(key: str, prompt: str) -> InputSpec:
    return InputSpec(key=key, prompt=prompt)


_VOLTAGE_DIVIDER = ModuleSpec(
    code=Module.VOLTAGE_DIVIDER,
    title='Voltage Divider',
    menu_label='Voltage divider (Vout)',
    groups=[GroupSpec(0, '', 'Solve:', [
        VariantSpec(voltage_divider.DividerMode.VOUT, 'Vout given Vin, R1, R2',
                    [_real('vin', 'Vin (V): '), _real('r1', 'R1 (ohms): '), _real('r2', 'R2 (ohms): ')],
                    voltage_divider.solve_vout),
        VariantSpec(voltage_divider.DividerMode.VIN, 'Vin  given Vout, R1, R2',
                    [_real('vout', 'Vout (V): '), _real('r1', 'R1 (ohms): '), _real('r2', 'R2 (ohms): ')],
                    voltage_divider.solve_vin),
        VariantSpec(voltage_divider.DividerMode.R1, 'R1   given Vin, Vout, R2',
                    [_real('vin', 'Vin (V): '), _real('vout', 'Vout (V): '), _real('r2', 'R2 (ohms): ')],
                    voltage_divider.solve_r1),
        VariantSpec(voltage_divider.DividerMode.R2, 'R2   given Vin, Vout, R1',
                    [_real('vin', 'Vin (V): '), _real('vout', 'Vout (V): '), _real('r1', 'R1 (ohms): ')],
                    voltage_divider.solve_r2),
    ])],
)

_RESISTORS = ModuleSpec(
    code=Module.RESISTORS,
    title='Resistor Tools',
    menu_label='Resistor tools (series / parallel-2)',
    groups=[
        GroupSpec(resistors.ResistorGroup.SERIES, 'Series', 'Series modes:', [
            VariantSpec(resistors.SeriesMode.TOTAL, 'Total Rt given n resistors', [
                InputSpec('n', 'How many resistors? ', InputKind.COUNT,
                          minimum=1, minimum_reason=resistors.SERIES_COUNT_REASON),
                InputSpec('resistors', 'R{i} (ohms): ', InputKind.VALUES, count_key='n'),
            ], resistors.series_total),
            VariantSpec(resistors.SeriesMode.MISSING, 'Missing resistor given Rt and the other (n-1)', [
                InputSpec('n', 'Total number of series resistors n: ', InputKind.COUNT,
                          minimum=2, minimum_reason=resistors.MISSING_COUNT_REASON),
                _real('total', 'Target Rt (ohms): '),
                InputSpec('known', 'Known R{i} (ohms): ', InputKind.VALUES, count_key='n', count_offset=1),
            ], resistors.series_missing),
        ]),
        GroupSpec(resistors.ResistorGroup.PARALLEL, 'Parallel (2 resistors)', 'Parallel(2) modes:', [
            VariantSpec(resistors.ParallelMode.REQ, 'Req given R1 and R2',
                        [_real('r1', 'R1 (ohms): '), _real('r2', 'R2 (ohms): ')],
                        resistors.parallel_req),
            VariantSpec(resistors.ParallelMode.R1, 'R1  given Req and R2',
                        [_real('req', 'Req (ohms): '), _real('r2', 'R2  (ohms): ')],
                        resistors.parallel_r1),
            VariantSpec(resistors.ParallelMode.R2, 'R2  given Req and R1',
                        [_real('req', 'Req (ohms): '), _real('r1', 'R1  (ohms): ')],
                        resistors.parallel_r2),
        ]),
    ],
)

_REACTANCE = ModuleSpec(
    code=Module.REACTANCE,
    title='AC Reactance & Resonance',
    menu_label='AC reactance & resonance',
    groups=[
        GroupSpec(reactance.ReactanceGroup.INDUCTIVE, 'Inductive Reactance (X_L)', 'Solve for:', [
            VariantSpec(reactance.InductiveMode.XL, 'X_L given f, L',
                        [_real('f', 'f (Hz): '), _real('L', 'L (H): ')],
                        reactance.inductive_xl),
            VariantSpec(reactance.InductiveMode.L, 'L   given X_L, f',
                        [_real('xl', 'X_L (ohms): '), _real('f', 'f (Hz): ')],
                        reactance.inductive_l),
            VariantSpec(reactance.InductiveMode.F, 'f   given X_L, L',
                        [_real('xl', 'X_L (ohms): '), _real('L', 'L (H): ')],
                        reactance.inductive_f),
        ]),
        GroupSpec(reactance.ReactanceGroup.CAPACITIVE, 'Capacitive Reactance (X_C)', 'Solve for:', [
            VariantSpec(reactance.CapacitiveMode.XC, 'X_C given f, C',
                        [_real('f', 'f (Hz): '), _real('C', 'C (F): ')],
                        reactance.capacitive_xc),
            VariantSpec(reactance.CapacitiveMode.C, 'C   given X_C, f',
                        [_real('xc', 'X_C (ohms): '), _real('f', 'f (Hz): ')],
                        reactance.capacitive_c),
            VariantSpec(reactance.CapacitiveMode.F, 'f   given X_C, C',
                        [_real('xc', 'X_C (ohms): '), _real('C', 'C (F): ')],
                        reactance.capacitive_f),
        ]),
        GroupSpec(reactance.ReactanceGroup.RESONANCE, 'Resonance (f0)', 'Solve for:', [
            VariantSpec(reactance.ResonanceMode.F0, 'f0 given L, C',
                        [_real('L', 'L (H): '), _real('C', 'C (F): ')],
                        reactance.resonance_f0),
            VariantSpec(reactance.ResonanceMode.L, 'L  given f0, C',
                        [_real('f0', 'f0 (Hz): '), _real('C', 'C (F): ')],
                        reactance.resonance_l),
            VariantSpec(reactance.ResonanceMode.C, 'C  given f0, L',
                        [_real('f0', 'f0 (Hz): '), _real('L', 'L (H): ')],
                        reactance.resonance_c),
        ]),
    ],
)

_RC_TRANSIENT = ModuleSpec(
    code=Module.RC_TRANSIENT,
    title='RC Transient Calculator',
    menu_label='RC transient (tau / %charge / %discharge)',
    groups=[GroupSpec(0, '', '', [
        VariantSpec(rc_transient.TransientMode.FROM_RC, 'Given R, C, t  -> tau, %charge, %discharge',
                    [_real('R', 'R (ohms): '), _real('C', 'C (F): '), _real('t', 't (s): ')],
                    rc_transient.from_rc),
        VariantSpec(rc_transient.TransientMode.TIME, 'Given R, C, %charge -> t',
                    [_real('R', 'R (ohms): '), _real('C', 'C (F): '), _real('pct', 'Target charge (%): ')],
                    rc_transient.time_to_charge),
        VariantSpec(rc_transient.TransientMode.FROM_TAU, 'Given tau, t   -> %charge, %discharge',
                    [_real('tau', 'Tau (s): '), _real('t', 't (s): ')],
                    rc_transient.from_tau),
        VariantSpec(rc_transient.TransientMode.CAPACITANCE, 'Given R, %charge, t -> C',
                    [_real('R', 'R (ohms): '), _real('pct', 'Target charge (%): '), _real('t', 't (s): ')],
                    rc_transient.capacitance_for_charge),
        VariantSpec(rc_transient.TransientMode.RESISTANCE, 'Given C, %charge, t -> R',
                    [_real('C', 'C (F): '), _real('pct', 'Target charge (%): '), _real('t', 't (s): ')],
                    rc_transient.resistance_for_charge),
    ])],
)

_POWER = ModuleSpec(
    code=Module.POWER,
    title='Power Equation',
    menu_label='Power (P = V * I)',
    groups=[GroupSpec(0, '', 'Choose using P = V x I:', [
        VariantSpec(power.PowerMode.POWER, 'Power  (P)  given V and I',
                    [_real('V', 'V (volts): '), _real('I', 'I (amps):  ')],
                    power.power),
        VariantSpec(power.PowerMode.VOLTAGE, 'Voltage (V) given P and I',
                    [_real('P', 'P (watts): '), _real('I', 'I (amps):  ')],
                    power.voltage),
        VariantSpec(power.PowerMode.CURRENT, 'Current (I) given P and V',
                    [_real('P', 'P (watts): '), _real('V', 'V (volts): ')],
                    power.current),
    ])],
)


MODULES: Dict[Module, ModuleSpec] = {
    spec.code: spec
    for spec in (_VOLTAGE_DIVIDER, _RESISTORS, _REACTANCE, _RC_TRANSIENT, _POWER)
}


def get_module(code: int) -> ModuleSpec:
    """Get a module definition by its menu code."""
    try:
        return MODULES[Module(code)]
    except ValueError:
        raise ValueError(f"Unknown module {code}. Available: {[int(m) for m in MODULES]}") from None


def list_modules() -> List[ModuleSpec]:
    """All modules in menu order."""
    return [MODULES[m] for m in Module]


def get_variant(module: int, mode: int, group: int = 0) -> VariantSpec:
    """Look up a variant by module, group and mode codes."""
    return get_module(module).get_group(group).get_variant(mode)
