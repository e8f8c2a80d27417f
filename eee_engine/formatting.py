"""
Units and fixed-precision rendering of calculated quantities.

Every unit has one rendering, used both on screen and in the log:
    volts, ohms, amps, watts, hertz, seconds  → fixed point, 6 decimals
    percentages                               → fixed point, 2 decimals
    henries, farads                           → scientific, 9 decimals (%.9e)
    counts                                    → plain integer
"""

from enum import Enum


class Unit(str, Enum):
    VOLT = "V"
    OHM = "ohm"
    AMP = "A"
    WATT = "W"
    HERTZ = "Hz"
    SECOND = "s"
    HENRY = "H"
    FARAD = "F"
    PERCENT = "%"
    COUNT = ""


_FIXED_6 = {Unit.VOLT, Unit.OHM, Unit.AMP, Unit.WATT, Unit.HERTZ, Unit.SECOND}
_SCIENTIFIC = {Unit.HENRY, Unit.FARAD}

# Screen labels differ from the log symbol only for resistance
_DISPLAY_UNIT = {
    Unit.OHM: 'ohms',
}


def format_value(value: float, unit: Unit) -> str:
    """
    Render a bare value at the precision its unit calls for.

    Examples:
        format_value(5, Unit.VOLT)         → '5.000000'
        format_value(63.212, Unit.PERCENT) → '63.21'
        format_value(1e-6, Unit.FARAD)     → '1.000000000e-06'
        format_value(3, Unit.COUNT)        → '3'
    """
    if unit in _FIXED_6:
        return f"{value:.6f}"
    if unit in _SCIENTIFIC:
        return f"{value:.9e}"
    if unit == Unit.PERCENT:
        return f"{value:.2f}"
    return f"{int(value)}"


def _with_unit(text: str, unit_text: str) -> str:
    if not unit_text:
        return text
    if unit_text == '%':
        return f"{text}%"
    return f"{text} {unit_text}"


def format_display(name: str, value: float, unit: Unit) -> str:
    """Screen form: 'R1 = 1000.000000 ohms'."""
    unit_text = _DISPLAY_UNIT.get(unit, unit.value)
    return f"{name} = {_with_unit(format_value(value, unit), unit_text)}"


def format_log(name: str, value: float, unit: Unit) -> str:
    """Log form: 'R1=1000.000000 ohm'."""
    return f"{name}={_with_unit(format_value(value, unit), unit.value)}"
