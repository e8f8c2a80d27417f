"""
EEE Helper Compute Engine

Strict numeric parsing and closed-form electrical formula solvers
(voltage divider, resistor networks, AC reactance/resonance, RC transient,
power law).

Solvers never raise for bad physics: every variant returns a FormulaResult
that is either a value with its log record or an error with a reason.
"""

from eee_engine.parsing import parse_int, parse_float, NumberFormatError
from eee_engine.guards import safe_divide, EPSILON
from eee_engine.formatting import Unit, format_value
from eee_engine.models import ErrorKind, FormulaResult, LogRecord, Quantity
from eee_engine.registry import Module, ModuleSpec, VariantSpec, get_module, get_variant, list_modules

__version__ = "0.1.0"
