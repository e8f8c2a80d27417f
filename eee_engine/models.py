"""Pydantic models for formula inputs, results and log records."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, model_validator

from eee_engine.formatting import Unit, format_display, format_log


class ErrorKind(str, Enum):
    DOMAIN = "domain"            # a precondition on the inputs is violated
    SINGULARITY = "singularity"  # a guarded denominator is (near) zero


class Quantity(BaseModel):
    """A named physical value with its unit."""
    model_config = ConfigDict(frozen=True)

    name: str
    value: float
    unit: Unit

    @classmethod
    def of(cls, name: str, value: float, unit: Unit) -> Quantity:
        return cls(name=name, value=float(value), unit=unit)

    def display(self) -> str:
        return format_display(self.name, self.value, self.unit)

    def log_text(self) -> str:
        return format_log(self.name, self.value, self.unit)


class LogRecord(BaseModel):
    """One successful computation, as it is written to the calculation log."""
    model_config = ConfigDict(frozen=True)

    title: str
    inputs: Tuple[Quantity, ...] = ()
    outputs: Tuple[Quantity, ...]
    note: Optional[str] = None

    def render(self) -> str:
        """
        Single-line summary, e.g.
        'Power: V=12.000000 V, I=0.500000 A -> P=6.000000 W'
        """
        lhs = ", ".join(q.log_text() for q in self.inputs)
        rhs = ", ".join(q.log_text() for q in self.outputs)
        line = f"{self.title}: {lhs} -> {rhs}" if lhs else f"{self.title}: {rhs}"
        if self.note:
            line += f" ({self.note})"
        return line


class FormulaResult(BaseModel):
    """
    Outcome of one solver variant.

    Either a success carrying outputs and the log record, or a failure
    carrying an error kind and a human-readable reason. Never both.
    """
    model_config = ConfigDict(frozen=True)

    outputs: Tuple[Quantity, ...] = ()
    record: Optional[LogRecord] = None
    error: Optional[ErrorKind] = None
    reason: Optional[str] = None

    @model_validator(mode='after')
    def _success_xor_failure(self) -> FormulaResult:
        if self.error is None:
            if not self.outputs or self.record is None or self.reason is not None:
                raise ValueError("a successful result needs outputs and a record, and no reason")
        elif self.outputs or self.record is not None or not self.reason:
            raise ValueError("a failed result carries only an error kind and a reason")
        return self

    @classmethod
    def success(
        cls,
        title: str,
        inputs: List[Quantity],
        outputs: List[Quantity],
        note: Optional[str] = None,
    ) -> FormulaResult:
        record = LogRecord(title=title, inputs=tuple(inputs), outputs=tuple(outputs), note=note)
        return cls(outputs=tuple(outputs), record=record)

    @classmethod
    def domain_error(cls, reason: str) -> FormulaResult:
        return cls(error=ErrorKind.DOMAIN, reason=reason)

    @classmethod
    def singularity(cls, reason: str) -> FormulaResult:
        return cls(error=ErrorKind.SINGULARITY, reason=reason)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def note(self) -> Optional[str]:
        return self.record.note if self.record else None

    def value(self, name: str) -> float:
        """Look up an output value by quantity name."""
        for q in self.outputs:
            if q.name == name:
                return q.value
        raise KeyError(name)

    def display_lines(self) -> List[str]:
        """Lines the shell prints for this result."""
        if not self.ok:
            return [f"Error: {self.reason}"]
        lines = [q.display() for q in self.outputs]
        if self.note:
            lines[0] += f" ({self.note})"
        return lines
