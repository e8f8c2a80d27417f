"""
Interactive menu loop.

Walks the module registry: main menu → (group menu) → variant menu →
input prompts → result. Successful results are appended to the log store;
failures are shown and the user returns to the main menu.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Optional

from eee_cli.console import Console
from eee_engine.models import FormulaResult
from eee_engine.parsing import NumberFormatError, parse_int
from eee_engine.registry import (
    GroupSpec,
    InputKind,
    InputSpec,
    ModuleSpec,
    VariantSpec,
    get_module,
    list_modules,
)

logger = logging.getLogger(__name__)


class MenuChoice(int, Enum):
    VOLTAGE_DIVIDER = 1
    RESISTORS = 2
    REACTANCE = 3
    RC_TRANSIENT = 4
    POWER = 5
    VIEW_LOG = 6
    QUIT = 7


class Calculator:
    """
    The EEE Helper session.

    log_store is anything with append(line) -> bool and read_all() -> List[str]
    (see eee_cli.log_store).
    """

    def __init__(self, console: Console, log_store):
        self.console = console
        self.log_store = log_store

    def run(self) -> None:
        """Serve the main menu until the user quits. EndOfInput propagates."""
        while True:
            self.print_menu()
            choice = self.read_choice()

            if choice is None:
                self.console.write("Invalid choice.")
                continue
            if choice == MenuChoice.QUIT:
                self.console.write("Bye!")
                return

            if choice == MenuChoice.VIEW_LOG:
                self.show_log()
            else:
                self.run_module(get_module(choice))

            self.wait_back()

    def print_menu(self) -> None:
        self.console.write("\n====== EEE Helper CLI ======")
        for spec in list_modules():
            self.console.write(f"{int(spec.code)}) {spec.menu_label}")
        self.console.write(f"{int(MenuChoice.VIEW_LOG)}) View saved log")
        self.console.write(f"{int(MenuChoice.QUIT)}) Quit")

    def read_choice(self) -> Optional[MenuChoice]:
        """One main-menu selection; None if it is not a valid menu code."""
        line = self.console.read_line("Select: ")
        try:
            return MenuChoice(parse_int(line))
        except (NumberFormatError, ValueError):
            return None

    def wait_back(self) -> None:
        while True:
            line = self.console.read_line("\nEnter 'b' to go back to the main menu: ")
            if line in ("b", "B"):
                return

    def show_log(self) -> None:
        self.console.write("\n--- Saved Log ---")
        try:
            lines = self.log_store.read_all()
        except OSError:
            logger.warning("Could not read calculation log", exc_info=True)
            self.console.write("Could not read the saved log.")
            return

        if not lines:
            self.console.write("No saved calculations yet.")
        for line in lines:
            self.console.write(line)

    # --- Modules ---

    def run_module(self, spec: ModuleSpec) -> Optional[FormulaResult]:
        """Drive one module from its submenu to a displayed result."""
        self.console.write(f"\n--- {spec.title} ---")

        group = self._select_group(spec)
        if group is None:
            return None

        for variant in group.variants:
            self.console.write(f"{int(variant.code)}) {variant.label}")

        mode = self.console.read_int("Select: ")
        try:
            variant = group.get_variant(mode)
        except ValueError:
            self.console.write("Invalid selection.")
            return None

        return self.run_variant(variant)

    def _select_group(self, spec: ModuleSpec) -> Optional[GroupSpec]:
        if not spec.has_groups:
            group = spec.groups[0]
            if group.heading:
                self.console.write(group.heading)
            return group

        for group in spec.groups:
            self.console.write(f"{int(group.code)}) {group.label}")

        code = self.console.read_int("Select: ")
        try:
            group = spec.get_group(code)
        except ValueError:
            self.console.write("Invalid selection.")
            return None

        self.console.write(f"\n{group.heading}")
        return group

    def run_variant(self, variant: VariantSpec) -> FormulaResult:
        """Collect the variant's inputs, solve, show and log the result."""
        values: Dict = {}
        for spec in variant.inputs:
            failure = self._read_input(spec, values)
            if failure is not None:
                self._report(variant, failure)
                return failure

        result = variant.evaluate(values)
        self._report(variant, result)
        return result

    def _read_input(self, spec: InputSpec, values: Dict) -> Optional[FormulaResult]:
        if spec.kind == InputKind.REAL:
            values[spec.key] = self.console.read_float(spec.prompt)
        elif spec.kind == InputKind.COUNT:
            count = self.console.read_int(spec.prompt)
            if spec.minimum is not None and count < spec.minimum:
                return FormulaResult.domain_error(spec.minimum_reason)
            values[spec.key] = count
        else:
            length = values[spec.count_key] - spec.count_offset
            values[spec.key] = [
                self.console.read_float(spec.prompt.format(i=i))
                for i in range(1, length + 1)
            ]
        return None

    def _report(self, variant: VariantSpec, result: FormulaResult) -> None:
        for line in result.display_lines():
            self.console.write(line)

        if not result.ok:
            logger.debug("%s rejected (%s): %s", variant.label, result.error.value, result.reason)
            return

        line = result.record.render()
        if not self.log_store.append(line):
            logger.warning("Result not saved to log: %s", line)
