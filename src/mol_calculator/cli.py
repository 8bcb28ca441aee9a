"""
Console entry point.

Interactive mode reads a formula and then an amount, and prints the atom
breakdown, the formula weight and the conversion table. Lines starting with
":" are commands. One-shot mode takes --formula / --amount and exits.
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional

from dotenv import load_dotenv

from .calculator import MolCalculator
from .config import CalculatorSettings, CountNotation, validate_config
from .errors import AtomTableError
from .formatting import HelpFormatter, ReportFormatter
from .session_logger import LOG_FORMAT, OperationType, SessionLogger
from .utils.subscripts import subscript_counts, to_subscript_all, to_subscript_last_char

QUIT_COMMANDS = {":quit", ":q", ":exit"}


class ConsoleSession:
    """State of one console session: calculator, formatter and last formula."""

    def __init__(
        self,
        calculator: MolCalculator,
        settings: CalculatorSettings,
        session_logger: Optional[SessionLogger] = None,
    ):
        self.calculator = calculator
        self.settings = settings
        self.session_logger = session_logger
        self.formatter = ReportFormatter(
            calculator.atom_table,
            mass_decimals=settings.mass_decimals,
            moles_decimals=settings.moles_decimals,
        )
        self.last_formula = ""

    def calculate(self, formula: str, amount_text: str = "") -> str:
        """Run one calculation and return the rendered output."""
        if self.settings.count_notation is CountNotation.SUBSCRIPT_OR_ASCII:
            formula = subscript_counts(formula)
        self.last_formula = formula

        if self.session_logger is None:
            report = self.calculator.calculate(formula, amount_text)
        else:
            with self.session_logger.operation(OperationType.CALCULATE):
                report = self.calculator.calculate(formula, amount_text)
            self.session_logger.log_calculation(report)

        return self.formatter.format(report)

    def handle_command(self, line: str) -> str:
        """
        Execute a ":" command and return its output.

        :sub and :suball act on their argument, or on the last formula
        when called without one.
        """
        command, _, argument = line.strip().partition(" ")
        argument = argument.strip()

        if command == ":help":
            return "\n\n".join([
                HelpFormatter.format_usage(),
                HelpFormatter.format_units(),
            ])
        if command == ":elements":
            return HelpFormatter.format_elements(self.calculator.atom_table)
        if command == ":units":
            return HelpFormatter.format_units()
        if command in (":sub", ":suball"):
            text = argument or self.last_formula
            if not text:
                return "No formula to convert"
            convert = to_subscript_last_char if command == ":sub" else to_subscript_all
            if self.session_logger is None:
                converted = convert(text)
            else:
                with self.session_logger.operation(OperationType.CONVERT_SUBSCRIPT):
                    converted = convert(text)
            self.last_formula = converted
            return converted

        return f"Unknown command: {command} (type :help)"


def run_interactive(
    session: ConsoleSession,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> None:
    """Read formula/amount pairs until :quit or end of input."""
    output_fn("Molar mass calculator (type :help for usage, :quit to exit)\n")
    try:
        while True:
            line = input_fn("Formula: ").strip()
            if not line:
                continue
            if line in QUIT_COMMANDS:
                break
            if line.startswith(":"):
                output_fn(session.handle_command(line) + "\n")
                continue

            amount_text = input_fn("Amount (e.g. 1 mol, 10 g; empty to skip): ").strip()
            output_fn(session.calculate(line, amount_text) + "\n")
    except (KeyboardInterrupt, EOFError):
        output_fn("")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mol-calculator",
        description="Formula weight and mol / g / L / particle conversion",
    )
    parser.add_argument("--formula", help="Formula for a single calculation, e.g. H₂O")
    parser.add_argument("--amount", default="", help='Amount with unit, e.g. "18 g"')
    parser.add_argument(
        "--notation",
        choices=[notation.value for notation in CountNotation],
        help="Count notation (default: MOLCALC_COUNT_NOTATION or subscript)",
    )
    parser.add_argument("--atom-table", help="Path to an atom table YAML file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log to stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_arg_parser().parse_args(argv)

    try:
        validate_config()
        settings = CalculatorSettings.from_env()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    if args.notation:
        settings.count_notation = CountNotation(args.notation)
    if args.atom_table:
        settings.atom_table_path = args.atom_table

    errors = settings.validate()
    if errors:
        for error in errors:
            print(f"Configuration error: {error}", file=sys.stderr)
        return 2

    if args.verbose:
        logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    session_logger = SessionLogger(
        logs_dir=settings.logs_dir,
        log_level=settings.log_level,
        enable_file_logging=settings.enable_file_logging,
        enable_console_logging=args.verbose,
    )

    try:
        with session_logger.operation(OperationType.LOAD_ATOM_TABLE):
            calculator = MolCalculator.from_settings(settings)
    except AtomTableError as e:
        print(f"Cannot load atom table: {e}", file=sys.stderr)
        session_logger.close()
        return 1

    session = ConsoleSession(calculator, settings, session_logger)
    try:
        if args.formula is not None:
            print(session.calculate(args.formula, args.amount))
        else:
            run_interactive(session)
    finally:
        session_logger.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
