"""
Session logging for mol_calculator.

One logger per console session. Operations are timed with a context
manager; calculation results are logged as tabulate grid tables.
"""

import logging
import time
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, List, Optional

from tabulate import tabulate

from .models.report import CalculationReport

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class OperationType(str, Enum):
    """Operations recorded in the session log."""

    LOAD_ATOM_TABLE = "LOAD_ATOM_TABLE"
    CALCULATE = "CALCULATE"
    CONVERT_SUBSCRIPT = "CONVERT_SUBSCRIPT"


@dataclass
class OperationTimer:
    """Context manager measuring one operation."""
    logger: 'SessionLogger'
    operation_type: str
    start_time: float = field(default_factory=time.time)
    operation_id: str = field(default_factory=lambda: uuid.uuid4().hex[:8])

    def __enter__(self):
        self.logger.log_debug(f"Started operation: {self.operation_type} (ID: {self.operation_id})")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration_ms = (time.time() - self.start_time) * 1000
        if exc_type:
            self.logger.log_error(
                f"Failed operation: {self.operation_type} "
                f"(ID: {self.operation_id}) ({duration_ms:.1f}ms) - {exc_val}"
            )
        else:
            self.logger.log_debug(
                f"Completed operation: {self.operation_type} "
                f"(ID: {self.operation_id}) ({duration_ms:.1f}ms)"
            )
        return False  # do not suppress exceptions


class SessionLogger:
    """
    Logger for one console session.

    Attributes:
        session_id: Session identifier (timestamp if not given)
        log_file: Path of the session log file, None if file logging is off
    """

    def __init__(
        self,
        logs_dir: str = "logs/sessions",
        session_id: Optional[str] = None,
        log_level: str = "INFO",
        enable_file_logging: bool = True,
        enable_console_logging: bool = True,
    ):
        """
        Args:
            logs_dir: Directory for log files
            session_id: Session ID, generated if omitted
            log_level: Logging level name
            enable_file_logging: Write session_<id>.log
            enable_console_logging: Echo to stderr
        """
        self.session_id = session_id or datetime.now().strftime("%Y%m%d_%H%M%S")
        self.logs_dir = Path(logs_dir)
        self.log_file: Optional[Path] = None

        self.logger = logging.getLogger(f"mol_calculator.session.{self.session_id}")
        self.logger.setLevel(log_level)
        self.logger.handlers.clear()
        self.logger.propagate = False

        formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

        if enable_console_logging:
            console_handler = logging.StreamHandler()
            console_handler.setLevel(log_level)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if enable_file_logging:
            self.logs_dir.mkdir(parents=True, exist_ok=True)
            self.log_file = self.logs_dir / f"session_{self.session_id}.log"
            file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

        if not self.logger.handlers:
            self.logger.addHandler(logging.NullHandler())

    def log_debug(self, message: str):
        self.logger.debug(message)

    def log_info(self, message: str):
        self.logger.info(message)

    def log_warning(self, message: str):
        self.logger.warning(message)

    def log_error(self, message: str):
        self.logger.error(message)

    def operation(self, operation_type: OperationType) -> OperationTimer:
        """Time an operation: `with session.operation(OperationType.CALCULATE): ...`"""
        return OperationTimer(logger=self, operation_type=operation_type.value)

    @staticmethod
    def format_table(headers: List[str], rows: List[List[Any]]) -> str:
        """Grid table of rows, "No data to display" if empty."""
        if not rows:
            return "No data to display"
        return tabulate(rows, headers=headers, tablefmt="grid", floatfmt=".4g", missingval="N/A")

    def log_calculation(self, report: CalculationReport):
        """Log one calculation as a summary table, or its failure."""
        if report.error is not None:
            self.log_warning(
                f"Calculation rejected [{report.error.kind.value}]: {report.error.message}"
            )
            return

        rows = [[atom.symbol, atom.count] for atom in report.atoms]
        table = self.format_table(["Symbol", "Count"], rows)
        self.log_info(
            f"FORMULA {report.formula!r} (x{report.molecule_count}), "
            f"M = {report.total_molar_mass:.3f} g/mol:\n{table}"
        )

        if report.conversion is not None and report.conversion.is_computed:
            conversion = report.conversion.to_dict()
            rows = [[name, value] for name, value in conversion.items()]
            self.log_info(f"CONVERSION {report.amount_text!r}:\n{self.format_table(['Quantity', 'Value'], rows)}")

    def close(self):
        """Flush and detach all handlers."""
        for handler in list(self.logger.handlers):
            handler.flush()
            handler.close()
            self.logger.removeHandler(handler)
