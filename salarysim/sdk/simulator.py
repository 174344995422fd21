"""Simulation engine: validate, compute, record, export.

SalarySimulator owns the history store and the most recent result. The CLI
(or any other front end) calls submit() per user action and shows the
returned notification.
"""

import logging
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

from . import notifications, report
from .config import get_exports_path
from .history import HistoryStore
from .notifications import Notification
from .schemas import SimulationInput, SimulationResult
from .taxes import compute
from .validation import ValidationError, validate

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Simulation completed successfully!"
EXPORT_MESSAGE = "PDF generated successfully!"


@dataclass
class SubmissionOutcome:
    """What a submit produced. result is None when validation failed."""
    result: Optional[SimulationResult]
    notification: Notification

    @property
    def ok(self) -> bool:
        return self.result is not None


@dataclass
class ExportOutcome:
    path: Path
    notification: Notification


class SalarySimulator:
    """Composes validation, tax calculation and the history store."""

    def __init__(self, store: Optional[HistoryStore] = None):
        self.store = store if store is not None else HistoryStore()
        self.store.load()
        self.last_result: Optional[SimulationResult] = None

    @property
    def history(self):
        return self.store.results

    def submit(
        self,
        raw: Union[SimulationInput, Dict[str, Any]],
        now: Optional[datetime] = None,
    ) -> SubmissionOutcome:
        """Run one simulation and record it.

        Validation failures (including inputs too large to compute) don't
        raise: they come back as an error notification and leave history
        and last_result untouched.
        """
        try:
            result = compute(validate(raw), now=now)
        except ValidationError as e:
            logger.debug(f"Rejected simulation input ({e.field}): {e.message}")
            return SubmissionOutcome(None, notifications.error(e.message))

        self.store.append(result)
        self.last_result = result
        logger.info(
            f"Simulation for {result.name}: gross {result.gross_salary:.2f}, "
            f"net {result.net_monthly:.2f}"
        )
        return SubmissionOutcome(result, notifications.success(SUCCESS_MESSAGE))

    def export(
        self,
        output_dir: Optional[Path] = None,
        result: Optional[SimulationResult] = None,
        on: Optional[date] = None,
    ) -> ExportOutcome:
        """Write the PDF report for a result (default: the last one submitted).

        Raises:
            ExportPreconditionError: If there is no result to export
        """
        if result is None:
            result = self.last_result

        # Raises before anything is written
        pdf = report.render(result)

        output_dir = Path(output_dir) if output_dir else get_exports_path()
        output_dir.mkdir(parents=True, exist_ok=True)
        path = output_dir / report.report_filename(result, on=on)
        path.write_bytes(pdf)

        logger.info(f"Exported simulation report to {path}")
        return ExportOutcome(path, notifications.success(EXPORT_MESSAGE))
