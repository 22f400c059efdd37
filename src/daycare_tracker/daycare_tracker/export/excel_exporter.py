from __future__ import annotations

from dataclasses import asdict
from pathlib import Path

import pandas as pd
from werkzeug.utils import secure_filename

from ..core.app_logger import get_logger
from ..core.constants import DEFAULT_EXPORT_FILENAME, SHEET_ANNUAL, SHEET_MONTHLY, SHEET_RECORDS
from ..reimbursement.service import ReportData

logger = get_logger(__name__)

RECORD_COLUMNS = [
    "date",
    "child_id",
    "child_name",
    "in_time",
    "out_time",
    "breakfast",
    "am_snack",
    "lunch",
    "pm_snack",
    "snacks",
    "amount",
    "provenance",
    "edited_by",
    "edit_reason",
    "updated_at",
]

MONTHLY_COLUMNS = {
    "key": "month",
    "breakfasts": "breakfasts",
    "snacks": "snacks",
    "lunches": "lunches",
    "total": "total",
    "rate_year": "rate_year",
}

ANNUAL_COLUMNS = dict(MONTHLY_COLUMNS, key="year")


class WorkbookExporter:
    """Write the three-sheet reimbursement workbook.

    Each account gets its own folder under the export directory, so two
    users exporting at once never share a file.
    """

    def __init__(self, output_dir: str | Path, *, filename: str = DEFAULT_EXPORT_FILENAME) -> None:
        self.output_dir = Path(output_dir)
        self.filename = filename

    def path_for(self, uid: str) -> Path:
        folder = secure_filename(uid)
        if not folder:
            raise ValueError(f"uid {uid!r} cannot be used as a folder name")
        return self.output_dir / folder / self.filename

    def export(self, report: ReportData, uid: str) -> Path:
        path = self.path_for(uid)
        path.parent.mkdir(parents=True, exist_ok=True)

        records = pd.DataFrame(report.rows, columns=RECORD_COLUMNS)
        monthly = pd.DataFrame([asdict(s) for s in report.monthly], columns=list(MONTHLY_COLUMNS))
        monthly = monthly.rename(columns=MONTHLY_COLUMNS)
        annual = pd.DataFrame([asdict(s) for s in report.annual], columns=list(ANNUAL_COLUMNS))
        annual = annual.rename(columns=ANNUAL_COLUMNS)

        with pd.ExcelWriter(path, engine="openpyxl") as writer:
            records.to_excel(writer, index=False, sheet_name=SHEET_RECORDS)
            monthly.to_excel(writer, index=False, sheet_name=SHEET_MONTHLY)
            annual.to_excel(writer, index=False, sheet_name=SHEET_ANNUAL)

        logger.info("exported %s records to %s", len(records), path)
        return path
