from __future__ import annotations

import json
import logging
from pathlib import Path

from .models import Report

JSON_SEPARATORS = (",", ":")


def render_report(report: Report) -> str:
    """Render a report as compact JSON followed by a single newline."""
    return json.dumps(report.to_dict(), separators=JSON_SEPARATORS, ensure_ascii=False) + "\n"


class Reporter:
    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger(__name__)

    def build_report_content(self, report: Report) -> str:
        return render_report(report)

    def write_report(self, report: Report, output_path: str | Path) -> str:
        # Render before opening so a failure never truncates an existing report.
        content = self.build_report_content(report)

        with Path(output_path).open("w", encoding="utf-8") as handle:
            handle.write(content)

        self.logger.info("Wrote report for %d users to %s", len(report.users_stats), output_path)
        return content
