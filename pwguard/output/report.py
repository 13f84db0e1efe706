"""
PwGuard Report Generator
=========================

Machine-readable JSON reports of PwGuard operations, suitable for CI
pipelines and password-policy audits.
"""

from __future__ import annotations

import json
import math
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from shared.models import ScanResult


class PwGuardReportGenerator:
    """Builds JSON reports from :class:`ScanResult` objects.

    Usage::

        reporter = PwGuardReportGenerator(version="1.0.0")
        reporter.generate_json(scan_result, Path("output/report.json"))
    """

    def __init__(self, version: str = "1.0.0") -> None:
        self.version = version

    def build(self, result: ScanResult) -> dict[str, Any]:
        """Assemble the report structure for *result*."""
        return {
            "report_metadata": {
                "generated_at": datetime.now(timezone.utc).isoformat(),
                "tool": result.tool_name,
                "target": result.target,
                "version": self.version,
            },
            "summary": {
                "total_findings": result.finding_count,
                "severity_counts": result.severity_counts,
                "highest_severity": (
                    result.highest_severity.value if result.highest_severity else None
                ),
                "duration_seconds": result.duration_seconds,
                "description": result.summary,
            },
            "findings": [
                {
                    "title": f.title,
                    "description": f.description,
                    "severity": f.severity.value,
                    "evidence": f.evidence,
                    "recommendation": f.recommendation,
                    "references": f.references,
                }
                for f in result.findings
            ],
            "metadata": result.metadata,
        }

    def render_json(self, result: ScanResult) -> str:
        report = _finite(self.build(result))
        return json.dumps(report, indent=2, ensure_ascii=False, allow_nan=False, default=str)

    def generate_json(self, result: ScanResult, output_path: Path) -> Path:
        """Write the JSON report for *result* to *output_path*.

        Returns:
            Path to the generated JSON file.
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render_json(result), encoding="utf-8")
        return output_path


def _finite(value: Any) -> Any:
    """Replace non-finite floats (saturated keyspaces) with their string form."""
    if isinstance(value, float) and not math.isfinite(value):
        return str(value)
    if isinstance(value, dict):
        return {k: _finite(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite(v) for v in value]
    return value
