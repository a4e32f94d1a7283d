"""In-memory report sink."""

import logging
from typing import Dict, List, Optional

from ...domain.models.report import MisinformationReport
from ...domain.ports.report_sink import ReportSink

logger = logging.getLogger(__name__)


class InMemoryReportSink(ReportSink):
    """Keeps published reports in memory, keyed by report id."""

    def __init__(self):
        """Initialize the sink."""
        self._reports: Dict[str, MisinformationReport] = {}

    async def publish(self, report: MisinformationReport) -> str:
        """Store the report; the handle is the report id."""
        self._reports[report.id] = report
        logger.debug(f"🗂️ Stored report {report.id} in memory")
        return report.id

    def get(self, handle: str) -> Optional[MisinformationReport]:
        """Get a published report by handle."""
        return self._reports.get(handle)

    @property
    def reports(self) -> List[MisinformationReport]:
        """Published reports in publication order."""
        return list(self._reports.values())

    async def shutdown(self) -> None:
        """Nothing to release."""
        pass

    @property
    def sink_name(self) -> str:
        """Get the sink name."""
        return "memory"
