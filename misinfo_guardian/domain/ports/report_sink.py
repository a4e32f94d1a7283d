"""Protocol for report consumers."""

from typing import Protocol

from ..models.report import MisinformationReport


class ReportSink(Protocol):
    """Protocol for anything that persists or forwards flagged reports."""

    async def publish(self, report: MisinformationReport) -> str:
        """Publish a report and return a handle identifying the stored copy."""
        ...

    async def shutdown(self) -> None:
        """Clean up resources."""
        ...

    @property
    def sink_name(self) -> str:
        """Get the sink name."""
        ...
