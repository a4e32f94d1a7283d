"""Dependency injection configuration for hexagonal architecture."""

import logging
from functools import lru_cache
from typing import Any, Dict, Optional

from ..domain.models.config import GuardianConfig
from ..domain.ports.report_sink import ReportSink
from ..domain.services.claim_extractor import ClaimExtractor
from ..domain.services.fact_checking_service import FactCheckingService
from ..domain.services.guardian_service import GuardianService
from .config import load_config
from .factcheck.factory import FactCheckProviderFactory
from .sinks.http_sink import HttpReportSink, HttpSinkConfig
from .sinks.memory_sink import InMemoryReportSink

logger = logging.getLogger(__name__)


def build_report_sink(config: GuardianConfig) -> ReportSink:
    """Pick the report sink for the configuration."""
    if config.report_sink_url:
        logger.info(f"💾 Flagged reports will be posted to {config.report_sink_url}")
        return HttpReportSink(HttpSinkConfig(url=config.report_sink_url))
    logger.info("🗂️ REPORT_SINK_URL not set - keeping flagged reports in memory")
    return InMemoryReportSink()


class ServiceContainer:
    """Service container for dependency injection."""

    def __init__(self, config: Optional[GuardianConfig] = None):
        """Initialize service container.

        Args:
            config: Pipeline configuration, loaded from the environment when omitted
        """
        self.config = config or load_config()
        self.provider_factory = FactCheckProviderFactory()
        self._services: Dict[str, Any] = {}
        self._setup_services()

    def _setup_services(self):
        """Setup all services and their dependencies."""
        logger.info("🔧 Setting up service container...")

        remote_provider = self.provider_factory.create_provider("google", self.config)
        report_sink = build_report_sink(self.config)

        fact_checking_service = FactCheckingService(self.config, remote_provider)
        guardian_service = GuardianService(
            config=self.config,
            fact_checker=fact_checking_service,
            claim_extractor=ClaimExtractor(self.config),
            report_sink=report_sink,
        )

        self._services = {
            'fact_checking_service': fact_checking_service,
            'guardian_service': guardian_service,
            'report_sink': report_sink,
        }

        logger.info("✅ Service container setup completed")

    def get(self, service_name: str) -> Any:
        """Get a service by name.

        Args:
            service_name: Name of the service

        Returns:
            Service instance

        Raises:
            KeyError: If service not found
        """
        if service_name not in self._services:
            raise KeyError(f"Service '{service_name}' not found")
        return self._services[service_name]

    def get_guardian_service(self) -> GuardianService:
        """Get the pipeline service."""
        return self.get('guardian_service')

    def get_fact_checking_service(self) -> FactCheckingService:
        """Get fact checking service."""
        return self.get('fact_checking_service')

    def get_report_sink(self) -> ReportSink:
        """Get the report sink."""
        return self.get('report_sink')

    async def shutdown(self) -> None:
        """Release provider and sink resources."""
        await self.provider_factory.shutdown_all()
        await self.get_report_sink().shutdown()


# Global service container instance
@lru_cache()
def get_service_container() -> ServiceContainer:
    """Get global service container instance.

    Returns:
        Service container instance
    """
    return ServiceContainer()


# Convenience functions for FastAPI dependency injection
def get_guardian_service() -> GuardianService:
    """FastAPI dependency for the pipeline service."""
    return get_service_container().get_guardian_service()


def get_report_sink() -> ReportSink:
    """FastAPI dependency for the report sink."""
    return get_service_container().get_report_sink()
