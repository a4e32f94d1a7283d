"""Factory for creating and managing fact-check providers."""

import logging
from typing import Callable, Dict, Optional

from ...domain.models.config import GuardianConfig
from ...domain.ports.fact_check_provider import FactCheckProvider
from .google_adapter import GoogleFactCheckAdapter, GoogleFactCheckConfig

logger = logging.getLogger(__name__)

ProviderBuilder = Callable[[GuardianConfig], Optional[FactCheckProvider]]


def build_google_provider(config: GuardianConfig) -> Optional[FactCheckProvider]:
    """Build the Google adapter, or None when no API key is configured."""
    if not config.remote_fact_check_enabled:
        return None
    return GoogleFactCheckAdapter(
        GoogleFactCheckConfig(
            api_key=config.google_fact_check_api_key,
            timeout=config.request_timeout,
            cache_ttl=config.cache_ttl,
            cache_maxsize=config.cache_maxsize,
            language_code=config.fact_check_language_code,
        )
    )


class FactCheckProviderFactory:
    """Factory for creating and managing fact-check providers.

    Keeps a registry of provider builders and the provider instances that
    were created from them.
    """

    def __init__(self):
        """Initialize the factory."""
        self._provider_registry: Dict[str, ProviderBuilder] = {}
        self._active_providers: Dict[str, FactCheckProvider] = {}

        self.register_provider("google", build_google_provider)

    def register_provider(self, name: str, builder: ProviderBuilder) -> None:
        """Register a new provider builder.

        Args:
            name: Unique identifier for the provider
            builder: Callable building the provider from the configuration

        Raises:
            ValueError: If the name is already registered
        """
        if name in self._provider_registry:
            raise ValueError(f"Provider {name} already registered")
        self._provider_registry[name] = builder

    def create_provider(self, name: str, config: GuardianConfig) -> Optional[FactCheckProvider]:
        """Create a provider from the configuration.

        Args:
            name: Name of the provider to create
            config: Pipeline configuration

        Returns:
            Provider instance, or None when the configuration does not enable it

        Raises:
            ValueError: If provider not found
        """
        if name not in self._provider_registry:
            raise ValueError(f"Provider {name} not registered")

        provider = self._provider_registry[name](config)
        if provider is None:
            logger.info(f"🎭 Fact-check provider {name} not configured")
            return None

        self._active_providers[name] = provider
        logger.info(f"✅ Fact-check provider {name} ready")
        return provider

    def get_provider(self, name: str) -> Optional[FactCheckProvider]:
        """Get an active provider instance by name."""
        return self._active_providers.get(name)

    async def shutdown_all(self) -> None:
        """Shutdown all active providers."""
        for name in list(self._active_providers.keys()):
            await self._active_providers.pop(name).shutdown()

    @property
    def available_providers(self) -> Dict[str, bool]:
        """Get dictionary of registered providers and their availability."""
        return {
            name: name in self._active_providers
            for name in self._provider_registry
        }
