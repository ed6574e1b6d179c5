"""Enable/disable lifecycle that registers the provider with the shell."""

from __future__ import annotations

from typing import Callable, Protocol

from wikidata_search.config import AppSettings, get_settings
from wikidata_search.logging import configure_logging, logger
from wikidata_search.services.search_provider import SearchProvider
from wikidata_search.shell.adapter import ShellSearchAdapter


class ProviderRegistry(Protocol):
    def register_provider(self, provider: ShellSearchAdapter) -> None:  # pragma: no cover
        ...

    def unregister_provider(self, provider: ShellSearchAdapter) -> None:  # pragma: no cover
        ...


class WikidataExtension:
    """Owns at most one provider between ``enable()`` and ``disable()``."""

    def __init__(
        self,
        registry: ProviderRegistry,
        *,
        settings: AppSettings | None = None,
        provider_factory: Callable[[AppSettings], SearchProvider] | None = None,
    ) -> None:
        self._registry = registry
        self._settings = settings or get_settings()
        self._provider_factory = provider_factory or (lambda s: SearchProvider(s))
        self._adapter: ShellSearchAdapter | None = None

    @property
    def enabled(self) -> bool:
        return self._adapter is not None

    @property
    def adapter(self) -> ShellSearchAdapter | None:
        return self._adapter

    def enable(self) -> ShellSearchAdapter:
        if self._adapter is not None:
            return self._adapter

        provider = self._provider_factory(self._settings)
        provider.start()
        adapter = ShellSearchAdapter.for_extension(provider, self._settings.extension_path)
        self._registry.register_provider(adapter)
        self._adapter = adapter
        logger.info("extension_enabled", provider_id=adapter.id)
        return adapter

    async def disable(self) -> None:
        adapter, self._adapter = self._adapter, None
        if adapter is None:
            return
        try:
            self._registry.unregister_provider(adapter)
        finally:
            await adapter.provider.stop()
        logger.info("extension_disabled", provider_id=adapter.id)


def init(registry: ProviderRegistry, settings: AppSettings | None = None) -> WikidataExtension:
    """Shell entry point: configure logging and build the extension."""

    settings = settings or get_settings()
    configure_logging(settings.log_level)
    return WikidataExtension(registry, settings=settings)


__all__ = ["ProviderRegistry", "WikidataExtension", "init"]
