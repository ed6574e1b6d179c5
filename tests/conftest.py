"""Shared pytest fixtures for client and provider tests."""

from __future__ import annotations

import httpx
import pytest

from wikidata_search.config import AppSettings, ClientConfig, ProviderSettings
from wikidata_search.services.api_client import ApiClient
from wikidata_search.services.search_provider import SearchProvider


class RecordingOpener:
    def __init__(self) -> None:
        self.urls: list[str] = []

    def __call__(self, url: str) -> None:
        self.urls.append(url)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None, api=ClientConfig(), provider=ProviderSettings())


@pytest.fixture
def opener() -> RecordingOpener:
    return RecordingOpener()


@pytest.fixture
def make_provider(settings: AppSettings, opener: RecordingOpener):
    def factory(handler, app_settings: AppSettings | None = None) -> SearchProvider:
        app_settings = app_settings or settings
        api = ApiClient(app_settings.api, transport=httpx.MockTransport(handler))
        provider = SearchProvider(app_settings, api_client=api, url_opener=opener)
        provider.start()
        return provider

    return factory
