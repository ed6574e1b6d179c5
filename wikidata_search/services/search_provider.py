"""Bridges shell search terms to the Wikidata API and caches the results."""

from __future__ import annotations

from typing import Any, Sequence

from pydantic import ValidationError

from wikidata_search.config import AppSettings, get_settings
from wikidata_search.domain.models import Entity, ResultMeta
from wikidata_search.logging import logger
from wikidata_search.services.api_client import ApiClient
from wikidata_search.services.exceptions import (
    ApiError,
    EmptyResultError,
    LaunchError,
    ParseError,
    ProviderNotStartedError,
    ResultNotFoundError,
)
from wikidata_search.services.launcher import UrlOpener, activation_url, xdg_open
from wikidata_search.services.result_cache import ResultCache

BODY_PREVIEW_LIMIT = 500


class SearchProvider:
    """Runs one entity search per query and keeps an id -> entity cache.

    Each query takes a new generation number. A response that arrives after a
    newer query has been issued is dropped without touching the cache.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        api_client: ApiClient | None = None,
        url_opener: UrlOpener | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._api: ApiClient | None = None
        self._injected_api = api_client
        self._open_url = url_opener or xdg_open
        self.cache = ResultCache(self._settings.provider.cache_max_entries)
        self._generation = 0

    @property
    def running(self) -> bool:
        return self._api is not None

    @property
    def api(self) -> ApiClient:
        if self._api is None:
            raise ProviderNotStartedError("Search provider is not started.")
        return self._api

    @property
    def trigger_token(self) -> str:
        return self._settings.provider.trigger_token

    def start(self) -> None:
        if self._api is not None:
            return
        if self._injected_api is not None and not self._injected_api.closed:
            self._api = self._injected_api
        else:
            self._api = ApiClient(self._settings.api)
        logger.info("search_provider_started", lang=self._api.lang)

    async def stop(self) -> None:
        api, self._api = self._api, None
        if api is None:
            return
        # Responses still in flight belong to a session that no longer exists.
        self._generation += 1
        await api.dispose()
        logger.info("search_provider_stopped", cached_entities=len(self.cache))

    def is_query(self, terms: Sequence[str]) -> bool:
        """Only ``<trigger> word [word ...]`` is a query for this provider."""

        return len(terms) >= 2 and terms[0] == self.trigger_token

    async def get_initial_results(self, terms: Sequence[str]) -> list[str]:
        if not self.is_query(terms):
            return []

        api = self._api
        if api is None:
            logger.warning("search_provider_not_running", terms=list(terms))
            return []
        self._generation += 1
        generation = self._generation
        term = " ".join(terms[1:])

        try:
            payload = await api.search(term)
            entities = self._parse_entities(payload)
        except EmptyResultError:
            logger.info("wikidata_no_matches", term=term)
            return []
        except ParseError as exc:
            logger.warning(
                "wikidata_search_failed",
                term=term,
                error=str(exc),
                error_type=type(exc).__name__,
                body=exc.body[:BODY_PREVIEW_LIMIT],
            )
            return []
        except ApiError as exc:
            logger.warning(
                "wikidata_search_failed",
                term=term,
                error=str(exc),
                error_type=type(exc).__name__,
                status_code=getattr(exc, "status_code", None),
            )
            return []

        if generation != self._generation:
            logger.info(
                "wikidata_stale_response_discarded",
                term=term,
                generation=generation,
                latest_generation=self._generation,
            )
            return []

        return self.cache.store_many(entities)

    def get_subset_results(
        self, previous_results: Sequence[str], terms: Sequence[str]
    ) -> list[str]:
        # Refining a previous result set is not supported; the host falls back
        # to a fresh initial search.
        return []

    def get_entity(self, identifier: str) -> Entity:
        return self.cache.require(identifier)

    def get_result_metadata(self, identifiers: Sequence[str]) -> list[ResultMeta]:
        metas: list[ResultMeta] = []
        for identifier in identifiers:
            entity = self.cache.get(identifier)
            if entity is None:
                logger.warning("result_meta_not_found", identifier=identifier)
                continue
            metas.append(entity.to_meta())
        return metas

    def filter_results(self, results: Sequence[str], max_results: int | None = None) -> list[str]:
        """Trim results to the client limit.

        The host's ``max_results`` is ignored unless ``honor_host_max`` is set.
        """

        limit = self._settings.api.limit
        if self._settings.provider.honor_host_max and max_results is not None:
            limit = max(0, min(limit, max_results))
        return list(results[:limit])

    def activation_url(self, identifier: str) -> str:
        entity = self.get_entity(identifier)
        return activation_url(self._settings.api.protocol, entity.url or "")

    def activate_result(self, identifier: str) -> None:
        try:
            url = self.activation_url(identifier)
        except ResultNotFoundError:
            logger.warning("activate_unknown_result", identifier=identifier)
            return
        try:
            self._open_url(url)
        except LaunchError as exc:
            logger.warning("activate_result_failed", identifier=identifier, url=url, error=str(exc))
            return
        logger.info("result_activated", identifier=identifier, url=url)

    def _parse_entities(self, payload: Any) -> list[Entity]:
        items = payload.get("search") if isinstance(payload, dict) else None
        if not isinstance(items, list):
            raise ParseError("Response has no 'search' list.", _preview(payload))
        if not items:
            raise EmptyResultError("No entities matched.")

        entities: list[Entity] = []
        for item in items:
            try:
                entities.append(Entity.model_validate(item))
            except ValidationError as exc:
                logger.warning("wikidata_entity_skipped", item=_preview(item), error=str(exc))
        if not entities:
            raise EmptyResultError("No usable entities in response.")
        return entities


def _preview(value: Any) -> str:
    return repr(value)[:BODY_PREVIEW_LIMIT]


__all__ = ["SearchProvider"]
