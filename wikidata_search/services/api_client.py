"""Async client for the Wikidata ``w/api.php`` endpoint."""

from __future__ import annotations

import json
from typing import Any, Mapping

import httpx

from wikidata_search.config import ClientConfig
from wikidata_search.domain.models import QueryRequest, encode_component
from wikidata_search.logging import logger
from wikidata_search.services.exceptions import (
    ClientClosedError,
    HttpError,
    ParseError,
    TransportError,
)


class ApiClient:
    """Builds query URLs and performs one GET per call against the API.

    The client owns its ``httpx.AsyncClient`` session; call :meth:`dispose`
    once it is no longer needed. A custom ``transport`` may be supplied for
    tests or alternative network stacks.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        **overrides: Any,
    ) -> None:
        base = config or ClientConfig()
        if overrides:
            base = ClientConfig.model_validate({**base.model_dump(), **overrides})
        self._config = base
        self._lang = base.lang
        self._session: httpx.AsyncClient | None = httpx.AsyncClient(
            transport=transport,
            timeout=base.timeout_seconds,
            headers={"User-Agent": base.user_agent},
            follow_redirects=True,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def protocol(self) -> str:
        return self._config.protocol

    @property
    def limit(self) -> int:
        return self._config.limit

    @property
    def lang(self) -> str:
        return self._lang

    @lang.setter
    def lang(self, value: str) -> None:
        value = (value or "").strip()
        if not value:
            raise ValueError("Language code must not be empty.")
        self._lang = value

    @property
    def closed(self) -> bool:
        return self._session is None

    @property
    def api_url(self) -> str:
        return self._endpoint(self._lang)

    def _endpoint(self, lang: str) -> str:
        cfg = self._config
        return (
            f"{cfg.protocol}://{cfg.base_url}/{cfg.api_path}"
            f"?format=json&language={encode_component(lang)}"
        )

    def build_url(self, params: Mapping[str, Any], lang: str | None = None) -> str:
        """Render ``params`` onto the endpoint; ``lang`` overrides the client language."""

        query = "".join(
            f"&{name}={encode_component(value)}" for name, value in params.items()
        )
        return f"{self._endpoint(lang or self._lang)}{query}"

    async def get(self, params: Mapping[str, Any], *, lang: str | None = None) -> Any:
        """Issue a GET request and return the decoded JSON body."""

        if self._session is None:
            raise ClientClosedError("API client has been disposed.")

        url = self.build_url(params, lang)
        logger.debug("wikidata_request", url=url)
        try:
            response = await self._session.get(url)
        except httpx.TimeoutException as exc:
            raise TransportError(f"Request timed out: {exc}") from exc
        except httpx.RequestError as exc:
            raise TransportError(f"Request failed: {exc}") from exc

        if response.status_code != httpx.codes.OK:
            raise HttpError(response.status_code)

        body = response.text
        try:
            return json.loads(body)
        except ValueError as exc:
            raise ParseError(f"Response is not valid JSON: {exc}", body) from exc

    async def search(self, term: str, offset: int = 0, lang: str | None = None) -> Any:
        """Search items via ``wbsearchentities``.

        See https://www.wikidata.org/w/api.php?action=help&modules=wbsearchentities
        """

        request = QueryRequest(
            term=term, lang=lang or self._lang, offset=offset, limit=self.limit
        )
        return await self.get(request.to_params(), lang=request.lang)

    async def dispose(self) -> None:
        session, self._session = self._session, None
        if session is not None:
            await session.aclose()


__all__ = ["ApiClient"]
