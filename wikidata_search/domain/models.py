"""Pydantic models shared by the client, the provider and the shell adapter."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from pydantic import BaseModel, ConfigDict, Field

# encodeURIComponent leaves these unescaped; the API expects the same encoding.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_component(value: Any) -> str:
    return quote(str(value), safe=_URI_COMPONENT_SAFE)


class Entity(BaseModel):
    """One Wikidata item as returned by ``wbsearchentities``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(min_length=1)
    label: str | None = None
    description: str | None = None
    url: str | None = None
    concepturi: str | None = None
    title: str | None = None
    pageid: int | None = None
    repository: str | None = None
    aliases: tuple[str, ...] = ()
    match: dict[str, Any] | None = None

    def to_meta(self) -> "ResultMeta":
        return ResultMeta(id=self.id, name=self.label, description=self.description)


class ResultMeta(BaseModel):
    id: str
    name: str | None = None
    description: str | None = None


class QueryRequest(BaseModel):
    """Query parameters for a single entity search."""

    model_config = ConfigDict(frozen=True)

    term: str
    lang: str = "en"
    offset: int = Field(default=0, ge=0)
    limit: int = Field(default=10, ge=1)

    def to_params(self) -> dict[str, Any]:
        # Order matters for the rendered URL: action, search, type, continue, limit.
        return {
            "action": "wbsearchentities",
            "search": self.term,
            "type": "item",
            "continue": self.offset,
            "limit": self.limit,
        }


class AppInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = "wikidata-search-provider"
    name: str = "Wikidata Search Provider"
    icon_path: str = "wikidata_logo.svg"


__all__ = [
    "AppInfo",
    "Entity",
    "QueryRequest",
    "ResultMeta",
    "encode_component",
]
