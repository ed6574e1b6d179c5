"""In-memory entity cache keyed by Wikidata id."""

from __future__ import annotations

from collections import OrderedDict
from typing import Iterable, Iterator

from wikidata_search.domain.models import Entity
from wikidata_search.services.exceptions import ResultNotFoundError


class ResultCache:
    """Maps entity ids to the last entity data seen for them.

    With ``max_entries`` set, storing past the cap evicts the entity that was
    stored least recently. ``None`` keeps entries for the process lifetime.
    """

    def __init__(self, max_entries: int | None = None) -> None:
        if max_entries is not None and max_entries < 1:
            raise ValueError("max_entries must be positive or None")
        self.max_entries = max_entries
        self._entries: OrderedDict[str, Entity] = OrderedDict()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def store(self, entity: Entity) -> None:
        self._entries[entity.id] = entity
        self._entries.move_to_end(entity.id)
        if self.max_entries is not None:
            while len(self._entries) > self.max_entries:
                self._entries.popitem(last=False)

    def store_many(self, entities: Iterable[Entity]) -> list[str]:
        """Store entities in order and return their ids in the same order."""

        identifiers: list[str] = []
        for entity in entities:
            self.store(entity)
            identifiers.append(entity.id)
        return identifiers

    def get(self, identifier: str) -> Entity | None:
        return self._entries.get(identifier)

    def require(self, identifier: str) -> Entity:
        entity = self._entries.get(identifier)
        if entity is None:
            raise ResultNotFoundError(identifier)
        return entity

    def clear(self) -> None:
        self._entries.clear()


__all__ = ["ResultCache"]
