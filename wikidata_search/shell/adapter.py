"""Callback-style search provider interface expected by the desktop shell."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Callable, Sequence

from wikidata_search.domain.models import AppInfo
from wikidata_search.logging import logger
from wikidata_search.services.search_provider import SearchProvider

ResultSetCallback = Callable[[list[str]], None]
ResultMetasCallback = Callable[[list[dict[str, Any]]], None]


class Cancellable:
    """Lets the shell abandon a pending result set."""

    def __init__(self) -> None:
        self._cancelled = False
        self._tasks: set[asyncio.Task] = set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def pending_tasks(self) -> int:
        return len(self._tasks)

    def attach(self, task: asyncio.Task) -> None:
        if self._cancelled:
            task.cancel()
            return
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def cancel(self) -> None:
        self._cancelled = True
        tasks, self._tasks = self._tasks, set()
        for task in tasks:
            task.cancel()


class ShellSearchAdapter:
    def __init__(self, provider: SearchProvider, *, app_info: AppInfo | None = None) -> None:
        self.provider = provider
        self.app_info = app_info or AppInfo()

    @property
    def id(self) -> str:
        return self.app_info.id

    @classmethod
    def for_extension(cls, provider: SearchProvider, extension_path: str | Path) -> "ShellSearchAdapter":
        icon_path = Path(extension_path) / "wikidata_logo.svg"
        return cls(provider, app_info=AppInfo(icon_path=str(icon_path)))

    def activate_result(self, identifier: str, terms: Sequence[str], timestamp: int | None = None) -> None:
        self.provider.activate_result(identifier)

    def get_result_metas(self, identifiers: Sequence[str], callback: ResultMetasCallback) -> None:
        metas = self.provider.get_result_metadata(identifiers)
        callback([meta.model_dump() for meta in metas])

    def get_initial_result_set(
        self,
        terms: Sequence[str],
        callback: ResultSetCallback,
        cancellable: Cancellable | None = None,
    ) -> asyncio.Task | None:
        """Schedule a search on the running loop and report ids via ``callback``.

        Terms that are not addressed to this provider are dropped without a
        callback, so other providers can answer them.
        """

        if not self.provider.is_query(terms):
            return None

        task = asyncio.get_running_loop().create_task(
            self.provider.get_initial_results(list(terms))
        )

        def _deliver(done: asyncio.Task) -> None:
            if done.cancelled() or (cancellable is not None and cancellable.cancelled):
                logger.debug("result_set_cancelled", terms=list(terms))
                return
            exc = done.exception()
            if exc is not None:
                logger.error(
                    "result_set_failed",
                    terms=list(terms),
                    error=str(exc),
                    error_type=type(exc).__name__,
                )
                callback([])
                return
            callback(done.result())

        task.add_done_callback(_deliver)
        if cancellable is not None:
            cancellable.attach(task)
        return task

    def get_subset_result_search(self, previous_results: Sequence[str], terms: Sequence[str]) -> list[str]:
        return self.provider.get_subset_results(previous_results, terms)

    def filter_results(self, results: Sequence[str], max_results: int) -> list[str]:
        return self.provider.filter_results(results, max_results)


__all__ = ["Cancellable", "ResultMetasCallback", "ResultSetCallback", "ShellSearchAdapter"]
