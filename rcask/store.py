"""Segmented log store that compacts itself after a number of writes."""

from __future__ import annotations

import os
from collections.abc import Iterator

from rcask.kvstore import BytesLike, KVStore

DEFAULT_MAX_WRITES = 10_000
_SUFFIX = ".log"


class RCask:
    """Key-value store over log segments named ``<pattern>.<n>.log``.

    After ``max_writes`` writes the live entries are copied into a fresh
    segment and the old segment is deleted.
    """

    def __init__(
        self,
        directory: str | os.PathLike[str],
        pattern: str,
        max_writes: int = DEFAULT_MAX_WRITES,
    ) -> None:
        self.directory = os.fspath(directory)
        self.pattern = pattern
        self.max_writes = max_writes
        self._writes = 0
        os.makedirs(self.directory, exist_ok=True)
        segments = sorted(self._segment_paths())
        path = segments[-1] if segments else self._segment_path(0)
        self._store = KVStore(path)

    def set(self, key: BytesLike, value: BytesLike) -> None:
        """Store ``value`` under ``key``, compacting when the write limit is hit."""
        self._store.set(key, value)
        self._writes += 1
        if self._writes >= self.max_writes:
            self._compact()

    def get(self, key: str) -> str | None:
        """Return the latest value for ``key`` as text, or None if absent."""
        return self._store.get(key)

    def close(self) -> None:
        """Close the current segment."""
        self._store.close()

    def __enter__(self) -> RCask:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _matches(self, name: str) -> bool:
        return name.startswith(self.pattern) and name.endswith(_SUFFIX)

    def _segment_path(self, index: int) -> str:
        return os.path.join(self.directory, f"{self.pattern}.{index}{_SUFFIX}")

    def _segment_paths(self) -> Iterator[str]:
        with os.scandir(self.directory) as entries:
            for entry in entries:
                if entry.is_file() and self._matches(entry.name):
                    yield entry.path

    def _segment_indices(self) -> Iterator[int]:
        for path in self._segment_paths():
            stem = os.path.basename(path)[: -len(_SUFFIX)]
            suffix = stem.rsplit(".", 1)[-1]
            if suffix.isascii() and suffix.isdigit():
                yield int(suffix)

    def _next_segment_path(self) -> str:
        try:
            indices = list(self._segment_indices())
        except OSError:
            return self._segment_path(0)
        return self._segment_path(max(indices) + 1 if indices else 0)

    def _compact(self) -> None:
        new_store = KVStore(self._next_segment_path())
        try:
            for key, value in self._store.items().items():
                new_store.set(key, value)
        except BaseException:
            new_store.close()
            raise
        old_store = self._store
        old_store.close()
        os.remove(old_store.path)
        self._store = new_store
        self._writes = 0