"""A single append-only log file with an in-memory index of key offsets."""

from __future__ import annotations

import os
import struct
from typing import Union

BytesLike = Union[str, bytes, bytearray, memoryview]

_LENGTH = struct.Struct("<Q")
_WRITE_RETRIES = 2


def _as_bytes(data: BytesLike) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"expected str or bytes-like object, got {type(data).__name__}")


class KVStore:
    """Key-value store persisted as length-prefixed records in one file.

    Each record is laid out as
    ``[key length: u64 LE][key][value length: u64 LE][value]``; the index maps
    every key to the offset of its latest record.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = os.fspath(path)
        self._index: dict[str, int] = {}
        self._file = open(self.path, "a+b", buffering=0)
        try:
            self.load()
        except BaseException:
            self._file.close()
            raise

    def load(self) -> None:
        """Rebuild the index by scanning the whole file from the start."""
        self._file.seek(0)
        while True:
            offset = self._file.tell()
            key = self._read_record()
            if key is None:
                break
            self._index[key.decode("utf-8")] = offset
            if self._read_record() is None:
                break

    def set(self, key: BytesLike, value: BytesLike) -> None:
        """Append a record for ``key`` and point the index at it."""
        key_bytes = _as_bytes(key)
        value_bytes = _as_bytes(value)
        offset = self._file.seek(0, os.SEEK_END)
        record = b"".join(
            (
                _LENGTH.pack(len(key_bytes)),
                key_bytes,
                _LENGTH.pack(len(value_bytes)),
                value_bytes,
            )
        )
        self._write_all(record)
        self._index[key_bytes.decode("utf-8", "replace")] = offset

    def get(self, key: str) -> str | None:
        """Return the latest value for ``key`` as text, or None if absent.

        Raises ValueError if the stored value is not valid UTF-8.
        """
        value = self.get_bytes(key)
        if value is None:
            return None
        return value.decode("utf-8")

    def get_bytes(self, key: str) -> bytes | None:
        """Return the latest raw value for ``key``, or None if absent or incomplete.

        Raises ValueError if the record at the indexed offset holds another key.
        """
        offset = self._index.get(key)
        if offset is None:
            return None
        self._file.seek(offset)
        stored_key = self._read_record()
        if stored_key is None:
            return None
        if stored_key.decode("utf-8") != key:
            raise ValueError("data corruption: key mismatch")
        return self._read_record()

    def items(self) -> dict[str, bytes]:
        """Return every key with its latest readable value."""
        entries: dict[str, bytes] = {}
        for key in list(self._index):
            value = self.get_bytes(key)
            if value is not None:
                entries[key] = value
        return entries

    def close(self) -> None:
        """Close the underlying file."""
        self._file.close()

    def __enter__(self) -> KVStore:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _read_record(self) -> bytes | None:
        header = self._read_exact(_LENGTH.size)
        if header is None:
            return None
        (length,) = _LENGTH.unpack(header)
        return self._read_exact(length)

    def _read_exact(self, size: int) -> bytes | None:
        position = self._file.tell()
        end = os.fstat(self._file.fileno()).st_size
        if size > end - position:
            return None
        chunks = []
        remaining = size
        while remaining:
            chunk = self._file.read(remaining)
            if not chunk:
                return None
            chunks.append(chunk)
            remaining -= len(chunk)
        return b"".join(chunks)

    def _write_all(self, data: bytes) -> None:
        view = memoryview(data)
        failures = 0
        while view:
            try:
                written = self._file.write(view)
            except OSError:
                failures += 1
                if failures > _WRITE_RETRIES:
                    raise
                continue
            view = view[written or 0:]