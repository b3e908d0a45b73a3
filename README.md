# rcask

A small key-value store inspired by Bitcask. Every write is appended to a log
segment on disk. An in-memory index maps each key to the offset where its
latest entry starts. Once a set number of writes has happened, the live
entries are copied into a fresh segment and the old segment is deleted.

It has no dependencies outside the standard library.

## Installing

```
pip install .
```

## Using the store

```python
from rcask.store import RCask

with RCask("./data", "log", 3) as store:
    store.set("key1", "value1")
    store.set("key2", b"raw bytes are fine too")
    print(store.get("key1"))    # 'value1'
    print(store.get("missing")) # None
```

- `directory` is created if it does not exist.
- `pattern` is the prefix of the segment files. New segments are named
  `<pattern>.<n>.log`; any file in the directory whose name starts with
  `pattern` and ends in `.log` counts as a segment.
- `max_writes` is the number of writes after which compaction runs. It
  defaults to 10,000 (`rcask.store.DEFAULT_MAX_WRITES`).

Keys and values given to `set` may be `str` or bytes-like; text is stored as
UTF-8. `get` takes a `str` key and returns the value decoded as UTF-8, or
`None` if the key is absent. A stored value that is not valid UTF-8 makes
`get` raise `ValueError`.

When the store opens, it continues writing to the last matching segment in
sorted file-name order and rebuilds the index by scanning that segment. The
write count starts at zero each time a store is opened. Compaction writes the
live entries to the segment numbered one above the highest existing number,
then closes and removes the old segment.

`close()` closes the current segment; the store is also a context manager.

### A single segment

`rcask.kvstore.KVStore` works directly on one log file:

```python
from rcask.kvstore import KVStore

with KVStore("data.0.log") as kv:
    kv.set("a", "1")
    kv.get("a")        # '1'
    kv.get_bytes("a")  # b'1'
    kv.items()         # {'a': b'1'}
```

Each entry is stored as `[key length: u64 LE][key][value length: u64 LE][value]`.
`load()` rescans the file and updates the index; a trailing incomplete entry is
ignored. `get_bytes` raises `ValueError` if the entry at a key's indexed offset
holds a different key.

## Command line

```
rcask
rcask --directory ./data
```

This runs a short demonstration in the given directory (the current directory
by default). It opens a store with pattern `log` that compacts after three
writes, and a second store with pattern `default_log` and the default limit,
which it leaves empty apart from creating its first segment file. It writes
`key1` to `key3`, prints the values it reads back, then overwrites `key1` and
prints the new value.

## What it does not do

- There is no way to delete a key.
- Only the current segment is read; older segments left in the directory are
  not merged into the index.
- There is no file locking, so two processes must not open the same directory
  and pattern at once.
- There is no server or network interface; the store is used from Python.