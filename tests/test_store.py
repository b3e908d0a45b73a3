import os

from rcask.store import RCask


def _logs(directory):
    return sorted(name for name in os.listdir(directory) if name.endswith(".log"))


def test_creates_directory_and_first_segment(tmp_path):
    directory = tmp_path / "nested" / "dir"
    with RCask(directory, "data", 5):
        assert _logs(directory) == ["data.0.log"]


def test_set_and_get(tmp_path):
    with RCask(tmp_path, "data", 100) as store:
        store.set("key1", "value1")
        store.set("key2", b"value2")
        assert store.get("key1") == "value1"
        assert store.get("key2") == "value2"
        assert store.get("missing") is None


def test_compaction_after_max_writes(tmp_path):
    with RCask(tmp_path, "data", 3) as store:
        store.set("key1", "value1")
        store.set("key2", "value2")
        assert _logs(tmp_path) == ["data.0.log"]
        store.set("key3", "value3")
        assert _logs(tmp_path) == ["data.1.log"]
        assert store.get("key1") == "value1"
        assert store.get("key2") == "value2"
        assert store.get("key3") == "value3"


def test_compaction_keeps_latest_values_only(tmp_path):
    with RCask(tmp_path, "data", 3) as store:
        store.set("k", "a" * 50)
        store.set("k", "b" * 50)
        size_before = os.path.getsize(tmp_path / "data.0.log")
        store.set("k", "latest")
        assert store.get("k") == "latest"
        assert os.path.getsize(tmp_path / "data.1.log") < size_before


def test_write_counter_resets_after_compaction(tmp_path):
    with RCask(tmp_path, "data", 2) as store:
        store.set("a", "1")
        store.set("b", "2")
        store.set("c", "3")
        assert _logs(tmp_path) == ["data.1.log"]
        store.set("d", "4")
        assert _logs(tmp_path) == ["data.2.log"]
        assert [store.get(k) for k in "abcd"] == ["1", "2", "3", "4"]


def test_every_write_compacts_with_limit_one(tmp_path):
    with RCask(tmp_path, "data", 1) as store:
        store.set("a", "1")
        store.set("a", "2")
        assert _logs(tmp_path) == ["data.2.log"]
        assert store.get("a") == "2"


def test_reopen_uses_existing_segment(tmp_path):
    with RCask(tmp_path, "data", 2) as store:
        store.set("a", "1")
        store.set("b", "2")
        store.set("a", "3")
    with RCask(tmp_path, "data", 2) as reopened:
        assert reopened.get("a") == "3"
        assert reopened.get("b") == "2"
        assert _logs(tmp_path) == ["data.1.log"]


def test_other_patterns_are_left_alone(tmp_path):
    with RCask(tmp_path, "other", 10) as other:
        other.set("x", "y")
    with RCask(tmp_path, "data", 1) as store:
        store.set("a", "1")
        assert _logs(tmp_path) == ["data.1.log", "other.0.log"]
    with RCask(tmp_path, "other", 10) as other:
        assert other.get("x") == "y"
        assert other.get("a") is None


def test_default_limit_does_not_compact_early(tmp_path):
    with RCask(tmp_path, "data") as store:
        assert store.max_writes == 10_000
        for number in range(50):
            store.set(f"k{number}", str(number))
        assert _logs(tmp_path) == ["data.0.log"]
        assert store.get("k49") == "49"