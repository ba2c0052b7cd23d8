from __future__ import annotations

import json
import logging

import pytest

from cellstore.codecs import NativeCodec
from cellstore.preference import PreferenceCell
from cellstore.values import DELETE, Store


class BrokenRegister:
    """Accepts reads, rejects every write and delete."""

    def __init__(self, entries=None):
        self.entries = dict(entries or {})

    def get(self, key):
        return self.entries.get(key)

    def set(self, key, value):
        raise OSError("register is read-only")

    def remove(self, key):
        raise OSError("register is read-only")

    def keys(self):
        return list(self.entries)


def test_read_before_write_returns_default(preferences):
    cell = PreferenceCell("volume", 5, register=preferences)
    assert cell.read() == 5


def test_write_then_read_roundtrip(preferences):
    cell = PreferenceCell("recent", [], register=preferences, value_type=list[str])
    cell.write(["a", "b"])
    assert cell.read() == ["a", "b"]
    assert json.loads(preferences.get("recent")) == ["a", "b"]


def test_delete_removes_register_entry(preferences):
    cell = PreferenceCell("volume", 5, register=preferences)
    cell.write(9)
    cell.write(DELETE)
    assert cell.read() == 5
    assert preferences.get("volume") is None
    assert "volume" not in list(preferences.keys())


def test_empty_payload_reads_as_default(preferences):
    preferences.set("volume", b"")
    cell = PreferenceCell("volume", 5, register=preferences)
    assert cell.read() == 5


def test_undecodable_payload_reads_as_default_and_logs(preferences, caplog):
    preferences.set("volume", b"{nope")
    cell = PreferenceCell("volume", 5, register=preferences, value_type=int)
    with caplog.at_level(logging.WARNING, logger="cellstore.base"):
        assert cell.read() == 5
    assert "failed to decode" in caplog.text
    assert "volume" in caplog.text


def test_native_codec_stores_scalars_directly(preferences):
    cell = PreferenceCell("launches", 0, register=preferences, codec=NativeCodec(int))
    cell.write(3)
    assert preferences.get("launches") == 3
    assert cell.read() == 3

    preferences.set("launches", "three")
    assert cell.read() == 0


def test_cache_masks_external_corruption(preferences):
    cell = PreferenceCell("volume", 5, register=preferences, cache_value=True)
    cell.write(7)
    preferences.set("volume", b"garbage")
    assert cell.read() == 7

    preferences.remove("volume")
    assert cell.read() == 7


def test_without_cache_external_corruption_falls_back(preferences):
    cell = PreferenceCell("volume", 5, register=preferences)
    cell.write(7)
    preferences.set("volume", b"garbage")
    assert cell.read() == 5


def test_reads_never_fill_cache(preferences):
    preferences.set("volume", b"8")
    cell = PreferenceCell("volume", 5, register=preferences, cache_value=True)
    assert cell.read() == 8
    preferences.set("volume", b"9")
    assert cell.read() == 9


def test_delete_clears_cache(preferences):
    cell = PreferenceCell("volume", 5, register=preferences, cache_value=True)
    cell.write(7)
    cell.delete()
    preferences.set("volume", b"11")
    assert cell.read() == 11


def test_subscribers_see_writes_only_after_subscribing(preferences):
    cell = PreferenceCell("volume", 5, register=preferences)
    cell.write(1)

    sub = cell.subscribe()
    cell.write(2)
    cell.read()

    late = cell.subscribe()
    assert sub.drain() == [2]
    assert late.drain() == []


def test_delete_publishes_default(preferences):
    cell = PreferenceCell("volume", 5, register=preferences)
    sub = cell.subscribe()
    cell.write(2)
    cell.delete()
    assert sub.drain() == [2, 5]


def test_failed_write_changes_nothing(caplog):
    register = BrokenRegister({"volume": b"3"})
    cell = PreferenceCell("volume", 5, register=register, cache_value=True)
    sub = cell.subscribe()

    with caplog.at_level(logging.WARNING, logger="cellstore.base"):
        cell.write(9)
        cell.delete()

    assert cell.read() == 3
    assert register.entries == {"volume": b"3"}
    assert sub.drain() == []
    assert "failed to write 'volume'" in caplog.text
    assert "failed to delete 'volume'" in caplog.text


def test_none_is_stored_not_deleted(preferences):
    cell = PreferenceCell.optional("token", register=preferences)
    assert cell.read() is None

    cell.write("abc")
    assert cell.read() == "abc"

    cell.write(None)
    assert preferences.get("token") == b"null"
    assert cell.read() is None


def test_apply_and_value_property(preferences):
    cell = PreferenceCell("volume", 5, register=preferences)
    cell.apply(Store(6))
    assert cell.value == 6

    cell.value = 4
    assert preferences.get("volume") == b"4"

    cell.apply(DELETE)
    assert cell.value == 5


def test_cells_with_distinct_keys_share_a_register(preferences):
    a = PreferenceCell("a", 0, register=preferences)
    b = PreferenceCell("b", 0, register=preferences)
    a.write(1)
    b.write(2)
    assert (a.read(), b.read()) == (1, 2)


def test_default_register_comes_from_backends(sandbox_root):
    from cellstore.backends import get_backends

    cell = PreferenceCell("volume", 5)
    cell.write(6)
    assert cell.register is get_backends().preferences
    assert get_backends().preferences.get("volume") == b"6"


def test_cached_value_is_not_aliased_to_caller_object(preferences):
    cell = PreferenceCell("recent", [], register=preferences, cache_value=True)
    written = [1]
    cell.write(written)
    written.append(2)

    assert cell.read() == [1]
    assert preferences.get("recent") == b"[1]"


def test_cached_and_uncached_reads_agree(preferences):
    cached = PreferenceCell("pair", None, register=preferences, cache_value=True)
    uncached = PreferenceCell("pair", None, register=preferences)
    sub = cached.subscribe()

    cached.write((1, 2))

    assert cached.read() == uncached.read() == [1, 2]
    assert sub.drain() == [[1, 2]]


def test_value_of_wrong_type_aborts_write(preferences, caplog):
    cell = PreferenceCell("volume", 5, register=preferences, value_type=int, cache_value=True)
    sub = cell.subscribe()

    with caplog.at_level(logging.WARNING, logger="cellstore.base"):
        cell.write("loud")

    assert preferences.get("volume") is None
    assert cell.read() == 5
    assert sub.drain() == []
    assert "PREFERENCE CELL WRITE" in caplog.text


def test_cell_missing_a_backend_hook_cannot_be_built():
    from cellstore.base import BaseCell

    class ReadOnlyCell(BaseCell[int]):
        def _load(self):
            return None

        def _store(self, payload):
            pass

    with pytest.raises(TypeError):
        ReadOnlyCell("k", 0)
