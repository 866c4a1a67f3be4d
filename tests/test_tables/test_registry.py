"""Tests for lookup tables and the table registry."""

import threading

import pytest

from breeze.tables import TABLE_NAMES, LookupTable, TableRegistry, default_registry


class TestLookupTable:
    def test_from_json_preserves_order(self):
        table = LookupTable.from_json("t", '{"b": "2px", "a": "1px"}')
        assert table.keys() == ("b", "a")
        assert table.get("a") == "1px"
        assert table.get("missing") is None

    def test_duplicate_keys_rejected(self):
        with pytest.raises(ValueError, match="Duplicate"):
            LookupTable.from_json("t", '{"a": "1px", "a": "2px"}')

    def test_non_object_rejected(self):
        with pytest.raises(ValueError):
            LookupTable.from_json("t", '["a"]')

    def test_non_string_value_rejected(self):
        with pytest.raises(ValueError):
            LookupTable.from_json("t", '{"a": 1}')

    def test_entries_read_only(self):
        table = LookupTable.from_json("t", '{"a": "1px"}')
        with pytest.raises(TypeError):
            table.entries["b"] = "2px"  # type: ignore[index]


class TestTableRegistry:
    def test_loads_all_tables(self, registry):
        assert set(registry.names) == set(TABLE_NAMES)

    def test_spacing_values(self, registry):
        assert registry["margin"].get("4") == "1rem"
        assert registry["padding"].get("px") == "1px"
        assert registry["margin"].get("auto") == "auto"
        assert "auto" not in registry["padding"]

    def test_sizing_values(self, registry):
        assert registry["width"].get("1/2") == "50%"
        assert registry["height"].get("screen") == "100vh"

    def test_unknown_table(self, registry):
        with pytest.raises(KeyError, match="nope"):
            registry["nope"]

    def test_subset(self):
        reg = TableRegistry.load(["padding"])
        assert reg.names == ("padding",)


class TestDefaultRegistry:
    def test_same_instance(self):
        assert default_registry() is default_registry()

    def test_concurrent_first_access(self):
        results = []

        def _get():
            results.append(default_registry())

        threads = [threading.Thread(target=_get) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(results) == 8
        assert all(r is results[0] for r in results)
