# test_namespace.py

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from tinted.namespace import (
    PALETTE, NamespaceRegistry, color_for, name_hash, namespace, select_color,
)


class TestSelectColor:
    """Hash-to-palette reduction, checked against precomputed values."""

    def test_palette_size(self):
        assert len(PALETTE) == 76
        assert len(set(PALETTE)) == 76

    @pytest.mark.parametrize("name,expected_hash", [
        ("", 0),
        ("a", 97),
        ("foo", 101574),
        ("app:server", -1502369092),
        ("http-server", -433035224),
        ("worker.pool.queue", -620598993),
        ("database/migrations", 798612345),
    ])
    def test_hash_wraps_to_signed_32_bits(self, name, expected_hash):
        assert name_hash(name) == expected_hash

    @pytest.mark.parametrize("name,expected", [
        ("", 20),
        ("a", 75),
        ("foo", 148),
        ("app:server", 92),
        ("http-server", 206),
        ("worker.pool.queue", 63),
        ("database/migrations", 45),
    ])
    def test_reference_colors(self, name, expected):
        assert select_color(name) == expected

    def test_iterates_code_points_not_bytes(self):
        assert name_hash("é") == 233
        assert select_color("é") == 33
        assert name_hash("日本") == 835047
        assert select_color("日本") == 129

    def test_stable_across_calls(self):
        assert all(select_color("scheduler") == select_color("scheduler") for _ in range(10))


class TestColorFor:
    def test_indexed_foreground_style(self):
        style = color_for("foo")
        assert style.attrs == [38, 5, 148]
        assert style.set_code() == "\x1b[38;5;148m"


class TestNamespaceRegistry:
    def setup_method(self):
        self.registry = NamespaceRegistry()

    def test_lazily_populated(self):
        assert len(self.registry) == 0
        self.registry.get("db")
        assert "db" in self.registry
        assert len(self.registry) == 1

    def test_same_object_for_same_name(self):
        assert self.registry.get("db") is self.registry.get("db")

    def test_value_carries_name_and_color(self):
        ns = self.registry.get("foo")
        assert ns.value == "foo"
        assert format(ns, "") == "\x1b[38;5;148mfoo\x1b[0m"

    def test_concurrent_first_lookups_share_one_entry(self):
        barrier = threading.Barrier(8)

        def lookup(_):
            barrier.wait()
            return self.registry.get("shared")

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lookup, range(8)))

        assert len(self.registry) == 1
        assert all(r is results[0] for r in results)

    def test_module_level_namespace_is_cached(self):
        assert namespace("tinted-tests") is namespace("tinted-tests")
