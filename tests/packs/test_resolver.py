"""Tests for per-session pack resolution."""

import random

import pytest

from peon.config.app import PeonConfig
from peon.packs.resolver import resolve_pack

pytestmark = pytest.mark.unit


class TestResolvePack:
    """Tests for resolve_pack function."""

    def test_no_rotation_uses_active_pack(self):
        """Test that the active pack wins when rotation is empty."""
        config = PeonConfig(active_pack="peon")
        result = resolve_pack(config, {"s1": "sc_kerrigan"}, "s1", ["peon", "sc_kerrigan"], random.Random(0))
        assert result == "peon"

    def test_pinned_pack_kept(self):
        """Test that a session keeps a pin that is still in the rotation."""
        config = PeonConfig(pack_rotation=["peon", "peasant"])
        result = resolve_pack(config, {"s1": "peasant"}, "s1", ["peon", "peasant"], random.Random(0))
        assert result == "peasant"

    def test_pin_outside_rotation_replaced(self):
        """Test that a pin no longer in the rotation is re-drawn."""
        config = PeonConfig(pack_rotation=["peon"])
        result = resolve_pack(config, {"s1": "peasant"}, "s1", ["peon", "peasant"], random.Random(0))
        assert result == "peon"

    def test_draws_only_installed_packs(self):
        """Test that rotation entries missing on disk are never chosen."""
        config = PeonConfig(pack_rotation=["peon", "missing"])
        rng = random.Random(3)
        for _ in range(20):
            assert resolve_pack(config, {}, "s1", ["peon"], rng) == "peon"

    def test_no_installed_rotation_falls_back(self):
        """Test fallback to the active pack when no rotation pack is installed."""
        config = PeonConfig(active_pack="peon", pack_rotation=["missing"])
        assert resolve_pack(config, {}, "s1", ["peon"], random.Random(0)) == "peon"

    def test_idempotent_under_pin(self):
        """Test that resolving again after pinning returns the same pack."""
        config = PeonConfig(pack_rotation=["peon", "peasant", "grunt"])
        available = ["peon", "peasant", "grunt"]
        rng = random.Random(11)
        session_packs: dict[str, str] = {}

        first = resolve_pack(config, session_packs, "s1", available, rng)
        session_packs["s1"] = first
        for _ in range(10):
            assert resolve_pack(config, session_packs, "s1", available, rng) == first

    def test_does_not_modify_pins(self):
        """Test that resolution leaves the pin map untouched."""
        config = PeonConfig(pack_rotation=["peon"])
        session_packs: dict[str, str] = {}
        resolve_pack(config, session_packs, "s1", ["peon"], random.Random(0))
        assert session_packs == {}
