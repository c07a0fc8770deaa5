#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Tests for the scattering-center properties cache
"""

from __future__ import annotations

import io

import pytest

from pynucprops.exceptions import (
    InvalidScatteringCenterPropertiesData,
    InvalidScatteringCenterPropertiesRequest,
)
from pynucprops.properties.atom import AtomProperties
from pynucprops.properties.cache import ScatteringCenterPropertiesCache
from pynucprops.properties.nuclide import NuclideProperties


@pytest.fixture
def cache() -> ScatteringCenterPropertiesCache:
    cache = ScatteringCenterPropertiesCache()
    cache.add_properties(NuclideProperties(1001, 0.999167))
    cache.add_properties(NuclideProperties(1002, 1.996300))
    return cache


class TestCacheProperties:

    def test_add(self, cache: ScatteringCenterPropertiesCache) -> None:
        assert cache.get_number_of_properties() == 2
        assert cache.does_properties_exist("H1")
        assert cache.get_properties("H2").name == "H2"
        assert cache.get_properties("H1").is_nuclide()

    def test_add_stores_clone(self, h1_properties: NuclideProperties) -> None:
        cache = ScatteringCenterPropertiesCache()
        cache.add_properties(h1_properties)
        stored = cache.get_properties("H1")
        assert stored is not h1_properties
        assert stored.atom_properties is h1_properties.atom_properties
        assert stored.get_photonuclear_data_properties("ACE", 70) is (
            h1_properties.get_photonuclear_data_properties("ACE", 70)
        )

    def test_remove(self, cache: ScatteringCenterPropertiesCache) -> None:
        cache.remove_properties("H1")
        assert not cache.does_properties_exist("H1")
        assert cache.get_number_of_properties() == 1
        cache.remove_properties("H2")
        assert cache.get_number_of_properties() == 0

    def test_get_missing(self, cache: ScatteringCenterPropertiesCache) -> None:
        with pytest.raises(InvalidScatteringCenterPropertiesRequest):
            cache.get_properties("H3")

    def test_list_names(self, cache: ScatteringCenterPropertiesCache) -> None:
        stream = io.StringIO()
        cache.list_properties_names(stream)
        assert stream.getvalue().split() == ["H1", "H2"]


class TestCacheAliases:

    def test_add_alias(self, cache: ScatteringCenterPropertiesCache) -> None:
        cache.add_properties_alias("h", "H1")
        cache.add_properties_alias("Deuterium", "H2")
        assert cache.does_alias_exist("h")
        assert cache.does_properties_exist("Deuterium")
        assert cache.get_properties("h").name == "H1"
        assert cache.get_properties("Deuterium").name == "H2"
        assert cache.get_number_of_aliases() == 2

    @pytest.mark.parametrize(
        "alias, name", [("H1", "H1"), ("h", "h"), ("h", "H3")]
    )
    def test_invalid_alias(
        self, cache: ScatteringCenterPropertiesCache, alias: str, name: str
    ) -> None:
        with pytest.raises(InvalidScatteringCenterPropertiesData):
            cache.add_properties_alias(alias, name)

    def test_remove_alias(self, cache: ScatteringCenterPropertiesCache) -> None:
        cache.add_properties_alias("h", "H1")
        cache.remove_properties_alias("h")
        assert cache.get_number_of_aliases() == 0

    def test_removing_properties_removes_aliases(
        self, cache: ScatteringCenterPropertiesCache
    ) -> None:
        cache.add_properties_alias("h", "H1")
        cache.add_properties_alias("Hydrogen", "H1")
        cache.add_properties_alias("Deuterium", "H2")
        cache.remove_properties("H1")
        assert not cache.does_alias_exist("h")
        assert not cache.does_alias_exist("Hydrogen")
        assert cache.get_number_of_aliases() == 1

    def test_name_clashing_with_alias(self, cache: ScatteringCenterPropertiesCache) -> None:
        cache.add_properties_alias("H", "H1")
        with pytest.raises(InvalidScatteringCenterPropertiesData):
            cache.add_properties(AtomProperties(1000, 0.999167))

    def test_list_aliases(self, cache: ScatteringCenterPropertiesCache) -> None:
        cache.add_properties_alias("h", "H1")
        cache.add_properties_alias("Deuterium", "H2")
        stream = io.StringIO()
        cache.list_aliases(stream)
        assert "h -> H1" in stream.getvalue()
        assert "Deuterium -> H2" in stream.getvalue()

    def test_clear(self, cache: ScatteringCenterPropertiesCache) -> None:
        cache.add_properties_alias("h", "H1")
        cache.clear()
        assert cache.get_number_of_properties() == 0
        assert cache.get_number_of_aliases() == 0
