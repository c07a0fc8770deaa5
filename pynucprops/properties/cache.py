#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Name-keyed cache of scattering-center properties

The cache is what data-generation tooling fills while scanning a data
directory: one :class:`~pynucprops.properties.base.ScatteringCenterProperties`
entry per scattering center, plus any number of aliases (``"h"`` or
``"Hydrogen"`` for ``"H"``).  Aliases always resolve to a stored name;
removing an entry removes every alias that points at it.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from pynucprops.exceptions import (
    InvalidScatteringCenterPropertiesData,
    InvalidScatteringCenterPropertiesRequest,
)
from pynucprops.properties.base import ScatteringCenterProperties

logger = logging.getLogger(__name__)


class ScatteringCenterPropertiesCache:
    """Collection of scattering-center properties addressed by name or alias

    Examples
    --------
    >>> from pynucprops.properties.atom import AtomProperties
    >>> cache = ScatteringCenterPropertiesCache()
    >>> cache.add_properties(AtomProperties(1000, 0.999167))
    >>> cache.add_properties_alias("Hydrogen", "H")
    >>> cache.get_properties("Hydrogen").name
    'H'
    """

    def __init__(self) -> None:
        self._properties: dict[str, ScatteringCenterProperties] = {}
        self._aliases: dict[str, str] = {}

    # -- properties ----------------------------------------------------------

    def add_properties(self, properties: ScatteringCenterProperties) -> None:
        """Store a clone of *properties* under ``properties.name``

        An entry with the same name is replaced.  The stored clone shares
        its records (and, for nuclides, its atom properties) with
        *properties*.

        Raises
        ------
        InvalidScatteringCenterPropertiesData
            If the name is already used as an alias.
        """
        name = properties.name
        if name in self._aliases:
            raise InvalidScatteringCenterPropertiesData(
                f"Cannot add properties '{name}': the name is already an "
                f"alias for '{self._aliases[name]}'."
            )
        if name in self._properties:
            logger.warning("Replacing cached properties '%s'.", name)
        self._properties[name] = properties.clone()
        logger.debug("Cached properties '%s'.", name)

    def remove_properties(self, name: str) -> None:
        """Remove the entry *name* and every alias that points at it

        Unknown names are ignored.
        """
        if self._properties.pop(name, None) is None:
            return
        stale = [alias for alias, target in self._aliases.items() if target == name]
        for alias in stale:
            del self._aliases[alias]
        logger.debug(
            "Removed cached properties '%s' and %d alias(es).", name, len(stale)
        )

    def does_properties_exist(self, name: str) -> bool:
        """Check whether *name* is a stored name or an alias"""
        return name in self._properties or name in self._aliases

    def get_properties(self, name: str) -> ScatteringCenterProperties:
        """Return the entry stored under *name* (or the name *name* aliases)

        Raises
        ------
        InvalidScatteringCenterPropertiesRequest
            If *name* is neither a stored name nor an alias.
        """
        target = self._aliases.get(name, name)
        try:
            return self._properties[target]
        except KeyError:
            raise InvalidScatteringCenterPropertiesRequest(
                f"No properties named '{name}' are cached."
            ) from None

    def get_number_of_properties(self) -> int:
        return len(self._properties)

    def list_properties_names(self, stream: TextIO | None = None) -> None:
        stream = stream if stream is not None else sys.stdout
        for name in sorted(self._properties):
            stream.write(f"{name}\n")

    # -- aliases -------------------------------------------------------------

    def add_properties_alias(self, alias: str, name: str) -> None:
        """Make *alias* resolve to the stored entry *name*

        Raises
        ------
        InvalidScatteringCenterPropertiesData
            If *alias* is itself a stored name, or *name* is not stored.
        """
        if alias in self._properties:
            raise InvalidScatteringCenterPropertiesData(
                f"Cannot use '{alias}' as an alias: properties with that "
                f"name are cached."
            )
        if name not in self._properties:
            raise InvalidScatteringCenterPropertiesData(
                f"Cannot alias '{alias}' to '{name}': no properties with "
                f"that name are cached."
            )
        self._aliases[alias] = name

    def does_alias_exist(self, alias: str) -> bool:
        return alias in self._aliases

    def remove_properties_alias(self, alias: str) -> None:
        self._aliases.pop(alias, None)

    def get_number_of_aliases(self) -> int:
        return len(self._aliases)

    def list_aliases(self, stream: TextIO | None = None) -> None:
        stream = stream if stream is not None else sys.stdout
        for alias in sorted(self._aliases):
            stream.write(f"{alias} -> {self._aliases[alias]}\n")

    def clear(self) -> None:
        self._properties.clear()
        self._aliases.clear()
