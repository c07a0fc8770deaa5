#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Abstract interface shared by atom and nuclide properties

Both :class:`~pynucprops.properties.atom.AtomProperties` and
:class:`~pynucprops.properties.nuclide.NuclideProperties` implement
:class:`ScatteringCenterProperties`, so callers can branch on
:meth:`~ScatteringCenterProperties.is_nuclide` and clone either kind
without knowing which one they hold.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pynucprops.models.quantities import ZAID, ZAIDLike, as_zaid
from pynucprops.utils.constants import NEUTRON_REST_MASS_AMU
from pynucprops.utils.validation import validate_atomic_weight_ratio


class ScatteringCenterProperties(ABC):
    """Identity and cloning contract of a scattering center

    Parameters
    ----------
    zaid : ZAID | int
        Identifier of the scattering center.
    atomic_weight_ratio : float
        Mass relative to the neutron rest mass.  Must be strictly positive.
    name : str | None, optional
        Display / cache name.  Defaults to :attr:`ZAID.name`.

    Raises
    ------
    InvalidScatteringCenterPropertiesData
        If *atomic_weight_ratio* is not strictly positive or *zaid* is
        not a valid identifier.
    """

    def __init__(
        self,
        zaid: ZAIDLike,
        atomic_weight_ratio: float,
        name: str | None = None,
    ) -> None:
        validate_atomic_weight_ratio(atomic_weight_ratio)
        self._zaid = as_zaid(zaid)
        self._atomic_weight_ratio = float(atomic_weight_ratio)
        self._name = name if name is not None else self._zaid.name

    @property
    def zaid(self) -> ZAID:
        return self._zaid

    @property
    def name(self) -> str:
        return self._name

    @property
    def atomic_weight_ratio(self) -> float:
        return self._atomic_weight_ratio

    @property
    def atomic_weight(self) -> float:
        """Atomic weight in amu"""
        return self._atomic_weight_ratio * NEUTRON_REST_MASS_AMU

    @abstractmethod
    def is_nuclide(self) -> bool:
        """Check if the scattering center is a nuclide (as opposed to an atom)"""
        ...

    @abstractmethod
    def clone(self) -> ScatteringCenterProperties:
        """Copy the registry structure, sharing every stored record"""
        ...

    @abstractmethod
    def deep_clone(self) -> ScatteringCenterProperties:
        """Copy the registry structure and every stored record"""
        ...

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(name={self._name!r}, "
            f"zaid={self._zaid.raw}, "
            f"atomic_weight_ratio={self._atomic_weight_ratio!r})"
        )
