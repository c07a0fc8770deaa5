#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed scalar quantities and the ZAID isotope identifier

Units
-----
* :class:`Energy` values are in **MeV**.
* :class:`Temperature` values are in **kelvin**.
* The two are related by ``T = E / k_B`` with
  :data:`~pynucprops.utils.constants.BOLTZMANN_CONSTANT_MEV_PER_K`.

Zero is a valid value for both and denotes data evaluated at 0 K.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from pynucprops.exceptions import InvalidScatteringCenterPropertiesData
from pynucprops.utils.constants import (
    BOLTZMANN_CONSTANT_MEV_PER_K,
    PERIODIC_TABLE,
)
from pynucprops.utils.validation import (
    validate_atomic_mass_number,
    validate_atomic_number,
    validate_non_negative_temperature,
)


def energy_to_kelvin(energy_mev: float) -> float:
    """Convert a temperature expressed as an energy (MeV) to kelvin"""
    return energy_mev / BOLTZMANN_CONSTANT_MEV_PER_K


def kelvin_to_energy(temperature_k: float) -> float:
    """Convert a temperature in kelvin to its energy equivalent (MeV)"""
    return temperature_k * BOLTZMANN_CONSTANT_MEV_PER_K


@dataclass(frozen=True, order=True)
class Energy:
    """A temperature expressed as an energy, k_B·T

    Parameters
    ----------
    value : float
        Energy in MeV.  Must be non-negative and finite.
    """

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))
        validate_non_negative_temperature(self.value, "MeV")

    def __float__(self) -> float:
        return self.value

    def to_temperature(self) -> Temperature:
        return Temperature(energy_to_kelvin(self.value))

    def __str__(self) -> str:
        return f"{self.value:.6e} MeV"


@dataclass(frozen=True, order=True)
class Temperature:
    """A thermodynamic temperature

    Parameters
    ----------
    value : float
        Temperature in kelvin.  Must be non-negative and finite.
    """

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", float(self.value))
        validate_non_negative_temperature(self.value, "K")

    def __float__(self) -> float:
        return self.value

    def to_energy(self) -> Energy:
        return Energy(kelvin_to_energy(self.value))

    def __str__(self) -> str:
        return f"{self.value:.6e} K"


TemperatureLike = Union[Energy, Temperature, float]
"""An evaluation temperature argument; bare floats are interpreted as MeV."""


def as_mev(value: TemperatureLike) -> float:
    """Return *value* as a float in MeV

    :class:`Temperature` values are converted with the Boltzmann constant,
    :class:`Energy` values are unwrapped, and bare numbers are taken to
    already be in MeV.

    Raises
    ------
    InvalidScatteringCenterPropertiesData
        If the resulting energy is negative or not finite.
    """
    if isinstance(value, Temperature):
        return kelvin_to_energy(value.value)
    if isinstance(value, Energy):
        return value.value
    return Energy(value).value


# ---------------------------------------------------------------------------
# ZAID
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ZAID:
    """Isotope identifier packing the atomic and mass numbers as ``Z*1000 + A``

    A mass number of zero identifies the natural element (an *atom*).

    Parameters
    ----------
    raw : int
        Packed identifier, e.g. ``1001`` for H-1 or ``26000`` for Fe.

    Examples
    --------
    >>> ZAID(1001).atom()
    ZAID(raw=1000)
    >>> ZAID(92235).name
    'U235'
    """

    raw: int

    def __post_init__(self) -> None:
        if isinstance(self.raw, ZAID):
            object.__setattr__(self, "raw", self.raw.raw)
        if isinstance(self.raw, bool) or int(self.raw) != self.raw:
            raise InvalidScatteringCenterPropertiesData(
                f"A ZAID must be an integer (got {self.raw!r})."
            )
        object.__setattr__(self, "raw", int(self.raw))
        if self.raw < 0:
            raise InvalidScatteringCenterPropertiesData(
                f"A ZAID must be non-negative (got {self.raw})."
            )
        validate_atomic_number(self.raw // 1000)
        validate_atomic_mass_number(self.raw % 1000)

    @classmethod
    def from_za(cls, Z: int, A: int = 0) -> ZAID:
        validate_atomic_mass_number(A)
        return cls(Z * 1000 + A)

    @property
    def atomic_number(self) -> int:
        return self.raw // 1000

    @property
    def atomic_mass_number(self) -> int:
        return self.raw % 1000

    @property
    def element_symbol(self) -> str:
        return PERIODIC_TABLE[self.atomic_number]

    @property
    def name(self) -> str:
        """``"H1"`` style name, or the bare symbol for an atom"""
        if self.is_atom():
            return self.element_symbol
        return f"{self.element_symbol}{self.atomic_mass_number}"

    def is_atom(self) -> bool:
        return self.atomic_mass_number == 0

    def atom(self) -> ZAID:
        """Return the ZAID of the element this isotope belongs to"""
        return ZAID(self.atomic_number * 1000)

    def __int__(self) -> int:
        return self.raw

    def __str__(self) -> str:
        return str(self.raw)


ZAIDLike = Union[ZAID, int]


def as_zaid(value: ZAIDLike) -> ZAID:
    return value if isinstance(value, ZAID) else ZAID(value)
