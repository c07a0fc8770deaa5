#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Argument validation routines for scattering-center properties

Every validation function raises
:class:`~pynucprops.exceptions.InvalidScatteringCenterPropertiesData` when a
constraint is violated.  Quantity types, data-properties records and the
property registries call these functions at construction time so that no
half-built object escapes to the caller.

Checked Constraints
-------------------
* Atomic number must be in the range 1 ≤ Z ≤ 118.
* Atomic mass number must be in the range 0 ≤ A ≤ 999 (0 denotes an atom).
* Atomic weight ratio must be strictly positive and finite.
* Temperatures (MeV or K) must be non-negative and finite.
* File versions must be non-negative integers.

Design Note
-----------
Validation functions accept plain scalars — **not** model instances — so
that the ``models`` layer can use them without an import cycle::

    utils ← models ← properties
"""

from __future__ import annotations

import logging
import numbers

import numpy as np

from pynucprops.exceptions import InvalidScatteringCenterPropertiesData

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Limits
# ---------------------------------------------------------------------------

MIN_ATOMIC_NUMBER: int = 1
"""Smallest valid atomic number (hydrogen)."""

MAX_ATOMIC_NUMBER: int = 118
"""Largest valid atomic number (oganesson)."""

MAX_ATOMIC_MASS_NUMBER: int = 999
"""Largest mass number representable in the three trailing ZAID digits."""


# ---------------------------------------------------------------------------
# Validation functions
# ---------------------------------------------------------------------------

def validate_atomic_number(Z: int) -> None:
    """Verify that *Z* is a valid atomic number

    Parameters
    ----------
    Z : int
        Atomic number to validate.

    Raises
    ------
    InvalidScatteringCenterPropertiesData
        If *Z* is outside the range [1, 118].

    Examples
    --------
    >>> validate_atomic_number(26)  # Iron — OK
    >>> validate_atomic_number(0)   # doctest: +ELLIPSIS
    Traceback (most recent call last):
        ...
    pynucprops.exceptions.InvalidScatteringCenterPropertiesData: ...
    """
    if not (MIN_ATOMIC_NUMBER <= Z <= MAX_ATOMIC_NUMBER):
        raise InvalidScatteringCenterPropertiesData(
            f"Atomic number Z={Z} is outside the valid range "
            f"[{MIN_ATOMIC_NUMBER}, {MAX_ATOMIC_NUMBER}]."
        )


def validate_atomic_mass_number(A: int) -> None:
    """Verify that *A* fits the ZAID mass-number field"""
    if not (0 <= A <= MAX_ATOMIC_MASS_NUMBER):
        raise InvalidScatteringCenterPropertiesData(
            f"Atomic mass number A={A} is outside the valid range "
            f"[0, {MAX_ATOMIC_MASS_NUMBER}]."
        )


def validate_atomic_weight_ratio(ratio: float, label: str = "atomic weight ratio") -> None:
    """Verify that an atomic weight ratio is strictly positive

    Parameters
    ----------
    ratio : float
        Mass of the scattering center relative to the neutron mass.
    label : str, optional
        Human-readable name of the value for error messages.

    Raises
    ------
    InvalidScatteringCenterPropertiesData
        If *ratio* is not finite or is ``<= 0``.

    Examples
    --------
    >>> validate_atomic_weight_ratio(0.999167)
    >>> validate_atomic_weight_ratio(0.0)  # doctest: +ELLIPSIS
    Traceback (most recent call last):
        ...
    pynucprops.exceptions.InvalidScatteringCenterPropertiesData: ...
    """
    if not np.isfinite(ratio) or ratio <= 0.0:
        raise InvalidScatteringCenterPropertiesData(
            f"The {label} must be a positive, finite number (got {ratio!r})."
        )
    logger.debug("The %s %.6e passed validation.", label, ratio)


def validate_non_negative_temperature(value: float, units: str) -> None:
    """Verify that a temperature value is non-negative and finite

    Parameters
    ----------
    value : float
        Temperature expressed in *units*.
    units : str
        ``"MeV"`` or ``"K"``; only used in the error message.

    Raises
    ------
    InvalidScatteringCenterPropertiesData
        If *value* is negative, NaN or infinite.
    """
    if not np.isfinite(value) or value < 0.0:
        raise InvalidScatteringCenterPropertiesData(
            f"Temperatures must be non-negative and finite "
            f"(got {value!r} {units})."
        )


def validate_file_version(version: int) -> None:
    """Verify that a file version is a non-negative integer

    Raises
    ------
    InvalidScatteringCenterPropertiesData
        If *version* is not an integer (``bool`` is rejected) or is negative.
    """
    if isinstance(version, bool) or not isinstance(version, numbers.Integral):
        raise InvalidScatteringCenterPropertiesData(
            f"File versions must be integers (got {version!r})."
        )
    if version < 0:
        raise InvalidScatteringCenterPropertiesData(
            f"File versions must be non-negative (got {version})."
        )
