#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Custom exception hierarchy for the PyNucProps package

All exceptions raised by PyNucProps inherit from :class:`PyNucPropsError`,
making it possible to catch every library-specific error with a single
``except`` clause while still allowing fine-grained handling when needed.

Exception Hierarchy
-------------------
::

    PyNucPropsError
    ├── InvalidScatteringCenterPropertiesData     # Bad construction data
    └── InvalidScatteringCenterPropertiesRequest  # Requested record absent
        └── RequestNotSatisfiableError            # No exact temperature match
"""

from __future__ import annotations


class PyNucPropsError(Exception):
    """Base exception for all PyNucProps errors

    Every exception raised by PyNucProps is a subclass of this type.
    Catching ``PyNucPropsError`` therefore catches any library-specific
    failure while still allowing standard Python exceptions (``KeyError``,
    ``TypeError``, etc.) to propagate normally.
    """


class InvalidScatteringCenterPropertiesData(PyNucPropsError):
    """Raised when scattering-center or record data is rejected

    This covers a non-positive atomic weight ratio, a ZAID outside the
    periodic table, a negative temperature or file version, and a record
    handed to a registry that it does not belong to (wrong nuclide or
    wrong element).  The object being constructed or modified must not be
    used as if the operation had succeeded.

    Parameters
    ----------
    message : str
        Description of the rejected value and the constraint it violates.
    """


class InvalidScatteringCenterPropertiesRequest(PyNucPropsError):
    """Raised when a requested data-properties record does not exist

    The requested file type, file version, thermal name or cache entry is
    not registered at all, or a temperature-indexed bucket holds no
    evaluation temperatures.

    Parameters
    ----------
    message : str
        Description of the failed lookup, including the category and key.
    """


class RequestNotSatisfiableError(InvalidScatteringCenterPropertiesRequest):
    """Raised when an exact evaluation-temperature match was demanded but absent

    The (file type, file version) bucket exists but none of its records
    was evaluated at the requested temperature.  Nearest-match lookups
    never raise this error.
    """
