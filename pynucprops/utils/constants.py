#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Physical constants and lookup tables used across PyNucProps

The Boltzmann constant and neutron mass follow NIST CODATA 2010 [1]_, with
the Boltzmann constant written out as 8.617332478e-5 eV/K (value and
uncertainty digits).  It fixes the MeV <-> kelvin conversion used for
every evaluation-temperature key stored by the property registries, so
that e.g. 2.5301e-08 MeV is 293.6059397103837 K.

References
----------
.. [1] P. J. Mohr, B. N. Taylor, D. B. Newell, "CODATA Recommended Values
   of the Fundamental Physical Constants: 2010", Rev. Mod. Phys. 84 (2012)
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Physical constants  (NIST CODATA 2010)
# ---------------------------------------------------------------------------

BOLTZMANN_CONSTANT_MEV_PER_K: float = 8.617332478e-11
"""Boltzmann constant k_B (MeV/K)."""

NEUTRON_REST_MASS_AMU: float = 1.00866491600
"""Neutron rest mass m_n (amu)."""

NEUTRON_REST_MASS_ENERGY: float = 939.565379
"""Neutron rest-mass energy m_n c² (MeV)."""


# ---------------------------------------------------------------------------
# Lookup tolerances
# ---------------------------------------------------------------------------

TEMPERATURE_MATCH_RTOL: float = 1e-12
"""Relative tolerance for exact evaluation-temperature matches.

A kelvin query is converted to MeV before comparison; the conversion can
be off by one ulp from the stored MeV key.
"""


# ---------------------------------------------------------------------------
# Periodic table  (Z = 1 … 118)
# ---------------------------------------------------------------------------

ELEMENT_SYMBOLS: tuple[str, ...] = (
    "H",  "He", "Li", "Be", "B",  "C",  "N",  "O",  "F",  "Ne",
    "Na", "Mg", "Al", "Si", "P",  "S",  "Cl", "Ar", "K",  "Ca",
    "Sc", "Ti", "V",  "Cr", "Mn", "Fe", "Co", "Ni", "Cu", "Zn",
    "Ga", "Ge", "As", "Se", "Br", "Kr", "Rb", "Sr", "Y",  "Zr",
    "Nb", "Mo", "Tc", "Ru", "Rh", "Pd", "Ag", "Cd", "In", "Sn",
    "Sb", "Te", "I",  "Xe", "Cs", "Ba", "La", "Ce", "Pr", "Nd",
    "Pm", "Sm", "Eu", "Gd", "Tb", "Dy", "Ho", "Er", "Tm", "Yb",
    "Lu", "Hf", "Ta", "W",  "Re", "Os", "Ir", "Pt", "Au", "Hg",
    "Tl", "Pb", "Bi", "Po", "At", "Rn", "Fr", "Ra", "Ac", "Th",
    "Pa", "U",  "Np", "Pu", "Am", "Cm", "Bk", "Cf", "Es", "Fm",
    "Md", "No", "Lr", "Rf", "Db", "Sg", "Bh", "Hs", "Mt", "Ds",
    "Rg", "Cn", "Nh", "Fl", "Mc", "Lv", "Ts", "Og",
)
"""Element symbols ordered by atomic number (index 0 is hydrogen)."""

PERIODIC_TABLE: dict[int, str] = {
    z: symbol for z, symbol in enumerate(ELEMENT_SYMBOLS, start=1)
}
"""Atomic number -> element symbol."""

SYMBOL_TO_Z: dict[str, int] = {symbol: z for z, symbol in PERIODIC_TABLE.items()}
"""Element symbol -> atomic number."""
