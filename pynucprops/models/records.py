#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Typed dataclass models for evaluated-data properties records

A data-properties record describes *where* one evaluated data table lives
(file path, start line, table name) and *what* it is (file type, file
version, owning ZAID and, for temperature-dependent nuclear data, the
evaluation temperature).  The property registries in
:mod:`pynucprops.properties` key records by these fields and hand out
shared references; they never look at anything else.

Hierarchy
---------
::

    DataProperties                        — zaid / file type / version / location
    ├── PhotoatomicDataProperties
    ├── AdjointPhotoatomicDataProperties
    ├── ElectroatomicDataProperties
    ├── AdjointElectroatomicDataProperties
    ├── PhotonuclearDataProperties
    ├── AdjointPhotonuclearDataProperties
    └── TemperatureDataProperties         — + evaluation temperature
        ├── NuclearDataProperties
        ├── AdjointNuclearDataProperties
        └── ThermalDataProperties         — + name / applicable ZAIDs
            ├── ThermalNuclearDataProperties
            └── AdjointThermalNuclearDataProperties

Units
-----
* Evaluation temperatures are stored as :class:`~pynucprops.models.quantities.Energy`
  (**MeV**); kelvin or bare-float MeV values are accepted at construction.
"""

from __future__ import annotations

import copy
import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

from pynucprops.models.quantities import (
    Energy,
    TemperatureLike,
    ZAID,
    ZAIDLike,
    as_mev,
    as_zaid,
)
from pynucprops.utils.validation import validate_file_version


# ---------------------------------------------------------------------------
# File types
# ---------------------------------------------------------------------------

class FileType(str, enum.Enum):
    """Base for the per-category file-type enumerations"""

    def __str__(self) -> str:
        return self.value


class PhotoatomicFileType(FileType):
    ACE_FILE = "ACE"
    ACE_EPR_FILE = "ACE EPR"
    NATIVE_EPR_FILE = "Native EPR"


class AdjointPhotoatomicFileType(FileType):
    NATIVE_EPR_FILE = "Native EPR"


class ElectroatomicFileType(FileType):
    ACE_FILE = "ACE"
    ACE_EPR_FILE = "ACE EPR"
    NATIVE_EPR_FILE = "Native EPR"
    NATIVE_ENDL_FILE = "Native ENDL"


class AdjointElectroatomicFileType(FileType):
    NATIVE_EPR_FILE = "Native EPR"
    NATIVE_ENDL_FILE = "Native ENDL"


class NuclearFileType(FileType):
    ACE_FILE = "ACE"
    NATIVE_FILE = "Native"


class AdjointNuclearFileType(FileType):
    NATIVE_FILE = "Native"


class ThermalNuclearFileType(FileType):
    ACE_FILE = "ACE"
    NATIVE_FILE = "Native"


class AdjointThermalNuclearFileType(FileType):
    NATIVE_FILE = "Native"


class PhotonuclearFileType(FileType):
    ACE_FILE = "ACE"
    NATIVE_FILE = "Native"


class AdjointPhotonuclearFileType(FileType):
    NATIVE_FILE = "Native"


# ---------------------------------------------------------------------------
# Base records
# ---------------------------------------------------------------------------

@dataclass(kw_only=True)
class DataProperties:
    """Location and identity of one evaluated data table

    Parameters
    ----------
    zaid : ZAID | int
        Nuclide (or element, for atomic data) the table describes.
    file_type : FileType | str
        Layout of the file; coerced to the category's enumeration.
    file_version : int
        Non-negative schema revision of *file_type*.
    file_path : Path | str
        Path of the data file, relative to the data directory.
    file_start_line : int
        First line of the table inside the file (0 for whole-file formats).
    table_name : str
        Table identifier inside the file (e.g. ``"1001.80c"``), if any.
    """

    category: ClassVar[str] = "data"
    file_type_enum: ClassVar[type[FileType]] = FileType

    zaid: ZAID
    file_type: FileType
    file_version: int
    file_path: Path = field(default_factory=Path)
    file_start_line: int = 0
    table_name: str = ""

    def __post_init__(self) -> None:
        self.zaid = as_zaid(self.zaid)
        self.file_type = self.file_type_enum(self.file_type)
        validate_file_version(self.file_version)
        self.file_path = Path(self.file_path)

    def clone(self) -> DataProperties:
        """Return an independent copy with identical field values"""
        return copy.deepcopy(self)


@dataclass(kw_only=True)
class TemperatureDataProperties(DataProperties):
    """A data table evaluated at a single temperature

    Parameters
    ----------
    evaluation_temperature : Energy | Temperature | float
        Evaluation temperature; bare floats are MeV.  Stored as
        :class:`Energy`.
    """

    evaluation_temperature: Energy

    def __post_init__(self) -> None:
        super().__post_init__()
        self.evaluation_temperature = Energy(as_mev(self.evaluation_temperature))

    def evaluation_temperature_in_mev(self) -> Energy:
        return self.evaluation_temperature


@dataclass(kw_only=True)
class ThermalDataProperties(TemperatureDataProperties):
    """Bound-scattering table applicable to several constituent nuclides

    Parameters
    ----------
    name : str
        Moderator label, e.g. ``"H2O"``.  Case-sensitive.
    zaids : tuple[ZAID, ...]
        Nuclides the table provides data for.
    """

    name: str
    zaids: tuple[ZAID, ...] = ()

    def __post_init__(self) -> None:
        super().__post_init__()
        self.zaids = tuple(as_zaid(z) for z in self.zaids)
        # The owning ZAID is always covered
        if self.zaid not in self.zaids:
            self.zaids = (self.zaid,) + self.zaids

    def has_data_for_zaid(self, zaid: ZAIDLike) -> bool:
        return as_zaid(zaid) in self.zaids


# ---------------------------------------------------------------------------
# Atomic categories
# ---------------------------------------------------------------------------

@dataclass(kw_only=True)
class PhotoatomicDataProperties(DataProperties):
    """Photon-atom interaction data"""

    category: ClassVar[str] = "photoatomic"
    file_type_enum: ClassVar[type[FileType]] = PhotoatomicFileType


@dataclass(kw_only=True)
class AdjointPhotoatomicDataProperties(DataProperties):
    """Adjoint photon-atom interaction data"""

    category: ClassVar[str] = "adjoint photoatomic"
    file_type_enum: ClassVar[type[FileType]] = AdjointPhotoatomicFileType


@dataclass(kw_only=True)
class ElectroatomicDataProperties(DataProperties):
    """Electron-atom interaction data"""

    category: ClassVar[str] = "electroatomic"
    file_type_enum: ClassVar[type[FileType]] = ElectroatomicFileType


@dataclass(kw_only=True)
class AdjointElectroatomicDataProperties(DataProperties):
    """Adjoint electron-atom interaction data"""

    category: ClassVar[str] = "adjoint electroatomic"
    file_type_enum: ClassVar[type[FileType]] = AdjointElectroatomicFileType


# ---------------------------------------------------------------------------
# Nuclide categories
# ---------------------------------------------------------------------------

@dataclass(kw_only=True)
class NuclearDataProperties(TemperatureDataProperties):
    """Neutron-nuclide interaction data at one evaluation temperature"""

    category: ClassVar[str] = "nuclear"
    file_type_enum: ClassVar[type[FileType]] = NuclearFileType


@dataclass(kw_only=True)
class AdjointNuclearDataProperties(TemperatureDataProperties):
    """Adjoint neutron-nuclide interaction data"""

    category: ClassVar[str] = "adjoint nuclear"
    file_type_enum: ClassVar[type[FileType]] = AdjointNuclearFileType


@dataclass(kw_only=True)
class ThermalNuclearDataProperties(ThermalDataProperties):
    """S(α,β) thermal scattering data"""

    category: ClassVar[str] = "thermal nuclear"
    file_type_enum: ClassVar[type[FileType]] = ThermalNuclearFileType


@dataclass(kw_only=True)
class AdjointThermalNuclearDataProperties(ThermalDataProperties):
    """Adjoint S(α,β) thermal scattering data"""

    category: ClassVar[str] = "adjoint thermal nuclear"
    file_type_enum: ClassVar[type[FileType]] = AdjointThermalNuclearFileType


@dataclass(kw_only=True)
class PhotonuclearDataProperties(DataProperties):
    """Photon-nuclide interaction data"""

    category: ClassVar[str] = "photonuclear"
    file_type_enum: ClassVar[type[FileType]] = PhotonuclearFileType


@dataclass(kw_only=True)
class AdjointPhotonuclearDataProperties(DataProperties):
    """Adjoint photon-nuclide interaction data"""

    category: ClassVar[str] = "adjoint photonuclear"
    file_type_enum: ClassVar[type[FileType]] = AdjointPhotonuclearFileType
