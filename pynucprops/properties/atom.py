#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Atomic data-properties registry

:class:`AtomProperties` tracks the photoatomic, adjoint photoatomic,
electroatomic and adjoint electroatomic data tables available for one
element.  None of these categories depend on temperature; each is a
:class:`~pynucprops.properties.record_maps.VersionedRecordMap` keyed by
file type and file version.

The query methods live on :class:`AtomicDataInterface` so that
:class:`~pynucprops.properties.nuclide.NuclideProperties` exposes the same
API while delegating to the :class:`AtomProperties` instance it shares.
"""

from __future__ import annotations

import logging

from pynucprops.exceptions import InvalidScatteringCenterPropertiesData
from pynucprops.models.quantities import ZAIDLike
from pynucprops.models.records import (
    AdjointElectroatomicDataProperties,
    AdjointPhotoatomicDataProperties,
    DataProperties,
    ElectroatomicDataProperties,
    FileType,
    PhotoatomicDataProperties,
)
from pynucprops.properties.base import ScatteringCenterProperties
from pynucprops.properties.record_maps import VersionedRecordMap

logger = logging.getLogger(__name__)


def check_record_type(
    properties: DataProperties,
    record_type: type[DataProperties],
) -> None:
    """Raise if *properties* is not a *record_type* instance"""
    if not isinstance(properties, record_type):
        raise InvalidScatteringCenterPropertiesData(
            f"Expected {record_type.__name__}, got "
            f"{type(properties).__name__}."
        )


class AtomicDataInterface:
    """Query API for the four atomic data categories

    Subclasses provide :meth:`_atom_data`, the :class:`AtomProperties`
    instance whose maps back every call.
    """

    def _atom_data(self) -> AtomProperties:
        raise NotImplementedError

    def _atomic_map(self, attr: str) -> VersionedRecordMap:
        return getattr(self._atom_data(), attr)

    # -- photoatomic ---------------------------------------------------------

    def set_photoatomic_data_properties(
        self, properties: PhotoatomicDataProperties
    ) -> None:
        self._atom_data()._set_atomic(
            "_photoatomic", PhotoatomicDataProperties, properties
        )

    def photoatomic_data_available(
        self, file_type: FileType | str | None = None, version: int | None = None
    ) -> bool:
        return self._atomic_map("_photoatomic").available(file_type, version)

    def get_photoatomic_data_file_types(self) -> set[FileType]:
        return self._atomic_map("_photoatomic").file_types()

    def get_photoatomic_data_file_versions(self, file_type: FileType | str) -> set[int]:
        return self._atomic_map("_photoatomic").versions(file_type)

    def get_recommended_photoatomic_data_file_version(
        self, file_type: FileType | str
    ) -> int:
        return self._atomic_map("_photoatomic").recommended_version(file_type)

    def get_photoatomic_data_properties(
        self, file_type: FileType | str, version: int
    ) -> PhotoatomicDataProperties:
        return self._atomic_map("_photoatomic").get(file_type, version)

    # -- adjoint photoatomic -------------------------------------------------

    def set_adjoint_photoatomic_data_properties(
        self, properties: AdjointPhotoatomicDataProperties
    ) -> None:
        self._atom_data()._set_atomic(
            "_adjoint_photoatomic", AdjointPhotoatomicDataProperties, properties
        )

    def adjoint_photoatomic_data_available(
        self, file_type: FileType | str | None = None, version: int | None = None
    ) -> bool:
        return self._atomic_map("_adjoint_photoatomic").available(file_type, version)

    def get_adjoint_photoatomic_data_file_types(self) -> set[FileType]:
        return self._atomic_map("_adjoint_photoatomic").file_types()

    def get_adjoint_photoatomic_data_file_versions(
        self, file_type: FileType | str
    ) -> set[int]:
        return self._atomic_map("_adjoint_photoatomic").versions(file_type)

    def get_recommended_adjoint_photoatomic_data_file_version(
        self, file_type: FileType | str
    ) -> int:
        return self._atomic_map("_adjoint_photoatomic").recommended_version(file_type)

    def get_adjoint_photoatomic_data_properties(
        self, file_type: FileType | str, version: int
    ) -> AdjointPhotoatomicDataProperties:
        return self._atomic_map("_adjoint_photoatomic").get(file_type, version)

    # -- electroatomic -------------------------------------------------------

    def set_electroatomic_data_properties(
        self, properties: ElectroatomicDataProperties
    ) -> None:
        self._atom_data()._set_atomic(
            "_electroatomic", ElectroatomicDataProperties, properties
        )

    def electroatomic_data_available(
        self, file_type: FileType | str | None = None, version: int | None = None
    ) -> bool:
        return self._atomic_map("_electroatomic").available(file_type, version)

    def get_electroatomic_data_file_types(self) -> set[FileType]:
        return self._atomic_map("_electroatomic").file_types()

    def get_electroatomic_data_file_versions(self, file_type: FileType | str) -> set[int]:
        return self._atomic_map("_electroatomic").versions(file_type)

    def get_recommended_electroatomic_data_file_version(
        self, file_type: FileType | str
    ) -> int:
        return self._atomic_map("_electroatomic").recommended_version(file_type)

    def get_electroatomic_data_properties(
        self, file_type: FileType | str, version: int
    ) -> ElectroatomicDataProperties:
        return self._atomic_map("_electroatomic").get(file_type, version)

    # -- adjoint electroatomic -----------------------------------------------

    def set_adjoint_electroatomic_data_properties(
        self, properties: AdjointElectroatomicDataProperties
    ) -> None:
        self._atom_data()._set_atomic(
            "_adjoint_electroatomic", AdjointElectroatomicDataProperties, properties
        )

    def adjoint_electroatomic_data_available(
        self, file_type: FileType | str | None = None, version: int | None = None
    ) -> bool:
        return self._atomic_map("_adjoint_electroatomic").available(file_type, version)

    def get_adjoint_electroatomic_data_file_types(self) -> set[FileType]:
        return self._atomic_map("_adjoint_electroatomic").file_types()

    def get_adjoint_electroatomic_data_file_versions(
        self, file_type: FileType | str
    ) -> set[int]:
        return self._atomic_map("_adjoint_electroatomic").versions(file_type)

    def get_recommended_adjoint_electroatomic_data_file_version(
        self, file_type: FileType | str
    ) -> int:
        return self._atomic_map("_adjoint_electroatomic").recommended_version(file_type)

    def get_adjoint_electroatomic_data_properties(
        self, file_type: FileType | str, version: int
    ) -> AdjointElectroatomicDataProperties:
        return self._atomic_map("_adjoint_electroatomic").get(file_type, version)


class AtomProperties(AtomicDataInterface, ScatteringCenterProperties):
    """Atomic data tables available for one element

    Parameters
    ----------
    zaid : ZAID | int
        Identifier of the element.  Records set on this registry must
        belong to the same atom type (``zaid.atom()``).
    atomic_weight_ratio : float
        Mass relative to the neutron rest mass.  Must be strictly positive.
    name : str | None, optional
        Display / cache name.  Defaults to the element symbol.

    Raises
    ------
    InvalidScatteringCenterPropertiesData
        If *atomic_weight_ratio* is ``<= 0``.

    Examples
    --------
    >>> h = AtomProperties(1000, 0.999167)
    >>> h.photoatomic_data_available()
    False
    >>> h.is_nuclide()
    False
    """

    _ATOMIC_MAPS = (
        ("_photoatomic", PhotoatomicDataProperties),
        ("_adjoint_photoatomic", AdjointPhotoatomicDataProperties),
        ("_electroatomic", ElectroatomicDataProperties),
        ("_adjoint_electroatomic", AdjointElectroatomicDataProperties),
    )

    def __init__(
        self,
        zaid: ZAIDLike,
        atomic_weight_ratio: float,
        name: str | None = None,
    ) -> None:
        super().__init__(zaid, atomic_weight_ratio, name)
        for attr, record_type in self._ATOMIC_MAPS:
            setattr(self, attr, VersionedRecordMap(record_type.category))

    def _atom_data(self) -> AtomProperties:
        return self

    def _set_atomic(
        self,
        attr: str,
        record_type: type[DataProperties],
        properties: DataProperties,
    ) -> None:
        check_record_type(properties, record_type)
        if properties.zaid.atom() != self.zaid.atom():
            raise InvalidScatteringCenterPropertiesData(
                f"The {record_type.category} data properties for ZAID "
                f"{properties.zaid} do not belong to atom {self.zaid.atom()}."
            )
        getattr(self, attr).set(properties)

    def is_nuclide(self) -> bool:
        return False

    def _copy(self, clone_records: bool) -> AtomProperties:
        other = self.__class__(self.zaid, self.atomic_weight_ratio, self.name)
        for attr, _ in self._ATOMIC_MAPS:
            source = getattr(self, attr)
            setattr(other, attr, source.deep_copy() if clone_records else source.copy())
        return other

    def clone(self) -> AtomProperties:
        """Return a registry with independent maps that share every record"""
        return self._copy(clone_records=False)

    def deep_clone(self) -> AtomProperties:
        """Return a registry with independent maps and cloned records"""
        logger.debug("Deep cloning atom properties %s.", self.name)
        return self._copy(clone_records=True)
