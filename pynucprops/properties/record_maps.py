#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Versioned containers for data-properties records

Every data category held by :class:`~pynucprops.properties.atom.AtomProperties`
and :class:`~pynucprops.properties.nuclide.NuclideProperties` is stored in one
of the three containers defined here:

* :class:`VersionedRecordMap` — ``file type → version → record``
  (atomic and photonuclear categories).
* :class:`TemperatureRecordMap` — ``file type → version → temperature → record``
  (nuclear and adjoint nuclear categories).
* :class:`NamedTemperatureRecordMap` — ``name → file type → version →
  temperature → record`` (thermal categories).

Containers store shared references to records.  :meth:`copy` rebuilds the
nested structure around the same record objects; :meth:`deep_copy`
additionally replaces every record with ``record.clone()``.

Evaluation temperatures are keyed in MeV.  Kelvin queries are converted
before comparison, and exact matches allow a relative error of
:data:`~pynucprops.utils.constants.TEMPERATURE_MATCH_RTOL`.
"""

from __future__ import annotations

import logging
from typing import Generic, Iterator, Sequence, TypeVar

import numpy as np

from pynucprops.exceptions import (
    InvalidScatteringCenterPropertiesRequest,
    RequestNotSatisfiableError,
)
from pynucprops.models.quantities import (
    Energy,
    Temperature,
    TemperatureLike,
    as_mev,
    energy_to_kelvin,
)
from pynucprops.models.records import (
    DataProperties,
    FileType,
    TemperatureDataProperties,
    ThermalDataProperties,
)
from pynucprops.utils.constants import TEMPERATURE_MATCH_RTOL

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=DataProperties)
T = TypeVar("T", bound=TemperatureDataProperties)
N = TypeVar("N", bound=ThermalDataProperties)


# ---------------------------------------------------------------------------
# Temperature resolution
# ---------------------------------------------------------------------------

def find_evaluation_temperature(
    temps_mev: Sequence[float],
    query_mev: float,
    require_exact_match: bool,
) -> int | None:
    """Locate the stored evaluation temperature that answers a query

    Parameters
    ----------
    temps_mev : Sequence[float]
        Stored evaluation temperatures (MeV), sorted ascending.
    query_mev : float
        Requested evaluation temperature (MeV).
    require_exact_match : bool
        If ``True`` only a stored value equal to *query_mev* (within
        :data:`TEMPERATURE_MATCH_RTOL`) is accepted.  Otherwise the value
        with the smallest absolute difference is chosen; on a tie the lower
        temperature wins.

    Returns
    -------
    int | None
        Index into *temps_mev*, or ``None`` when nothing qualifies (empty
        grid, or no exact match when one is required).

    Examples
    --------
    >>> grid = [0.0, 2.5301e-08, 2.1543e-07]
    >>> find_evaluation_temperature(grid, 1.26e-08, False)
    0
    >>> find_evaluation_temperature(grid, 1.27e-08, False)
    1
    >>> find_evaluation_temperature(grid, 3e-07, True) is None
    True
    """
    grid = np.asarray(temps_mev, dtype="f8")
    if grid.size == 0:
        return None
    if require_exact_match:
        matches = np.flatnonzero(
            np.isclose(grid, query_mev, rtol=TEMPERATURE_MATCH_RTOL, atol=0.0)
        )
        return int(matches[0]) if matches.size else None
    # argmin reports the first minimum, i.e. the lowest of tied temperatures
    return int(np.argmin(np.abs(grid - query_mev)))


# ---------------------------------------------------------------------------
# Shared structure
# ---------------------------------------------------------------------------

class _FileTypeVersionMap(Generic[R]):
    """``file type → version → leaf`` structure shared by the concrete maps"""

    def __init__(self, category: str) -> None:
        self.category = category
        self._records: dict[FileType, dict[int, object]] = {}

    def _copy_leaf(self, leaf, clone_records: bool):
        raise NotImplementedError

    def _leaf_records(self, leaf) -> Iterator[R]:
        raise NotImplementedError

    def _rebuilt(self, clone_records: bool):
        other = self.__class__(self.category)
        other._records = {
            file_type: {
                version: self._copy_leaf(leaf, clone_records)
                for version, leaf in versions.items()
            }
            for file_type, versions in self._records.items()
        }
        return other

    def copy(self):
        """Copy the container structure, sharing every stored record"""
        return self._rebuilt(clone_records=False)

    def deep_copy(self):
        """Copy the container structure and clone every stored record"""
        return self._rebuilt(clone_records=True)

    def records(self) -> Iterator[R]:
        for versions in self._records.values():
            for leaf in versions.values():
                yield from self._leaf_records(leaf)

    def __len__(self) -> int:
        return sum(1 for _ in self.records())

    def file_types(self) -> set[FileType]:
        return set(self._records)

    def versions(self, file_type: FileType | str) -> set[int]:
        """Return the versions stored for *file_type* (empty if none)"""
        return set(self._records.get(file_type, ()))

    def recommended_version(self, file_type: FileType | str) -> int:
        """Return the highest version stored for *file_type*

        Raises
        ------
        InvalidScatteringCenterPropertiesRequest
            If no version of *file_type* is stored.
        """
        versions = self._records.get(file_type)
        if not versions:
            raise InvalidScatteringCenterPropertiesRequest(
                f"No {self.category} data properties with file type "
                f"{file_type} have been set."
            )
        return max(versions)

    def _available(self, file_type, version) -> bool:
        if file_type is None:
            return bool(self._records)
        versions = self._records.get(file_type)
        if versions is None:
            return False
        return version is None or version in versions

    def _leaf(self, file_type, version):
        try:
            return self._records[file_type][version]
        except KeyError:
            raise InvalidScatteringCenterPropertiesRequest(
                f"No {self.category} data properties with file type "
                f"{file_type} and version {version} have been set."
            ) from None


# ---------------------------------------------------------------------------
# Concrete maps
# ---------------------------------------------------------------------------

class VersionedRecordMap(_FileTypeVersionMap[R]):
    """Records keyed by file type and file version"""

    def _copy_leaf(self, leaf, clone_records: bool):
        return leaf.clone() if clone_records else leaf

    def _leaf_records(self, leaf):
        yield leaf

    def set(self, record: R) -> None:
        """Store *record* under its file type and version, replacing any match"""
        versions = self._records.setdefault(record.file_type, {})
        if record.file_version in versions:
            logger.warning(
                "Replacing %s data properties (%s, version %d).",
                self.category, record.file_type, record.file_version,
            )
        versions[record.file_version] = record
        logger.debug(
            "Set %s data properties (%s, version %d).",
            self.category, record.file_type, record.file_version,
        )

    def available(
        self,
        file_type: FileType | str | None = None,
        version: int | None = None,
    ) -> bool:
        """Check whether any record, or one matching the given keys, exists"""
        return self._available(file_type, version)

    def get(self, file_type: FileType | str, version: int) -> R:
        """Return the record stored under (*file_type*, *version*)

        Raises
        ------
        InvalidScatteringCenterPropertiesRequest
            If no such record has been set.
        """
        return self._leaf(file_type, version)


class TemperatureRecordMap(_FileTypeVersionMap[T]):
    """Records keyed by file type, file version and evaluation temperature

    Each ``(file type, version)`` bucket maps evaluation temperatures (MeV)
    to records and is kept sorted by temperature.
    """

    def _copy_leaf(self, leaf, clone_records: bool):
        if clone_records:
            return {temp: record.clone() for temp, record in leaf.items()}
        return dict(leaf)

    def _leaf_records(self, leaf):
        yield from leaf.values()

    def set(self, record: T) -> None:
        """Store *record*; a record at the same evaluation temperature is replaced"""
        versions = self._records.setdefault(record.file_type, {})
        temps = versions.setdefault(record.file_version, {})
        temp_mev = record.evaluation_temperature.value

        index = find_evaluation_temperature(list(temps), temp_mev, True)
        if index is not None:
            logger.warning(
                "Replacing %s data properties (%s, version %d) evaluated at %.6e MeV.",
                self.category, record.file_type, record.file_version, temp_mev,
            )
            del temps[list(temps)[index]]

        temps[temp_mev] = record
        versions[record.file_version] = dict(sorted(temps.items()))
        logger.debug(
            "Set %s data properties (%s, version %d) evaluated at %.6e MeV.",
            self.category, record.file_type, record.file_version, temp_mev,
        )

    def available(
        self,
        file_type: FileType | str | None = None,
        version: int | None = None,
        evaluation_temp: TemperatureLike | None = None,
    ) -> bool:
        """Check whether any record, or one matching the given keys, exists

        When *evaluation_temp* is given, only an exact temperature match
        counts.  Kelvin and MeV queries give identical answers.
        """
        if evaluation_temp is None:
            return self._available(file_type, version)
        query_mev = as_mev(evaluation_temp)
        return any(
            find_evaluation_temperature(list(temps), query_mev, True) is not None
            for temps in self._buckets(file_type, version)
        )

    def _buckets(self, file_type, version) -> Iterator[dict[float, T]]:
        if file_type is None:
            file_types = list(self._records)
        else:
            file_types = [file_type] if file_type in self._records else []
        for ft in file_types:
            versions = self._records[ft]
            if version is None:
                yield from versions.values()
            elif version in versions:
                yield versions[version]

    def evaluation_temps_in_mev(
        self,
        file_type: FileType | str,
        version: int,
    ) -> list[Energy]:
        """Return the ascending evaluation temperatures of a bucket (empty if absent)"""
        temps = self._records.get(file_type, {}).get(version, {})
        return [Energy(temp) for temp in temps]

    def evaluation_temps(
        self,
        file_type: FileType | str,
        version: int,
    ) -> list[Temperature]:
        """Return the ascending evaluation temperatures of a bucket in kelvin"""
        temps = self._records.get(file_type, {}).get(version, {})
        return [Temperature(energy_to_kelvin(temp)) for temp in temps]

    def get(
        self,
        file_type: FileType | str,
        version: int,
        evaluation_temp: TemperatureLike,
        require_exact_match: bool = True,
    ) -> T:
        """Return the record for *evaluation_temp* in the given bucket

        Parameters
        ----------
        file_type : FileType | str
            File type of the record.
        version : int
            File version of the record.
        evaluation_temp : Energy | Temperature | float
            Requested evaluation temperature; bare floats are MeV.
        require_exact_match : bool, optional
            If ``True`` (default) only a record evaluated at exactly
            *evaluation_temp* is returned.  If ``False`` the record with
            the nearest evaluation temperature is returned, preferring the
            lower temperature on a tie.

        Raises
        ------
        InvalidScatteringCenterPropertiesRequest
            If the (*file_type*, *version*) bucket is absent or empty.
        RequestNotSatisfiableError
            If an exact match was required and none exists.
        """
        temps = self._leaf(file_type, version)
        if not temps:
            raise InvalidScatteringCenterPropertiesRequest(
                f"No {self.category} data properties with file type "
                f"{file_type} and version {version} have been set."
            )

        query_mev = as_mev(evaluation_temp)
        grid = list(temps)
        index = find_evaluation_temperature(grid, query_mev, require_exact_match)
        if index is None:
            raise RequestNotSatisfiableError(
                f"No {self.category} data properties with file type "
                f"{file_type} and version {version} were evaluated at "
                f"{query_mev:.6e} MeV."
            )
        if not require_exact_match and grid[index] != query_mev:
            logger.debug(
                "Resolved %s request at %.6e MeV to the nearest evaluation "
                "temperature %.6e MeV.",
                self.category, query_mev, grid[index],
            )
        return temps[grid[index]]


class NamedTemperatureRecordMap(Generic[N]):
    """Thermal records keyed by name, then as in :class:`TemperatureRecordMap`

    Names are case-sensitive and only match exactly.
    """

    def __init__(self, category: str) -> None:
        self.category = category
        self._maps: dict[str, TemperatureRecordMap[N]] = {}

    def _named(self, name: str) -> TemperatureRecordMap[N]:
        try:
            return self._maps[name]
        except KeyError:
            raise InvalidScatteringCenterPropertiesRequest(
                f"No {self.category} data properties named '{name}' have been set."
            ) from None

    def _rebuilt(self, clone_records: bool) -> NamedTemperatureRecordMap[N]:
        other = self.__class__(self.category)
        other._maps = {
            name: (tmap.deep_copy() if clone_records else tmap.copy())
            for name, tmap in self._maps.items()
        }
        return other

    def copy(self) -> NamedTemperatureRecordMap[N]:
        return self._rebuilt(clone_records=False)

    def deep_copy(self) -> NamedTemperatureRecordMap[N]:
        return self._rebuilt(clone_records=True)

    def records(self) -> Iterator[N]:
        for tmap in self._maps.values():
            yield from tmap.records()

    def __len__(self) -> int:
        return sum(len(tmap) for tmap in self._maps.values())

    def set(self, record: N) -> None:
        if record.name not in self._maps:
            self._maps[record.name] = TemperatureRecordMap(
                f"{self.category} ({record.name})"
            )
        self._maps[record.name].set(record)

    def names(self) -> set[str]:
        return set(self._maps)

    def available(
        self,
        name: str | None = None,
        file_type: FileType | str | None = None,
        version: int | None = None,
        evaluation_temp: TemperatureLike | None = None,
    ) -> bool:
        if name is None:
            return bool(self._maps)
        if name not in self._maps:
            return False
        return self._maps[name].available(file_type, version, evaluation_temp)

    def file_types(self, name: str) -> set[FileType]:
        tmap = self._maps.get(name)
        return tmap.file_types() if tmap is not None else set()

    def versions(self, name: str, file_type: FileType | str) -> set[int]:
        tmap = self._maps.get(name)
        return tmap.versions(file_type) if tmap is not None else set()

    def recommended_version(self, name: str, file_type: FileType | str) -> int:
        return self._named(name).recommended_version(file_type)

    def evaluation_temps_in_mev(
        self,
        name: str,
        file_type: FileType | str,
        version: int,
    ) -> list[Energy]:
        tmap = self._maps.get(name)
        return tmap.evaluation_temps_in_mev(file_type, version) if tmap is not None else []

    def evaluation_temps(
        self,
        name: str,
        file_type: FileType | str,
        version: int,
    ) -> list[Temperature]:
        tmap = self._maps.get(name)
        return tmap.evaluation_temps(file_type, version) if tmap is not None else []

    def get(
        self,
        name: str,
        file_type: FileType | str,
        version: int,
        evaluation_temp: TemperatureLike,
        require_exact_match: bool = True,
    ) -> N:
        return self._named(name).get(
            file_type, version, evaluation_temp, require_exact_match
        )
