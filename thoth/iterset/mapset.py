# thoth-iterset
# Copyright(C) 2022 Red Hat, Inc.
#
# This program is free software: you can redistribute it and / or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program. If not, see <http://www.gnu.org/licenses/>.

"""Set operations on mappings, keeping the values."""

from __future__ import annotations

import logging
from typing import (
    Any,
    Hashable,
    Iterable,
    Iterator,
    Mapping,
    MutableMapping,
    Optional,
    Set,
    Tuple,
    TypeVar,
    Union,
)

from .seq import Seq, as_seq
from .transforms import unique

_LOGGER = logging.getLogger("thoth.iterset")

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

Pairs = Union[Mapping[K, V], Iterable[Tuple[K, V]]]


class MapSet(MutableMapping[K, V]):
    """A mapping view with set methods.

    The instance does not own its data: it wraps the backing mapping, so
    mutations through either handle are visible through the other. Lazy
    results read the backing mapping while they are iterated; mutating it
    meanwhile is not supported.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Optional[MutableMapping[K, V]] = None) -> None:
        if isinstance(data, MapSet):
            data = data.data
        self._data: MutableMapping[K, V] = {} if data is None else data

    @property
    def data(self) -> MutableMapping[K, V]:
        """Get the backing mapping."""
        return self._data

    def __getitem__(self, key: K) -> V:
        return self._data[key]

    def __setitem__(self, key: K, value: V) -> None:
        self._data[key] = value

    def __delitem__(self, key: K) -> None:
        del self._data[key]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[K]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def contains(self, *keys: K) -> bool:
        """Check whether all the given keys are present."""
        return all(key in self._data for key in keys)

    def missing(self, *keys: K) -> bool:
        """Check whether none of the given keys is present."""
        return not any(key in self._data for key in keys)

    def equal(self, keys: Iterable[K]) -> bool:
        """Check whether the keys form exactly the key set of this mapping."""
        seen: Set[K] = set()
        for key in keys:
            if key not in self._data:
                return False
            seen.add(key)
        return len(seen) == len(self._data)

    def is_subset(self, keys: Iterable[K]) -> bool:
        """Check whether every key of this mapping appears in keys.

        Only keys of this mapping are remembered and the scan stops once all
        of them have been seen. ``is_superset`` is cheaper when keys come from
        another mapping.
        """
        if not self._data:
            return True

        seen: Set[K] = set()
        for key in keys:
            if key in self._data:
                seen.add(key)
                if len(seen) == len(self._data):
                    return True
        return False

    def is_superset(self, keys: Iterable[K]) -> bool:
        """Check whether all keys are present."""
        return all(key in self._data for key in keys)

    def is_disjoint(self, keys: Iterable[K]) -> bool:
        """Check whether no key is present."""
        return not any(key in self._data for key in keys)

    def add(self, *keys: K) -> None:
        """Add keys with a ``None`` value."""
        for key in keys:
            self._data[key] = None

    def insert(self, keys: Iterable[K], value: Any = None) -> None:
        """Insert keys, all with the same value."""
        for key in keys:
            self._data[key] = value

    def delete(self, *keys: K) -> None:
        """Delete keys, ignoring the absent ones."""
        for key in keys:
            self._data.pop(key, None)

    def remove(self, keys: Iterable[K]) -> None:
        """Delete every key from an iterable, ignoring the absent ones."""
        for key in keys:
            self._data.pop(key, None)

    def toggle(self, keys: Iterable[K], value: Any = None) -> None:
        """Delete present keys and insert absent ones with the given value."""
        for key in keys:
            if key in self._data:
                del self._data[key]
            else:
                self._data[key] = value

    def union(self, *sources: Pairs) -> MapSet[K, V]:
        """Get a new mapping with the pairs of every source merged into a copy of this one.

        Later sources win on key collisions.
        """
        result = dict(self._data)
        for source in sources:
            result.update(source)

        _LOGGER.debug("Merged %d source(s) into a copy of %d key(s)", len(sources), len(self._data))
        return MapSet(result)

    def _intersect(self, keys: Iterable[K]) -> Iterator[Tuple[K, V]]:
        data = self._data
        for key in keys:
            if key in data:
                yield key, data[key]

    def intersect(self, keys: Iterable[K]) -> Seq[Tuple[K, V]]:
        """Get ``(key, value)`` pairs for keys which are present, in order of keys."""
        return Seq(self._intersect, as_seq(keys))

    def _difference(self, keys: Iterable[K]) -> Iterator[Tuple[K, V]]:
        data = self._data
        if not data:
            return

        seen: Set[K] = set()
        for key in keys:
            if key in data:
                seen.add(key)
                if len(seen) == len(data):
                    return

        for key, value in data.items():
            if key not in seen:
                yield key, value

    def difference(self, keys: Iterable[K]) -> Seq[Tuple[K, V]]:
        """Get ``(key, value)`` pairs of this mapping whose keys are absent from keys.

        The keys found in this mapping are buffered first, so space is bounded by
        the smaller of both; nothing is yielded if keys cover the whole mapping.
        """
        return Seq(self._difference, as_seq(keys))

    def _reverse_difference(self, keys: Iterable[K]) -> Iterator[K]:
        data = self._data
        for key in keys:
            if key not in data:
                yield key

    def reverse_difference(self, keys: Iterable[K]) -> Seq[K]:
        """Get keys which are not present, in order of keys."""
        return Seq(self._reverse_difference, as_seq(keys))

    def _symmetric_difference(self, keys: Iterable[K]) -> Iterator[K]:
        data = self._data
        matched: Set[K] = set()
        for key in keys:
            if key in data:
                matched.add(key)
            else:
                yield key

        for key in data:
            if key not in matched:
                yield key

    def symmetric_difference(self, keys: Iterable[K]) -> Seq[K]:
        """Get keys present in exactly one of this mapping and keys.

        Keys missing from this mapping come first, in order of keys, followed by
        the keys of this mapping that never showed up.
        """
        return Seq(self._symmetric_difference, as_seq(keys))

    def overlap(self, keys: Iterable[K]) -> Tuple[int, int, int]:
        """Count distinct keys only here, in both, and only in keys."""
        both = right = 0
        for key in unique(keys):
            if key in self._data:
                both += 1
            else:
                right += 1
        return len(self._data) - both, both, right


def cast(mapping: MutableMapping[K, V]) -> MapSet[K, V]:
    """Wrap a mapping without copying it."""
    if isinstance(mapping, MapSet):
        return mapping
    return MapSet(mapping)


def collect(keys: Iterable[K], value: Any = None) -> MapSet[K, Any]:
    """Collect unique keys, all with the same value."""
    result: MapSet[K, Any] = MapSet()
    result.insert(keys, value)
    return result


def set_of(*keys: K) -> MapSet[K, None]:
    """Collect the given keys with a ``None`` value."""
    return collect(keys)
