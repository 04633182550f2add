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

"""One-pass builders collecting sequences into mappings."""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import Any, Callable, Dict, Hashable, Iterable, List, Mapping, TypeVar

from .mapset import MapSet, cast

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def index(keys: Iterable[K]) -> MapSet[K, int]:
    """Map unique keys to the position they were first seen at."""
    result: Dict[K, int] = {}
    for i, key in enumerate(keys):
        result.setdefault(key, i)
    return cast(result)


def count(keys: Iterable[K]) -> MapSet[K, int]:
    """Map unique keys to the number of their occurrences."""
    return cast(dict(Counter(keys)))


def index_by(values: Iterable[T], key: Callable[[T], K]) -> MapSet[K, T]:
    """Map values by a key function, the last value wins on collisions."""
    return cast({key(value): value for value in values})


def group_by(values: Iterable[T], key: Callable[[T], K]) -> MapSet[K, List[T]]:
    """Group values in lists by a key function."""
    result: Dict[K, List[T]] = defaultdict(list)
    for value in values:
        result[key(value)].append(value)
    return cast(dict(result))


def memoize(keys: Iterable[K], func: Callable[[K], V]) -> MapSet[K, V]:
    """Call func once per unique key and cache the results."""
    result: Dict[K, V] = {}
    for key in keys:
        if key not in result:
            result[key] = func(key)
    return cast(result)


def sorted_by_value(mapping: Mapping[K, Any]) -> List[K]:
    """Get keys sorted by their values.

    Used with ``index``, this restores the original order of first appearance.
    """
    return sorted(mapping, key=mapping.__getitem__)
