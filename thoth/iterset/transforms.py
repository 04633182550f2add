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

"""Deduplication and run compaction of sequences."""

from __future__ import annotations

from itertools import groupby
from typing import Callable, Hashable, Iterable, Iterator, List, Set, Tuple, TypeVar

from .seq import Seq, as_seq

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


def _unique(values: Iterable[K]) -> Iterator[K]:
    seen: Set[K] = set()
    for value in values:
        if value not in seen:
            seen.add(value)
            yield value


def _unique_by(values: Iterable[T], key: Callable[[T], K]) -> Iterator[Tuple[K, T]]:
    seen: Set[K] = set()
    for value in values:
        k = key(value)
        if k not in seen:
            seen.add(k)
            yield k, value


def _compact(values: Iterable[T]) -> Iterator[Tuple[T, int]]:
    for value, run in groupby(values):
        yield value, sum(1 for _ in run)


def _compact_by(values: Iterable[T], key: Callable[[T], K]) -> Iterator[Tuple[K, List[T]]]:
    for k, run in groupby(values, key):
        yield k, list(run)


def unique(values: Iterable[K]) -> Seq[K]:
    """Get values in order without duplicates.

    Every iteration starts from an empty set of seen values.
    """
    return Seq(_unique, as_seq(values))


def unique_by(values: Iterable[T], key: Callable[[T], K]) -> Seq[Tuple[K, T]]:
    """Get ``(key, value)`` pairs for the first value seen with each derived key."""
    return Seq(_unique_by, as_seq(values), key)


def compact(values: Iterable[T]) -> Seq[Tuple[T, int]]:
    """Get ``(value, count)`` for every run of consecutive equal values."""
    return Seq(_compact, as_seq(values))


def compact_by(values: Iterable[T], key: Callable[[T], K]) -> Seq[Tuple[K, List[T]]]:
    """Get ``(key, values)`` for every run of consecutive values sharing a derived key."""
    return Seq(_compact_by, as_seq(values), key)
