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

"""Sequence producers: restartable sequences and single-use streams."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any, Callable, Generic, Iterable, Tuple, TypeVar

from .exceptions import SingleUseError

_LOGGER = logging.getLogger("thoth.iterset")

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")


class Seq(Generic[T]):
    """A restartable sequence.

    Every iteration calls ``producer(*args)`` again, so the sequence can be
    iterated any number of times as long as its inputs can.
    """

    __slots__ = ("_producer", "_args")

    def __init__(self, producer: Callable[..., Iterable[T]], *args: Any) -> None:
        self._producer = producer
        self._args = args

    def __iter__(self) -> Iterator[T]:
        return iter(self._producer(*self._args))

    def __repr__(self) -> str:
        name = getattr(self._producer, "__name__", repr(self._producer))
        return f"{type(self).__name__}({name})"


class Stream(Generic[T]):
    """A single-use sequence wrapping a one-shot iterator."""

    __slots__ = ("_iterator", "_consumed")

    def __init__(self, iterator: Iterator[T]) -> None:
        self._iterator = iterator
        self._consumed = False

    @property
    def consumed(self) -> bool:
        """Check whether the stream has already been handed out for iteration."""
        return self._consumed

    def __iter__(self) -> Iterator[T]:
        if self._consumed:
            _LOGGER.debug("Refusing to iterate consumed stream %r", self)
            raise SingleUseError(self)

        self._consumed = True
        return self._iterator

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._iterator!r})"


def as_seq(values: Iterable[T]) -> Iterable[T]:
    """Mark one-shot iterators as single-use, leave re-iterable values untouched."""
    if isinstance(values, (Seq, Stream)):
        return values
    if isinstance(values, Iterator):
        return Stream(values)
    return values


def release(iterator: Iterator[Any]) -> None:
    """Finalize an iterator early if it supports it, as generators do."""
    close = getattr(iterator, "close", None)
    if close is not None:
        close()


def size(values: Iterable[Any]) -> int:
    """Count elements by iterating the whole sequence."""
    return sum(1 for _ in values)


def is_empty(values: Iterable[Any]) -> bool:
    """Check whether a sequence yields nothing, pulling at most one element."""
    iterator = iter(values)
    try:
        for _ in iterator:
            return False
        return True
    finally:
        release(iterator)


def _keys(pairs: Iterable[Tuple[K, V]]) -> Iterator[K]:
    for key, _ in pairs:
        yield key


def _values(pairs: Iterable[Tuple[K, V]]) -> Iterator[V]:
    for _, value in pairs:
        yield value


def keys(pairs: Iterable[Tuple[K, V]]) -> Seq[K]:
    """Project the first item of every pair."""
    return Seq(_keys, as_seq(pairs))


def values(pairs: Iterable[Tuple[K, V]]) -> Seq[V]:
    """Project the second item of every pair."""
    return Seq(_values, as_seq(pairs))
