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

"""Pull-based co-iteration over two sequences."""

from __future__ import annotations

from enum import Enum
from types import TracebackType
from typing import Generic, Iterable, Iterator, NamedTuple, Optional, Tuple, Type, TypeVar

from .seq import Seq, as_seq, release

T = TypeVar("T")


class Cursor(Generic[T]):
    """Poll a sequence one element at a time.

    The underlying iterator is released exactly once: when it runs dry, on
    ``stop()`` or when leaving a ``with`` block, whichever comes first.
    """

    __slots__ = ("_iterator", "_stopped")

    def __init__(self, values: Iterable[T]) -> None:
        self._iterator: Iterator[T] = iter(values)
        self._stopped = False

    @property
    def stopped(self) -> bool:
        """Check whether the cursor has released its iterator."""
        return self._stopped

    def next(self) -> Tuple[Optional[T], bool]:
        """Get the next element and a flag stating whether there was one."""
        if self._stopped:
            return None, False

        try:
            return next(self._iterator), True
        except StopIteration:
            self.stop()
            return None, False

    def stop(self) -> None:
        """Release the underlying iterator, subsequent calls are no-ops."""
        if self._stopped:
            return

        self._stopped = True
        self._release()

    def _release(self) -> None:
        release(self._iterator)

    def __enter__(self) -> Cursor[T]:
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.stop()


class Source(Enum):
    """Input a zipped element comes from."""

    LEFT = "left"
    RIGHT = "right"


class ZipTag(NamedTuple):
    """Origin of a zipped element and whether the opposite input is exhausted."""

    source: Source
    empty: bool = False


def _tagged_zip(left: Iterable[T], right: Iterable[T]) -> Iterator[Tuple[T, ZipTag]]:
    with Cursor(right) as cursor:
        right_empty = False
        for value in left:
            yield value, ZipTag(Source.LEFT, right_empty)
            if right_empty:
                continue

            other, ok = cursor.next()
            if ok:
                yield other, ZipTag(Source.RIGHT)
            else:
                right_empty = True

        while True:
            other, ok = cursor.next()
            if not ok:
                return
            yield other, ZipTag(Source.RIGHT, True)


def tagged_zip(left: Iterable[T], right: Iterable[T]) -> Seq[Tuple[T, ZipTag]]:
    """Interleave two sequences, tagging every element with its source.

    Each element of ``left`` is followed by at most one element of ``right``;
    once ``left`` runs out the rest of ``right`` is drained. Every element is
    visited exactly once.
    """
    return Seq(_tagged_zip, as_seq(left), as_seq(right))
