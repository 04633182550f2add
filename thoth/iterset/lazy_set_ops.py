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

"""Lazy set-like operations on iterables.

The general operations need only hashable elements and never copy a whole
input up front: the second sequence is pulled through a cursor just far
enough to answer each membership question. The ``sorted_iter_set_*`` family
expects both inputs sorted in non-decreasing order and merges them in a
single pass without any auxiliary set; unsorted input gives unspecified
output.

All operations returning sequences return restartable ones.
"""

from __future__ import annotations

from collections import Counter
from contextlib import closing
from typing import Hashable, Iterable, Iterator, Set, Tuple, TypeVar, TYPE_CHECKING

from .cursor import Cursor, Source, ZipTag, _tagged_zip
from .seq import Seq, as_seq, is_empty

if TYPE_CHECKING:
    from _typeshed import SupportsDunderLT

    T = TypeVar("T", bound=SupportsDunderLT)

H = TypeVar("H", bound=Hashable)


def _sides(tag: ZipTag, left: Set[H], right: Set[H]) -> Tuple[Set[H], Set[H]]:
    if tag.source is Source.LEFT:
        return left, right
    return right, left


def _difference(keys: Iterable[H], values: Iterable[H]) -> Iterator[H]:
    seen: Set[H] = set()
    with Cursor(values) as cursor:
        for key in keys:
            while key not in seen:
                value, ok = cursor.next()
                if not ok:
                    break
                seen.add(value)

            if key not in seen:
                yield key


def _intersect(keys: Iterable[H], values: Iterable[H]) -> Iterator[H]:
    left: Set[H] = set()
    right: Set[H] = set()
    matched: Set[H] = set()
    with closing(_tagged_zip(keys, values)) as pairs:
        for value, tag in pairs:
            mine, theirs = _sides(tag, left, right)
            if value in matched or value in mine:
                continue

            if value in theirs:
                theirs.remove(value)
                matched.add(value)
                yield value
            elif tag.empty:
                # The other side is done, only its pending keys can still match.
                if not theirs:
                    return
            else:
                mine.add(value)


def _differences(keys: Iterable[H], seqs: Tuple[Iterable[H], ...]) -> Iterable[H]:
    result = keys
    for values in seqs:
        result = _difference(result, values)
    return result


def _intersections(keys: Iterable[H], seqs: Tuple[Iterable[H], ...]) -> Iterable[H]:
    result = keys
    for values in seqs:
        result = _intersect(result, values)
    return result


def difference(keys: Iterable[H], *seqs: Iterable[H]) -> Seq[H]:
    """Get elements of keys which are absent from every other sequence, in order of keys.

    Duplicates in keys are kept. The other sequences are consumed only as far as
    needed to confirm membership of the keys pulled so far.
    """
    return Seq(_differences, as_seq(keys), tuple(as_seq(values) for values in seqs))


def intersect(keys: Iterable[H], *seqs: Iterable[H]) -> Seq[H]:
    """Get distinct elements of keys which are present in every other sequence.

    Both inputs of each stage are pulled alternately, so elements come out in the
    order their matches are discovered; the order of keys is not preserved, e.g.
    ``intersect("abcd", "dcba")`` yields ``c, b, d, a``. Use ``MapSet.intersect``
    to keep the order of keys. A stage stops as soon as one side is exhausted and
    nothing pending on the other side can match any more.
    """
    return Seq(_intersections, as_seq(keys), tuple(as_seq(values) for values in seqs))


def equal(seq1: Iterable[H], seq2: Iterable[H]) -> bool:
    """Check whether two sequences hold the same set of elements."""
    left: Set[H] = set()
    right: Set[H] = set()
    matched: Set[H] = set()
    with closing(_tagged_zip(seq1, seq2)) as pairs:
        for value, tag in pairs:
            mine, theirs = _sides(tag, left, right)
            if value in matched or value in mine:
                continue

            if value in theirs:
                theirs.remove(value)
                matched.add(value)
            elif tag.empty:
                return False
            else:
                mine.add(value)

    return not left and not right


def equal_counts(seq1: Iterable[H], seq2: Iterable[H]) -> bool:
    """Check whether two sequences are equal as multisets."""
    counts: Counter = Counter()
    with closing(_tagged_zip(seq1, seq2)) as pairs:
        for value, tag in pairs:
            if tag.source is Source.LEFT:
                counts[value] += 1
                if tag.empty and counts[value] > 0:
                    return False
            else:
                counts[value] -= 1
                if tag.empty and counts[value] < 0:
                    return False

            if not counts[value]:
                del counts[value]

    return not counts


def is_subset(keys: Iterable[H], seq: Iterable[H]) -> bool:
    """Check whether every element of keys is present in seq."""
    return is_empty(_difference(keys, seq))


def is_disjoint(seq1: Iterable[H], seq2: Iterable[H]) -> bool:
    """Check whether two sequences have no element in common."""
    return is_empty(_intersect(seq1, seq2))


def _sorted_iter_set_union(source: Iterable[T], dest: Iterable[T]) -> Iterator[T]:
    with Cursor(dest) as cursor:
        d, has_d = cursor.next()
        for s in source:
            while has_d and d < s:
                yield d
                d, has_d = cursor.next()

            yield s
            if has_d and d == s:
                yield d
                d, has_d = cursor.next()

        while has_d:
            yield d
            d, has_d = cursor.next()


def _sorted_iter_set_intersection(source: Iterable[T], dest: Iterable[T]) -> Iterator[T]:
    with Cursor(dest) as cursor:
        d, has_d = cursor.next()
        for s in source:
            while has_d and d < s:
                d, has_d = cursor.next()

            if not has_d:
                return
            if d == s:
                yield s


def _sorted_iter_set_difference(source: Iterable[T], dest: Iterable[T]) -> Iterator[T]:
    _source = iter(source)
    with Cursor(dest) as cursor:
        d, has_d = cursor.next()
        for s in _source:
            while has_d and d < s:
                d, has_d = cursor.next()

            if not has_d:
                yield s
                break
            elif s != d:
                yield s

    yield from _source


def sorted_iter_set_union(source: Iterable[T], dest: Iterable[T]) -> Seq[T]:
    """Merge two sorted iterables, keeping duplicates from both."""
    return Seq(_sorted_iter_set_union, as_seq(source), as_seq(dest))


def sorted_iter_set_intersection(source: Iterable[T], dest: Iterable[T]) -> Seq[T]:
    """Compute the set intersection of two sorted iterables, in order of source."""
    return Seq(_sorted_iter_set_intersection, as_seq(source), as_seq(dest))


def sorted_iter_set_difference(source: Iterable[T], dest: Iterable[T]) -> Seq[T]:
    """Compute the set difference of two sorted iterables."""
    return Seq(_sorted_iter_set_difference, as_seq(source), as_seq(dest))
