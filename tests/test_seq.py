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

"""Tests for restartable sequences and single-use streams."""

import pytest

from thoth.iterset import SingleUseError
from thoth.iterset import unique
from thoth.iterset.seq import Seq, Stream, as_seq, is_empty, keys, size, values

from .helpers import generate


def test_seq_restarts() -> None:
    seq = Seq(range, 3)
    assert list(seq) == [0, 1, 2]
    assert list(seq) == [0, 1, 2]


def test_stream_second_iteration() -> None:
    stream = Stream(iter([1, 2]))
    assert not stream.consumed
    assert list(stream) == [1, 2]
    assert stream.consumed
    with pytest.raises(SingleUseError) as exc:
        list(stream)
    assert exc.value.stream is stream


def test_as_seq() -> None:
    items = ["a", "b"]
    assert as_seq(items) is items
    assert isinstance(as_seq(iter(items)), Stream)
    seq = Seq(iter, items)
    assert as_seq(seq) is seq


def test_combinator_over_generator_is_single_use() -> None:
    seq = unique(x for x in "aba")
    assert list(seq) == ["a", "b"]
    with pytest.raises(SingleUseError):
        list(seq)


def test_size() -> None:
    assert size([]) == 0
    assert size("abc") == 3
    assert size(x for x in range(5)) == 5


def test_is_empty() -> None:
    assert is_empty([])
    assert not is_empty([None])


def test_is_empty_releases_generator() -> None:
    closed = []
    pulled = []
    assert not is_empty(generate(["a", "b"], closed, pulled))
    assert pulled == ["a"]
    assert closed == [True]


def test_keys_values() -> None:
    pairs = [("a", 1), ("b", 2)]
    assert list(keys(pairs)) == ["a", "b"]
    assert list(values(pairs)) == [1, 2]
    assert size(keys(pairs)) == size(keys(pairs))
