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

"""Tests for cursors and tagged co-iteration."""

from thoth.iterset import Cursor, Source, ZipTag, tagged_zip

from .helpers import generate

L = Source.LEFT
R = Source.RIGHT


def test_cursor_next() -> None:
    cursor = Cursor("ab")
    assert cursor.next() == ("a", True)
    assert cursor.next() == ("b", True)
    assert not cursor.stopped
    assert cursor.next() == (None, False)
    assert cursor.stopped
    assert cursor.next() == (None, False)


def test_cursor_releases_once(cursor_tracker) -> None:
    closed = []
    with Cursor(generate(["a"], closed)) as cursor:
        assert cursor.next() == ("a", True)
        assert cursor.next() == (None, False)
        cursor.stop()

    assert closed == [True]
    assert cursor_tracker.created == 1
    assert cursor_tracker.released == 1


def test_cursor_stop_early() -> None:
    closed = []
    cursor = Cursor(generate(["a", "b"], closed))
    assert cursor.next() == ("a", True)
    cursor.stop()
    assert closed == [True]
    assert cursor.next() == (None, False)


def test_tagged_zip_left_shorter() -> None:
    assert list(tagged_zip("ab", "xyz")) == [
        ("a", ZipTag(L, False)),
        ("x", ZipTag(R, False)),
        ("b", ZipTag(L, False)),
        ("y", ZipTag(R, False)),
        ("z", ZipTag(R, True)),
    ]


def test_tagged_zip_right_shorter() -> None:
    assert list(tagged_zip("abc", "x")) == [
        ("a", ZipTag(L, False)),
        ("x", ZipTag(R, False)),
        ("b", ZipTag(L, False)),
        ("c", ZipTag(L, True)),
    ]


def test_tagged_zip_empty() -> None:
    assert list(tagged_zip("", "")) == []
    assert list(tagged_zip("", "x")) == [("x", ZipTag(R, True))]
    assert list(tagged_zip("a", "")) == [("a", ZipTag(L, False))]


def test_tagged_zip_restarts() -> None:
    zipped = tagged_zip("ab", "c")
    assert list(zipped) == list(zipped)


def test_tagged_zip_early_exit(cursor_tracker) -> None:
    closed = []
    iterator = iter(tagged_zip("abc", generate(["x", "y", "z"], closed)))
    assert next(iterator) == ("a", ZipTag(L, False))
    assert next(iterator) == ("x", ZipTag(R, False))
    iterator.close()

    assert closed == [True]
    assert cursor_tracker.created == 1
    assert cursor_tracker.balanced
