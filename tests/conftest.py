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

"""Shared fixtures for iterset tests."""

from typing import Any

import pytest

from thoth.iterset.cursor import Cursor


class CursorTracker:
    """Count cursors created and released."""

    def __init__(self) -> None:
        self.created = 0
        self.released = 0

    @property
    def balanced(self) -> bool:
        return self.created == self.released


@pytest.fixture
def cursor_tracker(monkeypatch: pytest.MonkeyPatch) -> CursorTracker:
    """Track cursor creation and release for the duration of a test."""
    tracker = CursorTracker()
    init = Cursor.__init__
    release = Cursor._release

    def _init(self: Cursor, values: Any) -> None:
        tracker.created += 1
        init(self, values)

    def _release(self: Cursor) -> None:
        tracker.released += 1
        release(self)

    monkeypatch.setattr(Cursor, "__init__", _init)
    monkeypatch.setattr(Cursor, "_release", _release)
    return tracker
