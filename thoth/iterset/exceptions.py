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

"""Exceptions raised by iterset."""

from __future__ import annotations

from typing import Any


class IterSetError(Exception):
    """A base class for iterset exceptions."""


class SingleUseError(IterSetError):
    """Raised when a single-use stream is iterated more than once."""

    def __init__(self, stream: Any) -> None:
        self.stream = stream
        super().__init__(f"Single-use stream {stream!r} has already been consumed")
