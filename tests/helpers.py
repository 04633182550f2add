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

"""Helpers shared by iterset tests."""

from typing import Any, Iterator, List


def generate(items: List[Any], closed: List[bool], pulled: List[Any] = None) -> Iterator[Any]:
    """Yield items, recording pulled items and whether the generator was finalized."""
    try:
        for item in items:
            if pulled is not None:
                pulled.append(item)
            yield item
    finally:
        closed.append(True)
