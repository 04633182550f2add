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

"""Lazy set operations over mappings and iterables."""

import logging
import os

from .background import go_iter
from .builders import count, group_by, index, index_by, memoize, sorted_by_value
from .cursor import Cursor, Source, ZipTag, tagged_zip
from .exceptions import IterSetError, SingleUseError
from .lazy_set_ops import (
    difference,
    equal,
    equal_counts,
    intersect,
    is_disjoint,
    is_subset,
    sorted_iter_set_difference,
    sorted_iter_set_intersection,
    sorted_iter_set_union,
)
from .mapset import MapSet, cast, collect, set_of
from .metrics import __component_version__, __version__, prometheus_registry
from .seq import Seq, Stream, as_seq, is_empty, keys, size, values
from .transforms import compact, compact_by, unique, unique_by

_LOGGER = logging.getLogger("thoth.iterset")

if os.getenv("THOTH_ITERSET_DEBUG"):
    _LOGGER.setLevel(logging.DEBUG)
    _LOGGER.debug("Debug mode is on.")

__all__ = [
    "Cursor",
    "IterSetError",
    "MapSet",
    "Seq",
    "SingleUseError",
    "Source",
    "Stream",
    "ZipTag",
    "__component_version__",
    "__version__",
    "as_seq",
    "cast",
    "collect",
    "compact",
    "compact_by",
    "count",
    "difference",
    "equal",
    "equal_counts",
    "go_iter",
    "group_by",
    "index",
    "index_by",
    "intersect",
    "is_disjoint",
    "is_empty",
    "is_subset",
    "keys",
    "memoize",
    "prometheus_registry",
    "set_of",
    "size",
    "sorted_by_value",
    "sorted_iter_set_difference",
    "sorted_iter_set_intersection",
    "sorted_iter_set_union",
    "tagged_zip",
    "unique",
    "unique_by",
    "values",
]
