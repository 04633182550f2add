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

"""Metrics exposed by iterset."""

from importlib_metadata import version
from prometheus_client import CollectorRegistry, Gauge, Counter as PromCounter

prometheus_registry = CollectorRegistry()

__version__ = version("thoth-iterset")
__component_version__ = f"{__version__}+prometheus_client{version('prometheus_client')}"

_METRIC_INFO = Gauge(
    "thoth_iterset_info",
    "Thoth iterset library information",
    ["version"],
    registry=prometheus_registry,
)

_METRIC_BACKGROUND_ITEMS = PromCounter(
    "thoth_iterset_background_items",
    "Thoth iterset number of items pushed by background iteration workers",
    registry=prometheus_registry,
)

_METRIC_BACKGROUND_WORKERS = PromCounter(
    "thoth_iterset_background_workers",
    "Thoth iterset number of background iteration workers by outcome",
    ["result_type"],
    registry=prometheus_registry,
)

_METRIC_INFO.labels(__component_version__).inc()
