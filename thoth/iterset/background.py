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

"""Iterate a sequence in a background worker through a bounded channel."""

from __future__ import annotations

import logging
import os
import queue
import threading
from concurrent.futures.thread import ThreadPoolExecutor
from contextlib import suppress
from typing import Iterable, Iterator, Optional, TypeVar

from .metrics import _METRIC_BACKGROUND_ITEMS, _METRIC_BACKGROUND_WORKERS
from .seq import Seq, as_seq, release

_LOGGER = logging.getLogger("thoth.iterset")

_DEFAULT_BUFFER_SIZE = int(os.getenv("THOTH_ITERSET_BUFFER_SIZE", 0))
_POLL_INTERVAL = float(os.getenv("THOTH_ITERSET_POLL_INTERVAL", 0.05))

# End of stream marker.
_END = object()

T = TypeVar("T")


def _cancelled(stopped: threading.Event, cancel: Optional[threading.Event]) -> bool:
    return stopped.is_set() or (cancel is not None and cancel.is_set())


def _send(
    channel: queue.Queue, item: object, stopped: threading.Event, cancel: Optional[threading.Event]
) -> bool:
    """Push an item, giving up once cancelled."""
    while not _cancelled(stopped, cancel):
        try:
            channel.put(item, timeout=_POLL_INTERVAL)
            return True
        except queue.Full:
            continue
    return False


def _wait_received(received: threading.Event, stopped: threading.Event, cancel: Optional[threading.Event]) -> bool:
    """Wait until the consumer takes the pushed item, giving up once cancelled."""
    while not received.wait(timeout=_POLL_INTERVAL):
        if _cancelled(stopped, cancel):
            return False
    return True


def _pump(
    values: Iterable[T],
    channel: queue.Queue,
    stopped: threading.Event,
    cancel: Optional[threading.Event],
    received: Optional[threading.Event] = None,
) -> None:
    """Push values to the channel until they run out or iteration is cancelled.

    With received given, every value is handed over before the next one is pulled.
    """
    outcome = "cancelled"
    sent = 0
    iterator: Optional[Iterator[T]] = None
    try:
        iterator = iter(values)
        for value in iterator:
            if received is not None:
                received.clear()
            if not _send(channel, value, stopped, cancel):
                break
            sent += 1
            _METRIC_BACKGROUND_ITEMS.inc()
            if received is not None and not _wait_received(received, stopped, cancel):
                break
        else:
            outcome = "finished"
    except Exception:
        outcome = "error"
        raise
    finally:
        if iterator is not None:
            release(iterator)
        _LOGGER.debug("Background iteration %s after %d item(s)", outcome, sent)
        _METRIC_BACKGROUND_WORKERS.labels(result_type=outcome).inc()
        if not _send(channel, _END, stopped, cancel):
            # A full channel is never read again once cancelled.
            with suppress(queue.Full):
                channel.put_nowait(_END)


def _go_iter(values: Iterable[T], size: int, cancel: Optional[threading.Event]) -> Iterator[T]:
    channel: queue.Queue = queue.Queue(maxsize=max(size, 1))
    stopped = threading.Event()
    # Capacity 0 is a rendezvous: the worker waits for each item to be taken.
    received = threading.Event() if size == 0 else None
    _LOGGER.debug("Starting background iteration with buffer size %d", size)

    with ThreadPoolExecutor(max_workers=1, thread_name_prefix="thoth-iterset") as executor:
        future = executor.submit(_pump, values, channel, stopped, cancel, received)
        try:
            while not _cancelled(stopped, cancel):
                item = channel.get()
                if received is not None:
                    received.set()
                if item is _END:
                    break
                yield item
        finally:
            stopped.set()

    future.result()


def go_iter(values: Iterable[T], size: Optional[int] = None, cancel: Optional[threading.Event] = None) -> Seq[T]:
    """Iterate values in a background thread, handing them over through a bounded channel.

    Each iteration starts its own worker. Breaking out of the loop stops the
    worker and waits for it to exit; setting the ``cancel`` event ends the
    iteration early as ordinary exhaustion. A capacity of 0 is a rendezvous:
    the worker pulls the next value only once the previous one was received. Errors raised by values are re-raised once the channel drains.
    """
    if size is None:
        size = _DEFAULT_BUFFER_SIZE
    if size < 0:
        raise ValueError(f"Channel size must not be negative, got {size}")

    return Seq(_go_iter, as_seq(values), size, cancel)
