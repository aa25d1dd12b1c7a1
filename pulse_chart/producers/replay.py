"""ReplayProducer — plays back a fixed sequence of samples.

Used for demos, tests and offline replays.  Items may be Samples,
``{"time", "status"}`` mappings, or exception instances; an exception
item is raised from next() instead of returned, which makes it easy to
script transient producer failures.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Union

from pulse_chart.domain.errors import ProducerUnavailable
from pulse_chart.domain.sample import Sample
from pulse_chart.producers.base import SampleProducer

ReplayItem = Union[Sample, Mapping[str, Any], BaseException]


class ReplayProducer(SampleProducer):
    """Yields the given items in order.

    Args:
        items: The scripted sequence.
        loop: Start over from the beginning once exhausted.  Otherwise an
              exhausted producer raises ProducerUnavailable.
    """

    def __init__(self, items: Iterable[ReplayItem], loop: bool = False) -> None:
        self._items: list[ReplayItem] = list(items)
        self._loop = loop
        self._position = 0
        if loop and not self._items:
            raise ValueError("a looping replay needs at least one item")

    @property
    def name(self) -> str:
        return "replay"

    @property
    def remaining(self) -> int:
        return len(self._items) - self._position

    async def next(self) -> Sample:
        if self._position >= len(self._items):
            if not self._loop:
                raise ProducerUnavailable(self.name, "replay sequence exhausted")
            self._position = 0

        item = self._items[self._position]
        self._position += 1

        if isinstance(item, BaseException):
            raise item
        if isinstance(item, Sample):
            return item
        return Sample.parse(item)
