"""Pytest fixtures for server module testing."""

import queue
from collections.abc import Iterator
from unittest.mock import patch

import pytest

from marine_nmea import NMEASentence


class ControlledReader:
    """Stands in for NMEASocketReader; tests feed it decoded sentences."""

    def __init__(self) -> None:
        self.message_queue: queue.Queue[NMEASentence | None] = queue.Queue()
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True
        self.message_queue.put(None)

    def __iter__(self) -> Iterator[NMEASentence]:
        while True:
            item = self.message_queue.get()
            if item is None:
                break
            yield item


@pytest.fixture(autouse=True)
def reader_controller() -> Iterator[ControlledReader]:
    controller = ControlledReader()
    with patch("server.main.NMEASocketReader", return_value=controller) as factory:
        controller.factory = factory  # type: ignore[attr-defined]
        yield controller
    controller.message_queue.put(None)
