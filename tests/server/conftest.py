"""Pytest fixtures for server module testing."""

from collections.abc import Iterator
from unittest.mock import patch

import pytest

from tests.server.helpers import ControlledSource


@pytest.fixture(autouse=True)
def nmea_source() -> Iterator[ControlledSource]:
    source = ControlledSource()
    with patch("server.stream.open_nmea_source", return_value=source):
        yield source
    source.line_queue.put(None)
