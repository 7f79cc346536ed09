"""Decode-and-dispatch loop over a stream of NMEA lines."""

from nmeadecode.stream.handlers import Handler, HandlerRegistry
from nmeadecode.stream.processor import NMEAProcessor, ProcessStats, process
from nmeadecode.stream.satellites import satellite_rounds

__all__ = [
    "Handler",
    "HandlerRegistry",
    "NMEAProcessor",
    "ProcessStats",
    "process",
    "satellite_rounds",
]
