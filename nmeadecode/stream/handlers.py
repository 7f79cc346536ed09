"""Per-sentence-type handler registry.

A registry maps a sentence type code to at most one callback accepting the
record decoded from that type. Types without a callback are still decoded;
their records are simply not delivered.
"""

from collections.abc import Callable, Iterator, Mapping
from typing import Any

from nmeadecode.nmea.decoders import SUPPORTED_SENTENCE_TYPES
from nmeadecode.nmea.types import NMEARecord

__all__ = ["Handler", "HandlerRegistry", "as_registry"]

Handler = Callable[[Any], None]
SentenceKey = str | type[NMEARecord]


def _type_code(key: SentenceKey) -> str:
    if isinstance(key, type):
        return key.sentence_type
    return key.upper()


class HandlerRegistry(Mapping[str, Handler]):
    """Callbacks keyed by sentence type code.

    Handlers can be registered by type code or by record class::

        registry = HandlerRegistry()
        registry.register("RMC", on_rmc)
        registry.register(GGAData, on_gga)

        @registry.handles("GSV")
        def on_gsv(gsv: GSVData) -> None:
            ...

    Args:
        handlers: Optional initial mapping of type code to callback.
    """

    def __init__(self, handlers: Mapping[str, Handler] | None = None) -> None:
        self._handlers: dict[str, Handler] = {}
        for sentence_type, handler in (handlers or {}).items():
            self.register(sentence_type, handler)

    def register(self, sentence_type: SentenceKey, handler: Handler) -> None:
        """Register ``handler`` for a sentence type, replacing any previous one.

        Raises:
            ValueError: If no decoder exists for the sentence type.
        """
        code = _type_code(sentence_type)
        if code not in SUPPORTED_SENTENCE_TYPES:
            raise ValueError(f"Unsupported sentence type: {code!r}")
        self._handlers[code] = handler

    def handles(self, sentence_type: SentenceKey) -> Callable[[Handler], Handler]:
        """Decorator form of ``register``."""

        def decorator(handler: Handler) -> Handler:
            self.register(sentence_type, handler)
            return handler

        return decorator

    def unregister(self, sentence_type: SentenceKey) -> None:
        """Remove the handler of a sentence type, if any."""
        self._handlers.pop(_type_code(sentence_type), None)

    def __getitem__(self, sentence_type: SentenceKey) -> Handler:
        if not isinstance(sentence_type, (str, type)):
            raise KeyError(sentence_type)
        return self._handlers[_type_code(sentence_type)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)


def as_registry(handlers: Mapping[str, Handler] | None) -> HandlerRegistry:
    """Return ``handlers`` as a registry, treating None as empty.

    Plain mappings are copied into a new registry, so their keys are matched
    case-insensitively and validated like ``register`` arguments.

    Raises:
        ValueError: If a plain mapping names an unsupported sentence type.
    """
    if isinstance(handlers, HandlerRegistry):
        return handlers
    return HandlerRegistry(handlers)
