"""Producer Registry — selects a sample producer by name.

The host reads a producer name from configuration and asks the registry
to build it.  Factories are plain callables returning a SampleProducer;
keyword arguments are passed through untouched.

No fallbacks.  Fail fast if the name is unknown.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from pulse_chart.domain.errors import UnknownProducerError
from pulse_chart.producers.base import SampleProducer
from pulse_chart.producers.replay import ReplayProducer
from pulse_chart.producers.synthetic import SyntheticProducer

logger = logging.getLogger(__name__)

ProducerFactory = Callable[..., SampleProducer]


class ProducerRegistry:
    """Registry of named producer factories.

    Usage:
        registry = ProducerRegistry()
        registry.register("synthetic", SyntheticProducer)

        producer = registry.create("synthetic", base=50.0, spread=2.0)
    """

    def __init__(self) -> None:
        self._factories: dict[str, ProducerFactory] = {}

    def register(self, name: str, factory: ProducerFactory) -> None:
        """Add (or replace) the factory for *name*."""
        if name in self._factories:
            logger.warning("Replacing producer factory: %s", name)
        self._factories[name] = factory
        logger.info("Registered producer: %s", name)

    def create(self, name: str, **kwargs: Any) -> SampleProducer:
        """Build the producer registered under *name*.

        Raises:
            UnknownProducerError: If nothing is registered under *name*.
        """
        factory = self._factories.get(name)
        if factory is None:
            raise UnknownProducerError(
                f"No producer registered as '{name}' (known: {self.names})"
            )
        producer = factory(**kwargs)
        logger.debug("Created producer '%s' → %s", name, type(producer).__name__)
        return producer

    @property
    def names(self) -> list[str]:
        """Registered producer names in registration order."""
        return list(self._factories)


def default_registry() -> ProducerRegistry:
    """Registry pre-loaded with the producers shipped in this package."""
    registry = ProducerRegistry()
    registry.register("synthetic", SyntheticProducer)
    registry.register("replay", ReplayProducer)
    return registry
