"""
Strategy pattern: swap the algorithm an object uses at runtime.
"""

from abc import ABC, abstractmethod
import logging
from typing import Any, Optional

from pattern_catalog.core.capabilities import has_capability
from pattern_catalog.core.exceptions import InvalidArgumentError, PreconditionFailedError

logger = logging.getLogger(__name__)


class Strategy(ABC):
    """
    Capability interface for strategies.

    Any class defining a callable `enact` conforms, whether or not it
    inherits from this base.
    """

    @abstractmethod
    def enact(self) -> Any:
        ...

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is Strategy:
            return has_capability(subclass, "enact") or NotImplemented
        return NotImplemented


class Pincer(Strategy):
    def enact(self) -> str:
        return "devastating pincer attack!"


class Diplomacy(Strategy):
    def enact(self) -> str:
        return "amicable friendship"


class General:
    """Wages war using whichever strategy it currently holds."""

    def __init__(self) -> None:
        self.strategy: Optional[Strategy] = None

    def set_strategy(self, strategy: Strategy) -> None:
        """
        Args:
            strategy: Any object conforming to `Strategy`

        Raises:
            InvalidArgumentError: If the object does not expose `enact`
        """
        if not isinstance(strategy, Strategy):
            raise InvalidArgumentError("Strategy not defined", argument="strategy", value=strategy)
        self.strategy = strategy
        logger.debug(f"General switched strategy to {type(strategy).__name__}")

    def wage_war(self) -> Any:
        if self.strategy is None:
            raise PreconditionFailedError("No strategy set")
        return self.strategy.enact()


def spawn_general() -> General:
    return General()
