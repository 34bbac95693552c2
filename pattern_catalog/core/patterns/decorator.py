"""
Decorator pattern: adjust a target object's behaviour by layering named
decorations on top of it at runtime.
"""

import logging
from typing import Dict, List, Tuple

from pattern_catalog.core.exceptions import NotFoundError

logger = logging.getLogger(__name__)

BASE_SUGAR = 300


class SugarDecoration:
    """A decoration that adds a fixed amount of sugar."""

    def __init__(self, name: str, amount: int) -> None:
        self.name = name
        self.amount = amount

    def get_sugar(self, sugar: int) -> int:
        return sugar + self.amount


class Cake:
    """A cake whose sugar content depends on the decorations applied to it."""

    decorators: Dict[str, SugarDecoration] = {
        "frosting": SugarDecoration("frosting", 100),
        "sprinkles": SugarDecoration("sprinkles", 50),
    }

    def __init__(self, sugar: int = BASE_SUGAR) -> None:
        self.sugar = sugar
        self._decorations: List[str] = []

    @property
    def decorations(self) -> Tuple[str, ...]:
        return tuple(self._decorations)

    def decorate(self, decorator: str) -> None:
        """
        Apply a registered decoration. Applying one twice has no effect.

        Raises:
            NotFoundError: If the decoration is not registered
        """
        if decorator not in self.decorators:
            raise NotFoundError("Decorator", decorator)
        if decorator not in self._decorations:
            self._decorations.append(decorator)
            logger.debug(f"Cake decorated with {decorator}")

    def undecorate(self, decorator: str) -> None:
        """Remove a decoration if it is applied."""
        if decorator in self._decorations:
            self._decorations.remove(decorator)
            logger.debug(f"Removed {decorator} from cake")

    def get_sugar(self) -> str:
        sugar = self.sugar
        for decoration in self._decorations:
            sugar = self.decorators[decoration].get_sugar(sugar)
        return f"{sugar}g"


def make_cake() -> Cake:
    return Cake()
