"""
Factory pattern: build objects whose concrete type is chosen at runtime.

Variants live in an explicit registry mapping a type tag to a constructor,
so adding a ship is a matter of registering it rather than patching a base.
"""

import logging
from typing import Callable, Dict, List, Optional

from pattern_catalog.core.exceptions import InvalidArgumentError, UnknownTypeError

logger = logging.getLogger(__name__)

DEFAULT_SPEED = 5


class Ship:
    """Default ship. Variants override `speed`."""

    speed: int = DEFAULT_SPEED

    def get_speed(self) -> int:
        return self.speed

    def __repr__(self) -> str:
        return f"{type(self).__name__}(speed={self.speed})"


class Fighter(Ship):
    speed = 15


class Drone(Ship):
    speed = 10


class ShipFactory:
    """Builds ships by type tag."""

    _registry: Dict[str, Callable[[], Ship]] = {
        "fighter": Fighter,
        "drone": Drone,
    }

    @classmethod
    def register(cls, kind: str, builder: Callable[[], Ship]) -> None:
        """
        Register a ship variant.

        Args:
            kind: The type tag callers pass to `build`
            builder: Zero-argument callable returning a Ship
        """
        if not kind:
            raise InvalidArgumentError("Type required", argument="kind", value=kind)
        if not isinstance(kind, str):
            raise InvalidArgumentError("Type must be a string", argument="kind", value=kind)
        if not callable(builder):
            raise InvalidArgumentError(
                f"Builder for '{kind}' is not callable", argument="builder", value=builder
            )
        cls._registry[kind] = builder
        logger.debug(f"Ship variant '{kind}' registered")

    @classmethod
    def unregister(cls, kind: str) -> bool:
        if kind in cls._registry:
            del cls._registry[kind]
            logger.debug(f"Ship variant '{kind}' unregistered")
            return True
        return False

    @classmethod
    def kinds(cls) -> List[str]:
        return list(cls._registry.keys())

    @classmethod
    def build(cls, kind: Optional[str]) -> Ship:
        """
        Build a ship of the requested kind.

        Raises:
            InvalidArgumentError: If no kind was given
            UnknownTypeError: If the kind is not registered
        """
        if not kind:
            raise InvalidArgumentError("Type required", argument="kind", value=kind)
        if not isinstance(kind, str):
            raise InvalidArgumentError("Type must be a string", argument="kind", value=kind)
        builder = cls._registry.get(kind)
        if builder is None:
            raise UnknownTypeError(kind, cls._registry.keys())
        return builder()
