"""
Facade pattern: one entry point in front of actors whose interfaces differ.
"""

from abc import ABC, abstractmethod
import logging

from pattern_catalog.core.exceptions import UnsupportedOperationError
from pattern_catalog.core.capabilities import has_capability

logger = logging.getLogger(__name__)


class SpellCaster(ABC):
    """Capability: actors that `cast` spells."""

    @abstractmethod
    def cast(self, spell: str) -> str:
        ...

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is SpellCaster:
            return has_capability(subclass, "cast") or NotImplemented
        return NotImplemented


class Enchanter(ABC):
    """Capability: actors that `enchant` with spells."""

    @abstractmethod
    def enchant(self, spell: str) -> str:
        ...

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is Enchanter:
            return has_capability(subclass, "enchant") or NotImplemented
        return NotImplemented


class Mage(SpellCaster):
    def __init__(self, name: str = "Mage") -> None:
        self.name = name

    def cast(self, spell: str) -> str:
        return f"{self.name} casts {spell}"


class Enchantress(Enchanter):
    def __init__(self, name: str = "Enchantress") -> None:
        self.name = name

    def enchant(self, spell: str) -> str:
        return f"{self.name} enchants with {spell}"


class MageFacade:
    """Invokes a spell on any actor, whichever capability it has."""

    def __init__(self, actor) -> None:
        self.actor = actor

    def invoke(self, spell: str) -> str:
        """
        Raises:
            UnsupportedOperationError: If the actor can neither cast nor enchant
        """
        if isinstance(self.actor, SpellCaster):
            return self.actor.cast(spell)
        if isinstance(self.actor, Enchanter):
            return self.actor.enchant(spell)
        logger.warning(f"{type(self.actor).__name__} cannot cast or enchant")
        raise UnsupportedOperationError(
            f"{type(self.actor).__name__} supports neither cast nor enchant",
            capability="cast|enchant",
        )
