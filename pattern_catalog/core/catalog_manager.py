from typing import Any, Dict, Optional
import logging
from pattern_catalog.core.patterns import (
    BookKeeper,
    Cake,
    DVRController,
    EventHub,
    General,
    MageFacade,
    Node,
    RosterIterator,
    SharedInstance,
    ShipFactory,
)
from pattern_catalog.core.patterns.singleton import Singleton


class CatalogManager(Singleton):
    """
    Singleton Catalog Manager.

    Keeps every pattern's entry construct under a name so a demo or test
    harness can look patterns up without importing each module.
    """

    def _setup(self):
        """Initialize the catalog manager."""
        self._patterns: Dict[str, Any] = {}
        self._logger = logging.getLogger(__name__)
        self._register_core_patterns()

    def _register_core_patterns(self):
        """Register the catalog's built-in patterns."""
        self.register_pattern("singleton", SharedInstance)
        self.register_pattern("factory", ShipFactory)
        self.register_pattern("iterator", RosterIterator)
        self.register_pattern("decorator", Cake)
        self.register_pattern("strategy", General)
        self.register_pattern("facade", MageFacade)
        self.register_pattern("proxy", BookKeeper)
        self.register_pattern("adapter", DVRController)
        self.register_pattern("composite", Node)
        self.register_pattern("observer", EventHub)
        self._logger.debug("Core patterns registered successfully")

    def register_pattern(self, name: str, construct: Any):
        """
        Register a pattern with the catalog.

        Args:
            name: The name to register the pattern under
            construct: The class or factory that demonstrates the pattern
        """
        self._patterns[name] = construct
        self._logger.debug(f"Pattern '{name}' registered")

    def get_pattern(self, name: str) -> Optional[Any]:
        """
        Get a registered pattern by name.

        Returns:
            The pattern construct, or None if not found
        """
        return self._patterns.get(name)

    def has_pattern(self, name: str) -> bool:
        return name in self._patterns

    def unregister_pattern(self, name: str) -> bool:
        """
        Unregister a pattern.

        Returns:
            True if the pattern was unregistered, False if it wasn't found
        """
        if name in self._patterns:
            del self._patterns[name]
            self._logger.debug(f"Pattern '{name}' unregistered")
            return True
        return False

    def list_patterns(self) -> list:
        return list(self._patterns.keys())

    def get_catalog_status(self) -> dict:
        """
        Get an overview of the catalog.

        Returns:
            Dictionary with the registered pattern names and constructs
        """
        return {
            "patterns_registered": len(self._patterns),
            "pattern_names": self.list_patterns(),
            "constructs": {name: getattr(construct, "__name__", repr(construct))
                           for name, construct in self._patterns.items()},
        }


# Create the global catalog manager instance
catalog_manager = CatalogManager.get_instance()
