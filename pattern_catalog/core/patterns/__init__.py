"""
Design Patterns Module

This module contains the catalog's design pattern implementations.
Currently includes:
- Singleton Pattern: one lazily created, shared instance per class
- Factory Pattern: ships built from a registry of type tags
- Iterator Pattern: a rewindable cursor over the player roster
- Decorator Pattern: cakes whose sugar grows with each decoration
- Strategy Pattern: a general with swappable battle strategies
- Facade Pattern: one `invoke` for casters and enchanters alike
- Proxy Pattern: a caching book keeper in front of a slow stock count
- Adapter Pattern: legacy DVRs driven by a modern controller
- Composite Pattern: named leaves and anonymous groups behind one interface
- Observer Pattern: topic-based publish/subscribe
"""

from .singleton import Singleton, SingletonMeta, SingletonABCMeta, SharedInstance
from .factory import Ship, Fighter, Drone, ShipFactory, DEFAULT_SPEED
from .iterator import RosterEntry, RosterIterator, DEFAULT_ROSTER
from .decorator import Cake, SugarDecoration, make_cake, BASE_SUGAR
from .strategy import Strategy, Pincer, Diplomacy, General, spawn_general
from .facade import SpellCaster, Enchanter, Mage, Enchantress, MageFacade
from .proxy import StockKeeper, BookKeeper
from .adapter import Playback, LegacyPlayback, ModernDVR, LegacyDVR, LegacyAdapter, DVRController
from .composite import Node
from .observer import EventHub

__all__ = [
    "Singleton", "SingletonMeta", "SingletonABCMeta", "SharedInstance",
    "Ship", "Fighter", "Drone", "ShipFactory", "DEFAULT_SPEED",
    "RosterEntry", "RosterIterator", "DEFAULT_ROSTER",
    "Cake", "SugarDecoration", "make_cake", "BASE_SUGAR",
    "Strategy", "Pincer", "Diplomacy", "General", "spawn_general",
    "SpellCaster", "Enchanter", "Mage", "Enchantress", "MageFacade",
    "StockKeeper", "BookKeeper",
    "Playback", "LegacyPlayback", "ModernDVR", "LegacyDVR", "LegacyAdapter", "DVRController",
    "Node",
    "EventHub",
]
