"""
Adapter pattern: let a legacy device work with a controller written for the
modern interface.
"""

from abc import ABC, abstractmethod
import logging

from pattern_catalog.core.exceptions import IncompatibleError
from pattern_catalog.core.capabilities import has_capability

logger = logging.getLogger(__name__)


class Playback(ABC):
    """Modern device interface: `start` / `halt`."""

    @abstractmethod
    def start(self) -> str:
        ...

    @abstractmethod
    def halt(self) -> str:
        ...

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is Playback:
            if has_capability(subclass, "start", "halt"):
                return True
        return NotImplemented


class LegacyPlayback(ABC):
    """Legacy device interface: `play` / `pause`."""

    @abstractmethod
    def play(self) -> str:
        ...

    @abstractmethod
    def pause(self) -> str:
        ...

    @classmethod
    def __subclasshook__(cls, subclass):
        if cls is LegacyPlayback:
            if has_capability(subclass, "play", "pause"):
                return True
        return NotImplemented


class ModernDVR(Playback):
    def start(self) -> str:
        return "DVR started"

    def halt(self) -> str:
        return "DVR halted"


class LegacyDVR(LegacyPlayback):
    def play(self) -> str:
        return "Legacy DVR playing"

    def pause(self) -> str:
        return "Legacy DVR paused"


class LegacyAdapter(Playback):
    """Exposes `start` / `halt` on top of a legacy device."""

    def __init__(self, device: LegacyPlayback) -> None:
        if not isinstance(device, LegacyPlayback):
            raise IncompatibleError(
                f"{type(device).__name__} is not a legacy device", capability="play/pause"
            )
        self.device = device

    def start(self) -> str:
        self.device.play()
        return "Playback started through legacy adapter"

    def halt(self) -> str:
        self.device.pause()
        return "Playback halted through legacy adapter"


class DVRController:
    """Drives any device exposing `start` / `halt`."""

    def __init__(self, device) -> None:
        self.device = device

    def _require_playback(self) -> Playback:
        if not isinstance(self.device, Playback):
            logger.warning(f"{type(self.device).__name__} does not support start/halt")
            raise IncompatibleError(
                f"{type(self.device).__name__} does not support start/halt",
                capability="start/halt",
            )
        return self.device

    def start_playback(self) -> str:
        return self._require_playback().start()

    def stop_playback(self) -> str:
        return self._require_playback().halt()
