"""Audio package."""

from .sounds import SoundManager, SOUND_NAMES
from .notifier import Notifier

__all__ = ["SoundManager", "SOUND_NAMES", "Notifier"]
