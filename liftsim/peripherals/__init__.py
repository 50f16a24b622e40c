"""Devices that consume the cabin's events"""

from .announcer import Announcer, sound_for_cue
from .display import CabinDisplay

__all__ = [
    'Announcer',
    'sound_for_cue',
    'CabinDisplay',
]
