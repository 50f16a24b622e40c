"""
Announcer - audible cues for the cabin

Consumes the elevator's cue stream and hall call notifications and turns
them into named sound clips:

    door_opened            -> door_open
    door_closed            -> door_close
    direction_changed(UP)  -> going_up
    direction_changed(DOWN)-> going_down
    floor_arrived(F5)      -> arrive_F5
    hall call (UP/DOWN)    -> going_up / going_down (every call, even one
                              the cabin does not need to move for)

Playing a clip is delegated to an optional player callable. A failing
player is logged and otherwise ignored; the cabin never learns about it.
"""

import simpy
from typing import Callable, List, Optional, Tuple

from ..core import cues
from ..infrastructure.message_broker import MessageBroker


DIRECTION_SOUNDS = {"UP": "going_up", "DOWN": "going_down"}


def sound_for_cue(message: dict) -> Optional[str]:
    """Clip name for a cue message, or None for cues that stay silent."""
    event = message.get("event")
    if event == cues.DOOR_OPENED:
        return "door_open"
    if event == cues.DOOR_CLOSED:
        return "door_close"
    if event == cues.DIRECTION_CHANGED:
        return DIRECTION_SOUNDS.get(message.get("direction"))
    if event == cues.FLOOR_ARRIVED:
        return f"arrive_{message.get('floor')}"
    return None


class Announcer:
    """Listens on the broker and plays the matching clip for every cue."""

    def __init__(self, env: simpy.Environment, broker: MessageBroker, elevator_name: str,
                 player: Callable[[str], None] = None):
        """
        Args:
            env: SimPy environment
            broker: Message broker carrying the cue stream
            elevator_name: Cabin whose cues are announced
            player: Called with the clip name; None only records what would play
        """
        self.env = env
        self.broker = broker
        self.elevator_name = elevator_name
        self.player = player
        self.played: List[Tuple[float, str]] = []
        self.failed: List[Tuple[float, str]] = []

    def start_listening(self):
        """Start the listener processes for the cue stream and for hall calls."""
        self.env.process(self._cue_listener())
        self.env.process(self._hall_call_listener())

    def _cue_listener(self):
        cue_topic = MessageBroker.elevator_topic(self.elevator_name, "cue")
        while True:
            message = yield self.broker.get(cue_topic)
            sound = sound_for_cue(message)
            if sound is not None:
                self.play(sound)

    def _hall_call_listener(self):
        topic = MessageBroker.elevator_topic(self.elevator_name, "hall_call")
        while True:
            message = yield self.broker.get(topic)
            sound = DIRECTION_SOUNDS.get(message.get("direction"))
            if sound is not None:
                self.play(sound)

    def play(self, sound: str):
        print(f"{self.env.now:.2f} [Announcer] Playing '{sound}'")
        self.played.append((self.env.now, sound))
        if self.player is None:
            return
        try:
            self.player(sound)
        except Exception as e:
            self.failed.append((self.env.now, sound))
            print(f"{self.env.now:.2f} [Announcer] Playback of '{sound}' failed: {e}")

    def sounds(self) -> List[str]:
        """Clip names played so far, in order."""
        return [sound for _, sound in self.played]
