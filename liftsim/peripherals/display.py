"""
Display - floor indicator, cabin panel and landing lamps

Mirrors what a passenger sees: the indicator text and direction arrow from
the status topic, the lit cabin buttons from selected_floors, and the lit
landing lamps from the hall button topics.
"""

import simpy
from typing import Dict, List, Optional, Set, Tuple

from ..infrastructure.message_broker import MessageBroker


ARROWS = {"UP": "^", "DOWN": "v"}


class CabinDisplay:
    """Consumes the display topics of one cabin and keeps the current picture."""

    def __init__(self, env: simpy.Environment, broker: MessageBroker, elevator_name: str):
        self.env = env
        self.broker = broker
        self.elevator_name = elevator_name

        self.floor_text: Optional[str] = None
        self.direction: Optional[str] = None
        self.door_open = True
        self.moving = False
        self.lit_buttons: List[str] = []
        self.lit_lamps: Set[Tuple[str, str]] = set()  # (floor, direction)
        self.indicator_history: List[Tuple[float, str]] = []

    def start_listening(self, floors=()):
        self.env.process(self._status_listener())
        self.env.process(self._selection_listener())
        for floor in floors:
            self.env.process(self._lamp_listener(floor, "new_hall_call"))
            self.env.process(self._lamp_listener(floor, "call_off"))

    def _status_listener(self):
        topic = MessageBroker.elevator_topic(self.elevator_name, "status")
        while True:
            status = yield self.broker.get(topic)
            self.direction = status.get("direction")
            self.door_open = status.get("door_open")
            self.moving = status.get("moving")
            floor_text = status.get("display_floor")
            if floor_text != self.floor_text:
                self.floor_text = floor_text
                self.indicator_history.append((self.env.now, floor_text))
                print(f"{self.env.now:.2f} [Display] {self.render()}")

    def _selection_listener(self):
        topic = MessageBroker.elevator_topic(self.elevator_name, "selected_floors")
        while True:
            message = yield self.broker.get(topic)
            self.lit_buttons = list(message.get("selected_floors", []))

    def _lamp_listener(self, floor: str, channel: str):
        topic = MessageBroker.hall_button_topic(floor, channel)
        while True:
            message = yield self.broker.get(topic)
            lamp = (floor, message.get("direction"))
            if channel == "new_hall_call":
                self.lit_lamps.add(lamp)
            else:
                self.lit_lamps.discard(lamp)

    def render(self) -> str:
        """One-line picture, e.g. '[ 5 ^ ] door closed | buttons: F7 F8'."""
        arrow = ARROWS.get(self.direction, " ")
        door = "open" if self.door_open else "closed"
        buttons = " ".join(self.lit_buttons) or "-"
        return f"[{self.floor_text or '--':>3} {arrow} ] door {door} | buttons: {buttons}"
