import simpy
from ..infrastructure.message_broker import MessageBroker
from .direction import Direction


class HallButton:
    """
    Hall call button outside the cabin on one floor, for one direction.

    The lamp is display-only: the direction a caller chose never changes the
    order in which the cabin serves requests.
    """
    def __init__(self, env: simpy.Environment, floor: str, direction: Direction, broker: MessageBroker):
        """
        Args:
            env (simpy.Environment): SimPy environment
            floor (str): Floor where the button is installed
            direction (Direction): UP or DOWN
            broker (MessageBroker): Message broker that mediates communication
        """
        self.env = env
        self.floor = floor
        self.direction = direction
        self.broker = broker
        self.is_pressed = False

    def is_lit(self):
        return self.is_pressed

    def press(self):
        """
        Light the lamp and announce the call for display.

        Returns:
            bool: True on a new registration, False if already lit
        """
        if self.is_pressed:
            return False

        self.is_pressed = True
        print(f"{self.env.now:.2f} [HallButton] Button pressed at floor {self.floor} ({self.direction.value}). Light ON.")
        self.broker.put(MessageBroker.hall_button_topic(self.floor, "new_hall_call"), {
            "timestamp": self.env.now,
            "floor": self.floor,
            "direction": self.direction.value,
        })
        return True

    def serve(self, elevator_name=None):
        """Turn the lamp off once the cabin has opened its door here."""
        if not self.is_pressed:
            return

        self.is_pressed = False
        print(f"{self.env.now:.2f} [HallButton] Call served at floor {self.floor} ({self.direction.value}). Light OFF.")
        self.broker.put(MessageBroker.hall_button_topic(self.floor, "call_off"), {
            "timestamp": self.env.now,
            "floor": self.floor,
            "direction": self.direction.value,
            "action": "OFF",
            "serviced_by": elevator_name,
        })


def create_hall_buttons(env: simpy.Environment, floors, broker: MessageBroker) -> dict:
    """One UP and one DOWN button per floor, keyed [floor][direction]."""
    return {
        floor: {direction: HallButton(env, floor, direction, broker) for direction in Direction}
        for floor in floors
    }
