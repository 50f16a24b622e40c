import simpy
from abc import ABC, abstractmethod
import itertools


class Entity(ABC):
    """
    Abstract base class for lift components that own a SimPy process.

    The constructor registers run() with the environment, so a concrete
    entity is live as soon as it is created. State is a plain string whose
    values are defined by the concrete class.
    """
    _entity_id_counter = itertools.count()

    def __init__(self, env: simpy.Environment, name: str = None):
        """
        Args:
            env: The SimPy environment this entity belongs to.
            name: Entity name. Auto-generated from class name and ID if omitted.
        """
        self.env = env
        self.entity_id: int = next(self._entity_id_counter)
        self.name: str = name if name is not None else f"{self.__class__.__name__}_{self.entity_id}"
        self.state: str = "initial_state"
        self._process = self.env.process(self.run())

    @abstractmethod
    def run(self):
        """
        Generator that forms the entity's SimPy process body.

        Use yield to wait on events or timeouts; subclasses typically loop
        forever waiting for work.
        """
        pass

    def set_state(self, new_state: str):
        """Transition to new_state, firing the change hook if it differs."""
        if self.state != new_state:
            old_state = self.state
            self.state = new_state
            self._on_state_changed(old_state, new_state)

    def get_state(self) -> str:
        return self.state

    def _on_state_changed(self, old_state: str, new_state: str):
        """Hook for subclasses; the base implementation only logs."""
        print(f"{self.env.now:.2f} [{self.name}] State: {old_state} -> {new_state}")

    @property
    def process(self) -> simpy.Process:
        """The SimPy process running this entity's run() generator."""
        return self._process
