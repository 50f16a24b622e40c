import simpy


class MessageBroker:
    """
    Topic-based publish-subscribe between lift components.

    Every topic is backed by a simpy.Store; each published message is also
    copied to a broadcast pipe so recorders can observe the whole stream in
    publication order without stealing messages from topic consumers.
    """
    def __init__(self, env: simpy.Environment, verbose: bool = True):
        """
        Args:
            env (simpy.Environment): SimPy environment
            verbose (bool): Log every publication
        """
        self.env = env
        self.verbose = verbose
        self.topics = {}
        self.broadcast_pipe = simpy.Store(self.env)

    @staticmethod
    def elevator_topic(elevator_name: str, channel: str) -> str:
        """Topic name for a per-cabin channel, e.g. 'elevator/Elevator_1/cue'."""
        return f"elevator/{elevator_name}/{channel}"

    @staticmethod
    def hall_button_topic(floor: str, channel: str) -> str:
        """Topic name for a per-floor hall button channel."""
        return f"hall_button/floor_{floor}/{channel}"

    def get_pipe(self, topic: str) -> simpy.Store:
        """Get or create the Store behind a topic."""
        if topic not in self.topics:
            self.topics[topic] = simpy.Store(self.env)
        return self.topics[topic]

    def put(self, topic: str, message: dict):
        """
        Publish a message. The returned put event is already triggered,
        so callers outside a process may ignore it.
        """
        if self.verbose:
            print(f"{self.env.now:.2f} [Broker] Publish on '{topic}': {message}")
        self.broadcast_pipe.put({'topic': topic, 'message': message})
        return self.get_pipe(topic).put(message)

    def get(self, topic: str):
        """Event that fires with the next message on a topic."""
        return self.get_pipe(topic).get()

    def get_broadcast_pipe(self) -> simpy.Store:
        return self.broadcast_pipe

    def get_current_time(self) -> float:
        """Simulation clock, for components that do not hold the environment."""
        return self.env.now
