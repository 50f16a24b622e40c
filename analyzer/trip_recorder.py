import simpy
import matplotlib.pyplot as plt
import re
import json
from datetime import datetime

from liftsim.core import cues
from liftsim.core.building import Building


class TripRecorder:
    """
    Independent recorder that intercepts every broker publication.

    Keeps the ordered cue log, the cabin trajectory (for the travel
    diagram), one record per completed trip, and service times for cabin
    selections and hall calls. All events are also kept in JSON Lines form
    for offline playback.
    """
    def __init__(self, env: simpy.Environment, broadcast_pipe: simpy.Store, building: Building):
        self.env = env
        self.broadcast_pipe = broadcast_pipe
        self.building = building

        self.cue_log = []            # Cue messages in publication order
        self.trajectory = {}         # {elevator_name: [(time, floor_index), ...]}
        self.door_events = {}        # {elevator_name: [(time, floor, event), ...]}
        self.trips = []              # Completed trip records
        self._open_trips = {}        # {elevator_name: trip record under construction}

        self._selected = {}          # {elevator_name: set of lit floors}
        self._selection_times = {}   # {(elevator_name, floor): time lit}
        self.car_call_service_times = []
        self._hall_call_times = {}   # {(floor, direction): time lit}
        self.hall_call_service_times = []

        self.event_log = []
        self.simulation_metadata = {}

    def set_simulation_metadata(self, metadata):
        self.simulation_metadata = {
            "format_version": "1.0",
            "timestamp": datetime.now().isoformat(),
            "config": metadata
        }

    def _add_event_log(self, event_type, event_data):
        self.event_log.append({"time": self.env.now, "type": event_type, "data": event_data})

    def start_listening(self):
        """Main process: consume the broadcast pipe forever."""
        while True:
            data = yield self.broadcast_pipe.get()
            topic = data.get('topic', '')
            message = data.get('message', {})

            match = re.match(r'elevator/(.*?)/(cue|status|selected_floors)$', topic)
            if match:
                elevator_name, channel = match.groups()
                if channel == 'cue':
                    self._record_cue(elevator_name, message)
                elif channel == 'status':
                    self._record_status(elevator_name, message)
                else:
                    self._record_selection(elevator_name, message)
                continue

            match = re.match(r'hall_button/floor_(.*?)/(new_hall_call|call_off)$', topic)
            if match:
                self._record_hall_call(match.group(1), match.group(2), message)

    def _record_cue(self, elevator_name, message):
        self.cue_log.append(message)
        self._add_event_log('cue', dict(message))

        event = message.get('event')
        timestamp = message.get('timestamp')
        floor = message.get('floor')

        if event in (cues.DOOR_OPENED, cues.DOOR_CLOSED):
            self.door_events.setdefault(elevator_name, []).append((timestamp, floor, event))

        if event == cues.DIRECTION_CHANGED:
            self._open_trips[elevator_name] = {
                'elevator': elevator_name,
                'origin': floor,
                'direction': message.get('direction'),
                'departure_time': timestamp,
                'floors_passed': [],
            }
        elif event == cues.FLOOR_PASSED and elevator_name in self._open_trips:
            self._open_trips[elevator_name]['floors_passed'].append(floor)
        elif event == cues.FLOOR_ARRIVED and elevator_name in self._open_trips:
            trip = self._open_trips[elevator_name]
            trip['destination'] = floor
            trip['arrival_time'] = timestamp
        elif event == cues.DOOR_OPENED and 'arrival_time' in self._open_trips.get(elevator_name, {}):
            trip = self._open_trips.pop(elevator_name)
            trip['door_open_time'] = timestamp
            self.trips.append(trip)

    def _record_status(self, elevator_name, message):
        floor = message.get('current_floor')
        timestamp = message.get('timestamp')
        if floor is None or timestamp is None:
            return
        point = (timestamp, self.building.index(floor))
        history = self.trajectory.setdefault(elevator_name, [])
        if not history or history[-1][1] != point[1]:
            history.append(point)
        self._add_event_log('elevator_status', {
            'elevator': elevator_name,
            'floor': floor,
            'state': message.get('state'),
            'moving': message.get('moving'),
            'door_open': message.get('door_open'),
            'direction': message.get('direction'),
            'target': message.get('target'),
            'queue': list(message.get('queue', [])),
        })

    def _record_selection(self, elevator_name, message):
        timestamp = message.get('timestamp')
        current = set(message.get('selected_floors', []))
        previous = self._selected.get(elevator_name, set())

        for floor in current - previous:
            self._selection_times[(elevator_name, floor)] = timestamp
        for floor in previous - current:
            selected_at = self._selection_times.pop((elevator_name, floor), None)
            if selected_at is not None:
                self.car_call_service_times.append(timestamp - selected_at)

        self._selected[elevator_name] = current
        self._add_event_log('selected_floors', {
            'elevator': elevator_name,
            'floors': sorted(current, key=self.building.index),
        })

    def _record_hall_call(self, floor, channel, message):
        key = (floor, message.get('direction'))
        timestamp = message.get('timestamp')
        if channel == 'new_hall_call':
            self._hall_call_times.setdefault(key, timestamp)
            self._add_event_log('hall_call_registered', {'floor': floor, 'direction': key[1]})
        else:
            pressed_at = self._hall_call_times.pop(key, None)
            if pressed_at is not None:
                self.hall_call_service_times.append(timestamp - pressed_at)
            self._add_event_log('hall_call_off', {'floor': floor, 'direction': key[1]})

    # --- Queries ---

    def cue_events(self, elevator_name=None):
        """Cue names in order, e.g. ['door_closed', 'direction_changed', ...]."""
        return [m['event'] for m in self.cue_log
                if elevator_name is None or m.get('elevator_name') == elevator_name]

    def cue_sequence(self, elevator_name=None):
        """
        Cues with their argument, e.g. ('floor_passed', 'F2') or
        ('direction_changed', 'UP'). Door cues carry no argument.
        """
        sequence = []
        for m in self.cue_log:
            if elevator_name is not None and m.get('elevator_name') != elevator_name:
                continue
            event = m['event']
            if event == cues.DIRECTION_CHANGED:
                sequence.append((event, m.get('direction')))
            elif event in (cues.FLOOR_PASSED, cues.FLOOR_ARRIVED):
                sequence.append((event, m.get('floor')))
            else:
                sequence.append((event,))
        return sequence

    @staticmethod
    def _average(values):
        return sum(values) / len(values) if values else 0.0

    def summary(self):
        trip_times = [t['door_open_time'] - t['departure_time'] for t in self.trips]
        return {
            'trips_completed': len(self.trips),
            'floors_travelled': sum(len(t['floors_passed']) for t in self.trips),
            'average_trip_time': self._average(trip_times),
            'average_car_call_service_time': self._average(self.car_call_service_times),
            'average_hall_call_service_time': self._average(self.hall_call_service_times),
            'cue_events': len(self.cue_log),
        }

    def print_summary(self):
        summary = self.summary()
        print("\n--- Trip Summary ---")
        print(f"Trips completed:               {summary['trips_completed']}")
        print(f"Floors travelled:              {summary['floors_travelled']}")
        print(f"Average trip time:             {summary['average_trip_time']:.2f}s")
        print(f"Average car call service time: {summary['average_car_call_service_time']:.2f}s")
        print(f"Average hall call service time:{summary['average_hall_call_service_time']:.2f}s")
        for trip in self.trips:
            print(f"  {trip['departure_time']:7.2f}s {trip['origin']:>4} -> {trip['destination']:<4} "
                  f"{trip['direction']:<4} ({len(trip['floors_passed'])} floors, door open at {trip['door_open_time']:.2f}s)")

    def save_event_log(self, filename='lift_events.jsonl'):
        """Write metadata and all recorded events as JSON Lines."""
        print(f"\nSaving event log to {filename}...")
        with open(filename, 'w', encoding='utf-8') as f:
            if self.simulation_metadata:
                f.write(json.dumps({"type": "metadata", "data": self.simulation_metadata}) + '\n')
            for event in self.event_log:
                f.write(json.dumps(event, ensure_ascii=False) + '\n')
        print(f"Event log saved: {len(self.event_log)} events written to {filename}")
        return filename

    def plot_trajectory_diagram(self, output_filename='lift_trajectory_diagram.png', show=False):
        """Draw the travel diagram (floor over time) with door events marked."""
        print("\n--- Plotting: Lift Trajectory Diagram ---")
        fig = plt.figure(figsize=(14, 8))
        end_time = self.env.now

        for name in sorted(self.trajectory):
            history = self.trajectory[name]
            if not history:
                continue
            times, floors = zip(*(history + [(end_time, history[-1][1])]))
            plt.step(times, floors, where='post', label=name, linewidth=2.5, alpha=0.8)

            for timestamp, floor, event in self.door_events.get(name, []):
                marker = 's' if event == cues.DOOR_OPENED else 'x'
                plt.scatter(timestamp, self.building.index(floor), marker=marker, color='#d62728', s=40, zorder=5)

        plt.title("Lift Trajectory Diagram")
        plt.xlabel("Time (s)")
        plt.ylabel("Floor")
        plt.yticks(range(self.building.num_floors), self.building.all_floors)
        plt.grid(True, which='both', linestyle='--', alpha=0.7)
        if self.trajectory:
            plt.legend(loc='upper right', fontsize=10)

        plt.savefig(output_filename, dpi=150, bbox_inches='tight')
        print(f"Trajectory diagram saved to: {output_filename}")
        if show:
            plt.show()
        plt.close(fig)
        return output_filename
