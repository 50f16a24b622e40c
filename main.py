import simpy
import simpy.rt
import sys

from config import load_simulation_config
from liftsim.system import build_lift_system

DEFAULT_CONFIG_PATH = "scenarios/mall_lift.yaml"


def create_environment(realtime_factor: float) -> simpy.Environment:
    """
    Plain environment when realtime_factor is 0 (as fast as possible),
    otherwise one that paces simulated seconds against the wall clock
    (2.0 = twice as fast as real time).
    """
    if realtime_factor > 0:
        return simpy.rt.RealtimeEnvironment(factor=1.0 / realtime_factor, strict=False)
    return simpy.Environment()


def run_simulation(sim_config_path=DEFAULT_CONFIG_PATH):
    """
    Set up and run one lift simulation from a YAML scenario.

    Args:
        sim_config_path: Path to simulation configuration YAML file

    Returns:
        The LiftSystem after the run, for inspection
    """
    print("--- Loading Configuration ---")
    sim_config = load_simulation_config(sim_config_path)
    print(f"Simulation Config: {sim_config_path}")

    print("\n--- Simulation Setup ---")
    env = create_environment(sim_config.realtime_factor)
    system = build_lift_system(env, sim_config)
    print(f"Building: {system.building.all_floors}, home floor {sim_config.building.home_floor}")
    print(f"Scripted requests: {len(sim_config.scenario.requests)}")

    system.recorder.set_simulation_metadata({
        'floors': system.building.all_floors,
        'home_floor': sim_config.building.home_floor,
        'elevator_name': sim_config.elevator_name,
        'timing': sim_config.to_dict()['simulation']['timing'],
        'duration': sim_config.scenario.duration,
        'config_file': str(sim_config_path),
    })

    env.process(system.replay(sim_config.scenario.requests))

    print("\n--- Simulation Start ---")
    env.run(until=sim_config.scenario.duration)
    print("--- Simulation End ---")

    final = system.snapshot()
    print(f"\nFinal state: floor {final.current_floor}, door {'open' if final.door_open else 'closed'}, "
          f"queue {system.elevator.request_queue.items()}")

    system.recorder.print_summary()

    if sim_config.output.event_log:
        system.recorder.save_event_log(sim_config.output.event_log)
    if sim_config.output.trajectory_diagram:
        system.recorder.plot_trajectory_diagram(sim_config.output.trajectory_diagram)

    return system


def main():
    sim_config_path = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_CONFIG_PATH
    try:
        run_simulation(sim_config_path)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user (Ctrl+C).")
        sys.exit(0)


if __name__ == '__main__':
    main()
