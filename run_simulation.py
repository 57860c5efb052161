import argparse
import logging
import sys

from simulator import Simulator, Task
from visualization import plot_energy_consumption, render_ascii_chart
from workload import SCENARIO_RATIO_BANDS, generate_workload

DEMO_PACE_SECONDS = 0.1


def prompt_int(prompt, low=1, high=None, input_fn=input, output=print):
    """Ask until the answer is an integer in [low, high]."""
    while True:
        raw = input_fn(prompt)
        try:
            value = int(raw.strip())
        except ValueError:
            value = None
        if value is not None and value >= low and (high is None or value <= high):
            return value
        if high is None:
            output("Invalid input. Please enter a positive integer.")
        else:
            output(f"Invalid input. Please enter an integer between {low} and {high}.")


def prompt_tasks(input_fn=input, output=print):
    num_tasks = prompt_int("Enter number of tasks: ", input_fn=input_fn, output=output)
    tasks = []
    for task_id in range(1, num_tasks + 1):
        output(f"\nTask {task_id} parameters:")
        priority = prompt_int("  Enter priority (1-10): ", 1, 10, input_fn, output)
        burst = prompt_int("  Enter burst time (ms): ", input_fn=input_fn, output=output)
        deadline = prompt_int("  Enter deadline (ms): ", input_fn=input_fn, output=output)
        tasks.append(Task(task_id, priority, burst, deadline))
    return tasks


def build_parser():
    parser = argparse.ArgumentParser(description="Energy-aware EDF scheduler with DVFS")
    parser.add_argument("--random", type=int, metavar="N",
                        help="generate N tasks instead of prompting for them")
    parser.add_argument("--scenario", choices=sorted(SCENARIO_RATIO_BANDS), default="mixed")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--pace", action="store_true",
                        help="sleep 100 ms of wall-clock time per task for demonstration")
    parser.add_argument("--plot", metavar="PATH", help="also save a PNG plot of the energy curve")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv=None, input_fn=input):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(message)s")

    print("Energy-Efficient CPU Scheduler Simulation")
    if args.random is not None:
        if args.random <= 0:
            build_parser().error("--random must be a positive integer")
        tasks = generate_workload(args.scenario, num_tasks=args.random, seed=args.seed)
    else:
        tasks = prompt_tasks(input_fn=input_fn)

    print("\nStarting simulation...")
    sim = Simulator(pace_seconds=DEMO_PACE_SECONDS if args.pace else 0.0)
    trace = sim.run(tasks)

    if len(trace):
        print()
        print(render_ascii_chart(trace))
        if args.plot:
            plot_energy_consumption(trace, args.plot)
            print(f"\nSaved energy plot to {args.plot}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
