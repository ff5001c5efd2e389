"""Interactive text shell driving a simulation one command at a time."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional, TextIO

from simulation import InvalidRequest, Simulation, SimulationConfig, TickLogWriter
from simulation.config import (
    DEFAULT_ELEVATORS,
    DEFAULT_FLOORS,
    MAX_ELEVATORS,
    MAX_FLOORS,
    MIN_ELEVATORS,
    MIN_FLOORS,
)
from simulation.render import render_status, render_summary

MENU = """
Options:
  r - new request (simulate a person calling elevator)
  s - advance simulation by 1 time step
  a - auto-run {steps} steps
  q - quit simulation"""


class ConsoleShell:
    def __init__(
        self,
        simulation: Simulation,
        config: SimulationConfig,
        stdin: TextIO = sys.stdin,
        stdout: TextIO = sys.stdout,
    ) -> None:
        self.simulation = simulation
        self.config = config
        self.stdin = stdin
        self.stdout = stdout
        self.running = True
        self.commands: Dict[str, Callable[[], None]] = {
            "r": self.request,
            "s": self.step,
            "a": self.auto_run,
            "q": self.quit,
        }

    def write(self, text: str = "") -> None:
        self.stdout.write(text + "\n")

    def prompt(self, text: str) -> Optional[str]:
        self.stdout.write(text)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            return None
        return line.strip()

    def run(self) -> None:
        while self.running:
            self.write()
            self.write(render_status(self.simulation.snapshot(), self.simulation.num_floors))
            self.write(MENU.format(steps=self.config.auto_run_steps))
            command = self.prompt("Enter command: ")
            if command is None:
                break
            handler = self.commands.get(command[:1].lower())
            if handler is None:
                self.write("Invalid command.")
                continue
            handler()

        self.write()
        self.write(render_summary(self.simulation.summary(), self.config.log_path))
        self.write("Goodbye!")

    def request(self) -> None:
        origin = self.prompt("Enter current floor: ")
        destination = self.prompt("Enter destination floor: ")
        try:
            origin_floor, destination_floor = int(origin or ""), int(destination or "")
        except ValueError:
            self.write("Floors must be whole numbers.")
            return
        try:
            self.simulation.add_request(origin_floor, destination_floor)
        except InvalidRequest as exc:
            self.write(str(exc))
            return
        self.write(f"Request added from floor {origin_floor} to floor {destination_floor}.")

    def step(self) -> None:
        self.simulation.step()

    def auto_run(self) -> None:
        self.write(f"Auto-running {self.config.auto_run_steps} steps...")
        self.simulation.run(self.config.auto_run_steps)

    def quit(self) -> None:
        self.running = False


def _ask_size(
    stdin: TextIO, stdout: TextIO, label: str, low: int, high: int, default: int
) -> int:
    stdout.write(f"Enter number of {label} ({low} - {high}): ")
    stdout.flush()
    line = stdin.readline().strip()
    try:
        value = int(line)
    except ValueError:
        value = None
    return _checked_size(stdout, label, value, low, high, default)


def _checked_size(
    stdout: TextIO, label: str, value: Optional[int], low: int, high: int, default: int
) -> int:
    if value is None or value < low or value > high:
        stdout.write(f"Invalid input. Defaulting to {default} {label}.\n")
        return default
    return value


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Step-by-step elevator bank simulation")
    parser.add_argument("--floors", type=int, help=f"Number of floors ({MIN_FLOORS}-{MAX_FLOORS})")
    parser.add_argument(
        "--elevators", type=int, help=f"Number of elevators ({MIN_ELEVATORS}-{MAX_ELEVATORS})"
    )
    parser.add_argument("--log", default="elevator_log.txt", help="Tick log path ('' disables it)")
    parser.add_argument("--auto-steps", type=int, default=5, help="Steps performed by the 'a' command")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(
    argv: Optional[List[str]] = None, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout
) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.ERROR,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    stdout.write("===== Elevator Simulation =====\n")
    floors = args.floors
    if floors is None:
        floors = _ask_size(stdin, stdout, "floors", MIN_FLOORS, MAX_FLOORS, DEFAULT_FLOORS)
    else:
        floors = _checked_size(stdout, "floors", floors, MIN_FLOORS, MAX_FLOORS, DEFAULT_FLOORS)
    elevators = args.elevators
    if elevators is None:
        elevators = _ask_size(
            stdin, stdout, "elevators", MIN_ELEVATORS, MAX_ELEVATORS, DEFAULT_ELEVATORS
        )
    else:
        elevators = _checked_size(
            stdout, "elevators", elevators, MIN_ELEVATORS, MAX_ELEVATORS, DEFAULT_ELEVATORS
        )

    config = SimulationConfig.resolve(
        num_floors=floors,
        elevator_count=elevators,
        log_path=args.log or None,
        auto_run_steps=max(1, args.auto_steps),
    )
    simulation = Simulation.from_config(config)
    shell = ConsoleShell(simulation, config, stdin=stdin, stdout=stdout)
    if config.log_path:
        with TickLogWriter(config.log_path).attach(simulation):
            shell.run()
    else:
        shell.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
