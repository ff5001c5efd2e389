"""CLI for replaying LiftStep request scenarios defined in JSON configs."""
from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Dict, List, Optional

from simulation import InvalidRequest, Simulation, SimulationConfig, TickLogWriter

logger = logging.getLogger("run_scenario")


def build_simulation(config: Dict) -> Simulation:
    building_cfg = config.get("building", {})
    scheduler_cfg = config.get("scheduler", {})
    sim_config = SimulationConfig.resolve(
        num_floors=building_cfg.get("num_floors", 10),
        elevator_count=building_cfg.get("elevator_count", 2),
        log_path=config.get("log_path"),
        scheduler_name=scheduler_cfg.get("name", "directional"),
        scheduler_options=scheduler_cfg.get("options", {}),
    )
    return Simulation.from_config(sim_config)


def _submit_due_requests(
    simulation: Simulation, requests: List[Dict], current_time: int, rejected: List[Dict]
) -> None:
    for entry in requests:
        if entry.get("time", 0) != current_time:
            continue
        try:
            simulation.add_request(entry["origin"], entry["destination"])
        except InvalidRequest as exc:
            rejected.append({**entry, "reason": str(exc)})


def run_simulation(simulation: Simulation, config: Dict) -> Dict:
    duration = config.get("duration", 20)
    requests = config.get("requests", [])
    rejected: List[Dict] = []
    timeline: List[Dict] = []

    first_tick = simulation.current_time
    for entry in requests:
        due = entry.get("time", 0)
        if due < first_tick or due >= first_tick + duration:
            logger.warning("Request %s never becomes due within %s ticks", entry, duration)
            rejected.append({**entry, "reason": "outside scenario duration"})

    for _ in range(duration):
        _submit_due_requests(simulation, requests, simulation.current_time, rejected)
        snapshot = simulation.step()
        timeline.append(
            {
                "time": snapshot.time_step,
                "floors": [status.floor for status in snapshot.elevators],
                "pending_requests": snapshot.pending_requests,
            }
        )
    return {"rejected": rejected, "timeline": timeline}


def save_results(output_path: Optional[Path], data: Dict) -> None:
    if not output_path:
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(data, indent=2))


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("config", type=Path, help="Path to a JSON scenario configuration file")
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional file path to write the scenario results as JSON",
    )
    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    config = json.loads(args.config.read_text())
    simulation = build_simulation(config)
    log_path = config.get("log_path")
    if log_path:
        with TickLogWriter(log_path).attach(simulation):
            outcome = run_simulation(simulation, config)
    else:
        outcome = run_simulation(simulation, config)

    summary = asdict(simulation.summary())
    results = {
        "scenario": config.get("name", args.config.stem),
        "description": config.get("description"),
        "duration": config.get("duration", 20),
        "summary": summary,
        **outcome,
    }

    save_results(args.output, results)

    print(f"Scenario: {results['scenario']}")
    if results["description"]:
        print(results["description"])
    print(f"Duration: {results['duration']} ticks")
    print(f"Requests assigned: {summary['requests_assigned']}")
    for elevator_id, stops in summary["stops_served"].items():
        print(f"  Elevator {elevator_id} served stops: {stops}")
    for entry in outcome["rejected"]:
        logger.warning("Rejected at t=%s: %s", entry.get("time", 0), entry["reason"])
    if args.output:
        print(f"Saved results to {args.output}")


if __name__ == "__main__":
    main()
