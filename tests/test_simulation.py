import pytest

from simulation import (
    Direction,
    InvalidFloor,
    InvalidRequest,
    Simulation,
    SimulationConfig,
    TrivialRequest,
)


def make_simulation(num_floors=10, elevator_count=1):
    return Simulation.from_config(
        SimulationConfig(num_floors=num_floors, elevator_count=elevator_count, log_path=None)
    )


def test_from_config_builds_fleet_on_ground_floor():
    simulation = make_simulation(elevator_count=3)
    assert simulation.num_floors == 10
    assert [e.elevator_id for e in simulation.building.elevators] == [0, 1, 2]
    assert all(e.current_floor == 0 for e in simulation.building.elevators)


def test_single_rider_timeline():
    simulation = make_simulation()
    simulation.add_request(3, 7)
    elevator = simulation.building.elevators[0]

    simulation.run(3)
    assert (elevator.current_floor, elevator.door_open) == (3, False)
    simulation.step()
    assert elevator.door_open
    simulation.step()
    assert not elevator.door_open
    assert elevator.total_stops_served == 1
    assert list(elevator.targets) == [7]

    simulation.run(4)
    assert elevator.current_floor == 7
    assert simulation.current_time == 9
    simulation.step()
    assert elevator.door_open
    simulation.step()
    assert elevator.total_stops_served == 2
    assert elevator.is_idle()
    assert simulation.current_time == 11


def test_trivial_request_is_rejected_without_mutation():
    simulation = make_simulation()
    with pytest.raises(TrivialRequest):
        simulation.add_request(4, 4)
    assert simulation.building.pending_requests == []
    simulation.step()
    assert simulation.building.elevators[0].queue_size == 0


@pytest.mark.parametrize("origin, destination", [(10, 2), (2, 10), (-1, 3), (3, -1)])
def test_out_of_range_floor_is_rejected(origin, destination):
    simulation = make_simulation()
    with pytest.raises(InvalidFloor):
        simulation.add_request(origin, destination)
    assert simulation.building.pending_requests == []


def test_rejections_are_value_errors():
    simulation = make_simulation()
    with pytest.raises(ValueError, match="between 0 and 9"):
        simulation.add_request(0, 12)
    assert issubclass(TrivialRequest, InvalidRequest)


def test_request_is_stamped_with_current_time():
    simulation = make_simulation()
    simulation.run(2)
    request = simulation.add_request(1, 5)
    assert request.requested_at == 2


def test_same_tick_requests_are_all_assigned():
    simulation = make_simulation()
    simulation.add_request(1, 4)
    simulation.add_request(6, 2)
    snapshot = simulation.step()
    assert snapshot.pending_requests == 0
    assert snapshot.requests_assigned == 2
    # the car has only moved so far, no stop is served yet
    assert list(simulation.building.elevators[0].targets) == [1, 4, 6, 2]


def test_step_emits_events_in_order():
    simulation = make_simulation()
    seen = []
    simulation.on_event("request", lambda payload: seen.append(("request", payload.origin)))
    simulation.on_event("assignment", lambda payload: seen.append(("assignment", payload.elevator_id)))
    simulation.on_event("tick", lambda payload: seen.append(("tick", payload.time_step)))
    simulation.add_request(2, 5)
    simulation.step()
    assert seen == [("request", 2), ("assignment", 0), ("tick", 1)]


def test_snapshot_does_not_advance_clock():
    simulation = make_simulation(elevator_count=2)
    snapshot = simulation.snapshot()
    assert snapshot.time_step == 0
    assert len(snapshot.elevators) == 2
    assert simulation.current_time == 0


def test_summary_reports_ticks_assignments_and_stops():
    simulation = make_simulation(elevator_count=2)
    simulation.add_request(3, 7)
    simulation.run(11)
    summary = simulation.summary()
    assert summary.total_ticks == 11
    assert summary.requests_assigned == 1
    assert summary.stops_served == {0: 2, 1: 0}


def test_every_elevator_stays_consistent_under_load():
    simulation = make_simulation(num_floors=12, elevator_count=3)
    riders = [(0, 11), (5, 2), (9, 1), (3, 4), (10, 6), (7, 8)]
    for index, (origin, destination) in enumerate(riders):
        simulation.add_request(origin, destination)
        if index % 2:
            simulation.step()
    for _ in range(60):
        snapshot = simulation.step()
        for elevator in simulation.building.elevators:
            expected = not elevator.targets and not elevator.door_open and elevator.direction is Direction.IDLE
            assert elevator.is_idle() is expected
    assert snapshot.pending_requests == 0
    assert all(e.is_idle() for e in simulation.building.elevators)
    assert sum(simulation.summary().stops_served.values()) == 12
