import pytest

from scheduler import (
    Assignment,
    DirectionalScheduler,
    ElevatorSnapshot,
    PendingRequest,
    get_scheduler,
)
from scheduler.utils import append_targets, is_in_path


def snapshot(elevator_id, floor, direction=0, targets=()):
    return ElevatorSnapshot(elevator_id=elevator_id, floor=floor, direction=direction, targets=tuple(targets))


def request(origin, destination, at=0):
    return PendingRequest(origin=origin, destination=destination, requested_at=at)


def test_registry_lookup_is_case_insensitive():
    assert isinstance(get_scheduler("Directional"), DirectionalScheduler)
    assert get_scheduler("directional", reversal_penalty=9).reversal_penalty == 9


def test_registry_rejects_unknown_name():
    with pytest.raises(ValueError, match="Unknown scheduler"):
        get_scheduler("zoning")


@pytest.mark.parametrize(
    "direction, floor, expected",
    [(0, 0, True), (0, 9, True), (1, 5, True), (1, 4, True), (1, 3, False), (-1, 3, True), (-1, 4, True), (-1, 5, False)],
)
def test_is_in_path(direction, floor, expected):
    assert is_in_path(snapshot(0, 4, direction), floor) is expected


def test_append_targets_collapses_repeated_tail():
    assert append_targets((1, 4), (4, 8)) == (1, 4, 8)
    assert append_targets((), (2, 5)) == (2, 5)


def test_score_formula():
    scheduler = DirectionalScheduler()
    pickup = request(2, 6)
    assert scheduler.score(snapshot(0, 0), pickup) == 2
    # moving up past the pickup: distance 3, reversal 5, queue 1
    assert scheduler.score(snapshot(1, 5, 1, [8]), pickup) == 9
    # moving down towards the pickup: distance 3, queue 2
    assert scheduler.score(snapshot(2, 5, -1, [1, 0]), pickup) == 5


def test_idle_elevator_beats_up_elevator_above_pickup():
    scheduler = DirectionalScheduler()
    elevators = [snapshot(0, 0), snapshot(1, 5, 1, [8])]
    [assignment] = scheduler.select_calls(elevators, [request(2, 6)])
    assert assignment == Assignment(request_index=0, elevator_id=0, targets=(2, 6), score=2)


def test_moving_elevator_below_pickup_wins_when_cheaper():
    scheduler = DirectionalScheduler()
    elevators = [snapshot(0, 0), snapshot(1, 1, 1)]
    [assignment] = scheduler.select_calls(elevators, [request(2, 6)])
    assert assignment.elevator_id == 1
    assert assignment.score == 1


def test_ties_keep_first_elevator_and_queue_growth_is_seen():
    scheduler = DirectionalScheduler()
    elevators = [snapshot(0, 0), snapshot(1, 0)]
    first, second = scheduler.select_calls(elevators, [request(3, 7), request(3, 1)])
    assert (first.elevator_id, first.score) == (0, 3)
    # elevator 0 now carries two queued targets
    assert (second.elevator_id, second.score) == (1, 3)


def test_requests_are_assigned_in_submission_order():
    scheduler = DirectionalScheduler()
    assignments = scheduler.select_calls([snapshot(0, 0)], [request(1, 4), request(6, 2)])
    assert [a.request_index for a in assignments] == [0, 1]
    assert [a.targets for a in assignments] == [(1, 4), (6, 2)]


def test_no_elevators_leaves_requests_unassigned():
    assert DirectionalScheduler().select_calls([], [request(1, 4)]) == []


def test_same_inputs_give_same_assignments():
    scheduler = DirectionalScheduler()
    elevators = [snapshot(0, 3, 1, [6]), snapshot(1, 7, -1, [2]), snapshot(2, 0)]
    requests = [request(4, 9), request(8, 1), request(0, 5)]
    first = scheduler.select_calls(elevators, requests)
    second = scheduler.select_calls(list(elevators), list(requests))
    assert first == second
    assert len(first) == 3
