import pytest

from cubecaster.constants import DOOR_DT_CAP, DOOR_SPEED_CLOSE, DOOR_SPEED_OPEN
from cubecaster.doors import DoorSystem, now_seconds
from cubecaster.player import Player, Vector


class FakeClock:
    def __init__(self, t=100.0):
        self.t = t

    def __call__(self):
        return self.t


def make_grid():
    return ["11111", "10D01", "10001", "1O001", "11111"]


def player_at(x, y, dx=1.0, dy=0.0):
    return Player(pos=Vector(x, y), dir=Vector(dx, dy))


def test_now_seconds_advances():
    first = now_seconds()
    assert now_seconds() >= first > 0


def test_initial_state():
    doors = DoorSystem(make_grid(), FakeClock())
    assert doors.is_door(2, 1)
    assert doors.is_door(1, 3)
    assert not doors.is_door(0, 0)
    assert not doors.is_door(9, 9)
    assert doors.progress(2, 1) == 0.0
    assert doors.progress(1, 3) == 1.0
    assert doors.last_ts == 100.0
    assert doors.last_interact == 0.0


def test_progress_outside_raises():
    doors = DoorSystem(make_grid(), FakeClock())
    with pytest.raises(IndexError):
        doors.progress(-1, 0)


def test_toggle_then_update_opens_by_capped_step():
    clock = FakeClock()
    grid = make_grid()
    doors = DoorSystem(grid, clock)
    player = player_at(60.0, 60.0)
    doors.try_toggle(player)
    assert doors.last_interact == 100.0
    clock.t += 1.0
    doors.update(player)
    assert doors.progress(2, 1) == pytest.approx(DOOR_SPEED_OPEN * DOOR_DT_CAP)
    assert grid[1][2] == "D"
    assert doors.last_ts == clock.t


def test_door_fully_opens():
    clock = FakeClock()
    grid = make_grid()
    doors = DoorSystem(grid, clock)
    player = player_at(60.0, 60.0)
    doors.try_toggle(player)
    for _ in range(100):
        clock.t += 1.0
        doors.update(player)
    assert grid[1][2] == "O"
    assert doors.progress(2, 1) == 1.0


def test_untouched_closed_door_stays_closed():
    clock = FakeClock()
    grid = make_grid()
    doors = DoorSystem(grid, clock)
    player = player_at(60.0, 100.0)
    clock.t += 1.0
    doors.update(player)
    assert doors.progress(2, 1) == 0.0
    assert grid[1][2] == "D"


def test_player_inside_door_opens_instantly():
    grid = make_grid()
    doors = DoorSystem(grid, FakeClock())
    doors.update(player_at(100.0, 60.0))
    assert grid[1][2] == "O"
    assert doors.progress(2, 1) == 1.0


def test_toggle_facing_outside_map_does_nothing():
    doors = DoorSystem(make_grid(), FakeClock())
    doors.try_toggle(player_at(180.0, 60.0))
    assert doors.last_interact == 0.0


def test_toggle_facing_wall_records_interaction():
    doors = DoorSystem(make_grid(), FakeClock(42.0))
    doors.try_toggle(player_at(60.0, 60.0, -1.0, 0.0))
    assert doors.last_interact == 42.0


def test_set_target_ignores_non_doors():
    grid = make_grid()
    doors = DoorSystem(grid, FakeClock())
    doors.set_target(0, 0, True)
    doors.set_target(-1, 2, True)
    doors.set_target(2, 50, True)
    assert grid == make_grid()
    assert doors.progress(0, 0) == 0.0


def test_update_cell_closes_open_door():
    grid = make_grid()
    doors = DoorSystem(grid, FakeClock())
    doors.set_target(1, 3, False)
    doors.update_cell(1, 3, 0.25)
    assert doors.progress(1, 3) == pytest.approx(1.0 - DOOR_SPEED_CLOSE * 0.25)
    doors.update_cell(1, 3, 10.0)
    assert doors.progress(1, 3) == 0.0
    assert grid[3][1] == "D"


def test_update_cell_keeps_open_door_open_when_targeted_open():
    grid = make_grid()
    doors = DoorSystem(grid, FakeClock())
    doors.update_cell(1, 3, 0.5)
    assert doors.progress(1, 3) == 1.0
    assert grid[3][1] == "O"


def test_auto_close_targets_open_doors():
    grid = make_grid()
    doors = DoorSystem(grid, FakeClock())
    doors.update_auto_close_targets(player_at(60.0, 60.0))
    doors.update_cell(1, 3, 10.0)
    assert grid[3][1] == "D"


def test_auto_close_spares_player_cell():
    grid = make_grid()
    doors = DoorSystem(grid, FakeClock())
    doors.update_auto_close_targets(player_at(60.0, 140.0))
    doors.update_cell(1, 3, 10.0)
    assert grid[3][1] == "O"


def test_process_cell_skips_open_doors():
    grid = make_grid()
    doors = DoorSystem(grid, FakeClock())
    doors.set_target(1, 3, False)
    doors.process_cell(1, 3, 0.5, player_at(60.0, 60.0))
    assert doors.progress(1, 3) == 1.0
    assert grid[3][1] == "O"