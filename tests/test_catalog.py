import random

import pytest

from robodefense.catalog import (
    RobotCatalog,
    RobotType,
    SquadCatalog,
    SquadMemberType,
    random_robot_type_for_wave,
    robot_weights_for_wave,
)


@pytest.fixture
def robots():
    return RobotCatalog({RobotType.BASIC: {"health": 1}, RobotType.FIRE: {"health": 2}})


@pytest.fixture
def squad():
    return SquadCatalog({SquadMemberType.SNIPER: 200}, grid_rows=5, grid_columns=9)


@pytest.mark.parametrize("kind", list(RobotType))
def test_robot_name_round_trip(robots, kind):
    assert robots.type_from_name(robots.name_of(kind)) is kind


def test_robot_names_fixed(robots):
    assert robots.name_of(RobotType.FIRE) == "FireRobot"
    assert robots.type_from_name("StealthRobot") is RobotType.STEALTH


def test_unknown_robot_name_defaults_to_basic(robots):
    assert robots.type_from_name("NoSuchRobot") is RobotType.BASIC


def test_can_create_requires_config(robots):
    assert robots.can_create(RobotType.BASIC)
    assert not robots.can_create(RobotType.STEALTH)


def test_config_for(robots):
    assert robots.config_for(RobotType.FIRE) == {"health": 2}
    assert robots.config_for(RobotType.STEALTH) is None


def test_available_names_sorted(robots):
    assert robots.available_names() == ["BasicRobot", "FireRobot", "StealthRobot"]
    assert robots.available_types() == [RobotType.BASIC, RobotType.FIRE, RobotType.STEALTH]


def test_random_type_is_available(robots):
    rng = random.Random(4)
    picks = {robots.random_type(rng) for _ in range(200)}
    assert picks == set(robots.available_types())


def test_wave_weights_by_wave():
    assert set(robot_weights_for_wave(1)) == {RobotType.BASIC}
    assert set(robot_weights_for_wave(2)) == {RobotType.BASIC, RobotType.FIRE}
    late = robot_weights_for_wave(20)
    assert late[RobotType.BASIC] == 1
    assert late[RobotType.FIRE] == 3
    assert late[RobotType.STEALTH] == 2


def test_basic_weight_decreases():
    values = [robot_weights_for_wave(w)[RobotType.BASIC] for w in range(1, 15)]
    assert values == sorted(values, reverse=True)
    assert min(values) >= 1


def test_random_robot_for_first_wave_is_basic():
    rng = random.Random(1)
    assert {random_robot_type_for_wave(1, rng) for _ in range(50)} == {RobotType.BASIC}


def test_random_robot_for_later_wave_within_allowed():
    rng = random.Random(2)
    picks = {random_robot_type_for_wave(2, rng) for _ in range(300)}
    assert picks <= {RobotType.BASIC, RobotType.FIRE}
    assert RobotType.STEALTH not in picks


@pytest.mark.parametrize("kind", list(SquadMemberType))
def test_squad_name_round_trip(squad, kind):
    assert squad.type_from_name(squad.name_of(kind)) is kind


def test_unknown_squad_name_defaults(squad):
    assert squad.type_from_name("Wizard") is SquadMemberType.HEAVY_GUNNER


def test_costs(squad):
    assert squad.cost(SquadMemberType.SNIPER) == 200
    assert squad.cost(SquadMemberType.HEAVY_GUNNER) == 100


def test_upgrade_cost(squad):
    base = squad.cost(SquadMemberType.SNIPER)
    assert squad.upgrade_cost(SquadMemberType.SNIPER, 0) == base
    assert squad.upgrade_cost(SquadMemberType.SNIPER, 2) > squad.upgrade_cost(SquadMemberType.SNIPER, 1) > base


def test_can_afford_boundary(squad):
    assert squad.can_afford(SquadMemberType.SNIPER, 200)
    assert not squad.can_afford(SquadMemberType.SNIPER, 199)


def test_unlocking(squad):
    assert squad.unlocked_types() == list(SquadMemberType)
    squad.set_unlocked(SquadMemberType.SNIPER, False)
    assert not squad.is_unlocked(SquadMemberType.SNIPER)
    assert SquadMemberType.SNIPER not in squad.unlocked_types()
    assert not squad.can_place(SquadMemberType.SNIPER, 0, 0)


@pytest.mark.parametrize(
    "lane, grid_x, expected",
    [(0, 0, True), (4, 8, True), (5, 0, False), (0, 9, False), (-1, 0, False), (0, -1, False)],
)
def test_can_place_bounds(squad, lane, grid_x, expected):
    assert squad.can_place(SquadMemberType.HEAVY_GUNNER, lane, grid_x) is expected