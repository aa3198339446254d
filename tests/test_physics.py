import pytest

from robodefense.physics import FixedStepWorld


def test_whole_steps():
    calls = []
    world = FixedStepWorld(calls.append, 0.25)
    assert world.step(1.0) == 4
    assert calls == [0.25, 0.25, 0.25, 0.25]
    assert world.accumulator == 0.0


def test_remainder_carries_over():
    calls = []
    world = FixedStepWorld(calls.append, 0.5)
    assert world.step(0.25) == 0
    assert calls == []
    assert world.accumulator == 0.25
    assert world.step(0.25) == 1
    assert calls == [0.5]


def test_partial_frame_leaves_remainder():
    world = FixedStepWorld(lambda dt: None, 0.5)
    assert world.step(1.25) == 2
    assert world.accumulator == 0.25


def test_invalid_timestep():
    with pytest.raises(ValueError):
        FixedStepWorld(lambda dt: None, 0.0)


def test_default_timestep_used():
    calls = []
    world = FixedStepWorld(calls.append)
    world.step(1.0)
    assert all(dt == world.timestep for dt in calls)
    assert world.accumulator < world.timestep