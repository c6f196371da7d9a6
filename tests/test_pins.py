import random

import pytest

from bowling_sim.engine import PinGenerator, generate_ball


@pytest.mark.parametrize(
    "draws, expected",
    [
        ([0], 10),
        ([19], 10),
        ([20], 9),
        ([34], 9),
        ([35], 8),
        ([49], 8),
        ([50, 4], 4),
        ([99, 10], 10),
    ],
    ids=["strike-low", "strike-high", "nine-low", "nine-high", "eight-low", "eight-high", "uniform", "uniform-max"],
)
def test_full_rack_distribution(scripted, draws, expected):
    rng = scripted(draws)
    assert generate_ball(10, rng) == expected
    assert rng.draws == []


@pytest.mark.parametrize(
    "draws, expected",
    [
        ([0], 7),
        ([29], 7),
        ([30], 6),
        ([49], 6),
        ([50], 5),
        ([79], 5),
        ([80, 3], 3),
    ],
    ids=["spare-low", "spare-high", "minus-one-low", "minus-one-high", "minus-two-low", "minus-two-high", "uniform"],
)
def test_partial_rack_distribution(scripted, draws, expected):
    rng = scripted(draws)
    assert generate_ball(7, rng) == expected
    assert rng.draws == []


@pytest.mark.parametrize(
    "pins, draw, expected",
    [(0, 30, 0), (0, 50, 0), (1, 30, 0), (1, 50, 0), (1, 0, 1)],
)
def test_partial_rack_never_goes_negative(scripted, pins, draw, expected):
    assert generate_ball(pins, scripted([draw])) == expected


@pytest.mark.parametrize("pins", [-1, 11, True])
def test_rejects_pins_out_of_range(scripted, pins):
    with pytest.raises(ValueError, match="out of range"):
        generate_ball(pins, scripted([0]))


def test_results_stay_within_pins_standing():
    rng = random.Random(1234)
    for pins in range(11):
        for _ in range(500):
            assert 0 <= generate_ball(pins, rng) <= pins


def test_same_seed_same_balls():
    a = PinGenerator(99)
    b = PinGenerator(99)
    assert [a.ball(10) for _ in range(50)] == [b.ball(10) for _ in range(50)]


def test_generator_uses_injected_source(scripted):
    gen = PinGenerator(rng=scripted([20, 0]))
    assert gen.ball(10) == 9
    assert gen.ball(1) == 1


def test_generator_rejects_seed_and_rng(scripted):
    with pytest.raises(ValueError):
        PinGenerator(1, rng=scripted([]))
