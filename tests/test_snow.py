import random

from algoplay.snow import Snowflake, flake_pattern


def test_pattern_inside_square():
    points = flake_pattern()
    assert len(set(points)) == len(points)
    assert all(0 <= dx <= 8 and 0 <= dy <= 8 for dx, dy in points)


def test_pattern_symmetric():
    points = set(flake_pattern())
    assert {(8 - dx, dy) for dx, dy in points} == points
    assert {(dx, 8 - dy) for dx, dy in points} == points


def test_pattern_full_middle_row_and_column():
    points = set(flake_pattern())
    assert all((dx, 4) in points for dx in range(9))
    assert all((4, dy) in points for dy in range(9))


def test_spawn_ranges():
    rng = random.Random(3)
    for _ in range(200):
        flake = Snowflake.spawn(rng, 900, 600)
        assert 0 <= flake.x < 900
        assert -600 <= flake.y < 0
        assert 0 <= flake.degrees < 360
        assert 5 <= flake.amplitude < 45
        assert 15 <= flake.shade < 255
        assert flake.speed in (0, 1, 2)
        assert abs(flake.sway) <= flake.amplitude


def test_step_moves_down():
    flake = Snowflake(x=10, y=0, degrees=0, amplitude=10, shade=100, speed=1)
    flake.step(random.Random(1), 900, 600)
    assert flake.y == 2
    assert flake.degrees == 2
    assert flake.sway == 0


def test_step_respawns_at_top():
    flake = Snowflake(x=10, y=599, degrees=90, amplitude=10, shade=100, speed=2)
    drawn = flake.step(random.Random(1), 900, 600)
    assert min(py for _, py in drawn) == 602
    assert flake.y == 0
    assert 20 <= flake.amplitude < 60
    assert 0 <= flake.x < 900
    assert 15 <= flake.shade < 255


def test_pixels_follow_position():
    flake = Snowflake(x=100, y=50, degrees=0, amplitude=5, shade=20, speed=0, sway=3)
    pixels = flake.pixels()
    assert len(pixels) == len(flake_pattern())
    xs = [px for px, _ in pixels]
    ys = [py for _, py in pixels]
    assert min(xs) == 103 and max(xs) == 111
    assert min(ys) == 50 and max(ys) == 58