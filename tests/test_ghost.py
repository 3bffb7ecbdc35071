import math
import random

import pytest

from ghosts.ghost import REROLL_CHANCE, Ghost, random_int
from ghosts.surface import BLACK, WHITE, FillCircle
from ghosts.vector import Vector2D


def test_random_int_is_inclusive(rng):
    seen = {random_int(rng, 0, 3) for _ in range(500)}
    assert seen == {0, 1, 2, 3}


def test_construction(rng):
    ghost = Ghost(120, 80, rng=rng)
    assert ghost.position == Vector2D(120, 80)
    assert ghost.hand_position == ghost.position
    assert ghost.hand_position is not ghost.position
    assert 1 - 1e-9 <= ghost.velocity.get_length() < 3 + 1e-9
    assert isinstance(ghost.body_bounce_angle, int)
    assert 0 <= ghost.body_bounce_angle <= 100
    assert ghost.eyes == []


def test_initialize_places_eyes_once(rng):
    ghost = Ghost(120, 80, rng=rng)
    ghost.initialize()
    ghost.initialize()
    assert [e.position.to_tuple() for e in ghost.eyes] == [(110.0, 70.0), (130.0, 70.0)]


def test_spawn_is_single_phase(rng):
    ghost = Ghost.spawn(50, 60, rng=rng)
    assert len(ghost.eyes) == 2
    assert ghost.eyes[0].position == Vector2D(40, 50)


def test_bounce_phase_grows_without_wrapping(rng):
    ghost = Ghost.spawn(0, 0, rng=rng)
    pointer = Vector2D(10, 10)
    prev = ghost.body_bounce_angle
    for _ in range(10_000):
        ghost.update(pointer)
        assert ghost.body_bounce_angle > prev
        assert ghost.body_bounce_angle - prev == pytest.approx(0.05, abs=1e-9)
        prev = ghost.body_bounce_angle
    assert prev >= 499.9


def test_update_applies_bounce_to_body_hands_and_eyes(rng):
    ghost = Ghost.spawn(300, 300, rng=rng)
    phase = ghost.body_bounce_angle
    eye_before = [e.position.copy() for e in ghost.eyes]
    ghost.update(Vector2D(0, 0))

    body_dy = math.sin(phase) * 0.5
    hand_dy = math.sin(phase + 10) * 0.5 / 2
    assert ghost.position.x == 300
    assert ghost.position.y == pytest.approx(300 + body_dy)
    assert ghost.hand_position.y == pytest.approx(300 - hand_dy)
    for eye, before in zip(ghost.eyes, eye_before):
        assert eye.position.x == before.x
        assert eye.position.y == pytest.approx(before.y + body_dy)


def test_velocity_never_moves_the_ghost():
    ghost = Ghost.spawn(200, 200, rng=random.Random(7))
    for _ in range(2_000):
        ghost.update(Vector2D(0, 0))
    assert ghost.rerolls > 0
    assert ghost.position.x == 200
    assert ghost.hand_position.x == 200


def test_iris_stays_on_radius_every_frame(rng):
    ghost = Ghost.spawn(400, 300, rng=rng)
    pointers = [Vector2D(0, 0), Vector2D(800, 600), Vector2D(400, 290), Vector2D(-50, 1000)]
    for i in range(200):
        ghost.update(pointers[i % len(pointers)])
        for eye in ghost.eyes:
            assert (eye.iris_position - eye.position).get_length() == pytest.approx(20)


def test_eyes_look_down_at_pointer_below(rng):
    ghost = Ghost.spawn(400, 250, rng=rng)
    angle = ghost.update(Vector2D(400, 300))
    assert angle == pytest.approx(math.pi / 2)
    assert ghost.facing_angle == angle
    for eye in ghost.eyes:
        assert eye.iris_position.x == pytest.approx(eye.position.x)
        assert eye.iris_position.y == pytest.approx(eye.position.y + 20)


def test_coincident_pointer_faces_angle_zero(rng):
    ghost = Ghost.spawn(100, 100, rng=rng)
    ghost.bounce_distance = 0
    assert ghost.update(Vector2D(100, 100)) == 0.0


def test_reroll_rate_is_about_one_percent():
    ghost = Ghost.spawn(0, 0, rng=random.Random(2024))
    frames = 100_000
    pointer = Vector2D(0, 0)
    for _ in range(frames):
        ghost.update(pointer)
    expected = frames * REROLL_CHANCE
    sigma = math.sqrt(frames * REROLL_CHANCE * (1 - REROLL_CHANCE))
    assert abs(ghost.rerolls - expected) < 5 * sigma


def test_reroll_keeps_velocity_in_range():
    ghost = Ghost.spawn(0, 0, rng=random.Random(3))
    for _ in range(5_000):
        ghost.update(Vector2D(1, 1))
        assert 1 - 1e-9 <= ghost.velocity.get_length() < 3 + 1e-9


def test_render_order(rng, surface):
    ghost = Ghost.spawn(100, 100, surface=surface, rng=rng)
    ghost.update(Vector2D(100, 500))
    ghost.render()

    body, left, right, eye1, eye2 = surface.commands
    assert body == FillCircle(ghost.position.x, ghost.position.y, 50, WHITE)
    assert left == FillCircle(ghost.hand_position.x - 45, ghost.hand_position.y + 10, 10, WHITE)
    assert right == FillCircle(ghost.hand_position.x + 45, ghost.hand_position.y + 10, 10, WHITE)
    assert (eye1.radius, eye1.color) == (5, BLACK)
    assert (eye2.x, eye2.y) == ghost.eyes[1].iris_position.to_tuple()


def test_render_does_not_mutate(rng, surface):
    ghost = Ghost.spawn(10, 10, rng=rng)
    ghost.update(Vector2D(0, 0))
    state = (ghost.position.copy(), ghost.hand_position.copy(), ghost.body_bounce_angle)
    ghost.render(surface)
    ghost.render(surface)
    assert (ghost.position, ghost.hand_position, ghost.body_bounce_angle) == state
    assert len(surface.commands) == 10


def test_render_without_any_surface_is_rejected(rng):
    ghost = Ghost.spawn(10, 10, rng=rng)
    with pytest.raises(ValueError, match='surface'):
        ghost.render()
