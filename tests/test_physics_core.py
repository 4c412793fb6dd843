import pytest

from birb.data_models import Box, GameState
from birb.physics_core import PhysicsCore


@pytest.fixture
def core():
    return PhysicsCore()


class TestBox:
    def test_overlapping_boxes_intersect(self):
        assert Box(0, 0, 10, 10).intersects(Box(5, 5, 10, 10))

    def test_intersection_is_symmetric(self):
        a, b = Box(0, 0, 10, 10), Box(9, -5, 2, 30)
        assert a.intersects(b) and b.intersects(a)

    def test_shared_edge_is_not_an_intersection(self):
        assert not Box(0, 0, 10, 10).intersects(Box(10, 0, 10, 10))
        assert not Box(0, 0, 10, 10).intersects(Box(0, 10, 10, 10))

    def test_disjoint_boxes(self):
        assert not Box(0, 0, 10, 10).intersects(Box(50, 50, 10, 10))

    def test_edges(self):
        box = Box(80, 280, 40, 40)
        assert (box.left, box.right, box.top, box.bottom) == (80, 120, 280, 320)


def test_gravity_then_movement(core):
    y, v = core.apply_gravity_and_movement(300.0, 0.0, 600)
    assert v == pytest.approx(0.7)
    assert y == pytest.approx(300.7)


def test_movement_clamps_to_playfield(core):
    assert core.apply_gravity_and_movement(5.0, -20.0, 600)[0] == 0.0
    assert core.apply_gravity_and_movement(555.0, 20.0, 600)[0] == 560.0


def test_clamp_keeps_velocity(core):
    _, v = core.apply_gravity_and_movement(5.0, -20.0, 600)
    assert v == pytest.approx(-19.3)


def test_flap_is_jump_impulse(core):
    assert core.flap() == -15


@pytest.mark.parametrize("score, gap", [(0, 300), (1, 295), (10, 250), (30, 150), (100, 150)])
def test_gap_for_score(core, score, gap):
    assert core.gap_for_score(score) == gap


@pytest.mark.parametrize("y, expected", [
    (0.0, True),
    (560.0, True),
    (0.1, False),
    (300.0, False),
    (559.9, False),
])
def test_out_of_bounds_includes_touching(core, y, expected):
    assert core.is_out_of_bounds(y, 600) is expected


def test_geometry(core):
    state = GameState(bird_y=300, pipe_x=200, top_pipe_height=120, bottom_pipe_y=420)
    assert core.bird_box(state) == Box(80, 280, 40, 40)
    assert core.top_pipe_box(state) == Box(200, 0, 80, 120)
    assert core.bottom_pipe_box(state, 600) == Box(200, 420, 80, 180)


def test_check_playfield(core):
    core.check_playfield(250)
    with pytest.raises(ValueError):
        core.check_playfield(249)


def test_tunables_can_be_overridden():
    core = PhysicsCore(gravity=1.0, jump_impulse=-8.0)
    assert core.apply_gravity_and_movement(100.0, 0.0, 600) == (101.0, 1.0)
    assert core.flap() == -8.0
