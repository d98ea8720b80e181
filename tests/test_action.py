import pytest

from mdp_grid.domain_object import Action


@pytest.mark.parametrize("action", Action.all())
def test_distribution(action):
    dist = action.prob_map
    assert sum(dist.values()) == pytest.approx(1.0)
    assert dist[action] == pytest.approx(0.8)
    for side in action.perpendicular:
        assert dist[side] == pytest.approx(0.1)
    assert action.opposite not in dist
    assert len(dist) == 3


def test_perpendiculars_of_up():
    assert set(Action.UP.perpendicular) == {Action.LEFT, Action.RIGHT}
    assert set(Action.LEFT.perpendicular) == {Action.UP, Action.DOWN}


def test_opposites():
    assert Action.UP.opposite is Action.DOWN
    assert Action.RIGHT.opposite is Action.LEFT


def test_order_and_shared_tables():
    assert Action.all() == [Action.UP, Action.RIGHT, Action.DOWN, Action.LEFT]
    assert Action.UP.prob_map is Action.UP.prob_map
    with pytest.raises(TypeError):
        Action.UP.prob_map[Action.DOWN] = 0.5
