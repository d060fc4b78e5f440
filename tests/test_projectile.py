import pytest

from spacefighter.flags import CollisionType
from spacefighter.gameobject import GameObject
from spacefighter.geometry import Vector2
from spacefighter.particles import GameTime
from spacefighter.projectile import Projectile


@pytest.fixture(autouse=True)
def world():
    saved_level = GameObject.current_level
    GameObject.set_current_level(None)
    yield
    GameObject.set_current_level(saved_level)


def _shot():
    projectile = Projectile()
    projectile.texture_size = Vector2(10, 10)
    return projectile


class RecordingLevel:
    def __init__(self):
        self.seen = []

    def update_sector_position(self, game_object):
        self.seen.append(game_object)


def test_defaults_from_source():
    p = Projectile()
    assert p.damage == 1
    assert p.speed == 500
    assert p.collision_radius == 9
    assert p.direction == Vector2(0, -1)
    assert p.is_active() is False


def test_activate_places_and_activates():
    p = _shot()
    p.activate(Vector2(50, 60))
    assert p.is_active()
    assert p.position == Vector2(50, 60)
    assert p.collision_type() == CollisionType.PLAYER | CollisionType.PROJECTILE
    assert str(p) == "Player Projectile"


def test_enemy_projectile():
    p = _shot()
    p.activate(Vector2(50, 60), was_shot_by_player=False)
    assert p.collision_type() == CollisionType.ENEMY | CollisionType.PROJECTILE
    assert str(p) == "Enemy Projectile"
    assert p.has_mask(CollisionType.ENEMY)


def test_update_moves_up_at_speed():
    p = _shot()
    p.activate(Vector2(50, 90))
    p.update(GameTime(0.1, 0.1))
    assert p.position.x == pytest.approx(50)
    assert p.position.y == pytest.approx(40)
    assert p.is_active()


def test_inactive_projectile_does_not_move():
    p = _shot()
    p.set_position(50, 90)
    p.update(GameTime(0.1, 0.1))
    assert p.position == Vector2(50, 90)


def test_leaving_top_of_screen_deactivates():
    p = _shot()
    p.activate(Vector2(50, -100))
    p.update(GameTime(0.1, 0.1))
    assert p.is_active() is False


def test_leaving_sides_deactivates():
    right = _shot()
    right.direction = Vector2(1, 0)
    right.activate(Vector2(1700, 50))
    right.update(GameTime(0.1, 0.1))
    assert right.is_active() is False

    left = _shot()
    left.direction = Vector2(-1, 0)
    left.activate(Vector2(-100, 50))
    left.update(GameTime(0.1, 0.1))
    assert left.is_active() is False


def test_active_projectile_reports_to_level():
    level = RecordingLevel()
    GameObject.set_current_level(level)
    p = _shot()
    p.activate(Vector2(50, 90))
    p.update(GameTime(0.01, 0.01))
    assert level.seen == [p]