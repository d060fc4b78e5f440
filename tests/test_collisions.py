import pytest

from spacefighter.collisions import CollisionManager
from spacefighter.flags import CollisionType
from spacefighter.gameobject import GameObject
from spacefighter.geometry import Vector2

ENEMY_SHIP = CollisionType.ENEMY | CollisionType.SHIP
PLAYER_SHIP = CollisionType.PLAYER | CollisionType.SHIP
PLAYER_SHOT = CollisionType.PLAYER | CollisionType.PROJECTILE


@pytest.fixture(autouse=True)
def world():
    saved_level = GameObject.current_level
    GameObject.set_current_level(None)
    yield
    GameObject.set_current_level(saved_level)


class Body(GameObject):
    def __init__(self, kind, x, y, radius):
        super().__init__()
        self.kind = kind
        self.collision_radius = radius
        self.set_position(x, y)

    def collision_type(self):
        return self.kind


@pytest.fixture
def calls():
    return []


@pytest.fixture
def manager(calls):
    m = CollisionManager()
    m.add_collision_type(PLAYER_SHOT, ENEMY_SHIP, lambda a, b: calls.append((a, b)))
    return m


def test_overlapping_objects_trigger_callback(manager, calls):
    enemy = Body(ENEMY_SHIP, 0, 0, 20)
    shot = Body(PLAYER_SHOT, 10, 0, 9)
    manager.check_collision(shot, enemy)
    assert calls == [(enemy, shot)]


def test_callback_order_is_by_type_value(manager, calls):
    enemy = Body(ENEMY_SHIP, 0, 0, 20)
    shot = Body(PLAYER_SHOT, 0, 0, 9)
    manager.check_collision(enemy, shot)
    manager.check_collision(shot, enemy)
    assert calls == [(enemy, shot), (enemy, shot)]


def test_distant_objects_do_not_collide(manager, calls):
    enemy = Body(ENEMY_SHIP, 0, 0, 20)
    shot = Body(PLAYER_SHOT, 100, 0, 9)
    assert Vector2.distance(enemy.position, shot.position) == pytest.approx(100)
    manager.check_collision(enemy, shot)
    assert calls == []


def test_touching_at_radii_sum_counts(manager, calls):
    enemy = Body(ENEMY_SHIP, 0, 0, 20)
    shot = Body(PLAYER_SHOT, 29, 0, 9)
    assert Vector2.distance(enemy.position, shot.position) == pytest.approx(29)
    manager.check_collision(enemy, shot)
    assert calls == [(enemy, shot)]


def test_same_type_never_collides(calls):
    m = CollisionManager()
    m.add_collision_type(ENEMY_SHIP, ENEMY_SHIP, lambda a, b: calls.append((a, b)))
    m.check_collision(Body(ENEMY_SHIP, 0, 0, 5), Body(ENEMY_SHIP, 0, 0, 5))
    assert calls == []


def test_none_type_never_collides(calls):
    m = CollisionManager()
    m.add_collision_type(CollisionType.NONE, ENEMY_SHIP, lambda a, b: calls.append(1))
    m.check_collision(Body(CollisionType.NONE, 0, 0, 5), Body(ENEMY_SHIP, 0, 0, 5))
    assert calls == []


def test_non_collision_rule_wins(calls):
    m = CollisionManager()
    m.add_non_collision_type(PLAYER_SHIP, PLAYER_SHOT)
    m.add_collision_type(PLAYER_SHOT, PLAYER_SHIP, lambda a, b: calls.append(1))
    m.check_collision(Body(PLAYER_SHIP, 0, 0, 5), Body(PLAYER_SHOT, 0, 0, 5))
    assert calls == []


def test_unregistered_pair_is_remembered_as_non_colliding(calls):
    m = CollisionManager()
    ship = Body(PLAYER_SHIP, 0, 0, 5)
    enemy = Body(ENEMY_SHIP, 0, 0, 5)
    m.check_collision(ship, enemy)
    m.add_collision_type(PLAYER_SHIP, ENEMY_SHIP, lambda a, b: calls.append(1))
    m.check_collision(ship, enemy)
    assert calls == []


def test_first_registered_callback_is_used():
    seen = []
    m = CollisionManager()
    m.add_collision_type(PLAYER_SHIP, ENEMY_SHIP, lambda a, b: seen.append("first"))
    m.add_collision_type(ENEMY_SHIP, PLAYER_SHIP, lambda a, b: seen.append("second"))
    m.check_collision(Body(PLAYER_SHIP, 0, 0, 5), Body(ENEMY_SHIP, 0, 0, 5))
    assert seen == ["first"]