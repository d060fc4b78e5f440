import pytest

from spacefighter.flags import CollisionType, TriggerType


def test_collision_bits_are_distinct_powers():
    members = [
        CollisionType.PLAYER,
        CollisionType.ENEMY,
        CollisionType.SHIP,
        CollisionType.PROJECTILE,
    ]
    assert [int(m) for m in members] == [1, 2, 4, 8]
    assert int(CollisionType.NONE) == 0
    overlaps = [
        [CollisionType.contains(first, second) for second in members]
        for first in members
    ]
    assert overlaps == [
        [True, False, False, False],
        [False, True, False, False],
        [False, False, True, False],
        [False, False, False, True],
    ]
    assert CollisionType.NONE.contains(CollisionType.NONE) is False


def test_collision_combination_contains_parts():
    player_ship = CollisionType.PLAYER | CollisionType.SHIP
    assert CollisionType.contains(player_ship, CollisionType.PLAYER)
    assert CollisionType.contains(player_ship, CollisionType.SHIP)
    assert not CollisionType.contains(player_ship, CollisionType.ENEMY)
    assert not CollisionType.contains(player_ship, CollisionType.NONE)


def test_collision_contains_is_overlap_not_subset():
    player_ship = CollisionType.PLAYER | CollisionType.SHIP
    player_projectile = CollisionType.PLAYER | CollisionType.PROJECTILE
    assert CollisionType.contains(player_ship, player_projectile)
    assert CollisionType.contains(player_projectile, player_ship)


def test_collision_ordering_and_equality():
    a = CollisionType.PLAYER | CollisionType.SHIP
    b = CollisionType.ENEMY | CollisionType.SHIP
    assert a < b
    assert b > a
    assert a == CollisionType.SHIP | CollisionType.PLAYER
    assert CollisionType.contains(a, b)


def test_collision_and_xor():
    a = CollisionType.PLAYER | CollisionType.SHIP
    b = CollisionType.ENEMY | CollisionType.SHIP
    assert a & b == CollisionType.SHIP
    assert a ^ b == CollisionType.PLAYER | CollisionType.ENEMY
    c = CollisionType.NONE
    c |= CollisionType.PROJECTILE
    c &= CollisionType.PROJECTILE
    assert c == CollisionType.PROJECTILE
    assert CollisionType.contains(c, CollisionType.PROJECTILE)
    assert not CollisionType.contains(a ^ b, CollisionType.SHIP)


def test_trigger_all_contains_everything():
    for trigger in (TriggerType.PRIMARY, TriggerType.SECONDARY, TriggerType.SPECIAL):
        assert TriggerType.ALL.contains(trigger)
        assert trigger.contains(TriggerType.ALL)
    assert int(TriggerType.ALL) == 0xFFFF


def test_trigger_none_contains_nothing():
    assert not TriggerType.NONE.contains(TriggerType.ALL)
    assert not TriggerType.PRIMARY.contains(TriggerType.SECONDARY)


@pytest.mark.parametrize(
    "left, right",
    [
        (TriggerType.PRIMARY, TriggerType.SECONDARY),
        (TriggerType.SECONDARY, TriggerType.SPECIAL),
    ],
)
def test_trigger_union_and_xor(left, right):
    combined = left | right
    assert combined.contains(left) and combined.contains(right)
    assert combined ^ right == left
    assert combined & left == left
    assert left < right


def test_trigger_in_place_union():
    trigger = TriggerType.NONE
    trigger |= TriggerType.PRIMARY
    assert trigger == TriggerType.PRIMARY
    assert trigger != TriggerType.NONE
    assert TriggerType.PRIMARY.contains(trigger)
    assert not TriggerType.SECONDARY.contains(trigger)