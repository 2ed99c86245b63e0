import math

import pytest

from bossarena.attacks import BossAttackJump, BossAttackSlash, BossAttackSlashCharge
from bossarena.characters import (
    AttackSequenceState,
    Boss,
    Ground,
    Key,
    MoveState,
    Player,
)
from bossarena.collision import BoundingBox
from bossarena.transform import Vec3

CUBE = [
    Vec3(x, y, z)
    for x in (-1.0, 1.0)
    for y in (-1.0, 1.0)
    for z in (-1.0, 1.0)
]


def test_ground_does_not_move():
    ground = Ground()
    ground.position = Vec3(1.0, 2.0, 3.0)
    ground.update({Key.UP, Key.LEFT})
    assert ground.position == Vec3(1.0, 2.0, 3.0)


def test_player_turns_right_and_left():
    player = Player()
    player.update({Key.RIGHT})
    assert player.rotation.y == pytest.approx(Player.TURN_SPEED)
    player.update({Key.LEFT})
    assert player.rotation.y == pytest.approx(0.0)


def test_player_moves_forward_along_z():
    player = Player()
    player.update({Key.UP})
    assert player.position.z == pytest.approx(Player.MOVE_SPEED)
    assert player.position.x == pytest.approx(0.0)
    assert player.move_state is MoveState.STOP


def test_player_moves_backward_along_z():
    player = Player()
    player.update({Key.DOWN})
    assert player.position.z == pytest.approx(-Player.MOVE_SPEED)


def test_player_step_length_is_move_speed_after_turning():
    player = Player()
    for _ in range(5):
        player.update({Key.RIGHT})
    before = player.position
    player.update({Key.UP})
    step = player.position - before
    assert step.length() == pytest.approx(Player.MOVE_SPEED)
    assert step.x > 0.0


def test_player_radio_control_needs_key_held():
    player = Player()
    player.move_state = MoveState.FORWARD
    player.radio_control(frozenset())
    assert player.position == Vec3()
    assert player.move_state is MoveState.STOP


def test_player_climbs_and_descends():
    player = Player()
    player.update({Key.W})
    assert player.position.y == pytest.approx(Player.CLIMB_STEP)
    player.update({Key.S})
    assert player.position.y == pytest.approx(0.0)


def test_player_shot_flag_lasts_one_frame():
    player = Player()
    player.update({Key.Z})
    assert player.shot is True
    player.update(frozenset())
    assert player.shot is False


def test_player_update_refits_bbox_to_position():
    player = Player(CUBE)
    player.update({Key.UP})
    center = player.bbox.center()
    assert center.z == pytest.approx(player.position.z)
    assert player.bbox.size().x == pytest.approx(2.0)


def test_player_lands_on_ground():
    player = Player()
    player.bbox = BoundingBox(Vec3(0.0, -1.0, 0.0), Vec3(1.0, 1.0, 1.0))
    player.position = Vec3(3.0, -1.0, 4.0)
    ground = Ground()
    ground.bbox = BoundingBox(Vec3(-10.0, 0.0, -10.0), Vec3(10.0, 0.5, 10.0))
    player.handle_ground_collision(ground)
    assert player.position.y == pytest.approx(1.5)
    assert (player.position.x, player.position.z) == (3.0, 4.0)


def test_player_above_ground_is_left_alone():
    player = Player()
    player.bbox = BoundingBox(Vec3(0.0, 2.0, 0.0), Vec3(1.0, 3.0, 1.0))
    player.position = Vec3(0.0, 2.5, 0.0)
    ground = Ground()
    ground.bbox = BoundingBox(Vec3(-1.0, 0.0, -1.0), Vec3(1.0, 0.5, 1.0))
    player.handle_ground_collision(ground)
    assert player.position == Vec3(0.0, 2.5, 0.0)


def test_boss_lands_on_ground():
    boss = Boss()
    boss.bbox = BoundingBox(Vec3(0.0, -2.0, 0.0), Vec3(1.0, 0.0, 1.0))
    ground = Ground()
    ground.bbox = BoundingBox(Vec3(-1.0, -1.0, -1.0), Vec3(1.0, 0.0, 1.0))
    boss.handle_ground_collision(ground)
    assert boss.position.y == pytest.approx(1.0)


def test_boss_without_player_walks_with_arrows():
    boss = Boss()
    boss.update({Key.LEFT})
    assert boss.position.x == pytest.approx(-Boss.STEP)
    assert boss.attack_manager.has_active_attack() is False
    boss.update({Key.RIGHT})
    assert boss.position.x == pytest.approx(0.0)


def test_boss_with_player_starts_jump():
    boss = Boss()
    boss.player = Player()
    boss.update(frozenset())
    assert boss.attack_manager.has_active_attack() is True
    assert isinstance(boss.attack_manager.active_attack(), BossAttackJump)
    expected = BossAttackJump.JUMP_POWER - BossAttackJump.GRAVITY
    assert boss.position.y == pytest.approx(expected)
    assert boss.cooldown == 0.0
    assert boss.sequence_state is AttackSequenceState.JUMP


def test_boss_ignores_arrows_while_attacking():
    boss = Boss()
    boss.player = Player()
    boss.update({Key.LEFT})
    assert boss.position.x == pytest.approx(0.0)


def test_boss_waits_for_cooldown_after_jump():
    boss = Boss()
    boss.player = Player()
    boss.update(frozenset())
    frames = 0
    while boss.attack_manager.has_active_attack():
        boss.update(frozenset())
        frames += 1
        assert frames < 1000
    assert boss.position.y >= 0.0
    boss.update(frozenset())
    assert boss.attack_manager.has_active_attack() is False
    assert boss.cooldown < Boss.COOLTIME_DURATION


def test_boss_slash_is_followed_by_charge_then_jump():
    boss = Boss()
    boss.player = Player()
    boss.sequence_state = AttackSequenceState.SLASH
    boss.update(frozenset())
    assert isinstance(boss.attack_manager.active_attack(), BossAttackSlash)
    assert boss.sequence_state is AttackSequenceState.CHARGE

    boss.attack_manager.reset_current_attack()
    boss.reset()
    boss.update(frozenset())
    assert isinstance(boss.attack_manager.active_attack(), BossAttackSlashCharge)
    assert boss.sequence_state is AttackSequenceState.JUMP


def test_boss_reset_allows_immediate_attack():
    boss = Boss()
    boss.player = Player()
    boss.cooldown = 0.0
    boss.update(frozenset())
    assert boss.attack_manager.has_active_attack() is False
    boss.reset()
    boss.update(frozenset())
    assert boss.attack_manager.has_active_attack() is True


def test_boss_below_floor_is_clamped():
    boss = Boss()
    boss.initialize_position(Vec3(2.0, -5.0, 3.0))
    boss.update(frozenset())
    assert boss.position == Vec3(2.0, 0.0, 3.0)


def test_boss_sphere_follows_position():
    boss = Boss(CUBE)
    boss.initialize_position(Vec3(4.0, 1.0, -2.0))
    boss.update({Key.RIGHT})
    assert boss.bsphere.position == boss.position
    assert math.isclose(boss.bbox.center().x, boss.position.x, abs_tol=1e-9)