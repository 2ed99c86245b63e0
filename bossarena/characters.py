"""Characters that act in the arena: the ground, the player and the boss."""
from __future__ import annotations

import enum
import logging
from typing import AbstractSet, Iterable, Optional

from bossarena.attack_manager import BossAttackKind, BossAttackManager
from bossarena.mesh_object import StaticMeshObject
from bossarena.transform import Matrix, Vec3

logger = logging.getLogger(__name__)

_NO_KEYS: AbstractSet["Key"] = frozenset()


class Key(enum.Enum):
    """Keys the characters react to."""

    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    W = enum.auto()
    S = enum.auto()
    Z = enum.auto()


class Character(StaticMeshObject):
    """A mesh object driven by the keys held down during a frame."""

    def __init__(self, mesh: Optional[Iterable[Vec3]] = None) -> None:
        super().__init__()
        self.shot = False
        if mesh is not None:
            self.attach_mesh(mesh)

    def update(self, keys: AbstractSet[Key] = _NO_KEYS) -> None:
        super().update()


class Ground(StaticMeshObject):
    """The static floor of the arena."""

    def __init__(self, mesh: Optional[Iterable[Vec3]] = None) -> None:
        super().__init__()
        if mesh is not None:
            self.attach_mesh(mesh)

    def update(self, keys: AbstractSet[Key] = _NO_KEYS) -> None:
        """The ground stays where it is."""


def _land_on(character: StaticMeshObject, ground: StaticMeshObject) -> None:
    own = character.bbox
    top = ground.bbox.max_position.y
    if own.min_position.y < top:
        half_height = (own.max_position.y - own.min_position.y) / 2.0
        pos = character.position
        character.position = Vec3(pos.x, top + half_height, pos.z)


class MoveState(enum.Enum):
    """How the player is moving this frame."""

    STOP = 0
    FORWARD = 1
    BACKWARD = 2
    TURN_LEFT = 3
    TURN_RIGHT = 4


class Player(Character):
    """A player steered like a radio-controlled car."""

    TURN_SPEED = 0.1
    MOVE_SPEED = 0.1
    CLIMB_STEP = 0.1

    def __init__(self, mesh: Optional[Iterable[Vec3]] = None) -> None:
        super().__init__(mesh)
        self.turn_speed = self.TURN_SPEED
        self.move_speed = self.MOVE_SPEED
        self.move_state = MoveState.STOP

    def update(self, keys: AbstractSet[Key] = _NO_KEYS) -> None:
        if Key.UP in keys:
            self.move_state = MoveState.FORWARD
        if Key.DOWN in keys:
            self.move_state = MoveState.BACKWARD

        rot = self.rotation
        yaw = rot.y
        if Key.RIGHT in keys:
            yaw += self.turn_speed
        if Key.LEFT in keys:
            yaw -= self.turn_speed
        self.rotation = Vec3(rot.x, yaw, rot.z)

        pos = self.position
        y = pos.y
        if Key.S in keys:
            y -= self.CLIMB_STEP
        if Key.W in keys:
            y += self.CLIMB_STEP
        self.position = Vec3(pos.x, y, pos.z)

        self.radio_control(keys)

        self.shot = Key.Z in keys
        super().update(keys)

    def radio_control(self, keys: AbstractSet[Key] = _NO_KEYS) -> None:
        """Move along the facing direction, then return to the stopped state."""
        forward = Matrix.rotation_y(self.rotation.y).transform_coord(Vec3(0.0, 0.0, 1.0))
        if self.move_state is MoveState.FORWARD and Key.UP in keys:
            self.position = self.position + forward * self.move_speed
        elif self.move_state is MoveState.BACKWARD and Key.DOWN in keys:
            self.position = self.position - forward * self.move_speed
        self.move_state = MoveState.STOP

    def handle_ground_collision(self, ground: StaticMeshObject) -> None:
        """Lift the player so that it stands on top of the ground's box."""
        _land_on(self, ground)


class AttackSequenceState(enum.Enum):
    """The attack the boss will start next."""

    SLASH = enum.auto()
    CHARGE = enum.auto()
    JUMP = enum.auto()


class Boss(Character):
    """A boss that cycles through attacks while a player is present."""

    TURN_SPEED = 0.1
    MOVE_SPEED = 0.3
    STEP = 0.1
    FRAME_TIME = 1.0 / 60.0
    COOLTIME_DURATION = 2.0

    _NEXT = {
        AttackSequenceState.JUMP: (BossAttackKind.JUMP, AttackSequenceState.JUMP),
        AttackSequenceState.SLASH: (BossAttackKind.SLASH, AttackSequenceState.CHARGE),
        AttackSequenceState.CHARGE: (BossAttackKind.CHARGE, AttackSequenceState.JUMP),
    }

    def __init__(self, mesh: Optional[Iterable[Vec3]] = None) -> None:
        super().__init__(mesh)
        self.turn_speed = self.TURN_SPEED
        self.move_speed = self.MOVE_SPEED
        self.velocity = Vec3()
        self.cooldown = self.COOLTIME_DURATION
        self.player: Optional[Player] = None
        self.sequence_state = AttackSequenceState.JUMP
        self.attack_manager = BossAttackManager()

    def update(self, keys: AbstractSet[Key] = _NO_KEYS) -> None:
        self.cooldown += self.FRAME_TIME
        manager = self.attack_manager

        if (
            self.player is not None
            and self.cooldown >= self.COOLTIME_DURATION
            and not manager.has_active_attack()
        ):
            kind, following = self._NEXT[self.sequence_state]
            manager.create_boss_attack(kind, self.position)
            self.cooldown = 0.0
            self.sequence_state = following
            logger.debug("boss starts %s attack", kind.name.lower())

        manager.update()
        attack = manager.active_attack()
        if attack is not None and attack.is_attack_active():
            self.position = attack.attack_position()

        if not manager.has_active_attack():
            vx = 0.0
            if Key.LEFT in keys:
                vx = -self.STEP
            elif Key.RIGHT in keys:
                vx = self.STEP
            self.velocity = Vec3(vx, self.velocity.y, self.velocity.z)
            pos = self.position
            self.position = Vec3(pos.x + vx, pos.y, pos.z)

        self.update_bbox()
        self.update_bsphere_pos()

        pos = self.position
        if pos.y < 0.0:
            self.position = Vec3(pos.x, 0.0, pos.z)

        super().update(keys)

    def reset(self) -> None:
        """Make the next attack ready to start at once."""
        self.cooldown = self.COOLTIME_DURATION

    def initialize_position(self, position: Vec3) -> None:
        self.position = position

    def handle_ground_collision(self, ground: StaticMeshObject) -> None:
        """Lift the boss so that it stands on top of the ground's box."""
        _land_on(self, ground)