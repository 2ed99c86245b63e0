"""Boss attacks that drive the boss's position while they run."""
from __future__ import annotations

import enum
from abc import abstractmethod

from bossarena.mesh_object import StaticMeshObject
from bossarena.transform import Vec3

# Length of one frame at the fixed 60 frames per second the timed attacks assume.
FRAME_TIME = 1.0 / 60.0


class BossAttack(StaticMeshObject):
    """An attack that computes where the boss should be while it is active."""

    @abstractmethod
    def is_attack_active(self) -> bool:
        """True while the attack is running."""

    @abstractmethod
    def attack_position(self) -> Vec3:
        """World position of the boss as computed by the attack."""

    @abstractmethod
    def start(self, boss_position: Vec3) -> None:
        """Begin the attack from the boss's current world position."""

    def update(self) -> None:
        super().update()


class BossAttackJump(BossAttack):
    """A jump straight up under gravity that ends on landing at y = 0."""

    JUMP_POWER = 0.5
    GRAVITY = 0.02
    # The jump steps once per frame with a unit time step.
    TIME_STEP = 1.0

    def __init__(self) -> None:
        super().__init__()
        self.jumping = False
        self.initial_position = Vec3()
        self.current_position = Vec3()
        self.velocity = Vec3()

    def start(self, boss_position: Vec3) -> None:
        if self.jumping:
            return
        self.jumping = True
        self.initial_position = boss_position
        self.velocity = Vec3(self.velocity.x, self.JUMP_POWER, self.velocity.z)
        self.current_position = boss_position
        self.position = boss_position

    def update(self) -> None:
        if not self.jumping:
            return
        vy = self.velocity.y - self.GRAVITY * self.TIME_STEP
        pos = self.current_position
        y = pos.y + vy * self.TIME_STEP
        if y <= 0.0:
            y = 0.0
            if vy <= 0.0:
                vy = 0.0
                self.jumping = False
        self.velocity = Vec3(self.velocity.x, vy, self.velocity.z)
        self.current_position = Vec3(pos.x, y, pos.z)
        self.position = self.current_position
        super().update()

    def is_attack_active(self) -> bool:
        return self.jumping

    def attack_position(self) -> Vec3:
        return self.current_position


class BossAttackSlash(BossAttack):
    """A short lunge along the z axis, linearly interpolated over its duration."""

    DURATION = 0.5
    Z_MOVE_DISTANCE = -1.0

    def __init__(self) -> None:
        super().__init__()
        self.slashing = False
        self.elapsed = 0.0
        self.initial_position = Vec3()
        self.current_position = Vec3()

    def start(self, boss_position: Vec3) -> None:
        if self.slashing:
            return
        self.slashing = True
        self.elapsed = 0.0
        self.initial_position = boss_position
        self.current_position = boss_position

    def update(self) -> None:
        if not self.slashing:
            return
        self.elapsed += FRAME_TIME
        if self.elapsed >= self.DURATION:
            self.slashing = False
            self.elapsed = self.DURATION
        progress = min(self.elapsed / self.DURATION, 1.0)
        start = self.initial_position
        self.current_position = Vec3(
            start.x, start.y, start.z + self.Z_MOVE_DISTANCE * progress
        )
        self.position = self.current_position
        super().update()

    def is_attack_active(self) -> bool:
        return self.slashing

    def attack_position(self) -> Vec3:
        return self.current_position


class AttackPhase(enum.Enum):
    """Phases of the charged slash."""

    NONE = enum.auto()
    CHARGING = enum.auto()
    SLASHING = enum.auto()


class BossAttackSlashCharge(BossAttack):
    """Stand still while charging, then dash along the x axis."""

    CHARGE_DURATION = 3.0
    SLASH_DURATION = 2.0
    X_MOVE_DISTANCE = 1.0

    def __init__(self) -> None:
        super().__init__()
        self.phase = AttackPhase.NONE
        self.attacking = False
        self.elapsed = 0.0
        self.initial_position = Vec3()
        self.current_position = Vec3()

    def start(self, boss_position: Vec3) -> None:
        if self.attacking:
            return
        self.attacking = True
        self.phase = AttackPhase.CHARGING
        self.elapsed = 0.0
        self.initial_position = boss_position
        self.current_position = boss_position

    def update(self) -> None:
        if not self.attacking:
            return
        self.elapsed += FRAME_TIME

        if self.phase is AttackPhase.CHARGING:
            if self.elapsed >= self.CHARGE_DURATION:
                self.phase = AttackPhase.SLASHING
                self.initial_position = self.current_position
                self.elapsed = 0.0
        elif self.phase is AttackPhase.SLASHING:
            if self.elapsed >= self.SLASH_DURATION:
                self.attacking = False
                self.phase = AttackPhase.NONE
                self.elapsed = self.SLASH_DURATION
            else:
                progress = min(self.elapsed / self.SLASH_DURATION, 1.0)
                start = self.initial_position
                self.current_position = Vec3(
                    start.x + self.X_MOVE_DISTANCE * progress, start.y, start.z
                )

        self.position = self.current_position
        super().update()

    def is_attack_active(self) -> bool:
        return self.attacking

    def attack_position(self) -> Vec3:
        return self.current_position