"""Holds the boss's one current attack and retires it when it ends."""
from __future__ import annotations

import enum
import logging
from typing import Optional

from bossarena.attacks import (
    BossAttack,
    BossAttackJump,
    BossAttackSlash,
    BossAttackSlashCharge,
)
from bossarena.transform import Vec3

logger = logging.getLogger(__name__)


class BossAttackKind(enum.Enum):
    """The attacks a boss can start."""

    SLASH = enum.auto()
    JUMP = enum.auto()
    CHARGE = enum.auto()
    MAX = enum.auto()


_ATTACKS = {
    BossAttackKind.SLASH: BossAttackSlash,
    BossAttackKind.JUMP: BossAttackJump,
    BossAttackKind.CHARGE: BossAttackSlashCharge,
}


class BossAttackManager:
    """Owns at most one attack at a time."""

    def __init__(self) -> None:
        self._attack: Optional[BossAttack] = None

    def update(self) -> None:
        if self._attack is None:
            return
        self._attack.update()
        if not self._attack.is_attack_active():
            self._attack = None
            logger.debug("boss attack finished and reset")

    def create_boss_attack(self, kind: BossAttackKind, boss_position: Vec3) -> None:
        """Drop any current attack and start one of the given kind."""
        self._attack = None
        factory = _ATTACKS.get(kind)
        if factory is None:
            return
        attack = factory()
        attack.start(boss_position)
        self._attack = attack

    def has_active_attack(self) -> bool:
        return self._attack is not None and self._attack.is_attack_active()

    def active_attack(self) -> Optional[BossAttack]:
        return self._attack

    def reset_current_attack(self) -> None:
        self._attack = None
        logger.debug("current boss attack force reset")