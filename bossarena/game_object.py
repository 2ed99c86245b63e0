"""Base class for everything placed in the game world."""
from __future__ import annotations

from abc import ABC, abstractmethod

from bossarena.transform import Vec3


class GameObject(ABC):
    """An object with a position, a rotation and a scale."""

    def __init__(self) -> None:
        self.position: Vec3 = Vec3()
        self.rotation: Vec3 = Vec3()
        self.scale: Vec3 = Vec3(1.0, 1.0, 1.0)

    @abstractmethod
    def update(self) -> None:
        """Advance the object by one frame."""

    def set_uniform_scale(self, value: float) -> None:
        """Scale equally along all three axes."""
        self.scale = Vec3(value, value, value)