"""Axis-aligned bounding boxes and bounding spheres."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Tuple

from bossarena.transform import Vec3

logger = logging.getLogger(__name__)

FLT_MAX = 3.4028234663852886e38

# Height given to a box built from a mesh, measured up from its lowest point.
_BOX_HEIGHT = 0.0


def _bounds(points: Iterable[Vec3]) -> Tuple[Vec3, Vec3]:
    pts = list(points)
    if not pts:
        raise ValueError("cannot compute bounds of an empty point set")
    low = Vec3(min(p.x for p in pts), min(p.y for p in pts), min(p.z for p in pts))
    high = Vec3(max(p.x for p in pts), max(p.y for p in pts), max(p.z for p in pts))
    return low, high


def _empty_min() -> Vec3:
    return Vec3(FLT_MAX, FLT_MAX, FLT_MAX)


def _empty_max() -> Vec3:
    return Vec3(-FLT_MAX, -FLT_MAX, -FLT_MAX)


@dataclass
class BoundingBox:
    """An axis-aligned box, with the local box it was first built from."""

    min_position: Vec3 = field(default_factory=_empty_min)
    max_position: Vec3 = field(default_factory=_empty_max)
    original_local_min: Vec3 = field(default_factory=_empty_min)
    original_local_max: Vec3 = field(default_factory=_empty_max)

    def create_for_points(self, points: Iterable[Vec3]) -> None:
        """Fit the box to mesh vertices; its top is set at a fixed height above its bottom."""
        low, high = _bounds(points)
        self.min_position = low
        self.original_local_min = low
        self.max_position = Vec3(high.x, low.y + _BOX_HEIGHT, high.z)
        self.original_local_max = Vec3(high.x, low.y + _BOX_HEIGHT, high.z)
        logger.debug(
            "bounding box for mesh: min=%s max=%s", self.min_position, self.max_position
        )

    def is_hit(self, other: BoundingBox) -> bool:
        """True when the two boxes overlap or touch on every axis."""
        for axis in ("x", "y", "z"):
            if (
                getattr(self.max_position, axis) < getattr(other.min_position, axis)
                or getattr(self.min_position, axis) > getattr(other.max_position, axis)
            ):
                return False
        return True

    def center(self) -> Vec3:
        return (self.min_position + self.max_position) * 0.5

    def size(self) -> Vec3:
        return self.max_position - self.min_position

    def set_original_local(self, min_position: Vec3, max_position: Vec3) -> None:
        self.original_local_min = min_position
        self.original_local_max = max_position


@dataclass
class BoundingSphere:
    """A sphere given by its centre and radius."""

    position: Vec3 = field(default_factory=Vec3)
    radius: float = 0.0

    def create_for_points(self, points: Iterable[Vec3]) -> None:
        """Centre on the vertices' mean and reach the farthest vertex."""
        pts = list(points)
        if not pts:
            raise ValueError("cannot compute a sphere for an empty point set")
        count = len(pts)
        center = Vec3(
            sum(p.x for p in pts) / count,
            sum(p.y for p in pts) / count,
            sum(p.z for p in pts) / count,
        )
        self.position = center
        self.radius = max((p - center).length() for p in pts)

    def is_hit(self, other: BoundingSphere) -> bool:
        """True when the spheres overlap or touch."""
        distance = (self.position - other.position).length()
        return distance <= self.radius + other.radius