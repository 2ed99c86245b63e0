"""Game objects that carry a static mesh and its collision volumes."""
from __future__ import annotations

from typing import Iterable, Optional, Tuple

from bossarena.collision import BoundingBox, BoundingSphere, _bounds
from bossarena.game_object import GameObject
from bossarena.transform import Vec3, world_matrix


class StaticMeshObject(GameObject):
    """A game object with an optional mesh, a bounding sphere and a bounding box.

    The mesh is held as its vertex positions in local space.
    """

    def __init__(self) -> None:
        super().__init__()
        self.mesh: Optional[Tuple[Vec3, ...]] = None
        self.bsphere = BoundingSphere()
        self.bbox = BoundingBox()

    def attach_mesh(self, vertices: Iterable[Vec3]) -> None:
        mesh = tuple(vertices)
        if not mesh:
            raise ValueError("a mesh needs at least one vertex")
        self.mesh = mesh

    def detach_mesh(self) -> None:
        self.mesh = None

    def update(self) -> None:
        if self.mesh is None:
            return
        self.update_bbox()

    def create_bsphere_for_mesh(self, vertices: Iterable[Vec3]) -> None:
        self.bsphere.create_for_points(vertices)

    def update_bsphere_pos(self) -> None:
        """Move the sphere to the object's position (mesh origin at its centre)."""
        self.bsphere.position = self.position

    def create_bbox_for_mesh(self, vertices: Iterable[Vec3]) -> None:
        self.bbox.create_for_points(vertices)

    def update_bbox(
        self,
        min_position: Optional[Vec3] = None,
        max_position: Optional[Vec3] = None,
    ) -> None:
        """Refit the world-space box to the transformed corners of a local box.

        Without arguments the local box is the attached mesh's bounds;
        otherwise both corners must be given. Nothing happens without a mesh.
        """
        if self.mesh is None:
            return
        if (min_position is None) != (max_position is None):
            raise ValueError("give both min_position and max_position, or neither")

        if min_position is None or max_position is None:
            low, high = _bounds(self.mesh)
            corners = [
                low,
                Vec3(high.x, low.y, low.z),
                Vec3(low.x, high.y, low.z),
                Vec3(high.x, high.y, low.z),
                Vec3(low.x, low.y, high.z),
                Vec3(high.x, low.y, high.z),
                Vec3(low.x, high.y, high.z),
                high,
            ]
        else:
            low, high = min_position, max_position
            # The second corner repeats the minimum rather than (max.x, min.y, min.z).
            corners = [
                low,
                Vec3(low.x, low.y, low.z),
                Vec3(low.x, high.y, low.z),
                Vec3(high.x, high.y, low.z),
                Vec3(low.x, low.y, high.z),
                Vec3(high.x, low.y, high.z),
                Vec3(low.x, high.y, high.z),
                high,
            ]

        world = world_matrix(self.position, self.rotation, self.scale)
        self.bbox.min_position, self.bbox.max_position = _bounds(
            world.transform_coord(corner) for corner in corners
        )