"""Scale/rotate/translate transforms and world matrices with parenting."""

from __future__ import annotations

from dataclasses import dataclass, field

from patiengine.matrix import Matrix4x4, inverse, make_affine, make_identity
from patiengine.vector import Vector3


@dataclass
class Transform:
    """Scale, Euler rotation (radians) and translation."""

    scale: Vector3 = field(default_factory=lambda: Vector3(1.0, 1.0, 1.0))
    rotate: Vector3 = field(default_factory=Vector3)
    translate: Vector3 = field(default_factory=Vector3)


@dataclass
class TransformationMatrix:
    """The matrices handed to a shader for one object."""

    wvp: Matrix4x4 = field(default_factory=make_identity)
    world: Matrix4x4 = field(default_factory=make_identity)
    world_inverse_transpose: Matrix4x4 = field(default_factory=make_identity)


@dataclass(eq=False)
class WorldTransform:
    """Local transform of an object, optionally relative to a parent."""

    scale: Vector3 = field(default_factory=lambda: Vector3(1.0, 1.0, 1.0))
    rotation: Vector3 = field(default_factory=Vector3)
    translation: Vector3 = field(default_factory=Vector3)
    mat_world: Matrix4x4 = field(default_factory=make_identity)
    parent: WorldTransform | None = None
    const_buffer: TransformationMatrix | None = field(default=None, init=False)

    def initialize(self) -> None:
        """Compute the world matrix, create the buffer and fill it."""
        self.mat_world = make_affine(self.scale, self.rotation, self.translation)
        self.create_const_buffer()
        self.transfer_matrix()

    def create_const_buffer(self) -> None:
        """Create the shader matrices, all set to identity."""
        self.const_buffer = TransformationMatrix()

    def transfer_matrix(self) -> None:
        """Recompute the world matrix and copy it into the buffer if one exists."""
        self.mat_world = make_affine(self.scale, self.rotation, self.translation)
        if self.const_buffer is None:
            return
        if self.parent is not None:
            self.mat_world = self.mat_world * self.parent.mat_world
        self.const_buffer.world = self.mat_world
        self.const_buffer.world_inverse_transpose = inverse(self.mat_world)

    def _require_buffer(self) -> TransformationMatrix:
        if self.const_buffer is None:
            raise RuntimeError("constant buffer has not been created")
        return self.const_buffer

    def set_map_wvp(self, wvp: Matrix4x4) -> None:
        self._require_buffer().wvp = wvp

    def set_map_world(self, world: Matrix4x4) -> None:
        self._require_buffer().world = world