"""CPU-side particle simulation: spawning, acceleration fields and instance data."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field, replace

from patiengine.matrix import Matrix4x4, make_affine, make_identity, make_rotate_y
from patiengine.transform import Transform
from patiengine.vector import Vector3, Vector4

DEFAULT_MAX_INSTANCES = 100
DEFAULT_DELTA_TIME = 1.0 / 60.0


@dataclass(frozen=True)
class AABB:
    """An axis-aligned box given by its minimum and maximum corners."""

    min: Vector3 = field(default_factory=Vector3)
    max: Vector3 = field(default_factory=Vector3)


@dataclass
class AccelerationField:
    """A region of space that sets the velocity of particles inside it."""

    acceleration: Vector3 = field(default_factory=lambda: Vector3(5.0, 0.0, 0.0))
    area: AABB = field(
        default_factory=lambda: AABB(Vector3(-1.0, -1.0, -1.0), Vector3(1.0, 1.0, 1.0))
    )


@dataclass
class Particle:
    """One live particle."""

    transform: Transform = field(default_factory=Transform)
    velocity: Vector3 = field(default_factory=Vector3)
    color: Vector4 = field(default_factory=lambda: Vector4(1.0, 1.0, 1.0, 1.0))
    life_time: float = 1.0
    current_time: float = 0.0


@dataclass(frozen=True)
class ParticleForGPU:
    """Per-instance data handed to the particle shader."""

    wvp: Matrix4x4 = field(default_factory=make_identity)
    world: Matrix4x4 = field(default_factory=make_identity)
    color: Vector4 = field(default_factory=lambda: Vector4(1.0, 1.0, 1.0, 1.0))


@dataclass
class Emitter:
    """Spawns ``count`` particles every ``frequency`` seconds."""

    transform: Transform = field(default_factory=Transform)
    count: int = 3
    frequency: float = 0.5
    frequency_time: float = 0.0


def make_new_particle(rng: random.Random, translate: Vector3) -> Particle:
    """A particle near ``translate`` with random offset, velocity, colour and lifetime."""
    offset = Vector3(rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0))
    velocity = Vector3(rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0))
    color = Vector4(rng.uniform(0.0, 1.0), rng.uniform(0.0, 1.0), rng.uniform(0.0, 1.0), 1.0)
    life_time = rng.uniform(1.0, 3.0)
    return Particle(
        transform=Transform(
            scale=Vector3(1.0, 1.0, 1.0),
            rotate=Vector3(),
            translate=offset + translate,
        ),
        velocity=velocity,
        color=color,
        life_time=life_time,
        current_time=0.0,
    )


def emit(emitter: Emitter, rng: random.Random) -> list[Particle]:
    """Create ``emitter.count`` new particles at the emitter's position."""
    return [make_new_particle(rng, emitter.transform.translate) for _ in range(emitter.count)]


def is_collision(aabb: AABB, point: Vector3) -> bool:
    """True when ``point`` lies inside or on the surface of ``aabb``."""
    closest = Vector3(
        min(max(point.x, aabb.min.x), aabb.max.x),
        min(max(point.y, aabb.min.y), aabb.max.y),
        min(max(point.z, aabb.min.z), aabb.max.z),
    )
    difference = closest - point
    return math.hypot(difference.x, difference.y, difference.z) <= 0.0


def _without_translation(matrix: Matrix4x4) -> Matrix4x4:
    rows = matrix.m
    return Matrix4x4(rows[:3] + ((0.0, 0.0, 0.0, rows[3][3]),))


class ParticleSystem:
    """Emits, moves and retires particles and produces per-frame instance data."""

    def __init__(
        self,
        emitter: Emitter | None = None,
        rng: random.Random | None = None,
        max_instances: int = DEFAULT_MAX_INSTANCES,
    ) -> None:
        if max_instances < 0:
            raise ValueError("max_instances must not be negative")
        self.emitter = emitter if emitter is not None else Emitter()
        self.rng = rng if rng is not None else random.Random()
        self.max_instances = max_instances
        self.particles: list[Particle] = []
        self.acceleration_field = AccelerationField()
        self.is_accel = False
        self.use_billboard = False
        self.delta_time = DEFAULT_DELTA_TIME
        self.rotate = Vector3()
        self._back_to_front = make_rotate_y(math.pi)

    def add_particles(self) -> None:
        """Emit one batch from the emitter immediately."""
        self.particles.extend(emit(self.emitter, self.rng))

    def update(
        self, view: Matrix4x4, projection: Matrix4x4, camera_matrix: Matrix4x4
    ) -> list[ParticleForGPU]:
        """Advance one frame and return instance data for at most ``max_instances`` particles."""
        billboard = _without_translation(self._back_to_front * camera_matrix)

        self.emitter.frequency_time += self.delta_time
        if self.emitter.frequency <= self.emitter.frequency_time:
            self.add_particles()
            self.emitter.frequency_time -= self.emitter.frequency

        self.particles = [p for p in self.particles if p.current_time < p.life_time]

        instances: list[ParticleForGPU] = []
        for particle in self.particles:
            if self.is_accel and is_collision(
                self.acceleration_field.area, particle.transform.translate
            ):
                particle.velocity = self.acceleration_field.acceleration

            particle.transform.rotate = self.rotate
            particle.transform.translate = (
                particle.transform.translate + particle.velocity * self.delta_time
            )
            particle.current_time += self.delta_time

            if len(instances) < self.max_instances:
                world = make_affine(
                    particle.transform.scale,
                    particle.transform.rotate,
                    particle.transform.translate,
                )
                if self.use_billboard:
                    world = world * billboard
                alpha = 1.0 - particle.current_time / particle.life_time
                instances.append(
                    ParticleForGPU(
                        wvp=world * view * projection,
                        world=world,
                        color=replace(particle.color, w=alpha),
                    )
                )
        return instances