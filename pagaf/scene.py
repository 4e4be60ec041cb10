"""Scene entities, transforms, camera setup and camera movement."""

from __future__ import annotations

import itertools
import math
from collections.abc import Hashable, Iterable
from dataclasses import dataclass, replace
from enum import Enum, auto

Vec3 = tuple[float, float, float]
Mat3 = tuple[Vec3, Vec3, Vec3]

IDENTITY: Mat3 = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))
ORIGIN: Vec3 = (0.0, 0.0, 0.0)
UP: Vec3 = (0.0, 1.0, 0.0)

CAMERA = "camera"
LIGHT = "light"
CAMERA_SPEED = 10.0
ROTATION_SPEED = 1.0


class Key(Enum):
    """Keyboard keys the camera responds to."""

    ARROW_LEFT = auto()
    ARROW_RIGHT = auto()
    ARROW_UP = auto()
    ARROW_DOWN = auto()
    KEY_A = auto()
    KEY_D = auto()
    KEY_W = auto()
    KEY_S = auto()
    KEY_Q = auto()
    KEY_E = auto()


def _sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _normalize(v: Vec3) -> Vec3:
    length = math.sqrt(sum(c * c for c in v))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return (v[0] / length, v[1] / length, v[2] / length)


def _matmul(a: Mat3, b: Mat3) -> Mat3:
    columns = list(zip(*b))
    return tuple(
        tuple(sum(x * y for x, y in zip(row, col)) for col in columns) for row in a
    )  # type: ignore[return-value]


def _apply(m: Mat3, v: Vec3) -> Vec3:
    return tuple(sum(x * y for x, y in zip(row, v)) for row in m)  # type: ignore[return-value]


@dataclass
class Transform:
    """Position, orientation (a rotation matrix) and scale of an entity."""

    translation: Vec3 = ORIGIN
    rotation: Mat3 = IDENTITY
    scale: Vec3 = (1.0, 1.0, 1.0)

    @property
    def forward(self) -> Vec3:
        """Unit vector the entity faces (its local -Z axis)."""
        return _apply(self.rotation, (0.0, 0.0, -1.0))

    def looking_at(self, target: Vec3, up: Vec3) -> Transform:
        """A copy of this transform turned so that it faces the target."""
        back = _normalize(_sub(self.translation, target))
        right = _normalize(_cross(up, back))
        new_up = _cross(back, right)
        rotation = tuple(zip(right, new_up, back))
        return replace(self, rotation=rotation)  # type: ignore[arg-type]

    def rotate_y(self, angle: float) -> None:
        """Rotate in place about the world Y axis by angle radians."""
        c, s = math.cos(angle), math.sin(angle)
        about_y: Mat3 = ((c, 0.0, s), (0.0, 1.0, 0.0), (-s, 0.0, c))
        self.rotation = _matmul(about_y, self.rotation)


class World:
    """A registry of spawned entities, each a kind label and a transform."""

    def __init__(self) -> None:
        self._entities: dict[int, tuple[Hashable, Transform]] = {}
        self._ids = itertools.count(1)

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, entity: object) -> bool:
        return entity in self._entities

    def spawn(self, kind: Hashable, transform: Transform) -> int:
        """Add an entity and return its id."""
        entity = next(self._ids)
        self._entities[entity] = (kind, transform)
        return entity

    def despawn(self, entity: int) -> None:
        """Remove an entity; raises KeyError if it does not exist."""
        try:
            del self._entities[entity]
        except KeyError:
            raise KeyError(f"no entity {entity}") from None

    def get(self, entity: int) -> tuple[Hashable, Transform]:
        """The kind and transform of an entity."""
        try:
            return self._entities[entity]
        except KeyError:
            raise KeyError(f"no entity {entity}") from None

    def entities_of(self, kind: Hashable) -> list[int]:
        """Ids of all entities of a kind, in spawn order."""
        return [e for e, (k, _) in self._entities.items() if k == kind]


@dataclass
class GamePause:
    """Whether the game simulation is paused."""

    paused: bool = False


def setup_game(world: World) -> tuple[int, int]:
    """Spawn the camera and the sun light; return their ids."""
    camera = world.spawn(
        CAMERA, Transform(translation=(10.0, 15.0, 10.0)).looking_at(ORIGIN, UP)
    )
    light = world.spawn(
        LIGHT, Transform(translation=(10.0, 20.0, 10.0)).looking_at(ORIGIN, UP)
    )
    return camera, light


def camera_movement(transform: Transform, pressed: Iterable[Key], delta: float) -> None:
    """Move and turn a camera transform for the keys held during delta seconds."""
    keys = frozenset(pressed)
    step = CAMERA_SPEED * delta
    x, y, z = transform.translation
    if keys & {Key.ARROW_LEFT, Key.KEY_A}:
        x -= step
    if keys & {Key.ARROW_RIGHT, Key.KEY_D}:
        x += step
    if keys & {Key.ARROW_UP, Key.KEY_W}:
        z -= step
    if keys & {Key.ARROW_DOWN, Key.KEY_S}:
        z += step
    transform.translation = (x, y, z)

    if Key.KEY_Q in keys:
        transform.rotate_y(ROTATION_SPEED * delta)
    if Key.KEY_E in keys:
        transform.rotate_y(-ROTATION_SPEED * delta)