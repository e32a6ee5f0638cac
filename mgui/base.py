"""Geometry, colours, input events and the abstract base of every widget."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Union

import pygame


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D point or size."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other) -> "Vector2":
        ox, oy = other
        return Vector2(self.x + ox, self.y + oy)

    def __sub__(self, other) -> "Vector2":
        ox, oy = other
        return Vector2(self.x - ox, self.y - oy)


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __iter__(self) -> Iterator[int]:
        yield self.r
        yield self.g
        yield self.b
        yield self.a


Color.BLACK = Color(0, 0, 0)
Color.WHITE = Color(255, 255, 255)
Color.RED = Color(255, 0, 0)
Color.GREEN = Color(0, 255, 0)
Color.BLUE = Color(0, 0, 255)
Color.YELLOW = Color(255, 255, 0)
Color.MAGENTA = Color(255, 0, 255)
Color.CYAN = Color(0, 255, 255)
Color.TRANSPARENT = Color(0, 0, 0, 0)


@dataclass(frozen=True)
class FloatRect:
    """An axis-aligned rectangle given by its position and size."""

    position: Vector2 = Vector2()
    size: Vector2 = Vector2()

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", Vector2(*self.position))
        object.__setattr__(self, "size", Vector2(*self.size))

    def contains(self, point) -> bool:
        """Whether the point lies inside; the right and bottom edges are excluded."""
        x, y = point
        px, py = self.position
        w, h = self.size
        min_x, max_x = min(px, px + w), max(px, px + w)
        min_y, max_y = min(py, py + h), max(py, py + h)
        return min_x <= x < max_x and min_y <= y < max_y


@dataclass(frozen=True)
class Transform:
    """An affine 2D transform: x' = a*x + b*y + c, y' = d*x + e*y + f."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0
    e: float = 1.0
    f: float = 0.0

    def combine(self, other: "Transform") -> "Transform":
        """The transform that applies ``other`` first and then this one."""
        return Transform(
            self.a * other.a + self.b * other.d,
            self.a * other.b + self.b * other.e,
            self.a * other.c + self.b * other.f + self.c,
            self.d * other.a + self.e * other.d,
            self.d * other.b + self.e * other.e,
            self.d * other.c + self.e * other.f + self.f,
        )

    def __matmul__(self, other: "Transform") -> "Transform":
        return self.combine(other)

    def translate(self, offset) -> "Transform":
        x, y = offset
        return self.combine(Transform(1.0, 0.0, x, 0.0, 1.0, y))

    def rotate(self, degrees: float) -> "Transform":
        angle = math.radians(degrees)
        cos, sin = math.cos(angle), math.sin(angle)
        return self.combine(Transform(cos, -sin, 0.0, sin, cos, 0.0))

    def inverse(self) -> "Transform":
        """The inverse transform, or the identity when none exists."""
        det = self.a * self.e - self.b * self.d
        if det == 0:
            return Transform()
        return Transform(
            self.e / det,
            -self.b / det,
            (self.b * self.f - self.c * self.e) / det,
            -self.d / det,
            self.a / det,
            (self.c * self.d - self.a * self.f) / det,
        )

    def transform_point(self, point) -> Vector2:
        x, y = point
        return Vector2(self.a * x + self.b * y + self.c, self.d * x + self.e * y + self.f)

    def transform_rect(self, rect: FloatRect) -> FloatRect:
        """The bounding rectangle of the transformed rectangle."""
        px, py = rect.position
        w, h = rect.size
        corners = [
            self.transform_point((px, py)),
            self.transform_point((px, py + h)),
            self.transform_point((px + w, py)),
            self.transform_point((px + w, py + h)),
        ]
        xs = [p.x for p in corners]
        ys = [p.y for p in corners]
        left, top = min(xs), min(ys)
        return FloatRect(Vector2(left, top), Vector2(max(xs) - left, max(ys) - top))


class Transformable:
    """Position, origin, rotation and scale that together give a transform."""

    def __init__(self, position=(0.0, 0.0)) -> None:
        self.position = position
        self.origin = (0.0, 0.0)
        self.rotation = 0.0
        self.scale = (1.0, 1.0)

    @property
    def position(self) -> Vector2:
        return self._position

    @position.setter
    def position(self, value) -> None:
        self._position = Vector2(*value)

    @property
    def origin(self) -> Vector2:
        return self._origin

    @origin.setter
    def origin(self, value) -> None:
        self._origin = Vector2(*value)

    @property
    def scale(self) -> Vector2:
        return self._scale

    @scale.setter
    def scale(self, value) -> None:
        self._scale = Vector2(*value)

    @property
    def rotation(self) -> float:
        """Rotation in degrees, kept within [0, 360)."""
        return self._rotation

    @rotation.setter
    def rotation(self, value: float) -> None:
        self._rotation = float(value) % 360.0

    @property
    def transform(self) -> Transform:
        angle = -math.radians(self._rotation)
        cos, sin = math.cos(angle), math.sin(angle)
        sxc, syc = self._scale.x * cos, self._scale.y * cos
        sxs, sys_ = self._scale.x * sin, self._scale.y * sin
        ox, oy = self._origin
        tx = -ox * sxc - oy * sys_ + self._position.x
        ty = ox * sxs - oy * syc + self._position.y
        return Transform(sxc, sys_, tx, -sxs, syc, ty)

    @property
    def inverse_transform(self) -> Transform:
        return self.transform.inverse()


class MouseButton(Enum):
    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"
    EXTRA1 = "extra1"
    EXTRA2 = "extra2"


@dataclass(frozen=True)
class MouseButtonPressed:
    button: MouseButton
    position: Vector2 = Vector2()


@dataclass(frozen=True)
class MouseButtonReleased:
    button: MouseButton
    position: Vector2 = Vector2()


@dataclass(frozen=True)
class MouseMoved:
    position: Vector2 = Vector2()


@dataclass(frozen=True)
class MouseWheelScrolled:
    delta: float
    position: Vector2 = Vector2()


@dataclass(frozen=True)
class Closed:
    pass


@dataclass(frozen=True)
class Resized:
    width: int
    height: int


Event = Union[MouseButtonPressed, MouseButtonReleased, MouseMoved, MouseWheelScrolled, Closed, Resized]


def _rotation_of(transform: Transform) -> float:
    return math.degrees(math.atan2(transform.d, transform.a))


class GuiElement(Transformable, ABC):
    """A drawable, transformable widget that reacts to input events."""

    def __init__(self, position) -> None:
        super().__init__(position)

    @abstractmethod
    def update_events(self, event: Event, mouse_pos: Vector2) -> None:
        """React to one input event, given the mouse position in parent space."""

    @abstractmethod
    def update(self, mouse_pos: Vector2) -> None:
        """Refresh the element once per frame."""

    @property
    @abstractmethod
    def local_bounds(self) -> FloatRect:
        """Bounds in the element's own coordinates."""

    @property
    def global_bounds(self) -> FloatRect:
        return self.transform.transform_rect(self.local_bounds)

    def set_size(self, size) -> None:
        """Resize the element; elements without a resizable shape ignore this."""

    def contains(self, point) -> bool:
        return self.global_bounds.contains(point)

    def rect_union(self, a: FloatRect, b: FloatRect) -> FloatRect:
        min_x = min(a.position.x, b.position.x)
        min_y = min(a.position.y, b.position.y)
        max_x = max(a.position.x + a.size.x, b.position.x + b.size.x)
        max_y = max(a.position.y + a.size.y, b.position.x + b.size.y)
        return FloatRect(Vector2(min_x, min_y), Vector2(max_x - min_x, max_y - min_y))

    @property
    def top(self) -> float:
        return self.global_bounds.position.y

    @property
    def bottom(self) -> float:
        bounds = self.global_bounds
        return bounds.position.y + bounds.size.y

    @property
    def left(self) -> float:
        return self.global_bounds.position.x

    @property
    def right(self) -> float:
        bounds = self.global_bounds
        return bounds.position.x + bounds.size.x

    @abstractmethod
    def draw(self, surface: pygame.Surface, transform: Optional[Transform] = None) -> None:
        """Draw onto the surface under the parent transform."""

    def map_global_to_local(self, point) -> Vector2:
        return self.inverse_transform.transform_point(point)

    @staticmethod
    def _outlined_bounds(size, thickness: float) -> FloatRect:
        w, h = size
        return FloatRect(Vector2(-thickness, -thickness), Vector2(w + 2 * thickness, h + 2 * thickness))

    @staticmethod
    def _draw_polygon(surface, transform: Transform, color: Color, left, top, right, bottom) -> None:
        if right <= left or bottom <= top:
            return
        corners = [(left, top), (right, top), (right, bottom), (left, bottom)]
        points = [tuple(transform.transform_point(c)) for c in corners]
        pygame.draw.polygon(surface, tuple(color), points)

    @classmethod
    def _draw_rectangle(
        cls,
        surface,
        transform: Transform,
        size,
        fill: Color,
        outline: Optional[Color] = None,
        thickness: float = 0.0,
    ) -> None:
        w, h = size
        if outline is not None and thickness > 0:
            cls._draw_polygon(surface, transform, outline, -thickness, -thickness, w + thickness, h + thickness)
        cls._draw_polygon(surface, transform, fill, 0.0, 0.0, w, h)

    @staticmethod
    def _draw_text(surface, transform: Transform, font, text: str, color: Color, center) -> None:
        if not text:
            return
        image = font.render(text, True, tuple(color))
        if color.a < 255:
            image.set_alpha(color.a)
        angle = _rotation_of(transform)
        if abs(angle) > 1e-6:
            image = pygame.transform.rotate(image, -angle)
        anchor = transform.transform_point(center)
        surface.blit(image, image.get_rect(center=(round(anchor.x), round(anchor.y))))