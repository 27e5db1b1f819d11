"""Rotating wireframe and flat-shaded cube projected onto a small screen."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

Vector = tuple[float, float, float]
Point = tuple[int, int]
Line = tuple[Point, Point]
Triangle = tuple[Point, Point, Point]

CUBE_VERTICES: tuple[tuple[int, int, int], ...] = (
    (10, 10, -10), (-10, 10, -10), (-10, 10, 10), (10, 10, 10),
    (10, -10, -10), (-10, -10, -10), (-10, -10, 10), (10, -10, 10),
)

CUBE_EDGES: tuple[tuple[int, int], ...] = (
    (0, 1), (1, 2), (2, 3), (3, 0),
    (4, 5), (5, 6), (6, 7), (7, 4),
    (0, 4), (1, 5), (2, 6), (3, 7),
)

CUBE_FACES: tuple[tuple[int, int, int, int], ...] = (
    (0, 1, 2, 3), (3, 2, 6, 7), (0, 3, 7, 4),
    (0, 4, 5, 1), (1, 5, 6, 2), (4, 7, 6, 5),
)

# Monochrome 128x64 wireframe view.
WIRE_FOCAL, WIRE_DISTANCE, WIRE_ZOOM = 3.0, 30.0, 20.0
WIRE_CENTER = (84, 32)

# Colour 96x64 shaded view.
SHADED_FOCAL, SHADED_DISTANCE, SHADED_ZOOM = 5.0, 60.0, 20.0
SHADED_CENTER = (48, 32)

_TO_RAD = 2.0 * math.pi / 360.0


def rotate(
    vertices: Iterable[Sequence[float]], alpha: float, beta: float, gamma: float
) -> list[Vector]:
    """Rotate about x by ``alpha``, then y by ``beta``, then z by ``gamma`` degrees."""
    sin_a, cos_a = math.sin(_TO_RAD * alpha), math.cos(_TO_RAD * alpha)
    sin_b, cos_b = math.sin(_TO_RAD * beta), math.cos(_TO_RAD * beta)
    sin_g, cos_g = math.sin(_TO_RAD * gamma), math.cos(_TO_RAD * gamma)
    rotated = []
    for vertex in vertices:
        x, y, z = (float(c) for c in vertex)
        y, z = y * cos_a - z * sin_a, z * cos_a + y * sin_a
        x, z = x * cos_b + z * sin_b, z * cos_b - x * sin_b
        x, y = x * cos_g - y * sin_g, y * cos_g + x * sin_g
        rotated.append((x, y, z))
    return rotated


def project(
    vertices: Iterable[Sequence[float]], focal: float, distance: float, zoom: float
) -> list[Point]:
    """Perspective projection, truncating coordinates toward zero."""
    points = []
    for x, y, z in vertices:
        depth = focal + distance - z
        if depth == 0:
            raise ValueError(f"vertex at z={z} lies in the projection plane")
        scale = zoom * focal / depth
        points.append((int(x * scale), int(y * scale)))
    return points


def wireframe_lines(alpha: float, beta: float, gamma: float) -> list[Line]:
    """Screen-space edges of the cube for the monochrome display (y points up)."""
    points = project(
        rotate(CUBE_VERTICES, alpha, beta, gamma), WIRE_FOCAL, WIRE_DISTANCE, WIRE_ZOOM
    )
    cx, cy = WIRE_CENTER
    screen = [(cx + x, cy - y) for x, y in points]
    return [(screen[a], screen[b]) for a, b in CUBE_EDGES]


def color565(red: int, green: int, blue: int) -> int:
    """Pack 8-bit channels into a 16-bit RGB565 colour."""
    for name, value in (("red", red), ("green", green), ("blue", blue)):
        if not 0 <= value <= 255:
            raise ValueError(f"{name} must be in 0..255, got {value}")
    return ((red & 0xF8) << 8) | ((green & 0xFC) << 3) | (blue >> 3)


def shaded_faces(alpha: float, beta: float, gamma: float) -> list[tuple[Triangle, int]]:
    """Triangles of the faces turned toward the viewer, each with its blue shade.

    Every visible face yields two triangles; brighter means facing the eye
    more directly.
    """
    rotated = rotate(CUBE_VERTICES, alpha, beta, gamma)
    points = project(rotated, SHADED_FOCAL, SHADED_DISTANCE, SHADED_ZOOM)
    cx, cy = SHADED_CENTER
    screen = [(cx + x, cy + y) for x, y in points]
    eye = (0.0, 0.0, SHADED_FOCAL + SHADED_DISTANCE)

    triangles: list[tuple[Triangle, int]] = []
    for face in CUBE_FACES:
        center = [(rotated[face[0]][i] + rotated[face[2]][i]) / 2.0 for i in range(3)]
        to_eye = [e - c for e, c in zip(eye, center)]
        dot = sum(c * t for c, t in zip(center, to_eye))
        if dot <= 0.0:
            continue
        cosine = dot / (math.sqrt(sum(t * t for t in to_eye)) * math.sqrt(sum(c * c for c in center)))
        shade = color565(0, 0, int(cosine * 255))
        p0, p1, p2, p3 = (screen[i] for i in face)
        triangles.append(((p0, p1, p2), shade))
        triangles.append(((p0, p2, p3), shade))
    return triangles