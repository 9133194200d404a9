"""Scene description: element types and the parser for ``.rt`` scene files.

A scene file holds one element per line.  The first character of a line
selects the element: ``A`` ambient light, ``C`` camera, ``L`` light, and
``s``, ``p`` and ``c`` for spheres, planes and cylinders.  Fields are
separated by spaces; points and colours are comma-separated triples.
Lines starting with any other character are ignored.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, field

from minirt.lines import read_lines
from minirt.numbers import parse_double, parse_int
from minirt.strings import split
from minirt.vector import Vec3

OPEN_ERROR = "Error opening scene!"


class SceneError(Exception):
    """Raised when a scene cannot be read or an element line is malformed."""


@dataclass(frozen=True)
class Color:
    """An RGB colour with integer channels."""

    r: int
    g: int
    b: int


@dataclass(frozen=True)
class AmbientLight:
    """Ambient lighting: a brightness ratio and a colour."""

    ratio: float
    color: Color


@dataclass(frozen=True)
class Camera:
    """The viewpoint, its orientation and horizontal field of view."""

    coordinates: Vec3
    orientation: Vec3
    fov: int


@dataclass(frozen=True)
class Light:
    """A point light with a brightness ratio and a colour."""

    coordinates: Vec3
    ratio: float
    color: Color


@dataclass(frozen=True)
class Sphere:
    """A sphere given by its centre and diameter."""

    coordinates: Vec3
    diameter: float
    color: Color


@dataclass(frozen=True)
class Plane:
    """A plane given by a point on it and its normal vector."""

    coordinates: Vec3
    normal: Vec3
    color: Color


@dataclass(frozen=True)
class Cylinder:
    """A cylinder given by its centre, axis, diameter and height."""

    coordinates: Vec3
    axis: Vec3
    diameter: float
    height: float
    color: Color


@dataclass
class Scene:
    """Every element read from a scene description.

    Single elements are None until a line declares them; a later
    declaration replaces an earlier one.
    """

    ambient: AmbientLight | None = None
    camera: Camera | None = None
    light: Light | None = None
    spheres: list[Sphere] = field(default_factory=list)
    planes: list[Plane] = field(default_factory=list)
    cylinders: list[Cylinder] = field(default_factory=list)


def _triple(text: str, kind: str) -> list[str]:
    parts = split(text, ",")
    if len(parts) < 3:
        raise SceneError(f"{kind} needs three comma-separated values: {text!r}")
    return parts[:3]


def parse_color(text: str) -> Color:
    """Parse ``"r,g,b"`` into a Color; extra components are ignored."""
    r, g, b = (parse_int(part) for part in _triple(text, "colour"))
    return Color(r, g, b)


def parse_point(text: str) -> Vec3:
    """Parse ``"x,y,z"`` into a Vec3; extra components are ignored."""
    x, y, z = (parse_double(part) for part in _triple(text, "point"))
    return Vec3(x, y, z)


def _fields(line: str, count: int) -> list[str]:
    parts = split(line, " ")
    if len(parts) < count + 1:
        raise SceneError(f"element needs {count} fields: {line!r}")
    return parts[1 : count + 1]


def read_scene(path: str | os.PathLike[str]) -> list[str]:
    """Return the non-empty lines of the scene file at ``path``.

    Raises SceneError when the file cannot be opened.
    """
    try:
        content = "".join(read_lines(path))
    except OSError as exc:
        raise SceneError(OPEN_ERROR) from exc
    return split(content, "\n")


def parse_scene(lines: Iterable[str]) -> Scene:
    """Build a Scene from element lines, keeping their order."""
    scene = Scene()
    for line in lines:
        kind = line[:1]
        if kind == "A":
            ratio, color = _fields(line, 2)
            scene.ambient = AmbientLight(parse_double(ratio), parse_color(color))
        elif kind == "C":
            position, orientation, fov = _fields(line, 3)
            scene.camera = Camera(
                parse_point(position), parse_point(orientation), parse_int(fov)
            )
        elif kind == "L":
            position, ratio, color = _fields(line, 3)
            scene.light = Light(
                parse_point(position), parse_double(ratio), parse_color(color)
            )
        elif kind == "s":
            position, diameter, color = _fields(line, 3)
            scene.spheres.append(
                Sphere(parse_point(position), parse_double(diameter),
                       parse_color(color))
            )
        elif kind == "p":
            position, normal, color = _fields(line, 3)
            scene.planes.append(
                Plane(parse_point(position), parse_point(normal),
                      parse_color(color))
            )
        elif kind == "c":
            position, axis, diameter, height, color = _fields(line, 5)
            scene.cylinders.append(
                Cylinder(
                    parse_point(position),
                    parse_point(axis),
                    parse_double(diameter),
                    parse_double(height),
                    parse_color(color),
                )
            )
    return scene


def load_scene(path: str | os.PathLike[str]) -> Scene:
    """Read and parse the scene file at ``path``."""
    return parse_scene(read_scene(path))