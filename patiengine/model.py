"""Mesh and material data, and a loader for Wavefront OBJ/MTL files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Sequence, TypeVar

from patiengine.matrix import Matrix4x4, make_identity
from patiengine.vector import Vector2, Vector3, Vector4

_T = TypeVar("_T")


class ObjFormatError(ValueError):
    """Raised when an OBJ file holds a line this loader cannot read."""


@dataclass(frozen=True)
class VertexData:
    """One vertex as the vertex shader sees it."""

    position: Vector4 = field(default_factory=Vector4)
    tex_coord: Vector2 = field(default_factory=Vector2)
    normal: Vector3 = field(default_factory=Vector3)


@dataclass
class MaterialData:
    """Material settings read from an MTL file."""

    texture_file_path: str = ""


@dataclass
class ModelData:
    """Triangle-list vertices and the material they use."""

    vertices: list[VertexData] = field(default_factory=list)
    material: MaterialData = field(default_factory=MaterialData)


@dataclass
class Material:
    """Per-draw material constants."""

    color: Vector4 = field(default_factory=lambda: Vector4(1.0, 1.0, 1.0, 1.0))
    enable_lighting: int = 0
    uv_transform: Matrix4x4 = field(default_factory=make_identity)


@dataclass
class DirectionalLight:
    """A light shining from one direction with a colour and an intensity."""

    color: Vector4 = field(default_factory=lambda: Vector4(1.0, 1.0, 1.0, 1.0))
    direction: Vector3 = field(default_factory=lambda: Vector3(0.0, -1.0, 0.0))
    intensity: float = 1.0


def _lines(path: str) -> Iterator[tuple[int, list[str]]]:
    with Path(path).open(encoding="utf-8") as stream:
        for number, line in enumerate(stream, start=1):
            yield number, line.split()


def _floats(tokens: list[str], count: int, line_number: int) -> list[float]:
    if len(tokens) < count:
        raise ObjFormatError(f"line {line_number}: expected {count} numbers")
    try:
        return [float(token) for token in tokens[:count]]
    except ValueError as error:
        raise ObjFormatError(f"line {line_number}: {error}") from None


def _lookup(items: Sequence[_T], index_text: str, kind: str, line_number: int) -> _T:
    try:
        index = int(index_text)
    except ValueError:
        raise ObjFormatError(
            f"line {line_number}: bad {kind} index {index_text!r}"
        ) from None
    if not 1 <= index <= len(items):
        raise ObjFormatError(f"line {line_number}: {kind} index {index} out of range")
    return items[index - 1]


def load_material_template_file(directory_path: str, filename: str) -> MaterialData:
    """Read an MTL file; the last ``map_Kd`` entry names the texture."""
    material = MaterialData()
    for _, tokens in _lines(f"{directory_path}/{filename}"):
        if tokens and tokens[0] == "map_Kd" and len(tokens) > 1:
            material.texture_file_path = f"{directory_path}/{tokens[1]}"
    return material


def load_obj_file(directory_path: str, filename: str) -> ModelData:
    """Read a triangulated OBJ file into a right-to-left-handed vertex list.

    The X axis of positions and normals is mirrored, V texture coordinates are
    flipped, and each triangle's winding is reversed to match.
    """
    model = ModelData()
    positions: list[Vector4] = []
    normals: list[Vector3] = []
    texcoords: list[Vector2] = []

    for line_number, tokens in _lines(f"{directory_path}/{filename}"):
        if not tokens:
            continue
        identifier, arguments = tokens[0], tokens[1:]
        if identifier == "v":
            x, y, z = _floats(arguments, 3, line_number)
            positions.append(Vector4(-x, y, z, 1.0))
        elif identifier == "vt":
            u, v = _floats(arguments, 2, line_number)
            texcoords.append(Vector2(u, 1.0 - v))
        elif identifier == "vn":
            x, y, z = _floats(arguments, 3, line_number)
            normals.append(Vector3(-x, y, z))
        elif identifier == "f":
            if len(arguments) < 3:
                raise ObjFormatError(f"line {line_number}: a face needs three vertices")
            triangle = []
            for definition in arguments[:3]:
                parts = definition.split("/")
                if len(parts) < 3:
                    raise ObjFormatError(
                        f"line {line_number}: vertex {definition!r} needs v/vt/vn indices"
                    )
                triangle.append(
                    VertexData(
                        _lookup(positions, parts[0], "position", line_number),
                        _lookup(texcoords, parts[1], "texcoord", line_number),
                        _lookup(normals, parts[2], "normal", line_number),
                    )
                )
            model.vertices.extend(reversed(triangle))
        elif identifier == "mtllib":
            if not arguments:
                raise ObjFormatError(f"line {line_number}: mtllib needs a file name")
            model.material = load_material_template_file(directory_path, arguments[0])
    return model