"""Vertex and fragment shading stages."""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from softraster.color import LinearColor
from softraster.matrix import Matrix3x3, Matrix4x4
from softraster.vertex import Vertex2D, Vertex3D


def vertex_shader_2d(vertices: Iterable[Vertex2D], matrix: Matrix3x3) -> list[Vertex2D]:
    """Apply the final transform matrix to every vertex position."""
    return [replace(vertex, position=matrix * vertex.position) for vertex in vertices]


def fragment_shader_2d(color: LinearColor, color_param: LinearColor) -> LinearColor:
    """Modulate a pixel colour by a colour parameter."""
    return color * color_param


def vertex_shader_3d(vertices: Iterable[Vertex3D], matrix: Matrix4x4) -> list[Vertex3D]:
    """Apply the final transform matrix to every homogeneous vertex position."""
    return [replace(vertex, position=matrix * vertex.position) for vertex in vertices]


def fragment_shader_3d(color: LinearColor, color_param: LinearColor) -> LinearColor:
    """Modulate a pixel colour by a colour parameter."""
    return color * color_param