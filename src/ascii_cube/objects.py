"""Predefined wireframe helpers."""

from __future__ import annotations

from typing import List

from .engine import Edge, Vec3, WireframeMesh


def cube_mesh(size: float = 2.0) -> WireframeMesh:
    """Return a wireframe cube centred at the origin."""

    half = size / 2.0

    vertices = [
        Vec3(-half, -half, -half),  # 0: left-bottom-front
        Vec3(half, -half, -half),
        Vec3(half, half, -half),
        Vec3(-half, half, -half),
        Vec3(-half, -half, half),  # 4: left-bottom-back
        Vec3(half, -half, half),
        Vec3(half, half, half),
        Vec3(-half, half, half),
    ]

    edges: List[Edge] = [
        # Front ring
        (0, 1), (1, 2), (2, 3), (3, 0),
        # Back ring
        (4, 5), (5, 6), (6, 7), (7, 4),
        # Connectors
        (0, 4), (1, 5), (2, 6), (3, 7),
    ]

    return WireframeMesh(vertices, edges)
