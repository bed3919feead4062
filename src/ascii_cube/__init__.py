"""Depth-shaded ASCII wireframe cube for the terminal."""

from .engine import (
    CHAR_RAMP,
    CubeRenderer,
    ProjectedPoint,
    RotationState,
    Vec3,
    WireframeMesh,
    draw_line,
    project_point,
    rotate_point,
)
from .objects import cube_mesh
from .terminal import StreamSink, TerminalController

__all__ = [
    "CHAR_RAMP",
    "CubeRenderer",
    "ProjectedPoint",
    "RotationState",
    "Vec3",
    "WireframeMesh",
    "draw_line",
    "project_point",
    "rotate_point",
    "cube_mesh",
    "StreamSink",
    "TerminalController",
]
