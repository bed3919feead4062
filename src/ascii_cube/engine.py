"""Core math utilities and rendering engine for the ASCII wireframe cube."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, List, Protocol, Sequence, Tuple

PROJECTION_FACTOR = 5.0
CHAR_RAMP = ".,-~:;=*!#$@"
DEPTH_EPSILON = 1e-6
ANGLE_STEP_X = 0.05
ANGLE_STEP_Y = 0.03
BASE_FRAME_DELAY = 0.030
FRAME_WIDTH = 20
FRAME_HEIGHT = 20

FrameBuffer = List[List[str]]


@dataclass(frozen=True, slots=True)
class Vec3:
    """Lightweight immutable 3D point."""

    x: float
    y: float
    z: float


Edge = Tuple[int, int]


class WireframeMesh:
    """Vertices plus the index pairs connecting them."""

    def __init__(self, vertices: Sequence[Vec3], edges: Sequence[Edge]):
        self._vertices: Tuple[Vec3, ...] = tuple(vertices)
        self._edges: Tuple[Edge, ...] = tuple((int(a), int(b)) for a, b in edges)
        if not self._vertices:
            raise ValueError("WireframeMesh requires at least one vertex")
        if not self._edges:
            raise ValueError("WireframeMesh requires at least one edge")
        count = len(self._vertices)
        for start, end in self._edges:
            if not (0 <= start < count and 0 <= end < count):
                raise ValueError(f"Edge ({start}, {end}) references a vertex outside [0, {count})")

    @property
    def vertices(self) -> Tuple[Vec3, ...]:
        return self._vertices

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return self._edges

    def __iter__(self):
        return iter(self._edges)


@dataclass(frozen=True, slots=True)
class ProjectedPoint:
    """Screen cell plus the depth it was projected from."""

    x: int
    y: int
    z: float


@dataclass(frozen=True, slots=True)
class RotationState:
    """Accumulated rotation angles in radians."""

    angle_x: float = 0.0
    angle_y: float = 0.0

    def advance(self, speed: float = 1.0) -> "RotationState":
        if not math.isfinite(speed) or speed <= 0.0:
            raise ValueError(f"Speed must be a positive number, got {speed!r}")
        return RotationState(
            self.angle_x + ANGLE_STEP_X * speed,
            self.angle_y + ANGLE_STEP_Y * speed,
        )


class RenderSink(Protocol):
    def draw(self, frame: str) -> None:
        ...


def rotate_point(point: Vec3, angle_x: float, angle_y: float) -> Vec3:
    """Rotate about X, then about Y using the already rotated z."""

    cos_x, sin_x = math.cos(angle_x), math.sin(angle_x)
    y = point.y * cos_x - point.z * sin_x
    z = point.y * sin_x + point.z * cos_x

    cos_y, sin_y = math.cos(angle_y), math.sin(angle_y)
    x = point.x * cos_y + z * sin_y
    z = -point.x * sin_y + z * cos_y
    return Vec3(x, y, z)


def project_point(point: Vec3, width: int, height: int) -> ProjectedPoint:
    return ProjectedPoint(
        int(point.x * PROJECTION_FACTOR + width // 2),
        int(point.y * PROJECTION_FACTOR + height // 2),
        point.z,
    )


def shade_for_depth(z: float, min_z: float, max_z: float) -> str:
    """Map a depth inside ``[min_z, max_z]`` onto ``CHAR_RAMP``."""

    span = max_z - min_z
    if not span > 0.0:
        return CHAR_RAMP[0]
    last = len(CHAR_RAMP) - 1
    normalized = (z - min_z) / span
    idx = int(normalized * last + 0.5)
    idx = max(0, min(last, idx))
    return CHAR_RAMP[idx]


def line_points(p1: ProjectedPoint, p2: ProjectedPoint) -> Iterator[Tuple[int, int, float]]:
    """Yield ``(x, y, t)`` Bresenham samples from ``p1`` to ``p2`` inclusive.

    ``t`` advances once per sample, reaching 1.0 on the final cell.
    """

    dx = abs(p2.x - p1.x)
    dy = abs(p2.y - p1.y)
    sx = 1 if p1.x < p2.x else -1
    sy = 1 if p1.y < p2.y else -1
    err = dx - dy

    x, y = p1.x, p1.y
    total_steps = max(dx, dy)
    current_step = 0

    while True:
        t = current_step / total_steps if total_steps else 0.0
        yield x, y, t

        if x == p2.x and y == p2.y:
            break

        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy

        current_step += 1


def draw_line(
    buffer: FrameBuffer,
    p1: ProjectedPoint,
    p2: ProjectedPoint,
    min_z: float,
    max_z: float,
) -> None:
    """Rasterize a depth-shaded line into ``buffer``, clipping to its bounds."""

    height = len(buffer)
    width = len(buffer[0]) if height else 0
    dz = p2.z - p1.z

    for x, y, t in line_points(p1, p2):
        if 0 <= x < width and 0 <= y < height:
            buffer[y][x] = shade_for_depth(p1.z + t * dz, min_z, max_z)


def depth_range(points: Sequence[Vec3]) -> Tuple[float, float]:
    min_z = min(point.z for point in points)
    max_z = max(point.z for point in points)
    if max_z == min_z:
        max_z += DEPTH_EPSILON
    return min_z, max_z


class CubeRenderer:
    """Software renderer producing depth-shaded ASCII frames of a wireframe mesh."""

    def __init__(
        self,
        mesh: WireframeMesh,
        width: int = FRAME_WIDTH,
        height: int = FRAME_HEIGHT,
    ) -> None:
        if width < 1 or height < 1:
            raise ValueError("CubeRenderer requires width and height >= 1")
        self.width = width
        self.height = height
        self.mesh = mesh

    def blank_frame(self) -> FrameBuffer:
        return [[" " for _ in range(self.width)] for _ in range(self.height)]

    def render(self, angle_x: float, angle_y: float) -> FrameBuffer:
        frame = self.blank_frame()
        rotated = [rotate_point(vertex, angle_x, angle_y) for vertex in self.mesh.vertices]
        min_z, max_z = depth_range(rotated)

        for start, end in self.mesh:
            p1 = project_point(rotated[start], self.width, self.height)
            p2 = project_point(rotated[end], self.width, self.height)
            draw_line(frame, p1, p2, min_z, max_z)
        return frame

    def render_text(self, state: RotationState) -> str:
        return self.compose_frame(self.render(state.angle_x, state.angle_y))

    def step(self, state: RotationState, sink: RenderSink, speed: float = 1.0) -> RotationState:
        """Draw the frame for ``state`` into ``sink`` and return the next state."""

        sink.draw(self.render_text(state))
        return state.advance(speed)

    @staticmethod
    def compose_frame(frame: Sequence[Sequence[str]]) -> str:
        return "\n".join("".join(row) for row in frame)
