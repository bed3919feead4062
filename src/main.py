"""Entry point for the rotating ASCII cube."""

from __future__ import annotations

import argparse
import math
import sys
import time
from dataclasses import dataclass
from typing import Optional, Sequence, TextIO, Union

from .ascii_cube.engine import (
    BASE_FRAME_DELAY,
    FRAME_HEIGHT,
    FRAME_WIDTH,
    CubeRenderer,
    RotationState,
)
from .ascii_cube.objects import cube_mesh
from .ascii_cube.terminal import StreamSink, TerminalController

Sink = Union[TerminalController, StreamSink]


def _positive_float(value: str) -> float:
    try:
        speed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid speed value: {value!r}") from exc
    if not math.isfinite(speed) or speed <= 0.0:
        raise argparse.ArgumentTypeError(f"speed must be a positive number, got {value!r}")
    return speed


def _frame_count(value: str) -> int:
    try:
        frames = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid frame count: {value!r}") from exc
    if frames < 0:
        raise argparse.ArgumentTypeError(f"frame count must not be negative, got {value!r}")
    return frames


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Depth-shaded rotating ASCII cube")
    parser.add_argument(
        "-s",
        "--speed",
        type=_positive_float,
        default=1.0,
        help="Multiplier for rotation speed and frame rate (default: 1)",
    )
    parser.add_argument(
        "--frames",
        type=_frame_count,
        default=0,
        help="Run for a fixed number of frames (0 = infinite)",
    )
    return parser.parse_args(argv)


@dataclass
class RuntimeConfig:
    sink: Sink
    warnings: list[str]
    speed: float
    frame_delay: float
    frames: int
    width: int
    height: int


def _setup_runtime(args: argparse.Namespace, stream: Optional[TextIO] = None) -> RuntimeConfig:
    warnings: list[str] = []
    stream = stream if stream is not None else sys.stdout

    sink: Sink
    if stream.isatty():
        controller = TerminalController(stream=stream)
        columns, lines = controller.size_tuple()
        if columns < FRAME_WIDTH or lines < FRAME_HEIGHT:
            warnings.append(
                f"Terminal is {columns}x{lines}, smaller than the {FRAME_WIDTH}x{FRAME_HEIGHT} frame"
            )
        sink = controller
    else:
        warnings.append("Output is not a terminal; frames are written sequentially")
        sink = StreamSink(stream)

    return RuntimeConfig(
        sink=sink,
        warnings=warnings,
        speed=args.speed,
        frame_delay=BASE_FRAME_DELAY / args.speed,
        frames=args.frames,
        width=FRAME_WIDTH,
        height=FRAME_HEIGHT,
    )


def _emit_warnings(warnings: Sequence[str]) -> None:
    if not warnings:
        return
    for warning in warnings:
        sys.stderr.write(f"[ascii-cube] {warning}\n")
    sys.stderr.flush()


def _run_loop(config: RuntimeConfig) -> RotationState:
    renderer = CubeRenderer(cube_mesh(), config.width, config.height)
    state = RotationState()
    frame_counter = 0

    with config.sink as sink:
        try:
            while True:
                state = renderer.step(state, sink, config.speed)

                frame_counter += 1
                if config.frames and frame_counter >= config.frames:
                    break

                time.sleep(config.frame_delay)
        except KeyboardInterrupt:  # pragma: no cover - interactive loop
            sink.restore()
            sys.stdout.write("\nInterrupted. Bye!\n")
            sys.stdout.flush()
    return state


def run(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_arguments(argv)
    config = _setup_runtime(args)
    _emit_warnings(config.warnings)
    _run_loop(config)


def main() -> None:
    run()


if __name__ == "__main__":
    main()
