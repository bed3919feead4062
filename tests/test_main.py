import contextlib
import io
import os
import unittest
from unittest import mock

from src.ascii_cube.engine import BASE_FRAME_DELAY, CubeRenderer, RotationState
from src.ascii_cube.objects import cube_mesh
from src.ascii_cube.terminal import StreamSink, TerminalController
from src.main import RuntimeConfig, _emit_warnings, _run_loop, _setup_runtime, parse_arguments


class TtyStream(io.StringIO):
    def isatty(self) -> bool:
        return True


class ArgumentTests(unittest.TestCase):
    def test_defaults(self) -> None:
        args = parse_arguments([])
        self.assertEqual(args.speed, 1.0)
        self.assertEqual(args.frames, 0)

    def test_speed_flag(self) -> None:
        self.assertEqual(parse_arguments(["-s", "2.5"]).speed, 2.5)
        self.assertEqual(parse_arguments(["--speed", "0.5"]).speed, 0.5)

    def test_invalid_speed_exits(self) -> None:
        for value in ("fast", "0", "-1", "inf"):
            with contextlib.redirect_stderr(io.StringIO()):
                with self.assertRaises(SystemExit):
                    parse_arguments(["-s", value])

    def test_frame_count(self) -> None:
        self.assertEqual(parse_arguments(["--frames", "5"]).frames, 5)
        for value in ("-1", "many"):
            with contextlib.redirect_stderr(io.StringIO()):
                with self.assertRaises(SystemExit):
                    parse_arguments(["--frames", value])


class RuntimeTests(unittest.TestCase):
    def test_pipe_output_uses_stream_sink(self) -> None:
        config = _setup_runtime(parse_arguments(["-s", "2"]), stream=io.StringIO())
        self.assertIsInstance(config.sink, StreamSink)
        self.assertAlmostEqual(config.frame_delay, BASE_FRAME_DELAY / 2)
        self.assertEqual((config.width, config.height), (20, 20))
        self.assertEqual(len(config.warnings), 1)

    def test_small_terminal_warns(self) -> None:
        with mock.patch(
            "src.ascii_cube.terminal.shutil.get_terminal_size",
            return_value=os.terminal_size((10, 5)),
        ):
            config = _setup_runtime(parse_arguments([]), stream=TtyStream())
        self.assertIsInstance(config.sink, TerminalController)
        self.assertEqual(config.warnings, ["Terminal is 10x5, smaller than the 20x20 frame"])

    def test_large_terminal_has_no_warnings(self) -> None:
        with mock.patch(
            "src.ascii_cube.terminal.shutil.get_terminal_size",
            return_value=os.terminal_size((80, 24)),
        ):
            config = _setup_runtime(parse_arguments([]), stream=TtyStream())
        self.assertIsInstance(config.sink, TerminalController)
        self.assertEqual(config.warnings, [])

    def test_warnings_written_to_stderr(self) -> None:
        stderr = io.StringIO()
        with contextlib.redirect_stderr(stderr):
            _emit_warnings(["first", "second"])
            _emit_warnings([])
        self.assertEqual(stderr.getvalue(), "[ascii-cube] first\n[ascii-cube] second\n")

    def test_bounded_run(self) -> None:
        stream = io.StringIO()
        config = RuntimeConfig(
            sink=StreamSink(stream),
            warnings=[],
            speed=1.0,
            frame_delay=0.0,
            frames=3,
            width=20,
            height=20,
        )
        state = _run_loop(config)

        expected = RotationState().advance().advance().advance()
        self.assertAlmostEqual(state.angle_x, expected.angle_x)
        self.assertAlmostEqual(state.angle_y, expected.angle_y)

        frames = stream.getvalue().split("\n\n")
        self.assertEqual(frames[-1], "")
        self.assertEqual(len(frames), 4)
        self.assertEqual(frames[0], CubeRenderer(cube_mesh()).render_text(RotationState()))


if __name__ == "__main__":
    unittest.main()
