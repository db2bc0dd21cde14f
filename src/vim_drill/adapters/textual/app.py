"""Executable Textual app that runs a motion drill over a sample snippet."""

from __future__ import annotations

import argparse
import random
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when the demo is run
    from rich.text import Text
    from textual import events
    from textual.app import App, ComposeResult
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use vim_drill.adapters.textual.app"
    ) from exc

from vim_drill.buffer import BufferMirror, Position
from vim_drill.runtime.settings import DrillSettings
from vim_drill.session import EditingSession, Exercise, ExerciseTracker

from .controller import TextualDrillAdapter, TextualUIHooks

SAMPLE_SNIPPET = (
    "func main() {",
    '    fmt.Println("Hello")',
    "    x := 42",
    "    y := x + 1",
    "    fmt.Println(x, y)",
    "    return",
    "}",
)

CURSOR_STYLE = "reverse"
TARGET_STYLE = "bold black on green"


def render_buffer(mirror: BufferMirror, target: Optional[Position] = None) -> Text:
    """Draw the buffer with the cursor in reverse video and the target in green."""

    text = Text()
    for row, line in enumerate(mirror.lines):
        if row:
            text.append("\n")
        # One spare cell so an end-of-line cursor stays visible.
        for col, ch in enumerate(line + " "):
            here = Position(row, col)
            if here == mirror.cursor:
                text.append(ch, style=CURSOR_STYLE)
            elif here == target:
                text.append(ch, style=TARGET_STYLE)
            else:
                text.append(ch)
    return text


def progress_line(tracker: ExerciseTracker) -> str:
    if tracker.completed:
        counts = ", ".join(str(n) for n in tracker.target_keystrokes)
        return f"Done! keystrokes per target: {counts}  (enter to replay)"
    total = tracker.exercise.targets
    return f"target {tracker.targets_hit + 1}/{total}  keys {tracker.keystrokes}"


class DrillApp(App[None]):
    """Buffer view, a mode/status line and a progress line for one drill."""

    CSS = """
	#drill-buffer {
		height: 1fr;
		border: heavy $primary;
		padding: 0 2;
	}

	#drill-status, #drill-progress {
		height: 1;
		padding: 0 1;
	}

	#drill-progress {
		color: $success;
	}
	"""

    BINDINGS = [("ctrl+q", "quit", "Quit")]

    def __init__(
        self,
        *,
        settings: Optional[DrillSettings] = None,
        targets: int = 5,
        seed: Optional[int] = None,
    ) -> None:
        super().__init__()
        self.session = EditingSession(settings=settings)
        self.tracker = ExerciseTracker(
            self.session,
            Exercise(
                lines=SAMPLE_SNIPPET,
                targets=targets,
                instruction="Move the cursor onto the green cell.",
            ),
            rng=random.Random(seed),
        )
        self.adapter: Optional[TextualDrillAdapter] = None
        self._mirror: Optional[BufferMirror] = None

    def compose(self) -> ComposeResult:
        yield Header()
        yield Static(id="drill-buffer")
        yield Static(id="drill-status")
        yield Static(id="drill-progress")
        yield Footer()

    def on_mount(self) -> None:
        self.title = "vim-drill"
        self.sub_title = self.tracker.exercise.instruction
        self.adapter = TextualDrillAdapter(
            self.session,
            TextualUIHooks(
                update_buffer=self._show_buffer,
                update_status=self._show_status,
            ),
        )
        self.tracker.start()
        # The first target exists only after the reset render.
        self._show_buffer(self.session.mirror())

    def on_key(self, event: events.Key) -> None:
        if self.adapter is None or event.key == "ctrl+q":
            return
        event.stop()
        if self.tracker.completed:
            if event.key == "enter":
                self.tracker.restart()
                self._show_buffer(self.session.mirror())
        else:
            self.adapter.handle_textual_key(event.key, character=event.character)
        self._show_progress()

    def _show_buffer(self, mirror: BufferMirror) -> None:
        self._mirror = mirror
        self.query_one("#drill-buffer", Static).update(
            render_buffer(mirror, self.tracker.target)
        )
        self._show_progress()

    def _show_status(self, status: str) -> None:
        count = self._mirror.attributes.get("count") if self._mirror else None
        if count:
            status = f"{status}  [{count}]"
        self.query_one("#drill-status", Static).update(status)

    def _show_progress(self) -> None:
        self.query_one("#drill-progress", Static).update(progress_line(self.tracker))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vim-drill", description="Practice vi motions on a code snippet."
    )
    parser.add_argument(
        "--targets", type=int, default=5, help="targets to reach (default: 5)"
    )
    parser.add_argument(
        "--min-distance",
        type=int,
        default=None,
        help="minimum cursor-to-target distance (default: 3)",
    )
    parser.add_argument("--seed", type=int, help="seed for reproducible targets")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    settings = DrillSettings.from_env()
    if args.min_distance is not None:
        settings = DrillSettings(
            max_count=settings.max_count, target_min_distance=args.min_distance
        )
    DrillApp(settings=settings, targets=args.targets, seed=args.seed).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
