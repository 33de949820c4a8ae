"""Full-screen Pomodoro timer UI."""

from __future__ import annotations

import asyncio

from rich.align import Align
from rich.console import Console, Group
from rich.layout import Layout
from rich.live import Live
from rich.text import Text

from studymate.models.pomodoro import TimerMode
from studymate.services.pomodoro_service import PomodoroController

from .console import get_console, mode_style
from .formatters import format_clock

_MODE_KEYS = {"1": TimerMode.WORK, "2": TimerMode.BREAK, "3": TimerMode.LONG_BREAK}


class TimerDisplay:
    """Renders a PomodoroController and maps keys to its operations."""

    def __init__(self, controller: PomodoroController, console: Console | None = None):
        self.controller = controller
        self.console = console or get_console()
        self.last_notification: str | None = None

    def notify(self, title: str, body: str) -> None:
        """Notification sink; shows the latest message under the timer."""
        self.last_notification = f"{title}  {body}"

    def create_layout(self) -> Layout:
        """Create the timer layout with all components."""
        state = self.controller.state
        style = mode_style(state.mode)

        layout = Layout()
        layout.split_column(
            Layout(name="header", size=3),
            Layout(name="body"),
            Layout(name="footer", size=3),
        )

        title = state.mode.label
        if not state.is_running and state.mode != TimerMode.WORK_FINISHED:
            title += "  (paused)"
        layout["header"].update(
            Align.center(Text(f"🍅  {title}", style=style), vertical="middle")
        )
        layout["body"].update(Align.center(self._body(style), vertical="middle"))
        layout["footer"].update(Align.center(self._footer(), vertical="middle"))
        return layout

    def _body(self, style: str) -> Group:
        controller = self.controller
        state = controller.state
        components = [
            Text(format_clock(state.remaining_seconds), style=style, justify="center"),
            Text(""),
        ]

        total = controller.machine.duration_for(state.mode)
        if total > 0:
            pct = min(100, int((total - state.remaining_seconds) * 100 / total))
            bar_width = 40
            filled = bar_width * pct // 100
            components.append(
                Text("▓" * filled + "░" * (bar_width - filled) + f"  {pct}%", style="muted", justify="center")
            )
            components.append(Text(""))

        components.append(
            Text(
                f"Today's Focus: {controller.today_minutes} min   •   "
                f"Cycles Completed: {state.cycles_completed}",
                justify="center",
            )
        )
        if self.last_notification:
            components.append(Text(""))
            components.append(Text(self.last_notification, style="italic", justify="center"))
        return Group(*components)

    def _footer(self) -> Text:
        state = self.controller.state
        if state.mode == TimerMode.WORK_FINISHED:
            hints = "'b' start break  •  'r' reset  •  'q' quit"
        elif state.is_running:
            hints = "'p' pause  •  'r' reset  •  '1/2/3' work/break/long  •  'q' quit"
        else:
            hints = "'p' start  •  'r' reset  •  '1/2/3' work/break/long  •  'q' quit"
        return Text(hints, style="muted", justify="center")

    async def handle_key(self, key: str) -> bool:
        """Apply one keypress. Returns False when the user quits."""
        controller = self.controller
        if key == "q":
            return False
        if key in ("p", " "):
            if controller.state.mode == TimerMode.WORK_FINISHED:
                await controller.start_break()
            else:
                await controller.toggle()
        elif key == "b" and controller.state.mode == TimerMode.WORK_FINISHED:
            await controller.start_break()
        elif key == "r":
            await controller.reset()
        elif key in _MODE_KEYS:
            await controller.switch_mode(_MODE_KEYS[key])
        return True

    async def run(self, keyboard) -> None:
        """Drive the display until the user quits."""
        try:
            with Live(
                self.create_layout(),
                console=self.console,
                refresh_per_second=4,
                screen=True,
            ) as live:
                while True:
                    key = keyboard.get_key()
                    if key and not await self.handle_key(key):
                        return
                    live.update(self.create_layout())
                    await asyncio.sleep(0.1)
        finally:
            keyboard.stop()
