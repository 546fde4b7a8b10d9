"""Terminal front end for the LG Gram settings."""

from __future__ import annotations

import asyncio
import sys
from dataclasses import dataclass

from .window import MainWindow

APP_ID = "com.github.LGGramSettings"
VERSION = "0.7.1"

_HELP = (
    "Commands: list, toggle N, set N VALUE, info, folder, about, help, quit"
)


@dataclass(frozen=True)
class AboutInfo:
    """What the about box shows."""

    application_name: str
    application_icon: str
    version: str


class Application:
    """Runs a main window and a command loop over text streams."""

    def __init__(
        self,
        application_id=APP_ID,
        *,
        input=None,
        output=None,
        window_factory=MainWindow,
    ):
        self.application_id = application_id
        self.input = input if input is not None else sys.stdin
        self.output = output if output is not None else sys.stdout
        self.active_window = None
        self._window_factory = window_factory
        self._running = False

    def about(self):
        """Return the about information."""
        return AboutInfo("LG Gram Settings", "lg-gram-settings", VERSION)

    def quit(self):
        """Stop the command loop."""
        self._running = False

    def _say(self, text):
        print(text, file=self.output)

    def _activate(self):
        if self.active_window is None:
            self.active_window = self._window_factory(self)
            self.active_window.on_toast = lambda message: self._say(f"! {message}")
            for message in self.active_window.toasts:
                self._say(f"! {message}")
        self._list()

    def _list(self):
        for number, widget in enumerate(self.active_window.widgets, start=1):
            state = widget.value if widget.sensitive else "unavailable"
            self._say(f"{number}. {widget.title}: {state}")

    def _widget(self, number):
        widgets = self.active_window.widgets
        index = int(number) - 1
        if index not in range(len(widgets)):
            raise ValueError(f"no feature {number}")
        return widgets[index]

    async def _handle(self, line):
        command, *args = line.split()
        window = self.active_window
        if command == "quit":
            self.quit()
        elif command == "help":
            self._say(_HELP)
        elif command == "list":
            self._list()
        elif command == "toggle" and len(args) == 1:
            widget = self._widget(args[0])
            if widget.sensitive:
                await widget.activate()
            self._say(f"{widget.title}: {widget.value}")
        elif command == "set" and len(args) == 2:
            widget = self._widget(args[0])
            if args[1] not in widget.values:
                raise ValueError(f"value must be one of {', '.join(widget.values)}")
            if widget.sensitive:
                await widget.select(widget.values.index(args[1]))
            self._say(f"{widget.title}: {widget.value}")
        elif command == "info":
            pairs = await window.show_system_info()
            for label, value in pairs or ():
                self._say(f"{label}: {value}")
        elif command == "folder":
            window.open_settings_folder()
        elif command == "about":
            info = self.about()
            self._say(f"{info.application_name} {info.version}")
        else:
            raise ValueError(f"unknown command: {line.strip()}")

    async def _loop(self):
        self._running = True
        while self._running:
            line = self.input.readline()
            if not line:
                break
            if not line.strip():
                continue
            try:
                await self._handle(line)
            except ValueError as error:
                self._say(f"error: {error}")

    def run(self, argv=None):
        """Show the window and process commands until quit or end of input."""
        self._activate()
        asyncio.run(self._loop())
        return 0


def main(argv=None):
    """Start the settings application and return its exit status."""
    return Application(APP_ID).run(sys.argv if argv is None else argv)