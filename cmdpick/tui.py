"""The interactive picker, run as an inline textual app under the shell prompt.

textual draws on stderr and restores the terminal when the app exits, so
stdout stays free for the chosen command.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Rule, Static

from cmdpick.command import Commands
from cmdpick.editor import EditorState
from cmdpick.errors import CmdpickError, TerminalInitError, TerminalIOError
from cmdpick.keys import parse_key
from cmdpick.picker import Action, Picker
from cmdpick.screen import command_block, keywords_line, prompt_line

log = logging.getLogger(__name__)


class PickerTUI(App[Optional[str]]):
    CSS = """
    Screen:inline {
        height: auto;
        border: none;
    }
    Rule.-horizontal {
        margin: 0;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "cancel", "Cancel", show=False, priority=True),
    ]

    ENABLE_COMMAND_PALETTE = False
    INLINE_PADDING = 0

    def __init__(self, commands: Commands, prompt: str = "> "):
        super().__init__(ansi_color=True)
        self.state = EditorState(prompt=prompt)
        self.picker = Picker(commands, self.state)
        self.error: Optional[Exception] = None

    def compose(self) -> ComposeResult:
        yield Static(id="prompt", markup=False)
        yield Rule()
        yield Static(id="keywords", markup=False)
        yield Rule()
        yield Static(id="commands", markup=False)

    def on_mount(self) -> None:
        self.redraw()

    # ------------------------------ drawing ------------------------------

    def redraw(self) -> None:
        self.state.term_size = (self.size.width, self.size.height)
        self.query_one("#prompt", Static).update(prompt_line(self.state))
        self.query_one("#keywords", Static).update(keywords_line(self.state))
        self.query_one("#commands", Static).update(command_block(self.state))

    # ------------------------------ keys ------------------------------

    def on_key(self, event: events.Key) -> None:
        # every key belongs to the picker, including tab
        event.stop()
        event.prevent_default()
        key = parse_key(event.key, event.character)
        try:
            outcome = self.picker.process_key(key)
            log.debug("key %s -> %s", key, outcome.action.value)
            if outcome.action is Action.CONTINUE:
                self.redraw()
                return
        except Exception as e:
            # re-raised by run_picker once the terminal is restored
            self.error = e
            self.exit(return_code=1)
            return
        self.exit(outcome.command)

    def action_cancel(self) -> None:
        self.exit(None)


def run_picker(commands: Commands, prompt: str = "> ") -> Optional[str]:
    """Run an interactive session on the controlling terminal.

    Returns the chosen command text, or None when the user cancels.
    """
    stdin = sys.__stdin__
    if stdin is None or not stdin.isatty():
        raise TerminalInitError("standard input is not a terminal")
    tui = PickerTUI(commands, prompt)
    chosen = tui.run(inline=True, mouse=False)
    if tui.error is not None:
        if isinstance(tui.error, CmdpickError):
            raise tui.error
        raise TerminalIOError(f"picker session failed: {tui.error}") from tui.error
    if tui.return_code:
        raise TerminalIOError("picker session failed")
    return chosen
