"""The keystroke state machine that ties the editor and the suggestions together."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from cmdpick.command import Commands
from cmdpick.editor import EditorState, ValidatedKeyword
from cmdpick.keys import Key, KeyKind
from cmdpick.suggestion import suggest

log = logging.getLogger(__name__)

CANCEL_CHAR = "q"


class Action(Enum):
    CONTINUE = "continue"
    CANCEL = "cancel"
    SUCCESS = "success"


@dataclass(frozen=True)
class Outcome:
    action: Action
    command: Optional[str] = None

    @classmethod
    def success(cls, command: str) -> "Outcome":
        return cls(Action.SUCCESS, command)


CONTINUE = Outcome(Action.CONTINUE)
CANCEL = Outcome(Action.CANCEL)


class Picker:
    def __init__(self, commands: Commands, state: EditorState):
        self.commands = commands
        self.state = state
        self.filter_commands()

    def process_key(self, key: Key) -> Outcome:
        """Apply one key to the editor state and say whether the session goes on."""
        kind = key.kind
        if kind is KeyKind.CHAR and key.char == CANCEL_CHAR:
            return CANCEL
        if kind is KeyKind.ENTER:
            cmd = self.state.selected_command()
            return Outcome.success(cmd.cmd) if cmd is not None else CONTINUE

        if kind is KeyKind.TAB:
            self.auto_complete()
        elif kind is KeyKind.SPACE:
            self.validate_keyword()
        elif kind is KeyKind.CHAR:
            self.add_key(key.char)
        elif kind is KeyKind.BACKSPACE:
            self.remove_last_char()
        elif kind is KeyKind.RIGHT:
            self.state.next_suggestion()
        elif kind is KeyKind.LEFT:
            self.state.previous_suggestion()
        elif kind is KeyKind.DOWN:
            self.state.next_command()
        elif kind is KeyKind.UP:
            self.state.previous_command()
        return CONTINUE

    def auto_complete(self) -> None:
        self.state.complete()
        self.filter_commands()

    def add_key(self, ch: str) -> None:
        self.state.add(ch)
        self.filter_commands()

    def remove_last_char(self) -> None:
        self.state.remove_last_char()
        self.filter_commands()

    def validate_keyword(self) -> None:
        word = self.state.reset_input()
        if self.commands.has_keyword(word):
            vk = ValidatedKeyword.valid(word)
        else:
            vk = ValidatedKeyword.invalid(word)
        log.debug("keyword %r valid=%s", vk.text, vk.is_valid)
        self.state.add_validated_keyword(vk)

    def filter_commands(self) -> None:
        self.state.set_suggestion(
            suggest(self.commands, self.state.input, self.state.valid_keywords()))
