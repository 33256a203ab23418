"""Mutable view-model of the picker: input line, keywords and selections."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from cmdpick.command import Command
from cmdpick.suggestion import Suggestion


@dataclass(frozen=True)
class ValidatedKeyword:
    """A word committed with space. Only valid ones narrow the command list."""

    text: str
    is_valid: bool

    @classmethod
    def valid(cls, text: str) -> "ValidatedKeyword":
        return cls(text, True)

    @classmethod
    def invalid(cls, text: str) -> "ValidatedKeyword":
        return cls(text, False)


def _first_or_none(items: list) -> Optional[int]:
    return 0 if items else None


def _rotate(index: Optional[int], size: int, step: int) -> Optional[int]:
    if index is None or size == 0:
        return index
    return (index + step) % size


class EditorState:
    def __init__(self, prompt: str = "> ", origin: Tuple[int, int] = (0, 0),
                 term_size: Tuple[int, int] = (80, 10)):
        self.x, self.y = origin
        self.prompt = prompt
        self.term_size = term_size
        self.current_line: List[str] = []
        self.validated_keywords: List[ValidatedKeyword] = []
        self.suggestion = Suggestion()
        self.selected_keyword_index: Optional[int] = None
        self.selected_command_index: Optional[int] = None

    # ------------------------------ input line ------------------------------

    @property
    def input(self) -> str:
        return "".join(self.current_line)

    def add(self, ch: str) -> None:
        self.current_line.append(ch)

    def remove_last_char(self) -> None:
        """Drop the last typed character, or the last keyword once the line is empty."""
        if self.current_line:
            self.current_line.pop()
        elif self.validated_keywords:
            self.validated_keywords.pop()

    def reset_input(self) -> str:
        """Clear the input line and return what it held."""
        line, self.current_line = self.current_line, []
        return "".join(line)

    # ------------------------------ keywords ------------------------------

    def add_validated_keyword(self, vk: ValidatedKeyword) -> None:
        self.validated_keywords.append(vk)

    def valid_keywords(self) -> List[str]:
        return [vk.text for vk in self.validated_keywords if vk.is_valid]

    def complete(self) -> None:
        """Commit the highlighted keyword suggestion, if there is one."""
        kw = self.selected_keyword()
        if kw is None:
            return
        self.validated_keywords.append(ValidatedKeyword.valid(kw))
        self.current_line = []

    # ------------------------------ suggestion ------------------------------

    def set_suggestion(self, suggestion: Suggestion) -> None:
        self.suggestion = suggestion
        self.selected_keyword_index = _first_or_none(suggestion.keywords)
        self.selected_command_index = _first_or_none(suggestion.commands)

    def next_suggestion(self) -> None:
        self.selected_keyword_index = _rotate(
            self.selected_keyword_index, len(self.suggestion.keywords), 1)

    def previous_suggestion(self) -> None:
        self.selected_keyword_index = _rotate(
            self.selected_keyword_index, len(self.suggestion.keywords), -1)

    def next_command(self) -> None:
        self.selected_command_index = _rotate(
            self.selected_command_index, len(self.suggestion.commands), 1)

    def previous_command(self) -> None:
        self.selected_command_index = _rotate(
            self.selected_command_index, len(self.suggestion.commands), -1)

    def selected_keyword(self) -> Optional[str]:
        if self.selected_keyword_index is None:
            return None
        return self.suggestion.keywords[self.selected_keyword_index]

    def selected_command(self) -> Optional[Command]:
        if self.selected_command_index is None:
            return None
        return self.suggestion.commands[self.selected_command_index]
