"""Rich renderables for the editor state.

Layout, top to bottom::

    > valid invalid input
    ────────────────────────
    keyword suggestions
    ────────────────────────
    template description
    ...
"""

from __future__ import annotations

from typing import Iterable

from rich.style import Style
from rich.text import Text

from cmdpick.editor import EditorState

VALID_STYLE = Style(color="black", bgcolor="green")
INVALID_STYLE = Style(color="black", bgcolor="red")
SELECTED_KEYWORD_STYLE = Style(color="black", bgcolor="yellow")
DESCRIPTION_STYLE = Style(color="green")
SELECTED_COMMAND_STYLE = Style(bold=True)

# rows above the command list: prompt, rule, suggestions, rule
HEADER_ROWS = 4


def prompt_line(state: EditorState) -> Text:
    line = Text(state.prompt)
    for vk in state.validated_keywords:
        line.append(vk.text, VALID_STYLE if vk.is_valid else INVALID_STYLE)
        line.append(" ")
    line.append(state.input)
    return line


def keywords_line(state: EditorState) -> Text:
    line = Text(no_wrap=True, overflow="crop")
    if state.selected_keyword_index is None:
        return line
    for i, kw in enumerate(state.suggestion.keywords):
        if i:
            line.append(" ")
        line.append(kw, SELECTED_KEYWORD_STYLE if i == state.selected_keyword_index else None)
    return line


def command_lines(state: EditorState) -> Iterable[Text]:
    for i, cmd in enumerate(state.suggestion.commands):
        line = Text.assemble(cmd.cmd, " ", (cmd.some_description, DESCRIPTION_STYLE))
        if i == state.selected_command_index:
            line.stylize(SELECTED_COMMAND_STYLE)
        yield line


def command_block(state: EditorState) -> Text:
    """The command list, one per row, cut to the terminal size."""
    width, height = state.term_size
    rows = max(height - HEADER_ROWS, 0)
    lines = []
    for line in list(command_lines(state))[:rows]:
        line.truncate(width)
        lines.append(line)
    block = Text("\n").join(lines)
    block.no_wrap = True
    block.overflow = "crop"
    return block
