"""Command templates with ``{name}`` placeholders.

A template such as ``nix-env -q '.*{}.*'`` is split into the literal chunks
around its placeholders and the placeholder names. The picker shows templates
verbatim; interpolation is available to callers that want to fill them in.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence, Tuple

from cmdpick.errors import TemplateParseError

# literal chunk, then an optional "{name}"
_CHUNK_RE = re.compile(r"([^{]*)(\{([^}]*?)\})?")


@dataclass(frozen=True)
class Template:
    original: str
    chunks: Tuple[str, ...]
    names: Tuple[str, ...]

    def __str__(self) -> str:
        return self.original

    @property
    def has_placeholders(self) -> bool:
        return bool(self.names)

    def interpolate(self, values: Sequence[str]) -> str:
        """Fill the placeholders in order; missing values are empty, extras ignored."""
        out = [self.chunks[0]]
        for i, chunk in enumerate(self.chunks[1:]):
            out.append(values[i] if i < len(values) else "")
            out.append(chunk)
        return "".join(out)


def parse(s: str) -> Template:
    """Parse ``s`` into a Template.

    An unterminated ``{`` is kept as literal text, so every string parses.
    """
    if not isinstance(s, str):
        raise TemplateParseError(f"template must be a string, got {type(s).__name__}")

    chunks = []
    names = []
    current = ""
    pos = 0
    while True:
        m = _CHUNK_RE.match(s, pos)
        if m is None:
            raise TemplateParseError(f"cannot parse template at offset {pos}: {s!r}")
        current += m.group(1)
        pos = m.end()
        if m.group(2) is None:
            # no closing brace left: the remainder is literal
            current += s[pos:]
            chunks.append(current)
            break
        chunks.append(current)
        names.append(m.group(3))
        current = ""

    return Template(original=s, chunks=tuple(chunks), names=tuple(names))
