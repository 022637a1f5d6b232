"""Word completion from the buffer's own content."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional

from amanita.motions.models import Direction
from amanita.runtime import telemetry

_LOGGER = "amanita.completion"


@dataclass(slots=True)
class CompletionWords:
    """Bidirectional cycle over unique candidate words."""

    words: List[str] = field(default_factory=list)
    index: int = 0

    def __len__(self) -> int:
        return len(self.words)

    def next(self, direction: Direction) -> str:
        if not self.words:
            raise IndexError("no completion candidates")
        word = self.words[self.index]
        self.index = (self.index + direction.step) % len(self.words)
        return word


def prefix_start(content: str, position: int) -> int:
    """Offset just after the last non-alphanumeric character before ``position``."""

    for index in range(position - 1, -1, -1):
        if not content[index].isalnum():
            return index + 1
    return 0


def get_completion_matches(
    content: str, position: int, direction: Direction
) -> CompletionWords:
    """Collect words starting with the prefix before ``position``.

    Matches after the cursor come first, then matches before the prefix. Each
    direction deduplicates in its own scan order, so backward cycling is not
    a mirror of forward cycling.
    """

    start = prefix_start(content, position)
    prefix = content[start:position]
    pattern = re.compile(r"(\W|^)(" + re.escape(prefix) + r"\w*)")
    found = [
        match.group(2)
        for chunk in (content[position:], content[:start])
        for match in pattern.finditer(chunk)
        if match.group(2)
    ]

    if direction is Direction.FORWARD:
        words = list(dict.fromkeys(found))
        return CompletionWords(words=words, index=0)

    words = list(dict.fromkeys(reversed(found)))
    words.reverse()
    return CompletionWords(words=words, index=max(len(words) - 1, 0))


class CompletionEngine:
    """Holds the active completion session between keystrokes."""

    def __init__(self) -> None:
        self.session: Optional[CompletionWords] = None

    @property
    def active(self) -> bool:
        return self.session is not None

    def next_word(
        self, content: str, position: int, direction: Direction
    ) -> Optional[str]:
        if self.session is None:
            self.session = get_completion_matches(content, position, direction)
            telemetry.record_event(
                "completion.build",
                level="debug",
                data={
                    "direction": direction.value,
                    "candidates": len(self.session),
                },
                logger_name=_LOGGER,
            )
        if not self.session.words:
            return None
        return self.session.next(direction)

    def reset(self) -> None:
        self.session = None
