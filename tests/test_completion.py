from __future__ import annotations

import pytest

from amanita.completion import (
    CompletionEngine,
    CompletionWords,
    get_completion_matches,
    prefix_start,
)
from amanita.motions import Direction


def test_prefix_start_stops_at_non_alphanumeric() -> None:
    assert prefix_start("foo ba", 6) == 4
    assert prefix_start("abc", 3) == 0
    assert prefix_start("a, ", 3) == 3


def test_forward_matches_deduplicate_in_scan_order() -> None:
    matches = get_completion_matches("con, con con", 10, Direction.FORWARD)

    assert matches.words == ["con"]
    assert matches.index == 0


def test_matches_after_cursor_come_first() -> None:
    matches = get_completion_matches("al alpha alpine", 2, Direction.FORWARD)

    assert matches.words == ["alpha", "alpine"]


def test_matches_wrap_around_to_text_before_prefix() -> None:
    content = "con,\n\ncont,cconten content; c_onte' ca"

    matches = get_completion_matches(content, 12, Direction.FORWARD)

    assert matches.words == ["conten", "content", "c_onte", "ca", "con", "cont"]
    assert matches.next(Direction.FORWARD) == "conten"


def test_empty_prefix_matches_every_word() -> None:
    matches = get_completion_matches("a, b c d e ", 11, Direction.FORWARD)

    assert matches.words == ["a", "b", "c", "d", "e"]


def test_backward_matches_start_at_last_candidate() -> None:
    matches = get_completion_matches("ab ac ab a", 10, Direction.BACKWARD)

    assert matches.words == ["ac", "ab"]
    assert matches.index == 1
    assert matches.next(Direction.BACKWARD) == "ab"
    assert matches.next(Direction.BACKWARD) == "ac"


def test_no_candidates() -> None:
    matches = get_completion_matches("xyz q", 5, Direction.FORWARD)

    assert len(matches) == 0
    with pytest.raises(IndexError):
        matches.next(Direction.FORWARD)


def test_words_cycle_wraps_around() -> None:
    words = CompletionWords(words=["a", "b"])

    assert [words.next(Direction.FORWARD) for _ in range(3)] == ["a", "b", "a"]


def test_engine_builds_session_once_until_reset() -> None:
    engine = CompletionEngine()
    content = "alpha alpine al"

    assert engine.next_word(content, 15, Direction.FORWARD) == "alpha"
    assert engine.active
    assert engine.next_word("unrelated", 9, Direction.FORWARD) == "alpine"

    engine.reset()
    assert not engine.active
    assert engine.next_word("xyz q", 5, Direction.FORWARD) is None
