from __future__ import annotations

import pytest

from amanita.runtime import telemetry


def test_config_and_preset_are_exclusive() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=telemetry.tl.Config(), preset="development")


def test_unknown_preset_is_rejected() -> None:
    try:
        with pytest.raises(ValueError):
            telemetry.configure(preset="chatty")
    finally:
        telemetry.configure()


def test_loggers_are_cached_per_name() -> None:
    first = telemetry.get_logger("amanita.tests")

    assert telemetry.get_logger("amanita.tests") is first


def test_record_event_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        telemetry.record_event("tests.bogus", level="bogus")


def test_span_yields_handle_and_reraises() -> None:
    with pytest.raises(RuntimeError):
        with telemetry.span(
            "tests::boom", logger_name="amanita.tests", metadata={"case": 1}
        ) as handle:
            assert handle.span_name == "tests::boom"
            assert handle.metadata == {"case": "1"}
            raise RuntimeError("boom")


def test_span_tracks_component_by_name() -> None:
    with telemetry.span(
        "tests::component", logger_name="amanita.tests", component=True
    ) as handle:
        handle.add_metadata("extra", [1, 2])

    assert handle.component_name == "tests::component"
    assert handle.metadata["extra"] == "[1, 2]"
