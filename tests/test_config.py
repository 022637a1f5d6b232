from __future__ import annotations

import pytest

from amanita.config import EditorSettings, TelemetrySettings
from amanita.editor import Editor
from amanita.view import Viewport


def test_telemetry_settings_defaults() -> None:
    settings = TelemetrySettings.from_env({})

    assert settings.logger_name == "amanita"
    assert settings.level == "INFO"
    assert settings.console is True
    assert settings.preset is None


def test_telemetry_settings_from_environment() -> None:
    settings = TelemetrySettings.from_env(
        {
            "AMANITA_LOG_LEVEL": "debug",
            "AMANITA_DISABLE_CONSOLE": "yes",
            "AMANITA_LOG_JSON": "1",
            "AMANITA_LOG_BUFFER_SIZE": "64",
            "AMANITA_LOG_PRESET": " Development ",
        }
    )

    assert settings.level == "DEBUG"
    assert settings.console is False
    assert settings.json is True
    assert settings.buffer_size == 64
    assert settings.preset == "development"


def test_integer_settings_must_parse() -> None:
    with pytest.raises(ValueError):
        EditorSettings.from_env({"AMANITA_VIEWPORT_WIDTH": "wide"})


def test_editor_settings_from_environment() -> None:
    settings = EditorSettings.from_env(
        {"AMANITA_VIEWPORT_WIDTH": "120", "AMANITA_ENCODING": "latin-1"}
    )

    assert settings.viewport_width == 120
    assert settings.viewport_height == 24
    assert settings.encoding == "latin-1"


def test_editor_settings_reject_empty_viewport() -> None:
    with pytest.raises(ValueError):
        EditorSettings(viewport_width=0)


def test_editor_uses_settings_viewport() -> None:
    editor = Editor(settings=EditorSettings(viewport_width=10, viewport_height=5))

    assert editor.viewport.viewport == Viewport(width=10, height=5)
    assert editor.storage.encoding == "utf-8"  # type: ignore[attr-defined]


def test_settings_read_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AMANITA_VIEWPORT_HEIGHT", "12")
    monkeypatch.setenv("AMANITA_NO_COLOR", "true")

    assert EditorSettings.from_env().viewport_height == 12
    assert TelemetrySettings.from_env().color is False
