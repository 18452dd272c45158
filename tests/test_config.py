from tedit.config import DEFAULT_HELP_MESSAGE, EditorSettings


def test_defaults() -> None:
    settings = EditorSettings()

    assert settings.status_timeout_s == 300.0
    assert settings.escape_timeout_ms == 50
    assert settings.help_message == DEFAULT_HELP_MESSAGE


def test_from_env_reads_overrides() -> None:
    settings = EditorSettings.from_env(
        {
            "TEDIT_STATUS_TIMEOUT": "2.5",
            "TEDIT_ESCAPE_TIMEOUT_MS": "120",
            "TEDIT_HELP": "custom help",
        }
    )

    assert settings.status_timeout_s == 2.5
    assert settings.escape_timeout_ms == 120
    assert settings.help_message == "custom help"


def test_from_env_ignores_invalid_values() -> None:
    settings = EditorSettings.from_env(
        {"TEDIT_STATUS_TIMEOUT": "soon", "TEDIT_ESCAPE_TIMEOUT_MS": "-3"}
    )

    assert settings == EditorSettings()
