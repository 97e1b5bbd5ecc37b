import json
from unittest.mock import patch

import pytest

import app
from config import Config
from mattermost_api import IdentityError


@pytest.fixture(autouse=True)
def no_env_credentials(monkeypatch):
    monkeypatch.setattr(Config, "MATTERMOST_URL", None)
    monkeypatch.setattr(Config, "MATTERMOST_TOKEN", None)


@pytest.fixture
def manifest_file(tmp_path):
    path = tmp_path / "emoji.json"
    path.write_text(json.dumps({"party": "https://cdn.example.com/p.gif"}), encoding="utf-8")
    return path


@pytest.fixture
def run_import():
    with patch("app.run_import") as run_import, patch("app.configure_tracing"):
        yield run_import


@pytest.mark.parametrize(
    "argv, missing",
    [
        (["-t", "secret", "-f", "emoji.json"], "-server/-s"),
        (["-s", "https://mm.example.com", "-f", "emoji.json"], "-token/-t"),
        (["-s", "https://mm.example.com", "-t", "secret"], "-file/-f"),
    ],
)
def test_missing_required_flag_aborts(argv, missing, run_import, capsys) -> None:
    assert app.main(argv) == 1

    err = capsys.readouterr().err
    assert f"❌ Error: {missing} flag is required" in err
    assert "usage:" in err
    run_import.assert_not_called()


def test_credentials_from_environment(monkeypatch, manifest_file, run_import) -> None:
    monkeypatch.setattr(Config, "MATTERMOST_URL", "https://mm.example.com/")
    monkeypatch.setattr(Config, "MATTERMOST_TOKEN", "env-token")

    assert app.main(["-f", str(manifest_file)]) == 0

    settings, manifest = run_import.call_args[0]
    assert settings.server_url == "https://mm.example.com"
    assert settings.token == "env-token"
    assert manifest == {"party": "https://cdn.example.com/p.gif"}


def test_long_flags_and_tuning(manifest_file, run_import) -> None:
    argv = [
        "--server", "https://mm.example.com",
        "--token", "secret",
        "--file", str(manifest_file),
        "--delay-ms", "500",
        "--timeout", "10",
    ]

    assert app.main(argv) == 0

    settings = run_import.call_args[0][0]
    assert settings.delay_seconds == 0.5
    assert settings.timeout == 10
    assert settings.manifest_path == manifest_file


def test_malformed_manifest_aborts_before_network(tmp_path, run_import, capsys) -> None:
    path = tmp_path / "emoji.json"
    path.write_text("{not json", encoding="utf-8")

    assert app.main(["-s", "https://mm.example.com", "-t", "secret", "-f", str(path)]) == 1

    assert "Error parsing JSON" in capsys.readouterr().err
    run_import.assert_not_called()


def test_unreadable_manifest_aborts(tmp_path, run_import) -> None:
    argv = ["-s", "https://mm.example.com", "-t", "secret", "-f", str(tmp_path / "missing.json")]

    assert app.main(argv) == 1
    run_import.assert_not_called()


def test_identity_failure_is_fatal(manifest_file, run_import, capsys) -> None:
    run_import.side_effect = IdentityError("Invalid or expired session", status_code=401)

    argv = ["-s", "https://mm.example.com", "-t", "bad", "-f", str(manifest_file)]
    assert app.main(argv) == 1

    assert "❌ Error getting user ID: status 401" in capsys.readouterr().err


def test_single_dash_long_flags(manifest_file, run_import) -> None:
    argv = ["-server", "https://mm.example.com", "-token", "secret", "-file", str(manifest_file)]

    assert app.main(argv) == 0

    settings = run_import.call_args[0][0]
    assert settings.server_url == "https://mm.example.com"
    assert settings.token == "secret"
    assert settings.manifest_path == manifest_file


@pytest.mark.parametrize(
    "extra",
    [
        ["--delay-ms", "-5"],
        ["--timeout", "0"],
        ["--timeout", "-1.5"],
    ],
)
def test_invalid_tuning_values_abort_before_network(extra, manifest_file, run_import, capsys) -> None:
    argv = ["-s", "https://mm.example.com", "-t", "secret", "-f", str(manifest_file)] + extra

    with pytest.raises(SystemExit) as exc_info:
        app.main(argv)

    assert exc_info.value.code == 2
    assert "must" in capsys.readouterr().err
    run_import.assert_not_called()


def test_zero_delay_is_allowed(manifest_file, run_import) -> None:
    argv = ["-s", "https://mm.example.com", "-t", "secret", "-f", str(manifest_file), "--delay-ms", "0"]

    assert app.main(argv) == 0
    assert run_import.call_args[0][0].delay_seconds == 0


def test_configure_tracing_sets_datadog_tags(monkeypatch) -> None:
    monkeypatch.setattr(Config, "DD_ENV", "staging")
    monkeypatch.setattr(Config, "DD_VERSION", "2.1.0")

    with patch("app.patch") as ddtrace_patch, patch("app.tracer") as tracer:
        app.configure_tracing()

    ddtrace_patch.assert_called_once_with(requests=True)
    tracer.set_tags.assert_called_once_with({
        "env": "staging",
        "version": "2.1.0",
        "service": Config.DD_SERVICE,
    })


def test_fatal_error_is_printed_once(manifest_file, run_import, capsys) -> None:
    run_import.side_effect = IdentityError("expired", status_code=401)

    app.main(["-s", "https://mm.example.com", "-t", "bad", "-f", str(manifest_file)])

    assert capsys.readouterr().err.count("expired") == 1
