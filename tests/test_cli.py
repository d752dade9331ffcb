from unittest.mock import patch

from typer.testing import CliRunner

from google_oauth_token.cli import app

runner = CliRunner()


def test_endpoints_defaults():
    result = runner.invoke(app, ["endpoints"])

    assert result.exit_code == 0
    assert "https://accounts.google.com/o/oauth2/v2/auth" in result.output
    assert "https://www.googleapis.com/oauth2/v4/token" in result.output
    assert "https://www.googleapis.com/oauth2/v3/userinfo" in result.output


def test_endpoints_with_version():
    result = runner.invoke(app, ["endpoints", "--userinfo-url-version", "v1"])

    assert result.exit_code == 0
    assert "https://www.googleapis.com/oauth2/v1/userinfo" in result.output
    assert "https://accounts.google.com/o/oauth2/v2/auth" in result.output


def test_run_starts_uvicorn():
    with patch("google_oauth_token.cli.uvicorn.run") as run:
        result = runner.invoke(app, ["run", "--port", "9000"])

    assert result.exit_code == 0
    run.assert_called_once_with(
        "google_oauth_token.main:app", host="0.0.0.0", port=9000, reload=False
    )
