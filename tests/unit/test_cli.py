import pytest
from click.testing import CliRunner

from qrab.cli import main as cli_main
from qrab.renderer import Block, layout, render_block, render_qr
from qrab.renderer.qr import Theme

TEXT = "docs: https://example.com, code: https://python.org. again https://example.com"


@pytest.fixture
def runner():
    return CliRunner(env={"QRAB_LIGHT_THEME": None, "QRAB_WIDTH": None})


def invoke(runner, args, text):
    return runner.invoke(cli_main.cli, args, input=text)


def test_all_mode_prints_grid(runner):
    result = invoke(runner, ["--all", "--width", "200"], TEXT)
    assert result.exit_code == 0, result.stderr

    expected = layout(
        [render_block("https://example.com"), render_block("https://python.org")], 200
    )
    assert result.stdout == expected + "\n"
    assert "Found 2 URL(s):" in result.stderr
    assert "  - https://example.com" in result.stderr
    assert "  - https://python.org" in result.stderr


def test_all_mode_wraps_on_narrow_terminal(runner):
    result = invoke(runner, ["-a", "-w", "10"], TEXT)
    assert result.exit_code == 0, result.stderr

    rows = result.stdout.rstrip("\n").split("\n\n")
    assert len(rows) == 2
    assert rows[0] == render_qr("https://example.com")
    assert rows[1] == render_qr("https://python.org")


def test_all_mode_width_from_environment(runner):
    result = runner.invoke(cli_main.cli, ["--all"], input=TEXT, env={"QRAB_WIDTH": "10"})
    assert result.exit_code == 0, result.stderr
    assert len(result.stdout.rstrip("\n").split("\n\n")) == 2


def test_single_url_prints_code(runner):
    result = invoke(runner, [], "only https://example.com here")
    assert result.exit_code == 0, result.stderr
    assert result.stdout == render_qr("https://example.com") + "\n"
    assert "QR code for: https://example.com" in result.stderr


@pytest.mark.parametrize("flag", ["--light-theme", "--invert"])
def test_light_theme(runner, flag):
    result = invoke(runner, [flag], "only https://example.com here")
    assert result.exit_code == 0, result.stderr
    assert result.stdout == render_qr("https://example.com", Theme.LIGHT) + "\n"


def test_default_mode_uses_selection(runner, monkeypatch):
    seen = []

    def choose_second(urls):
        seen.append(list(urls))
        return urls[1]

    monkeypatch.setattr(cli_main, "select_url", choose_second)
    result = invoke(runner, [], TEXT)
    assert result.exit_code == 0, result.stderr
    assert seen == [["https://example.com", "https://python.org"]]
    assert result.stdout == render_qr("https://python.org") + "\n"
    assert Block.from_text(result.stdout).is_rectangular


def test_conflicting_theme_flags(runner):
    result = invoke(runner, ["--light-theme", "--invert"], TEXT)
    assert result.exit_code == 2
    assert "cannot be used together" in result.stderr


def test_empty_input(runner):
    result = invoke(runner, [], "   \n")
    assert result.exit_code == 1
    assert "No input received on stdin" in result.stderr
    assert result.stdout == ""


def test_no_urls(runner):
    result = invoke(runner, ["--all"], "nothing to see, mail me at user@example.com")
    assert result.exit_code == 1
    assert "No URLs found in the input text" in result.stderr


def test_encoding_failure_aborts_all_mode(runner):
    text = "https://example.com https://example.com/" + "a" * 4000
    result = invoke(runner, ["--all"], text)
    assert result.exit_code == 1
    assert "Failed to encode QR code" in result.stderr
    assert result.stdout == ""


def test_invalid_width_environment(runner):
    result = runner.invoke(cli_main.cli, [], input=TEXT, env={"QRAB_WIDTH": "wide"})
    assert result.exit_code == 1
    assert "QRAB_WIDTH must be an integer" in result.stderr


def test_usage_when_stdin_is_terminal(runner, monkeypatch):
    monkeypatch.setattr(cli_main, "_stdin_is_terminal", lambda: True)
    result = invoke(runner, [], None)
    assert result.exit_code == 1
    assert "Usage: echo 'text with URLs' | qrab [OPTIONS]" in result.stderr


def test_version(runner):
    result = invoke(runner, ["--version"], None)
    assert result.exit_code == 0
    assert "0.1.0" in result.stdout


def test_piped_input_read_without_deprecated_click_api(runner, recwarn):
    result = invoke(runner, [], "only https://example.com here")
    assert result.exit_code == 0, result.stderr
    assert not [w for w in recwarn if "get_text_stream" in str(w.message)]
