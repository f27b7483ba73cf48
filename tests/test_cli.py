from click.testing import CliRunner

from favlink.cli.main import cli
from favlink.core.styles import build_css


def test_link():
    result = CliRunner().invoke(cli, ["link", "https://openai.com"])
    assert result.exit_code == 0
    assert 'src="https://icons.duckduckgo.com/ip3/openai.com.ico"' in result.output
    assert "/> openai.com</a>" in result.output


def test_link_with_size():
    result = CliRunner().invoke(cli, ["link", "https://a.com", "--text", "Click", "--size", "24"])
    assert result.exit_code == 0
    assert 'width="24" height="24"' in result.output


def test_link_without_host():
    result = CliRunner().invoke(cli, ["link", "example.com"])
    assert result.exit_code == 1
    assert "no host" in result.output


def test_css():
    assert CliRunner().invoke(cli, ["css"]).output.strip() == build_css(False)
    assert CliRunner().invoke(cli, ["css", "--editor"]).output.strip() == build_css(True)


def test_render(tmp_path):
    page = tmp_path / "post.html"
    page.write_text('<p>[favlink url="https://a.com"]</p>', encoding="utf-8")

    result = CliRunner().invoke(cli, ["render", str(page)])
    assert result.exit_code == 0
    assert "<title>post</title>" in result.output
    assert "favlink-style-inline-css" in result.output

    editor = CliRunner().invoke(cli, ["render", str(page), "--editor"])
    assert "favlink-editor-style-inline-css" in editor.output


def test_run_merges_config_and_options(tmp_path, monkeypatch):
    calls = {}

    def fake_run(app, **kwargs):
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setattr("uvicorn.run", fake_run)
    config_file = tmp_path / "favlink.config.py"
    config_file.write_text("PORT = 9001\nHOST = '0.0.0.0'\n", encoding="utf-8")
    content = tmp_path / "content"
    content.mkdir()

    result = CliRunner().invoke(
        cli,
        ["run", "--config", str(config_file), "--host", "127.0.0.2", "--content-dir", str(content)],
    )
    assert result.exit_code == 0, result.output
    assert calls["host"] == "127.0.0.2"
    assert calls["port"] == 9001
    assert calls["app"].content_dir == content
