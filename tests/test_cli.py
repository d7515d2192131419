import json

from typer.testing import CliRunner

from banner_cli.main import app

runner = CliRunner()


def test_cli_help():
    result = runner.invoke(app, ["insert", "--help"])
    assert result.exit_code == 0
    assert "Insert a banner into a file" in result.stdout


def test_cli_line():
    result = runner.invoke(app, ["line", "python", "--column", "4"])
    assert result.exit_code == 0
    assert result.stdout == "    ## " + "-" * 73 + "\n"


def test_cli_line_json():
    result = runner.invoke(app, ["line", "css", "--text", " Title ", "--json"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["mode"] == "line"
    assert data["text"] == "Title"
    assert data["banner"].startswith("/* --- Title -")
    assert data["banner"].endswith(" */")
    assert len(data["banner"]) == 80


def test_cli_block():
    result = runner.invoke(app, ["block", "css", "--column", "2", "--text", "hello"])
    assert result.exit_code == 0
    assert result.stdout.startswith("  /*\n  * hello\n  */\n\n  /* ---")


def test_cli_unknown_language():
    result = runner.invoke(app, ["line", "klingon"])
    assert result.exit_code == 1
    assert "klingon" in result.output


def test_cli_describe():
    result = runner.invoke(app, ["describe", "python"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["single_line_start"] == "##"
    assert data["multi_line_middle"] == "#"
    assert data["multi_line_end"] == ""


def test_cli_languages():
    result = runner.invoke(app, ["languages"])
    assert result.exit_code == 0
    assert "python" in result.stdout
    assert "<!-- -->" in result.stdout


def test_cli_insert_single(tmp_path):
    file_path = tmp_path / "module.py"
    file_path.write_text("import os\n  Helpers\n", encoding="utf-8")

    result = runner.invoke(app, ["insert", str(file_path), "--line", "2"])
    assert result.exit_code == 0
    lines = file_path.read_text(encoding="utf-8").split("\n")
    assert lines[0] == "import os"
    assert lines[1] == "  ## --- Helpers " + "-" * 63
    assert len(lines[1]) == 80


def test_cli_insert_multi_dry_run(tmp_path):
    file_path = tmp_path / "style.css"
    file_path.write_text("\n", encoding="utf-8")

    result = runner.invoke(app, ["insert", str(file_path), "--line", "1", "--multi", "--dry-run"])
    assert result.exit_code == 0
    assert result.stdout.startswith("/*\n* \n*/\n\n/* ")
    assert file_path.read_text(encoding="utf-8") == "\n"


def test_cli_insert_unknown_extension(tmp_path):
    file_path = tmp_path / "data.unknownext"
    file_path.write_text("text\n", encoding="utf-8")
    result = runner.invoke(app, ["insert", str(file_path), "--line", "1"])
    assert result.exit_code == 1

    result = runner.invoke(app, ["insert", str(file_path), "--line", "1", "--language", "klingon"])
    assert result.exit_code == 1
    assert "klingon" in result.output
    assert file_path.read_text(encoding="utf-8") == "text\n"


def test_cli_insert_with_config(tmp_path):
    config_path = tmp_path / ".banner.toml"
    config_path.write_text('[tool.banner]\nwidth = 40\n\n[tool.banner.languages]\nklingon = { line = "%" }\n')
    file_path = tmp_path / "notes.txt"
    file_path.write_text("", encoding="utf-8")

    result = runner.invoke(
        app,
        ["insert", str(file_path), "--line", "1", "--language", "klingon", "--config", str(config_path)],
    )
    assert result.exit_code == 0
    assert file_path.read_text(encoding="utf-8") == "%% " + "-" * 37


def test_cli_insert_keeps_crlf(tmp_path):
    file_path = tmp_path / "module.py"
    file_path.write_bytes(b"import os\r\n  Helpers\r\nx = 1\r\n")

    result = runner.invoke(app, ["insert", str(file_path), "--line", "2"])
    assert result.exit_code == 0
    banner = b"  ## --- Helpers " + b"-" * 63
    assert file_path.read_bytes() == b"import os\r\n" + banner + b"\r\nx = 1\r\n"


def test_cli_insert_with_text(tmp_path):
    file_path = tmp_path / "main.go"
    file_path.write_text("package main\n\n", encoding="utf-8")

    result = runner.invoke(app, ["insert", str(file_path), "--line", "2", "--text", "Types"])
    assert result.exit_code == 0
    lines = file_path.read_text(encoding="utf-8").split("\n")
    assert lines[1] == "// --- Types " + "-" * 67


def test_cli_insert_selection(tmp_path):
    file_path = tmp_path / "app.js"
    file_path.write_text("Hello world\n", encoding="utf-8")

    result = runner.invoke(app, ["insert", str(file_path), "--line", "1", "--select-to", "5"])
    assert result.exit_code == 0
    assert file_path.read_text(encoding="utf-8") == "// --- Hello " + "-" * 67 + "\n"
