# test_main.py
import pytest

from fakes import FakeService, make_pages
from drive_file_lister import main as cli


@pytest.fixture
def service(monkeypatch):
    svc = FakeService(make_pages(50, 50))
    monkeypatch.setattr(cli, "build_service", lambda token_file, scopes: svc)
    monkeypatch.delenv("DRIVE_LOG_JSON", raising=False)
    return svc


def test_cli_uses_config_defaults(service, tmp_path, capsys):
    assert cli.main(["--config", str(tmp_path / "none.yaml"), "--csv"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Id|Name|Type|Size|Created"
    assert len(lines) == 31
    assert service.calls[0]["pageSize"] == 30
    assert service.calls[0]["q"] == "trashed = false and 'me' in owners"


def test_cli_flags_override_config(service, tmp_path, capsys):
    argv = ["--config", str(tmp_path / "none.yaml"), "-m", "0", "-q", "name contains 'file'",
            "--order", "name", "--csv", "--delimiter", ",", "--extended", "--no-header"]
    assert cli.main(argv) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 100
    assert len(lines[0].split(",")) == 7
    assert service.calls[0]["orderBy"] == "name"


def test_cli_reports_missing_token(tmp_path, capsys, monkeypatch):
    monkeypatch.delenv("DRIVE_TOKEN_FILE", raising=False)
    code = cli.main(["--config", str(tmp_path / "none.yaml"), "--token-file", str(tmp_path / "nope.json")])
    assert code == 1
    assert "token_file missing" in capsys.readouterr().err


@pytest.mark.parametrize("delimiter", ["||", ""])
def test_cli_rejects_bad_delimiter_flag(service, tmp_path, capsys, delimiter):
    code = cli.main(["--config", str(tmp_path / "none.yaml"), "--csv", "--delimiter", delimiter])
    assert code == 1
    captured = capsys.readouterr()
    assert "delimiter must be a single character" in captured.err
    assert captured.out == ""
    assert service.calls == []


def test_cli_rejects_empty_delimiter_from_yaml(service, tmp_path, capsys):
    path = tmp_path / "config.yaml"
    path.write_text("list:\n  delimiter: ''\n")
    assert cli.main(["--config", str(path), "--csv"]) == 1
    assert "delimiter must be a single character" in capsys.readouterr().err


def test_cli_coerces_quoted_integers_from_yaml(service, tmp_path, capsys):
    path = tmp_path / "config.yaml"
    path.write_text("list:\n  max_files: \"5\"\n  name_width: \"8\"\n")
    assert cli.main(["--config", str(path), "--csv", "--no-header"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 5
    assert lines[0].split("|")[1] == "file0..."


def test_cli_rejects_non_integer_max_from_yaml(service, tmp_path, capsys):
    path = tmp_path / "config.yaml"
    path.write_text("list:\n  max_files: lots\n")
    assert cli.main(["--config", str(path)]) == 1
    assert "list.max_files must be an integer" in capsys.readouterr().err
