"""Tests for repo_collect.secrets covering the local secrets file and token lookup."""

import json

from repo_collect import secrets


def test_load_local_secrets_missing_file(tmp_path):
    assert secrets.load_local_secrets(tmp_path / "nope.json") == {}


def test_load_local_secrets_reads_dict(tmp_path):
    path = tmp_path / "local_secrets.json"
    path.write_text(json.dumps({"github_token": "abc"}), encoding="utf-8")
    assert secrets.load_local_secrets(path) == {"github_token": "abc"}


def test_load_local_secrets_ignores_bad_json(tmp_path, capsys):
    path = tmp_path / "local_secrets.json"
    path.write_text("{not json", encoding="utf-8")
    assert secrets.load_local_secrets(path) == {}
    assert "[warn]" in capsys.readouterr().err


def test_resolve_github_token_prefers_secrets(monkeypatch):
    monkeypatch.setenv("GITHUB_TOKEN", "from-env")
    assert secrets.resolve_github_token({"github_token": "from-file"}) == "from-file"
    assert secrets.resolve_github_token({}) == "from-env"
    monkeypatch.delenv("GITHUB_TOKEN")
    assert secrets.resolve_github_token({}) is None


def test_secrets_path_prefers_argument_then_env(tmp_path, monkeypatch):
    monkeypatch.setenv("LOCAL_SECRETS_FILE", str(tmp_path / "env.json"))
    assert secrets.secrets_path(tmp_path / "arg.json") == tmp_path / "arg.json"
    assert secrets.secrets_path() == tmp_path / "env.json"
    monkeypatch.delenv("LOCAL_SECRETS_FILE")
    assert secrets.secrets_path().name == secrets.DEFAULT_SECRETS_FILENAME
