from strongpass import cli
from strongpass.errors import GenerationExhausted


def test_generate_prints_passwords(monkeypatch, capsys, tmp_path):
    monkeypatch.setenv("STRONGPASS_CONFIG", str(tmp_path / "config.json"))
    assert cli.main(["generate", "--copies", "3"]) == 0
    out = capsys.readouterr().out
    assert out.count("Password #") == 3


def test_generate_analyze(monkeypatch, capsys, tmp_path):
    monkeypatch.setenv("STRONGPASS_CONFIG", str(tmp_path / "config.json"))
    assert cli.main(["generate", "--analyze"]) == 0
    out = capsys.readouterr().out
    assert "Uppercase" in out
    assert "Weak patterns" in out


def test_generate_failure_exit_code(monkeypatch, capsys, tmp_path):
    monkeypatch.setenv("STRONGPASS_CONFIG", str(tmp_path / "config.json"))

    def exhausted():
        raise GenerationExhausted(20)

    monkeypatch.setattr(cli, "generate", exhausted)
    assert cli.main(["generate"]) == 1
    assert "Failed to generate" in capsys.readouterr().out


def test_score_shows_suggestions(monkeypatch, capsys, tmp_path):
    monkeypatch.setenv("STRONGPASS_CONFIG", str(tmp_path / "config.json"))
    assert cli.main(["score", "aaaaaaaa"]) == 0
    out = capsys.readouterr().out
    assert "Score: 3 / 8" in out
    assert "Suggestions" in out


def test_generate_with_bad_configured_copies(monkeypatch, capsys, tmp_path):
    p = tmp_path / "config.json"
    p.write_text('{"default_copies": "two"}', encoding="utf-8")
    monkeypatch.setenv("STRONGPASS_CONFIG", str(p))
    assert cli.main(["generate"]) == 0
    assert capsys.readouterr().out.count("Password #") == 1
