from pathlib import Path

from sitesnake import __main__ as cli


def test_cli_passes_options_to_run(monkeypatch, capsys, tmp_path):
    seen = {}

    def fake_run(difficulty, highscore_file, show_grid=True):
        seen.update(difficulty=difficulty, highscore_file=highscore_file, show_grid=show_grid)
        return 70

    monkeypatch.setattr(cli, "run", fake_run)
    cli.main(["--difficulty", "hard", "--no-grid", "--highscore-file", str(tmp_path / "hs.json")])

    assert seen == {"difficulty": "hard", "highscore_file": Path(tmp_path / "hs.json"), "show_grid": False}
    assert "Game Over! Score: 70" in capsys.readouterr().out


def test_cli_defaults(monkeypatch, capsys):
    seen = {}

    def fake_run(difficulty, highscore_file, show_grid=True):
        seen.update(difficulty=difficulty, show_grid=show_grid)
        return None

    monkeypatch.setattr(cli, "run", fake_run)
    cli.main([])

    assert seen == {"difficulty": "normal", "show_grid": True}
    assert capsys.readouterr().out == ""
