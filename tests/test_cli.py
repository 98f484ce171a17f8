# tests/test_cli.py

from orthocal.cli import main


def test_pascha_julian(capsys):
    assert main(["pascha", "2024"]) == 0
    assert "2024-04-22 (J)" in capsys.readouterr().out


def test_pascha_gregorian(capsys):
    assert main(["pascha", "2024", "--fmt", "G"]) == 0
    assert "2024-05-05 (G)" in capsys.readouterr().out


def test_day(capsys):
    assert main(["day", "2024", "5", "5", "--fmt", "G", "--tags"]) == 0
    out = capsys.readouterr().out
    assert "glas    : -1" in out
    assert "pasha" in out


def test_find(capsys):
    assert main(["find", "2024", "m1d6", "--fmt", "G"]) == 0
    assert capsys.readouterr().out.strip() == "2024-01-19"


def test_year(capsys):
    assert main(["year", "2024"]) == 0
    out = capsys.readouterr().out
    assert "OrthYear(2024" in out
    assert "22.04.2024 Вс " in out
    assert "apostol fast: 11 days" in out


def test_diagnostics(capsys):
    assert main(["pascha-table", "--start=2024", "--end=2024"]) == 0
    assert "2024-05-05" in capsys.readouterr().out
    assert main(["pretty-year", "2024", "--month=1"]) == 0
    assert "Январь 2024" in capsys.readouterr().out
    assert main(["diag", "round-trip", "--N=50"]) == 0
