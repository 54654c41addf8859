# tests/test_cli.py

import pytest

from fadate.cli import main


def test_convert(capsys):
    assert main(["convert", "1400/01/01"]) == 0
    assert capsys.readouterr().out.strip() == "2021/03/21"


def test_convert_shorthand_and_reverse(capsys):
    assert main(["1403/12/30"]) == 0
    assert capsys.readouterr().out.strip() == "2025/03/20"
    assert main(["convert", "2025/03/21", "--from", "gregorian", "--to", "persian"]) == 0
    assert capsys.readouterr().out.strip() == "1404/01/01"


def test_parse(capsys):
    assert main(["parse", "1400/1/1 10:30 ب.ظ", "--format", "date_short_time"]) == 0
    out = capsys.readouterr().out
    assert "1400/01/01 10:30 ب.ظ" in out
    assert "2021-03-21 22:30:00" in out


def test_parse_list(capsys):
    assert main(["parse", "1400/01/01;1400/02/01", "--list"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert [ln.split()[0] for ln in lines] == ["1400/01/01", "1400/02/01"]


def test_parse_error_exit_code(capsys):
    assert main(["parse", "1400/13/01"]) == 1
    assert "error:" in capsys.readouterr().err


def test_normalize(capsys):
    assert main(["normalize", "1397/1/5"]) == 0
    assert capsys.readouterr().out.strip() == "1397/01/05"


def test_step(capsys):
    assert main(["step", "1400/12/15", "--offset", "6"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "1400/01/15"
    assert out[1].startswith("     ^^ ")


def test_month_grid(capsys):
    assert main(["month", "1400", "1"]) == 0
    out = capsys.readouterr().out
    assert "persian 1400/01" in out
    assert "03-21" in out
    assert "04-20" in out


def test_round_trip_diag(capsys):
    assert main(["diag", "round-trip", "--start-year", "1399", "--end-year", "1404"]) == 0
    assert "OK" in capsys.readouterr().out


def test_round_trip_diag_rejects_years_past_range():
    with pytest.raises(SystemExit):
        main(["diag", "round-trip", "--N", "10", "--end-year", "9378"])
