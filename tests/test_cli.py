from taskrepeat.__main__ import main


def test_cli_prints_next_date(capsys) -> None:
    assert main(["--now", "20240229", "20240229", "y"]) == 0
    assert capsys.readouterr().out.strip() == "20250301"


def test_cli_reports_rule_error(capsys) -> None:
    assert main(["--now", "20240101", "20240101", "x 5"]) == 1
    err = capsys.readouterr().err
    assert "unsupported_rule" in err


def test_cli_reports_bad_now(capsys) -> None:
    assert main(["--now", "2024-01-01", "20240101", "d 1"]) == 1
    assert "format" in capsys.readouterr().err
