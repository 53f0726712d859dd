import pytest

from brokerage_calculator.main import main


def test_prints_total(capsys):
    assert main(["100", "110", "10", "EQ_I", "NSE"]) == 0
    assert capsys.readouterr().out.strip() == "1.14"


def test_prints_breakdown(capsys):
    assert main(["100", "100", "1", "EQ_D", "NSE", "--breakdown"]) == 0

    out = capsys.readouterr().out
    assert "DP charges" in out
    assert "₹15.93" in out
    assert "₹16.16" in out


def test_unsupported_exchange_exit_code(capsys):
    assert main(["100", "110", "10", "FUT", "BSE"]) == 2
    assert capsys.readouterr().out == ""


def test_unknown_segment_exit_code():
    assert main(["100", "110", "10", "EQUITY", "NSE"]) == 2


def test_missing_arguments():
    with pytest.raises(SystemExit) as exc_info:
        main(["100", "110"])
    assert exc_info.value.code == 2


def test_negative_quantity():
    with pytest.raises(SystemExit):
        main(["100", "110", "-5", "EQ_I", "NSE"])


@pytest.mark.parametrize("argv", [
    ["inf", "110", "10", "EQ_I", "NSE"],
    ["100", "nan", "10", "EQ_I", "NSE"],
    ["100", "110", "inf", "EQ_I", "NSE"],
])
def test_non_finite_values(argv, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)

    assert exc_info.value.code == 2
    assert "finite" in capsys.readouterr().err
