from __future__ import annotations

import pytest

from scripts.sq1_state import main


def test_cli_prints_scramble_state(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--scramble", "/"]) == 0
    assert capsys.readouterr().out == "011233998bba|455677ddcffe\n"


def test_cli_alg_mode_prints_inverse_with_expansion(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--alg", "(3,0)", "--expanded"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Expanded: 3,0", "677011233455|998bbaddcffe"]


def test_cli_hex_mode_with_separator(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--hex", "011233455677998bbaddcffe", "--separator", "/"]) == 0
    assert capsys.readouterr().out == "011233455677/998bbaddcffe\n"


def test_cli_reports_errors(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--scramble", "bpj"]) == 2
    err = capsys.readouterr().err
    assert err.startswith("error: ")
    assert "bpj" in err


def test_cli_requires_a_source() -> None:
    with pytest.raises(SystemExit):
        main([])
