"""
로컬 유닛 테스트 - 명령행 도구
"""

import io
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "..", "src"))
from g60.cli import main


def test_encode_text(capsys):
    assert main(["encode", "Hello, world!"]) == 0
    assert capsys.readouterr().out == "Gt4CGFiHehzRzjCF16\n"


def test_encode_stdin(capsys, monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"Hello, world!")))
    assert main(["encode", "--stdin"]) == 0
    assert capsys.readouterr().out == "Gt4CGFiHehzRzjCF16\n"


def test_encode_without_input(capsys):
    assert main(["encode"]) == 2
    assert "오류" in capsys.readouterr().err


def test_decode_text(capsys):
    assert main(["decode", "Gt4CGFiHehzRzjCF16", "--text"]) == 0
    assert capsys.readouterr().out == "Hello, world!\n"


def test_decode_binary(capsysbinary):
    assert main(["decode", "zinqfBXiMKF"]) == 0
    assert capsysbinary.readouterr().out == b"\xff" * 8


def test_decode_not_text(capsys):
    assert main(["decode", "zinqfBXiMKF", "--text"]) == 1
    assert "오류" in capsys.readouterr().err


@pytest.mark.parametrize("encoded", ["Hello, world!", "0000", "zz"])
def test_decode_error(capsys, encoded):
    assert main(["decode", encoded]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("오류: ")


def test_verify(capsys):
    assert main(["verify", "Gt4CGFiHehzRzjCF16"]) == 0
    assert "canonical: True" in capsys.readouterr().out
    assert main(["verify", "Gt4CGFiHehzR"]) == 1


def test_random(capsys):
    assert main(["random", "8"]) == 0
    assert len(capsys.readouterr().out.strip()) == 11
    assert main(["random", "-1"]) == 2


def test_missing_command():
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 2
