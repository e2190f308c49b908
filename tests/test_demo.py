"""Tests for the command-line demo."""

import pytest

from modfield.arith.finite import Finite
from modfield.config import PRIME
from modfield.demo import run_demo


def test_run_chain():
    record = run_demo.run_chain(Finite(PRIME + 2))
    assert [s.result for s in record.steps] == [Finite(9), Finite(4), Finite(24), Finite(8)]


def test_main_output(capsys):
    run_demo.main()
    out = capsys.readouterr().out
    assert "Finite(PRIME + 2) = 2" in out
    assert "24 /= 3 -> 8" in out
    assert "MISMATCH" not in out
    assert "DEMO COMPLETE" in out


def test_table_size_setting(monkeypatch, capsys):
    monkeypatch.setattr(run_demo, "DEMO_TABLE_SIZE", "4")
    run_demo.main()
    out = capsys.readouterr().out
    assert "Inverse table (n=4)" in out
    assert f"1/3 = {(PRIME + 1) // 3}  (ok)" in out
    assert "1/4 =" not in out


def test_bad_table_size_only_breaks_demo(monkeypatch):
    monkeypatch.setattr(run_demo, "DEMO_TABLE_SIZE", "ten")
    assert (Finite(2) + 7) == Finite(9)
    with pytest.raises(ValueError):
        run_demo.main()
