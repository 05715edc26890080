"""Tests for the command-line demo."""

from __future__ import annotations

import logging

from layered.__main__ import main


def test_main_prints_demo_user(capsys):
    assert main() == 0

    out = capsys.readouterr().out
    assert "User(name=Name(name='user_a')" in out
    assert "email=Email(email='user_a@example.com')" in out
    assert "create_time=" in out


def test_main_logs_insert(caplog):
    with caplog.at_level(logging.INFO, logger="layered.main"):
        main()
    assert "Inserted demo user user_a" in caplog.text
