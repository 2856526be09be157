#!/usr/bin/env python3
"""
Tests for the knights.py command line.
"""

import argparse
import io
import subprocess
import sys
import os
from contextlib import redirect_stderr, redirect_stdout

ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT_DIR)

import config
from knights import main, parse_leaper
from reports import InvalidInput
from solver import Leaper


def _run_main(argv, board_size='7'):
    """Run main() with fixed settings, returning (exit_code, stdout)."""
    saved = (config.BOARD_SIZE, config.DEBUG)
    config.BOARD_SIZE, config.DEBUG = board_size, False
    out = io.StringIO()
    code = 0
    try:
        with redirect_stdout(out), redirect_stderr(io.StringIO()):
            main(argv)
    except SystemExit as e:
        code = e.code
    finally:
        config.BOARD_SIZE, config.DEBUG = saved
    return code, out.getvalue()


def test_matrix_output():
    code, out = _run_main(['--size', '5'])
    assert code == 0
    assert out == (
        "\n  4   4   2   8 "
        "\n  4   2   4   4 "
        "\n  2   4  -1  -1 "
        "\n  8   4  -1   1 \n"
    ), f"Unexpected output: {out!r}"
    print("  PASS test_matrix_output")


def test_default_size_from_config():
    code, out = _run_main([], board_size='7')
    assert code == 0
    rows = [line for line in out.split('\n') if line]
    assert len(rows) == 6
    assert rows[0].split()[0] == '6', "Leaper(1, 1) takes 6 moves on 7x7"
    print("  PASS test_default_size_from_config")


def test_invalid_size_is_a_usage_error():
    for size in ('4', '26'):
        code, out = _run_main(['--size', size])
        assert code == 2, f"--size {size}: exit code {code}"
        assert out == ''
    print("  PASS test_invalid_size_is_a_usage_error")


def test_invalid_configured_size_propagates():
    try:
        _run_main([], board_size='30')
    except InvalidInput:
        pass
    else:
        raise AssertionError("A bad configured board size should raise InvalidInput")
    print("  PASS test_invalid_configured_size_propagates")


def test_malformed_configured_size_propagates():
    try:
        _run_main([], board_size='seven')
    except ValueError as e:
        assert 'seven' in str(e)
    else:
        raise AssertionError("A non-integer configured board size should raise ValueError")
    # An explicit --size does not read the configured default
    code, out = _run_main(['--size', '5'], board_size='seven')
    assert code == 0 and out.startswith("\n  4   4   2   8 ")
    print("  PASS test_malformed_configured_size_propagates")


def test_malformed_env_does_not_break_library():
    """reports stays importable and usable whatever KNIGHTS_BOARD_SIZE holds."""
    env = dict(os.environ, KNIGHTS_BOARD_SIZE='seven', KNIGHTS_DEBUG='')
    result = subprocess.run(
        [sys.executable, '-c', 'import reports; print(reports.knights_on_board(5)[0])'],
        cwd=ROOT_DIR, env=env, capture_output=True, text=True,
    )
    assert result.returncode == 0, f"Import failed: {result.stderr}"
    assert result.stdout.strip() == '[4, 4, 2, 8]'
    print("  PASS test_malformed_env_does_not_break_library")


def test_single_leaper_path():
    code, out = _run_main(['--size', '5', '--leaper', '1,1'])
    assert code == 0
    assert out == (
        "Leaper(a=1, b=1) on 5x5:\n"
        "(1, 1)\n(2, 2)\n(3, 3)\n(4, 4)\n(5, 5)\n"
        "steps: 4\n"
    ), f"Unexpected output: {out!r}"
    print("  PASS test_single_leaper_path")


def test_single_leaper_unreachable():
    code, out = _run_main(['--size', '5', '--leaper', '3,3'])
    assert code == 0
    assert out == "Leaper(a=3, b=3) on 5x5:\nsteps: -1\n"
    print("  PASS test_single_leaper_unreachable")


def test_debug_trace():
    code, out = _run_main(['--size', '5', '--debug'])
    assert code == 0
    assert out.count("knight: Leaper(a=") == 2 * 10, "Banner and step line per leaper"
    assert "knight: Leaper(a=4, b=4) steps: 1" in out
    assert "Solved 5x5 in " in out
    print("  PASS test_debug_trace")


def test_parse_leaper():
    assert parse_leaper('1,2') == Leaper(1, 2)
    assert parse_leaper(' 3, 4') == Leaper(3, 4)
    for bad in ('1', '1,2,3', 'a,b', '0,2', '-1,1'):
        try:
            parse_leaper(bad)
        except argparse.ArgumentTypeError:
            continue
        raise AssertionError(f"parse_leaper({bad!r}) should be rejected")
    code, _ = _run_main(['--leaper', 'x'])
    assert code == 2
    print("  PASS test_parse_leaper")


if __name__ == '__main__':
    print("Running command line tests...")
    test_matrix_output()
    test_default_size_from_config()
    test_invalid_size_is_a_usage_error()
    test_invalid_configured_size_propagates()
    test_malformed_configured_size_propagates()
    test_malformed_env_does_not_break_library()
    test_single_leaper_path()
    test_single_leaper_unreachable()
    test_debug_trace()
    test_parse_leaper()
    print("\nAll command line tests passed!")
