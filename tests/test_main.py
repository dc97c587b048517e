"""Tests for the zb32 command line tool."""

import pytest

from zb32.main import main


def test_encode(capsys):
    main(["encode", "f0bfc7"])
    assert capsys.readouterr().out == "6n9hq\n"


def test_encode_bits(capsys):
    main(["encode", "80", "--bits", "1"])
    assert capsys.readouterr().out == "o\n"


def test_decode_whole_bytes(capsys):
    main(["decode", "6n9hq"])
    assert capsys.readouterr().out == "f0bfc7\n"


def test_decode_bits(capsys):
    main(["decode", "on", "--bits", "10"])
    assert capsys.readouterr().out == "8080\n"


def test_decode_input_error_exit_status(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["decode", "on", "--bits", "8"])
    assert exc.value.code == 1
    assert "error: Trailing non-zero bits" in capsys.readouterr().err


def test_decode_usage_error_exit_status(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["decode", "yyy", "--bits", "10"])
    assert exc.value.code == 2
    assert "input buffer size" in capsys.readouterr().err


def test_encode_bad_hex(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["encode", "xyz"])
    assert exc.value.code == 2
    assert "not a hex string" in capsys.readouterr().err


def test_check(capsys):
    main(["check", "on", "--bits", "10"])
    assert capsys.readouterr().out == "valid\n"
    with pytest.raises(SystemExit) as exc:
        main(["check", "on", "--bits", "8"])
    assert exc.value.code == 1
    assert capsys.readouterr().out.startswith("invalid:")


def test_no_command(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 1


def test_check_usage_error_is_not_invalid_data(capsys):
    """A length that disagrees with --bits is the caller's fault: exit 2, not "invalid"."""
    with pytest.raises(SystemExit) as exc:
        main(["check", "yyy", "--bits", "10"])
    assert exc.value.code == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "input buffer size" in captured.err


def test_check_negative_bits(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["check", "", "--bits", "-1"])
    assert exc.value.code == 2
    assert "must not be negative" in capsys.readouterr().err
