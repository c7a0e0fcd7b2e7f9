import pytest

from dskit.messages import (
    DEFAULT_MESSAGE,
    display_msg,
    format_msg,
    main,
)


def test_format_msg_frames_both_sides():
    result = format_msg("I will decide.", "*", 15)
    assert result.startswith("*" * 15)
    assert result.endswith("*" * 15)
    assert result[15:-15] == "I will decide."
    assert len(result) == len("I will decide.") + 30


def test_format_msg_default_count_and_symbol():
    result = format_msg("I will succeed.")
    assert result == "          I will succeed.          "


def test_format_msg_all_defaults():
    assert format_msg() == " " * 10 + DEFAULT_MESSAGE + " " * 10
    assert DEFAULT_MESSAGE == "Decide. Commit. Succeed."


def test_format_msg_zero_and_negative_count_leave_message_alone():
    assert format_msg("hi", "#", 0) == "hi"
    assert format_msg("hi", "#", -4) == "hi"


@pytest.mark.parametrize("symbol", ["", "ab"])
def test_format_msg_rejects_bad_symbol(symbol):
    with pytest.raises(ValueError):
        format_msg("hi", symbol, 3)


def test_display_msg_prints_one_line(capsys):
    display_msg("I will commit.", "+")
    out = capsys.readouterr().out
    assert out == "+" * 10 + "I will commit." + "+" * 10 + "\n"


def test_main_output_matches_sample(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "***************I will decide.***************",
        "++++++++++I will commit.++++++++++",
        "          I will succeed.          ",
        "          Decide. Commit. Succeed.          ",
    ]