import io

import pytest

from dskit.maxval import find_max, format_max, main


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (1, 2, 2),
        (2, 1, 2),
        (1.5, 2.5, 2.5),
        ("a", "b", "b"),
        ("apple", "orange", "orange"),
        ("orange", "apple", "orange"),
    ],
)
def test_find_max(a, b, expected):
    assert find_max(a, b) == expected


def test_find_max_tie_returns_first():
    first = [1, 2]
    second = [1, 2]
    assert find_max(first, second) is first


def test_find_max_is_symmetric_in_value():
    for a, b in [(3, 7), (-1, -5), (0.25, 0.5)]:
        assert find_max(a, b) == find_max(b, a) == max(a, b)


def test_find_max_unorderable_raises():
    with pytest.raises(TypeError):
        find_max(1, "x")


def test_format_max_fields():
    lines = format_max(1, 2, 2).splitlines()
    assert lines == ["Type: int", "First: 1", "Second: 2", "Max: 2"]


def test_format_max_string_type_name():
    text = format_max("apple", "orange", "orange")
    assert text.splitlines()[0] == "Type: str"
    assert text.endswith("Max: orange")


def test_main_sample_run(monkeypatch, capsys):
    data = "1\n2\n1.5\n2.5\na\nb\napple\norange\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(data))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Enter two ints" in out
    assert "Enter two c-strings" in out
    assert "Max: 2\n" in out
    assert "Max: 2.5\n" in out
    assert "Max: b\n" in out
    assert "Max: orange\n" in out


def test_main_bad_int_raises(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("x\n2\n"))
    with pytest.raises(ValueError):
        main([])