import pytest

from dskit.rpn import (
    ExpressionResult,
    RPNError,
    evaluate,
    evaluate_text,
    format_report,
    main,
    split_expressions,
)

SAMPLE = """\
2 4 * 5 + ;
13 5 % 5 + ;
15 1 + 2 / 1 - ;
15 + 1 + 2 / 1 - ;
3 4 + 15 10 - * ;
3 4 + 6 15 10 - * ;
2 13 + 14 6 - - 5 * 4 + ;
35 6 4 2 2 / + * - ;
3 4 + 1 2 - * 4 2 / 3 - + ;
3 14 1 2 4 2 3 + % * + - + ;
"""


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("2 4 * 5 +", 13),
        ("13 5 % 5 +", 8),
        ("15 1 + 2 / 1 -", 7),
        ("3 4 + 15 10 - *", 35),
        ("2 13 + 14 6 - - 5 * 4 +", 39),
        ("35 6 4 2 2 / + * -", 5),
        ("3 4 + 1 2 - * 4 2 / 3 - +", -8),
        ("3 14 1 2 4 2 3 + % * + - +", 8),
    ],
)
def test_evaluate_sample_expressions(expression, expected):
    assert evaluate(expression.split()) == expected


def test_evaluate_text_matches_sample_run():
    results = evaluate_text(SAMPLE)
    values = [result.value for result in results]
    assert values == [13, 8, 7, None, 35, None, 39, 5, -8, 8]
    assert [result.valid for result in results] == [
        True, True, True, False, True, False, True, True, True, True,
    ]


def test_not_enough_operands():
    with pytest.raises(RPNError, match="not enough operands"):
        evaluate("15 + 1 + 2 / 1 -".split())


def test_too_many_operands():
    with pytest.raises(RPNError, match="too many operands"):
        evaluate("3 4 + 6 15 10 - *".split())


def test_division_by_zero():
    with pytest.raises(RPNError, match="division by zero"):
        evaluate("4 0 /".split())


def test_unknown_operator():
    with pytest.raises(RPNError, match="unknown operator"):
        evaluate("2 3 ^".split())


def test_empty_expression():
    with pytest.raises(RPNError, match="empty"):
        evaluate([])


def test_division_truncates_toward_zero():
    assert evaluate("0 7 - 2 /".split()) == -3


def test_remainder_follows_dividend_sign():
    assert evaluate("0 7 - 2 %".split()) == -1


def test_number_token_uses_leading_digits():
    assert evaluate(["12abc"]) == evaluate(["12"])


def test_letter_tokens_are_ignored():
    assert evaluate("2 x 4 *".split()) == evaluate("2 4 *".split())


def test_split_expressions_drops_unterminated_tail():
    assert split_expressions("1 2 + ;\n3 ;\n4 5") == [["1", "2", "+"], ["3"]]


def test_split_expressions_keeps_empty_expression():
    assert split_expressions("; 1 ;") == [[], ["1"]]


def test_steps_after_error_are_empty():
    result = evaluate_text("1 + 2 ;")[0]
    assert result.steps == ("Push 1", "", "")
    assert result.error == "not enough operands"


def test_report_for_valid_expression():
    report = format_report(evaluate_text("3 4 + ;"))
    assert report == (
        "\n(Token: 3)\t\tPush 3"
        "\n(Token: 4)\t\tPush 4"
        "\n(Token: +)\t\tPop  4\tPop  3\tPush 7"
        "\n(Token: ;)\t\tPop  7\n\t\tValid:  result = 7\n\n"
    )


def test_report_for_too_many_operands():
    report = format_report(evaluate_text("1 2 ;"))
    assert report.endswith(
        "\n(Token: ;)\t\t\n\t\tInvalid RPN expression - too many operands\n\n"
    )


def test_report_for_not_enough_operands():
    report = format_report(evaluate_text("15 + 1 ;"))
    assert "Invalid RPN expression - not enough operands" in report
    assert report.count("(Token: ") == 4


def test_report_for_empty_expression_has_no_conclusion():
    result = ExpressionResult(tokens=(), steps=())
    assert format_report([result]) == "\n(Token: ;)\t\t"


def test_main_writes_results(tmp_path, capsys):
    source = tmp_path / "expressions.txt"
    target = tmp_path / "results.txt"
    source.write_text("2 4 * 5 + ;\n15 + 1 + 2 / 1 - ;\n")
    assert main([str(source), str(target)]) == 0
    captured = capsys.readouterr()
    assert "2 4 * 5 + = 13" in captured.out
    assert "invalid" in captured.err
    report = target.read_text()
    assert "Valid:  result = 13" in report
    assert "Invalid RPN expression - not enough operands" in report


def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "absent.txt"
    assert main([str(missing), str(tmp_path / "out.txt")]) == 1
    assert "cannot read" in capsys.readouterr().err