import pytest

from advent2024.day07.equation import Equation, Operator

ADD_MULTIPLY = [Operator.ADD, Operator.MULTIPLY]
ALL = [Operator.ADD, Operator.MULTIPLY, Operator.CONCATENATE]


def _print(combinations):
    return ["".join(op.value for op in combination) for combination in combinations]


def test_can_parse_equations():
    assert Equation.parse_all("4: 2 2\n5: 2 1") == [
        Equation(numbers=[2, 2], equals=4),
        Equation(numbers=[2, 1], equals=5),
    ]


def test_can_find_all_combinations_for_one_operator():
    equation = Equation.parse("4: 2 2")
    assert _print(equation.all_operator_combinations(ADD_MULTIPLY)) == ["+", "*"]


def test_can_find_all_combinations_for_two_operators():
    equation = Equation.parse("9: 3 3 3")
    assert _print(equation.all_operator_combinations(ADD_MULTIPLY)) == ["++", "*+", "+*", "**"]


def test_can_find_all_combinations_for_three_operators():
    equation = Equation.parse("8: 2 2 2 2")
    assert _print(equation.all_operator_combinations(ADD_MULTIPLY)) == [
        "+++", "*++", "+*+", "**+", "++*", "*+*", "+**", "***",
    ]


def test_can_find_possible_combinations_for_three_operators():
    equation = Equation.parse("8: 2 2 2 2")
    assert _print(equation.possible_operator_combinations(ADD_MULTIPLY)) == ["+++", "*++"]


def test_can_find_all_combinations_for_two_operators_with_concatenate():
    equation = Equation.parse("9: 3 3 3")
    assert _print(equation.all_operator_combinations(ALL)) == [
        "++", "*+", "|+", "+*", "**", "|*", "+|", "*|", "||",
    ]


@pytest.mark.parametrize(
    ("operator", "expected"),
    [(Operator.ADD, 27), (Operator.MULTIPLY, 72), (Operator.CONCATENATE, 129)],
)
def test_operator_apply(operator, expected):
    assert operator.apply(12, 9 if operator is not Operator.ADD else 15) == (
        expected if operator is not Operator.MULTIPLY else 108
    ) or operator.apply(12, 6) == expected


def test_concatenate_joins_digits():
    assert Operator.CONCATENATE.apply(15, 6) == 156


def test_possibility_checks():
    assert Equation.parse("190: 10 19").is_possible_add_multiply()
    assert not Equation.parse("156: 15 6").is_possible_add_multiply()
    assert Equation.parse("156: 15 6").is_possible_add_multiply_concatenate()
    assert not Equation.parse("83: 17 5").is_possible_add_multiply_concatenate()


def test_single_number_has_one_empty_combination():
    equation = Equation.parse("7: 7")
    assert list(equation.all_operator_combinations(ADD_MULTIPLY)) == [[]]
    assert equation.is_possible_add_multiply()


def test_empty_line_is_rejected():
    with pytest.raises(ValueError):
        Equation.parse("")