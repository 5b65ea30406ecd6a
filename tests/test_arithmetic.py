import pytest


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+ 1 2 3)", "6"),
        ("(- 10 3 2)", "5"),
        ("(- 4)", "-4"),
        ("(* 2 3 4)", "24"),
        ("(/ 12 3)", "4"),
        ("(/ 10 4)", "2.5"),
        ("(/ 1 3)", "0.3333333333333333"),
        ("(+ 0.1 0.2)", "0.30000000000000004"),
        ("(+)", "0"),
        ("(*)", "1"),
        ("(/ 7)", "7"),
        ("(+ (* 2 3) (- 10 4))", "12"),
        ("(+ 1 (* 2 (+ 3 4) (- 10 6)))", "57"),
        ("(+ -1 5 -3)", "1"),
        ("(mod 7 3)", "1"),
        ("(mod -7 3)", "-1"),
        ("(mod 5.5 2)", "1.5"),
        ("+ 1 2", "3"),
    ]
)
def test_arithmetic(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ('(+ 1 "a")', 'Error: function `+` passed incorrect type: expected Number, got String'),
        ("(* 2 {3})", "Error: function `*` passed incorrect type: expected Number, got Q-Expression"),
        ("(-)", "Error: function `-` passed incorrect number of arguments: expected at least 1, got 0"),
        ("(/)", "Error: function `/` passed incorrect number of arguments: expected at least 1, got 0"),
        ("(/ 1 0)", "Error: division by zero"),
        ("(/ 0 1 0)", "Error: division by zero"),
        ("(mod 1 0)", "Error: division by zero"),
        ("(mod 1)", "Error: function `mod` passed incorrect number of arguments: expected 2, got 1"),
    ]
)
def test_arithmetic_errors(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(< 1 2)", "1"),
        ("(< 2 1)", "0"),
        ("(<= 2 2)", "1"),
        ("(<= 3 2)", "0"),
        ("(> 3 2)", "1"),
        ("(> 1 2)", "0"),
        ("(>= 2 2)", "1"),
        ("(>= 1 2)", "0"),
        ("(< 1)", "Error: function `<` passed incorrect number of arguments: expected 2, got 1"),
        ("(> 1 2 3)", "Error: function `>` passed incorrect number of arguments: expected 2, got 3"),
        ('(< "a" "b")', "Error: function `<` passed incorrect type: expected Number, got String"),
    ]
)
def test_comparisons(run, source, expected):
    assert run(source) == expected
