import pytest


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(head {1 2 3})", "{1}"),
        ("(tail {1 2 3})", "{2 3}"),
        ("(tail {1})", "{}"),
        ("(head {{1 2} 3})", "{{1 2}}"),
        ('(head "abc")', '"a"'),
        ('(tail "abc")', '"bc"'),
        ("(head {})", "Error: cannot take head of empty list"),
        ("(tail {})", "Error: cannot take tail of empty list"),
        ('(head "")', "Error: cannot take head of empty list"),
        ("(head 1)", "Error: function `head` passed incorrect type: expected Q-Expression, got Number"),
        ("(head {1} {2})", "Error: function `head` passed incorrect number of arguments: expected 1, got 2"),
        ("(head (list 1 2))", "{1}"),
        ("(list 1 2 (+ 1 2))", "{1 2 3}"),
        ("(list)", "{}"),
        ("(join {1 2} {3 4})", "{1 2 3 4}"),
        ("(join {1} {} {2 {3}})", "{1 2 {3}}"),
        ('(join "ab" "cd" "")', '"abcd"'),
        ('(join {1} "a")', "Error: function `join` passed incorrect type: expected Q-Expression, got String"),
        ('(join "a" {1})', "Error: function `join` passed incorrect type: expected String, got Q-Expression"),
        ("(eval {+ 1 2})", "3"),
        ("(eval (list + 1 2))", "3"),
        ("(eval {head {1 2}})", "{1}"),
        ("(eval 5)", "5"),
        ("(eval {})", "{}"),
        ("(eval {1} {2})", "Error: function `eval` passed incorrect number of arguments: expected 1, got 2"),
    ]
)
def test_list_operations(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if (> 3 2) {1} {2})", "1"),
        ("(if 0 {1} {2})", "2"),
        ("(if -1 {+ 1 1} {undefined})", "2"),
        ("(if 1 {} {2})", "{}"),
        ("(if {} {1} {2})", "Error: function `if` passed incorrect type: expected Number, got Q-Expression"),
        ("(if 1 1 {2})", "Error: function `if` passed incorrect type: expected Q-Expression, got Number"),
        ("(if 1 {1})", "Error: function `if` passed incorrect number of arguments: expected 3, got 2"),
    ]
)
def test_if(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(= 1 1)", "1"),
        ("(= 1 2)", "0"),
        ('(= "a" "a")', "1"),
        ('(= "a" "b")', "0"),
        ('(= 1 "1")', "0"),
        ("(= {1 {2}} {1 {2}})", "1"),
        ("(= {1 2} {1})", "0"),
        ("(= {1} (list 1))", "1"),
        ("(= {a} {a})", "1"),
        ("(= {a} {b})", "0"),
        ("(= {1} 1)", "0"),
        ("(= 1 1 1)", "1"),
        ("(= 1 1 2)", "0"),
        ("(!= 1 2)", "1"),
        ("(!= {1} {1})", "0"),
        ("(= 1)", "Error: function `=` passed incorrect number of arguments: expected at least 2, got 1"),
        ("(= + +)", "Error: cannot compare values of type Function"),
        ("(= {+} {+})", "1"),
    ]
)
def test_equality(run, source, expected):
    assert run(source) == expected


def test_def_binds_globals(run):
    assert run("(def {x y} 1 2)") == "()"
    assert run("(+ x y)") == "3"


def test_def_rebinding_overwrites(run):
    assert run("(def {x} 1)", "(def {x} 2)", "x") == "2"


def test_def_can_bind_computed_names(run):
    assert run("(def (head {a b}) 10)", "a") == "10"


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(def {x} 1 2)", "Error: function `def` passed incorrect number of arguments: expected 1, got 2"),
        ("(def {x y} 1)", "Error: function `def` passed incorrect number of arguments: expected 2, got 1"),
        ("(def {1} 2)", "Error: function `def` passed incorrect type: expected Identifier, got Number"),
        ("(def 1 1)", "Error: function `def` passed incorrect type: expected Q-Expression, got Number"),
        ("(let {x} 1 2)", "Error: function `let` passed incorrect number of arguments: expected 1, got 2"),
        ("(let)", "Error: function `let` passed incorrect number of arguments: expected at least 1, got 0"),
    ]
)
def test_def_errors(run, source, expected):
    assert run(source) == expected


def test_let_at_top_level_binds_in_root(run):
    assert run("(let {z} 5)", "z") == "5"


def test_fn_builds_closure(run):
    assert run("(fn {x y} {+ x y})") == "(fn (x y) {+ x y})"
    assert run("((fn {x y} {+ x y}) 2 3)") == "5"


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(fn {x})", "Error: function `fn` passed incorrect number of arguments: expected 2, got 1"),
        ("(fn {1} {x})", "Error: function `fn` passed incorrect type: expected Identifier, got Number"),
        ("(fn 1 {x})", "Error: function `fn` passed incorrect type: expected Q-Expression, got Number"),
        ("(fn {x} 1)", "Error: function `fn` passed incorrect type: expected Q-Expression, got Number"),
    ]
)
def test_fn_errors(run, source, expected):
    assert run(source) == expected


def test_import_requires_string(run):
    assert run("(import 1)") == "Error: function `import` passed incorrect type: expected String, got Number"
