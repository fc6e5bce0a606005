import pytest

from dsalgo.calculator import Calculator


def enter(calc, text):
    for key in text:
        if key == ".":
            calc.press_point()
        else:
            calc.press_digit(key)


def test_starts_at_zero():
    assert Calculator().display == "0"


def test_first_digit_replaces_zero():
    calc = Calculator()
    calc.press_digit("7")
    assert calc.display == "7"


def test_digits_append():
    calc = Calculator()
    enter(calc, "78")
    assert calc.display == "78"


def test_point_added_once():
    calc = Calculator()
    enter(calc, "3.")
    calc.press_point()
    assert calc.display.count(".") == 1
    assert calc.display.startswith("3")


def test_backspace_to_empty_shows_zero():
    calc = Calculator()
    calc.press_digit("5")
    calc.backspace()
    assert calc.display == "0"


def test_backspace_removes_last_char():
    calc = Calculator()
    enter(calc, "123")
    calc.backspace()
    assert calc.display == "12"


def test_clear_and_clear_entry():
    calc = Calculator()
    enter(calc, "99")
    calc.clear_entry()
    assert calc.display == ""
    enter(calc, "4")
    calc.clear()
    assert calc.display == "0"


def test_toggle_sign_round_trip():
    calc = Calculator()
    enter(calc, "42")
    calc.toggle_sign()
    assert calc.display == "-42"
    calc.toggle_sign()
    assert calc.display == "42"


def test_subtract_self_is_zero():
    calc = Calculator()
    enter(calc, "5")
    calc.press_operator("-")
    enter(calc, "5")
    assert calc.equals() == "0"


def test_multiply():
    calc = Calculator()
    enter(calc, "6")
    calc.press_operator("*")
    enter(calc, "7")
    assert calc.equals() == "42"


def test_fractional_result():
    calc = Calculator()
    enter(calc, "1")
    calc.press_operator("/")
    enter(calc, "2")
    assert calc.equals() == "0.5"


def test_divide_by_zero_is_infinite():
    calc = Calculator()
    enter(calc, "8")
    calc.press_operator("/")
    enter(calc, "0")
    assert calc.equals() == "∞"


def test_addition_commutes():
    left = Calculator()
    enter(left, "12")
    left.press_operator("+")
    enter(left, "3.5")
    right = Calculator()
    enter(right, "3.5")
    right.press_operator("+")
    enter(right, "12")
    assert left.equals() == right.equals()


def test_operator_blanks_display():
    calc = Calculator()
    enter(calc, "9")
    calc.press_operator("+")
    assert calc.display == ""
    assert calc.operator == "+"


def test_equals_without_operator_keeps_display():
    calc = Calculator()
    enter(calc, "31")
    assert calc.equals() == "31"


def test_equals_on_empty_display_raises():
    calc = Calculator()
    enter(calc, "2")
    calc.press_operator("+")
    with pytest.raises(ValueError):
        calc.equals()


def test_unknown_operator_raises():
    with pytest.raises(ValueError):
        Calculator().press_operator("%")


def test_bad_digit_raises():
    with pytest.raises(ValueError):
        Calculator().press_digit("x")