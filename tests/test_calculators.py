import pytest

from algokit.oop.calculators import Accumulator, Motion, SpeedCalculation, multiply


def test_speed_example_truncates():
    assert SpeedCalculation(17, 5).speed() == 3


def test_speed_is_motion():
    calc = SpeedCalculation(distance=20, time=4)
    assert isinstance(calc, Motion)
    assert calc.speed() * 4 == 20


def test_speed_truncates_toward_zero():
    assert SpeedCalculation(-17, 5).speed() == -SpeedCalculation(17, 5).speed()
    assert SpeedCalculation(17, -5).speed() == -SpeedCalculation(17, 5).speed()


def test_speed_zero_time_raises():
    with pytest.raises(ZeroDivisionError):
        SpeedCalculation(10, 0).speed()


def test_accumulator_example():
    acc = Accumulator()
    acc.add(10)
    acc.add(12)
    assert acc.total() == 22


@pytest.mark.parametrize("numbers", [[2, 3, 5], [], [-4, 4, 7]])
def test_accumulator_matches_sum(numbers):
    acc = Accumulator()
    for number in numbers:
        acc.add(number)
    assert acc.total() == sum(numbers)


def test_accumulator_initial_value():
    acc = Accumulator(7)
    acc.add(3)
    assert acc.total() == Accumulator(10).total()


def test_multiply_three():
    assert multiply(1, 2, 3) == 6


def test_multiply_single_is_square():
    assert multiply(9) == multiply(9, 9)


def test_multiply_commutes():
    assert multiply(4, 7) == multiply(7, 4)
    assert multiply(2, 3, 5) == multiply(5, 2, 3)


def test_multiply_identity():
    assert multiply(1, 2) == multiply(2, 1, 1)


@pytest.mark.parametrize("args", [(), (1, 2, 3, 4)])
def test_multiply_wrong_arity(args):
    with pytest.raises(TypeError):
        multiply(*args)