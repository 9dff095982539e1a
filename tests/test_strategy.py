import pytest

from patternkit.strategy import Data, DecreasingSort, IncreasingSort, main

VALUES = [7, 3, 8, 19, -23, 11, 11, -2, 3]


def test_increasing_sort_puts_largest_first():
    data = list(VALUES)
    result = IncreasingSort().do_algorithm(data)
    assert result is data
    assert result[0] == 19
    assert result[-1] == -23
    assert all(a >= b for a, b in zip(result, result[1:]))
    assert sorted(result) == sorted(VALUES)


def test_decreasing_sort_puts_smallest_first():
    data = list(VALUES)
    result = DecreasingSort().do_algorithm(data)
    assert result is data
    assert result[0] == -23
    assert all(a <= b for a, b in zip(result, result[1:]))


def test_context_sort_uses_held_data():
    data = list(VALUES)
    context = Data(DecreasingSort(), data)
    assert context.sort() is data
    assert data[-1] == 19


def test_context_strategy_can_be_swapped():
    data = list(VALUES)
    context = Data(DecreasingSort(), data)
    context.sort()
    context.strategy = IncreasingSort()
    assert context.do_algorithm(data)[0] == 19


def test_context_without_strategy_raises():
    with pytest.raises(RuntimeError):
        Data(data=[1, 2]).sort()
    with pytest.raises(RuntimeError):
        Data().do_algorithm([1, 2])


def test_context_without_data_raises():
    with pytest.raises(RuntimeError):
        Data(IncreasingSort()).sort()


def test_main_prints_two_orders(capsys):
    assert main() == 0
    first, second = capsys.readouterr().out.splitlines()
    assert first.split()[0] == "19"
    assert second.split()[0] == "-23"