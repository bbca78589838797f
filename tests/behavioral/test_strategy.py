import pytest

from design_patterns.behavioral.strategy import (
    BubbleSort,
    MergeSort,
    SelectionSort,
    SortingContext,
)

STRATEGIES = [BubbleSort, MergeSort, SelectionSort]


@pytest.mark.parametrize("strategy_cls", STRATEGIES)
@pytest.mark.parametrize("values", [[], [1], [3, 1, 2], [5, 2, 9, 1, 7, 2], [-1, 0, -5]])
def test_strategies_sort_ascending(strategy_cls, values):
    assert strategy_cls().sort(values) == sorted(values)


@pytest.mark.parametrize("strategy_cls", STRATEGIES)
def test_strategies_leave_input_untouched(strategy_cls):
    values = [3, 2, 1]
    strategy_cls().sort(values)
    assert values == [3, 2, 1]


def test_context_reports_strategy():
    context = SortingContext(SelectionSort())
    assert context.execute_sort([1, 2, 3]) == "sorted using SelectionSort"


def test_context_swaps_strategy_at_runtime():
    context = SortingContext(BubbleSort())
    context.set_strategy(MergeSort())
    assert context.execute_sort([2, 1]) == "sorted using MergeSort"
    assert context.sort([2, 1]) == [1, 2]


def test_execute_sort_keeps_sorted_result():
    context = SortingContext(MergeSort())
    context.execute_sort([3, 1, 2])
    assert context.last_sorted == [1, 2, 3]
