"""
Strategy Pattern
================

Core Design: A family of interchangeable sorting algorithms behind one
interface, selected and swapped at runtime by a context object.

Participants:
1. Strategy Interface - SortingAlgorithm
2. Concrete Strategies - BubbleSort, MergeSort, SelectionSort
3. Context - SortingContext

Every strategy returns a new ascending list and leaves its input untouched.

Time Complexity:
- BubbleSort: O(n^2), stops early on an already sorted pass
- SelectionSort: O(n^2)
- MergeSort: O(n log n), stable
"""

from abc import ABC, abstractmethod
from typing import List, Sequence


class SortingAlgorithm(ABC):

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def sort(self, values: Sequence) -> List:
        pass


class BubbleSort(SortingAlgorithm):

    def sort(self, values: Sequence) -> List:
        items = list(values)
        n = len(items)
        for i in range(n):
            swapped = False
            for j in range(n - i - 1):
                if items[j] > items[j + 1]:
                    items[j], items[j + 1] = items[j + 1], items[j]
                    swapped = True
            if not swapped:
                break
        return items


class SelectionSort(SortingAlgorithm):

    def sort(self, values: Sequence) -> List:
        items = list(values)
        for i in range(len(items)):
            smallest = i
            for j in range(i + 1, len(items)):
                if items[j] < items[smallest]:
                    smallest = j
            items[i], items[smallest] = items[smallest], items[i]
        return items


class MergeSort(SortingAlgorithm):

    def sort(self, values: Sequence) -> List:
        items = list(values)
        if len(items) <= 1:
            return items
        middle = len(items) // 2
        return self._merge(self.sort(items[:middle]), self.sort(items[middle:]))

    @staticmethod
    def _merge(left: List, right: List) -> List:
        merged = []
        i = j = 0
        while i < len(left) and j < len(right):
            if left[i] <= right[j]:
                merged.append(left[i])
                i += 1
            else:
                merged.append(right[j])
                j += 1
        merged.extend(left[i:])
        merged.extend(right[j:])
        return merged


class SortingContext:

    def __init__(self, strategy: SortingAlgorithm):
        self.strategy = strategy
        self.last_sorted: List = []

    def set_strategy(self, strategy: SortingAlgorithm):
        self.strategy = strategy

    def sort(self, values: Sequence) -> List:
        return self.strategy.sort(values)

    def execute_sort(self, values: Sequence) -> str:
        """Sort, keep the result in last_sorted and describe which algorithm did the work"""
        self.last_sorted = self.strategy.sort(values)
        return f"sorted using {self.strategy.name}"


# ==================== DEMONSTRATION ====================

def main():
    print("=" * 60)
    print("STRATEGY PATTERN DEMONSTRATION")
    print("=" * 60)
    print()

    data = [5, 2, 9, 1, 7]
    context = SortingContext(SelectionSort())
    print(f"Input: {data}")
    print()

    for i, strategy in enumerate([SelectionSort(), BubbleSort(), MergeSort()], 1):
        context.set_strategy(strategy)
        print(f"{i}. {context.execute_sort(data)} -> {context.sort(data)}")
    print()

    print("=" * 60)


if __name__ == "__main__":
    main()
