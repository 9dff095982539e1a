"""Strategy pattern: interchangeable sorting algorithms for a list of ints."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod


class AlgorithmStrategy(ABC):
    """An algorithm that rearranges a list of integers in place."""

    @abstractmethod
    def do_algorithm(self, data: list[int]) -> list[int]:
        """Rearrange ``data`` in place and return it."""


class IncreasingSort(AlgorithmStrategy):
    """Sorts in place with the largest value first."""

    def do_algorithm(self, data: list[int]) -> list[int]:
        data.sort(reverse=True)
        return data


class DecreasingSort(AlgorithmStrategy):
    """Sorts in place with the smallest value first."""

    def do_algorithm(self, data: list[int]) -> list[int]:
        data.sort()
        return data


class Data:
    """The context: holds a strategy and the list it is applied to."""

    def __init__(
        self,
        strategy: AlgorithmStrategy | None = None,
        data: list[int] | None = None,
    ) -> None:
        self.strategy = strategy
        self.data = data

    def _strategy(self) -> AlgorithmStrategy:
        if self.strategy is None:
            raise RuntimeError("no strategy is set")
        return self.strategy

    def do_algorithm(self, data: list[int]) -> list[int]:
        """Apply the current strategy to the given list."""
        return self._strategy().do_algorithm(data)

    def sort(self) -> list[int]:
        """Apply the current strategy to the held list."""
        if self.data is None:
            raise RuntimeError("no data is set")
        return self._strategy().do_algorithm(self.data)


def main(argv: list[str] | None = None) -> int:
    """Sort one list with each strategy and print the result."""
    values = [7, 3, 8, 19, -23, 11, 11, -2, 3]
    for strategy in (IncreasingSort(), DecreasingSort()):
        context = Data(strategy, values)
        sys.stdout.write(" ".join(map(str, context.sort())) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())