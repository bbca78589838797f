"""
Template Method Pattern
=======================

Core Design: The base class fixes the order of the brewing steps in
make_beverage(); subclasses fill in brew() and may override the
add_condiments() hook, which does nothing by default.
"""

from abc import ABC, abstractmethod
from typing import List


class BeverageMaker(ABC):

    def __init__(self):
        self.steps: List[str] = []

    def make_beverage(self) -> List[str]:
        """Template method, subclasses customize the steps and leave this order alone"""
        self.steps = []
        self.boil_water()
        self.brew()
        self.pour_in_cup()
        self.add_condiments()
        return list(self.steps)

    def _step(self, description: str):
        self.steps.append(description)
        print(description)

    def boil_water(self):
        self._step("boiling water")

    def pour_in_cup(self):
        self._step("pouring in cup")

    @abstractmethod
    def brew(self):
        pass

    def add_condiments(self):
        pass


class CoffeeMaker(BeverageMaker):

    def brew(self):
        self._step("brewing coffee")

    def add_condiments(self):
        self._step("adding choco chips")


class TeaMaker(BeverageMaker):

    def brew(self):
        self._step("steeping tea")

    def add_condiments(self):
        self._step("adding lemon")


class HotWaterMaker(BeverageMaker):

    def brew(self):
        self._step("nothing to brew")


# ==================== DEMONSTRATION ====================

def main():
    print("=" * 60)
    print("TEMPLATE METHOD DEMONSTRATION")
    print("=" * 60)
    print()

    for i, maker in enumerate([CoffeeMaker(), TeaMaker(), HotWaterMaker()], 1):
        print(f"{i}. {type(maker).__name__}:")
        maker.make_beverage()
        print()

    print("=" * 60)


if __name__ == "__main__":
    main()
