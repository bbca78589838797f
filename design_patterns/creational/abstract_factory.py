"""
Abstract Factory Pattern
========================

Core Design: Interface for creating families of related products (a candy
and its matching wrapper) without naming their concrete classes.

Participants:
1. Product Interfaces - Candy, Wrapper
2. Concrete Products - SweetCandy, SpicyCandy, SweetWrapper, SpicyWrapper
3. Abstract Factory - CandySetFactory
4. Concrete Factories - SweetCandySetFactory, SpicyCandySetFactory

A concrete factory only ever hands out products from one family, so a sweet
candy never ends up in a spicy wrapper.
"""

from abc import ABC, abstractmethod
from typing import List


# ==================== PRODUCTS ====================

class Candy(ABC):

    @abstractmethod
    def cook_candy(self) -> str:
        pass


class Wrapper(ABC):

    @abstractmethod
    def wrap(self) -> str:
        pass


class SweetCandy(Candy):
    def cook_candy(self) -> str:
        return "Cooked sweet candy"


class SpicyCandy(Candy):
    def cook_candy(self) -> str:
        return "Cooked spicy candy"


class SweetWrapper(Wrapper):
    def wrap(self) -> str:
        return "Wrapped in a cute, pink wrapper."


class SpicyWrapper(Wrapper):
    def wrap(self) -> str:
        return "Wrapped in a bold, red wrapper."


# ==================== FACTORIES ====================

class CandySetFactory(ABC):

    @abstractmethod
    def create_candy(self) -> Candy:
        pass

    @abstractmethod
    def create_wrapper(self) -> Wrapper:
        pass


class SweetCandySetFactory(CandySetFactory):
    def create_candy(self) -> Candy:
        return SweetCandy()

    def create_wrapper(self) -> Wrapper:
        return SweetWrapper()


class SpicyCandySetFactory(CandySetFactory):
    def create_candy(self) -> Candy:
        return SpicyCandy()

    def create_wrapper(self) -> Wrapper:
        return SpicyWrapper()


def pack_candy_set(factory: CandySetFactory) -> List[str]:
    """Client code, works with any factory through the abstract interface"""
    candy = factory.create_candy()
    wrapper = factory.create_wrapper()
    return [candy.cook_candy(), wrapper.wrap()]


# ==================== DEMONSTRATION ====================

def main():
    print("=" * 60)
    print("ABSTRACT FACTORY DEMONSTRATION")
    print("=" * 60)
    print()

    for i, factory in enumerate([SpicyCandySetFactory(), SweetCandySetFactory()], 1):
        print(f"{i}. {type(factory).__name__}:")
        for line in pack_candy_set(factory):
            print(f"  {line}")
        print()

    print("=" * 60)


if __name__ == "__main__":
    main()
