"""
Factory Method Pattern
======================

Core Design: Declare the creation method on an abstract creator and let
subclasses decide which product to instantiate.

Participants:
1. Product Interface - Candy
2. Concrete Products - SweetCandy, SpicyCandy
3. Creator - CandyFactory (declares create_candy, uses it in sell)
4. Concrete Creators - SweetCandyFactory, SpicyCandyFactory
"""

from abc import ABC, abstractmethod


class Candy(ABC):

    @abstractmethod
    def sell_candy(self) -> str:
        pass


class SweetCandy(Candy):
    def sell_candy(self) -> str:
        return "cooked and sold a sweet candy"


class SpicyCandy(Candy):
    def sell_candy(self) -> str:
        return "cooked and sold a spicy candy"


# ==================== CREATORS ====================

class CandyFactory(ABC):
    """Creator - subclasses override the factory method"""

    @abstractmethod
    def create_candy(self) -> Candy:
        pass

    def sell(self) -> str:
        """Client-facing operation built on top of the factory method"""
        candy = self.create_candy()
        return candy.sell_candy()


class SweetCandyFactory(CandyFactory):
    def create_candy(self) -> Candy:
        return SweetCandy()


class SpicyCandyFactory(CandyFactory):
    def create_candy(self) -> Candy:
        return SpicyCandy()


# ==================== DEMONSTRATION ====================

def main():
    print("=" * 60)
    print("FACTORY METHOD DEMONSTRATION")
    print("=" * 60)
    print()

    for store in (SpicyCandyFactory(), SweetCandyFactory()):
        print(f"{type(store).__name__}: {store.sell()}")
    print()

    print("=" * 60)


if __name__ == "__main__":
    main()
