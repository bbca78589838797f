"""
Simple Factory Pattern
======================

Core Design: Centralize object creation behind one static method so client
code never names concrete product classes.

Participants:
1. Product Interface - Candy
2. Concrete Products - SweetCandy, SpicyCandy
3. Factory - CandyFactory.get_candy()
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Union


class CandyType(Enum):
    SWEET = "sweet"
    SPICY = "spicy"


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


class CandyFactory:
    """Factory Pattern - Creates candies, hides instantiation from the client"""

    @staticmethod
    def get_candy(candy_type: Union[CandyType, str]) -> Candy:
        if isinstance(candy_type, str):
            try:
                candy_type = CandyType(candy_type)
            except ValueError:
                raise ValueError("Invalid candy type") from None

        if candy_type == CandyType.SWEET:
            return SweetCandy()
        elif candy_type == CandyType.SPICY:
            return SpicyCandy()
        else:
            raise ValueError("Invalid candy type")


# ==================== DEMONSTRATION ====================

def main():
    print("=" * 60)
    print("SIMPLE FACTORY DEMONSTRATION")
    print("=" * 60)
    print()

    print("1. Ordering candies by type:")
    for candy_type in ("spicy", CandyType.SWEET):
        print(f"  {CandyFactory.get_candy(candy_type).sell_candy()}")
    print()

    print("2. Ordering an unknown candy:")
    try:
        CandyFactory.get_candy("sour")
    except ValueError as exc:
        print(f"  Error: {exc}")
    print()

    print("=" * 60)


if __name__ == "__main__":
    main()
