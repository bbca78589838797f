"""
Iterator Pattern
================

Core Design: Traverse a collection without exposing how it stores its
elements. The explicit has_next()/next() pair mirrors the classic shape;
the same iterator also speaks Python's iterator protocol.
"""

from typing import Generic, Iterator, List, Optional, Sequence, TypeVar

T = TypeVar("T")


class NameIterator(Generic[T]):

    def __init__(self, collection: Sequence[T]):
        self._collection = collection
        self._index = 0

    def has_next(self) -> bool:
        return self._index < len(self._collection)

    def next(self) -> Optional[T]:
        """Next element, or None once the collection is exhausted"""
        if not self.has_next():
            return None
        item = self._collection[self._index]
        self._index += 1
        return item

    def __iter__(self) -> 'NameIterator[T]':
        return self

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        return self.next()


class FunkyNameRepository:

    def __init__(self):
        self._names: List[str] = [
            "DJ Jazzy Jeff",
            "MC Pickle",
            "Captain Quirk",
            "Ziggy Stardust",
            "Lady Lollipop",
            "Sir Dabs-a-Lot",
            "Miss MeowMix",
            "Disco Dave",
            "Queen Beatz",
            "FunkMaster Flex",
        ]

    def create_iterator(self) -> NameIterator[str]:
        return NameIterator(self._names)

    def __iter__(self) -> Iterator[str]:
        return self.create_iterator()

    def __len__(self) -> int:
        return len(self._names)


# ==================== DEMONSTRATION ====================

def main():
    print("=" * 60)
    print("ITERATOR PATTERN DEMONSTRATION")
    print("=" * 60)
    print()

    repository = FunkyNameRepository()

    print("1. Explicit has_next()/next():")
    iterator = repository.create_iterator()
    while iterator.has_next():
        print(f"  {iterator.next()}")
    print(f"Reached the end returning {iterator.next()}")
    print()

    print("2. Python for-loop over the repository:")
    print(f"  {', '.join(name for name in repository if name.startswith('M'))}")
    print()

    print("=" * 60)


if __name__ == "__main__":
    main()
