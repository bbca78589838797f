"""
Prototype Pattern
=================

Core Design: Create new objects by copying a prototypical instance instead
of building them from scratch.

Participants:
1. Prototype Interface - declares clone()
2. Concrete Prototype - Library (copies its book list)
3. Prototype Registry - named prototypes cloned on demand with overrides
"""

import copy
from abc import ABC, abstractmethod
from typing import Any, Dict, List


class Prototype(ABC):

    @abstractmethod
    def clone(self) -> 'Prototype':
        pass


class Library(Prototype):

    def __init__(self, name: str, books: List[str]):
        self.name = name
        self.books = books

    def clone(self) -> 'Library':
        # the clone owns its own list of books
        return Library(self.name, list(self.books))

    def get_books(self) -> str:
        return ",".join(self.books)


class PrototypeRegistry:
    """Keeps named prototypes and hands out deep copies of them"""

    def __init__(self):
        self._objects: Dict[str, Any] = {}

    def register(self, prototype_name: str, obj: Any):
        self._objects[prototype_name] = obj

    def unregister(self, prototype_name: str):
        if prototype_name not in self._objects:
            raise ValueError(f"Unknown prototype: {prototype_name}")
        del self._objects[prototype_name]

    def clone(self, prototype_name: str, **attrs) -> Any:
        """Clone a registered object and override some of its attributes"""
        if prototype_name not in self._objects:
            raise ValueError(f"Unknown prototype: {prototype_name}")
        obj = copy.deepcopy(self._objects[prototype_name])
        obj.__dict__.update(attrs)
        return obj

    def names(self) -> List[str]:
        return list(self._objects)


# ==================== DEMONSTRATION ====================

def main():
    print("=" * 60)
    print("PROTOTYPE DEMONSTRATION")
    print("=" * 60)
    print()

    print("1. Cloning a library:")
    common_library = Library("dev", ["designPatterns", "systemDesigns", "dsa"])
    modern_library = common_library.clone()
    modern_library.books.append("dbms")
    print(f"  common_library books => {common_library.get_books()}")
    print(f"  modern_library books => {modern_library.get_books()}")
    print()

    print("2. Registry with attribute overrides:")
    registry = PrototypeRegistry()
    registry.register("starter", common_library)
    branch = registry.clone("starter", name="branch")
    print(f"  {branch.name}: {branch.get_books()}")
    print()

    print("=" * 60)


if __name__ == "__main__":
    main()
