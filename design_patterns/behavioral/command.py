"""
Command Pattern
===============

Core Design: Encapsulate each change to a counter as an object that knows
how to apply and revert itself, so a command stack can offer undo/redo.

Participants:
1. Command Interface - execute(state), undo(state)
2. Concrete Commands - AddCommand, SubtractCommand
3. Invoker - CommandStack (history + redo stack)
"""

from abc import ABC, abstractmethod
from typing import List


class Command(ABC):

    @abstractmethod
    def execute(self, state: int) -> int:
        pass

    @abstractmethod
    def undo(self, state: int) -> int:
        pass


class AddCommand(Command):

    def __init__(self, amount: int = 1):
        self.amount = amount

    def execute(self, state: int) -> int:
        return state + self.amount

    def undo(self, state: int) -> int:
        return state - self.amount


class SubtractCommand(Command):

    def __init__(self, amount: int = 1):
        self.amount = amount

    def execute(self, state: int) -> int:
        return state - self.amount

    def undo(self, state: int) -> int:
        return state + self.amount


class CommandStack:
    """Invoker - applies commands and keeps history for undo/redo"""

    def __init__(self, state: int = 0):
        self._state = state
        self._history: List[Command] = []
        self._redo: List[Command] = []

    @property
    def state(self) -> int:
        return self._state

    def execute_command(self, command: Command) -> int:
        self._state = command.execute(self._state)
        self._history.append(command)
        # a new command invalidates whatever was undone
        self._redo.clear()
        return self._state

    def undo_command(self) -> bool:
        if not self._history:
            return False
        command = self._history.pop()
        self._state = command.undo(self._state)
        self._redo.append(command)
        return True

    def redo_command(self) -> bool:
        if not self._redo:
            return False
        command = self._redo.pop()
        self._state = command.execute(self._state)
        self._history.append(command)
        return True

    def can_undo(self) -> bool:
        return bool(self._history)

    def can_redo(self) -> bool:
        return bool(self._redo)


# ==================== DEMONSTRATION ====================

def main():
    print("=" * 60)
    print("COMMAND PATTERN DEMONSTRATION")
    print("=" * 60)
    print()

    stack = CommandStack(0)
    print(f"Initial state: {stack.state}")

    stack.execute_command(AddCommand())
    print(f"After add: {stack.state}")
    stack.execute_command(AddCommand(5))
    print(f"After add 5: {stack.state}")
    stack.execute_command(SubtractCommand(2))
    print(f"After subtract 2: {stack.state}")

    stack.undo_command()
    print(f"After undo: {stack.state}")
    stack.redo_command()
    print(f"After redo: {stack.state}")

    while stack.undo_command():
        pass
    print(f"After undoing everything: {stack.state}")
    print()

    print("=" * 60)


if __name__ == "__main__":
    main()
