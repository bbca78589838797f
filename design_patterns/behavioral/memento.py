"""
Memento Pattern
===============

Core Design: Capture an editor's content in an opaque snapshot so it can be
restored later without exposing the editor's internals.

Participants:
1. Memento - EditorMemento (immutable snapshot)
2. Originator - Editor
3. Caretaker - History (stack of snapshots)
"""

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class EditorMemento:
    content: str


class Editor:

    def __init__(self):
        self._content = ""

    @property
    def content(self) -> str:
        return self._content

    def type(self, words: str):
        self._content += words

    def save(self) -> EditorMemento:
        return EditorMemento(self._content)

    def restore(self, memento: EditorMemento):
        self._content = memento.content


class History:

    def __init__(self):
        self._stack: List[EditorMemento] = []

    def push(self, memento: EditorMemento):
        self._stack.append(memento)

    def pop(self) -> Optional[EditorMemento]:
        if not self._stack:
            return None
        return self._stack.pop()

    def __len__(self) -> int:
        return len(self._stack)


def undo(editor: Editor, history: History) -> bool:
    """Restore the most recent snapshot, False when there is none"""
    memento = history.pop()
    if memento is None:
        return False
    editor.restore(memento)
    return True


# ==================== DEMONSTRATION ====================

def main():
    print("=" * 60)
    print("MEMENTO PATTERN DEMONSTRATION")
    print("=" * 60)
    print()

    editor = Editor()
    history = History()

    editor.type("Hello, ")
    history.push(editor.save())
    editor.type("world!")
    history.push(editor.save())
    editor.type(" This will be undone.")

    print(f"Before undo: {editor.content}")
    undo(editor, history)
    print(f"After first undo: {editor.content}")
    undo(editor, history)
    print(f"After second undo: {editor.content}")
    print(f"Third undo possible: {undo(editor, history)}")
    print()

    print("=" * 60)


if __name__ == "__main__":
    main()
