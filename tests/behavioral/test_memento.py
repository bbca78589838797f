from design_patterns.behavioral.memento import Editor, EditorMemento, History, undo


def test_save_and_restore_snapshots():
    editor = Editor()
    history = History()

    editor.type("Hello, ")
    history.push(editor.save())
    editor.type("world!")
    history.push(editor.save())
    editor.type(" This will be undone.")
    assert editor.content == "Hello, world! This will be undone."

    assert undo(editor, history) is True
    assert editor.content == "Hello, world!"
    assert undo(editor, history) is True
    assert editor.content == "Hello, "
    assert len(history) == 0


def test_undo_with_empty_history_keeps_content():
    editor = Editor()
    editor.type("draft")
    assert undo(editor, History()) is False
    assert editor.content == "draft"


def test_history_pop_empty_returns_none():
    assert History().pop() is None


def test_memento_is_a_snapshot():
    editor = Editor()
    editor.type("a")
    memento = editor.save()
    editor.type("b")
    assert memento == EditorMemento("a")
