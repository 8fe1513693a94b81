from snapundo.workspace import Workspace


if __name__ == "__main__":
    ws = Workspace()
    ws.findById(1)
    alice = ws.currentDeveloper
    assert ws.nameView.output == "<h1>Alice</h1>"
    assert alice.items.names() == ["javascript", "ruby", "python"]
    assert not ws.history.canUndo()

    alice.items.removeName("ruby")
    assert ws.history.canUndo()
    assert "ruby" not in ws.itemListView.output

    ws.undoView.clickUndo()
    assert alice.items.names() == ["javascript", "ruby", "python"]
    assert "<li>ruby</li>" in ws.itemListView.output
    ws.undoView.clickRedo()
    assert alice.items.names() == ["javascript", "python"]

    ws.undoView.clickUndo()
    ws.itemListView.addItem("go")
    assert not ws.history.canRedo()
    assert ws.undoView.output == "<button>undo</button><button disabled>redo</button>"
    assert len(ws.history.states) == 2

    alice.setDev("Alicia")
    assert ws.nameView.output == "<h1>Alicia</h1>"
    ws.undoView.clickUndo()
    assert ws.nameView.output == "<h1>Alice</h1>"

    # Loading another developer starts a new history.
    ws.findById(2)
    assert ws.nameView.output == "<h1>Bob</h1>"
    assert not ws.history.canUndo()
    assert [entry.label for entry in ws.recent.list()] == ["Bob", "Alice"]

    for id in [3, 1]:
        ws.findById(id)
    assert [entry.id for entry in ws.recent.list()] == ["1", "3", "2"]
