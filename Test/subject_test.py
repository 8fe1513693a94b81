import pytest
from snapundo.subject import (
    Item,
    ItemCollection,
    Snapshot,
    SnapshotError,
    Subject,
    SubjectEvent,
)


def _record(source, kinds=SubjectEvent):
    received = []
    for kind in kinds:
        source.on(kind, lambda *args, kind=kind: received.append((kind, args)))
    return received


class TestItemCollection:

    def test_sequence(self):
        items = ItemCollection(["a", "b", "a"])
        assert len(items) == 3
        assert items[1] == Item("b")
        assert list(items) == [Item("a"), Item("b"), Item("a")]
        assert Item("b") in items
        assert items.names() == ["a", "b", "a"]
        assert repr(items) == "ItemCollection(['a', 'b', 'a'])"

    def test_add(self):
        items = ItemCollection(["a"])
        received = _record(items, [SubjectEvent.itemAdded])
        items.add("b")
        items.add("c", 0)
        assert items.names() == ["c", "a", "b"]
        assert received == [
            (SubjectEvent.itemAdded, (Item("b"), 1)),
            (SubjectEvent.itemAdded, (Item("c"), 0)),
        ]

    def test_remove(self):
        items = ItemCollection(["a", "b", "c"])
        received = _record(items, [SubjectEvent.itemRemoved])
        assert items.remove(-1) == Item("c")
        assert items.remove(0) == Item("a")
        assert items.names() == ["b"]
        assert received == [
            (SubjectEvent.itemRemoved, (Item("c"), 2)),
            (SubjectEvent.itemRemoved, (Item("a"), 0)),
        ]
        with pytest.raises(IndexError):
            items.remove(5)

    def test_removeName(self):
        items = ItemCollection(["a", "b", "a"])
        items.removeName("a")
        assert items.names() == ["b", "a"]
        with pytest.raises(ValueError):
            items.removeName("z")

    def test_notification_after_mutation(self):
        items = ItemCollection(["a"])
        seen = []
        items.on(SubjectEvent.itemAdded, lambda item, index: seen.append(items.names()))
        items.add("b")
        assert seen == [["a", "b"]]


class TestSubject:

    def test_defaults(self):
        subject = Subject()
        assert subject.id is None
        assert subject.dev == ""
        assert isinstance(subject.items, ItemCollection)
        assert len(subject.items) == 0

    def test_setDev(self):
        subject = Subject(1, "Alice")
        received = _record(subject)
        subject.setDev("Alicia")
        subject.setDev("Alicia")
        assert subject.dev == "Alicia"
        assert received == [(SubjectEvent.fieldChanged, ("dev", "Alicia"))]

    def test_item_events_forwarded(self):
        subject = Subject(1, "Alice", ["javascript"])
        received = _record(subject)
        subject.items.add("ruby")
        subject.items.remove(0)
        assert [kind for kind, args in received] == [SubjectEvent.itemAdded, SubjectEvent.itemRemoved]

    def test_snapshot(self):
        subject = Subject(1, "Alice", ["javascript", "ruby"])
        snapshot = subject.snapshot()
        assert snapshot == Snapshot(1, "Alice", ("javascript", "ruby"))
        subject.items.add("go")
        subject.setDev("Alicia")
        assert snapshot == Snapshot(1, "Alice", ("javascript", "ruby"))

    def test_load(self):
        subject = Subject()
        received = _record(subject)
        subject.load("2", {"dev": "Bob", "items": [{"name": "lisp"}, {"name": "haskell"}]})
        assert subject.snapshot() == Snapshot("2", "Bob", ("lisp", "haskell"))
        assert received == [(SubjectEvent.freshLoad, ())]

    def test_restoreFrom(self):
        subject = Subject(1, "Alice", ["javascript"])
        oldItems = subject.items
        received = _record(subject)
        subject.restoreFrom(Snapshot(1, "Alicia", ("ruby", "go")))
        assert subject.dev == "Alicia"
        assert subject.items.names() == ["ruby", "go"]
        assert subject.items is not oldItems
        assert received == [(SubjectEvent.stateReplaced, ())]

    def test_restoreFrom_rebinds_items(self):
        subject = Subject(1, "Alice", ["javascript"])
        oldItems = subject.items
        subject.restoreFrom(Snapshot(1, "Alice", ()))
        received = _record(subject)
        oldItems.add("stale")
        assert received == []
        subject.items.add("fresh")
        assert received == [(SubjectEvent.itemAdded, (Item("fresh"), 0))]

    def test_restoreFrom_dict(self):
        subject = Subject()
        subject.restoreFrom({"id": 3, "dev": "Carol", "items": ["smalltalk", {"name": "ruby"}]})
        assert subject.snapshot() == Snapshot(3, "Carol", ("smalltalk", "ruby"))

    @pytest.mark.parametrize("data", [
        {"id": 1, "dev": "Alice"},
        {"id": 1, "dev": "Alice", "items": None},
        {"id": 1, "dev": "Alice", "items": "javascript"},
        {"id": 1, "dev": "Alice", "items": [{"title": "javascript"}]},
        {"id": 1, "dev": "Alice", "items": [42]},
        {"id": 1, "items": []},
        {"id": 1, "dev": None, "items": []},
        ["Alice", []],
    ])
    def test_restoreFrom_malformed(self, data):
        subject = Subject(1, "Alice", ["javascript"])
        received = _record(subject)
        with pytest.raises(SnapshotError):
            subject.restoreFrom(data)
        assert subject.snapshot() == Snapshot(1, "Alice", ("javascript",))
        assert received == []

    def test_restoreFrom_malformed_snapshot(self):
        subject = Subject(1, "Alice", ["javascript"])
        received = _record(subject)
        with pytest.raises(SnapshotError, match="'items'"):
            subject.restoreFrom(Snapshot(2, "Bob", None))
        assert subject.snapshot() == Snapshot(1, "Alice", ("javascript",))
        assert received == []

    def test_load_malformed(self):
        subject = Subject()
        with pytest.raises(SnapshotError, match="'items'"):
            subject.load(1, {"dev": "Alice"})

    def test_repr(self):
        subject = Subject(1, "Alice", ["javascript"])
        assert repr(subject) == "Subject(id=1, dev='Alice', items=['javascript'])"


class TestSnapshot:

    def test_asDict(self):
        snapshot = Snapshot(1, "Alice", ("javascript", "ruby"))
        assert snapshot.asDict() == {
            "id": 1,
            "dev": "Alice",
            "items": [{"name": "javascript"}, {"name": "ruby"}],
        }
        assert Snapshot.fromDict(snapshot.asDict()) == snapshot

    def test_frozen(self):
        snapshot = Snapshot(1, "Alice", ())
        with pytest.raises(AttributeError):
            snapshot.dev = "Bob"

    @pytest.mark.parametrize("dev, items", [
        ("Bob", None),
        ("Bob", "lisp"),
        ("Bob", ["lisp", 42]),
        (None, ["lisp"]),
    ])
    def test_invalid(self, dev, items):
        with pytest.raises(SnapshotError):
            Snapshot(2, dev, items)

    def test_items_are_copied(self):
        names = ["lisp", "haskell"]
        snapshot = Snapshot(2, "Bob", names)
        names.append("clojure")
        assert snapshot.items == ("lisp", "haskell")

    def test_SnapshotError_is_ValueError(self):
        with pytest.raises(ValueError):
            Snapshot.fromDict({})
