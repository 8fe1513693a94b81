from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace
from enum import Enum
from functools import partial
import logging
import typing

from .events import EventSource


logger = logging.getLogger(__name__)


class SnapshotError(ValueError):
    pass


class SubjectEvent(Enum):

    """Notifications triggered by a Subject.

    - freshLoad: the Subject was replaced wholesale from an external source
    - stateReplaced: the Subject was restored from a Snapshot (undo/redo)
    - fieldChanged: the `dev` field was changed
    - itemAdded, itemRemoved: forwarded from the Subject's ItemCollection

    Display components re-render everything on both freshLoad and
    stateReplaced. History components reset on freshLoad only.
    """

    freshLoad = "freshLoad"
    stateReplaced = "stateReplaced"
    fieldChanged = "fieldChanged"
    itemAdded = "itemAdded"
    itemRemoved = "itemRemoved"


@dataclass(frozen=True)
class Item:

    name: str = ""


@dataclass(frozen=True)
class Snapshot:

    """An immutable copy of a Subject's state. The items are stored as a
    tuple of names, so a Snapshot never shares anything mutable with the
    Subject it was taken from.
    """

    id: typing.Any
    dev: str
    items: tuple  # item names, in display order

    def __post_init__(self):
        if not isinstance(self.dev, str):
            raise SnapshotError(f"'dev' must be a string, not {type(self.dev).__name__}")
        items = self.items
        if items is None:
            raise SnapshotError("snapshot has no 'items' list")
        if isinstance(items, (str, bytes)) or not isinstance(items, Sequence):
            raise SnapshotError(f"'items' must be a list, not {type(items).__name__}")
        for index, name in enumerate(items):
            if not isinstance(name, str):
                raise SnapshotError(f"item {index} has no string name: {name!r}")
        # frozen: bypass __setattr__ to store an unaliased copy
        object.__setattr__(self, "items", tuple(items))

    def asDict(self):
        """Return the snapshot as JSON-like data."""
        return {
            "id": self.id,
            "dev": self.dev,
            "items": [{"name": name} for name in self.items],
        }

    @classmethod
    def fromDict(cls, data):
        """Build a Snapshot from JSON-like data, as returned by asDict() or
        by a source. Items may be given as {"name": ...} mappings or as plain
        strings. Raises SnapshotError if the data is incomplete.
        """
        if not isinstance(data, Mapping):
            raise SnapshotError(f"snapshot data must be a mapping, not {type(data).__name__}")
        if "dev" not in data:
            raise SnapshotError("snapshot data has no 'dev' field")
        dev = data["dev"]
        if not isinstance(dev, str):
            raise SnapshotError(f"'dev' must be a string, not {type(dev).__name__}")
        items = data.get("items")
        if items is None:
            raise SnapshotError("snapshot data has no 'items' list")
        if isinstance(items, (str, bytes)) or not isinstance(items, Sequence):
            raise SnapshotError(f"'items' must be a list, not {type(items).__name__}")
        names = []
        for index, item in enumerate(items):
            name = item.get("name") if isinstance(item, Mapping) else item
            if not isinstance(name, str):
                raise SnapshotError(f"item {index} has no string name: {item!r}")
            names.append(name)
        return cls(data.get("id"), dev, tuple(names))


class ItemCollection(EventSource, Sequence):

    """An ordered, observable list of Item records. Duplicate names are
    allowed. Triggers itemAdded and itemRemoved with (item, index) after
    the list has been modified.
    """

    eventKinds = SubjectEvent

    def __init__(self, names=()):
        super().__init__()
        self._items = [Item(name) for name in names]

    def __repr__(self):
        return f"{self.__class__.__name__}({self.names()!r})"

    def __len__(self):
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def names(self):
        return [item.name for item in self._items]

    def add(self, name, index=None):
        if index is None:
            index = len(self._items)
        item = Item(name)
        self._items.insert(index, item)
        self.trigger(SubjectEvent.itemAdded, item, index)
        return item

    def remove(self, index):
        """Remove the item at `index` and return it."""
        if index < 0:
            index += len(self._items)
        if not (0 <= index < len(self._items)):
            raise IndexError("item index out of range")
        item = self._items.pop(index)
        self.trigger(SubjectEvent.itemRemoved, item, index)
        return item

    def removeName(self, name):
        """Remove the first item named `name`. Raises ValueError if there is
        no such item.
        """
        for index, item in enumerate(self._items):
            if item.name == name:
                return self.remove(index)
        raise ValueError(f"no item named {name!r}")


class Subject(EventSource):

    """The record being edited: an id, a display name (`dev`) and an
    ItemCollection.

        >>> s = Subject(1, "Alice", ["javascript", "ruby"])
        >>> s.items.removeName("ruby")
        Item(name='ruby')
        >>> s.snapshot()
        Snapshot(id=1, dev='Alice', items=('javascript',))

    The item collection's notifications are forwarded to the Subject's own
    listeners, also after the collection has been rebuilt by load() or
    restoreFrom().
    """

    eventKinds = SubjectEvent

    def __init__(self, id=None, dev="", items=()):
        super().__init__()
        self.id = id
        self._dev = dev
        self._items = None
        self._setItems(ItemCollection(items))

    def __repr__(self):
        return f"{self.__class__.__name__}(id={self.id!r}, dev={self._dev!r}, items={self._items.names()!r})"

    @property
    def dev(self):
        return self._dev

    def setDev(self, dev):
        if dev == self._dev:
            return
        self._dev = dev
        self.trigger(SubjectEvent.fieldChanged, "dev", dev)

    @property
    def items(self):
        return self._items

    def _setItems(self, items):
        if self._items is not None:
            self.stopListening(self._items)
        self._items = items
        for kind in (SubjectEvent.itemAdded, SubjectEvent.itemRemoved):
            self.listenTo(items, kind, partial(self.trigger, kind))

    def _apply(self, snapshot):
        items = ItemCollection(snapshot.items)
        self.id = snapshot.id
        self._dev = snapshot.dev
        self._setItems(items)

    def snapshot(self):
        return Snapshot(self.id, self._dev, tuple(self._items.names()))

    def load(self, id, data):
        """Replace the Subject's state with `data` fetched from a source,
        and trigger freshLoad.
        """
        snapshot = replace(Snapshot.fromDict(data), id=id)
        self._apply(snapshot)
        logger.debug("loaded %r", self)
        self.trigger(SubjectEvent.freshLoad)

    def restoreFrom(self, snapshot):
        """Replace the Subject's state with `snapshot` (a Snapshot or
        JSON-like data), and trigger stateReplaced. Malformed data raises
        SnapshotError before anything is modified.
        """
        if not isinstance(snapshot, Snapshot):
            snapshot = Snapshot.fromDict(snapshot)
        self._apply(snapshot)
        logger.debug("restored %r", self)
        self.trigger(SubjectEvent.stateReplaced)
