"""# snapundo

Snapshot based undo/redo for an observed record.

A Subject is a small record (an id, a display name and an ordered list of
items) that triggers a notification after each change. A HistoryStack
listens to those notifications and stores a full snapshot of the Subject
after every change. Stepping back and forth through the snapshots restores
them onto the Subject.

    >>> subject = Subject(1, "Alice", ["javascript", "ruby", "python"])
    >>> history = HistoryStack(subject)
    >>> _ = subject.items.removeName("ruby")
    >>> history.undo()
    >>> subject.items.names()
    ['javascript', 'ruby', 'python']
    >>> history.redo()
    >>> subject.items.names()
    ['javascript', 'python']

Restoring a snapshot must not itself be recorded as a change. The Subject
therefore has two different notifications for "my whole state was
replaced": freshLoad, when it was loaded from a source, and stateReplaced,
when a snapshot was restored. Views re-render on both; the HistoryStack only
resets its timeline on freshLoad. While restoring, the HistoryStack also
stops listening to the Subject altogether.

A RecentList keeps the last few distinct subjects that were loaded, most
recent first:

    >>> recent = RecentList(maxSize=2)
    >>> recent.follow(subject)
    >>> for id, name in [(1, "Alice"), (2, "Bob"), (1, "Alice")]:
    ...     subject.load(id, {"dev": name, "items": []})
    ...
    >>> [entry.label for entry in recent.list()]
    ['Alice', 'Bob']
"""

from .historyStack import HistoryStack, HistoryStackError
from .recentList import RecentEntry, RecentList
from .subject import Snapshot, SnapshotError, Subject

__all__ = [
    "HistoryStack",
    "HistoryStackError",
    "RecentEntry",
    "RecentList",
    "Snapshot",
    "SnapshotError",
    "Subject",
]

try:
    from ._version import version as __version__
except ImportError:
    __version__ = "<unknown>"
