from dataclasses import dataclass
from enum import Enum
import logging
import typing

from .events import EventSource
from .subject import SubjectEvent


logger = logging.getLogger(__name__)


DEFAULT_RECENT_SIZE = 5


class RecentEvent(Enum):

    add = "add"


@dataclass(frozen=True)
class RecentEntry:

    id: typing.Any
    label: str = ""


class RecentList(EventSource):

    """The last `maxSize` distinct subjects that were visited, most recent
    first. Adding an id that is already present moves it to the front.

        >>> recent = RecentList(maxSize=3)
        >>> for id in [1, 2, 3, 1, 4]:
        ...     recent.add(RecentEntry(id, f"dev {id}"))
        ...
        >>> [entry.id for entry in recent.list()]
        [4, 1, 3]
    """

    eventKinds = RecentEvent

    def __init__(self, maxSize=DEFAULT_RECENT_SIZE):
        super().__init__()
        if maxSize < 1:
            raise ValueError(f"maxSize must be at least 1, not {maxSize}")
        self.maxSize = maxSize
        self.recent = []  # oldest first

    def add(self, entry):
        self.recent = [e for e in self.recent if e.id != entry.id]
        self.recent.append(entry)
        del self.recent[:-self.maxSize]
        logger.debug("recent: %r", [e.id for e in self.recent])
        self.trigger(RecentEvent.add, entry)

    def list(self):
        """Return a copy of the entries, most recent first."""
        return self.recent[::-1]

    def follow(self, subject):
        """Add the subject to the list each time it is loaded from its
        source. Restoring the subject from history doesn't count as a visit.
        """
        def subjectLoaded(*args):
            self.add(RecentEntry(subject.id, subject.dev))
        self.listenTo(subject, SubjectEvent.freshLoad, subjectLoaded)
