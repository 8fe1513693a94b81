from enum import Enum
import logging

from .events import EventSource
from .subject import SubjectEvent


logger = logging.getLogger(__name__)


class HistoryStackError(Exception):
    pass


class HistoryEvent(Enum):

    reset = "reset"
    save = "save"
    undo = "undo"
    redo = "redo"


# Subject notifications that record a new state.
SAVE_TRIGGERS = (
    SubjectEvent.fieldChanged,
    SubjectEvent.itemAdded,
    SubjectEvent.itemRemoved,
)


class HistoryStack(EventSource):

    """A HistoryStack keeps a timeline of snapshots of one Subject, and can
    step back and forth through it.

        >>> from snapundo.subject import Subject
        >>> subject = Subject(1, "Alice", ["javascript", "ruby", "python"])
        >>> history = HistoryStack(subject)

    Every change to the subject is recorded as a new snapshot:

        >>> _ = subject.items.removeName("ruby")
        >>> len(history.states), history.cursor
        (2, 1)

    undo() restores the previous snapshot onto the subject, redo() the next
    one:

        >>> history.undo()
        >>> subject.items.names()
        ['javascript', 'ruby', 'python']
        >>> history.redo()
        >>> subject.items.names()
        ['javascript', 'python']

    A change made after an undo discards the snapshots after the cursor, so
    they can't be redone anymore:

        >>> history.undo()
        >>> _ = subject.items.add("go")
        >>> history.canRedo()
        False
        >>> len(history.states)
        2

    Calling undo() or redo() when there is nothing to undo or redo does
    nothing.

    When the subject is loaded from its source (a freshLoad notification)
    the timeline is reset to the newly loaded state. Restoring a snapshot
    triggers the subject's stateReplaced notification instead, which the
    HistoryStack does not listen to.

    The HistoryStack triggers reset, save, undo and redo notifications of
    its own, which can be used to update views.
    """

    eventKinds = HistoryEvent

    def __init__(self, subject):
        super().__init__()
        self.subject = subject
        self.states = []
        self.cursor = 0
        self._restoring = False
        self.reset()
        self.startListening()

    def startListening(self):
        assert not self._listeningTo, "already listening"
        self.listenTo(self.subject, SubjectEvent.freshLoad, self._subjectLoaded)
        for kind in SAVE_TRIGGERS:
            self.listenTo(self.subject, kind, self._subjectChanged)

    def _subjectLoaded(self, *args):
        self.reset()

    def _subjectChanged(self, *args):
        self.save()

    def reset(self):
        """Discard the timeline and start a new one with the subject's
        current state.
        """
        self.states = [self.subject.snapshot()]
        self.cursor = 0
        logger.debug("history reset for subject %r", self.subject.id)
        self.trigger(HistoryEvent.reset)

    def save(self):
        """Append the subject's current state to the timeline. If the cursor
        isn't at the end of the timeline, the states after the cursor are
        discarded first.
        """
        if self._restoring:
            raise HistoryStackError("can't save while restoring a snapshot")
        numDiscarded = len(self.states) - self.cursor - 1
        if numDiscarded:
            del self.states[self.cursor + 1:]
            logger.debug("discarded %d redo states", numDiscarded)
        self.states.append(self.subject.snapshot())
        self.cursor = len(self.states) - 1
        self.trigger(HistoryEvent.save)

    def canUndo(self):
        return self.cursor > 0

    def canRedo(self):
        return self.cursor < len(self.states) - 1

    def undoInfo(self):
        """Return the snapshot undo() would restore, or None if there is
        nothing to undo.
        """
        if self.canUndo():
            return self.states[self.cursor - 1]
        else:
            return None

    def redoInfo(self):
        """Return the snapshot redo() would restore, or None if there is
        nothing to redo.
        """
        if self.canRedo():
            return self.states[self.cursor + 1]
        else:
            return None

    def undo(self):
        if not self.canUndo():
            return
        self._step(-1)
        self.trigger(HistoryEvent.undo)

    def redo(self):
        if not self.canRedo():
            return
        self._step(1)
        self.trigger(HistoryEvent.redo)

    def _step(self, delta):
        # Restoring modifies the subject; we must not record that as a new
        # state, so we don't listen while doing it. The cursor only moves
        # once the restore has succeeded.
        index = self.cursor + delta
        snapshot = self.states[index]
        with self.suspendListening():
            logger.debug("restoring state %d of %d", index, len(self.states))
            self.restore(snapshot)
            if self.subject.snapshot() != snapshot:
                raise HistoryStackError("subject was modified while restoring a snapshot")
        self.cursor = index

    def restore(self, snapshot):
        """Apply `snapshot` to the subject. The subject triggers
        stateReplaced, not freshLoad, so the timeline is not reset.

        This only applies the snapshot: the cursor stays where it is and
        nothing is recorded, so unless `snapshot` is `states[cursor]` the
        subject no longer matches the current state. Use undo() and redo()
        to move through the timeline.
        """
        self._restoring = True
        try:
            self.subject.restoreFrom(snapshot)
        finally:
            self._restoring = False
