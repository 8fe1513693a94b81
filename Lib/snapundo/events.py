from contextlib import contextmanager
import logging


logger = logging.getLogger(__name__)


class EventSource:

    """A registry of callbacks, keyed by notification kind.

    Subclasses set `eventKinds` to an Enum class listing the notifications
    they can trigger; registering or triggering anything else is a
    programming error.

        >>> from enum import Enum
        >>> class Kind(Enum):
        ...     ping = "ping"
        ...
        >>> class Pinger(EventSource):
        ...     eventKinds = Kind
        ...
        >>> received = []
        >>> p = Pinger()
        >>> p.on(Kind.ping, received.append)
        >>> p.trigger(Kind.ping, 42)
        >>> received
        [42]

    An EventSource can also subscribe to other sources with listenTo(). It
    keeps track of those subscriptions, so stopListening() can undo them all
    at once, and suspendListening() can take them away for the duration of a
    `with` block.
    """

    eventKinds = None

    def __init__(self):
        self._callbacks = {}
        self._listeningTo = []  # (source, kind, callback)

    def _checkKind(self, kind):
        assert self.eventKinds is not None, f"{type(self).__name__} triggers no events"
        assert isinstance(kind, self.eventKinds), f"unknown event kind for {type(self).__name__}: {kind!r}"

    def on(self, kind, callback, index=None):
        """Call `callback` with the notification arguments each time `kind`
        is triggered. Callbacks are called in list order; `index` inserts the
        callback at that position instead of appending it.
        """
        self._checkKind(kind)
        callbacks = self._callbacks.setdefault(kind, [])
        if index is None:
            callbacks.append(callback)
        else:
            callbacks.insert(index, callback)

    def callbackIndex(self, kind, callback):
        """Return the position of `callback` in the list for `kind`."""
        self._checkKind(kind)
        return self._callbacks.get(kind, []).index(callback)

    def off(self, kind, callback):
        """Remove a callback registered with on(). Removing a callback that
        isn't registered does nothing.
        """
        self._checkKind(kind)
        callbacks = self._callbacks.get(kind, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def trigger(self, kind, *args):
        self._checkKind(kind)
        # Iterate over a copy: callbacks may subscribe or unsubscribe.
        for callback in list(self._callbacks.get(kind, ())):
            callback(*args)

    def listenTo(self, source, kind, callback):
        source.on(kind, callback)
        self._listeningTo.append((source, kind, callback))

    def stopListening(self, source=None):
        """Unsubscribe from everything registered through listenTo(), or only
        from `source` if given.
        """
        remaining = []
        for subscription in self._listeningTo:
            subscribedSource, kind, callback = subscription
            if source is None or subscribedSource is source:
                subscribedSource.off(kind, callback)
            else:
                remaining.append(subscription)
        self._listeningTo = remaining

    @contextmanager
    def suspendListening(self):
        """Returns a context manager during which this object receives no
        notifications from the sources it listens to. All subscriptions are
        restored on exit, also when the block raises, each at its original
        position in its source's callback list.
        """
        subscriptions = list(self._listeningTo)
        positions = [source.callbackIndex(kind, callback) for source, kind, callback in subscriptions]
        self.stopListening()
        logger.debug("%s: suspended %d subscriptions", type(self).__name__, len(subscriptions))
        try:
            yield
        finally:
            # Reinsert in ascending position order so every callback gets its
            # old place back.
            ordered = sorted(zip(positions, subscriptions), key=lambda pair: pair[0])
            for position, (source, kind, callback) in ordered:
                source.on(kind, callback, index=position)
            self._listeningTo.extend(subscriptions)
            logger.debug("%s: resumed listening", type(self).__name__)
