import logging

from .historyStack import HistoryStack
from .recentList import DEFAULT_RECENT_SIZE, RecentList
from .source import MemorySource
from .subject import Subject
from .views import ItemListView, NameView, RecentView, UndoView


logger = logging.getLogger(__name__)


class Workspace:

    """Ties a Subject to its views, its history and a list of recently
    visited subjects. findById() loads another record from the source into
    the same Subject instance.

        >>> ws = Workspace()
        >>> ws.findById(1)
        >>> ws.nameView.output
        '<h1>Alice</h1>'
        >>> ws.itemListView.addItem("go")
        >>> ws.undoView.output
        '<button>undo</button><button disabled>redo</button>'
    """

    def __init__(self, source=None, recentSize=DEFAULT_RECENT_SIZE):
        self.source = MemorySource() if source is None else source
        self.currentDeveloper = Subject()
        self.nameView = NameView(self.currentDeveloper)
        self.itemListView = ItemListView(self.currentDeveloper)

        self.history = HistoryStack(self.currentDeveloper)
        self.undoView = UndoView(self.history)

        self.recent = RecentList(maxSize=recentSize)
        self.recent.follow(self.currentDeveloper)
        self.recentView = RecentView(self.recent)

        for view in self.views():
            view.render()

    def views(self):
        return [self.nameView, self.itemListView, self.undoView, self.recentView]

    def findById(self, id):
        """Load the record for `id` into the current subject. Ids are
        strings, like the ids in a route; 1 and "1" are the same record.
        """
        id = str(id)
        data = self.source.fetch(id)
        logger.debug("visiting %r", id)
        self.currentDeveloper.load(id, data)
