#
# Display components. Each view renders its model to an HTML fragment in
# its `output` attribute, and re-renders on the notifications it is bound to.
#

from html import escape

from .historyStack import HistoryEvent
from .recentList import RecentEvent
from .subject import SubjectEvent


class View:

    def __init__(self, model):
        self.model = model
        self.output = ""

    def bind(self, kinds):
        for kind in kinds:
            self.model.on(kind, self.render)

    def template(self):
        raise NotImplementedError

    def render(self, *args):
        self.output = self.template()
        return self


class NameView(View):

    def __init__(self, subject):
        super().__init__(subject)
        self.bind([SubjectEvent.freshLoad, SubjectEvent.stateReplaced, SubjectEvent.fieldChanged])

    def template(self):
        return f"<h1>{escape(self.model.dev)}</h1>"


class ItemListView(View):

    """Renders the subject's items as a list. Item notifications are
    forwarded by the subject, so this view keeps working when the item
    collection is replaced by a load or a restore.
    """

    def __init__(self, subject):
        super().__init__(subject)
        self.bind([
            SubjectEvent.freshLoad,
            SubjectEvent.stateReplaced,
            SubjectEvent.itemAdded,
            SubjectEvent.itemRemoved,
        ])

    def template(self):
        lines = "".join(f"<li>{escape(item.name)}</li>" for item in self.model.items)
        return f"<ul>{lines}</ul>"

    def addItem(self, name):
        self.model.items.add(name)


def _button(label, enabled):
    return f"<button{'' if enabled else ' disabled'}>{label}</button>"


class UndoView(View):

    def __init__(self, history):
        super().__init__(history)
        self.bind(HistoryEvent)

    def template(self):
        return _button("undo", self.model.canUndo()) + _button("redo", self.model.canRedo())

    def clickUndo(self):
        self.model.undo()

    def clickRedo(self):
        self.model.redo()


class RecentView(View):

    def __init__(self, recent):
        super().__init__(recent)
        self.bind(RecentEvent)

    def template(self):
        links = "".join(
            f'<li><a href="#developers/{escape(str(entry.id))}">{escape(entry.label)}</a></li>'
            for entry in self.model.list()
        )
        return f"<ol>{links}</ol>"
