import copy
import logging


logger = logging.getLogger(__name__)


DEVELOPERS = {
    "1": {
        "dev": "Alice",
        "items": [{"name": "javascript"}, {"name": "ruby"}, {"name": "python"}],
    },
    "2": {
        "dev": "Bob",
        "items": [{"name": "lisp"}, {"name": "haskell"}, {"name": "clojure"}],
    },
    "3": {
        "dev": "Carol",
        "items": [{"name": "smalltalk"}, {"name": "ruby"}, {"name": "coffeescript"}],
    },
}


class MemorySource:

    """An in-memory stand-in for a server holding subject records, keyed by
    id. Ids are looked up as strings, so 1 and "1" find the same record.
    """

    def __init__(self, records=None):
        self.records = DEVELOPERS if records is None else records

    def fetch(self, id):
        """Return a copy of the record for `id`. Raises KeyError for unknown
        ids.
        """
        key = str(id)
        if key not in self.records:
            raise KeyError(f"no record with id {id!r}")
        logger.debug("fetched record %r", key)
        return copy.deepcopy(self.records[key])
