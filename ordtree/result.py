
class ResultState(object):
    """A query outcome that carries no node.

    Result states are falsy so that callers can write ``if h:`` to test for a
    handle. Compare with ``is`` against the module-level singletons.
    """
    __slots__ = ('name',)

    def __init__(self, name):
        self.name = name

    def __bool__(self):
        return False

    def __repr__(self):
        return self.name


NOT_FOUND = ResultState('NOT_FOUND')
EMPTY_TREE = ResultState('EMPTY_TREE')
