from ..exception import StaleHandleError

class NodeHandle(object):
    """Read-only, non-owning reference to a node of a BSTree.

    A handle only exposes the stored key. It becomes stale once the tree that
    issued it is cleared.
    """
    __slots__ = ('_tree', '_node', '_generation')

    def __init__(self, tree, node):
        self._tree = tree
        self._node = node
        self._generation = tree._generation

    @property
    def valid(self):
        return self._generation == self._tree._generation

    @property
    def key(self):
        if not self.valid:
            raise StaleHandleError()
        return self._node.key

    def __eq__(self, other):
        if not isinstance(other, NodeHandle):
            return NotImplemented
        return self._node is other._node

    def __hash__(self):
        return id(self._node)

    def __repr__(self):
        if not self.valid:
            return '<NodeHandle (stale)>'
        return '<NodeHandle key=' + repr(self._node.key) + '>'
