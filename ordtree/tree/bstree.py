from .. import log
from ..exception import (
        InvalidHandleError,
        ForeignHandleError,
        StaleHandleError,
        TreeModifiedError,
        InvariantError
    )
from ..result import NOT_FOUND, EMPTY_TREE
from ..util import default_less
from . import traversal
from .handle import NodeHandle

DEFAULT_DEPTH_WARNING = 1000

class BSTreeNode(object):
    """A binary search tree node.

    left and right own the children. parent is a back-reference that is only
    followed upwards (successor/predecessor), never when tearing down.
    """

    def __init__(self, k, nil=None):
        self.key = k

        self.left = nil
        self.right = nil
        self.parent = nil

    def release(self, nil):
        """Unlinks the node from the tree.

        Only called by BSTree.clear(), after both children have been released.
        """
        self.left = nil
        self.right = nil
        self.parent = nil

class BSTree(object):
    """An unbalanced binary search tree ordered by an injected comparator.

    less(a, b) must be a strict total order on the keys (default: a < b).
    Keys that compare equal are stored to the right of each other, so
    duplicates are kept in insertion order.
    """

    def __init__(self, iterable=None, less=None, node_type=BSTreeNode,
            depth_warning=DEFAULT_DEPTH_WARNING):
        self.node_type = node_type
        self.less = less if less is not None else default_less
        self.depth_warning = depth_warning
        self.nil = self.node_type(k=None)
        self.nil.left = self.nil.right = self.nil.parent = self.nil
        self.root = self.nil

        self._size = 0
        # bumped by every mutation, checked by running traversals
        self._modcount = 0
        # bumped by clear(), invalidates issued handles
        self._generation = 0
        self._warned_depth = False

        if iterable is not None:
            for k in iterable:
                self.insert(k)

    @classmethod
    def seeded(cls, k, less=None, **kwargs):
        """Creates a tree holding the single key k."""
        return cls((k,), less=less, **kwargs)

    def __repr__(self):
        return "<{0} size={1:d}>".format(type(self).__name__, self._size)

    def __len__(self):
        return self._size

    def __iter__(self):
        return self.inorder_keys()

    def __contains__(self, k):
        return self.contains(k)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, tb):
        self.clear()
        return False

    def size(self):
        """Returns the number of nodes stored in the tree.

        Time complexity: O(1)"""
        return self._size

    def is_empty(self):
        return self.root is self.nil

    def _handle(self, x):
        return NodeHandle(self, x)

    def _node_of(self, h):
        if not isinstance(h, NodeHandle):
            raise InvalidHandleError("expected a node handle, got ", repr(h))
        if h._tree is not self:
            raise ForeignHandleError()
        if not h.valid:
            raise StaleHandleError()
        return h._node

    def insert(self, k):
        """Inserts key k as a new leaf. Equal keys go to the right subtree.

        Returns a handle to the new node.
        Time complexity: O(h)"""
        new = self.node_type(k=k, nil=self.nil)
        y = self.nil
        x = self.root
        went_left = False
        depth = 1
        while x is not self.nil:
            y = x
            depth += 1
            went_left = self.less(k, x.key)
            if went_left:
                x = x.left
            else:
                x = x.right

        new.parent = y
        if y is self.nil:
            self.root = new
        elif went_left:
            y.left = new
        else:
            y.right = new

        self._size += 1
        self._modcount += 1
        log.debug3("insert: key ", k, " at depth ", depth)
        self._check_depth(depth)
        return self._handle(new)

    def _check_depth(self, depth):
        if self.depth_warning is None or self._warned_depth:
            return
        if depth >= self.depth_warning:
            self._warned_depth = True
            log.warn("tree depth reached ", depth, " with ", self._size,
                    " keys\n", "insertion order is degenerating the tree, ",
                    "operations will approach O(n)")

    def _find_node(self, k):
        x = self.root
        while x is not self.nil:
            if self.less(k, x.key):
                x = x.left
            elif self.less(x.key, k):
                x = x.right
            else:
                return x
        return x

    def find(self, k):
        """Finds a node with key k. Returns NOT_FOUND if k is not found.

        Time complexity: O(h)"""
        x = self._find_node(k)
        return self._handle(x) if x is not self.nil else NOT_FOUND

    def contains(self, k):
        return self._find_node(k) is not self.nil

    def _minimum(self, x):
        while x.left is not self.nil:
            x = x.left
        return x

    def _maximum(self, x):
        while x.right is not self.nil:
            x = x.right
        return x

    def minimum(self):
        """Finds the node with the minimal key

        Returns EMPTY_TREE if the tree is empty.
        Time complexity: O(h)"""
        if self.root is self.nil:
            return EMPTY_TREE
        return self._handle(self._minimum(self.root))

    def maximum(self):
        """Finds the node with the maximum key

        Returns EMPTY_TREE if the tree is empty.
        Time complexity: O(h)"""
        if self.root is self.nil:
            return EMPTY_TREE
        return self._handle(self._maximum(self.root))

    def _successor(self, x):
        if x.right is not self.nil:
            return self._minimum(x.right)
        y = x.parent
        while y is not self.nil and x is y.right:
            x = y
            y = y.parent
        return y

    def _predecessor(self, x):
        if x.left is not self.nil:
            return self._maximum(x.left)
        y = x.parent
        while y is not self.nil and x is y.left:
            x = y
            y = y.parent
        return y

    def successor(self, h):
        """Finds the successor of the node behind handle h in sorted order

        Returns None if h refers to the last node, EMPTY_TREE if h is
        EMPTY_TREE.
        Time complexity: O(h)"""
        if h is EMPTY_TREE:
            return EMPTY_TREE
        y = self._successor(self._node_of(h))
        return self._handle(y) if y is not self.nil else None

    def predecessor(self, h):
        """Finds the predecessor of the node behind handle h in sorted order

        Returns None if h refers to the first node, EMPTY_TREE if h is
        EMPTY_TREE.
        Time complexity: O(h)"""
        if h is EMPTY_TREE:
            return EMPTY_TREE
        y = self._predecessor(self._node_of(h))
        return self._handle(y) if y is not self.nil else None

    def _nodes(self, order):
        walk = traversal.walker(order)
        return self._guarded(walk(self.root, self.nil), self._modcount)

    def _guarded(self, nodes, modcount):
        for x in nodes:
            if self._modcount != modcount:
                raise TreeModifiedError()
            yield x
        if self._modcount != modcount:
            raise TreeModifiedError()

    def inorder_keys(self):
        """Yields all keys in ascending order."""
        return (x.key for x in self._nodes('inorder'))

    def preorder_keys(self):
        """Yields every key before the keys of its subtrees."""
        return (x.key for x in self._nodes('preorder'))

    def postorder_keys(self):
        """Yields every key after the keys of its subtrees."""
        return (x.key for x in self._nodes('postorder'))

    def handles(self, order='inorder'):
        return (self._handle(x) for x in self._nodes(order))

    def clear(self):
        """Releases every node, both children strictly before their parent.

        Handles issued before the call become stale. Returns the number of
        released nodes.
        Time complexity: O(n)"""
        count = 0
        try:
            for x in traversal.postorder_nodes(self.root, self.nil):
                x.release(self.nil)
                count += 1
        finally:
            # a failed release still leaves an empty tree behind
            self.root = self.nil
            self._size = 0
            self._modcount += 1
            self._generation += 1
            self._warned_depth = False
        log.debug1("clear: released ", count, " nodes")
        return count

    def height(self):
        """Returns the number of nodes on the longest path from the root.

        Time complexity: O(n)"""
        if self.root is self.nil:
            return 0
        best = 0
        stack = [(self.root, 1)]
        while stack:
            x, depth = stack.pop()
            if depth > best:
                best = depth
            if x.left is not self.nil:
                stack.append((x.left, depth + 1))
            if x.right is not self.nil:
                stack.append((x.right, depth + 1))
        return best

    def validate(self):
        """Checks ordering, parent links and the node count.

        Raises InvariantError describing the first violation found.
        Time complexity: O(n)"""
        nil = self.nil
        if self.root is nil:
            if self._size != 0:
                raise InvariantError(None, "empty tree reports " +
                        str(self._size) + " nodes")
            return
        if self.root.parent is not nil:
            raise InvariantError(self.root.key, "root has a parent")

        count = 0
        # lo: nearest ancestor we are right of, hi: nearest ancestor we are left of
        stack = [(self.root, None, None)]
        while stack:
            x, lo, hi = stack.pop()
            count += 1
            if count > self._size:
                raise InvariantError(x.key, "more nodes reachable than inserted")
            if lo is not None and self.less(x.key, lo.key):
                raise InvariantError(x.key, "ordered before ancestor " +
                        repr(lo.key) + " but stored in its right subtree")
            if hi is not None and not self.less(x.key, hi.key):
                raise InvariantError(x.key, "not ordered before ancestor " +
                        repr(hi.key) + " but stored in its left subtree")
            if x.left is not nil and x.left is x.right:
                raise InvariantError(x.key, "left and right child are the same node")
            if x.left is not nil:
                if x.left.parent is not x:
                    raise InvariantError(x.left.key, "parent link does not point back")
                stack.append((x.left, lo, x))
            if x.right is not nil:
                if x.right.parent is not x:
                    raise InvariantError(x.right.key, "parent link does not point back")
                stack.append((x.right, x, hi))

        if count != self._size:
            raise InvariantError(None, "reached " + str(count) + " nodes, expected " +
                    str(self._size))
