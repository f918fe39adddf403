"""Explicit-stack traversals over the owned child links of a tree.

The generators take the start node x and the tree's nil sentinel and yield
nodes. Stack depth grows with tree height on the heap, so degenerate trees do
not hit the interpreter recursion limit.
"""

def inorder_nodes(x, nil):
    """Yields the subtree rooted at x in left, self, right order.

    Time complexity: O(n)
    """
    stack = []
    while stack or x is not nil:
        if x is not nil:
            stack.append(x)
            x = x.left
        else:
            x = stack.pop()
            yield x
            x = x.right

def preorder_nodes(x, nil):
    """Yields the subtree rooted at x in self, left, right order.

    Time complexity: O(n)
    """
    if x is nil:
        return
    stack = [x]
    while stack:
        x = stack.pop()
        yield x
        # right first so that left is popped first
        if x.right is not nil:
            stack.append(x.right)
        if x.left is not nil:
            stack.append(x.left)

def postorder_nodes(x, nil):
    """Yields the subtree rooted at x in left, right, self order.

    A node is yielded only after both of its children, and the generator
    does not look at a yielded node's links again, so the consumer may
    unlink it before resuming.

    Time complexity: O(n)
    """
    stack = []
    last = nil
    while stack or x is not nil:
        if x is not nil:
            stack.append(x)
            x = x.left
        else:
            top = stack[-1]
            if top.right is not nil and top.right is not last:
                x = top.right
            else:
                yield top
                last = stack.pop()

ORDERS = {
    'inorder': inorder_nodes,
    'preorder': preorder_nodes,
    'postorder': postorder_nodes,
}

def walker(order):
    try:
        return ORDERS[order]
    except KeyError:
        raise ValueError("unknown traversal order: " + repr(order))
