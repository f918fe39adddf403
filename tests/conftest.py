import io

import pytest

from ordtree import log
from ordtree import BSTree, BSTreeNode

SCENARIO_KEYS = [20, 8, 22, 4, 12, 10, 14]


class CountingNode(BSTreeNode):
    """Records the release order and checks children go first."""
    released = None

    def release(self, nil):
        for child in (self.left, self.right):
            if child is not nil:
                assert child in self.released, \
                    "released {0} before its child {1}".format(self.key, child.key)
        self.released.append(self)
        super(CountingNode, self).release(nil)


@pytest.fixture
def scenario():
    return BSTree(SCENARIO_KEYS)


@pytest.fixture
def counting_node_type():
    class Node(CountingNode):
        released = []
    return Node


@pytest.fixture
def captured_log():
    saved = log.logger
    out = io.StringIO()
    log.logger = log.Logger(loglevel=log.LOG_DEBUG3, logfile=out, colors='never')
    try:
        yield out
    finally:
        log.logger = saved
