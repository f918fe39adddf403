__version__ = "0.1.0"

from .tree.bstree import BSTree, BSTreeNode, DEFAULT_DEPTH_WARNING
from .tree.handle import NodeHandle
from .result import NOT_FOUND, EMPTY_TREE
from .exception import (
        OrdTreeError,
        InvalidHandleError,
        ForeignHandleError,
        StaleHandleError,
        TreeModifiedError,
        InvariantError
    )
