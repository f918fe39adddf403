
class OrdTreeError(Exception):
    def __str__(self):
        return ''.join(map(str, self.args))

class InvalidHandleError(OrdTreeError):
    pass

class ForeignHandleError(InvalidHandleError):
    def __str__(self):
        return "node handle belongs to a different tree"

class StaleHandleError(InvalidHandleError):
    def __str__(self):
        msg = ''.join(map(str, self.args))
        if msg:
            return 'stale node handle: ' + msg
        return 'stale node handle: tree was cleared after it was issued'

class TreeModifiedError(OrdTreeError):
    def __str__(self):
        return 'tree modified during traversal'

class InvariantError(OrdTreeError):
    def __init__(self, node_key, msg):
        super(InvariantError, self).__init__(node_key, msg)
        self.node_key = node_key
        self.msg = msg

    def __str__(self):
        return 'invariant violated at key ' + repr(self.node_key) + ': ' + str(self.msg)
