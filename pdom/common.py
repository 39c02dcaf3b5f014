"""
   Error handling routines
   Diagnostic utils
"""


logformat = '%(asctime)s | %(levelname)8s | %(name)10.10s | %(message)s'


class PostDominatorError(Exception):
    """ Base class of errors raised when querying post dominator info """
    def __init__(self, msg):
        super().__init__(msg)
        self.msg = msg

    def __repr__(self):
        return '"{}"'.format(self.msg)


class InvalidStateError(PostDominatorError):
    """ Post dominators were queried while they are undefined.

    This happens when the graph has no exit nodes at all. Callers must
    check `is_constructed` before querying.
    """
    pass


class NotFoundError(PostDominatorError, LookupError):
    """ A node has no immediate post dominator """
    def __init__(self, node):
        super().__init__('Node {} has no immediate post dominator'.format(node))
        self.node = node


class ParseError(Exception):
    """ Error in a textual graph description """
    def __init__(self, msg, row=None):
        super().__init__(msg)
        self.msg = msg
        self.row = row

    def __repr__(self):
        return '"{}"'.format(self.msg)

    def __str__(self):
        if self.row is None:
            return self.msg
        return 'line {}: {}'.format(self.row, self.msg)

    def print(self, file=None):
        """ Print the error with its line number """
        print(str(self), file=file)
