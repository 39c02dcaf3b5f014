""" Read and write graphs in a plain text edge list format.

Example:

.. code::

    # A diamond shaped graph
    A -> B C
    B -> D
    C -> D
    node X
    exit D

Each line holds one statement:

- `A -> B C` adds edges from A to B and from A to C
- `node X` declares node X without adding edges
- `exit D E` designates D and E as exit nodes

Nodes are numbered in the order in which they are first mentioned.
"""

import logging
import re
from ..common import ParseError
from ..graph.graph import AdjacencyGraph


logger = logging.getLogger('edgelist')
name_pattern = re.compile(r'^[A-Za-z0-9_.$@%]+$')


class EdgeListReader:
    """ Parse the edge list format into an `AdjacencyGraph` """
    def __init__(self):
        self.graph = None
        self.names = None
        self._numbers = None

    def read(self, f):
        """ Read a graph, returns the graph and the list of node names """
        self.graph = AdjacencyGraph()
        self.names = []
        self._numbers = {}
        for row, line in enumerate(f, 1):
            self.parse_line(line, row)
        logger.debug(
            'read graph with %s nodes', self.graph.num_nodes())
        return self.graph, self.names

    def get_node(self, name, row):
        if not name_pattern.match(name):
            raise ParseError('Invalid node name "{}"'.format(name), row)
        if name not in self._numbers:
            self._numbers[name] = self.graph.new_node()
            self.names.append(name)
        return self._numbers[name]

    def parse_line(self, line, row):
        line = line.split('#', 1)[0].strip()
        if not line:
            return

        if '->' in line:
            source, _, targets = line.partition('->')
            source = source.strip()
            if not source or ' ' in source:
                raise ParseError('Expected a single source node', row)
            targets = targets.split()
            if not targets:
                raise ParseError('Expected target nodes after "->"', row)
            n = self.get_node(source, row)
            for target in targets:
                self.graph.add_edge(n, self.get_node(target, row))
        else:
            keyword, *names = line.split()
            if keyword == 'node':
                if not names:
                    raise ParseError('Expected node names', row)
                for name in names:
                    self.get_node(name, row)
            elif keyword == 'exit':
                if not names:
                    raise ParseError('Expected exit node names', row)
                for name in names:
                    self.graph.mark_exit(self.get_node(name, row))
            else:
                raise ParseError(
                    'Unexpected "{}", expected "->", "node" or "exit"'.format(
                        keyword), row)


def read_graph(f):
    """ Read a graph in edge list format.

    Args:
        f: a filename or a file like object

    Returns:
        the graph and the list of node names, indexed by node number.
    """
    if isinstance(f, str):
        with open(f) as source:
            return EdgeListReader().read(source)
    return EdgeListReader().read(f)


def write_graph(graph, names=None, f=None):
    """ Write a graph in edge list format.

    Exit nodes are written explicitly, so reading the text back gives the
    same exit nodes.
    """
    if names is None:
        names = ['n{}'.format(node) for node in range(graph.num_nodes())]
    for node in range(graph.num_nodes()):
        successors = graph.successors(node)
        if successors:
            print(
                '{} -> {}'.format(
                    names[node], ' '.join(names[s] for s in successors)),
                file=f)
        else:
            print('node {}'.format(names[node]), file=f)
    exit_nodes = sorted(graph.exit_nodes())
    if exit_nodes:
        print('exit {}'.format(' '.join(names[n] for n in exit_nodes)), file=f)
