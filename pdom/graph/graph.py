""" Graph package.

Two graph flavors live here:

- IndexedGraph / AdjacencyGraph: graphs over dense integer nodes. This is
  the form the post dominator algorithm consumes.
- BaseGraph / Node: graphs of node objects, see also the digraph module.
"""

import abc


def predecessor_lists(graph):
    """ Create a list of predecessor lists, indexed by node.

    Only uses `num_nodes` and `successors`, so it works on any graph
    providing the post dominator interface.
    """
    predecessors = [[] for _ in range(graph.num_nodes())]
    for node in range(graph.num_nodes()):
        for successor in graph.successors(node):
            predecessors[successor].append(node)
    return predecessors


class IndexedGraph(abc.ABC):
    """ Graph whose nodes are the integers 0 .. num_nodes() - 1.

    Implement this interface to run the post dominator algorithm on your
    own graph representation.
    """
    @abc.abstractmethod
    def num_nodes(self):  # pragma: no cover
        """ Get the amount of nodes in this graph """
        raise NotImplementedError()

    @abc.abstractmethod
    def successors(self, node):  # pragma: no cover
        """ Get the successors of the given node """
        raise NotImplementedError()

    @abc.abstractmethod
    def exit_nodes(self):  # pragma: no cover
        """ Get the set of exit nodes, empty when there are none """
        raise NotImplementedError()

    def __len__(self):
        return self.num_nodes()

    def __iter__(self):
        return iter(range(self.num_nodes()))


class AdjacencyGraph(IndexedGraph):
    """ Directed graph stored as lists of successors.

    When no exit nodes are marked, every node without successors is
    considered an exit node.
    """
    def __init__(self, num_nodes=0, exits=None):
        self._successors = [[] for _ in range(num_nodes)]
        self._exits = set()
        if exits:
            for node in exits:
                self.mark_exit(node)

    def __repr__(self):
        return 'AdjacencyGraph({} nodes)'.format(self.num_nodes())

    def num_nodes(self):
        return len(self._successors)

    def new_node(self):
        """ Add a node to the graph and return its number """
        self._successors.append([])
        return len(self._successors) - 1

    def _check_node(self, node):
        assert 0 <= node < self.num_nodes(), \
            'Node {} not in graph'.format(node)

    def add_edge(self, n, m):
        """ Add a directed edge from n to m """
        self._check_node(n)
        self._check_node(m)
        if not self.has_edge(n, m):
            self._successors[n].append(m)

    def has_edge(self, n, m):
        """ Test if there exist and edge between n and m """
        return m in self._successors[n]

    def successors(self, node):
        return tuple(self._successors[node])

    def mark_exit(self, node):
        """ Designate a node as exit node """
        self._check_node(node)
        self._exits.add(node)

    def exit_nodes(self):
        if self._exits:
            return set(self._exits)
        return {
            node for node, successors in enumerate(self._successors)
            if not successors}


class BaseGraph(abc.ABC):
    """ Base graph class for graphs with node objects """
    def __init__(self):
        # Plain dict used as insertion ordered set:
        self.nodes = {}

    def __iter__(self):
        for node in self.nodes:
            yield node

    def __len__(self):
        return len(self.nodes)

    def add_node(self, node):
        """ Add a node to the graph """
        self.nodes[node] = None

    @abc.abstractmethod
    def del_node(self, node):  # pragma: no cover
        """ Remove a node from the graph """
        raise NotImplementedError()

    @abc.abstractmethod
    def add_edge(self, n, m):  # pragma: no cover
        raise NotImplementedError()

    @abc.abstractmethod
    def del_edge(self, n, m):  # pragma: no cover
        raise NotImplementedError()


class Node:
    """ Node in a graph. """
    def __init__(self, graph):
        self.graph = graph
        self.graph.add_node(self)

    def add_edge(self, other):
        """ Create an edge to the other node """
        self.graph.add_edge(self, other)
