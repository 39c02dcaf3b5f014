""" Directed graph.

In a directed graph, the edges have a direction.

Nodes, successors and predecessors are kept in insertion order. The dense
numbering of a control flow graph follows this order, so post dominator
results and reports are the same on every run.
"""

from collections import defaultdict
from .graph import BaseGraph, Node


class DiGraph(BaseGraph):
    """ Directed graph. """
    def __init__(self):
        super().__init__()
        self.suc_map = defaultdict(dict)
        self.pre_map = defaultdict(dict)

    def del_node(self, node):
        """ Remove a node from the graph """
        for m in list(self.successors(node)):
            self.del_edge(node, m)

        for m in list(self.predecessors(node)):
            self.del_edge(m, node)
        del self.nodes[node]

    def add_edge(self, n, m):
        """ Add a directed edge from n to m """
        assert n in self.nodes
        assert m in self.nodes
        if not self.has_edge(n, m):
            self.suc_map[n][m] = None
            self.pre_map[m][n] = None

    def del_edge(self, n, m):
        """ Delete a directed edge """
        assert n in self.nodes
        assert m in self.nodes
        if self.has_edge(n, m):
            del self.suc_map[n][m]
            del self.pre_map[m][n]

    def has_edge(self, n, m):
        """ Test if there exist and edge between n and m """
        return m in self.suc_map[n]

    def get_number_of_edges(self):
        return sum(len(self.suc_map[n]) for n in self.nodes)

    def successors(self, node):
        """ Get the successors of the node, in insertion order """
        return list(self.suc_map[node])

    def predecessors(self, node):
        """ Get the predecessors of the node, in insertion order """
        return list(self.pre_map[node])


class DiNode(Node):
    """ Node in a directed graph """
    @property
    def successors(self):
        """ Get the successors of this node """
        return self.graph.successors(self)

    @property
    def predecessors(self):
        """ Get the predecessors of this node """
        return self.graph.predecessors(self)