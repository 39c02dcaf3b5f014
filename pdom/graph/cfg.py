""" Control flow graph algorithms.

Functions present:

- post dominators
- immediate post dominators
- control dependence

"""

import logging
from collections import namedtuple
from ..common import InvalidStateError
from .digraph import DiGraph, DiNode
from .graph import AdjacencyGraph
from .algorithm.post_dominators import post_dominators

ControlDependence = namedtuple('ControlDependence', ['controller', 'node'])
logger = logging.getLogger('cfg')


def indexed_graph_to_cfg(graph, names=None):
    """ Take an indexed graph and create a cfg of it.

    Returns the cfg and the list of cfg nodes, indexed by node number.
    """
    cfg = ControlFlowGraph()
    nodes = []
    for index in range(graph.num_nodes()):
        name = names[index] if names else str(index)
        nodes.append(ControlFlowNode(cfg, name=name))

    for index, node in enumerate(nodes):
        for successor in graph.successors(index):
            node.add_edge(nodes[successor])

    for index in sorted(graph.exit_nodes()):
        cfg.add_exit_node(nodes[index])

    logger.debug(
        'created cfg with %s nodes and %s edges',
        len(cfg), cfg.get_number_of_edges())
    return cfg, nodes


class ControlFlowGraph(DiGraph):
    """ Control flow graph.

    Has methods to query properties of the control flow graph and its nodes.

    Such as:
    - Post dominators
    - Immediate post dominators
    - Control dependence

    Exit nodes can be designated with `add_exit_node`. When none are
    designated, every node without successors is an exit node.
    """
    def __init__(self):
        super().__init__()
        self._exit_nodes = {}

        # Post dominator info:
        self._ipdom = None  # Immediate post dominators
        self._post_dominators = None

    def add_node(self, node):
        super().add_node(node)
        self._invalidate()

    def del_node(self, node):
        super().del_node(node)
        self._exit_nodes.pop(node, None)
        self._invalidate()

    def add_edge(self, n, m):
        super().add_edge(n, m)
        self._invalidate()

    def del_edge(self, n, m):
        super().del_edge(n, m)
        self._invalidate()

    def add_exit_node(self, node):
        """ Designate a node as exit of this graph """
        assert node in self.nodes
        self._exit_nodes[node] = None
        self._invalidate()

    @property
    def exit_nodes(self):
        """ Get the exit nodes of this graph """
        if self._exit_nodes:
            return list(self._exit_nodes)
        return [node for node in self.nodes if not self.successors(node)]

    def _invalidate(self):
        self._ipdom = None
        self._post_dominators = None

    def to_indexed_graph(self):
        """ Create a dense integer copy of this graph.

        Returns the copy and the list of nodes in numbering order.
        """
        nodes = list(self.nodes)
        numbering = {node: index for index, node in enumerate(nodes)}
        graph = AdjacencyGraph(len(nodes))
        for node in nodes:
            for successor in self.successors(node):
                graph.add_edge(numbering[node], numbering[successor])
        for node in self.exit_nodes:
            graph.mark_exit(numbering[node])
        return graph, nodes

    def post_dominator_info(self):
        """ Get the immediate post dominators of the dense graph copy """
        if self._post_dominators is None:
            self._calculate_post_dominator_info()
        return self._post_dominators

    def _calculate_post_dominator_info(self):
        graph, nodes = self.to_indexed_graph()
        self._post_dominators = post_dominators(graph)
        self._ipdom = {}
        if self._post_dominators.is_constructed():
            for index, ipdom in self._post_dominators.items():
                self._ipdom[nodes[index]] = \
                    None if ipdom is None else nodes[ipdom]
        logger.debug(
            'calculated post dominators for cfg with %s nodes', len(nodes))

    def get_immediate_post_dominator(self, node):
        """ Retrieve a nodes immediate post dominator.

        Returns None if the node has no immediate post dominator.
        """
        info = self.post_dominator_info()
        if not info.is_constructed():
            raise InvalidStateError('Control flow graph has no exit nodes')
        return self._ipdom[node]

    def post_dominates(self, one, other):
        """ Test whether a node post dominates another node """
        node = other
        while node is not None:
            if node is one:
                return True
            ipdom = self.get_immediate_post_dominator(node)
            if ipdom is node:
                # Reached an exit node
                break
            node = ipdom
        return False

    def calculate_control_dependence(self):
        """ Calculate the control dependences of this graph.

        Algorithm from Ferrante, Ottenstein and Warren. For each edge
        (a, b) where b does not post dominate a, all nodes on the post
        dominator chain from b up to the immediate post dominator of a are
        control dependent on a.

        Returns a dict mapping each node to the set of nodes controlling it.
        """
        dependences = {node: set() for node in self.nodes}
        for a in self.nodes:
            limit = self.get_immediate_post_dominator(a)
            for b in self.successors(a):
                if a is not b and self.post_dominates(b, a):
                    continue
                node = b
                while node is not None and node is not limit:
                    dependences[node].add(a)
                    ipdom = self.get_immediate_post_dominator(node)
                    if ipdom is node:
                        break
                    node = ipdom
        return dependences

    def control_dependences(self):
        """ List all control dependences as (controller, node) pairs """
        dependences = self.calculate_control_dependence()
        return [
            ControlDependence(controller, node)
            for node in self.nodes
            for controller in self.nodes
            if controller in dependences[node]]


class ControlFlowNode(DiNode):
    def __init__(self, graph, name=None):
        super().__init__(graph)
        self.name = name

    def post_dominates(self, other):
        """ Test whether this node post-dominates the other node """
        return self.graph.post_dominates(self, other)

    @property
    def immediate_post_dominator(self):
        """ The immediate post dominator of this node, or None """
        return self.graph.get_immediate_post_dominator(self)

    def __repr__(self):
        value = self.name if self.name else id(self)
        return 'CFG-node({})'.format(value)
