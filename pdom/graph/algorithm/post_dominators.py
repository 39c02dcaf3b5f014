""" Calculate immediate post dominators of a graph.

The algorithm works in two phases:

1. Calculate the post dominator set of each node with a fixed point
   iteration over bit sets.
2. Reduce the post dominator sets to immediate post dominators using a
   worklist which is seeded with the exit nodes.

Based on the algorithm from David August's lecture on control flow
analysis:
https://www.cs.princeton.edu/courses/archive/spr04/cos598C/lectures/02-ControlFlow.pdf

If a graph has no exit node, post dominators cannot be calculated. When a
graph has multiple exit nodes, each of them is its own immediate post
dominator.
"""

import logging
from collections import deque
from ...common import InvalidStateError, NotFoundError
from ...utils.bitset import BitSet
from ..graph import predecessor_lists


logger = logging.getLogger('pdom')


class PostDominators:
    """ Immediate post dominators of all nodes in a graph.

    Instances are produced by `post_dominators` and are not modified
    afterwards.
    """
    def __init__(self, immediate_post_dominators, is_constructed):
        self._ipdom = tuple(immediate_post_dominators)
        self._is_constructed = is_constructed

    @classmethod
    def unconstructed(cls):
        return cls((), False)

    def __repr__(self):
        if not self._is_constructed:
            return 'PostDominators(<not constructed>)'
        return 'PostDominators({})'.format(list(self._ipdom))

    def __eq__(self, other):
        if isinstance(other, PostDominators):
            return (self._is_constructed, self._ipdom) == \
                (other._is_constructed, other._ipdom)
        else:
            return False

    def __hash__(self):
        return hash((self._is_constructed, self._ipdom))

    def __len__(self):
        return len(self._ipdom)

    def is_constructed(self):
        """ Test if post dominators could be determined.

        This is False when the graph has no exit nodes.
        """
        return self._is_constructed

    def _check_constructed(self):
        if not self._is_constructed:
            raise InvalidStateError(
                'Immediate post dominators were not constructed')

    def _check_node(self, node):
        if not 0 <= node < len(self._ipdom):
            raise IndexError(
                'Node {} out of range [0, {})'.format(node, len(self._ipdom)))

    def is_found(self, node):
        """ Test if the node has an immediate post dominator.

        Nodes without a path to an exit, or with paths leading to different
        exits without any common node, have none.
        """
        self._check_constructed()
        self._check_node(node)
        return self._ipdom[node] is not None

    def immediate_post_dominator(self, node):
        """ Get the immediate post dominator of a node """
        self._check_constructed()
        self._check_node(node)
        ipdom = self._ipdom[node]
        if ipdom is None:
            raise NotFoundError(node)
        return ipdom

    def items(self):
        """ Iterate over (node, immediate post dominator or None) pairs """
        self._check_constructed()
        return enumerate(self._ipdom)


def post_dominators(graph):
    """ Calculate immediate post dominators of an `IndexedGraph` """
    exit_nodes = set(graph.exit_nodes())
    if not exit_nodes:
        logger.debug('No exit nodes, post dominators are undefined')
        return PostDominators.unconstructed()

    pdom = calculate_post_dominator_sets(graph, exit_nodes)
    ipdom = calculate_immediate_post_dominators(pdom, exit_nodes)
    return PostDominators(ipdom, True)


def exit_reachability(graph, exit_nodes):
    """ Determine which nodes have a path to one of the exit nodes """
    predecessors = predecessor_lists(graph)
    reached = BitSet.from_iterable(graph.num_nodes(), exit_nodes)
    worklist = list(exit_nodes)
    while worklist:
        node = worklist.pop()
        for predecessor in predecessors[node]:
            if predecessor not in reached:
                reached = reached.add(predecessor)
                worklist.append(predecessor)
    return reached


def calculate_post_dominator_sets(graph, exit_nodes):
    """ Calculate the post dominator sets iteratively.

    Returns a list with for each node the set of nodes post dominating it,
    the node itself included.

    Nodes which cannot reach an exit take no part in the iteration. They
    keep the full set, which is neutral for the intersection, and are
    reset to only themselves afterwards.
    """
    total_nodes = graph.num_nodes()
    logger.debug(
        'Computing post dominators of %s nodes with %s exit nodes',
        total_nodes, len(exit_nodes))

    # Initialize pdom for each node to all nodes, except exits,
    # which are post dominated only by themselves.
    universe = BitSet.filled(total_nodes)
    pdom = [
        BitSet.single(total_nodes, node) if node in exit_nodes else universe
        for node in range(total_nodes)]

    reached = exit_reachability(graph, exit_nodes)
    nodes = [
        node for node in range(total_nodes)
        if node in reached and node not in exit_nodes]

    # Run fixed point iteration:
    change = True
    passes = 0
    while change:
        change = False
        passes += 1
        for node in nodes:
            # A node is post dominated by itself and by the intersection
            # of the post dominators of its successors
            tmp = universe
            for successor in graph.successors(node):
                tmp = tmp & pdom[successor]
            tmp = tmp.add(node)

            if tmp != pdom[node]:
                change = True
                pdom[node] = tmp

    for node in range(total_nodes):
        if node not in reached:
            pdom[node] = BitSet.single(total_nodes, node)

    logger.debug('Post dominator sets stable after %s passes', passes)
    return pdom


def calculate_immediate_post_dominators(pdom, exit_nodes):
    """ Reduce post dominator sets to immediate post dominators.

    Starting from the exit nodes, remove a node from every other node's
    post dominators. When this removal leaves a node without post
    dominators, the removed node is its immediate post dominator and the
    node is queued to repeat the process.
    """
    total_nodes = len(pdom)
    ipdom = [None] * total_nodes

    queue = deque()
    queued = set()

    def enqueue(node):
        if node not in queued:
            queued.add(node)
            queue.append(node)

    for exit_node in sorted(exit_nodes):
        enqueue(exit_node)
        ipdom[exit_node] = exit_node  # Exit nodes post dominate themselves.

    # Keep only strict post dominators. Nodes left without any are
    # queued right away.
    spdom = []
    for node, pdoms in enumerate(pdom):
        pdoms = pdoms.discard(node)
        spdom.append(pdoms)
        if not pdoms:
            enqueue(node)

    while queue:
        node = queue.popleft()
        for other in range(total_nodes):
            if node in spdom[other]:
                spdom[other] = spdom[other].discard(node)
                if not spdom[other] and ipdom[other] is None:
                    ipdom[other] = node
                    enqueue(other)

    logger.debug(
        'Found immediate post dominators for %s of %s nodes',
        sum(1 for i in ipdom if i is not None), total_nodes)
    return ipdom
