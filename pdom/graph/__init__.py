""" Graph algorithms module.

"""

from .graph import IndexedGraph, AdjacencyGraph
from .digraph import DiGraph, DiNode
from .cfg import ControlFlowGraph, ControlFlowNode
from .algorithm.post_dominators import post_dominators, PostDominators


__all__ = (
    'IndexedGraph', 'AdjacencyGraph', 'DiGraph', 'DiNode',
    'ControlFlowGraph', 'ControlFlowNode', 'post_dominators',
    'PostDominators')
