""" Immediate post-dominator analysis for control flow graphs, implemented
in pure Python.

Example usage:

>>> from pdom.graph.graph import AdjacencyGraph
>>> from pdom.graph.algorithm.post_dominators import post_dominators
>>> graph = AdjacencyGraph(3)
>>> graph.add_edge(0, 1)
>>> graph.add_edge(1, 2)
>>> post_dominators(graph).immediate_post_dominator(0)
1

"""

# Define version here. Used in docs, and setup script:
__version_info__ = (0, 1, 0)
__version__ = '.'.join(map(str, __version_info__))
