""" Calculate immediate post dominators of a graph in edge list format.

Prints for each node its immediate post dominator, or '-' when the node
has none.
"""

import argparse
import logging
from .base import base_parser, LogSetup
from ..format.edgelist import read_graph
from ..graph.algorithm.post_dominators import post_dominators
from ..graph.cfg import indexed_graph_to_cfg
from ..graph.graph import AdjacencyGraph
from ..common import ParseError
from ..utils.reporting import format_post_dominators
from ..utils.reporting import format_control_dependence


parser = argparse.ArgumentParser(description=__doc__, parents=[base_parser])
parser.add_argument(
    "file",
    metavar="file",
    type=argparse.FileType("r"),
    help="Graph in edge list format",
)
parser.add_argument(
    "--exit",
    metavar="node",
    action="append",
    default=[],
    help="Use the given node as exit node, instead of the exits in the file",
)
parser.add_argument(
    "--control-dependence",
    action="store_true",
    default=False,
    help="Also print the control dependences",
)
logger = logging.getLogger("pdom-cli")


def override_exits(graph, names, exits):
    """ Create a copy of the graph with the given exit nodes """
    numbers = {name: number for number, name in enumerate(names)}
    copy = AdjacencyGraph(graph.num_nodes())
    for node in range(graph.num_nodes()):
        for successor in graph.successors(node):
            copy.add_edge(node, successor)
    for name in exits:
        if name not in numbers:
            raise ParseError('Unknown exit node "{}"'.format(name))
        copy.mark_exit(numbers[name])
    return copy


def pdom(args=None):
    """ Calculate immediate post dominators of a graph """
    args = parser.parse_args(args)
    with LogSetup(args) as log_setup:
        graph, names = read_graph(args.file)
        args.file.close()

        if args.exit:
            graph = override_exits(graph, names, args.exit)

        result = post_dominators(graph)
        if not result.is_constructed():
            logger.warning("Graph has no exit nodes")
        print(format_post_dominators(result, names))
        log_setup.reporter.dump_post_dominators(result, names)

        if args.control_dependence and result.is_constructed():
            cfg, nodes = indexed_graph_to_cfg(graph, names)
            dependences = cfg.calculate_control_dependence()
            numbers = {node: number for number, node in enumerate(nodes)}
            dependences = {
                numbers[node]: {numbers[c] for c in controllers}
                for node, controllers in dependences.items()
            }
            print()
            print(format_control_dependence(dependences, names))
            log_setup.reporter.dump_control_dependence(dependences, names)


if __name__ == "__main__":
    pdom()
