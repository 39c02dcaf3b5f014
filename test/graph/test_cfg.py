""" Test control flow graph post dominance and control dependence """

import unittest
from pdom.common import InvalidStateError
from pdom.graph.cfg import ControlFlowGraph, ControlFlowNode
from pdom.graph.cfg import indexed_graph_to_cfg
from pdom.graph.graph import AdjacencyGraph


class ControlFlowGraphTestCase(unittest.TestCase):
    def setUp(self):
        # Diamond shaped graph:
        self.cfg = ControlFlowGraph()
        self.a = ControlFlowNode(self.cfg, name='A')
        self.b = ControlFlowNode(self.cfg, name='B')
        self.c = ControlFlowNode(self.cfg, name='C')
        self.d = ControlFlowNode(self.cfg, name='D')
        self.a.add_edge(self.b)
        self.a.add_edge(self.c)
        self.b.add_edge(self.d)
        self.c.add_edge(self.d)

    def test_exit_nodes(self):
        self.assertEqual([self.d], self.cfg.exit_nodes)

    def test_immediate_post_dominators(self):
        self.assertIs(self.d, self.a.immediate_post_dominator)
        self.assertIs(self.d, self.b.immediate_post_dominator)
        self.assertIs(self.d, self.c.immediate_post_dominator)
        self.assertIs(self.d, self.d.immediate_post_dominator)

    def test_post_dominates(self):
        self.assertTrue(self.d.post_dominates(self.a))
        self.assertTrue(self.a.post_dominates(self.a))
        self.assertFalse(self.b.post_dominates(self.a))
        self.assertFalse(self.a.post_dominates(self.d))

    def test_control_dependence(self):
        dependences = self.cfg.calculate_control_dependence()
        expected = {
            self.a: set(),
            self.b: {self.a},
            self.c: {self.a},
            self.d: set(),
        }
        self.assertEqual(expected, dependences)
        self.assertEqual(
            [(self.a, self.b), (self.a, self.c)],
            [tuple(d) for d in self.cfg.control_dependences()])

    def test_recalculate_after_change(self):
        """ Changing the graph drops cached post dominator info """
        self.assertIs(self.d, self.b.immediate_post_dominator)
        e = ControlFlowNode(self.cfg, name='E')
        self.b.add_edge(e)
        self.assertEqual([self.d, e], self.cfg.exit_nodes)
        self.assertIsNone(self.b.immediate_post_dominator)
        self.assertIsNone(self.a.immediate_post_dominator)

    def test_designated_exit(self):
        self.cfg.add_exit_node(self.b)
        self.assertEqual([self.b], self.cfg.exit_nodes)
        self.assertIs(self.b, self.b.immediate_post_dominator)
        # C only reaches D, which is no exit anymore:
        self.assertIsNone(self.c.immediate_post_dominator)

    def test_no_exit_nodes(self):
        self.d.add_edge(self.a)
        with self.assertRaises(InvalidStateError):
            self.a.immediate_post_dominator
        with self.assertRaises(InvalidStateError):
            self.cfg.calculate_control_dependence()

    def test_numbering_follows_insertion_order(self):
        e = ControlFlowNode(self.cfg, name='E')
        e.add_edge(self.c)
        e.add_edge(self.b)
        indexed, order = self.cfg.to_indexed_graph()
        self.assertEqual([self.a, self.b, self.c, self.d, e], order)
        self.assertEqual((1, 2), indexed.successors(0))
        self.assertEqual((2, 1), indexed.successors(4))
        self.assertEqual([self.c, self.b], e.successors)
        self.assertEqual([self.b, self.c], self.d.predecessors)

    def test_del_node(self):
        self.cfg.del_node(self.c)
        self.assertEqual(3, len(self.cfg))
        self.assertIs(self.b, self.a.immediate_post_dominator)


class ControlDependenceTestCase(unittest.TestCase):
    def test_loop_with_branch(self):
        """ A while loop with an if-else statement in its body """
        graph = AdjacencyGraph(7)
        edges = [
            (0, 1), (1, 2), (1, 5), (2, 3), (2, 4), (3, 6), (4, 6), (6, 1)]
        for n, m in edges:
            graph.add_edge(n, m)
        cfg, nodes = indexed_graph_to_cfg(graph)
        self.assertEqual('3', nodes[3].name)
        dependences = cfg.calculate_control_dependence()
        expected = [set(), {1}, {1}, {2}, {2}, set(), {1}]
        numbers = {node: number for number, node in enumerate(nodes)}
        self.assertEqual(
            expected,
            [{numbers[c] for c in dependences[node]} for node in nodes])

    def test_self_loop(self):
        """ A node branching to itself controls itself """
        graph = AdjacencyGraph(2)
        graph.add_edge(0, 0)
        graph.add_edge(0, 1)
        cfg, nodes = indexed_graph_to_cfg(graph, names=['loop', 'end'])
        self.assertEqual('loop', nodes[0].name)
        dependences = cfg.calculate_control_dependence()
        self.assertEqual({nodes[0]}, dependences[nodes[0]])
        self.assertEqual(set(), dependences[nodes[1]])

    def test_round_trip_exits(self):
        graph = AdjacencyGraph(3, exits=[1])
        graph.add_edge(0, 1)
        graph.add_edge(1, 2)
        cfg, nodes = indexed_graph_to_cfg(graph)
        self.assertEqual([nodes[1]], cfg.exit_nodes)
        indexed, order = cfg.to_indexed_graph()
        self.assertEqual(nodes, order)
        self.assertEqual({1}, indexed.exit_nodes())
        self.assertEqual((1,), indexed.successors(0))


if __name__ == '__main__':
    unittest.main()
