import io
import sys
import unittest
from pdom.common import NotFoundError
from pdom.graph.graph import AdjacencyGraph
from pdom.graph.algorithm.post_dominators import post_dominators
from pdom.utils.reporting import TextReportGenerator, DummyReportGenerator
from pdom.utils.reporting import format_post_dominators


class TextReportGeneratorTestCase(unittest.TestCase):
    def setUp(self):
        self.f = io.StringIO()
        self.reporter = TextReportGenerator(self.f)

    def test_post_dominators(self):
        graph = AdjacencyGraph(3, exits=[1])
        graph.add_edge(0, 1)
        self.reporter.dump_post_dominators(
            post_dominators(graph), ['a', 'b', 'c'])
        report = self.f.getvalue()
        self.assertIn('Immediate post dominators\n=====', report)
        self.assertIn('a : b\nb : b\nc : -\n', report)

    def test_error(self):
        self.reporter.dump_error(NotFoundError(2))
        self.assertIn(
            'Error\n-----\n\nNode 2 has no immediate post dominator\n',
            self.f.getvalue())

    def test_exception(self):
        try:
            raise ValueError('broken')
        except ValueError:
            self.reporter.dump_exception(sys.exc_info())
        self.assertIn('ValueError: broken', self.f.getvalue())


class FormatTestCase(unittest.TestCase):
    def test_unconstructed(self):
        self.assertEqual(
            '<no exit nodes>', format_post_dominators(post_dominators(
                AdjacencyGraph())))

    def test_dummy_reporter(self):
        reporter = DummyReportGenerator()
        reporter.header()
        reporter.dump_error(NotFoundError(0))
        reporter.footer()


if __name__ == '__main__':
    unittest.main()
