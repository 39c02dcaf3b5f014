"""
    To create a nice report of what happened during the analysis, this file
    implements several reporting types.

    Reports can be written to plain text.
"""

import abc
import traceback
from datetime import datetime
from .. import __version__


def format_post_dominators(result, names=None):
    """ Render an immediate post dominator table as text """
    if not result.is_constructed():
        return '<no exit nodes>'

    def name(node):
        return names[node] if names else str(node)

    lines = []
    for node, ipdom in result.items():
        target = '-' if ipdom is None else name(ipdom)
        lines.append('{} : {}'.format(name(node), target))
    return '\n'.join(lines)


def format_control_dependence(dependences, names=None):
    """ Render control dependences, which map node to controlling nodes """
    def name(node):
        return names[node] if names else str(node)

    lines = []
    for node, controllers in dependences.items():
        inner = ' '.join(sorted(name(c) for c in controllers))
        lines.append('{} : {}'.format(name(node), inner or '-'))
    return '\n'.join(lines)


class ReportGenerator(metaclass=abc.ABCMeta):
    """ Implement all these function to create a custom reporting generator """

    def header(self):
        pass

    def footer(self):
        pass

    @abc.abstractmethod
    def heading(self, level, title):
        raise NotImplementedError()

    @abc.abstractmethod
    def dump_raw_text(self, text):
        raise NotImplementedError()

    @abc.abstractmethod
    def dump_exception(self, einfo):
        """ List the given exception in report """
        raise NotImplementedError()

    def dump_post_dominators(self, result, names=None):
        pass

    def dump_control_dependence(self, dependences, names=None):
        pass

    def dump_error(self, error):
        self.heading(3, 'Error')
        self.dump_raw_text(str(error))


class DummyReportGenerator(ReportGenerator):
    """ Report generator which reports into the void """
    def heading(self, level, title):
        pass

    def dump_exception(self, einfo):
        pass

    def dump_raw_text(self, text):
        pass


class TextReportGenerator(ReportGenerator):
    """ Write the report as plain text into a file """
    def __init__(self, dump_file):
        self.dump_file = dump_file

    def print(self, *args, end='\n'):
        """ Convenience helper for printing to dumpfile """
        print(*args, end=end, file=self.dump_file)

    def header(self):
        self.print('pdom {} report, {}'.format(__version__, datetime.now()))

    def heading(self, level, title):
        self.print()
        self.print(title)
        if level <= 2:
            self.print('=' * len(title))
        else:
            self.print('-' * len(title))
        self.print()

    def dump_raw_text(self, text):
        self.print(text)

    def dump_exception(self, einfo):
        self.print("".join(traceback.format_exception(*einfo)))

    def dump_post_dominators(self, result, names=None):
        self.heading(2, 'Immediate post dominators')
        self.print(format_post_dominators(result, names))

    def dump_control_dependence(self, dependences, names=None):
        self.heading(2, 'Control dependence')
        self.print(format_control_dependence(dependences, names))
