""" Renderers turning a PTL tree into graphviz dot or LaTeX text.

Both renderers only read the tree, and visit every node exactly once.
"""

import logging
from . import nodes as ast
from .options import RenderOptions
from .visitor import Visitor


class DotWriter:
    """ Render a tree as a graphviz directed graph.

    Every node gets a declaration, every parent to child relation an
    edge. Node numbers are handed out in preorder.
    """
    logger = logging.getLogger('ptl.dot')

    def __init__(self, options=None):
        self.options = options or RenderOptions()

    def write(self, tree, f):
        self.f = f
        self.numbers = {}
        self.edges = []
        graph_name = self.options['graph_name']
        if graph_name:
            print('digraph {} {{'.format(graph_name), file=f)
        else:
            print('digraph {', file=f)
        Visitor(pre=self.declare).visit(tree)
        for parent, child in self.edges:
            print('  {} -> {};'.format(
                self.node_name(parent), self.node_name(child)), file=f)
        print('}', file=f)
        self.logger.debug(
            'Wrote %s nodes and %s edges', len(self.numbers), len(self.edges))

    def node_name(self, node):
        return 'NODE_{}'.format(self.numbers[id(node)])

    def declare(self, node):
        assert id(node) not in self.numbers, 'node visited twice'
        self.numbers[id(node)] = len(self.numbers)
        label = '{}\\n{}'.format(escape(node.kind), escape(node.label))
        print(
            '  {} [label="{}"];'.format(self.node_name(node), label),
            file=self.f)
        for child in node.children:
            self.edges.append((node, child))


def escape(txt):
    """ Escape text for use inside a double quoted dot string """
    return txt.replace('\\', '\\\\').replace('"', '\\"')


class LatexWriter:
    """ Render a tree as a standalone LaTeX document.

    Operators are written infix without parentheses, so nested
    expressions can come out ambiguous. Unary operators, postfix
    operators and function calls only render their operand.
    """
    logger = logging.getLogger('ptl.latex')

    def __init__(self, options=None):
        self.options = options or RenderOptions()

    def write(self, tree, f):
        environment = self.options['environment']
        print(
            r'\documentclass{{{}}}'.format(self.options['document_class']),
            file=f)
        print(r'\usepackage{amsmath}', file=f)
        print(r'\begin{document}', file=f)
        print(r'\begin{{{}}}'.format(environment), file=f)
        print(self.render(tree), file=f)
        print(r'\end{{{}}}'.format(environment), file=f)
        print(r'\end{document}', file=f)

    def render(self, node):
        """ Render a single expression into math notation """
        self.rendered = {}
        Visitor(post=self.render_node).visit(node)
        return self.rendered.pop(id(node))

    def render_node(self, node):
        """ Combine the already rendered children of node """
        parts = [self.rendered.pop(id(c)) for c in node.children]
        if isinstance(node, (ast.Constant, ast.Variable)):
            text = node.label
        elif isinstance(node, ast.Binop):
            text = parts[0] + node.label + parts[1]
        elif isinstance(node, ast.Sum):
            indices = ''.join(parts[:node.num_indices])
            text = r'\sum_{{{}}} {}'.format(indices, parts[-1])
        elif isinstance(node, ast.LadderOperator):
            dagger = r'^{\dagger}' if node.dagger else ''
            text = r'\hat{{c}}{}_{{{}}}'.format(dagger, parts[0])
        else:
            # TODO: emit the operator for unary, postfix and function call
            # nodes, only their children are rendered for now.
            text = ''.join(parts)
        self.rendered[id(node)] = text
