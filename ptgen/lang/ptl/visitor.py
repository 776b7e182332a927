"""
    Visitor class.
"""

from . import nodes as ast


class Visitor:
    """
        Visitor that can visit all nodes in the AST
        and run pre and post functions.

        The walk keeps its own stack, so deep trees such as long
        operator chains do not hit the interpreter recursion limit.
    """
    def __init__(self, pre=None, post=None):
        self.pre = pre
        self.post = post

    def visit(self, node):
        """ Visit a node and all its descendants """
        stack = [(node, False)]
        while stack:
            node, children_done = stack.pop()
            if children_done:
                # run post function
                if self.post:
                    self.post(node)
            else:
                self.do(node)
                stack.append((node, True))
                # Descent into subnodes, first child on top:
                for child in reversed(node.children):
                    stack.append((child, False))

    def do(self, node):
        """ Visit a single node """
        if not isinstance(node, ast.Node):  # pragma: no cover
            raise NotImplementedError('Could not visit "{0}"'.format(node))

        # Run pre function:
        if self.pre:
            self.pre(node)


class AstPrinter:
    """ Prints an AST as text """
    def print_ast(self, tree, f):
        self.indent = 0
        self.f = f
        visitor = Visitor(self.print1, self.print2)
        visitor.visit(tree)

    def print1(self, node):
        print(' ' * self.indent + str(node), file=self.f)
        self.indent += 2

    def print2(self, _):
        self.indent -= 2
