"""
AST (abstract syntax tree) nodes for the PTL language.
The tree is build by the parser.
Then it is rendered into graphviz or LaTeX.

Each node class fixes its own children. Children are built before their
parent, and a node is never modified after construction.
"""

# pylint: disable=R0903


class Node:
    """ Base class of all nodes in a AST.

    A bare node is the empty node: unknown kind, no label, no children.
    """
    kind = 'unknown'
    max_children = 8

    def __init__(self, label='', loc=None):
        assert isinstance(label, str)
        self.label = label
        self.loc = loc

    @property
    def children(self):
        """ The child nodes, in fixed order """
        return ()

    def __repr__(self):
        return '{} {}'.format(self.kind, self.label)


class Expression(Node):
    """ Expression base class """
    pass


class Constant(Expression):
    """ Integer literal, label is the literal text """
    kind = 'constant'

    def __init__(self, text, value, loc):
        super().__init__(text, loc)
        assert isinstance(value, int)
        self.value = value


class Variable(Expression):
    """ Reference to a variable by name """
    kind = 'variable'

    def __init__(self, name, loc):
        super().__init__(name, loc)

    @property
    def name(self):
        return self.label


class Binop(Expression):
    """ Expression taking two operands and one operator """
    kind = 'binary-op'
    arithmatic_ops = ('+', '-', '*', '/', '^')
    all_ops = arithmatic_ops + ('=',)

    def __init__(self, a, op, b, loc):
        super().__init__(op, loc)
        assert isinstance(a, Expression), type(a)
        assert isinstance(b, Expression), type(b)
        assert op in self.all_ops
        self.a = a
        self.b = b

    @property
    def op(self):
        return self.label

    @property
    def children(self):
        return (self.a, self.b)


class Unop(Expression):
    """ Operation on one operand, typically 'op' 'expr' """
    kind = 'unary-op'
    all_ops = ('+', '-')

    def __init__(self, op, a, loc):
        super().__init__(op, loc)
        assert isinstance(a, Expression)
        assert op in self.all_ops
        self.a = a

    @property
    def op(self):
        return self.label

    @property
    def children(self):
        return (self.a,)


class Postfix(Expression):
    """ Operator following its operand, like the factorial """
    kind = 'postfix'
    all_ops = ('!',)

    def __init__(self, a, op, loc):
        super().__init__(op, loc)
        assert isinstance(a, Expression)
        assert op in self.all_ops
        self.a = a

    @property
    def op(self):
        return self.label

    @property
    def children(self):
        return (self.a,)


class Sum(Expression):
    """ Summation over four bound indices.

    The children are the four index variables followed by the body.
    """
    kind = 'sum'
    num_indices = 4

    def __init__(self, keyword, indices, body, loc):
        super().__init__(keyword, loc)
        indices = tuple(indices)
        assert len(indices) == self.num_indices
        assert all(isinstance(i, Variable) for i in indices)
        assert isinstance(body, Expression)
        self.indices = indices
        self.body = body

    @property
    def children(self):
        return self.indices + (self.body,)


class FunctionCall(Expression):
    """ Call to one of the reserved functions, such as exp or sqrt """
    kind = 'function-call'

    def __init__(self, name, arg, loc):
        super().__init__(name, loc)
        assert isinstance(arg, Expression)
        self.arg = arg

    @property
    def name(self):
        return self.label

    @property
    def children(self):
        return (self.arg,)


class LadderOperator(Expression):
    """ Base of the creation and annihilation operators """
    dagger = False

    def __init__(self, marker, operand, loc):
        super().__init__(marker, loc)
        assert isinstance(operand, Variable)
        self.operand = operand

    @property
    def children(self):
        return (self.operand,)


class Create(LadderOperator):
    """ Creation operator, c(i) """
    kind = 'create-op'
    dagger = True


class Annihilate(LadderOperator):
    """ Annihilation operator, a(i) """
    kind = 'annihilate-op'


def iter_nodes(node):
    """ Iterate over all nodes of a tree in preorder """
    stack = [node]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))
