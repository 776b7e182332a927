""" This module contains the parsing parts for the PTL language.

Grammar, from lowest to highest precedence::

    <statement> ::= <id> "=" <add-exp>

    <add-exp> ::= <mul-exp> { ("+" | "-") <mul-exp> }

    <mul-exp> ::= <pow-exp> { ("*" | "/") <pow-exp> }

    <pow-exp> ::= <unary-exp> { "^" <unary-exp> }

    <unary-exp> ::= <postfix-exp> | ("-" | "+") <unary-exp>

    <postfix-exp> ::= <primary-exp> | <primary-exp> "!"

    <primary-exp> ::= "(" <add-exp> ")" | <constant> | <id>
                    | "sum" "(" <id> "," <id> "," <id> "," <id> ")"
                      "{" <add-exp> "}"
                    | "c" "(" <id> ")" | "a" "(" <id> ")"
                    | ("exp" | "sqrt") "(" <add-exp> ")"
                    | "c" | "a"

"""

import logging
from ...common import CompilerError
from ..tools.recursivedescent import RecursiveDescentParser
from . import nodes as ast


class PtlParser(RecursiveDescentParser):
    """ Parses a token sequence into an abstract syntax tree (AST) """
    logger = logging.getLogger('ptl')
    primary_starts = ('NUMBER', 'ID', 'sum', 'c', 'a', 'exp', 'sqrt', '(')

    def __init__(self, diag=None):
        super().__init__()
        self.diag = diag

    def parse(self, tokens):
        """ Parse a single statement from tokens """
        self.logger.debug('Parsing source')
        self.init_lexer(tokens)
        try:
            try:
                statement = self.parse_statement()
            except RecursionError:
                self.error('Expression nested too deeply')
            self.consume('EOF')
            self.logger.debug('Parsing complete')
        except CompilerError as ex:
            if self.diag:
                self.diag.add_diag(ex)
            raise
        return statement

    def parse_statement(self):
        """ Parse an assignment of an expression to an identifier """
        name = self.consume('ID')
        assign = self.consume('=')
        expr = self.parse_add()
        target = ast.Variable(name.val, name.loc)
        return ast.Binop(target, assign.val, expr, assign.loc)

    def parse_binop(self, parse_operand, operators):
        """ Parse a left associative chain of binary operators """
        lhs = parse_operand()
        while self.peek in operators:
            operator = self.consume(operators)
            rhs = parse_operand()
            lhs = ast.Binop(lhs, operator.val, rhs, operator.loc)
        return lhs

    def parse_add(self):
        return self.parse_binop(self.parse_mul, ('+', '-'))

    def parse_mul(self):
        return self.parse_binop(self.parse_pow, ('*', '/'))

    def parse_pow(self):
        return self.parse_binop(self.parse_unary, ('^',))

    def parse_unary(self):
        """ Handle unary plus and minus """
        if self.peek in ('+', '-'):
            operation = self.consume(('+', '-'))
            inner_expression = self.parse_unary()
            return ast.Unop(operation.val, inner_expression, operation.loc)
        else:
            return self.parse_postfix()

    def parse_postfix(self):
        """ Parse an optional factorial after a primary expression """
        expr = self.parse_primary()
        if self.peek == '!':
            operation = self.consume('!')
            expr = ast.Postfix(expr, operation.val, operation.loc)
        return expr

    def parse_primary(self):
        """ Literal, identifier and parenthesis expression parsing """
        if self.peek == '(':
            self.consume('(')
            expr = self.parse_add()
            self.consume(')')
        elif self.peek == 'NUMBER':
            val = self.consume('NUMBER')
            expr = ast.Constant(val.val, int(val.val), val.loc)
        elif self.peek == 'ID':
            expr = self.parse_id()
        elif self.peek == 'sum':
            expr = self.parse_sum()
        elif self.peek in ('c', 'a'):
            expr = self.parse_ladder_operator()
        elif self.peek in ('exp', 'sqrt'):
            expr = self.parse_function_call()
        else:
            if self.at_end:
                found = 'end of input'
            else:
                found = '"{}"'.format(self.peek)
            self.error(
                'Expected {}, got {}'.format(
                    ', '.join(self.primary_starts), found),
                expected=self.primary_starts)
        return expr

    def parse_id(self):
        name = self.consume('ID')
        return ast.Variable(name.val, name.loc)

    def parse_sum(self):
        """ Parse sum(i, j, k, l) { expr } """
        keyword = self.consume('sum')
        self.consume('(')
        indices = [self.parse_id()]
        while len(indices) < ast.Sum.num_indices:
            self.consume(',')
            indices.append(self.parse_id())
        self.consume(')')
        self.consume('{')
        body = self.parse_add()
        self.consume('}')
        return ast.Sum(keyword.val, indices, body, keyword.loc)

    def parse_ladder_operator(self):
        """ Parse c(i) or a(i), or the bare marker as a variable """
        marker = self.consume(('c', 'a'))
        if self.peek != '(':
            return ast.Variable(marker.val, marker.loc)
        self.consume('(')
        operand = self.parse_id()
        self.consume(')')
        if marker.typ == 'c':
            return ast.Create(marker.val, operand, marker.loc)
        else:
            return ast.Annihilate(marker.val, operand, marker.loc)

    def parse_function_call(self):
        """ Parse a reserved function call like sqrt(x) """
        name = self.consume(('exp', 'sqrt'))
        self.consume('(')
        arg = self.parse_add()
        self.consume(')')
        return ast.FunctionCall(name.val, arg, name.loc)


def parse(tokens, diag=None):
    """ Parse a token sequence into a tree """
    return PtlParser(diag).parse(tokens)
