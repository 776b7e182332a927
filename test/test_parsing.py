from ptgen.common import Token, SourceLocation, CompilerError, ParseError
from ptgen.lang.tools.recursivedescent import RecursiveDescentParser
import unittest


def gen_tokens(tokens):
    """ Helper function which creates a token iterator """
    col = 1
    for typ, val in tokens:
        loc = SourceLocation('test.ptl', 1, col, 1)
        yield Token(typ, val, loc)
        col += 1


class RecursiveDescentParserTestCase(unittest.TestCase):
    """ Test recursive descent parser """
    def setUp(self):
        self.parser = RecursiveDescentParser()

    def test_consume(self):
        """ Test consumption of a token type """
        tokens = [('ID', 'foo'), ('ID', 'bar')]
        self.parser.init_lexer(gen_tokens(tokens))
        self.assertFalse(self.parser.at_end)
        self.parser.consume('ID')
        self.assertFalse(self.parser.at_end)

    def test_failing_consume(self):
        """ Test consumption of more than one typ """
        tokens = [('ID', 'foo'), ('ID', 'bar')]
        self.parser.init_lexer(gen_tokens(tokens))
        token = self.parser.consume(['ID', 'NUMBER'])
        self.assertEqual('ID', token.typ)
        self.assertEqual('foo', token.val)
        self.assertFalse(self.parser.at_end)
        with self.assertRaises(CompilerError) as ctx:
            self.parser.consume(['-', '+'])
        self.assertEqual('Expected "-" or "+", got "ID"', ctx.exception.msg)
        with self.assertRaises(CompilerError) as ctx:
            self.parser.consume(['-', '+', '*'])
        self.assertEqual(
            'Expected "-", "+" or "*", got "ID"', ctx.exception.msg)
        token = self.parser.consume(['ID', 'NUMBER'])
        self.assertEqual('ID', token.typ)
        self.assertEqual('bar', token.val)
        self.assertTrue(self.parser.at_end)

    def test_consume_past_end(self):
        tokens = [('ID', 'foo')]
        self.parser.init_lexer(gen_tokens(tokens))
        self.parser.consume('ID')
        with self.assertRaises(ParseError) as ctx:
            self.parser.consume('ID')
        self.assertEqual('Expected "ID", got end of input', ctx.exception.msg)
        self.assertEqual(1, ctx.exception.loc.col)
        self.assertIsNone(ctx.exception.found)

    def test_error_without_tokens(self):
        self.parser.init_lexer([])
        with self.assertRaises(ParseError) as ctx:
            self.parser.next_token()
        self.assertIsNone(ctx.exception.loc)


if __name__ == '__main__':
    unittest.main()
