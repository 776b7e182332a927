import unittest
from hypothesis import given, strategies as st
from ptgen.lang.ptl import PtlLexer
from ptgen.common import CompilerError, LexerError


class LexerTestCase(unittest.TestCase):
    """ Test the PTL lexer """
    def setUp(self):
        self.lexer = PtlLexer()

    def tokenize(self, snippet):
        return self.lexer.tokenize(snippet, filename='test.ptl')

    def check(self, snippet, toks):
        """ Convenience function """
        toks2 = list(tok.typ for tok in self.tokenize(snippet))
        self.assertSequenceEqual(toks, toks2)

    def test_assignment(self):
        self.check('x = 1 + 2', ['ID', '=', 'NUMBER', '+', 'NUMBER', 'EOF'])

    def test_glyphs(self):
        snippet = ',+-*/^!=()[]{}'
        self.check(snippet, list(snippet) + ['EOF'])

    def test_empty(self):
        tokens = self.tokenize('')
        self.assertEqual(1, len(tokens))
        self.assertEqual('EOF', tokens[0].typ)
        self.assertEqual(1, tokens[0].loc.row)
        self.assertEqual(1, tokens[0].loc.col)

    def test_create_marker_shadows_identifier(self):
        """ Reserved markers take precedence over longer identifiers """
        tokens = self.tokenize('create')
        self.assertEqual(['c', 'ID', 'EOF'], [t.typ for t in tokens])
        self.assertEqual('c', tokens[0].val)
        self.assertEqual('reate', tokens[1].val)
        self.assertEqual(5, tokens[1].loc.length)

    def test_annihilate_marker_shadows_identifier(self):
        self.check('annihilate', ['a', 'ID', 'EOF'])

    def test_markers_in_expression(self):
        self.check(
            'x = c(i)*a(j)',
            ['ID', '=', 'c', '(', 'ID', ')', '*', 'a', '(', 'ID', ')',
             'EOF'])

    def test_reserved_words(self):
        self.check('sum exp sqrt', ['sum', 'exp', 'sqrt', 'EOF'])

    def test_reserved_word_prefix(self):
        """ Reserved words are matched as prefix and consumed entirely """
        tokens = self.tokenize('summer')
        self.assertEqual(['sum', 'ID', 'EOF'], [t.typ for t in tokens])
        self.assertEqual('sum', tokens[0].val)
        self.assertEqual(3, tokens[0].loc.length)
        self.assertEqual('mer', tokens[1].val)
        self.assertEqual(4, tokens[1].loc.col)

    def test_number_followed_by_identifier(self):
        tokens = self.tokenize('12xy')
        self.assertEqual(['NUMBER', 'ID', 'EOF'], [t.typ for t in tokens])
        self.assertEqual('12', tokens[0].val)
        self.assertEqual('xy', tokens[1].val)

    def test_locations(self):
        tokens = self.tokenize('xy = 123')
        locations = [
            (t.loc.row, t.loc.col, t.loc.length) for t in tokens]
        self.assertEqual(
            [(1, 1, 2), (1, 4, 1), (1, 6, 3), (1, 9, 0)], locations)
        self.assertEqual('test.ptl', tokens[0].loc.filename)

    def test_comment_and_newlines(self):
        tokens = self.tokenize('# comment\n\nx = 1\n')
        self.assertEqual(
            ['ID', '=', 'NUMBER', 'EOF'], [t.typ for t in tokens])
        self.assertEqual((3, 1), (tokens[0].loc.row, tokens[0].loc.col))
        self.assertEqual((3, 5), (tokens[2].loc.row, tokens[2].loc.col))
        self.assertEqual((4, 1), (tokens[3].loc.row, tokens[3].loc.col))

    def test_comment_after_expression(self):
        self.check('x = 1 # one\n', ['ID', '=', 'NUMBER', 'EOF'])

    def test_unterminated_comment(self):
        with self.assertRaises(LexerError) as cm:
            self.tokenize('x = 1 # no newline')
        self.assertEqual('Unterminated comment', cm.exception.msg)
        self.assertEqual(1, cm.exception.loc.row)
        self.assertEqual(7, cm.exception.loc.col)

    def test_unexpected_character(self):
        with self.assertRaises(CompilerError) as cm:
            self.tokenize('x = 1 @ 2')
        self.assertEqual('Unexpected char: @ (0x40)', cm.exception.msg)
        self.assertEqual(7, cm.exception.loc.col)
        self.assertEqual(1, cm.exception.loc.length)

    def test_unexpected_character_second_line(self):
        with self.assertRaises(LexerError) as cm:
            self.tokenize('x = 1\n$')
        self.assertEqual((2, 1), (cm.exception.loc.row, cm.exception.loc.col))

    def test_non_ascii_identifier(self):
        with self.assertRaises(LexerError):
            self.tokenize('x = é')

    def test_nul_terminates_input(self):
        tokens = self.tokenize('x = 1\0@@')
        self.assertEqual(
            ['ID', '=', 'NUMBER', 'EOF'], [t.typ for t in tokens])
        self.assertEqual(6, tokens[-1].loc.col)

    def test_location_refers_to_source(self):
        tokens = self.tokenize('x = 1\ny = 2')
        self.assertEqual('y = 2', tokens[3].loc.get_source_line())


ptl_alphabet = 'xyzbcaesumqrtp0123456789 +-*/^!=()[]{},\n\t'


class LexerPropertiesTestCase(unittest.TestCase):
    """ Properties which hold for all input without comments """
    @given(st.text(alphabet=ptl_alphabet, max_size=60))
    def test_single_eof_at_end(self, text):
        tokens = PtlLexer().tokenize(text)
        self.assertEqual('EOF', tokens[-1].typ)
        self.assertEqual(1, [t.typ for t in tokens].count('EOF'))

    @given(st.text(alphabet=ptl_alphabet, max_size=60))
    def test_locations_span_token_text(self, text):
        lines = text.split('\n')
        tokens = PtlLexer().tokenize(text)
        for token in tokens[:-1]:
            loc = token.loc
            self.assertEqual(len(token.val), loc.length)
            line = lines[loc.row - 1]
            self.assertEqual(
                token.val, line[loc.col - 1:loc.col - 1 + loc.length])

    @given(st.text(alphabet=ptl_alphabet, max_size=60))
    def test_tokens_cover_text(self, text):
        tokens = PtlLexer().tokenize(text)
        stripped = ''.join(text.split())
        self.assertEqual(stripped, ''.join(t.val for t in tokens[:-1]))


if __name__ == '__main__':
    unittest.main()
