import io
import unittest
from ptgen import api
from ptgen.common import DiagnosticsManager, LexerError, ParseError
from ptgen.lang.ptl import RenderOptions


class ApiTestCase(unittest.TestCase):
    """ Test the convenience functions of the api module """
    def test_tokenize(self):
        tokens = api.ptl_tokenize('x = c(i)')
        self.assertEqual(
            ['ID', '=', 'c', '(', 'ID', ')', 'EOF'],
            [t.typ for t in tokens])

    def test_tokenize_file_object(self):
        f = io.StringIO('x = 1')
        f.name = 'hello.ptl'
        tokens = api.ptl_tokenize(f)
        self.assertEqual('hello.ptl', tokens[0].loc.filename)

    def test_parse(self):
        tree = api.ptl_parse('x = 1 - 2 - 3')
        self.assertEqual('=', tree.label)
        self.assertEqual('-', tree.b.a.label)

    def test_parse_error(self):
        diag = DiagnosticsManager()
        with self.assertRaises(ParseError):
            api.ptl_parse('x = 1 +', filename='bad.ptl', diag=diag)
        self.assertEqual(1, len(diag.diags))
        self.assertIn('bad.ptl', diag.sources)

    def test_lexer_error(self):
        diag = DiagnosticsManager()
        with self.assertRaises(LexerError):
            api.ptl_parse('x = 1 # open', diag=diag)
        self.assertEqual(1, len(diag.diags))

    def test_source_must_be_text(self):
        with self.assertRaises(TypeError):
            api.ptl_tokenize(b'x = 1')
        with self.assertRaises(TypeError):
            api.ptl_parse(None)

    def test_to_dot(self):
        f = io.StringIO()
        dot = api.ptl_to_dot('x = 1', f)
        self.assertEqual(dot, f.getvalue())
        self.assertTrue(dot.startswith('digraph {'))
        self.assertIn('NODE_0 -> NODE_2;', dot)

    def test_to_dot_from_tree(self):
        tree = api.ptl_parse('x = 1')
        self.assertEqual(api.ptl_to_dot('x = 1'), api.ptl_to_dot(tree))

    def test_to_latex(self):
        options = RenderOptions()
        options.set('environment', 'align*')
        text = api.ptl_to_latex('x = sum(i,j,k,l){y}', options=options)
        self.assertIn('x=\\sum_{ijkl} y\n', text)
        self.assertIn('\\begin{align*}', text)


if __name__ == '__main__':
    unittest.main()
