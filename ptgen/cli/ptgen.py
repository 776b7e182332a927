""" Parse tree generator.

Reads a PTL source file, which holds a single statement like
``x = sum(i,j,k,l){c(i)}``, and renders its abstract syntax tree as a
graphviz dot graph and/or as a LaTeX document.
"""


import argparse
import sys
from .base import base_parser, render_parser, LogSetup
from ..common import get_file
from ..lang.ptl import PtlLexer, PtlParser, DotWriter, LatexWriter
from ..lang.ptl import AstPrinter, RenderOptions


parser = argparse.ArgumentParser(
    description=__doc__,
    formatter_class=argparse.RawDescriptionHelpFormatter,
    parents=[base_parser, render_parser],
)
parser.add_argument(
    '--dot', metavar='dot-file', type=argparse.FileType('w'),
    help='write the tree as graphviz dot to this file')
parser.add_argument(
    '--latex', metavar='latex-file', type=argparse.FileType('w'),
    help='write the expression as LaTeX document to this file')
parser.add_argument(
    '--tokens', action='store_true', default=False,
    help='print the tokens of the source')
parser.add_argument(
    '--ast', action='store_true', default=False,
    help='print the abstract syntax tree')
parser.add_argument('source', help='source file')


def close_output(f):
    """ Close an output file, but leave stdout open """
    if f is not sys.stdout:
        f.close()


def ptgen(args=None):
    """ Run the parse tree generator """
    args = parser.parse_args(args)
    with LogSetup(args) as log_setup:
        options = RenderOptions.from_args(args)
        with get_file(args.source) as f:
            src = f.read()
        log_setup.logger.info(
            'Read %s characters from %s', len(src), args.source)

        tokens = PtlLexer().tokenize(src, filename=args.source)
        if args.tokens:
            for token in tokens:
                print(token.loc, token.typ, repr(token.val))

        tree = PtlParser().parse(tokens)
        if args.ast:
            AstPrinter().print_ast(tree, sys.stdout)

        if args.dot:
            DotWriter(options).write(tree, args.dot)
            close_output(args.dot)

        if args.latex:
            LatexWriter(options).write(tree, args.latex)
            close_output(args.latex)


if __name__ == '__main__':
    ptgen()
