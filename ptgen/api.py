"""
This module contains a set of handy functions to invoke the PTL front-end
and the renderers.

Sources can be given as text or as a file like object. Errors are raised
as :class:`ptgen.common.CompilerError`.
"""

import io
import logging
from .common import CompilerError, DiagnosticsManager
from .lang.ptl import PtlLexer, PtlParser, DotWriter, LatexWriter
from .lang.ptl.nodes import Node


logger = logging.getLogger('api')


def _read_source(source, filename=None):
    """ Return text and name of the given source """
    if hasattr(source, 'read'):
        if filename is None:
            filename = getattr(source, 'name', None)
        source = source.read()
    if not isinstance(source, str):
        raise TypeError(
            'Expected PTL source text, got {}'.format(type(source).__name__))
    return source, filename


def ptl_tokenize(source, filename=None):
    """ Split PTL source into a list of tokens, ending with EOF """
    text, filename = _read_source(source, filename)
    return PtlLexer().tokenize(text, filename=filename)


def ptl_parse(source, filename=None, diag=None):
    """ Parse PTL source into an abstract syntax tree.

    Args:
        source: the source text or a file like object.
        filename: name used in diagnostics.
        diag: optional diagnostics manager which collects the errors.

    Returns:
        The root of the tree, an assignment binary operator node.
    """
    text, filename = _read_source(source, filename)
    if diag is None:
        diag = DiagnosticsManager()
    diag.add_source(filename, text)
    try:
        tokens = PtlLexer().tokenize(text, filename=filename)
    except CompilerError as ex:
        diag.add_diag(ex)
        raise
    tree = PtlParser(diag).parse(tokens)
    logger.debug('Parsed %s', filename)
    return tree


def _render(writer, source, f):
    if isinstance(source, Node):
        tree = source
    else:
        tree = ptl_parse(source)
    out = io.StringIO()
    writer.write(tree, out)
    text = out.getvalue()
    if f is not None:
        f.write(text)
    return text


def ptl_to_dot(source, f=None, options=None):
    """ Render PTL source, or an already parsed tree, as graphviz dot.

    The dot text is returned, and written to f when given.
    """
    return _render(DotWriter(options), source, f)


def ptl_to_latex(source, f=None, options=None):
    """ Render PTL source, or an already parsed tree, as a LaTeX document.

    The LaTeX text is returned, and written to f when given.
    """
    return _render(LatexWriter(options), source, f)
