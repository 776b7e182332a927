""" Front-end for the PTL expression language.

PTL statements assign an expression to a name. Expressions contain
arithmetic, factorials, a sum over four indices and the creation and
annihilation operators ``c(i)`` and ``a(i)``.

.. graphviz::

   digraph ptl {
   rankdir="LR"
   1 [label="source text"]
   10 [label="lexer" ]
   20 [label="parser" ]
   40 [label="dot / LaTeX printer"]
   1 -> 10
   10 -> 20
   20 -> 40
   }

"""


from .lexer import PtlLexer, tokenize
from .parser import PtlParser, parse
from .printer import DotWriter, LatexWriter
from .visitor import Visitor, AstPrinter
from .options import RenderOptions

__all__ = [
    'AstPrinter', 'DotWriter', 'LatexWriter', 'PtlLexer', 'PtlParser',
    'RenderOptions', 'Visitor', 'parse', 'tokenize',
]
