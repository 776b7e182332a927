from collections.abc import Sequence
from ..common import Token
from ...common import ParseError


def make_comma_or(parts):
    parts = list(map(lambda x: f'"{x}"', parts))
    if len(parts) > 1:
        last = parts[-1]
        first = parts[:-1]
        return ", ".join(first) + " or " + last
    else:
        return "".join(parts)


class RecursiveDescentParser:
    """Base class for recursive descent parsers.

    The complete token sequence is available up front, so looking ahead
    is just indexing into it.
    """

    def __init__(self):
        self.tokens = ()  # Sequence of tokens
        self.index = 0

    def init_lexer(self, tokens: Sequence[Token]):
        """Initialize the parser with the given tokens"""
        self.tokens = tuple(tokens)
        self.index = 0

    @property
    def token(self):
        """The current token under cursor, None when past the end"""
        if self.index < len(self.tokens):
            return self.tokens[self.index]

    def error(self, msg, loc=None, expected=None):
        """Raise an error at the given location"""
        tok = self.token
        if loc is None:
            if tok is None:
                if self.tokens:
                    loc = self.tokens[-1].loc
            else:
                loc = tok.loc
        found = tok.typ if tok else None
        raise ParseError(msg, loc, expected=expected, found=found)

    # Lexer helpers:
    def consume(self, typ) -> Token:
        """Assert that the next token is typ, and if so, return it.

        If typ is a list or tuple, consume one of the given types.
        """
        assert typ is not None
        expected_types = typ if isinstance(typ, (list, tuple, set)) else [typ]
        expected = make_comma_or(expected_types)

        if self.at_end:
            self.error(
                f"Expected {expected}, got end of input",
                expected=expected_types)

        tok = self.token
        if tok.typ in expected_types:
            return self.next_token()
        else:
            self.error(
                f'Expected {expected}, got "{tok.typ}"',
                expected=expected_types)

    def next_token(self) -> Token:
        """Advance to the next token"""
        tok = self.token
        if tok is None:
            self.error("Unexpected end of input")
        self.index += 1
        return tok

    @property
    def peek(self):
        """Look at the next token to parse without popping it"""
        if self.token:
            return self.token.typ

    @property
    def at_end(self):
        return self.peek is None
