""" Lexical analyzer part. Splits the input character stream into tokens.

Reserved single-letter markers take precedence over multi-letter
identifiers starting with the same letter: the text ``create`` is lexed
as the marker ``c`` followed by the identifier ``reate``.
"""

import logging
import string
from ..common import Token
from ..tools.handlexer import HandLexerBase, create_chunks


class PtlLexer(HandLexerBase):
    """ Generates a sequence of tokens from PTL source text """
    logger = logging.getLogger('ptl.lexer')
    glyphs = ',-+/*^!=()[]{}'
    markers = 'ca'
    keywords = ('sum', 'exp', 'sqrt')
    whitespace = ' \t\r\n\f\v'
    digits = string.digits
    letters = string.ascii_letters

    def tokenize(self, text, filename=None):
        """ Return the complete list of tokens, ending with one EOF """
        self.logger.debug('Tokenizing %s', filename)
        chunks = create_chunks(text)
        tokens = list(
            super().tokenize(filename, chunks, self.lex_ptl, source=text))
        self.logger.debug('Produced %s tokens', len(tokens))
        return tokens

    def lex_ptl(self):
        c = self.next_char()
        if c is None or c == '\0':
            self.lex_eof()
            return
        elif c in self.whitespace:
            self.ignore()
        elif c == '#':
            self.lex_comment()
        elif c in self.glyphs:
            self.emit(c)
        elif c in self.markers:
            self.emit(c)
        else:
            self.backup_char(c)
            self.lex_word()

        return self.lex_ptl

    def lex_eof(self):
        loc = self._start_loc
        loc.length = 0
        self.token_buffer.append(Token('EOF', 'EOF', loc))

    def lex_comment(self):
        """ Eat all characters until end of line """
        loc = self._start_loc
        while True:
            c = self.next_char()
            if c is None or c == '\0':
                loc.length = 1
                self.error('Unterminated comment', loc=loc)
            elif c == '\n':
                break
        self.ignore()

    def lex_word(self):
        """ Reserved words, numbers and identifiers """
        for keyword in self.keywords:
            if self.accept_text(keyword):
                self.emit(keyword)
                return

        c = self.next_char()
        if c in self.digits:
            self.accept_run(self.digits)
            self.emit('NUMBER')
        elif c in self.letters:
            self.accept_run(self.letters)
            self.emit('ID')
        else:
            loc = self._start_loc
            loc.length = 1
            self.error(
                'Unexpected char: {0} (0x{1:X})'.format(c, ord(c)), loc=loc)


def tokenize(text, filename=None):
    """ Split PTL source text into a list of tokens """
    return PtlLexer().tokenize(text, filename=filename)
