"""
   Error handling routines
   Diagnostic utils
   Source location structures
"""


import logging
from .lang.common import SourceLocation, Token


__all__ = (
    'CompilerError', 'LexerError', 'ParseError', 'DiagnosticsManager',
    'SourceLocation', 'Token', 'get_file', 'logformat')

logformat = '%(asctime)s | %(levelname)8s | %(name)10.10s | %(message)s'


def get_file(f, mode='r'):
    """ Determine if argument is a file like object or make it so! """
    if hasattr(f, 'read'):
        # Assume this is a file like object
        return f
    elif isinstance(f, str):
        return open(f, mode)
    else:
        raise FileNotFoundError('Cannot open {}'.format(f))


class CompilerError(Exception):
    """ Unrecoverable error detected in the front-end.

    Carries a message and the location in the source where the problem
    was detected.
    """
    def __init__(self, msg, loc=None):
        super().__init__(msg)
        self.msg = msg
        self.loc = loc
        if loc:
            assert isinstance(loc, SourceLocation), \
                   '{0} must be SourceLocation'.format(type(loc))

    def __repr__(self):
        return '"{}"'.format(self.msg)

    def __str__(self):
        if self.loc:
            return '{}:{}:{}: {}'.format(
                self.loc.filename, self.loc.row, self.loc.col, self.msg)
        return str(self.msg)

    def print(self, file=None):
        """ Print the error inside some nice context """
        if self.loc:
            self.loc.print_message(self.msg, file=file)
        else:
            print(self.msg, file=file)


class LexerError(CompilerError):
    """ Raised on characters the lexer cannot handle """
    pass


class ParseError(CompilerError):
    """ Raised when the token sequence does not fit the grammar """
    def __init__(self, msg, loc=None, expected=None, found=None):
        super().__init__(msg, loc)
        self.expected = expected
        self.found = found


class DiagnosticsManager:
    def __init__(self):
        self.diags = []
        self.sources = {}
        self.logger = logging.getLogger('diagnostics')

    def add_source(self, name, src):
        """ Add a source for error reporting """
        self.logger.debug('Adding source, filename="%s"', name)
        self.sources[name] = src

    def add_diag(self, d):
        """ Add a diagnostic message """
        if d.loc:
            self.logger.error('Line %s: %s', d.loc.row, d.msg)
        else:
            self.logger.error(str(d.msg))
        self.diags.append(d)

    def clear(self):
        del self.diags[:]
        self.sources.clear()

    def print_errors(self, file=None):
        """ Print all errors reported """
        if len(self.diags) > 0:
            print('{0} Errors'.format(len(self.diags)), file=file)
            for d in self.diags:
                self.print_error(d, file=file)

    def print_error(self, e, file=None):
        """ Print a single error in a nice formatted way """
        print('==============', file=file)
        if e.loc:
            if e.loc.filename not in self.sources:
                print('Error: {0}'.format(e.msg), file=file)
                return
            print("File: {}".format(e.loc.filename), file=file)
            source = self.sources[e.loc.filename]
            lines = source.split('\n')
            e.loc.print_message(
                'Error: {0}'.format(e.msg), lines=lines, filename='',
                file=file)
        else:
            print('Error: {0}'.format(e.msg), file=file)

        print('==============', file=file)
