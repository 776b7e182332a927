""" A parse tree generator for the PTL expression language.

Example usage:

>>> from ptgen.api import ptl_parse
>>> tree = ptl_parse('x = 1 + 2')
>>> tree.label
'='

"""

# Define version here. Used in docs, and setup script:
__version_info__ = (0, 1, 0)
__version__ = '.'.join(map(str, __version_info__))
