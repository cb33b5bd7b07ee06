# -*- coding: utf-8 -*-

"""Top-level package for prettydoc."""

__author__ = """prettydoc developers"""
__version__ = '0.1.0'

import sys

from .api import (
    align,
    angles,
    append,
    braces,
    brackets,
    cast_doc,
    cat,
    char,
    column,
    concat,
    empty,
    group,
    hang,
    hsep,
    indent,
    join,
    line,
    nest,
    nesting,
    parens,
    sep,
    softline,
    surround,
    text,
    vsep,
    width,
    SOFTLINE,
)
from .doc import (
    Doc,
    flatten,
    NIL,
    LINE,
)
from .layout import layout
from .render import render_to_stream, render_to_str


__all__ = [
    'DEFAULT_WIDTH',
    'Doc',
    'pretty',
    'pformat',
    'pprint',
    'layout',
    'render_to_stream',
    'render_to_str',
    'flatten',
    'align',
    'angles',
    'append',
    'braces',
    'brackets',
    'cast_doc',
    'cat',
    'char',
    'column',
    'concat',
    'empty',
    'group',
    'hang',
    'hsep',
    'indent',
    'join',
    'line',
    'nest',
    'nesting',
    'parens',
    'sep',
    'softline',
    'surround',
    'text',
    'vsep',
    'width',
    'NIL',
    'LINE',
    'SOFTLINE',
]


DEFAULT_WIDTH = 79


def pretty(width, doc):
    """Lays out ``doc`` in ``width`` columns and returns the result.

    Every group is laid out on one line if it fits in what is left of
    the current line, up to the next line break; groups are decided
    greedily, left to right.
    """
    return render_to_str(layout(doc, width))


def pformat(doc, width=DEFAULT_WIDTH):
    return pretty(width, doc)


def pprint(doc, stream=None, width=DEFAULT_WIDTH, *, end='\n'):
    if stream is None:
        stream = sys.stdout
    render_to_stream(stream, layout(doc, width))
    if end:
        stream.write(end)
