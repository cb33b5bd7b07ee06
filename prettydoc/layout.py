"""The layout algorithm.

``layout`` walks a document with an explicit work list and lazily
yields the normal form (``SText`` and ``SLine`` items) of the chosen
layout. At every ``Union`` it tries the flat alternative, followed by
everything that comes after it, and keeps it only if the output fits
in the width up to the next line break.

The work list is a linked stack of ``((indent, doc), tail)`` pairs,
``None`` when empty. Pushing shares the tail, so trying an alternative
runs over the same pending obligations as the main walk without
copying them.
"""
import logging

from .api import cast_doc
from .doc import (
    Column,
    Concat,
    Line,
    Nest,
    Nesting,
    Nil,
    Text,
    Union,
)
from .sdoc import SLine, SText

logger = logging.getLogger(__name__)


def _expand(indent, doc, column, worklist):
    """Replaces an obligation that emits nothing by its parts."""
    if isinstance(doc, Nil):
        return worklist
    elif isinstance(doc, Concat):
        return ((indent, doc.left), ((indent, doc.right), worklist))
    elif isinstance(doc, Nest):
        return ((indent + doc.indent, doc.doc), worklist)
    elif isinstance(doc, Nesting):
        return ((indent, cast_doc(doc.fn(indent))), worklist)
    elif isinstance(doc, Column):
        return ((indent, cast_doc(doc.fn(column))), worklist)
    raise TypeError(
        f"Got {repr(doc)} of type {type(doc).__name__}, expected a Doc"
    )


def fits(width, column, worklist, failed=None):
    """Lays out ``worklist`` from ``column`` up to the first line break
    without going past ``width``.

    Every ``Union`` on the way is laid out flat if that leads to a line
    break, or the end of the document, within the width, and broken
    otherwise. These are the choices the main walk would make at the
    same points, so they are returned for it to reuse.

    Returns ``(sdocs, column, worklist)``, the normal form up to and
    including the line break and the state after it, or ``None`` if
    nothing fits.

    ``failed`` maps ``(column, id(worklist))`` to work lists known not
    to fit from that column. It is only valid for one ``width`` and is
    shared by the calls made during one layout.
    """
    if failed is None:
        failed = {}

    sdocs = []
    # States visited since the last choice, marked failed on backtracking.
    trail = []
    # (len(sdocs), len(trail), column, broken worklist)
    choices = []

    while True:
        overflow = column > width
        if not overflow and worklist is not None:
            key = (column, id(worklist))
            overflow = failed.get(key) is worklist
            if not overflow:
                trail.append((key, worklist))

        if overflow:
            trail_start = choices[-1][1] if choices else 0
            for key, visited in trail[trail_start:]:
                failed[key] = visited
            del trail[trail_start:]

            if not choices:
                return None
            sdocs_len, _, column, worklist = choices.pop()
            del sdocs[sdocs_len:]
            continue

        if worklist is None:
            return sdocs, column, None

        (indent, doc), worklist = worklist

        if isinstance(doc, Text):
            sdocs.append(SText(doc.value))
            column += len(doc.value)
        elif isinstance(doc, Line):
            sdocs.append(SLine(indent))
            return sdocs, max(indent, 0), worklist
        elif isinstance(doc, Union):
            choices.append((
                len(sdocs),
                len(trail),
                column,
                ((indent, doc.broken), worklist),
            ))
            worklist = ((indent, doc.flat), worklist)
        else:
            worklist = _expand(indent, doc, column, worklist)


def best(width, column, worklist):
    log_choices = logger.isEnabledFor(logging.DEBUG)
    failed = {}

    while worklist is not None:
        (indent, doc), worklist = worklist

        if isinstance(doc, Text):
            yield SText(doc.value)
            column += len(doc.value)
        elif isinstance(doc, Line):
            yield SLine(indent)
            column = max(indent, 0)
        elif isinstance(doc, Union):
            fitted = fits(
                width,
                column,
                ((indent, doc.flat), worklist),
                failed,
            )
            if log_choices:
                logger.debug(
                    'group at indent=%d column=%d laid out %s',
                    indent,
                    column,
                    'broken' if fitted is None else 'flat',
                )
            if fitted is None:
                worklist = ((indent, doc.broken), worklist)
            else:
                sdocs, column, worklist = fitted
                yield from sdocs
        else:
            worklist = _expand(indent, doc, column, worklist)


def layout(doc, width):
    """Returns an iterator over the normal form of ``doc`` laid out
    in ``width`` columns."""
    if not isinstance(width, int):
        raise TypeError(
            f"Got {repr(width)} of type {type(width).__name__}, "
            "expected 'int'"
        )
    return best(width, 0, ((0, cast_doc(doc)), None))
