from .doc import (
    Column,
    Concat,
    Doc,
    Nest,
    Nesting,
    Text,
    Union,
    flatten,
    NIL,
    LINE,
)
from .utils import intersperse


def text(s):
    """Returns a leaf doc for ``s``, which must not contain line breaks."""
    return Text(s)


def char(c):
    if not isinstance(c, str):
        raise TypeError(
            f"Got {repr(c)} of type {type(c).__name__}, expected 'str'"
        )
    if len(c) != 1:
        raise ValueError(f"Expected a single character, got {repr(c)}")
    return Text(c)


def cast_doc(doc):
    """Casts value to doc, if possible."""
    if isinstance(doc, Doc):
        return doc
    elif isinstance(doc, str):
        if doc == "":
            return NIL
        return Text(doc)

    raise TypeError(
        f"Got {repr(doc)} of type {type(doc).__name__}, "
        "expected a Doc or 'str'"
    )


def append(left, right):
    left = cast_doc(left)
    right = cast_doc(right)
    if left is NIL:
        return right
    if right is NIL:
        return left
    return Concat(left, right)


def concat(docs):
    """Returns a concatenation of the documents in the iterable argument"""
    result = NIL
    # Folding from the right keeps the chain right-nested, so the layout
    # work list stays shallow.
    for doc in reversed(list(docs)):
        result = append(doc, result)
    return result


cat = concat


def nest(i, doc):
    """Indents the line breaks inside ``doc`` by ``i`` more columns.
    The first line of ``doc`` is not affected. ``i`` may be negative."""
    return Nest(i, cast_doc(doc))


def group(doc):
    """Marks ``doc`` as a layout choice: it is laid out on a single line,
    every ``LINE`` in it rendered as a space, if that fits in the
    remaining width up to the next line break. Otherwise it is laid out
    as written."""
    doc = cast_doc(doc)
    return Union(flatten(doc), doc)


empty = NIL
line = LINE
SOFTLINE = softline = group(LINE)


def nesting(fn):
    """Returns a Doc that is lazily evaluated during layout by calling
    ``fn`` with the current indentation level."""
    return Nesting(fn)


def column(fn):
    """Returns a Doc that is lazily evaluated during layout by calling
    ``fn`` with the current output column."""
    return Column(fn)


def width(doc, fn):
    """Lays out ``doc``, then ``fn(w)`` where ``w`` is the number of
    columns ``doc`` advanced the output by on its last line."""
    doc = cast_doc(doc)
    return column(
        lambda start: append(
            doc,
            column(lambda end: fn(end - start))
        )
    )


def align(doc):
    """Aligns each new line in ``doc`` with the column ``doc`` starts at.
    """
    doc = cast_doc(doc)

    def evaluator(column_):
        return nesting(lambda indent: Nest(column_ - indent, doc))
    return column(evaluator)


def hang(i, doc):
    return align(nest(i, doc))


def indent(i, doc):
    return hang(i, append(' ' * i, doc))


def surround(left, right, doc):
    return append(append(left, doc), right)


def parens(doc):
    return surround('(', ')', doc)


def braces(doc):
    return surround('{', '}', doc)


def brackets(doc):
    return surround('[', ']', doc)


def angles(doc):
    return surround('<', '>', doc)


def join(sep, docs):
    return concat(intersperse(sep, docs))


def hsep(docs):
    return join(' ', docs)


def vsep(docs):
    return join(LINE, docs)


def sep(docs):
    return group(vsep(docs))
