"""The ``Doc`` variants and the ``flatten`` transform.

Documents are immutable trees. Building one performs no layout; the
layout engine in :mod:`prettydoc.layout` consumes them.
"""


class Doc:
    __slots__ = ()

    def __add__(self, other):
        from .api import append
        return append(self, other)

    def __radd__(self, other):
        from .api import append
        return append(other, self)

    def __eq__(self, other):
        if not isinstance(other, Doc):
            return NotImplemented
        return _structurally_equal(self, other)

    __hash__ = None


class Nil(Doc):
    __slots__ = ()

    def __repr__(self):
        return 'NIL'


NIL = Nil()


class Text(Doc):
    __slots__ = ('value', )

    def __init__(self, value):
        if not isinstance(value, str):
            raise TypeError(
                f"Got {repr(value)} of type {type(value).__name__}, "
                "expected 'str'"
            )
        if '\n' in value or '\r' in value:
            raise ValueError(
                f"Text can not contain line breaks, got {repr(value)}; "
                "use LINE to break lines"
            )
        self.value = value

    def __repr__(self):
        return f'Text({repr(self.value)})'


class Line(Doc):
    __slots__ = ()

    def __repr__(self):
        return 'LINE'


LINE = Line()
SPACE = Text(' ')


class Concat(Doc):
    __slots__ = ('left', 'right')

    def __init__(self, left, right):
        assert isinstance(left, Doc)
        assert isinstance(right, Doc)
        self.left = left
        self.right = right

    def __repr__(self):
        return f'Concat({repr(self.left)}, {repr(self.right)})'


class Nest(Doc):
    __slots__ = ('indent', 'doc')

    def __init__(self, indent, doc):
        if not isinstance(indent, int):
            raise TypeError(
                f"Got {repr(indent)} of type {type(indent).__name__}, "
                "expected 'int'"
            )
        assert isinstance(doc, Doc)

        self.indent = indent
        self.doc = doc

    def __repr__(self):
        return f'Nest({repr(self.indent)}, {repr(self.doc)})'


class Union(Doc):
    """A layout choice. ``flat`` is always ``flatten(broken)``; build
    these with :func:`prettydoc.api.group`, never directly."""

    __slots__ = ('flat', 'broken')

    def __init__(self, flat, broken):
        self.flat = flat
        self.broken = broken

    def __repr__(self):
        return (
            f'Union(flat={repr(self.flat)}, '
            f'broken={repr(self.broken)})'
        )


class Nesting(Doc):
    """Deferred doc, resolved by calling ``fn`` with the indentation
    active where it is laid out.

    ``fn`` must be pure. A ``fn`` that keeps producing more deferred
    docs from itself makes layout loop forever; that is not detected.
    """

    __slots__ = ('fn', )

    def __init__(self, fn):
        self.fn = fn

    def __repr__(self):
        return f'Nesting({repr(self.fn)})'


class Column(Doc):
    """Deferred doc, resolved by calling ``fn`` with the output column
    where it is laid out. Same caveats as :class:`Nesting`."""

    __slots__ = ('fn', )

    def __init__(self, fn):
        self.fn = fn

    def __repr__(self):
        return f'Column({repr(self.fn)})'


def _structurally_equal(a, b):
    pending = [(a, b)]
    while pending:
        x, y = pending.pop()
        if x is y:
            continue
        if type(x) is not type(y):
            return False

        if isinstance(x, Concat):
            pending.append((x.right, y.right))
            pending.append((x.left, y.left))
        elif isinstance(x, Nest):
            if x.indent != y.indent:
                return False
            pending.append((x.doc, y.doc))
        elif isinstance(x, Text):
            if x.value != y.value:
                return False
        elif isinstance(x, Union):
            pending.append((x.broken, y.broken))
            pending.append((x.flat, y.flat))
        elif isinstance(x, (Nesting, Column)):
            if x.fn is not y.fn:
                return False
    return True


def flatten(doc):
    """Returns the single-line form of ``doc``.

    Every ``Line`` becomes a space and every ``Union`` its ``flat``
    branch. ``Nesting`` and ``Column`` are left as they are; whatever
    they produce is laid out as-is later on.

    Subtrees that contain nothing to flatten are shared with the input,
    so ``flatten(flatten(doc))`` returns an identical tree.
    """
    results = []
    # (node, children_done)
    stack = [(doc, False)]

    while stack:
        node, children_done = stack.pop()

        if isinstance(node, Concat):
            if children_done:
                right = results.pop()
                left = results.pop()
                if left is node.left and right is node.right:
                    results.append(node)
                else:
                    results.append(Concat(left, right))
            else:
                stack.append((node, True))
                stack.append((node.right, False))
                stack.append((node.left, False))
        elif isinstance(node, Nest):
            if children_done:
                inner = results.pop()
                if inner is node.doc:
                    results.append(node)
                else:
                    results.append(Nest(node.indent, inner))
            else:
                stack.append((node, True))
                stack.append((node.doc, False))
        elif isinstance(node, Line):
            results.append(SPACE)
        elif isinstance(node, Union):
            results.append(node.flat)
        else:
            results.append(node)

    assert len(results) == 1
    return results[0]
