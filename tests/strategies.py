from hypothesis import strategies as st

from prettydoc import (
    align,
    append,
    group,
    nest,
    text,
    NIL,
    LINE,
)

leaves = st.one_of(
    st.just(NIL),
    st.just(LINE),
    st.text(alphabet='abc xyz(),', max_size=6).map(text),
)


def _extend(children):
    return st.one_of(
        st.tuples(children, children).map(lambda pair: append(*pair)),
        st.tuples(st.integers(-3, 4), children).map(
            lambda pair: nest(*pair)
        ),
        children.map(group),
    )


def _extend_with_align(children):
    return st.one_of(_extend(children), children.map(align))


# Docs without Nesting/Column nodes.
static_docs = st.recursive(leaves, _extend, max_leaves=20)

docs = st.recursive(leaves, _extend_with_align, max_leaves=20)

widths = st.integers(min_value=-2, max_value=40)
