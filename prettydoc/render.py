from io import StringIO

from .sdoc import (
    SText,
    SLine,
)


def render_to_stream(stream, sdocs, newline='\n', separator=' '):
    for sdoc in sdocs:
        if isinstance(sdoc, SText):
            stream.write(sdoc.value)
        elif isinstance(sdoc, SLine):
            # Indentation below zero renders as none.
            stream.write(newline + separator * max(sdoc.indent, 0))
        else:
            raise TypeError(
                f"Got {repr(sdoc)} of type {type(sdoc).__name__}, "
                "expected SText or SLine"
            )


def render_to_str(sdocs, newline='\n', separator=' '):
    stream = StringIO()
    render_to_stream(stream, sdocs, newline, separator)
    return stream.getvalue()
