"""Whitespace normalization shared by snippets and exemplars."""

_STRIP = str.maketrans("", "", " \t\n\r")


def normalize(text: str) -> str:
    """Remove space, tab, LF and CR characters, keeping everything else in order.

    CR goes beyond plain space/tab/newline stripping so that exemplars written
    with LF endings still match snippets pasted with CRLF endings.
    """
    return text.translate(_STRIP)
