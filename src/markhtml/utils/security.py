#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Link safety predicates used by the HTML backend.

Functions
---------
- is_safe_link: Check a link target against the allow-list of paths and schemes
- is_relative_link: Check whether a link target is relative to the current document
"""

from markhtml.constants import SAFE_LINK_PATHS, SAFE_LINK_SCHEMES, URL_SCHEME_PATTERN


def _is_ascii_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def is_safe_link(link: str) -> bool:
    """Check if a link target is on the safe-link allow-list.

    A link is safe when it is a bare ``/``, ``./`` or ``../`` path (alone or
    followed by an ASCII letter or digit), or when it starts with one of
    ``http://``, ``https://``, ``ftp://`` or ``mailto://`` (compared
    case-insensitively) followed by an ASCII letter or digit.

    Parameters
    ----------
    link : str
        Link target to check

    Returns
    -------
    bool
        True if the link is safe, False otherwise

    Examples
    --------
    >>> is_safe_link("https://example.com")
    True
    >>> is_safe_link("/docs/index.html")
    True
    >>> is_safe_link("javascript:alert(1)")
    False
    >>> is_safe_link("https://")
    False

    """
    for path in SAFE_LINK_PATHS:
        if link.startswith(path):
            if len(link) == len(path) or _is_ascii_alnum(link[len(path)]):
                return True

    lowered = link.lower()
    for prefix in SAFE_LINK_SCHEMES:
        if len(link) > len(prefix) and lowered.startswith(prefix) and _is_ascii_alnum(link[len(prefix)]):
            return True

    return False


def is_relative_link(link: str) -> bool:
    """Check if a link target is relative to the current document.

    Fragments (``#top``), rooted paths (``/a/b``, but not protocol-relative
    ``//host``), ``./`` and ``../`` paths, and any other target that carries
    no URL scheme (``a/b``) are relative.

    Parameters
    ----------
    link : str
        Link target to check

    Returns
    -------
    bool
        True if the link is relative, False otherwise

    Examples
    --------
    >>> is_relative_link("#section")
    True
    >>> is_relative_link("/path/to/file")
    True
    >>> is_relative_link("a/b")
    True
    >>> is_relative_link("//cdn.example.com/x.js")
    False
    >>> is_relative_link("https://example.com")
    False

    """
    if not link:
        return False

    if link.startswith("#"):
        return True

    if link.startswith("//"):
        return False

    if link.startswith(("/", "./", "../")):
        return True

    return URL_SCHEME_PATTERN.match(link) is None
