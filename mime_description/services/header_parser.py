"""
mime_description/services/header_parser.py

Turns a raw Content-Type value into the canonical key used for lookups.

    "  Text/HTML ; charset=ISO-8859-1 "  ->  "text/html"

Parameters are discarded, never parsed: splitting happens on the literal
``;`` character, so quoted parameter values that contain ``;`` only affect
segments that are thrown away anyway.
"""

from mime_description.core.constants import PARAMETER_SEPARATOR


def extract_mime_type(header: str) -> str:
    """
    Return the lowercase ``type/subtype`` part of a Content-Type header.

    Total: any string is accepted and the result may be empty
    (``""`` and ``";charset=utf-8"`` both yield ``""``). The result is not
    validated; ``"Not-A-Mime-Type"`` comes back as ``"not-a-mime-type"``.

    Args:
        header: Raw header value, with or without parameters.

    Returns:
        The first ``;``-separated segment, stripped and lowercased.
    """
    media_type = header.split(PARAMETER_SEPARATOR, 1)[0]
    return media_type.strip().lower()
