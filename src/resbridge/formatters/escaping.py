"""Escaping rules for Android string resources."""

from .placeholders import to_canonical, to_platform


def decode(text: str) -> str:
    """Convert the text of a <string> element to canonical text.

    Only ``&lt;`` and ``&amp;`` are resolved. Other entities such as
    ``&quot;`` or ``&gt;`` are left as they are.

    Args:
        text: Raw element text.

    Returns:
        Canonical text with canonical placeholders.
    """
    text = (text
            .replace("\\'", "'")
            .replace('\\"', '"')
            .replace("\n", "")
            .replace("&lt;", "<")
            .replace("&amp;", "&"))
    return to_canonical(text)


def encode(text: str) -> str:
    """Convert canonical text to the text of a <string> element.

    Android requires apostrophes and quotes to be backslash-escaped and
    ``&`` and ``<`` to be written as entities. Placeholders are converted
    last so that their numbering is not affected by the escaping.

    Args:
        text: Canonical text.

    Returns:
        Escaped text ready to be written between <string> tags.
    """
    text = (text
            .replace("'", "\\'")
            .replace('"', '\\"')
            .replace("&", "&amp;")
            .replace("<", "&lt;"))
    return to_platform(text)
