"""Android resource formatter."""

from .android import AndroidFormatter
from .escaping import decode, encode
from .language import determine_language_given_path, resource_directory_for_language
from .placeholders import to_canonical, to_platform

__all__ = [
    "AndroidFormatter",
    "decode",
    "encode",
    "determine_language_given_path",
    "resource_directory_for_language",
    "to_canonical",
    "to_platform",
]
