import os

from .config import get_config
from .errors import NullSequenceError

def object_to_string_or_null(obj):
    """str(obj), or the configured null text (default "null") for None."""
    if obj is None:
        return get_config().text.null_text
    return str(obj)

def array_to_string(items, separator=None):
    """
    Formats items as "{ a, b, c }"; an empty collection gives "{ }".
    None elements are rendered with object_to_string_or_null().
    """
    if items is None:
        raise NullSequenceError("items")

    if separator is None:
        separator = get_config().text.separator

    items = list(items)
    if not items:
        return "{ }"

    return "{ " + separator.join(object_to_string_or_null(item) for item in items) + " }"

def change_extension(path, extension):
    """
    Replaces the extension of path. extension may be given with or without
    the leading dot; None or "" removes the extension.
    """
    root, _ = os.path.splitext(os.fspath(path))
    if not extension:
        return root

    if not extension.startswith('.'):
        extension = '.' + extension

    return root + extension
