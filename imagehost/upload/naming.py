"""Filename generation for stored uploads.

Names look like ``<millisecond-epoch>-<random int below 1e9><extension>`` so
two uploads landing in the same millisecond still get different names.
"""
import secrets
import time

RANDOM_UPPER = 10**9
MAX_EXTENSION_LENGTH = 16


def extension_of(original_name):
    """Return the extension of a client-supplied filename, dot included.

    Only the last path component counts. A name without a dot has no
    extension. Extensions longer than MAX_EXTENSION_LENGTH or holding
    control characters are dropped so the stored name stays writable.
    """
    if not original_name:
        return ""
    base = original_name.replace("\\", "/").rsplit("/", 1)[-1]
    dot = base.rfind(".")
    if dot == -1:
        return ""
    ext = base[dot:]
    if len(ext) > MAX_EXTENSION_LENGTH or not ext.isprintable():
        return ""
    return ext


def generate_name(original_name):
    token = f"{int(time.time() * 1000)}-{secrets.randbelow(RANDOM_UPPER)}"
    return f"{token}{extension_of(original_name)}"
