"""Opaque identifier generation."""

import secrets
import string
import time

_BASE36_ALPHABET = string.digits + string.ascii_lowercase


def generate_id() -> str:
    """Generate a probabilistically unique id of the form ``<epoch-ms>-<9 base36 chars>``.

    There is no registry and no collision check.
    """
    suffix = "".join(secrets.choice(_BASE36_ALPHABET) for _ in range(9))
    return f"{int(time.time() * 1000)}-{suffix}"
