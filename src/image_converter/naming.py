"""Suffix matching and output-name derivation."""

from __future__ import annotations


def matches_suffix(name: str, from_suffix: str) -> bool:
    """Return whether ``name`` ends with ``from_suffix``, ignoring case."""
    return name.upper().endswith(from_suffix.upper())


def derive_output_name(name: str, from_suffix: str, to_suffix: str) -> str:
    """Replace the last case-insensitive occurrence of ``from_suffix`` with ``to_suffix``.

    The replacement is a literal substring operation and is not
    extension-aware: separators such as ``.`` are neither added nor
    preserved, so tokens must already carry them if wanted.

    Parameters
    ----------
    name : str
        Source file path as a string.
    from_suffix : str
        Token that ``name`` is expected to end with.
    to_suffix : str
        Token written in place of the matched occurrence.

    Returns
    -------
    str
        Destination path string.

    Raises
    ------
    ValueError
        If ``name`` does not end with ``from_suffix``.
    """
    if not matches_suffix(name, from_suffix):
        raise ValueError(f"{name!r} does not end with {from_suffix!r}")
    index = name.upper().rfind(from_suffix.upper())
    return name[:index] + to_suffix
