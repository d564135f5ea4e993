"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from collections.abc import Iterable


def sanitize_hostname(hostname: str) -> str:
    """Turn a hostname into a node name.

    Node names must be lowercase DNS labels, and local hostnames often
    carry uppercase letters. Only case is normalised; characters that are
    invalid in a DNS label are left alone.

    Example:
        >>> sanitize_hostname("Build-Box.Local")
        'build-box.local'
    """
    return hostname.lower()


def split_one_label(raw: str) -> tuple[str, str] | None:
    r"""Split a ``key=value`` token on its first ``=``.

    Returns:
        ``(key, value)``; ``(key, "")`` when there is no ``=``; ``None``
        when the key is empty.

    Example:
        >>> split_one_label("tier=web=frontend")
        ('tier', 'web=frontend')
        >>> split_one_label("justkey")
        ('justkey', '')
        >>> split_one_label("=bad") is None
        True
    """
    key, _, value = raw.partition("=")
    if not key:
        return None
    return key, value


def parse_node_labels(tokens: Iterable[str]) -> dict[str, str]:
    """Build a label mapping from raw tokens, dropping malformed ones.

    Later duplicates overwrite earlier ones.

    Example:
        >>> parse_node_labels(["label1=val1", "=bad", "justkey"])
        {'label1': 'val1', 'justkey': ''}
    """
    labels: dict[str, str] = {}
    for token in tokens:
        pair = split_one_label(token)
        if pair is not None:
            labels[pair[0]] = pair[1]
    return labels


__all__ = [
    "parse_node_labels",
    "sanitize_hostname",
    "split_one_label",
]
