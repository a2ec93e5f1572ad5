"""Split labels into plain and matched spans for rendering."""

import re


def split_highlight(label: str, query: str) -> list[tuple[str, bool]]:
    """
    Split `label` around case-insensitive occurrences of `query`.

    Examples:
        >>> split_highlight("Audio Books", "audio")
        [('Audio', True), (' Books', False)]
        >>> split_highlight("Audio", "")
        [('Audio', False)]

    Returns:
        Ordered (text, matched) spans that concatenate back to `label`
    """
    if not query or not label:
        return [(label, False)]

    spans: list[tuple[str, bool]] = []
    pos = 0
    for m in re.finditer(re.escape(query), label, flags=re.IGNORECASE):
        if m.start() > pos:
            spans.append((label[pos : m.start()], False))
        spans.append((m.group(0), True))
        pos = m.end()
    if pos < len(label):
        spans.append((label[pos:], False))
    return spans or [(label, False)]
