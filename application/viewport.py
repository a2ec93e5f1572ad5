"""Scroll window and scrollbar geometry derived from the flattened tree."""


def calculate_visible_range(cursor: int, total: int, height: int, offset: int) -> tuple[int, int, int]:
    """
    Keep `cursor` inside a window of `height` rows.

    Args:
        cursor: Selected row index (flattened)
        total: Number of visible rows
        height: Rows available on screen
        offset: Current first row shown

    Returns:
        (start, end, offset) where rows[start:end] are drawn and offset is the
        new scroll position
    """
    if total <= 0 or height <= 0:
        return 0, 0, 0
    cursor = max(0, min(cursor, total - 1))
    offset = max(0, min(offset, max(0, total - height)))
    if cursor < offset:
        offset = cursor
    elif cursor >= offset + height:
        offset = cursor - height + 1
    end = min(offset + height, total)
    return offset, end, offset


def scrollbar_thumb(total: int, offset: int, height: int) -> tuple[int, int]:
    """
    Thumb (start, size) in a scrollbar track of `height` cells.

    When everything fits the thumb fills the track.
    """
    if height <= 0:
        return 0, 0
    if total <= height:
        return 0, height
    size = max(1, round(height * height / total))
    max_start = height - size
    max_offset = total - height
    start = round(offset * max_start / max_offset) if max_offset else 0
    return max(0, min(start, max_start)), size
