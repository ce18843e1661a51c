"""
Output formatting helpers.
"""


def format_offset(offset: int, fmt: str = 'hex', base_address: int = 0) -> str:
    """
    Render a match offset for display.

    Args:
        offset: Haystack offset
        fmt: 'hex' or 'dec'
        base_address: Value added to the offset before rendering

    Returns:
        Formatted address string
    """
    address = base_address + offset
    if fmt == 'hex':
        return f'0x{address:X}'
    if fmt == 'dec':
        return str(address)
    raise ValueError(f"unknown offset format: {fmt!r}")


def hex_dump(data: bytes, offset: int, length: int) -> str:
    """
    Render bytes as space-separated upper-case hex.

    Args:
        data: Source buffer
        offset: First byte to render
        length: Number of bytes to render

    Returns:
        String such as "33 35 42", in the same form as pattern strings
    """
    return ' '.join(f'{b:02X}' for b in data[offset:offset + length])
