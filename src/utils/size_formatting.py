"""Utility functions for formatting file and data sizes."""

_UNITS = ["B", "KB", "MB", "GB", "TB", "PB"]


def format_bytes(size_bytes: int | float) -> str:
    """Format bytes as human-readable string using 1024-based units.

    Args:
        size_bytes: Size in bytes

    Returns:
        Human-readable size string (e.g., "512 B", "1.50 KB", "2.30 MB")

    Raises:
        ValueError: If size_bytes is negative
    """
    if size_bytes < 0:
        raise ValueError(f"Byte count must be non-negative, got {size_bytes}")

    size = float(size_bytes)
    unit_index = 0
    while size >= 1024.0 and unit_index < len(_UNITS) - 1:
        size /= 1024.0
        unit_index += 1

    # 1048575 B would otherwise print as "1024.00 KB"
    if unit_index > 0 and round(size, 2) >= 1024.0 and unit_index < len(_UNITS) - 1:
        size /= 1024.0
        unit_index += 1

    if unit_index == 0:
        return f"{int(size_bytes)} B"
    return f"{size:.2f} {_UNITS[unit_index]}"
