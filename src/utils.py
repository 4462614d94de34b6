"""Line-oriented input helpers for the console front end"""

from typing import List, TextIO

from .search_server.errors import InvalidArgumentError


def read_line(stream: TextIO) -> str:
    """
    Read one line without its line terminator.

    Returns:
        The line, or "" at end of input
    """
    return stream.readline().rstrip("\r\n")


def read_line_with_number(stream: TextIO) -> int:
    """
    Read a line holding a single integer.

    Examples:
        >>> import io
        >>> read_line_with_number(io.StringIO("3\\n"))
        3

    Raises:
        InvalidArgumentError: Line is not an integer
    """
    line = read_line(stream)
    try:
        return int(line.strip())
    except ValueError:
        raise InvalidArgumentError(f"Expected a number, got {line!r}") from None


def parse_ratings(line: str) -> List[int]:
    """
    Parse a ratings line: count followed by that many integers.

    Examples:
        >>> parse_ratings("3 1 2 3")
        [1, 2, 3]
        >>> parse_ratings("0")
        []

    Raises:
        InvalidArgumentError: Malformed numbers or count mismatch
    """
    try:
        numbers = [int(part) for part in line.split()]
    except ValueError:
        raise InvalidArgumentError(f"Ratings line must contain integers, got {line!r}") from None
    if not numbers:
        raise InvalidArgumentError("Ratings line is empty")
    count, ratings = numbers[0], numbers[1:]
    if count != len(ratings):
        raise InvalidArgumentError(f"Ratings line declares {count} ratings but has {len(ratings)}")
    return ratings
