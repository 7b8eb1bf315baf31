"""Parser for ``x,y,z`` point lists.

One point per line, base-10 non-negative integers separated by commas.
Blank lines are skipped; line order defines the point index.
"""

from pathlib import Path

from pointlink.models import MAX_COORDINATE, Point, PointStore

__all__ = ["PointParseError", "parse_point_line", "parse_points", "read_points"]

FIELD_COUNT = 3


class PointParseError(ValueError):
    """Raised when a line is not a well-formed ``x,y,z`` point.

    Attributes
    ----------
    line_number : int
        1-based line number of the offending line.
    line : str
        The offending line, stripped.
    """

    def __init__(self, message: str, line_number: int, line: str) -> None:
        super().__init__(f"line {line_number}: {message}: {line!r}")
        self.line_number = line_number
        self.line = line


def parse_point_line(line: str, line_number: int = 1) -> Point:
    """Parse a single ``x,y,z`` line.

    Parameters
    ----------
    line : str
        Raw line; surrounding whitespace is ignored.
    line_number : int, optional
        1-based line number used in error messages, by default 1.

    Returns
    -------
    Point
        Parsed point.

    Raises
    ------
    PointParseError
        If the field count is wrong, a field is not a non-negative integer,
        or a value exceeds ``MAX_COORDINATE``.
    """
    stripped = line.strip()
    fields = stripped.split(",")
    if len(fields) != FIELD_COUNT:
        raise PointParseError(
            f"expected {FIELD_COUNT} fields, got {len(fields)}",
            line_number,
            stripped,
        )

    coords: list[int] = []
    for field in fields:
        token = field.strip()
        # isdecimal() rejects signs, so negatives are caught here too
        if not token.isdecimal():
            raise PointParseError(
                f"not a non-negative integer: {token!r}",
                line_number,
                stripped,
            )
        value = int(token)
        if value > MAX_COORDINATE:
            raise PointParseError(
                f"coordinate {value} exceeds {MAX_COORDINATE}",
                line_number,
                stripped,
            )
        coords.append(value)

    return Point(*coords)


def parse_points(text: str) -> PointStore:
    """Parse a whole point list.

    Parameters
    ----------
    text : str
        File contents, one point per line.

    Returns
    -------
    PointStore
        Points in line order.

    Raises
    ------
    PointParseError
        On the first malformed line.
    """
    points = [
        parse_point_line(line, line_number)
        for line_number, line in enumerate(text.splitlines(), start=1)
        if line.strip()
    ]
    return PointStore(points)


def read_points(path: str | Path) -> PointStore:
    """Read and parse a point list file.

    Parameters
    ----------
    path : str | Path
        Path to a UTF-8 text file.

    Returns
    -------
    PointStore
        Points in line order.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    PointParseError
        On the first malformed line, including a line that is not valid
        UTF-8.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    raw = file_path.read_bytes()
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        line_number = raw.count(b"\n", 0, e.start) + 1
        bad_line = raw.split(b"\n")[line_number - 1].decode("utf-8", errors="replace")
        raise PointParseError(
            f"invalid UTF-8 at byte {e.start}",
            line_number,
            bad_line.strip(),
        ) from e

    return parse_points(text)
