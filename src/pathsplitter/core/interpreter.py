"""Cursor/segment interpreter and subpath collector.

Walks a token stream while tracking the pen position and the start point
of the current subpath. Relative commands are resolved to absolute
coordinates, implicit command repetition is expanded, and for each
moveto-delimited run a SubPath record is produced with its original
tokens, bounding box, endpoint polygon, and start point.

Geometry recorded per command:
- M, L, H, V, T, A: the resulting endpoint (bbox and polygon)
- C: both control points (bbox only) and the endpoint
- S, Q: the explicit control point (bbox only) and the endpoint
- Z: nothing; the pen returns to the subpath start

Arc extrema between endpoints are not accounted for.
"""

from pathsplitter.core.serializer import format_number
from pathsplitter.domain import BoundingBox, Point, SubPath, Token

PARAM_COUNTS: dict[str, int] = {
    "M": 2, "m": 2,
    "L": 2, "l": 2,
    "H": 1, "h": 1,
    "V": 1, "v": 1,
    "C": 6, "c": 6,
    "S": 4, "s": 4,
    "Q": 4, "q": 4,
    "T": 2, "t": 2,
    "A": 7, "a": 7,
    "Z": 0, "z": 0,
}

# Command used for coordinate groups repeated after a moveto
_IMPLICIT_AFTER_MOVETO = {"M": "L", "m": "l"}


class SegmentInterpreter:
    """Interprets path tokens into SubPath records.

    One interpreter handles one token stream; create a new instance per
    decomposition.

    Example:
        interpreter = SegmentInterpreter()
        subpaths = interpreter.run(tokenize("M0 0 L10 0 L10 10 Z"))
    """

    def __init__(self) -> None:
        self._cursor = Point(0.0, 0.0)
        self._start = Point(0.0, 0.0)
        self._command = ""
        self._insert_lineto = False
        self._subpaths: list[SubPath] = []
        self._reset_subpath()

    def _reset_subpath(self) -> None:
        self._tokens: list[Token] = []
        self._bbox = BoundingBox()
        self._polygon: list[Point] = []
        self._moveto: Point | None = None
        self._origin = self._cursor

    def _record(self, x: float, y: float) -> None:
        self._bbox.include(x, y)
        self._polygon.append(Point(x, y))

    def _finalize(self) -> None:
        """Close the current run into a SubPath. Empty runs are discarded."""
        if self._tokens:
            bbox = self._bbox
            if bbox.is_empty():
                bbox = BoundingBox.from_point(self._cursor.x, self._cursor.y)
            self._subpaths.append(
                SubPath(
                    tokens=self._tokens,
                    bbox=bbox,
                    polygon=self._polygon,
                    start_point=self._moveto if self._moveto is not None else self._origin,
                )
            )
        self._reset_subpath()

    def run(self, tokens: list[Token]) -> list[SubPath]:
        """Interpret a token stream.

        Args:
            tokens: Tokens from the tokenizer

        Returns:
            SubPath records in order of appearance
        """
        i = 0
        n = len(tokens)

        while i < n:
            token = tokens[i]

            if token.is_command:
                i = self._handle_command(tokens, i)
                continue

            if self._insert_lineto:
                self._tokens.append(Token.command("l"))
                self._command = "l"
                self._insert_lineto = False

            command = _IMPLICIT_AFTER_MOVETO.get(self._command, self._command)
            if PARAM_COUNTS.get(command, 0) == 0:
                # No command to repeat: stray number
                i += 1
                continue

            i = self._consume_group(tokens, i, command)

        self._finalize()
        return self._subpaths

    def _handle_command(self, tokens: list[Token], i: int) -> int:
        command = tokens[i].text

        if command in "Mm" and self._tokens:
            self._finalize()

        if command == "m" and not self._tokens and self._promote_moveto(tokens, i):
            return i + 3

        self._command = command
        self._insert_lineto = False
        self._tokens.append(tokens[i])
        i += 1

        if command in "Zz":
            self._cursor = self._start
            return i

        if PARAM_COUNTS.get(command, 0) == 0:
            return i

        return self._consume_group(tokens, i, command)

    def _promote_moveto(self, tokens: list[Token], i: int) -> bool:
        """Rewrite a subpath-opening relative moveto as an absolute one.

        Returns:
            True if promoted, False if fewer than two numbers follow
        """
        if i + 2 >= len(tokens):
            return False
        dx_token, dy_token = tokens[i + 1], tokens[i + 2]
        if dx_token.is_command or dy_token.is_command:
            return False

        x = self._cursor.x + dx_token.value
        y = self._cursor.y + dy_token.value
        self._tokens.extend(
            [Token.command("M"), Token.number(format_number(x)), Token.number(format_number(y))]
        )
        self._moveto_to(x, y)

        # Coordinates that follow a promoted moveto are relative linetos
        self._command = "l"
        self._insert_lineto = True
        return True

    def _moveto_to(self, x: float, y: float) -> None:
        self._cursor = Point(x, y)
        self._start = self._cursor
        if self._moveto is None:
            self._moveto = self._cursor
        self._record(x, y)

    def _consume_group(self, tokens: list[Token], i: int, command: str) -> int:
        """Read one parameter group for a command and apply it.

        Missing parameters, whether at end of input or before the next
        command letter, are taken as 0.

        Returns:
            Index of the first token after the group
        """
        needed = PARAM_COUNTS[command]
        params: list[float] = []

        while len(params) < needed and i < len(tokens) and not tokens[i].is_command:
            params.append(tokens[i].value)
            self._tokens.append(tokens[i])
            i += 1

        while len(params) < needed:
            params.append(0.0)
            self._tokens.append(Token.number("0"))

        self._apply(command, params)
        return i

    def _apply(self, command: str, p: list[float]) -> None:
        relative = command.islower()
        cx, cy = self._cursor.x, self._cursor.y
        ox, oy = (cx, cy) if relative else (0.0, 0.0)
        kind = command.upper()

        if kind == "M":
            self._moveto_to(ox + p[0], oy + p[1])
            return

        if kind == "H":
            x, y = ox + p[0], cy
        elif kind == "V":
            x, y = cx, oy + p[0]
        elif kind in ("L", "T"):
            x, y = ox + p[0], oy + p[1]
        elif kind == "C":
            self._bbox.include(ox + p[0], oy + p[1])
            self._bbox.include(ox + p[2], oy + p[3])
            x, y = ox + p[4], oy + p[5]
        elif kind in ("S", "Q"):
            self._bbox.include(ox + p[0], oy + p[1])
            x, y = ox + p[2], oy + p[3]
        else:  # A
            x, y = ox + p[5], oy + p[6]

        self._record(x, y)
        self._cursor = Point(x, y)


def collect_subpaths(tokens: list[Token]) -> list[SubPath]:
    """Split a token stream into SubPath records."""
    return SegmentInterpreter().run(tokens)
