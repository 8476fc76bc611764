"""Coordinate template mini-language.

A template is an ordinary string with placeholder tokens. Everything that is
not a token is copied verbatim when rendering and must appear verbatim when
parsing.

Tokens (the axis letter is ``y`` for latitude and ``x`` for longitude):

    ``%yd2``     degrees field, zero padded to 2 integer digits
    ``%xm2.1``   minutes field, 2 integer digits and 1 decimal
    ``%yc``      cardinal letter, N for north/zero and S for south
    ``%xC``      inverted cardinal letter (W for east, E for west)

Width and precision are single digits; a missing or zero width means no
padding and a missing or zero precision means no fractional part. When an
axis has both a degrees and a minutes field, the degrees field shows whole
degrees and the minutes field carries the remainder. An axis without a
cardinal token renders a leading ``-`` when negative. When parsing, a
cardinal letter decides the sign of its axis and a leading ``-`` is only
honoured on axes without one.

Example:
    >>> fmt = CoordinateFormat("%yd2°%ym2.1'%yc %xd3°%xm2.1'%xc")
    >>> fmt.render(37.5665, -122.4194)
    "37°34.0'N 122°25.2'W"
    >>> lat, lng = fmt.parse("37°34.0'N 122°25.2'W")
    >>> round(lat, 4), round(lng, 4)
    (37.5667, -122.42)
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import lru_cache

logger = logging.getLogger(__name__)

TOKEN_PATTERN = re.compile(
    r"%(?P<axis>[xy])(?:(?P<field>[dm])(?P<width>\d)?(?:\.(?P<precision>\d))?|(?P<cardinal>[cC]))"
)

_CARDINALS = {"y": ("N", "S"), "x": ("E", "W")}


@dataclass(frozen=True)
class Token:
    """One placeholder of a template.

    Attributes:
        axis: ``"y"`` (latitude) or ``"x"`` (longitude).
        field: ``"d"`` or ``"m"`` for numeric fields, ``None`` for cardinals.
        width: Minimum number of integer digits, 0 for no padding.
        precision: Number of decimals, 0 for none.
        cardinal: ``"c"``, ``"C"`` or ``None`` for numeric fields.
    """

    axis: str
    field: str | None = None
    width: int = 0
    precision: int = 0
    cardinal: str | None = None

    @property
    def is_numeric(self) -> bool:
        return self.field is not None

    def pattern(self) -> str:
        """Regular expression matching this token's rendered text."""
        if self.cardinal:
            positive, negative = _CARDINALS[self.axis]
            return f"({positive}|{negative})"
        digits = rf"\d{{{self.width},}}" if self.width else r"\d+"
        fraction = r"\.\d+" if self.precision else ""
        return f"(-?{digits}{fraction})"


@dataclass
class _AxisLayout:
    degrees: Token | None = None
    minutes: Token | None = None
    cardinal: bool = False


class CoordinateFormat:
    """A compiled coordinate template.

    Rendering and parsing share the same token list, so any string produced
    by render() is accepted by parse() and yields the rendered coordinates.

    Attributes:
        template (str): The source template.
        parts (list[str | Token]): Literal text and tokens in template order.
        regex (re.Pattern): Case-insensitive pattern with one group per token.
    """

    def __init__(self, template: str):
        self.template = template
        self.parts: list[str | Token] = []
        self._layout = {"y": _AxisLayout(), "x": _AxisLayout()}

        position = 0
        for match in TOKEN_PATTERN.finditer(template):
            if match.start() > position:
                self.parts.append(template[position : match.start()])
            token = Token(
                axis=match["axis"],
                field=match["field"],
                width=int(match["width"] or 0),
                precision=int(match["precision"] or 0),
                cardinal=match["cardinal"],
            )
            self.parts.append(token)
            self._register(token)
            position = match.end()
        if position < len(template):
            self.parts.append(template[position:])

        body = "".join(
            part.pattern() if isinstance(part, Token) else re.escape(part)
            for part in self.parts
        )
        self.regex = re.compile(rf"\s*{body}\s*", re.IGNORECASE)

    def _register(self, token: Token) -> None:
        # The first field of each kind per axis drives rounding.
        layout = self._layout[token.axis]
        if token.cardinal:
            layout.cardinal = True
        elif token.field == "d" and layout.degrees is None:
            layout.degrees = token
        elif token.field == "m" and layout.minutes is None:
            layout.minutes = token

    @property
    def tokens(self) -> list[Token]:
        return [part for part in self.parts if isinstance(part, Token)]

    # -------------------------------- Rendering --------------------------------
    def _fields(self, axis: str, value: float) -> tuple[bool, float, float]:
        """Split a signed decimal value into (negative, degrees, minutes).

        The magnitude is rounded once at the finest precision used by the
        axis, so the minutes never render as 60.
        """
        layout = self._layout[axis]
        magnitude = abs(value)
        if layout.minutes is not None:
            scale = 10**layout.minutes.precision
            total = round(magnitude * 60 * scale)
            if layout.degrees is not None:
                degrees, remainder = divmod(total, 60 * scale)
                return value < 0 and total != 0, float(degrees), remainder / scale
            return value < 0 and total != 0, 0.0, total / scale
        if layout.degrees is not None:
            degrees = round(magnitude, layout.degrees.precision)
            return value < 0 and degrees != 0, degrees, 0.0
        return value < 0, 0.0, 0.0

    @staticmethod
    def _number(value: float, token: Token) -> str:
        text = f"{value:.{token.precision}f}"
        integer, dot, fraction = text.partition(".")
        return integer.zfill(token.width) + dot + fraction

    def render(self, lat: float, lng: float) -> str:
        """Substitute every token with the matching field of (lat, lng)."""
        values = {"y": lat, "x": lng}
        fields = {axis: self._fields(axis, value) for axis, value in values.items()}
        signed = {axis: False for axis in values}

        out = []
        for part in self.parts:
            if not isinstance(part, Token):
                out.append(part)
                continue

            negative, degrees, minutes = fields[part.axis]
            if part.cardinal:
                positive_letter, negative_letter = _CARDINALS[part.axis]
                if part.cardinal == "C":
                    negative = not negative
                out.append(negative_letter if negative else positive_letter)
                continue

            text = self._number(degrees if part.field == "d" else minutes, part)
            if negative and not self._layout[part.axis].cardinal and not signed[part.axis]:
                text = "-" + text
                signed[part.axis] = True
            out.append(text)
        return "".join(out)

    # -------------------------------- Parsing --------------------------------
    def parse(self, text: str) -> tuple[float, float] | None:
        """Read (lat, lng) back from text rendered with this template.

        Returns:
            tuple[float, float] | None: Decimal degrees, or None when text
            does not match the template.
        """
        match = self.regex.fullmatch(text)
        if match is None:
            logger.debug("%r does not match template %r", text, self.template)
            return None

        magnitude = {"y": 0.0, "x": 0.0}
        sign = {"y": 1, "x": 1}
        cardinal_sign = {}
        for token, captured in zip(self.tokens, match.groups()):
            if token.cardinal:
                negative = captured.upper() == _CARDINALS[token.axis][1]
                if token.cardinal == "C":
                    negative = not negative
                cardinal_sign[token.axis] = -1 if negative else 1
                continue

            if captured.startswith("-"):
                sign[token.axis] = -1
            weight = 1.0 if token.field == "d" else 1 / 60
            magnitude[token.axis] += weight * abs(float(captured))
        sign.update(cardinal_sign)
        return sign["y"] * magnitude["y"], sign["x"] * magnitude["x"]

    def __repr__(self) -> str:
        return f"CoordinateFormat({self.template!r})"


@lru_cache(maxsize=64)
def compile_format(template: str) -> CoordinateFormat:
    """Return the compiled form of template, cached per template string."""
    return CoordinateFormat(template)
