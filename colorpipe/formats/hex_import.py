import logging
from ..adjust.alpha import validate_alpha
from ..exceptions import ParseError
from ..types.color_types import RGBA, Scalar
from ..types.format_type import HEX_LENGTH, HEX_REGEX
from ..utils.curry import data_last

logger = logging.getLogger(__name__)


def parse_hex(value: str) -> tuple[int, int, int]:
    """
    Parse a ``#RRGGBB`` string (case-insensitive) into three channels.

    Raises:
        ParseError: missing ``#``, wrong length or non-hex characters
    """
    if not isinstance(value, str):
        raise ParseError(value, "expected a string")
    if not value.startswith("#"):
        logger.debug("Rejecting hex color without leading '#': %r", value)
        raise ParseError(value, "missing leading '#'")
    if len(value) != HEX_LENGTH:
        logger.debug("Rejecting hex color of length %d: %r", len(value), value)
        raise ParseError(value, f"expected {HEX_LENGTH} characters, got {len(value)}")
    match = HEX_REGEX.match(value)
    if match is None:
        logger.debug("Rejecting hex color with non-hex digits: %r", value)
        raise ParseError(value, "non-hexadecimal characters")
    return tuple(int(group, 16) for group in match.groups())


@data_last(1, validate=validate_alpha)
def import_color(alpha: Scalar, hex_string: str) -> RGBA:
    """
    Build an RGBA value from a ``#RRGGBB`` string and an alpha.

    >>> import_color(0.7, "#58D68D")
    (88, 214, 141, 0.7)
    >>> to_rgba = import_color(1)
    >>> to_rgba("#ff0000")
    (255, 0, 0, 1)
    """
    r, g, b = parse_hex(hex_string)
    return (r, g, b, alpha)


import_hex = import_color
