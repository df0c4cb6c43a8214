from .formatting import color_to_str, color_to_hex, format_alpha, color2str
from .hex_import import import_color, parse_hex, import_hex

__all__ = [
    "color_to_str",
    "color_to_hex",
    "format_alpha",
    "color2str",
    "import_color",
    "parse_hex",
    "import_hex",
]
