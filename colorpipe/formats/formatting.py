import numpy as np
from ..types.color_types import ColorLike, Scalar, element_to_tuple
from ..types.format_type import RGBA_TEMPLATE
from ..utils.curry import data_last
from ..utils.num_utils import clamp_channel


def format_alpha(alpha: Scalar) -> str:
    """Shortest decimal form of ``alpha``: 0.07 -> '0.07', 1.0 -> '1'."""
    value = alpha if isinstance(alpha, np.floating) else float(alpha)
    return np.format_float_positional(value, trim='-')


@data_last(0)
def color_to_str(rgba: ColorLike) -> str:
    """
    Render an RGBA value as ``rgba(R, G, B, A)``.

    >>> color_to_str((23, 137, 55, 0.07))
    'rgba(23, 137, 55, 0.07)'
    >>> color_to_str()((0, 0, 0, 1))
    'rgba(0, 0, 0, 1)'
    """
    r, g, b, a = element_to_tuple(rgba, 4)
    return RGBA_TEMPLATE.format(
        r=clamp_channel(r), g=clamp_channel(g), b=clamp_channel(b), a=format_alpha(a)
    )


@data_last(0)
def color_to_hex(rgba: ColorLike) -> str:
    """Render the r, g, b channels as an uppercase ``#RRGGBB`` string."""
    r, g, b = (clamp_channel(v) for v in element_to_tuple(rgba, 3))
    return f"#{r:02X}{g:02X}{b:02X}"


color2str = color_to_str
