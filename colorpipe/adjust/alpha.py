import numbers
from ..exceptions import InvalidArgument
from ..types.color_types import RGBA, ColorLike, Scalar, element_to_tuple
from ..types.format_type import ALPHA_MAX
from ..utils.curry import data_last


def validate_alpha(alpha: Scalar) -> None:
    """Raise ``InvalidArgument`` unless ``alpha`` is a number in [0, 1]."""
    if isinstance(alpha, bool) or not isinstance(alpha, numbers.Real):
        raise InvalidArgument(f"Alpha must be a number, got {alpha!r}")
    if not 0 <= alpha <= ALPHA_MAX:
        raise InvalidArgument(f"Alpha must lie in [0, {ALPHA_MAX}], got {alpha!r}")


@data_last(1, validate=validate_alpha)
def with_alpha(alpha: Scalar, rgba: ColorLike) -> RGBA:
    """Return ``rgba`` with its alpha channel replaced by ``alpha``."""
    r, g, b = element_to_tuple(rgba, 3)
    return (r, g, b, alpha)
