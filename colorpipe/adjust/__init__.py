from .alpha import validate_alpha, with_alpha
from .luminosity import luminosity, np_luminosity

__all__ = [
    "validate_alpha",
    "with_alpha",
    "luminosity",
    "np_luminosity",
]
