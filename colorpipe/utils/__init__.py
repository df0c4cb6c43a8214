from .curry import data_last
from .num_utils import round_half_away, np_round_half_away, clamp_channel, np_clamp_channels, to_unit
from .pipe import pipe, compose

__all__ = [
    "data_last",
    "round_half_away",
    "np_round_half_away",
    "clamp_channel",
    "np_clamp_channels",
    "to_unit",
    "pipe",
    "compose",
]
