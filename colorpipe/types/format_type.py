# No dependencies
import re

CHANNEL_MAX = 255
ALPHA_MAX = 1.0

# Hue is a fraction of the wheel; the HSL -> RGB formula walks it in six sectors
HUE_SECTORS = 6

HEX_LENGTH = 7
HEX_REGEX = re.compile(r"^#([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})$")

RGBA_TEMPLATE = "rgba({r}, {g}, {b}, {a})"
