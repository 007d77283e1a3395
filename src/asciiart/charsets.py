from types import MappingProxyType

# Ordered by how much of the cell each character inks, lightest first
BRIGHTNESS_SCALE = "`^\",:;Il!i~+_-?][}{1)(|\\/tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$"

# Declaration order breaks ties in nearest-colour lookups
BASIC_COLOURS = MappingProxyType(
    {
        "black": (0, 0, 0),
        "blue": (0, 0, 255),
        "cyan": (0, 255, 255),
        "green": (0, 255, 0),
        "red": (255, 0, 0),
        "white": (255, 255, 255),
        "yellow": (255, 255, 0),
        "magenta": (255, 0, 255),
    }
)
