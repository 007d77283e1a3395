from dataclasses import dataclass
from numbers import Integral

from asciiart.brightness import Brightness
from asciiart.charsets import BRIGHTNESS_SCALE
from asciiart.errors import InvalidArgument
from asciiart.resize import check_dimensions

DEFAULT_WIDTH = 464
DEFAULT_HEIGHT = 261
DEFAULT_BRIGHTNESS = Brightness.AVERAGE
DEFAULT_INVERT = False
DEFAULT_COLOUR = True
# Terminal cells are roughly twice as tall as wide
CHAR_PADDING = 2


@dataclass(frozen=True)
class RenderOptions:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    brightness: Brightness = DEFAULT_BRIGHTNESS
    invert: bool = DEFAULT_INVERT
    colour: bool = DEFAULT_COLOUR
    padding: int = CHAR_PADDING
    scale: str = BRIGHTNESS_SCALE

    def validate(self) -> None:
        check_dimensions(self.width, self.height)
        if isinstance(self.padding, bool) or not isinstance(self.padding, Integral) or self.padding < 1:
            raise InvalidArgument(f"padding must be a positive integer, got {self.padding!r}")
        if not self.scale:
            raise InvalidArgument("Brightness scale must contain at least one character")
        if not isinstance(self.brightness, Brightness):
            raise InvalidArgument(f"Unknown brightness mapping: {self.brightness!r}")
