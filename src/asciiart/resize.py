import logging
from numbers import Integral

from PIL import Image

from asciiart.errors import InvalidDimension

logger = logging.getLogger(__name__)


def check_dimensions(width: int, height: int) -> None:
    """Raise InvalidDimension unless both sides are positive integers."""
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, Integral) or value <= 0:
            raise InvalidDimension(f"{name} must be a positive integer, got {value!r}")


def resize_image(image: Image.Image, width: int, height: int) -> Image.Image:
    """Scale an image to exactly width x height with area averaging.

    No aspect-ratio correction is done; disproportionate sizes stretch the
    picture. The caller's image is left untouched.
    """
    check_dimensions(width, height)
    if image.mode != "RGB":
        image = image.convert("RGB")
    logger.debug("Resizing %dx%d image to %dx%d", image.width, image.height, width, height)
    return image.resize((int(width), int(height)), Image.BOX)
