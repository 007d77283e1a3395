import io
import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from asciiart.brightness import brightness_grid, invert_brightness
from asciiart.cells import CellGrid, Renderer
from asciiart.colours import annotate
from asciiart.config import RenderOptions
from asciiart.errors import DecodeError
from asciiart.glyphs import glyph_grid
from asciiart.resize import resize_image
from asciiart.sampling import colour_grid
from asciiart.terminal import TerminalRenderer

logger = logging.getLogger(__name__)


def load_image(path: str | Path) -> Image.Image:
    """Decode an image file fully into memory."""
    path = Path(path)
    try:
        with Image.open(path) as image:
            image.load()
            return image.copy()
    except FileNotFoundError as e:
        raise DecodeError(f"Unable to locate image: {path}") from e
    except UnidentifiedImageError as e:
        raise DecodeError(f"Unrecognised image format: {path}") from e
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        raise DecodeError(f"Unable to read image {path}: {e}") from e


def _open(source: Image.Image | str | Path) -> Image.Image:
    if isinstance(source, Image.Image):
        return source
    return load_image(source)


def image_to_cells(image: Image.Image, options: RenderOptions | None = None) -> CellGrid:
    options = options or RenderOptions()
    options.validate()

    resized = resize_image(image, options.width, options.height)
    colours = colour_grid(resized)
    brightness = brightness_grid(colours, options.brightness)
    if options.invert:
        brightness = invert_brightness(brightness)
    glyphs = glyph_grid(brightness, options.scale)
    return annotate(glyphs, colours if options.colour else None)


def render(
    source: Image.Image | str | Path,
    options: RenderOptions | None = None,
    renderer: Renderer | None = None,
) -> None:
    """Convert an image and hand the finished grid to a renderer.

    The whole grid is built before anything is written, so a failure never
    leaves partial output behind.
    """
    options = options or RenderOptions()
    options.validate()
    image = _open(source)
    cells = image_to_cells(image, options)
    if renderer is None:
        renderer = TerminalRenderer(padding=options.padding)
    logger.debug("Rendering %d rows", len(cells))
    renderer.write(cells)


def image_to_ascii(source: Image.Image | str | Path, options: RenderOptions | None = None) -> str:
    options = options or RenderOptions()
    buffer = io.StringIO()
    render(source, options, TerminalRenderer(buffer, padding=options.padding))
    return buffer.getvalue()
