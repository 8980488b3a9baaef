from io import BytesIO
from pathlib import Path
from typing import NamedTuple, Tuple
from PIL import Image, UnidentifiedImageError
from utils.logger import get_logger

logger = get_logger("IMAGE_UTILS")

# formats kept as-is; anything else is re-encoded as JPEG
KEEP_FORMATS = {"PNG": "png", "WEBP": "webp", "GIF": "gif"}

class ProcessedImage(NamedTuple):
    content: bytes
    width: int
    height: int
    extension: str

def get_resize_width_height(image: Image.Image, max_width: int) -> Tuple[int, int]:
    width, height = image.size
    if width <= max_width:
        return width, height
    divider = width / max_width
    return max_width, max(1, int(height / divider))

def process_image(content: bytes, max_width: int) -> ProcessedImage:
    """
    Decode an uploaded image, downscale it to `max_width` and re-encode it.
    Raises ValueError if Pillow cannot read the content.
    """
    try:
        image = Image.open(BytesIO(content))
        image.load()
    except (UnidentifiedImageError, OSError) as e:
        raise ValueError("Not a valid image") from e

    source_format = image.format or ""
    size = get_resize_width_height(image, max_width)
    if size != image.size:
        logger.info(f"Resizing image from {image.size} to {size}")
        image = image.resize(size)

    buf = BytesIO()
    if source_format in KEEP_FORMATS:
        extension = KEEP_FORMATS[source_format]
        image.save(buf, format=source_format, optimize=True)
    else:
        extension = "jpg"
        if image.mode not in ("RGB", "L"):
            image = image.convert("RGB")
        image.save(buf, format="JPEG", optimize=True, quality=85)

    width, height = image.size
    return ProcessedImage(buf.getvalue(), width, height, extension)

def write_file(directory: Path, filename: str, content: bytes) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename
    path.write_bytes(content)
    logger.info(f"Stored {len(content)} bytes at {path}")
    return path
