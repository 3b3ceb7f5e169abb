"""Raster re-encoding with Pillow."""

from io import BytesIO

from PIL import Image

# Pillow codec name -> file extension
CODEC_EXTENSIONS = {
    "WEBP": "webp",
    "PNG": "png",
    "JPEG": "jpg",
}


def reencode(image_data: bytes, codec: str = "WEBP", quality: int = 80) -> bytes:
    """Re-encode raster bytes to another codec."""
    img = Image.open(BytesIO(image_data))

    # JPEG has no alpha channel
    if codec == "JPEG" and img.mode not in ("RGB", "L"):
        img = img.convert("RGB")

    output = BytesIO()
    img.save(output, format=codec, quality=quality)
    return output.getvalue()
