"""Image I/O using OpenCV."""

import cv2
import numpy as np

from models.byte_image import ByteImage


def load_image(path: str) -> ByteImage:
    """Load an 8-bit image as-is; channels become bytes per pixel."""
    img = cv2.imread(path, cv2.IMREAD_UNCHANGED)
    if img is None:
        raise ValueError(f"Could not load image from {path}")
    if img.dtype != np.uint8:
        raise ValueError(f"Only 8-bit images are supported, {path} is {img.dtype}")
    return ByteImage.from_array(img)


def save_image(image: ByteImage, path: str) -> None:
    """Save a buffer with its geometry."""
    if not cv2.imwrite(path, image.as_array()):
        raise ValueError(f"Could not write image to {path}")
