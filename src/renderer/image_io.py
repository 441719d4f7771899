import logging
import os

import numpy as np
from PIL import Image

logger = logging.getLogger(__name__)

def save_image(pixels: np.ndarray, output_path: str):
    """
    Write an 8-bit (height, width, 3) image. The format follows the file
    extension (.png, .ppm, .jpg, ...). Errors from the filesystem or an
    unknown extension propagate to the caller.
    """
    pixels = np.asarray(pixels)
    if pixels.dtype != np.uint8 or pixels.ndim != 3 or pixels.shape[2] != 3:
        raise ValueError(f"Expected a (h, w, 3) uint8 array, got {pixels.dtype} {pixels.shape}")
    directory = os.path.dirname(output_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    Image.fromarray(pixels).save(output_path)
    logger.info("Image saved to %s", output_path)
