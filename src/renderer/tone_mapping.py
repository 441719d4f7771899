# renderer/tone_mapping.py
import numpy as np

def to_8bit(image):
    return (np.clip(image, 0.0, 1.0) * 255.999).astype(np.uint8)

def gamma_correct(accumulated, gamma=2.0):
    """
    Power-law encode a linear image (gamma 2 is a square root) and convert
    it to 8-bit.
    """
    return to_8bit(np.power(np.clip(accumulated, 0.0, None), 1.0 / gamma))

def reinhard_tone_mapping(accumulated, exposure=1.0, white_point=1.0, gamma=2.2):
    """
    Apply Reinhard tone mapping to a linear radiance image.
    """
    scaled = np.clip(accumulated, 0.0, None) * exposure
    mapped = scaled / (1.0 + scaled / white_point)
    mapped = mapped ** (1.0 / gamma)
    return to_8bit(mapped)

def auto_exposure_tone_mapping(accumulated, gamma=2.2, target_midgray=0.18):
    """
    Compute an exposure value based on the average scene luminance and then
    apply Reinhard tone mapping.
    """
    luminance = 0.2126 * accumulated[:,:,0] + 0.7152 * accumulated[:,:,1] + 0.0722 * accumulated[:,:,2]
    avg_lum = luminance.mean() + 1e-5  # avoid division by zero
    exposure = target_midgray / avg_lum
    return reinhard_tone_mapping(accumulated, exposure=exposure, white_point=1.0, gamma=gamma)

TONE_MAPPERS = {
    "gamma": gamma_correct,
    "reinhard": reinhard_tone_mapping,
    "auto": auto_exposure_tone_mapping,
}
