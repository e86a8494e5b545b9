"""Run a registered filter against whole images."""

import logging
from typing import Optional

from engines.registry import get_filter
from models.byte_image import ByteImage
from models.filter_result import FilterResult
from utils.metrics import Timer, compute_psnr

logger = logging.getLogger(__name__)


def apply_filter(
    params,
    image: ByteImage,
    second: Optional[ByteImage] = None
) -> FilterResult:
    """Allocate a destination, run ``params.name`` and measure the result.

    ``params`` is a :class:`models.filter_params.FilterParams`. Dual-source
    filters need ``second`` with the same geometry as ``image``.
    """
    info = get_filter(params.name)
    output = image.blank_like()

    # === BUFFERS ===
    call = {'dest': output.data}
    if len(info.sources) == 2:
        if second is None:
            raise ValueError(f"{info.name} needs a second source image")
        if second.length != image.length:
            raise ValueError(
                f"Source lengths differ: {image.length} vs {second.length}"
            )
        call['src1'] = image.data
        call['src2'] = second.data
    else:
        call['src'] = image.data

    # === GEOMETRY ===
    for name in info.parameters:
        if name == 'length':
            call['length'] = image.length
        elif name == 'rows':
            call['rows'] = image.rows
        elif name == 'columns':
            call['columns'] = image.columns
    call.update(params.options)
    if 'bpp' in info.parameters:
        call.setdefault('bpp', image.bpp)

    # === FILTER ===
    timer = Timer()
    success = timer.measure(info.func, **call)
    if not success:
        logger.info("%s failed on %dx%d image", info.name, image.rows, image.columns)
        return FilterResult(info.name, False, output, timer.elapsed_ms)

    # === METRICS ===
    psnr = compute_psnr(image.as_array(), output.as_array())
    logger.info("%s: %.3f ms, PSNR %.2f dB", info.name, timer.elapsed_ms, psnr)
    return FilterResult(info.name, True, output, timer.elapsed_ms, psnr)
