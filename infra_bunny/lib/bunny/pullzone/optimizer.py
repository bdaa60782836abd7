"""
The Bunny Optimizer settings of a pull zone.

The API models them as flat ``Optimizer*`` fields of the pull zone, locally they are grouped into the ``optimizer``
block, which itself nests the ``smart_image_optimization`` and ``watermark`` blocks.
"""
from dataclasses import dataclass
from typing import Optional

from infra_bunny.lib.client import PullZone, PullZoneUpdateOptions
from infra_bunny.lib.provider import Field, Schema, block_from_resource, flatten_block, suppress_missing_optional_block
from infra_bunny.lib.provider.validation import is_int32

KEY_OPTIMIZER = "optimizer"


@dataclass
class SmartImageOptimization:
    enabled: Optional[bool] = None
    desktop_max_width: Optional[int] = None
    image_quality: Optional[int] = None
    mobile_max_width: Optional[int] = None
    mobile_image_quality: Optional[int] = None


@dataclass
class Watermark:
    enabled: Optional[bool] = None
    url: Optional[str] = None
    offset: Optional[float] = None
    min_image_size: Optional[int] = None
    position: Optional[int] = None


@dataclass
class Optimizer:
    enabled: Optional[bool] = None
    enable_webp: Optional[bool] = None
    minify_css: Optional[bool] = None
    minify_javascript: Optional[bool] = None
    enable_manipulation_engine: Optional[bool] = None
    smart_image_optimization: Optional[SmartImageOptimization] = None
    watermark: Optional[Watermark] = None


smart_image_optimization_schema = Schema(
    enabled=Field(
        bool,
        "If enabled, Bunny Optimizer will automatically resize and compress images for desktop and mobile devices.",
        optional=True,
        default=True,
    ),
    desktop_max_width=Field(
        int,
        "Determines the maximum automatic image size for desktop clients.",
        optional=True,
        default=1600,
        validate=is_int32,
    ),
    image_quality=Field(
        int,
        "Determines the image quality for desktop clients.",
        optional=True,
        default=85,
        validate=is_int32,
    ),
    mobile_max_width=Field(
        int,
        "Determines the maximum automatic image size for mobile clients.",
        optional=True,
        default=800,
        validate=is_int32,
    ),
    mobile_image_quality=Field(
        int,
        "Determines the image quality for mobile clients.",
        optional=True,
        default=70,
        validate=is_int32,
    ),
)

watermark_schema = Schema(
    enabled=Field(bool, "Determines if image watermarking should be enabled.", optional=True, default=True),
    url=Field(str, "Sets the URL of the watermark image.", optional=True),
    offset=Field(float, "Sets the offset of the watermark image.", optional=True, default=3.0),
    min_image_size=Field(
        int,
        "Sets the minimum image size to which the watermark will be added.",
        optional=True,
        default=300,
        validate=is_int32,
    ),
    position=Field(int, "Sets the position of the watermark image.", optional=True, default=0),
)

optimizer_schema = Schema(
    enabled=Field(bool, "Determines if the optimizer should be enabled for this zone.", optional=True, default=False),
    enable_webp=Field(
        bool,
        "If enabled, images will be automatically converted into the WebP format when supported by the client.",
        optional=True,
        default=True,
    ),
    minify_css=Field(bool, "If enabled, CSS files will be automatically minified.", optional=True, default=True),
    minify_javascript=Field(
        bool,
        "Determines if the JavaScript minification should be enabled.",
        optional=True,
        default=True,
    ),
    enable_manipulation_engine=Field(
        bool,
        "Enable on the fly image manipulation engine for dynamic URL based image manipulation.",
        optional=True,
        default=True,
    ),
    smart_image_optimization=Field(
        list,
        elem=smart_image_optimization_schema,
        optional=True,
        max_items=1,
        diff_suppress=suppress_missing_optional_block,
    ),
    watermark=Field(
        list,
        elem=watermark_schema,
        optional=True,
        max_items=1,
        diff_suppress=suppress_missing_optional_block,
    ),
)


def optimizer_to_resource(pz: PullZone) -> list[dict]:
    return flatten_block(
        Optimizer(
            enabled=pz.optimizer_enabled,
            enable_webp=pz.optimizer_enable_webp,
            minify_css=pz.optimizer_minify_css,
            minify_javascript=pz.optimizer_minify_javascript,
            enable_manipulation_engine=pz.optimizer_enable_manipulation_engine,
            smart_image_optimization=SmartImageOptimization(
                enabled=pz.optimizer_automatic_optimization_enabled,
                desktop_max_width=pz.optimizer_desktop_max_width,
                image_quality=pz.optimizer_image_quality,
                mobile_max_width=pz.optimizer_mobile_max_width,
                mobile_image_quality=pz.optimizer_mobile_image_quality,
            ),
            watermark=Watermark(
                enabled=pz.optimizer_watermark_enabled,
                url=pz.optimizer_watermark_url,
                offset=pz.optimizer_watermark_offset,
                min_image_size=pz.optimizer_watermark_min_image_size,
                position=pz.optimizer_watermark_position,
            ),
        )
    )


def _smart_image_optimization_expand(res: PullZoneUpdateOptions, sio: Optional[SmartImageOptimization]) -> None:
    if sio is None:
        return

    res.optimizer_automatic_optimization_enabled = sio.enabled
    res.optimizer_desktop_max_width = sio.desktop_max_width
    res.optimizer_image_quality = sio.image_quality
    res.optimizer_mobile_max_width = sio.mobile_max_width
    res.optimizer_mobile_image_quality = sio.mobile_image_quality


def _watermark_expand(res: PullZoneUpdateOptions, watermark: Optional[Watermark]) -> None:
    if watermark is None:
        return

    res.optimizer_watermark_enabled = watermark.enabled
    res.optimizer_watermark_url = watermark.url
    res.optimizer_watermark_offset = watermark.offset
    res.optimizer_watermark_min_image_size = watermark.min_image_size
    res.optimizer_watermark_position = watermark.position


def optimizer_from_resource(res: PullZoneUpdateOptions, d) -> None:
    optimizer = block_from_resource(d, KEY_OPTIMIZER, Optimizer)
    if optimizer is None:
        return

    res.optimizer_enabled = optimizer.enabled
    res.optimizer_enable_webp = optimizer.enable_webp
    res.optimizer_minify_css = optimizer.minify_css
    res.optimizer_minify_javascript = optimizer.minify_javascript
    res.optimizer_enable_manipulation_engine = optimizer.enable_manipulation_engine

    _smart_image_optimization_expand(res, optimizer.smart_image_optimization)
    _watermark_expand(res, optimizer.watermark)
