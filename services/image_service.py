"""
Image Service - Business logic for image transformation requests.

This service wraps the pure engine with its external collaborators:
decoding of input bytes, encoding of the result with an output
configuration, timing and progress logging.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple, Union

from core.enums import Operation, OutputFormat, SelectorKind
from core.exceptions import ValidationError
from core.image.buffer import PixelBuffer
from core.image.converters import ImageConverters
from core.utils.decorators import timer
from core.utils.enum_converter import parse_enum
from engine import blend, color, geometric, metadata, selector
from schemas.common import OutputConfig

logger = logging.getLogger(__name__)


@dataclass
class ImageResult:
    """Encoded result of one operation"""

    data: bytes
    width: int
    height: int
    format: OutputFormat
    processing_time_ms: int

    def to_base64(self) -> str:
        return ImageConverters.to_base64(self.data)


# Single-image transforms: engine function and progress message
_TRANSFORMS: Dict[Operation, Tuple[Callable[..., PixelBuffer], str]] = {
    Operation.ROTATE90: (geometric.rotate90, "Rotate 90 degrees"),
    Operation.ROTATE180: (geometric.rotate180, "Rotate 180 degrees"),
    Operation.ROTATE270: (geometric.rotate270, "Rotate 270 degrees"),
    Operation.FLIP_HORIZONTAL: (geometric.flip_horizontal, "Flip horizontal"),
    Operation.FLIP_VERTICAL: (geometric.flip_vertical, "Flip vertical"),
    Operation.GRAYSCALE: (color.grayscale, "Grayscale"),
    Operation.INVERT: (color.invert, "Invert colors"),
    Operation.SEPIA: (color.sepia, "Sepia"),
    Operation.BRIGHTEN: (color.brighten, "Brighten by {value}"),
    Operation.ADJUST_CONTRAST: (color.adjust_contrast, "Adjust contrast by {factor}"),
    Operation.BLUR: (color.blur, "Blur with sigma {sigma}"),
}

# Required parameter per parameterized transform
_TRANSFORM_PARAMS: Dict[Operation, str] = {
    Operation.BRIGHTEN: "value",
    Operation.ADJUST_CONTRAST: "factor",
    Operation.BLUR: "sigma",
}


class ImageService:
    """
    Service for image transformation operations.

    Every public method takes encoded image bytes, runs exactly one engine
    operation and returns an encoded ImageResult. The service holds no
    state besides its default output configuration, so one instance can
    serve concurrent callers.
    """

    def __init__(self, output_config: Optional[OutputConfig] = None):
        """
        Initialize image service.

        Args:
            output_config: Default output encoding (PNG/default if None)
        """
        self.output_config = output_config or OutputConfig()

    def _execute(
        self,
        operation: Callable[..., PixelBuffer],
        inputs: Tuple[bytes, ...],
        output: Optional[OutputConfig] = None,
        **operation_kwargs: Any,
    ) -> ImageResult:
        """
        Template method for all buffer-producing operations.

        This method encapsulates common logic:
        - Decoding every input
        - Running the engine operation
        - Encoding the result
        - Timing

        Args:
            operation: Engine function receiving decoded buffers positionally
            inputs: Encoded input images
            output: Output configuration override for this call
            **operation_kwargs: Additional kwargs passed to the operation

        Returns:
            ImageResult with encoded bytes, dimensions and timing
        """
        config = output or self.output_config

        with timer() as t:
            buffers = [ImageConverters.decode_image(data) for data in inputs]
            result = operation(*buffers, **operation_kwargs)
            encoded = ImageConverters.encode_image(result, config)

        processing_time_ms = t["ms"]
        logger.debug(
            f"{getattr(operation, '__name__', 'operation')} produced "
            f"{result.width}x{result.height} in {processing_time_ms}ms"
        )

        return ImageResult(
            data=encoded,
            width=result.width,
            height=result.height,
            format=config.format,
            processing_time_ms=processing_time_ms,
        )

    def transform(
        self,
        data: bytes,
        operation: Union[Operation, str],
        output: Optional[OutputConfig] = None,
        **params: Any,
    ) -> ImageResult:
        """
        Apply a single-image transform.

        Args:
            data: Encoded input image
            operation: Operation or its name (e.g. "rotate90", "blur")
            output: Output configuration override
            **params: ``value`` for brighten, ``factor`` for adjust_contrast,
                ``sigma`` for blur

        Returns:
            ImageResult

        Raises:
            ValidationError: Unknown operation or missing parameter
        """
        op = parse_enum(operation, Operation, None, normalize=True)
        if op is None:
            raise ValidationError(
                f"Unknown operation: {operation}",
                details={"allowed": [member.value for member in Operation]},
            )

        func, message = _TRANSFORMS[op]
        kwargs: Dict[str, Any] = {}
        param_name = _TRANSFORM_PARAMS.get(op)
        if param_name is not None:
            if params.get(param_name) is None:
                raise ValidationError(
                    f"Operation {op.value} requires parameter '{param_name}'",
                    details={"operation": op.value, "parameter": param_name},
                )
            kwargs[param_name] = params[param_name]

        logger.info(f"Processing: {message.format(**kwargs)}")
        return self._execute(func, (data,), output, **kwargs)

    def crop_square(
        self, data: bytes, x: int, y: int, size: int, output: Optional[OutputConfig] = None
    ) -> ImageResult:
        """Crop a square region (see engine.geometric.crop_square)."""
        logger.info(f"Processing: Crop square at ({x}, {y}) size {size}")
        return self._execute(geometric.crop_square, (data,), output, x=x, y=y, size=size)

    def combine(
        self,
        user_data: bytes,
        overlay_data: bytes,
        kind: Union[SelectorKind, str],
        output: Optional[OutputConfig] = None,
    ) -> ImageResult:
        """
        Combine two images with a selector.

        Args:
            user_data: Encoded main image
            overlay_data: Encoded overlay image, resampled to the main image
            kind: Selector kind or its name
            output: Output configuration override

        Returns:
            ImageResult with the main image's dimensions
        """
        selector_kind = selector.resolve_selector(kind)
        logger.info(f"Processing: Combine images ({selector_kind.label})")
        return self._execute(
            selector.combine_selector, (user_data, overlay_data), output, kind=selector_kind
        )

    def blend(
        self,
        base_data: bytes,
        overlay_data: bytes,
        opacity: float,
        output: Optional[OutputConfig] = None,
    ) -> ImageResult:
        """
        Alpha blend an overlay onto a base image.

        Opacity is validated before any decoding happens.
        """
        logger.info(f"Processing: Transparent overlay with opacity {opacity}")
        params = blend.BlendParameters(opacity=opacity).validate_range()
        return self._execute(
            blend.overlay_alpha_blend,
            (base_data, overlay_data),
            output,
            opacity=params.opacity,
        )

    def dimensions(self, data: bytes) -> Tuple[int, int]:
        """Decode and return (width, height)."""
        return metadata.dimensions(ImageConverters.decode_image(data))

    def describe(self, data: bytes) -> Dict[str, Any]:
        """Decode and report dimensions, aspect ratio and square-ish flag."""
        buffer = ImageConverters.decode_image(data)
        return {
            "width": buffer.width,
            "height": buffer.height,
            "aspect_ratio": metadata.aspect_ratio(buffer),
            "is_square_ish": metadata.is_square_ish(buffer),
        }

    def is_square_ish(self, data: bytes) -> bool:
        """Decode and classify the aspect ratio."""
        return metadata.is_square_ish(ImageConverters.decode_image(data))
