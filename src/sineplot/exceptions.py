"""Exception hierarchy for Sineplot."""


class SineplotError(Exception):
    """Base exception for all Sineplot errors."""

    pass


class ImageError(SineplotError):
    """Errors related to image loading or saving."""

    pass


class ImageLoadError(ImageError):
    """Error loading or decoding a source image."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load image '{path}': {reason}")


class ImageSaveError(ImageError):
    """Error writing the rendered image."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save image '{path}': {reason}")


class GeometryError(SineplotError):
    """Errors in canvas or grid geometry."""

    pass


class GridGeometryError(GeometryError):
    """Requested grid or scale produces an unusable canvas layout."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid grid geometry: {reason}")


class RasterError(SineplotError):
    """Errors raised while walking a curve."""

    pass


class DegenerateCurveError(RasterError):
    """Curve starts and stops on the same pixel."""

    def __init__(self, point: object) -> None:
        self.point = point
        super().__init__(f"Degenerate curve: start and stop are both {point}")


class AntialiasingThresholdError(RasterError):
    """Anti-aliasing threshold is not strictly positive."""

    def __init__(self, threshold: float) -> None:
        self.threshold = threshold
        super().__init__(
            f"Anti-aliasing threshold must be strictly positive, got {threshold}"
        )


class NonFiniteEquationError(RasterError):
    """Curve equation evaluated to NaN or infinity."""

    def __init__(self, point: object) -> None:
        self.point = point
        super().__init__(f"NaN encountered evaluating curve equation at {point}")


class CurveTraversalError(RasterError):
    """Walk left the declared octant and did not reach the stop point."""

    def __init__(self, start: object, stop: object, steps: int) -> None:
        self.start = start
        self.stop = stop
        self.steps = steps
        super().__init__(
            f"Curve walk from {start} did not reach {stop} within {steps} steps"
        )
