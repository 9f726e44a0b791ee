#
# PROJECT: wireframe-pipeline
# MODULE: wireframe_pipeline/errors.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#


class PipelineError(Exception):
    """Base class for every error raised by the wireframe pipeline."""


class InvalidParameterError(PipelineError, ValueError):
    """A scene or model descriptor carries a structurally invalid value."""

    def __init__(self, message, field=None):
        self.field = field
        self.detail = message
        if field:
            message = f"{field}: {message}"
        super().__init__(message)


class DegenerateGeometryError(PipelineError, ArithmeticError):
    """Geometry that cannot be processed numerically (e.g. a singular matrix)."""
