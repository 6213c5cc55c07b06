"""
Error taxonomy for the style match pipeline.

Client input problems map to 400, everything that goes wrong talking to an
upstream service (or on the way back from one) maps to 500. The endpoint
layer turns these into ``{"error": ...}`` bodies; nothing here is fatal to
the process.
"""


class StyleMatchError(Exception):
    """Base class for errors surfaced to API clients"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidUploadError(StyleMatchError):
    """Missing or unusable request input (image, styleName, analysis)"""

    status_code = 400


class UpstreamServiceError(StyleMatchError):
    """An external AI service or download failed"""

    status_code = 500


class ServiceNotConfiguredError(UpstreamServiceError):
    pass


class AnalysisError(UpstreamServiceError):
    """Vision call failed or returned output that does not fit the schema"""


class GenerationError(UpstreamServiceError):
    """Image-to-image generation failed or produced nothing"""


class ArtifactDownloadError(UpstreamServiceError):
    pass
