"""Error taxonomy for conandoc pipeline runs."""

from __future__ import annotations


class ConanDocError(RuntimeError):
    """Base class for failures that abort a documentation run."""

    hint: str | None = None

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        if hint is not None:
            self.hint = hint


class LaunchError(ConanDocError):
    """Raised when an external executable cannot be found or spawned."""


class ParseError(ConanDocError):
    """Raised when an external tool produces malformed text or JSON."""


class InspectionError(ParseError):
    """Raised when package metadata cannot be read from ``conan inspect``."""


class SourceLocationError(ParseError):
    """Raised when ``conan info`` output cannot be turned into source folders."""


class InstallError(ConanDocError):
    """Raised when the dependency install step exits with a failure status."""


class RenderError(ConanDocError):
    """Raised when the rendered DoxyFile cannot be written to disk."""


class TemplateError(ConanDocError):
    """Raised when the DoxyFile template is missing or invalid."""


class PathEncodingError(ConanDocError):
    """Raised when an output path cannot be represented as text."""


class GeneratorFailure(ConanDocError):
    """Raised when doxygen exits with a non-zero status."""

    hint = "Please ensure doxygen is installed and available in PATH."


class PathResolutionError(ConanDocError):
    """Raised when the generated entry page is missing after a successful run."""


class ConfigError(ConanDocError):
    """Raised when the configuration file cannot be parsed."""


class ViewerError(ConanDocError):
    """Raised when the default viewer cannot open the generated docs."""


class OpenWarning(UserWarning):
    """Non-fatal notice that the generated docs could not be opened."""


__all__ = [
    "ConanDocError",
    "ConfigError",
    "GeneratorFailure",
    "InspectionError",
    "InstallError",
    "LaunchError",
    "OpenWarning",
    "ParseError",
    "PathEncodingError",
    "PathResolutionError",
    "RenderError",
    "SourceLocationError",
    "TemplateError",
    "ViewerError",
]
