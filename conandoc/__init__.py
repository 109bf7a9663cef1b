"""Generate Doxygen documentation for Conan packages."""

from .models import PackageMetadata, PipelineOutcome, PipelineRequest
from .orchestrator import Orchestrator, Stage

__all__ = ["Orchestrator", "PackageMetadata", "PipelineOutcome", "PipelineRequest", "Stage"]
