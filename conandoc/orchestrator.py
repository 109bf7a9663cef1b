"""Pipeline orchestration from Conan metadata to generated Doxygen docs."""

from __future__ import annotations

from contextlib import contextmanager
from enum import Enum
from pathlib import Path
from typing import Callable, Iterator, List, Optional

from .config import ConanDocConfig
from .conan import DependencyInstaller, MetadataInspector, SourceLocator
from .doxygen import ConfigRenderer, DoxygenRunner, find_layout
from .errors import GeneratorFailure, OpenWarning, PathResolutionError, ViewerError
from .logging import get_logger
from .models import PackageMetadata, PipelineOutcome, PipelineRequest
from .output import entry_page as entry_page_for, resolve_output
from .process import ProcessRunner
from .progress import StageHandle, StageReporter
from .viewer import open_in_viewer

Viewer = Callable[[Path], None]


class Stage(Enum):
    """Pipeline stages in execution order."""

    INSTALL = "install"
    LOCATE = "locate"
    RESOLVE_OUTPUT = "resolve_output"
    RENDER = "render"
    GENERATE = "generate"
    OPEN = "open"


STAGE_LABELS = {
    Stage.INSTALL: "[1/5] Fetching packages...",
    Stage.LOCATE: "[2/5] Gathering Sources...",
    Stage.RESOLVE_OUTPUT: "[3/5] Resolving Output...",
    Stage.RENDER: "[4/5] Generating Doxyfile...",
    Stage.GENERATE: "[5/5] Running Doxygen...",
}


class Orchestrator:
    """Runs inspect, install, locate, resolve, render, generate and open in order.

    Every stage runs at most once. The first error aborts the run and is
    re-raised to the caller; nothing written by earlier stages is removed.
    Only a viewer failure is tolerated, and it is reported as an
    :class:`OpenWarning` on the outcome.
    """

    def __init__(
        self,
        config: ConanDocConfig | None = None,
        *,
        process: ProcessRunner | None = None,
        inspector: MetadataInspector | None = None,
        installer: DependencyInstaller | None = None,
        locator: SourceLocator | None = None,
        renderer: ConfigRenderer | None = None,
        generator: DoxygenRunner | None = None,
        reporter: StageReporter | None = None,
        viewer: Viewer | None = None,
    ) -> None:
        self.config = config or ConanDocConfig(root=Path.cwd())
        conan = self.config.conan
        doxygen = self.config.doxygen
        self.process = process or ProcessRunner()
        self.inspector = inspector or MetadataInspector(self.process, executable=conan.executable)
        self.installer = installer or DependencyInstaller(
            self.process,
            command=conan.install_command,
            profile=conan.profile,
            strict=conan.strict_install,
        )
        self.locator = locator or SourceLocator(
            self.process,
            executable=conan.executable,
            json_file=conan.info_json_file,
        )
        self.renderer = renderer or ConfigRenderer(doxygen.templates_dir)
        self.generator = generator or DoxygenRunner(
            self.process,
            executable=doxygen.executable,
            layout=find_layout(doxygen.templates_dir),
        )
        self.reporter = reporter or StageReporter()
        self.viewer = viewer or open_in_viewer
        self.logger = get_logger("orchestrator")
        self.stages_run: List[Stage] = []

    def run(self, request: PipelineRequest) -> PipelineOutcome:
        self.stages_run = []
        reference = request.reference
        self.logger.debug("Starting documentation run for %s", reference)

        metadata = self.inspector.inspect(reference)
        self._announce(metadata)

        with self._stage(Stage.INSTALL) as stage:
            self.installer.install(reference)
            stage.succeed("Finished conan install")

        with self._stage(Stage.LOCATE) as stage:
            sources = self.locator.locate(reference)
            stage.succeed(f"Found {len(sources)} source locations")

        with self._stage(Stage.RESOLVE_OUTPUT) as stage:
            output = resolve_output(reference, metadata, request.out)
            stage.succeed(f"Output location is {output}")

        with self._stage(Stage.RENDER) as stage:
            doxyfile = self.renderer.render(metadata, sources, output)
            stage.succeed("Generated DoxyFile")

        with self._stage(Stage.GENERATE) as stage:
            result = self.generator.generate(doxyfile)
            stage.succeed("Finished Doxygen Generate")

        if not result.ok:
            raise GeneratorFailure(
                f"Failed to generate docs (doxygen exited with status {result.returncode})."
            )

        entry_page = self._resolve_entry_page(output)
        self.reporter.success(f"Success: Docs can be found at {entry_page}")

        opened: Optional[bool] = None
        warnings: tuple[OpenWarning, ...] = ()
        if request.open_viewer:
            warning = self._open(entry_page)
            opened = warning is None
            if warning is not None:
                warnings = (warning,)

        return PipelineOutcome(
            returncode=result.returncode,
            entry_page=entry_page,
            output=output,
            doxyfile=doxyfile,
            metadata=metadata,
            sources=tuple(sources),
            opened=opened,
            warnings=warnings,
        )

    @contextmanager
    def _stage(self, stage: Stage) -> Iterator[StageHandle]:
        self.stages_run.append(stage)
        self.logger.debug("Entering stage %s", stage.value)
        with self.reporter.stage(STAGE_LABELS[stage]) as handle:
            yield handle

    def _announce(self, metadata: PackageMetadata) -> None:
        self.reporter.info(f"Generating documentation for {metadata.name}/{metadata.version}")
        for requirement in metadata.requires:
            self.reporter.info(f"  requires {requirement}")

    @staticmethod
    def _resolve_entry_page(output: str) -> Path:
        expected = Path(entry_page_for(output))
        try:
            return expected.resolve(strict=True)
        except (OSError, RuntimeError) as exc:
            raise PathResolutionError(
                f"Doxygen reported success but {expected} does not exist"
            ) from exc

    def _open(self, entry_page: Path) -> Optional[OpenWarning]:
        self.stages_run.append(Stage.OPEN)
        try:
            self.viewer(entry_page)
        except (ViewerError, OSError) as exc:
            warning = OpenWarning(f"An error occurred when opening '{entry_page}': {exc}")
            self.logger.debug("Viewer failed for %s", entry_page, exc_info=True)
            self.reporter.warning(str(warning))
            return warning
        self.reporter.info(f"Opened '{entry_page}' successfully.")
        return None


__all__ = ["Orchestrator", "STAGE_LABELS", "Stage"]
