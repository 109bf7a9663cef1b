"""Package metadata lookup via ``conan inspect``."""

from __future__ import annotations

from typing import List

from ..errors import InspectionError
from ..logging import get_logger
from ..models import PackageMetadata
from ..process import ProcessRunner

_ABSENT_VALUES = {"", "None"}


class MetadataInspector:
    """Reads name, version and requires for a package reference.

    Each field is a separate ``conan inspect <ref> --raw <field>`` call and
    nothing is cached between runs.
    """

    def __init__(self, process: ProcessRunner | None = None, *, executable: str = "conan") -> None:
        self.process = process or ProcessRunner()
        self.executable = executable
        self.logger = get_logger("conan.inspector")

    def inspect(self, reference: str) -> PackageMetadata:
        name = self._required(reference, "name")
        version = self._required(reference, "version")
        requires = parse_requires(self.query(reference, "requires"))
        self.logger.debug("Inspected %s/%s with %d requirement(s)", name, version, len(requires))
        return PackageMetadata(name=name, version=version, requires=tuple(requires))

    def query(self, reference: str, field: str) -> str:
        """Return the stripped raw value of a single recipe attribute."""
        result = self.process.run(
            [self.executable, "inspect", reference, "--raw", field],
            capture=True,
        )
        if not result.ok:
            raise InspectionError(
                f"conan inspect failed for '{field}' of {reference} (exit code {result.returncode})"
            )
        try:
            text = result.text()
        except UnicodeDecodeError as exc:
            raise InspectionError(f"conan inspect returned non-text output for '{field}'") from exc
        return text.strip()

    def _required(self, reference: str, field: str) -> str:
        value = self.query(reference, field)
        if value in _ABSENT_VALUES:
            raise InspectionError(f"Package {reference} does not declare a {field}")
        return value


def parse_requires(text: str) -> List[str]:
    """Parse the ``['a/1.0', 'b/2.0']`` rendering of a recipe's requires."""
    stripped = text.strip()
    if stripped in _ABSENT_VALUES:
        return []
    if stripped.startswith("["):
        stripped = stripped[1:]
    if stripped.endswith("]"):
        stripped = stripped[:-1]
    requires: List[str] = []
    for item in stripped.split(","):
        cleaned = item.strip().strip("'\"").strip()
        if cleaned:
            requires.append(cleaned)
    return requires


__all__ = ["MetadataInspector", "parse_requires"]
