"""Manifest scanners that accumulate dependencies across a directory tree."""

from pathlib import Path
from typing import List, Optional, Pattern, Union

from deps_report.exceptions import ManifestParseError
from deps_report.logging_config import logger

from .models import GOLANG, NPM, DependencySpec, ManifestDependencies
from .parsers import GO_MOD_FILE, PACKAGE_JSON_FILE, load_package_json, parse_go_mod
from .patterns import matches_any
from .walker import resolve_root, walk_manifests


class ManifestScanner:
    """
    Base class for scanners of one manifest kind.

    Subclasses set ``manifest_file`` and implement ``parse_file``, which
    merges the dependencies of one file into the accumulated mapping.
    Later files overwrite earlier entries with the same name.
    """

    manifest_file: str = ""

    def __init__(
        self,
        directory: Union[str, Path],
        exclude_patterns: Optional[List[Pattern[str]]] = None,
    ) -> None:
        """
        Initialize the scanner.

        Args:
            directory: Root directory to scan
            exclude_patterns: Compiled patterns tested against full file paths

        Raises:
            InvalidDirectoryError: If the directory cannot be resolved
        """
        self.root = resolve_root(directory)
        self.exclude_patterns = exclude_patterns or []

    def find_manifests(self) -> List[Path]:
        return list(walk_manifests(self.root, self.manifest_file, self.exclude_patterns))

    def scan(self) -> ManifestDependencies:
        """
        Parse every manifest under the root.

        Returns:
            Mapping of dependency name to DependencySpec

        Raises:
            ManifestParseError: If any manifest cannot be read or parsed
        """
        dependencies: ManifestDependencies = {}
        for path in self.find_manifests():
            logger.info(f"Processing file: {path}")
            self.parse_file(path, dependencies)
        logger.info(f"Found {len(dependencies)} dependencies in {self.manifest_file} files")
        return dependencies

    def parse_file(self, path: Path, dependencies: ManifestDependencies) -> None:
        raise NotImplementedError


class GoModScanner(ManifestScanner):
    """Scanner for Go module manifests (go.mod)."""

    manifest_file = GO_MOD_FILE

    def parse_file(self, path: Path, dependencies: ManifestDependencies) -> None:
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ManifestParseError(str(path), f"Failed to read go.mod file: {e}") from e

        try:
            requires = parse_go_mod(content)
        except ValueError as e:
            raise ManifestParseError(str(path), str(e)) from e

        for name, version in requires:
            dependencies[name] = DependencySpec(name=name, version=version, ecosystem=GOLANG)


class PackageJSONScanner(ManifestScanner):
    """
    Scanner for npm package manifests (package.json).

    Reads ``dependencies`` (leading ``^`` stripped from versions) and
    ``peerDependencies`` (versions kept verbatim). Names matching a skip
    pattern are dropped from both blocks.
    """

    manifest_file = PACKAGE_JSON_FILE

    def __init__(
        self,
        directory: Union[str, Path],
        exclude_patterns: Optional[List[Pattern[str]]] = None,
        skip_patterns: Optional[List[Pattern[str]]] = None,
    ) -> None:
        super().__init__(directory, exclude_patterns)
        self.skip_patterns = skip_patterns or []

    def should_skip(self, name: str) -> bool:
        return matches_any(self.skip_patterns, name)

    def parse_file(self, path: Path, dependencies: ManifestDependencies) -> None:
        data = load_package_json(path)

        for name, version in (data.get("dependencies") or {}).items():
            if self.should_skip(name):
                logger.info(f"Skipping dependency: {name}")
                continue
            if version.startswith("^"):
                version = version[1:]
            dependencies[name] = DependencySpec(name=name, version=version, ecosystem=NPM)

        for name, version in (data.get("peerDependencies") or {}).items():
            if self.should_skip(name):
                logger.info(f"Skipping dependency: {name}")
                continue
            dependencies[name] = DependencySpec(name=name, version=version, ecosystem=NPM)
