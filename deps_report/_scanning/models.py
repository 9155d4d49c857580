"""Data models for dependencies discovered in manifests."""

from dataclasses import dataclass
from typing import Dict

from packageurl import PackageURL

NPM = "npm"
GOLANG = "golang"


@dataclass(frozen=True)
class DependencySpec:
    """A single declared dependency: name plus the version string found in a manifest."""

    name: str
    version: str
    ecosystem: str

    @property
    def purl(self) -> PackageURL:
        """
        Package URL identifying this dependency.

        npm scopes (``@scope/pkg``) and Go module paths (``host/org/repo``)
        are split into namespace and name the way the purl spec expects.
        """
        namespace, _, name = self.name.rpartition("/")
        return PackageURL(
            type=self.ecosystem,
            namespace=namespace or None,
            name=name,
            version=self.version or None,
        )

    def __str__(self) -> str:
        return f"{self.name}@{self.version}"


# Name -> spec, last write wins
ManifestDependencies = Dict[str, DependencySpec]
