"""Package metadata parsed from the npm registry."""

from dataclasses import dataclass
from typing import Any, Dict, Optional


def _text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _nested_url(value: Any) -> Optional[str]:
    if isinstance(value, dict):
        return _text(value.get("url"))
    return None


def _license(value: Any) -> Optional[str]:
    # Older packages publish {"type": "MIT", "url": "..."}
    if isinstance(value, dict):
        return _text(value.get("type"))
    return _text(value)


@dataclass
class PackageMetadata:
    """
    Metadata of one published npm package version.

    ``repository_url`` is required because the license lookup depends on
    it; every other descriptive field is optional.
    """

    name: str
    version: str
    repository_url: str
    license: Optional[str] = None
    homepage: Optional[str] = None
    bugs_url: Optional[str] = None

    @classmethod
    def from_registry(cls, data: Any) -> Optional["PackageMetadata"]:
        """
        Build metadata from a registry version document.

        Args:
            data: Decoded JSON returned by ``/{name}/{version}``

        Returns:
            PackageMetadata, or None if the document lacks the expected shape
        """
        if not isinstance(data, dict):
            return None

        name = _text(data.get("name"))
        version = _text(data.get("version"))
        repository_url = _nested_url(data.get("repository"))
        if not (name and version and repository_url):
            return None

        return cls(
            name=name,
            version=version,
            repository_url=repository_url,
            license=_license(data.get("license")),
            homepage=_text(data.get("homepage")),
            bugs_url=_nested_url(data.get("bugs")),
        )

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "name": self.name,
            "version": self.version,
            "license": self.license,
            "homepage": self.homepage,
            "repository_url": self.repository_url,
            "bugs_url": self.bugs_url,
        }
