from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Any, Dict, List, Optional, Union

from .errors import EmptyVersionListError


class RegistryModel(BaseModel):
    """base for records decoded from registry json."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        # null and absent both fall back to the field default
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class KrateCategory(RegistryModel):
    id: str = ""
    category: str = ""
    slug: str = ""
    description: str = ""
    crates_cnt: int = 0
    created_at: Optional[str] = None


class KrateKeyword(RegistryModel):
    id: str = ""
    keyword: str = ""
    crates_cnt: int = 0
    created_at: Optional[str] = None


class KrateVersion(RegistryModel):
    """one published version of a crate."""
    num: str
    id: Optional[int] = None
    license: Optional[str] = None
    yanked: bool = False
    crate_size: Optional[int] = None
    readme_path: Optional[str] = None
    features: Optional[Dict[str, List[str]]] = None  # feature -> enabled features/deps


class KrateMetadata(RegistryModel):
    """the `crate` object of a registry response."""
    name: str
    id: str = ""
    description: str = ""
    homepage: Optional[str] = None
    documentation: Optional[str] = None
    repository: Optional[str] = None
    downloads: int = 0
    recent_downloads: Optional[int] = None
    categories: List[str] = Field(default_factory=list)  # slugs
    keywords: List[str] = Field(default_factory=list)
    versions: List[int] = Field(default_factory=list)  # version ids
    max_version: Optional[str] = None
    max_stable_version: Optional[str] = None
    newest_version: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None
    exact_match: bool = False


class Krate(RegistryModel):
    """
    full registry response for one crate.

    versions are ordered newest first, so the first entry is the latest.
    """
    krate: KrateMetadata = Field(alias="crate")
    versions: List[KrateVersion] = Field(default_factory=list)
    categories: List[KrateCategory] = Field(default_factory=list)
    keywords: Optional[List[Optional[KrateKeyword]]] = None

    @classmethod
    def from_json(cls, document: Union[str, bytes]) -> "Krate":
        """decode a registry json document, raising pydantic's ValidationError on mismatch."""
        return cls.model_validate_json(document)

    @property
    def name(self) -> str:
        return self.krate.name

    def latest_version(self) -> str:
        if not self.versions:
            raise EmptyVersionListError(self.krate.name)
        return self.versions[0].num

    def get_version(self, version: str) -> Optional[KrateVersion]:
        for v in self.versions:
            if v.num == version:
                return v
        return None

    def features_for_version(self, version: str) -> Optional[Dict[str, List[str]]]:
        """
        get the feature map of a version.

        args:
            version: exact version string, e.g. "1.24.2"

        returns:
            feature name -> enabled features, or None when the version is
            unknown or publishes no features. the map is a fresh copy
        """
        match = self.get_version(version)
        if match is None or match.features is None:
            return None
        return {name: list(enables) for name, enables in match.features.items()}

    def keyword_names(self) -> List[str]:
        if not self.keywords:
            return []
        return [k.keyword for k in self.keywords if k is not None]
