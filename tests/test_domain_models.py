"""test suite for domain models."""
import json
import pytest
import sys
from pathlib import Path

from pydantic import ValidationError

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from krate.domain.errors import EmptyVersionListError, KrateError
from krate.domain.models import Krate, KrateKeyword, KrateMetadata, KrateVersion

FIXTURE = Path(__file__).parent / "fixtures" / "is-wsl.json"


@pytest.fixture
def document() -> str:
    return FIXTURE.read_text()


@pytest.fixture
def krate(document) -> Krate:
    return Krate.from_json(document)


class TestDecoding:
    def test_crate_metadata(self, krate):
        assert krate.krate.name == "is-wsl"
        assert krate.name == "is-wsl"
        assert krate.krate.description.startswith("Checks if the process")
        assert krate.krate.homepage is None
        assert krate.krate.documentation == "https://docs.rs/is-wsl"
        assert krate.krate.categories == ["command-line-utilities"]
        assert krate.krate.keywords == ["wsl", "windows", "linux"]
        assert krate.krate.versions == [689214, 612874, 612771]
        assert krate.krate.max_version == "0.4.0"

    def test_versions_keep_registry_order(self, krate):
        assert [v.num for v in krate.versions] == ["0.4.0", "0.3.0", "0.2.0"]
        assert krate.versions[1].yanked is True

    def test_null_and_absent_fields_are_equivalent(self, krate):
        oldest = krate.versions[2]
        assert oldest.license is None
        assert oldest.readme_path is None
        assert oldest.features is None
        assert oldest.crate_size is None
        assert krate.versions[1].crate_size is None

    def test_null_keyword_entries_survive(self, krate):
        assert len(krate.keywords) == 3
        assert krate.keywords[1] is None
        assert isinstance(krate.keywords[0], KrateKeyword)

    def test_categories(self, krate):
        assert len(krate.categories) == 1
        assert krate.categories[0].slug == "command-line-utilities"
        assert krate.categories[0].crates_cnt == 14213

    def test_decoding_is_idempotent(self, document):
        assert Krate.from_json(document) == Krate.from_json(document)

    def test_decodes_bytes(self, document):
        assert Krate.from_json(document.encode()) == Krate.from_json(document)

    def test_minimal_document(self):
        krate = Krate.from_json('{"crate": {"name": "tiny"}, "versions": [{"num": "0.1.0"}]}')
        assert krate.name == "tiny"
        assert krate.categories == []
        assert krate.keywords is None
        assert krate.versions[0].yanked is False

    def test_null_yanked_defaults_to_false(self):
        krate = Krate.from_json('{"crate": {"name": "tiny"}, "versions": [{"num": "0.1.0", "yanked": null}]}')
        assert krate.versions[0].yanked is False

    def test_missing_crate_object_fails(self):
        with pytest.raises(ValidationError):
            Krate.from_json('{"versions": []}')

    def test_wrong_shape_fails(self):
        with pytest.raises(ValidationError):
            Krate.from_json('{"crate": {"name": "tiny"}, "versions": {"num": "0.1.0"}}')

    def test_malformed_json_fails(self):
        with pytest.raises(ValidationError):
            Krate.from_json("<html>not json</html>")

    def test_records_are_frozen(self, krate):
        with pytest.raises(ValidationError):
            krate.krate.name = "other"


class TestLatestVersion:
    def test_latest_is_first_version(self, krate):
        assert krate.latest_version() == "0.4.0"
        assert krate.latest_version() == krate.versions[0].num

    def test_latest_ignores_semver_ordering(self):
        # the registry order wins, even when it is not sorted by number
        krate = Krate(
            krate=KrateMetadata(name="odd"),
            versions=[KrateVersion(num="0.9.0"), KrateVersion(num="1.0.0")],
        )
        assert krate.latest_version() == "0.9.0"

    def test_empty_versions_raise(self):
        krate = Krate.from_json('{"crate": {"name": "ghost"}, "versions": []}')
        with pytest.raises(EmptyVersionListError, match="ghost"):
            krate.latest_version()

    def test_empty_versions_error_is_krate_error(self):
        krate = Krate(krate=KrateMetadata(name="ghost"))
        with pytest.raises(KrateError):
            krate.latest_version()


class TestFeaturesForVersion:
    def test_features_for_known_version(self, krate):
        features = krate.features_for_version("0.4.0")
        assert features == {"default": ["std"], "std": [], "tracing": ["dep:tracing"]}

    def test_features_for_unknown_version(self, krate):
        assert krate.features_for_version("9999.0.00") is None

    def test_exact_match_only(self, krate):
        assert krate.features_for_version("0.4") is None
        assert krate.features_for_version(" 0.4.0") is None
        assert krate.features_for_version("v0.4.0") is None

    def test_version_without_features(self, krate):
        assert krate.features_for_version("0.2.0") is None

    def test_empty_feature_map(self, krate):
        assert krate.features_for_version("0.3.0") == {}

    def test_returned_map_does_not_alter_record(self, krate):
        features = krate.features_for_version("0.4.0")
        features["injected"] = []
        features["default"].append("extra")

        again = krate.features_for_version("0.4.0")
        assert "injected" not in again
        assert again["default"] == ["std"]
        assert krate.versions[0].features["default"] == ["std"]

    def test_first_match_wins(self):
        krate = Krate(
            krate=KrateMetadata(name="dup"),
            versions=[
                KrateVersion(num="1.0.0", features={"a": []}),
                KrateVersion(num="1.0.0", features={"b": []}),
            ],
        )
        assert krate.features_for_version("1.0.0") == {"a": []}


class TestHelpers:
    def test_get_version(self, krate):
        assert krate.get_version("0.3.0").yanked is True
        assert krate.get_version("1.0.0") is None

    def test_keyword_names_skip_nulls(self, krate):
        assert krate.keyword_names() == ["wsl", "windows"]

    def test_keyword_names_without_keywords(self):
        krate = Krate.from_json('{"crate": {"name": "tiny"}, "keywords": null}')
        assert krate.keyword_names() == []

    def test_populate_by_alias_and_name(self, document):
        data = json.loads(document)
        by_alias = Krate.model_validate(data)
        by_name = Krate(krate=by_alias.krate, versions=by_alias.versions,
                        categories=by_alias.categories, keywords=by_alias.keywords)
        assert by_alias == by_name


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
