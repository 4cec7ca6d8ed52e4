from packaging.version import Version

from pkgview.domain.models.core import Package, PackageRecord, PackageVersion, parse_version


def test_from_record_parses_version_and_blank_title():
    package = Package.from_record(PackageRecord(id="git", version="2.40.0", title=""))

    assert package.version == Version("2.40.0")
    assert package.title is None
    assert package.display_name == "git"
    assert package.latest_version is None


def test_from_record_accepts_semver_prerelease():
    package = Package.from_record(PackageRecord(id="tool", version="1.0.0-x.7.z.92"))

    assert str(package.version) == "1.0.0-x.7.z.92"
    assert package.version.parsed is None


def test_update_candidate_requires_unpinned_update():
    package = Package(id="git", version=Version("1.0"))
    assert not package.can_update

    package.latest_version = parse_version("1.1")
    assert package.can_update
    assert package.is_update_candidate

    package.is_pinned = True
    assert package.can_update
    assert not package.is_update_candidate


def test_matches_id_ignores_case():
    assert Package(id="Chocolatey", version="1.0").matches_id("chocolatey")


def test_parse_version():
    assert parse_version(None) is None
    assert parse_version("  ") is None
    assert parse_version("1.2.3") == Version("1.2.3")
    assert str(parse_version(" 2.1.0-beta ")) == "2.1.0-beta"
    assert str(parse_version("not a version")) == "not a version"


def test_reported_text_is_kept_when_pep440_normalises():
    version = PackageVersion("2.1.0-beta")

    assert str(version) == "2.1.0-beta"
    assert version.parsed == Version("2.1.0b0")
    assert version == "2.1.0b0"


def test_semver_prereleases_order_below_their_release():
    ordered = sorted(
        PackageVersion(text)
        for text in ["1.0.0", "1.0.0-x.7.z.92", "0.9", "1.0.0-alpha.beta", "1.0.1-beta.x.y", "2.0"]
    )

    assert [str(v) for v in ordered] == [
        "0.9",
        "1.0.0-alpha.beta",
        "1.0.0-x.7.z.92",
        "1.0.0",
        "1.0.1-beta.x.y",
        "2.0",
    ]


def test_unparsable_versions_sort_first_by_text():
    ordered = sorted([PackageVersion("1.0"), PackageVersion("latest"), PackageVersion("beta")])

    assert [str(v) for v in ordered] == ["beta", "latest", "1.0"]
