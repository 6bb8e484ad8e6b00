import pytest
from semvercore.version import Version, parse, is_valid, split_identifiers
from semvercore.exceptions import InvalidIdentifierError, MalformedVersionError, MissingInputError


class TestVersionParsing:
    """Tests for Version.parse and the grammar it enforces."""

    @pytest.mark.parametrize("version_str, major, minor, patch", [
        ("0.0.0", 0, 0, 0),
        ("0.1.2", 0, 1, 2),
        ("1.5.0", 1, 5, 0),
        ("256.256.256", 256, 256, 256),
        ("10.4.6-SNAPSHOT", 10, 4, 6),
        ("1.0.3+BACKUP", 1, 0, 3),
    ])
    def test_key_parts(self, version_str, major, minor, patch):
        """Major, minor and patch are extracted as integers."""
        v = Version.parse(version_str)
        assert (v.major, v.minor, v.patch) == (major, minor, patch)

    @pytest.mark.parametrize("version_str, pre_release, build_metadata", [
        ("1.2.3", (), ()),
        ("1.0.0-alpha.1", ("alpha", "1"), ()),
        ("1.0.0+20130313144700", (), ("20130313144700",)),
        ("3.1.415-PI+By-Ludolf.Not-rational", ("PI",), ("By-Ludolf", "Not-rational")),
        ("1.0.0-x-y.0a+exp.5114f85", ("x-y", "0a"), ("exp", "5114f85")),
    ])
    def test_identifiers(self, version_str, pre_release, build_metadata):
        """Identifier sequences keep their textual order."""
        v = Version.parse(version_str)
        assert v.pre_release_identifiers == pre_release
        assert v.build_metadata_identifiers == build_metadata

    @pytest.mark.parametrize("version_str", [
        "5.4.3",
        "1.0.0-SNAPSHOT",
        "3.1.415-PI+By-Ludolf.Not-rational",
        "0.0.1-rc.1.x-y+exp.sha.5114f85",
    ])
    def test_round_trip(self, version_str):
        """The canonical form reproduces canonical input."""
        assert str(Version.parse(version_str)) == version_str

    def test_surrounding_whitespace_is_trimmed(self):
        v = Version.parse("  \t2.7.18-Euler \n")
        assert str(v) == "2.7.18-Euler"

    @pytest.mark.parametrize("invalid_str", [
        "1",
        "2.3",
        "4..5",
        "01.2.3",
        "4.05.6",
        "7.8.09",
        "10.11.12--bad",
        "1.1.1-.x",
        "1.1.1-x.",
        "2.2.2-x.02",
        "3.3.3+.y",
        "3.3.3+y.",
        "4.4.4+y.03",
        "1.2.3-",
        "1.2.3+",
        "1.2.3-a..b",
        "1.2.3 4",
        "v1.2.3",
        "1.2.3-a_b",
        "",
    ])
    def test_malformed_versions(self, invalid_str):
        """Anything outside the grammar raises MalformedVersionError."""
        with pytest.raises(MalformedVersionError) as excinfo:
            Version.parse(invalid_str)
        assert excinfo.value.text == invalid_str

    def test_malformed_version_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse("2.3")

    def test_none_is_missing_input(self):
        with pytest.raises(MissingInputError):
            Version.parse(None)

    @pytest.mark.parametrize("version_str, expected", [
        ("1.2.3", True),
        (" 1.2.3-rc.1+b ", True),
        ("1.2", False),
        ("2.2.2-x.02", False),
        (None, False),
    ])
    def test_is_valid(self, version_str, expected):
        assert is_valid(version_str) is expected


class TestIdentifierSplitting:
    """Tests for split_identifiers."""

    def test_absent_part_yields_no_identifiers(self):
        assert split_identifiers(None) == ()

    def test_splits_on_dots(self):
        assert split_identifiers("rc.1.x-y") == ("rc", "1", "x-y")

    @pytest.mark.parametrize("raw", ["", ".x", "x.", "x..y", "x.01", "-x"])
    def test_bad_sequences(self, raw):
        with pytest.raises(MalformedVersionError):
            split_identifiers(raw, f"1.0.0-{raw}")


class TestVersionPredicates:
    """Tests for pre-release, stable and snapshot flags."""

    @pytest.mark.parametrize("version_str, pre_release, stable", [
        ("1.0.0", False, True),
        ("1.0.0-rc.1", True, False),
        ("0.2.3", True, False),          # major version 0 is always pre-release
        ("0.2.3-beta", True, False),
        ("2.0.0+build.1", False, True),
    ])
    def test_pre_release_and_stable(self, version_str, pre_release, stable):
        v = Version.parse(version_str)
        assert v.is_pre_release is pre_release
        assert v.is_stable is stable

    @pytest.mark.parametrize("version_str, expected", [
        ("1.4.2-SNAPSHOT", True),
        ("1.4.2-rc.SNAPSHOT", True),
        ("1.4.2-snapshot", False),
        ("1.4.2+SNAPSHOT", False),
        ("1.4.2", False),
    ])
    def test_is_snapshot(self, version_str, expected):
        assert Version.parse(version_str).is_snapshot is expected


class TestVersionMutation:
    """Tests for copy-on-write identifier operations."""

    def test_with_pre_release_identifier_appends(self):
        v = Version.parse("1.2.3-alpha+b7")
        extended = v.with_pre_release_identifier("SNAPSHOT")
        assert str(extended) == "1.2.3-alpha.SNAPSHOT+b7"
        assert str(v) == "1.2.3-alpha+b7"

    def test_with_pre_release_identifier_is_idempotent(self):
        v = Version.parse("1.2.3")
        once = v.with_pre_release_identifier("x")
        twice = once.with_pre_release_identifier("x")
        assert twice is once
        assert twice == v.with_pre_release_identifier("x")

    def test_with_pre_release_identifier_rejects_invalid(self):
        with pytest.raises(InvalidIdentifierError) as excinfo:
            Version.parse("1.2.3").with_pre_release_identifier("01")
        assert excinfo.value.identifier == "01"

    def test_with_pre_release_identifier_rejects_none(self):
        with pytest.raises(MissingInputError):
            Version.parse("1.2.3").with_pre_release_identifier(None)

    def test_with_optional_pre_release_identifier(self):
        v = Version.parse("1.2.3")
        assert v.with_optional_pre_release_identifier(None) is v
        assert str(v.with_optional_pre_release_identifier("rc")) == "1.2.3-rc"
        with pytest.raises(InvalidIdentifierError):
            v.with_optional_pre_release_identifier("a.b")

    def test_with_pre_release_identifiers(self):
        v = Version.parse("1.2.3-rc")
        extended = v.with_pre_release_identifiers("1", None, "rc", "x", "1")
        assert extended.pre_release_identifiers == ("rc", "1", "x")

    def test_with_pre_release_identifiers_fails_atomically(self):
        v = Version.parse("1.2.3")
        with pytest.raises(InvalidIdentifierError):
            v.with_pre_release_identifiers("a", "b", "-c")
        assert v.pre_release_identifiers == ()

    def test_with_pre_release_identifiers_without_changes_returns_receiver(self):
        v = Version.parse("1.2.3-a")
        assert v.with_pre_release_identifiers() is v
        assert v.with_pre_release_identifiers("a", None) is v

    def test_build_metadata_operations(self):
        v = Version.parse("1.2.3-rc")
        extended = v.with_build_metadata_identifier("b1").with_build_metadata_identifiers("b2", "b1")
        assert str(extended) == "1.2.3-rc+b1.b2"
        assert extended.with_build_metadata_identifier("b2") is extended
        assert v.with_optional_build_metadata_identifier(None) is v
        with pytest.raises(InvalidIdentifierError):
            v.with_build_metadata_identifier("")
        with pytest.raises(MissingInputError):
            v.with_build_metadata_identifier(None)

    def test_strip_operations(self):
        v = Version.parse("1.2.3-rc.1+b.5")
        assert str(v.strip_pre_release_identifiers()) == "1.2.3+b.5"
        assert str(v.strip_build_metadata_identifiers()) == "1.2.3-rc.1"
        assert str(v.strip_all_identifiers()) == "1.2.3"
        assert str(v) == "1.2.3-rc.1+b.5"

    def test_has_identifier(self):
        v = Version.parse("1.2.3-rc.1+b.5")
        assert v.has_pre_release_identifier("rc")
        assert not v.has_pre_release_identifier("b")
        assert v.has_build_metadata_identifier("5")
        with pytest.raises(MissingInputError):
            v.has_pre_release_identifier(None)


class TestVersionValue:
    """Tests for value semantics of Version."""

    def test_direct_construction_validates_identifiers(self):
        assert str(Version(1, 2, 3, ["rc", "1"], ["b"])) == "1.2.3-rc.1+b"
        with pytest.raises(InvalidIdentifierError):
            Version(1, 2, 3, ["rc", "01"])

    @pytest.mark.parametrize("numbers", [(-1, 0, 0), (1, "2", 3), (1, 2, True)])
    def test_direct_construction_validates_numbers(self, numbers):
        with pytest.raises(ValueError):
            Version(*numbers)

    @pytest.mark.parametrize("pre_release, build_metadata", [("rc", ()), ((), "b5")])
    def test_direct_construction_rejects_bare_strings(self, pre_release, build_metadata):
        with pytest.raises(TypeError):
            Version(1, 2, 3, pre_release, build_metadata)

    def test_attributes_are_read_only(self):
        v = Version.parse("1.2.3")
        with pytest.raises(AttributeError):
            v.major = 2

    def test_equal_versions_share_hash(self):
        assert hash(Version.parse("1.2.3-rc")) == hash(Version(1, 2, 3, ["rc"]))
        assert len({Version.parse("1.0.0"), Version.parse("1.0.0"), Version.parse("1.0.1")}) == 2

    def test_repr(self):
        assert repr(Version.parse("1.0.0-rc.1")) == "Version('1.0.0-rc.1')"

    def test_string_is_memoized(self):
        v = Version.parse("1.2.3-rc.1")
        assert str(v) is str(v)
