"""Tests for EnvironmentContext construction.

Verifies vendor normalization priority, version parsing (including the
legacy 1.N scheme and the unknown sentinel), ordering of RuntimeVersion,
and that context construction never raises.
"""

from __future__ import annotations

import pytest

from compatprobe.core.environment import (
    EnvironmentContext,
    RuntimeVersion,
    build_context,
    normalize_vendor,
    parse_version,
)


class TestNormalizeVendor:
    """Vendor substring checks in priority order."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("Oracle Corporation", "oracle"),
            ("ORACLE", "oracle"),
            ("Eclipse Adoptium", "eclipse-temurin"),
            ("AdoptOpenJDK", "openjdk"),
            ("Adoptium", "eclipse-temurin"),
            ("Temurin", "eclipse-temurin"),
            ("OpenJDK", "openjdk"),
            ("Azul Systems, Inc.", "unknown"),
            ("", "unknown"),
            (None, "unknown"),
        ],
    )
    def test_known_vendor_strings(self, raw: str | None, expected: str) -> None:
        assert normalize_vendor(raw) == expected

    def test_oracle_wins_over_openjdk(self) -> None:
        assert normalize_vendor("Oracle OpenJDK") == "oracle"

    def test_eclipse_wins_over_openjdk(self) -> None:
        assert normalize_vendor("Eclipse OpenJDK build") == "eclipse-temurin"


class TestParseVersion:
    """Leading dotted integer runs, never failing."""

    def test_full_version(self) -> None:
        assert parse_version("11.0.2").as_tuple() == (11, 0, 2)

    def test_build_suffix_ignored(self) -> None:
        assert parse_version("17.0.9+9-LTS").as_tuple() == (17, 0, 9)

    def test_major_only(self) -> None:
        v = parse_version("21")
        assert v.as_tuple() == (21, 0, 0)
        assert v.known

    def test_early_access_suffix(self) -> None:
        assert parse_version("22-ea").as_tuple() == (22, 0, 0)

    def test_legacy_scheme_folded(self) -> None:
        assert parse_version("1.8.0_292").as_tuple() == (8, 0, 0)

    @pytest.mark.parametrize("raw", ["", None, "garbage", "..", "v", "-1"])
    def test_unparsable_yields_unknown(self, raw: str | None) -> None:
        v = parse_version(raw)
        assert not v.known
        assert v.as_tuple() == (0, 0, 0)
        assert str(v) == "unknown"


class TestRuntimeVersion:
    def test_ordering(self) -> None:
        assert RuntimeVersion(11) >= RuntimeVersion(9)
        assert RuntimeVersion(9) >= RuntimeVersion(9)
        assert RuntimeVersion(8, 0, 392) < RuntimeVersion(9)

    def test_parse_accepts_int_and_instance(self) -> None:
        assert RuntimeVersion.parse(9) == RuntimeVersion(9, 0, 0)
        v = RuntimeVersion(17, 0, 1)
        assert RuntimeVersion.parse(v) is v

    def test_parse_rejects_negative_int(self) -> None:
        assert not RuntimeVersion.parse(-3).known

    def test_str(self) -> None:
        assert str(RuntimeVersion(11, 0, 2)) == "11.0.2"

    def test_equality_agrees_with_ordering(self) -> None:
        sentinel = RuntimeVersion.unknown()
        zero = RuntimeVersion(0)
        assert sentinel >= zero and sentinel <= zero
        assert sentinel == zero
        assert hash(sentinel) == hash(zero)
        assert not sentinel.known


class TestBuildContext:
    def test_normalizes_both_fields(self) -> None:
        ctx = build_context("Eclipse Adoptium", "17.0.9")
        assert ctx.vendor_id == "eclipse-temurin"
        assert ctx.version == RuntimeVersion(17, 0, 9)
        assert ctx.raw_vendor == "Eclipse Adoptium"
        assert ctx.raw_version == "17.0.9"

    def test_missing_input_never_raises(self) -> None:
        ctx = build_context(None, None)
        assert ctx.vendor_id == "unknown"
        assert not ctx.version.known

    def test_context_is_frozen(self) -> None:
        ctx = build_context("Oracle Corporation", "11")
        with pytest.raises(AttributeError):
            ctx.vendor_id = "openjdk"  # type: ignore[misc]

    def test_as_dict(self) -> None:
        ctx = build_context("Oracle Corporation", "11.0.2")
        assert ctx.as_dict() == {
            "vendor": "oracle",
            "version": "11.0.2",
            "raw_vendor": "Oracle Corporation",
            "raw_version": "11.0.2",
        }

    def test_equal_inputs_equal_contexts(self) -> None:
        assert build_context("Oracle", "11") == build_context("Oracle", "11")
        assert isinstance(build_context("x", "y"), EnvironmentContext)
