"""Tests for generator/docs.py."""

from __future__ import annotations

from supatypes.generator.docs import (
    render_documentation,
    render_enum_documentation,
    variant_documentation,
)
from supatypes.model.types import EnumType, EnumVariant


def enum(documentation: tuple[str, ...] = (), **variant_docs: tuple[str, ...]) -> EnumType:
    variants = tuple(EnumVariant(name, docs) for name, docs in variant_docs.items())
    return EnumType(name="Role", key="Role", variants=variants, documentation=documentation)


class TestRenderDocumentation:
    """Tests for render_documentation function."""

    def test_no_lines(self) -> None:
        assert render_documentation(()) == []

    def test_single_line(self) -> None:
        assert render_documentation(("A user",)) == ["/** A user */"]

    def test_multiple_lines(self) -> None:
        assert render_documentation(("First", "Second")) == [
            "/**",
            " * First",
            " * Second",
            " */",
        ]

    def test_blank_inner_line_has_no_trailing_space(self) -> None:
        assert render_documentation(("a", "", "b"))[2] == " *"

    def test_disabled(self) -> None:
        assert render_documentation(("A user",), enabled=False) == []


class TestRenderEnumDocumentation:
    """Tests for render_enum_documentation function."""

    def test_nothing_documented(self) -> None:
        assert render_enum_documentation(enum(USER=(), ADMIN=())) == []

    def test_own_documentation_only(self) -> None:
        assert render_enum_documentation(enum(("Access level",), USER=())) == [
            "/** Access level */"
        ]

    def test_variants_only(self) -> None:
        result = render_enum_documentation(enum(USER=("Regular",), ADMIN=("Full access",)))
        assert result == ["/**", " * USER: Regular", " * ADMIN: Full access", " */"]

    def test_undocumented_variants_skipped(self) -> None:
        result = render_enum_documentation(enum(USER=(), ADMIN=("Full access",)))
        assert result == ["/**", " * ADMIN: Full access", " */"]

    def test_own_and_variants_form_one_block(self) -> None:
        result = render_enum_documentation(enum(("Access level",), ADMIN=("Full access",)))
        assert result == ["/**", " * Access level", " * ADMIN: Full access", " */"]
        assert result.count("/**") == 1
        assert result.count(" */") == 1

    def test_multiline_own_and_variants(self) -> None:
        result = render_enum_documentation(enum(("Line one", "Line two"), USER=("Regular",)))
        assert result == ["/**", " * Line one", " * Line two", " * USER: Regular", " */"]

    def test_disabled(self) -> None:
        assert render_enum_documentation(enum(("Doc",), USER=("x",)), enabled=False) == []


def test_variant_documentation_joins_lines() -> None:
    assert variant_documentation(enum(USER=("Regular", "account"))) == ["USER: Regular account"]


def test_variant_documentation_skips_blank_lines() -> None:
    assert variant_documentation(enum(USER=("Regular", "", "account"))) == [
        "USER: Regular account"
    ]


class TestCloseTokenEscaping:
    """Documentation text containing the comment terminator."""

    def test_single_line(self) -> None:
        assert render_documentation(("ends */ here",)) == ["/** ends *\\/ here */"]

    def test_block_lines(self) -> None:
        result = render_documentation(("first */", "second"))
        assert result == ["/**", " * first *\\/", " * second", " */"]

    def test_only_one_terminator_per_comment(self) -> None:
        result = render_enum_documentation(enum(("a */ b",), USER=("c */ d",)))
        assert "".join(result).count("*/") == 1
