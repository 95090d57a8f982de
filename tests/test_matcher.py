"""Tests for navigator.routing.matcher — structural token matching."""

from navigator.routing.matcher import match_schema
from navigator.routing.schema import compile_schema


class TestMatchSchema:
    def test_capture(self) -> None:
        schema = compile_schema("/match/:id/comments/")
        assert match_schema(schema, ["match", "42", "comments"]) == {"id": "42"}

    def test_literal_mismatch(self) -> None:
        schema = compile_schema("/match/:id/")
        assert match_schema(schema, ["game", "42"]) is None

    def test_literals_are_case_sensitive(self) -> None:
        schema = compile_schema("/match/:id")
        assert match_schema(schema, ["Match", "42"]) is None

    def test_length_mismatch(self) -> None:
        schema = compile_schema("/match/:id")
        assert match_schema(schema, ["match"]) is None
        assert match_schema(schema, ["match", "1", "2"]) is None

    def test_static_only(self) -> None:
        schema = compile_schema("/about")
        assert match_schema(schema, ["about"]) == {}

    def test_root(self) -> None:
        schema = compile_schema("/")
        assert match_schema(schema, [""]) == {}

    def test_wildcard_absorbs_extra_tokens(self) -> None:
        schema = compile_schema("/files/:owner/*")
        assert match_schema(schema, ["files", "ann", "a", "b", "c"]) == {"owner": "ann"}

    def test_wildcard_needs_its_own_segment(self) -> None:
        schema = compile_schema("/files/*")
        assert match_schema(schema, ["files", "x"]) == {}
        assert match_schema(schema, ["files"]) is None

    def test_wildcard_literal_prefix_checked(self) -> None:
        schema = compile_schema("/files/*")
        assert match_schema(schema, ["docs", "x", "y"]) is None

    def test_repeated_param_name_last_write_wins(self) -> None:
        schema = compile_schema("/:x/:x")
        assert match_schema(schema, ["a", "b"]) == {"x": "b"}

    def test_interior_star_compared_literally(self) -> None:
        schema = compile_schema("/a/*/b")
        assert match_schema(schema, ["a", "*", "b"]) == {}
        assert match_schema(schema, ["a", "z", "b"]) is None

    def test_wildcard_with_trailing_slash_is_one_segment(self) -> None:
        schema = compile_schema("/a/*/")
        assert match_schema(schema, ["a", "x"]) == {}
        assert match_schema(schema, ["a", "x", "y"]) is None
