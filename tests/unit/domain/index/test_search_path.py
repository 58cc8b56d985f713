"""Unit tests for path tokenization and the search path transform."""

import logging

import pytest

from recast.domain.index.model.record import IndexRecord
from recast.domain.index.transform import MalformedPath, SearchPathTransform, tokenize_path


class TestTokenizePath:
    def test_replaces_delimiters_with_spaces(self):
        assert tokenize_path("-1,1066,1234,1236") == "-1 1066 1234 1236"

    def test_empty_path(self):
        assert tokenize_path("") == ""

    def test_single_segment_is_unchanged(self):
        assert tokenize_path("1066") == "1066"

    def test_custom_delimiter(self):
        assert tokenize_path("a/b/c", delimiter="/") == "a b c"

    @pytest.mark.parametrize("path", ["1,,2", "1,", ",1", "1, 2", "1,2 3"])
    def test_malformed_paths_raise(self, path):
        with pytest.raises(MalformedPath):
            tokenize_path(path)


class TestSearchPathTransform:
    def test_adds_search_path(self):
        transform = SearchPathTransform(categories=["content"])
        record = IndexRecord(id="1236", category="content", fields={"path": ["-1,1066,1234,1236"]})

        result = transform(record)

        assert result.fields["searchPath"] == ["-1 1066 1234 1236"]
        assert result.fields["path"] == ["-1,1066,1234,1236"]

    def test_missing_path_gives_empty_search_path(self):
        """The field is written even when there is nothing to tokenize."""
        transform = SearchPathTransform()
        record = IndexRecord(id="1", category="content", fields={"title": ["Home"]})

        result = transform(record)

        assert result.fields["searchPath"] == [""]

    def test_empty_path_gives_empty_search_path(self):
        transform = SearchPathTransform()
        record = IndexRecord(id="1", category="content", fields={"path": [""]})

        assert transform(record).fields["searchPath"] == [""]

    def test_malformed_path_is_copied_unchanged(self, caplog):
        transform = SearchPathTransform()
        record = IndexRecord(id="9", category="content", fields={"path": ["-1,,9"]})

        with caplog.at_level(logging.WARNING):
            result = transform(record)

        assert result.fields["searchPath"] == ["-1,,9"]
        assert "Malformed path on 9" in caplog.text

    def test_non_text_path_is_copied_as_text(self):
        transform = SearchPathTransform()
        record = IndexRecord(id="9", category="content", fields={"path": [1066]})

        assert transform(record).fields["searchPath"] == ["1066"]

    def test_other_categories_pass_through(self):
        transform = SearchPathTransform(categories=["content"])
        record = IndexRecord(id="1", category="member", fields={"path": ["-1,1"]})

        assert transform(record) is None

    def test_custom_fields(self):
        transform = SearchPathTransform(source_field="__Path", target_field="ancestors")
        record = IndexRecord(id="2", category="content", fields={"__Path": ["-1,1,2"]})

        result = transform(record)

        assert result.fields["ancestors"] == ["-1 1 2"]
        assert "searchPath" not in result.fields

    def test_empty_delimiter_is_rejected(self):
        with pytest.raises(ValueError, match="delimiter must not be empty"):
            SearchPathTransform(delimiter="")
