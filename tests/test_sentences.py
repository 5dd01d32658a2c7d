"""Tests for sentence splitting."""

import pytest

from vvcorpus.errors import EncodingError
from vvcorpus.sentences import read_sentences, split_sentences


class TestSplitSentences:
    def test_splits_on_full_stop(self):
        assert split_sentences("吾輩は猫である。名前はまだ無い。") == [
            "吾輩は猫である",
            "名前はまだ無い",
        ]

    def test_splits_on_quote_brackets(self):
        assert split_sentences("彼は「こんにちは」と言った。") == [
            "彼は",
            "こんにちは",
            "と言った",
        ]

    def test_removes_all_whitespace(self):
        assert split_sentences("　何処で 生れたか\nとんと\t見当がつかぬ。") == [
            "何処で生れたかとんと見当がつかぬ"
        ]

    def test_drops_empty_pieces(self):
        assert split_sentences("。。\n\n「」。") == []

    def test_no_delimiter(self):
        assert split_sentences("一文だけ") == ["一文だけ"]


class TestReadSentences:
    def test_reads_utf8_file(self, tmp_path):
        path = tmp_path / "neko.txt"
        path.write_text("一。\n二。\n", encoding="utf-8")
        assert read_sentences(path) == ["一", "二"]

    def test_invalid_utf8_raises_encoding_error(self, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_bytes(b"ok\xff")
        with pytest.raises(EncodingError) as exc_info:
            read_sentences(path)
        assert exc_info.value.offset == 2
        assert exc_info.value.path == path
