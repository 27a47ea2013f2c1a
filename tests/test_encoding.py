"""Tests for decoding imported file bytes."""

import pytest

from asset_ledger.exceptions import CSVError, DecodeError
from asset_ledger.parsers.encoding import decode_bytes, read_file_bytes


class TestDecodeBytes:
    def test_decodes_utf8_first(self):
        decoded = decode_bytes("Café,Crème".encode("utf-8"))

        assert decoded.text == "Café,Crème"
        assert decoded.encoding == "utf-8"

    def test_falls_back_to_windows_1252(self):
        decoded = decode_bytes(b"caf\xe9 \x80")

        assert decoded.text == "café €"
        assert decoded.encoding == "cp1252"

    def test_falls_back_to_latin1_for_bytes_undefined_in_cp1252(self):
        decoded = decode_bytes(b"\x81abc")

        assert decoded.text == "\x81abc"
        assert decoded.encoding == "iso-8859-1"

    def test_strips_byte_order_mark(self):
        decoded = decode_bytes(b"\xef\xbb\xbfDate,Name")

        assert decoded.text == "Date,Name"
        assert decoded.encoding == "utf-8"

    def test_empty_input_decodes_to_empty_text(self):
        assert decode_bytes(b"").text == ""

    def test_uses_custom_encoding_order(self):
        decoded = decode_bytes(b"caf\xe9", encodings=["iso-8859-1", "utf-8"])

        assert decoded.encoding == "iso-8859-1"

    def test_skips_unknown_encoding_names(self):
        decoded = decode_bytes(b"plain", encodings=["no-such-codec", "ascii"])

        assert decoded.text == "plain"
        assert decoded.encoding == "ascii"

    def test_raises_decode_error_with_diagnostics(self):
        data = b"\xff\xfe\x00\x80"

        with pytest.raises(DecodeError) as exc_info:
            decode_bytes(data, encodings=["utf-8", "ascii"])

        error = exc_info.value
        assert isinstance(error, CSVError)
        assert error.byte_length == 4
        assert error.head_hex == "ff fe 00 80"
        assert error.encodings == ["utf-8", "ascii"]
        assert "ascii" in error.last_error
        assert "ff fe 00 80" in error.message
        assert error.context["byte_length"] == 4

    def test_preview_is_limited_to_leading_bytes(self):
        with pytest.raises(DecodeError) as exc_info:
            decode_bytes(b"\xff" * 40, encodings=["utf-8"], preview_bytes=4)

        assert exc_info.value.head_hex == "ff ff ff ff"
        assert exc_info.value.byte_length == 40


class TestReadFileBytes:
    def test_reads_whole_file(self, tmp_path):
        path = tmp_path / "ops.csv"
        path.write_bytes(b"Date,Name\r\n")

        assert read_file_bytes(path) == b"Date,Name\r\n"

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_file_bytes(tmp_path / "missing.csv")
