import io
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pytest
from pydantic import BaseModel

from httpflex import (
    ContentType,
    EncodingFailure,
    JsonCodec,
    Multipart,
    PreconditionViolation,
    UrlEncoded,
    encode_body,
)


class Item(BaseModel):
    name: str
    count: int


class Tagged(BaseModel):
    name: str
    note: Optional[str] = None


@dataclass
class Point:
    x: int
    y: int


class TestEncodeBody:
    def test_none_sends_empty_body(self):
        encoded = encode_body("get", None)

        assert encoded.method == "GET"
        assert encoded.content == b""
        assert encoded.content_type is None

    @pytest.mark.parametrize("text", ["", "hello", "héllo wörld ✓", '{"x":1}'])
    def test_text_is_utf8_without_content_type(self, text):
        encoded = encode_body("post", text)

        assert encoded.content == text.encode("utf-8")
        assert encoded.content_type is None

    def test_stream_is_drained_and_closed(self):
        stream = io.BytesIO(b"\x00\x01binary")

        encoded = encode_body("put", stream)

        assert encoded.method == "PUT"
        assert encoded.content == b"\x00\x01binary"
        assert encoded.content_type is None
        assert stream.closed

    def test_text_stream_is_utf8_encoded(self):
        encoded = encode_body("post", io.StringIO("ünïcode"))

        assert encoded.content == "ünïcode".encode("utf-8")

    def test_bytes_verbatim(self):
        assert encode_body("post", b"\xff\x00").content == b"\xff\x00"
        assert encode_body("post", bytearray(b"ab")).content == b"ab"

    def test_file_path_sends_file_bytes(self, tmp_path: Path):
        path = tmp_path / "payload.bin"
        path.write_bytes(b"file-content")

        encoded = encode_body("post", path)

        assert encoded.content == b"file-content"
        assert encoded.content_type is None

    def test_missing_file_is_an_encoding_failure(self, tmp_path: Path):
        with pytest.raises(EncodingFailure) as exc_info:
            encode_body("post", tmp_path / "missing.bin")

        assert isinstance(exc_info.value.cause, FileNotFoundError)

    def test_multipart_forces_boundary_content_type(self):
        form = Multipart(boundary="XYZ").put("a", "1")

        encoded = encode_body("post", form)

        assert encoded.content_type == ContentType.multipart("XYZ")
        assert encoded.content == (
            b'--XYZ\r\nContent-Disposition: form-data; name="a"\r\n\r\n1\r\n--XYZ--\r\n'
        )

    def test_url_encoded_forces_form_content_type(self):
        form = UrlEncoded().put("a", 1).put("b", "x")

        encoded = encode_body("post", form)

        assert encoded.content_type is ContentType.URLENC
        assert encoded.content == b"a=1&b=x"

    def test_empty_url_encoded_is_a_precondition_violation(self):
        with pytest.raises(PreconditionViolation):
            encode_body("post", UrlEncoded())

    def test_other_values_are_sent_as_json(self):
        encoded = encode_body("post", {"x": 1})

        assert encoded.content_type is ContentType.JSON
        assert encoded.content == b'{"x":1}'

    def test_models_and_dataclasses_are_sent_as_json(self):
        assert encode_body("post", Item(name="a", count=2)).content == (
            b'{"name":"a","count":2}'
        )
        assert encode_body("post", Point(1, 2)).content == b'{"x":1,"y":2}'

    def test_numbers_and_booleans_are_json(self):
        assert encode_body("post", 42).content == b"42"
        assert encode_body("post", True).content == b"true"
        assert encode_body("post", 42).content_type is ContentType.JSON

    def test_custom_codec_is_used(self):
        encoded = encode_body("post", Tagged(name="a"), JsonCodec(exclude_none=True))

        assert encoded.content == b'{"name":"a"}'

    def test_unserializable_value_is_an_encoding_failure(self):
        with pytest.raises(EncodingFailure):
            encode_body("post", object())
