import io
from decimal import Decimal
from pathlib import Path

import pytest

from httpflex import Multipart, UrlEncoded, ValueKind
from httpflex._encoding import classify


class TestClassify:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, ValueKind.NONE),
            ("text", ValueKind.TEXT),
            ("", ValueKind.TEXT),
            (io.BytesIO(b"data"), ValueKind.STREAM),
            (io.StringIO("data"), ValueKind.STREAM),
            (b"data", ValueKind.BYTES),
            (bytearray(b"data"), ValueKind.BYTES),
            (memoryview(b"data"), ValueKind.BYTES),
            (Path("file.txt"), ValueKind.FILE_PATH),
            (True, ValueKind.BOOLEAN),
            (1, ValueKind.NUMBER),
            (1.5, ValueKind.NUMBER),
            (Decimal("2.50"), ValueKind.NUMBER),
            ({"x": 1}, ValueKind.OTHER),
            ([1, 2], ValueKind.OTHER),
        ],
    )
    def test_classify(self, value, expected):
        assert classify(value) is expected

    def test_forms_classify_as_their_kind(self):
        assert classify(Multipart(boundary="b")) is ValueKind.MULTIPART
        assert classify(UrlEncoded()) is ValueKind.URL_ENCODED

    def test_object_with_read_method_is_a_stream(self):
        class Reader:
            def read(self, size=-1):
                return b""

        assert classify(Reader()) is ValueKind.STREAM

    def test_path_string_is_text(self):
        assert classify("/etc/hosts") is ValueKind.TEXT
