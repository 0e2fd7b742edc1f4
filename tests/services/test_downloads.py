import base64
from pathlib import Path

import httpx
import pytest
from pytest_httpx import HTTPXMock

from httpflex import (
    get_file,
    get_file_bytes,
    get_file_stream,
    get_files,
    get_files_bytes,
    get_files_streams,
    get_json_string,
    get_query_params,
)

PNG_BYTES = b"\x89PNG\r\n\x1a\n"
DATA_URI = "data:image/png;base64," + base64.b64encode(PNG_BYTES).decode()


class TestDownloads:
    def test_get_file_bytes(self, httpx_mock: HTTPXMock, base_url: str):
        httpx_mock.add_response(url=f"{base_url}/a.bin", content=b"abc")

        assert get_file_bytes(f"{base_url}/a.bin") == b"abc"

    def test_get_file_bytes_from_data_uri(self):
        assert get_file_bytes(DATA_URI) == PNG_BYTES

    def test_get_file_bytes_from_percent_encoded_data_uri(self):
        assert get_file_bytes("data:,a%20b") == b"a b"
        assert get_file_bytes("data:text/plain;charset=utf-8,%E2%82%AC") == "\u20ac".encode()

    def test_get_file_bytes_failure_returns_none(self, httpx_mock: HTTPXMock, base_url: str):
        httpx_mock.add_exception(httpx.ConnectError("refused"))

        assert get_file_bytes(f"{base_url}/a.bin") is None

    def test_get_file_bytes_invalid_url_returns_none(self):
        assert get_file_bytes("not a url") is None

    def test_get_file_stream(self, httpx_mock: HTTPXMock, base_url: str):
        httpx_mock.add_response(url=f"{base_url}/a.bin", content=b"0123456789")

        stream = get_file_stream(f"{base_url}/a.bin")

        assert stream is not None
        with stream:
            assert stream.read() == b"0123456789"

    def test_get_file_stream_from_data_uri(self):
        stream = get_file_stream(DATA_URI)

        assert stream is not None
        assert stream.read() == PNG_BYTES

    def test_get_file_writes_destination(
        self, httpx_mock: HTTPXMock, base_url: str, tmp_path: Path
    ):
        httpx_mock.add_response(url=f"{base_url}/a.bin", content=b"abc")
        destination = tmp_path / "a.bin"

        assert get_file(f"{base_url}/a.bin", destination) == destination
        assert destination.read_bytes() == b"abc"

    def test_get_file_keeps_existing_file(self, tmp_path: Path):
        destination = tmp_path / "a.bin"
        destination.write_bytes(b"existing")

        assert get_file("https://test.example.com/a.bin", destination) == destination
        assert destination.read_bytes() == b"existing"

    def test_get_file_write_failure_returns_none(self, tmp_path: Path):
        destination = tmp_path / "missing-dir" / "a.png"

        assert get_file(DATA_URI, destination) is None

    def test_batch_helpers_drop_failures(
        self, httpx_mock: HTTPXMock, base_url: str, tmp_path: Path
    ):
        httpx_mock.add_response(url=f"{base_url}/ok.bin", content=b"ok", is_reusable=True)

        urls = [f"{base_url}/ok.bin", "not a url", DATA_URI]

        assert get_files_bytes(urls) == [b"ok", PNG_BYTES]

        streams = get_files_streams(urls)
        try:
            assert [stream.read() for stream in streams] == [b"ok", PNG_BYTES]
        finally:
            for stream in streams:
                stream.close()

        saved = get_files(
            {
                f"{base_url}/ok.bin": tmp_path / "ok.bin",
                "not a url": tmp_path / "bad.bin",
            }
        )
        assert saved == [tmp_path / "ok.bin"]


class TestTextHelpers:
    def test_get_json_string(self):
        text = 'Result: {"a": {"b": 1}} trailing'

        assert get_json_string(text) == '{"a": {"b": 1}}'

    def test_get_json_string_without_object(self):
        with pytest.raises(ValueError):
            get_json_string("no json here")

    def test_get_query_params(self):
        params = get_query_params("https://x.example.com/p?name=J%C3%BCrgen&q=a+b&empty=")

        assert params == {"name": "Jürgen", "q": "a b", "empty": ""}
