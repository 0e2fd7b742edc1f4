import base64
import io
from pathlib import Path

import pytest

from httpflex import PreconditionViolation, UrlEncoded


class TestUrlEncoded:
    def test_pairs_in_insertion_order(self):
        assert UrlEncoded().put("a", 1).put("b", "x").build() == "a=1&b=x"

    def test_single_field_has_no_separator(self):
        assert UrlEncoded().put("only", "v").build() == "only=v"

    def test_text_is_not_escaped(self):
        assert UrlEncoded().put("q", "a b&c").build() == "q=a b&c"

    def test_put_encoded_percent_encodes_value(self):
        form = UrlEncoded().put_encoded("q", "a b&c=d/é")

        assert form.build() == "q=a+b%26c%3Dd%2F%C3%A9"

    @pytest.mark.parametrize(
        "value, expected",
        [
            (True, "true"),
            (False, "false"),
            (42, "42"),
            (-7, "-7"),
            (1.5, "1.5"),
        ],
    )
    def test_scalar_stringification(self, value, expected):
        assert UrlEncoded().put("v", value).build() == f"v={expected}"

    def test_bytes_are_base64(self):
        data = b"\x00\xff binary"

        assert UrlEncoded().put("b", data).build() == (
            f"b={base64.b64encode(data).decode()}"
        )

    def test_path_is_read_as_text(self, tmp_path: Path):
        path = tmp_path / "value.txt"
        path.write_text("from file ✓", encoding="utf-8")

        assert UrlEncoded().put("f", path).build() == "f=from file ✓"

    def test_stream_is_read_as_text(self):
        stream = io.BytesIO("streamed ✓".encode("utf-8"))

        assert UrlEncoded().put("s", stream).build() == "s=streamed ✓"

    def test_other_values_are_json(self):
        assert UrlEncoded().put("j", {"k": [1, 2]}).build() == 'j={"k":[1,2]}'

    def test_empty_form_is_a_precondition_violation(self):
        with pytest.raises(PreconditionViolation):
            UrlEncoded().build()

    def test_reset_then_build_is_a_precondition_violation(self):
        form = UrlEncoded().put("a", 1)
        form.build()

        form.reset()

        with pytest.raises(PreconditionViolation):
            form.build()

    def test_repeated_build_is_stable(self):
        form = UrlEncoded().put("a", 1).put("b", 2)

        assert form.build() == form.build() == "a=1&b=2"

    def test_remove(self):
        form = UrlEncoded().put("a", 1).put("b", 2).remove("a")

        assert form.build() == "b=2"

    def test_close(self):
        form = UrlEncoded().put("a", 1)

        form.close()
        form.close()

        with pytest.raises(PreconditionViolation):
            form.build()
