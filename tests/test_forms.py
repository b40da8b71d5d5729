"""Tests for form data parsing and FormData as a field source."""

import sys

import pytest

from wren._internal.multimap import MultiValueMapping
from wren.errors import ConfigurationError
from wren.http.forms import FormData, parse_form_data
from wren.validation import ErrorCollection, multiple_checkboxes, required_int, required_string

# ---------------------------------------------------------------------------
# FormData unit tests
# ---------------------------------------------------------------------------


class TestFormData:
    def test_getitem(self) -> None:
        form = FormData({"name": ["alice"]})
        assert form["name"] == "alice"

    def test_getitem_returns_first(self) -> None:
        form = FormData({"color": ["red", "blue"]})
        assert form["color"] == "red"

    def test_getitem_missing_raises(self) -> None:
        form = FormData({})
        with pytest.raises(KeyError):
            form["missing"]

    def test_get_with_default(self) -> None:
        form = FormData({})
        assert form.get("missing") is None
        assert form.get("missing", "fallback") == "fallback"

    def test_get_list(self) -> None:
        form = FormData({"tags": ["python", "web", "async"]})
        assert form.get_list("tags") == ["python", "web", "async"]

    def test_get_list_missing(self) -> None:
        form = FormData({})
        assert form.get_list("missing") == []

    def test_get_list_is_a_copy(self) -> None:
        form = FormData({"tags": ["a"]})
        form.get_list("tags").append("b")
        assert form.get_list("tags") == ["a"]

    def test_contains(self) -> None:
        form = FormData({"name": ["alice"]})
        assert "name" in form
        assert "age" not in form

    def test_iter(self) -> None:
        form = FormData({"a": ["1"], "b": ["2"]})
        assert set(form) == {"a", "b"}

    def test_len(self) -> None:
        form = FormData({"a": ["1"], "b": ["2"]})
        assert len(form) == 2

    def test_repr(self) -> None:
        form = FormData({"tags": ["a", "b"]})
        assert repr(form) == "FormData({'tags': ['a', 'b']})"

    def test_is_multi_value_mapping(self) -> None:
        assert isinstance(FormData({}), MultiValueMapping)

    def test_plain_dict_is_not_multi_value_mapping(self) -> None:
        assert not isinstance({}, MultiValueMapping)


# ---------------------------------------------------------------------------
# parse_form_data unit tests
# ---------------------------------------------------------------------------


class TestParseUrlEncoded:
    async def test_basic(self) -> None:
        form = await parse_form_data(b"name=alice&age=30", "application/x-www-form-urlencoded")
        assert form["name"] == "alice"
        assert form["age"] == "30"

    async def test_multiple_values(self) -> None:
        form = await parse_form_data(b"tag=a&tag=b&tag=c", "application/x-www-form-urlencoded")
        assert form.get_list("tag") == ["a", "b", "c"]

    async def test_empty_body(self) -> None:
        form = await parse_form_data(b"", "application/x-www-form-urlencoded")
        assert len(form) == 0

    async def test_blank_values_kept(self) -> None:
        form = await parse_form_data(b"size=&name=x", "application/x-www-form-urlencoded")
        assert "size" in form
        assert form["size"] == ""

    async def test_charset_parameter_ignored(self) -> None:
        form = await parse_form_data(
            b"name=alice", "application/x-www-form-urlencoded; charset=utf-8"
        )
        assert form["name"] == "alice"

    async def test_url_encoded_special_chars(self) -> None:
        form = await parse_form_data(
            b"q=hello+world&path=%2Ffoo", "application/x-www-form-urlencoded"
        )
        assert form["q"] == "hello world"
        assert form["path"] == "/foo"


BOUNDARY = "wrenboundary"
MULTIPART_TYPE = f"multipart/form-data; boundary={BOUNDARY}"
MULTIPART_BODY = (
    b"--wrenboundary\r\n"
    b'Content-Disposition: form-data; name="name"\r\n'
    b"\r\n"
    b"alice\r\n"
    b"--wrenboundary\r\n"
    b'Content-Disposition: form-data; name="tags"\r\n'
    b"\r\n"
    b"a\r\n"
    b"--wrenboundary\r\n"
    b'Content-Disposition: form-data; name="tags"\r\n'
    b"\r\n"
    b"b\r\n"
    b"--wrenboundary\r\n"
    b'Content-Disposition: form-data; name="avatar"; filename="me.png"\r\n'
    b"Content-Type: image/png\r\n"
    b"\r\n"
    b"not really a png\r\n"
    b"--wrenboundary--\r\n"
)


class TestParseMultipart:
    async def test_text_fields(self) -> None:
        form = await parse_form_data(MULTIPART_BODY, MULTIPART_TYPE)
        assert form["name"] == "alice"
        assert form.get_list("tags") == ["a", "b"]

    async def test_files_skipped(self) -> None:
        form = await parse_form_data(MULTIPART_BODY, MULTIPART_TYPE)
        assert "avatar" not in form

    async def test_other_part_headers_ignored(self) -> None:
        body = (
            b"--wrenboundary\r\n"
            b'Content-Type: text/plain; name="decoy"\r\n'
            b'Content-Disposition: form-data; name="bio"\r\n'
            b"Content-Transfer-Encoding: 8bit\r\n"
            b"\r\n"
            b"hello\r\n"
            b"--wrenboundary--\r\n"
        )
        form = await parse_form_data(body, MULTIPART_TYPE)
        assert dict(form) == {"bio": "hello"}

    async def test_missing_boundary(self) -> None:
        with pytest.raises(ValueError, match="boundary"):
            await parse_form_data(MULTIPART_BODY, "multipart/form-data")

    async def test_missing_dependency(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setitem(sys.modules, "python_multipart.multipart", None)
        with pytest.raises(ConfigurationError, match="python-multipart"):
            await parse_form_data(MULTIPART_BODY, MULTIPART_TYPE)


class TestParseUnsupported:
    async def test_unsupported_content_type(self) -> None:
        with pytest.raises(ValueError, match="Unsupported form content type"):
            await parse_form_data(b"data", "application/json")


# ---------------------------------------------------------------------------
# Parsed bodies as field sources
# ---------------------------------------------------------------------------


class TestParsedFormValidation:
    async def test_urlencoded_submission(self) -> None:
        form = await parse_form_data(
            b"name=+Ada+&age=36&topics=news&topics=tips", "application/x-www-form-urlencoded"
        )
        errors = ErrorCollection()
        name = required_string(form, "name", "Name", maxlength=10, errors=errors)
        age = required_int(form, "age", "Age", maxlength=3, min_value=0, max_value=130, errors=errors)
        topics = multiple_checkboxes(form, "topics", "topics", ["news", "tips"], errors=errors)
        assert (name, age, topics) == ("Ada", 36, ["news", "tips"])
        assert not errors

    async def test_multipart_submission(self) -> None:
        form = await parse_form_data(MULTIPART_BODY, MULTIPART_TYPE)
        errors = ErrorCollection()
        tags = multiple_checkboxes(form, "tags", "tags", ["a"], errors=errors)
        assert tags is None
        assert errors["tags"] == "You provided an illegal value for the tags checkbox"
