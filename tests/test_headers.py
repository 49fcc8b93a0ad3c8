from notmodified import Headers


def test_headers_are_case_insensitive():
    headers = Headers({"Content-Type": "text/plain"})

    assert headers["content-type"] == "text/plain"
    assert headers["CONTENT-TYPE"] == "text/plain"
    assert "Content-type" in headers
    assert headers.get("content-TYPE") == "text/plain"


def test_setting_a_header_replaces_it():
    headers = Headers({"Cache-Control": "no-cache"})

    headers["cache-control"] = "max-age=0"

    assert headers["Cache-Control"] == "max-age=0"
    assert len(headers) == 1


def test_multiple_values_are_combined():
    headers = Headers({"Cache-Control": ["private", "max-age=0"]})

    assert headers["cache-control"] == "private, max-age=0"


def test_delete_header():
    headers = Headers({"Content-Type": "text/plain", "ETag": 'W/"abc"'})

    del headers["content-type"]

    assert "Content-Type" not in headers
    assert list(headers) == ["etag"]


def test_contains_non_string():
    assert 1 not in Headers({"1": "one"})


def test_copy_is_independent():
    headers = Headers({"ETag": 'W/"abc"'})

    copied = headers.copy()
    copied["ETag"] = 'W/"xyz"'

    assert headers["ETag"] == 'W/"abc"'
    assert copied == Headers({"etag": 'W/"xyz"'})


def test_equality():
    assert Headers({"ETag": "a"}) == Headers({"etag": "a"})
    assert Headers({"ETag": "a"}) != Headers({"ETag": "b"})
    assert Headers({"ETag": "a"}) != {"etag": "a"}
