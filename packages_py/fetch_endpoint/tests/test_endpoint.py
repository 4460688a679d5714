"""
Tests for Endpoint.
"""
import dataclasses

import pytest
from fetch_endpoint import Endpoint, FileUpload, HTTPHeader, ParameterEncoding, resolve
from fetch_endpoint.config import DEFAULT_MULTIPART_BOUNDARY, DEFAULT_TIMEOUT

BASE_URL = "https://api.test/v1"


def test_endpoint_defaults():
    endpoint = Endpoint("GET", "/items")

    assert endpoint.method == "GET"
    assert endpoint.path == "/items"
    assert endpoint.headers == ()
    assert dict(endpoint.parameters) == {}
    assert endpoint.files == ()
    assert endpoint.body_encoder is None
    assert endpoint.parameter_encoder is None
    assert endpoint.parameter_encoding == ParameterEncoding.JSON
    assert endpoint.multipart_boundary == DEFAULT_MULTIPART_BOUNDARY == "3n6P01Nt"
    assert endpoint.timeout == DEFAULT_TIMEOUT == 60.0


def test_method_and_path_are_fixed():
    endpoint = Endpoint("POST", "/items")

    with pytest.raises(dataclasses.FrozenInstanceError):
        endpoint.method = "PUT"
    with pytest.raises(dataclasses.FrozenInstanceError):
        endpoint.path = "/other"


def test_parameters_are_read_only_copies():
    params = {"a": 1}
    endpoint = Endpoint("POST", "/items", parameters=params)

    params["b"] = 2
    assert dict(endpoint.parameters) == {"a": 1}

    with pytest.raises(TypeError):
        endpoint.parameters["c"] = 3


def test_headers_accept_mapping_or_header_values():
    from_mapping = Endpoint("GET", "/", headers={"Accept": "application/json"})
    from_values = Endpoint("GET", "/", headers=[HTTPHeader.accept("application/json")])

    assert from_mapping.headers == from_values.headers == (HTTPHeader("Accept", "application/json"),)


def test_with_operations_return_new_endpoint():
    original = Endpoint("POST", "/items", parameters={"a": 1})
    upload = FileUpload(data=b"x", filename="x.txt")

    derived = (
        original
        .with_headers({"X-Trace": "1"})
        .with_parameters({"b": 2})
        .with_files([("doc", upload)])
        .with_parameter_encoding(ParameterEncoding.URL)
        .with_multipart_boundary("other")
        .with_timeout(5.0)
    )

    assert derived is not original
    assert derived.headers == (HTTPHeader("X-Trace", "1"),)
    assert dict(derived.parameters) == {"b": 2}
    assert derived.files == (("doc", upload),)
    assert derived.parameter_encoding == ParameterEncoding.URL
    assert derived.multipart_boundary == "other"
    assert derived.timeout == 5.0

    # Original untouched
    assert original.headers == ()
    assert dict(original.parameters) == {"a": 1}
    assert original.files == ()
    assert original.parameter_encoding == ParameterEncoding.JSON
    assert original.multipart_boundary == "3n6P01Nt"
    assert original.timeout == 60.0


def test_with_headers_replaces_explicit_headers():
    endpoint = Endpoint("GET", "/", headers={"A": "1", "B": "2"})

    assert endpoint.with_headers({"C": "3"}).headers == (HTTPHeader("C", "3"),)


def test_with_encoders():
    def body() -> bytes:
        return b"body"

    def params(parameters) -> bytes:
        return b"params"

    endpoint = Endpoint("POST", "/").with_body(body).with_parameter_encoder(params)

    assert endpoint.body_encoder is body
    assert endpoint.parameter_encoder is params


def test_original_resolves_identically_after_copy():
    original = Endpoint("POST", "/items", parameters={"a": 1})
    before = resolve(original, BASE_URL)

    original.with_parameters({"b": 2}).with_headers({"Content-Type": "text/plain"})

    assert resolve(original, BASE_URL) == before


def test_parameter_encoding_accepts_raw_value():
    endpoint = Endpoint("POST", "/", parameter_encoding="application/x-www-form-urlencoded")

    assert endpoint.parameter_encoding is ParameterEncoding.URL


def test_invalid_endpoint_values():
    with pytest.raises(ValueError, match="multipart_boundary"):
        Endpoint("POST", "/", multipart_boundary="")
    with pytest.raises(ValueError, match="timeout"):
        Endpoint("POST", "/", timeout=0)
    with pytest.raises(ValueError, match="timeout"):
        Endpoint("GET", "/").with_timeout(-1)


def test_endpoint_is_not_hashable():
    with pytest.raises(TypeError):
        hash(Endpoint("GET", "/items"))
    with pytest.raises(TypeError):
        hash(FileUpload(data=b"x", filename="x.txt"))


def test_nested_parameters_are_copied():
    tags = ["a"]
    meta = {"level": 1}
    endpoint = Endpoint("POST", "/items", parameters={"tags": tags, "meta": meta})
    before = resolve(endpoint, BASE_URL)

    tags.append("b")
    meta["level"] = 2

    assert endpoint.parameters["tags"] == ["a"]
    assert endpoint.parameters["meta"] == {"level": 1}
    assert resolve(endpoint, BASE_URL) == before


def test_file_data_is_copied():
    extra = {"caption": "first"}
    upload = FileUpload(data=b"x", filename="x.txt", file_data=extra)

    extra["caption"] = "changed"

    assert dict(upload.file_data) == {"caption": "first"}
    with pytest.raises(TypeError):
        upload.file_data["caption"] = "changed"
