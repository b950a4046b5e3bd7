import pytest

from zipproxy.errors import MethodNotAllowed
from zipproxy.utils.cors import evaluate, resolve_origin

DOMAIN = "https://zips.example.org"


def test_resolve_origin_matches_exactly():
    assert resolve_origin(DOMAIN, DOMAIN) == DOMAIN
    assert resolve_origin("https://ZIPS.example.org", DOMAIN) is None
    assert resolve_origin(None, DOMAIN) is None


@pytest.mark.parametrize("origin", [DOMAIN, "https://other.example.com", None])
def test_options_headers_ignore_caller_origin(origin):
    decision = evaluate("OPTIONS", origin, DOMAIN)
    assert decision.headers["Access-Control-Allow-Origin"] == DOMAIN
    assert decision.allowed is (origin == DOMAIN)


def test_head_uses_preflight_headers():
    assert evaluate("HEAD", None, DOMAIN).headers == evaluate("OPTIONS", DOMAIN, DOMAIN).headers


def test_get_with_matching_origin():
    decision = evaluate("GET", DOMAIN, DOMAIN)
    assert decision.allowed
    assert decision.headers == {"Access-Control-Allow-Origin": DOMAIN, "Vary": "Origin"}


def test_get_without_origin_has_no_headers():
    decision = evaluate("get", None, DOMAIN)
    assert not decision.allowed
    assert decision.headers == {}


@pytest.mark.parametrize("method", ["POST", "PUT", "PATCH", "DELETE"])
def test_other_methods_rejected(method):
    with pytest.raises(MethodNotAllowed) as excinfo:
        evaluate(method, DOMAIN, DOMAIN)
    assert excinfo.value.method == method
