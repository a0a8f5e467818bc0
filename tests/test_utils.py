from datetime import datetime

import httpx
import pytest

from fitness_events_api.app.core.categories import EVENT_CATEGORIES, find_category
from fitness_events_api.app.services.review_service import compute_average_rating
from fitness_events_api.app.utils.dates import format_long_date
from fitness_events_api.app.utils.phone import extract_last_10_digits
from fitness_events_api.app.utils.referral import extract_referral_code, format_referral_code
from fitness_events_api.app.utils.url_shortener import TINYURL_API, shorten_link


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("+91 98765-43210", "9876543210"),
        ("9876543210", "9876543210"),
        ("(0) 98765 43210", "9876543210"),
        ("123", "123"),
        ("", ""),
    ],
)
def test_extract_last_10_digits(raw, expected):
    assert extract_last_10_digits(raw) == expected


def test_extract_referral_code():
    assert extract_referral_code("ABCDE - John Doe") == "ABCDE"
    assert extract_referral_code("ABCDE") == "ABCDE"
    assert extract_referral_code("") is None
    assert extract_referral_code(None) is None


def test_format_referral_code():
    assert format_referral_code("xyzab", "Kapil Bamotriya") == "xyzab - Kapil Bamotriya"


def test_average_rating_ignores_missing_and_non_positive():
    assert compute_average_rating([5, 0, 4, -1]) == 4.5
    assert compute_average_rating([None, 3]) == 3


def test_average_rating_empty_is_zero():
    assert compute_average_rating([]) == 0
    assert compute_average_rating([0, None, -2]) == 0


def test_format_long_date():
    assert format_long_date(datetime(2026, 1, 5, 18, 30)) == "Monday, January 5, 2026"
    assert format_long_date(datetime(2030, 12, 31)) == "Tuesday, December 31, 2030"


def test_find_category():
    yoga = find_category("cat_yoga")
    assert yoga.label == "Yoga"
    assert yoga.media_link.endswith("/yoga.jpg")
    assert find_category("cat_unknown") is None
    assert len({c.value for c in EVENT_CATEGORIES}) == len(EVENT_CATEGORIES)


def test_shorten_link_returns_tinyurl():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["query"] = request.url.params["url"]
        return httpx.Response(200, text="https://tinyurl.com/2p8abcd\n")

    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        short = shorten_link("https://meet.example.com/j/123?pwd=a&b=c", client=client)

    assert short == "https://tinyurl.com/2p8abcd"
    assert seen["url"].startswith(TINYURL_API)
    assert seen["query"] == "https://meet.example.com/j/123?pwd=a&b=c"


def test_shorten_link_falls_back_on_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, text="unavailable")

    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        assert shorten_link("https://example.com/long", client=client) == "https://example.com/long"


def test_shorten_link_falls_back_on_network_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("boom", request=request)

    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        assert shorten_link("https://example.com/long", client=client) == "https://example.com/long"
