import httpx
import pytest

from fitness_events_api.app.core.errors import GatewayError
from fitness_events_api.app.services.payment_gateway import RazorpayGateway

URL = "/api/v1/invoice"


@pytest.fixture
def event_id(seed):
    seed.user()
    return seed.event(title="Sunrise Yoga")


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"eventId": "e1", "mobileNumber": "9876543210"},
        {"amount": 49900, "mobileNumber": "9876543210"},
        {"amount": 49900, "eventId": "e1"},
        {"amount": 0, "eventId": "e1", "mobileNumber": "9876543210"},
        {"amount": 49900, "eventId": "", "mobileNumber": "9876543210"},
    ],
)
def test_missing_parameters(client, gateway, body):
    response = client.post(URL, json=body)
    assert response.status_code == 400
    assert response.json() == {"message": "Missing required parameters", "isOk": False}
    assert gateway.calls == []


def test_unknown_user(client, gateway, event_id):
    response = client.post(URL, json={"amount": 49900, "eventId": event_id, "mobileNumber": "9000000000"})
    assert response.status_code == 404
    assert response.json() == {"message": "User not found", "isOk": False}
    assert gateway.calls == []


def test_unknown_event(client, gateway, event_id):
    response = client.post(URL, json={"amount": 49900, "eventId": "missing", "mobileNumber": "9876543210"})
    assert response.status_code == 404
    assert response.json() == {"message": "Event not found", "isOk": False}
    assert gateway.calls == []


def test_invoice_created(client, gateway, seed, event_id):
    response = client.post(
        URL,
        json={"amount": 49900, "eventId": event_id, "mobileNumber": "+91 98765-43210"},
    )
    assert response.status_code == 200
    assert response.json() == {
        "message": "Invoice created successfully",
        "isOk": True,
        "invoiceId": "inv_TEST123",
        "invoiceUrl": "https://rzp.io/i/abc123",
    }

    [payload] = gateway.calls
    assert payload["amount"] == 49900
    assert payload["currency"] == "INR"
    assert payload["description"] == "Registration for Sunrise Yoga"
    assert payload["customer"] == {"name": "Asha Rao", "contact": "9876543210", "email": "asha@example.com"}
    assert payload["notes"]["eventId"] == event_id
    assert payload["customer_details"]["billing_address"]["zipcode"] == "560001"

    [row] = seed.rows("invoices")
    assert row["invoice_id"] == "inv_TEST123"
    assert row["razorpay_invoice_id"] == "inv_TEST123"
    assert row["amount"] == 499.0
    assert row["status"] == "created"
    assert row["event_id"] == event_id
    assert row["invoice_url"] == "https://rzp.io/i/abc123"


def test_customer_without_email(client, gateway, seed):
    seed.user(mobile_number="9123456780", email=None, address=None)
    event_id = seed.event()
    response = client.post(URL, json={"amount": 100, "eventId": event_id, "mobileNumber": 9123456780})
    assert response.status_code == 200
    [payload] = gateway.calls
    assert "email" not in payload["customer"]
    assert payload["customer_details"]["billing_address"]["line1"] == ""


def test_gateway_failure(client, gateway, seed, event_id):
    gateway.error = GatewayError("The amount must be atleast INR 1.00")
    response = client.post(URL, json={"amount": 50, "eventId": event_id, "mobileNumber": "9876543210"})
    assert response.status_code == 500
    assert response.json() == {
        "message": "Failed to create invoice: The amount must be atleast INR 1.00",
        "isOk": False,
    }
    assert seed.rows("invoices") == []


def test_unexpected_gateway_exception(client, gateway, seed, event_id):
    gateway.error = RuntimeError("socket closed")
    response = client.post(URL, json={"amount": 49900, "eventId": event_id, "mobileNumber": "9876543210"})
    assert response.status_code == 500
    assert response.json()["message"] == "Failed to create invoice: socket closed"
    assert seed.rows("invoices") == []


def _gateway(handler) -> RazorpayGateway:
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return RazorpayGateway("rzp_test_key", "secret", base_url="https://razorpay.test/v1/", client=client)


def test_razorpay_gateway_posts_invoice():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["auth"] = request.headers["Authorization"]
        return httpx.Response(200, json={"id": "inv_1", "short_url": "https://rzp.io/i/x"})

    invoice = _gateway(handler).create_invoice({"amount": 100})
    assert invoice["id"] == "inv_1"
    assert seen["url"] == "https://razorpay.test/v1/invoices"
    assert seen["auth"].startswith("Basic ")


def test_razorpay_gateway_error_description():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"error": {"code": "BAD_REQUEST_ERROR", "description": "Invalid contact"}})

    with pytest.raises(GatewayError) as exc:
        _gateway(handler).create_invoice({"amount": 100})
    assert exc.value.message == "Invalid contact"


def test_razorpay_gateway_error_without_body():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(502, text="Bad Gateway")

    with pytest.raises(GatewayError) as exc:
        _gateway(handler).create_invoice({"amount": 100})
    assert exc.value.message == "Razorpay API error: 502"


def test_razorpay_gateway_requires_keys():
    with pytest.raises(GatewayError):
        RazorpayGateway("", "").create_invoice({"amount": 100})


@pytest.mark.parametrize(
    "body",
    [
        {"amount": "abc", "eventId": "e1", "mobileNumber": "9876543210"},
        {"amount": 499.5, "eventId": "e1", "mobileNumber": "9876543210"},
        b"{not json",
    ],
)
def test_unparseable_body_keeps_invoice_envelope(client, gateway, body):
    if isinstance(body, bytes):
        response = client.post(URL, content=body, headers={"Content-Type": "application/json"})
    else:
        response = client.post(URL, json=body)
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid request body", "isOk": False}
    assert gateway.calls == []


def test_other_routes_keep_error_body(client):
    response = client.post("/api/v1/admin/login", content=b"{not json", headers={"Content-Type": "application/json"})
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request body"}
