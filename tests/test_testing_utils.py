"""
Tests for safefetch.testing module.
"""
import pytest

from safefetch import ERROR_STATUS, create_safe_fetch, create_safe_fetch_sync
from safefetch.testing import MockTransport


def test_mock_transport_responses():
    """Test MockTransport queues and returns responses."""
    transport = MockTransport()
    first = transport.add_response("Response 1")
    second = transport.add_response("Response 2", status_code=202)

    assert transport.fetch_sync("https://example.com") is first
    assert transport.fetch_sync("https://example.com") is second

    # Empty queue default
    assert transport.fetch_sync("https://example.com").status_code == 200

def test_mock_transport_records_requests():
    transport = MockTransport()
    options = {"method": "PUT"}

    transport.fetch_sync("https://example.com/a", options)

    assert transport.requests == [("https://example.com/a", options)]

def test_mock_transport_errors():
    transport = MockTransport()
    transport.add_error(ValueError("Mock Error"))

    with pytest.raises(ValueError, match="Mock Error"):
        transport.fetch_sync("https://example.com")

@pytest.mark.asyncio
async def test_mock_transport_with_safe_fetch():
    transport = MockTransport()
    expected = transport.add_response("ok")
    transport.add_error(TimeoutError("timed out"))

    safe = create_safe_fetch(transport.fetch)

    assert await safe("https://example.com") is expected

    response = await safe("https://example.com")
    assert response.status_code == ERROR_STATUS
    assert response.reason_phrase == "timed out"
    assert len(transport.requests) == 2

def test_mock_transport_with_safe_fetch_sync():
    transport = MockTransport()
    transport.add_error(OSError("unreachable"))

    response = create_safe_fetch_sync(transport.fetch_sync)("https://example.com")
    assert response.reason_phrase == "unreachable"
