"""
Demo: Inspecting failures instead of catching them
Run: python examples/demo_safe_fetch.py
"""
import asyncio
from safefetch import ERROR_STATUS, safe_fetch


async def main():
    for url in ["https://example.com", "https://does-not-exist.invalid"]:
        response = await safe_fetch(url, {"timeout": 10})

        if response.status_code == ERROR_STATUS:
            print(f"{url}: failed - {response.reason_phrase}")
            print(f"  details: {response.json().get('name')}")
        else:
            print(f"{url}: {response.status_code} ({len(response.content)} bytes)")

    # Cancelling a request in flight
    signal = asyncio.Event()
    asyncio.get_running_loop().call_later(0.05, signal.set)
    response = await safe_fetch("https://httpbin.org/delay/5", {"signal": signal})
    print(f"aborted: {response.status_code} {response.reason_phrase}")

if __name__ == "__main__":
    asyncio.run(main())
