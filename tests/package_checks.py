from __future__ import annotations

import asyncio
import logging
import sys

import recurl

logger: logging.Logger = logging.getLogger(__name__)

# Use httpbin.org for real HTTP testing
HTTPBIN_URL = "https://httpbin.org"


def check_request() -> None:
    logger.info("Checking request...")
    response = recurl.request(f"{HTTPBIN_URL}/get")
    assert response.status_code == 200


def check_request_async() -> None:
    logger.info("Checking request_async...")
    response = asyncio.run(
        recurl.request_async(f"{HTTPBIN_URL}/post", method="POST", body={"check": True})
    )
    assert response.status_code == 200
    assert response.body["json"] == {"check": True}


def check_create_instance() -> None:
    logger.info("Checking create_instance...")
    api = recurl.create_instance(base_url=HTTPBIN_URL)
    response = asyncio.run(api("/get"))
    assert response.status_code == 200


def main() -> None:
    r"""Run all package checks to validate installation and
    functionality."""
    try:
        check_request()
        check_request_async()
        check_create_instance()

        logger.info("✅ All package checks passed successfully!")
    except Exception:
        logger.exception("❌ Package check failed")
        sys.exit(1)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
