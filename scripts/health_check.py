"""
Health check for a running Icon Search Service (MCP over HTTP/SSE)

Opens the MCP event stream at /sse and reports whether the server answers.
Only the response status is read; the stream itself never ends.
"""
import asyncio
import os
import sys

import httpx

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from icon_search.config.settings import settings
from icon_search.utils.logger import get_logger

logger = get_logger(__name__)


async def check_server_health(url: str, timeout: float = 10.0) -> bool:
    """
    Open `url` as a stream; any status below 500 counts as responding.
    """
    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            async with client.stream("GET", url) as response:
                status_code = response.status_code
    except httpx.HTTPError as e:
        logger.error(f"Error connecting to server: {e}")
        return False

    logger.info(f"Server responded with status: {status_code}")
    return 200 <= status_code < 500


async def main() -> int:
    url = settings.mcp_sse_url
    print(f"Checking server health at {url}...")

    if await check_server_health(url):
        print("✅ Server is running and responding to requests")
        return 0

    print("❌ Server is not responding properly")
    return 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
