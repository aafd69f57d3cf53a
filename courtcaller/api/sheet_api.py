"""Client for the published spreadsheet that feeds the scoreboard."""

import asyncio
from typing import Any

import aiohttp

from ..models.mock_data import MOCK_SHEET_ROWS
from ..utils.logging import log


class SheetFetchError(Exception):
    """The sheet could not be fetched or did not contain a row list"""


class SheetAPI:
    """Handle fetches from the sheet-to-JSON endpoint"""

    def __init__(self, sheet_url: str | None = None, timeout: float = 10.0):
        self.sheet_url: str | None = sheet_url
        self.timeout: float = timeout

    @property
    def is_demo(self) -> bool:
        return not self.sheet_url

    async def fetch_rows(self) -> list[Any]:
        """Fetch the raw sheet rows.

        Raises SheetFetchError for network failures, non-200 responses and
        payloads that are not a JSON array. Individual rows are returned
        untouched; the normalizer decides which ones are usable.
        """
        if not self.sheet_url:
            log("⚠️  No sheet URL configured - using mock rows")
            await asyncio.sleep(0.1)  # Simulate network delay
            return [dict(row) for row in MOCK_SHEET_ROWS]

        try:
            async with aiohttp.ClientSession() as session:
                log(f"🔍 Fetching sheet rows from {self.sheet_url}")
                async with session.get(
                    self.sheet_url,
                    headers={"Cache-Control": "no-cache"},
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                ) as response:
                    log(f"📡 Sheet Response Status: {response.status}")

                    if response.status != 200:
                        error_text = await response.text()
                        log(f"❌ HTTP Error: {error_text[:200]}")
                        raise SheetFetchError(f"HTTP {response.status}: {error_text[:200]}")

                    payload = await response.json(content_type=None)

        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            log(f"❌ Sheet fetch error: {type(e).__name__}: {e}")
            raise SheetFetchError(f"{type(e).__name__}: {e}") from e
        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError both land here
            log(f"❌ Sheet returned malformed JSON: {type(e).__name__}: {e}")
            raise SheetFetchError(f"Malformed JSON: {e}") from e

        if not isinstance(payload, list):
            log(f"❌ Expected a list of rows, got {type(payload).__name__}")
            raise SheetFetchError(f"Expected a list of rows, got {type(payload).__name__}")

        log(f"✅ Fetched {len(payload)} sheet rows")
        return payload
