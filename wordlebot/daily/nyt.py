"""
Daily puzzle manifest from the NYT Wordle service.

The service answers GET /svc/wordle/v2/YYYY-MM-DD.json with a small JSON
object; we keep the fields needed to solve and announce the puzzle.
"""

from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Optional

import requests

log = logging.getLogger(__name__)

MANIFEST_URL = "https://www.nytimes.com/svc/wordle/v2/{day:%Y-%m-%d}.json"


@dataclass(frozen=True)
class DailyManifest:
    id: int
    solution: str
    days_since_launch: int
    editor: Optional[str] = None

    @classmethod
    def from_json(cls, data: dict) -> "DailyManifest":
        try:
            return cls(
                id=int(data["id"]),
                solution=str(data["solution"]).strip().lower(),
                days_since_launch=int(data["days_since_launch"]),
                editor=data.get("editor"),
            )
        except (KeyError, TypeError) as e:
            raise ValueError(f"malformed daily manifest: {data!r}") from e


def daily_manifest_url(day: dt.date | None = None) -> str:
    """URL of the manifest for `day` (today, local time, by default)."""
    return MANIFEST_URL.format(day=day or dt.date.today())


def fetch_daily_manifest(day: dt.date | None = None, *, session=None,
                         timeout: float = 30) -> DailyManifest:
    """
    Download and parse the manifest for `day`.

    `session` may be any object with a requests-style get(); the module-level
    `requests` API is used when omitted.
    """
    url = daily_manifest_url(day)
    log.info("fetching daily manifest %s", url)
    r = (session or requests).get(url, timeout=timeout)
    r.raise_for_status()
    return DailyManifest.from_json(r.json())
