"""
Webhook delivery.

Posts {"content": <message>} to each configured URL. A failing URL is
logged and skipped; the caller only learns how many sends succeeded.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable

import requests

log = logging.getLogger(__name__)


def post_to_webhooks(urls: Iterable[str], content: str | Callable[[], str], *,
                     session=None, timeout: float = 30) -> int:
    """
    Send `content` to every non-blank URL and return the number delivered.

    `content` may be a callable, evaluated once per URL, so each webhook
    can get its own greeting.
    """
    http = session or requests
    sent = 0
    for url in (u.strip() for u in urls):
        if not url:
            continue
        body = content() if callable(content) else content
        try:
            r = http.post(url, json={"content": body}, timeout=timeout)
            r.raise_for_status()
        except requests.RequestException as e:
            log.warning("failed to send to %s: %s", url, e)
            continue
        sent += 1
    return sent
