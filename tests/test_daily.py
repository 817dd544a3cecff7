import datetime as dt
import random
import pytest
import requests
from wordlebot.daily import (
    DailyManifest, choose_robot_line, daily_manifest_url, fetch_daily_manifest,
    format_message, format_trace_line, post_to_webhooks,
)
from wordlebot.engine import Feedback, GuessRecord, evaluate


class _Response:
    def __init__(self, payload=None, status=200):
        self.payload = payload
        self.status = status

    def raise_for_status(self):
        if self.status >= 400:
            raise requests.HTTPError(f"{self.status} error")

    def json(self):
        return self.payload


class _Session:
    """Records requests instead of sending them."""

    def __init__(self, payload=None, fail=()):
        self.payload = payload
        self.fail = set(fail)
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append(("GET", url, None))
        return _Response(self.payload)

    def post(self, url, json=None, timeout=None):
        self.calls.append(("POST", url, json))
        if url in self.fail:
            raise requests.ConnectionError("boom")
        return _Response()


def test_daily_manifest_url():
    assert daily_manifest_url(dt.date(2025, 1, 2)) == \
        "https://www.nytimes.com/svc/wordle/v2/2025-01-02.json"


def test_fetch_daily_manifest():
    s = _Session({"id": 1234, "solution": "Crane", "days_since_launch": 1300, "editor": "T"})
    m = fetch_daily_manifest(dt.date(2025, 1, 2), session=s)
    assert m == DailyManifest(1234, "crane", 1300, "T")
    assert s.calls[0][1].endswith("2025-01-02.json")


def test_fetch_daily_manifest_malformed():
    with pytest.raises(ValueError):
        fetch_daily_manifest(dt.date(2025, 1, 2), session=_Session({"id": 1}))


def test_format_message():
    trace = [
        GuessRecord("slate", evaluate("slate", "crane"), 100),
        GuessRecord("crane", Feedback.correct(5), 3),
    ]
    assert format_trace_line(trace[0]) == "⬛⬛🟩⬛🟩 ||`slate` (1 in 100)||"
    msg = format_message("beep boop", 1300, trace)
    assert msg == (
        "beep boop\n\n**Wordle 1300**\n"
        "⬛⬛🟩⬛🟩 ||`slate` (1 in 100)||\n"
        "🟩🟩🟩🟩🟩 ||`crane` (1 in 3)||\n"
    )


def test_choose_robot_line():
    assert choose_robot_line([], random.Random(0)) == ""
    assert choose_robot_line(["a", "b"], random.Random(0)) in {"a", "b"}


def test_post_to_webhooks_counts_successes():
    s = _Session(fail={"http://bad"})
    sent = post_to_webhooks([" http://a ", "", "http://bad", "http://b\n"], "hi", session=s)
    assert sent == 2
    assert [c[1] for c in s.calls] == ["http://a", "http://bad", "http://b"]
    assert s.calls[0][2] == {"content": "hi"}


def test_post_to_webhooks_callable_content():
    s = _Session()
    lines = iter(["one", "two"])
    post_to_webhooks(["http://a", "http://b"], lambda: next(lines), session=s)
    assert [c[2]["content"] for c in s.calls] == ["one", "two"]
