from .nyt import DailyManifest, daily_manifest_url, fetch_daily_manifest
from .message import format_trace_line, format_message, choose_robot_line
from .webhook import post_to_webhooks

__all__ = [
    "DailyManifest", "daily_manifest_url", "fetch_daily_manifest",
    "format_trace_line", "format_message", "choose_robot_line",
    "post_to_webhooks",
]
