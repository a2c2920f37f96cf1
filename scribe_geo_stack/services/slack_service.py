# -*- coding: utf-8 -*-
"""
Slack Service
=============
Posts run summaries and failure alerts for the GEO pipeline to a Slack
incoming webhook. Disabled when no webhook URL is configured.
"""

import logging
from typing import Any, Dict, List

import requests

from models.content import RunStats

logger = logging.getLogger("geo.slack")


class SlackService:
    """Slack webhook notifications for the GEO content pipeline."""

    def __init__(self, webhook_url: str):
        self.webhook_url = webhook_url

    @property
    def enabled(self) -> bool:
        return bool(self.webhook_url)

    # ================================================================
    # Notifications
    # ================================================================

    def send_status(self, message: str, level: str = "info") -> bool:
        """Send a simple status message."""
        emoji = {"info": "ℹ️", "success": "✅", "warning": "⚠️", "error": "❌"}.get(
            level, "ℹ️"
        )
        payload = {"text": f"{emoji} *GEO Pipeline:* {message}"}
        return self._send(payload)

    def send_run_summary(self, stats: RunStats, page_count: int) -> bool:
        """Send the counters of a finished batch run."""
        last_run = stats.last_run.isoformat() if stats.last_run else "n/a"
        blocks: List[Dict[str, Any]] = [
            {
                "type": "header",
                "text": {"type": "plain_text", "text": "🤖 GEO pages generated"},
            },
            {
                "type": "section",
                "fields": [
                    {"type": "mrkdwn", "text": f"*Pages:* {page_count}"},
                    {
                        "type": "mrkdwn",
                        "text": f"*Questions:* {stats.questions_processed}",
                    },
                    {"type": "mrkdwn", "text": f"*Citations:* {stats.citations_added}"},
                    {"type": "mrkdwn", "text": f"*Run:* {last_run}"},
                ],
            },
        ]
        return self._send({"blocks": blocks})

    def send_error(self, step: str, error: str) -> bool:
        """Send pipeline error alert."""
        blocks = [
            {
                "type": "header",
                "text": {"type": "plain_text", "text": "🔴 GEO Pipeline Error"},
            },
            {
                "type": "section",
                "fields": [
                    {"type": "mrkdwn", "text": f"*Step:* {step}"},
                    {"type": "mrkdwn", "text": f"*Error:*\n```{error[:500]}```"},
                ],
            },
        ]
        return self._send({"blocks": blocks})

    # ================================================================
    # Internal
    # ================================================================

    def _send(self, payload: Dict[str, Any]) -> bool:
        """Send payload to Slack webhook."""
        if not self.enabled:
            logger.debug("Slack webhook not configured — skipping message")
            return False
        try:
            resp = requests.post(
                self.webhook_url,
                json=payload,
                timeout=15,
            )
            if resp.status_code == 200:
                logger.info("Slack message sent")
                return True
            logger.error("Slack send failed: %d %s", resp.status_code, resp.text)
            return False
        except requests.exceptions.RequestException as e:
            logger.error("Slack send error: %s", e)
            return False
