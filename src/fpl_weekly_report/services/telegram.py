"""Deliver finished reports through the Telegram Bot API."""

from __future__ import annotations

import logging

import requests  # type: ignore[import-untyped]

_logger = logging.getLogger("fpl_weekly_report.services.telegram")

_API_URL = "https://api.telegram.org/bot{token}/sendMessage"


class DeliveryError(RuntimeError):
    """Raised when Telegram rejects or cannot receive a message."""


class TelegramNotifier:
    """Send plain Markdown messages to a single chat.

    Delivery is attempted once; failures are raised to the caller.
    """

    def __init__(
        self,
        token: str | None,
        chat_id: str | None,
        *,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self._token = token
        self._chat_id = chat_id
        self._timeout = timeout
        self._session = session or requests.Session()

    @property
    def configured(self) -> bool:
        return bool(self._token and self._chat_id)

    def send(self, text: str) -> bool:
        """Post ``text`` to the chat. Returns ``False`` when not configured."""

        if not self.configured:
            _logger.warning("Missing Telegram config, skipping send.")
            return False

        payload = {
            "chat_id": self._chat_id,
            "text": text,
            "parse_mode": "Markdown",
        }
        try:
            response = self._session.post(
                _API_URL.format(token=self._token),
                json=payload,
                timeout=self._timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            _logger.error("Telegram send failed: %s", exc)
            raise DeliveryError(f"Telegram send failed: {exc}") from exc

        _logger.info("Report delivered to chat %s", self._chat_id)
        return True


__all__ = ["DeliveryError", "TelegramNotifier"]
