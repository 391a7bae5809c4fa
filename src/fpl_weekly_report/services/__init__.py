"""Service layer for delivering reports to external endpoints."""

from . import telegram
from .telegram import DeliveryError, TelegramNotifier

__all__ = [
    "DeliveryError",
    "TelegramNotifier",
    "telegram",
]
