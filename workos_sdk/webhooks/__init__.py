"""Webhook parsing."""

from .models import Webhook, parse_webhook

__all__ = ["Webhook", "parse_webhook"]
