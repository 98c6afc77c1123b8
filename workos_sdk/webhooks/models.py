"""Webhook payloads.

Signature verification is not performed here; callers are expected to
verify the ``WorkOS-Signature`` header before parsing.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Union

from pydantic import Field

from ..base.models import WorkOsModel


class Webhook(WorkOsModel):
    """A delivered webhook: ``id``, event name and event-specific ``data``."""

    id: str
    event: str
    data: Dict[str, Any] = Field(default_factory=dict)


def parse_webhook(payload: Union[str, bytes, Mapping[str, Any]]) -> Webhook:
    """Validate a webhook body (raw JSON or an already-decoded mapping).

    Raises:
        pydantic.ValidationError: the payload is not a webhook.
    """
    if isinstance(payload, (str, bytes)):
        return Webhook.model_validate_json(payload)
    return Webhook.model_validate(payload)


__all__ = ["Webhook", "parse_webhook"]
