"""Paginated affiliate listing model."""

from typing import Any

from pydantic import BaseModel

from xaffiliates.models.profile import UserProfile


class AffiliatePage(BaseModel):
    """One page of the affiliates listing plus its continuation token."""

    data: list[UserProfile] = []
    next_token: str | None = None

    model_config = {"frozen": True}

    @classmethod
    def from_response(cls, payload: dict[str, Any]) -> "AffiliatePage":
        """
        Build a page from the raw API envelope.

        Args:
            payload: Decoded ``{"data": [...], "meta": {...}}`` body

        Returns:
            AffiliatePage with an empty ``data`` list when the key is missing
        """
        meta = payload.get("meta") or {}
        return cls(
            data=payload.get("data") or [],
            next_token=meta.get("next_token") or None,
        )
