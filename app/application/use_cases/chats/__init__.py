"""Use cases touching chat activity."""

from .record_activity import record_chat_activity, record_fundraiser_activity

__all__ = ["record_chat_activity", "record_fundraiser_activity"]
