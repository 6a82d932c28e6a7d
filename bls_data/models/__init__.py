"""Data models."""

from .series import ApiTier, BlsSeries, RawObservation, TierLimits

__all__ = ["ApiTier", "BlsSeries", "RawObservation", "TierLimits"]
