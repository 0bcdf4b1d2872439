"""Greedy debt netting over exact decimal balances."""

from __future__ import annotations

from .config import BaseConfig, DevConfig
from .errors import EmptyQueueError, InvariantViolation, NettingError, ValidationError
from .models import NetBalance, Payment, make_balances
from .services.netting import NettingEngine, settle, settle_net_balances

__all__ = [
    "BaseConfig",
    "DevConfig",
    "EmptyQueueError",
    "InvariantViolation",
    "NetBalance",
    "NettingEngine",
    "NettingError",
    "Payment",
    "ValidationError",
    "make_balances",
    "settle",
    "settle_net_balances",
]
