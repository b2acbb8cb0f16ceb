"""
Backend: remote cart service contract.

    from cartflow import backend as B

    backend = B.MemoryBackend()
    backend.seed([{"Id": "A", "Name": "Mug", "MSRP__c": "10", "Quantity__c": 2}])
    records = await backend.fetch_products()
"""

from __future__ import annotations

from cartflow.backend._types import Record, BackendError, CartBackend
from cartflow.backend._codec import BackendModel
from cartflow.backend._memory import Call, MemoryBackend

__all__ = (
    "Record",
    "BackendError",
    "CartBackend",
    "BackendModel",
    "Call",
    "MemoryBackend",
)
