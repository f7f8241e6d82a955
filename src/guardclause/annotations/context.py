"""Validation context passed to self-validating models and pydantic validators."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ValidationContext:
    """What is being validated, plus an optional service lookup.

    Attributes:
        model: Object under validation.
        services: Type -> instance lookup for rules needing external
            services. None = no services.
    """

    model: object
    services: Mapping[type, object] | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.model is None:
            raise TypeError("model must not be None")

    def get_service[S](self, service_type: type[S]) -> S | None:
        """Registered instance of service_type, or None."""
        if self.services is None:
            return None
        return self.services.get(service_type)  # type: ignore[return-value]
