"""Configuration verification contract for extension components.

Verification differs from validation: validation is quick and runs often, and
an invalid component cannot be started. Verification may be expensive (it can
open network connections or create other resources) and is typically run only
when a user asks for it. It is allowed only while the component is fully
disabled, and only after the configuration has passed validation.

The framework does not drive lifecycle stages before verifying, so any
initialization a component needs must happen inside ``verify`` itself.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class VerificationNotAllowed(Exception):
    """Raised when verification is requested outside its preconditions."""
    pass


class Outcome(str, Enum):
    """Result of one verification step."""
    SUCCESSFUL = "SUCCESSFUL"
    FAILED = "FAILED"
    SKIPPED = "SKIPPED"


class ConfigVerificationResult(BaseModel):
    """Outcome of a single completed verification step."""

    model_config = ConfigDict(frozen=True)

    verification_step_name: str = Field(..., description="Name of the verification step")
    outcome: Outcome = Field(..., description="Step outcome")
    explanation: Optional[str] = Field(None, description="Human readable explanation")


class VerifiableComponent(ABC):
    """Component that can verify a prospective configuration before activation."""

    @abstractmethod
    def verify(
        self,
        context: Mapping[str, Any],
        verification_logger: logging.Logger,
        variables: Dict[str, str],
    ) -> List[ConfigVerificationResult]:
        """Verify the configuration held by ``context``.

        Args:
            context: Configuration context with the property values to verify
            verification_logger: Logger to use during verification instead of
                the component's regular logger
            variables: Key/value pairs for resolving variables referenced in
                property values

        Returns:
            One result per verification step that was completed
        """


def run_verification(
    component: VerifiableComponent,
    context: Mapping[str, Any],
    variables: Optional[Dict[str, str]] = None,
    *,
    valid: bool,
    enabled: bool,
) -> List[ConfigVerificationResult]:
    """Verify a component configuration, enforcing the verification preconditions.

    Args:
        component: Component to verify
        context: Configuration context passed through to the component
        variables: Variable bindings (defaults to empty)
        valid: Whether the configuration passed static validation
        enabled: Whether the component is currently active

    Returns:
        Results in the order reported by the component

    Raises:
        VerificationNotAllowed: If the configuration is invalid or the
            component is active
    """
    name = type(component).__name__
    if not valid:
        raise VerificationNotAllowed(
            f"Cannot verify {name}: configuration has not passed validation"
        )
    if enabled:
        raise VerificationNotAllowed(
            f"Cannot verify {name}: component must be disabled before verification"
        )

    verification_logger = logging.getLogger(f"{__name__}.{name}")
    results = list(component.verify(context, verification_logger, dict(variables or {})))

    for result in results:
        if result.outcome == Outcome.FAILED:
            logger.warning(
                f"{name} verification step '{result.verification_step_name}' failed: "
                f"{result.explanation}"
            )
        else:
            logger.debug(
                f"{name} verification step '{result.verification_step_name}': "
                f"{result.outcome.value}"
            )

    return results
