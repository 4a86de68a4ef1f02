"""Descriptor models for extension documentation.

Immutable Pydantic schemas for the documentable metadata of extension
components, plus the configuration verification contract.
"""

from .extension import (
    DeprecationNotice,
    ExtensionDescriptor,
    ExtensionType,
    PropertyDependency,
    PropertyDescriptor,
    Relationship,
    ResourceCardinality,
    ResourceDefinition,
    ResourceType,
)
from .verification import (
    ConfigVerificationResult,
    Outcome,
    VerifiableComponent,
    VerificationNotAllowed,
    run_verification,
)

__all__ = [
    # Extension descriptors
    "DeprecationNotice",
    "ExtensionDescriptor",
    "ExtensionType",
    "PropertyDependency",
    "PropertyDescriptor",
    "Relationship",
    "ResourceCardinality",
    "ResourceDefinition",
    "ResourceType",

    # Verification
    "ConfigVerificationResult",
    "Outcome",
    "VerifiableComponent",
    "VerificationNotAllowed",
    "run_verification",
]
