"""
Extension component base classes and descriptor extraction

Components subclass one of the typed base classes below and override
``get_relationships`` / ``get_property_descriptors``. ``describe`` turns a
component instance into the frozen ExtensionDescriptor consumed by the
documentation writers.
"""

from typing import Iterable, List, Optional, Set
import logging

from ..models.extension import (
    ExtensionDescriptor,
    ExtensionType,
    PropertyDescriptor,
    Relationship,
)
from ..utils.deprecation import get_deprecation_notice

logger = logging.getLogger(__name__)


# ============================================================================
# Exception Classes
# ============================================================================

class UnknownExtensionTypeError(ValueError):
    """Raised when a component's extension type cannot be determined."""
    pass


# ============================================================================
# Component Base Classes
# ============================================================================

class ConfigurableComponent:
    """Base class for every documentable extension component."""

    extension_type: Optional[ExtensionType] = None

    def get_relationships(self) -> Set[Relationship]:
        return set()

    def get_property_descriptors(self) -> List[PropertyDescriptor]:
        return []


class Processor(ConfigurableComponent):
    extension_type = ExtensionType.PROCESSOR


class ControllerService(ConfigurableComponent):
    extension_type = ExtensionType.CONTROLLER_SERVICE


class ReportingTask(ConfigurableComponent):
    extension_type = ExtensionType.REPORTING_TASK


class FlowAnalysisRule(ConfigurableComponent):
    extension_type = ExtensionType.FLOW_ANALYSIS_RULE


class ParameterProvider(ConfigurableComponent):
    extension_type = ExtensionType.PARAMETER_PROVIDER


class FlowRegistryClient(ConfigurableComponent):
    extension_type = ExtensionType.FLOW_REGISTRY_CLIENT


# ============================================================================
# Extraction
# ============================================================================

def qualified_name(component: object) -> str:
    """Return ``module.QualName`` of the component's class."""
    cls = type(component)
    return f"{cls.__module__}.{cls.__qualname__}"


def describe(
    component: ConfigurableComponent,
    extension_type: Optional[ExtensionType] = None
) -> ExtensionDescriptor:
    """Extract an ExtensionDescriptor from a live component instance.

    Args:
        component: Component instance
        extension_type: Explicit type; defaults to the component class's
            ``extension_type``

    Returns:
        Frozen descriptor snapshot

    Raises:
        UnknownExtensionTypeError: If no extension type is declared
    """
    resolved_type = extension_type or getattr(component, "extension_type", None)
    if resolved_type is None:
        raise UnknownExtensionTypeError(
            f"Cannot determine extension type of {qualified_name(component)}. "
            f"Subclass one of the typed component bases or pass extension_type."
        )

    notice = get_deprecation_notice(type(component))
    relationships: Iterable[Relationship] = component.get_relationships() or ()
    properties: Iterable[PropertyDescriptor] = component.get_property_descriptors() or ()

    descriptor = ExtensionDescriptor(
        qualified_name=qualified_name(component),
        extension_type=resolved_type,
        deprecation_notice=notice,
        relationships=frozenset(relationships),
        property_descriptors=tuple(properties),
    )
    logger.debug(
        f"Described {descriptor.qualified_name} ({resolved_type.name}): "
        f"{len(descriptor.relationships)} relationships, "
        f"{len(descriptor.property_descriptors)} properties"
    )
    return descriptor
