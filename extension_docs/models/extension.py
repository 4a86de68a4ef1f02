"""Extension descriptor models for documentation generation.

This module provides immutable Pydantic schemas describing the documentable
metadata of a pluggable extension component: its name, type, deprecation
status, relationships and property descriptors.

Architecture:
    - Descriptors are frozen snapshots; they are hashable and never mutated
    - Collections that are unordered at extraction time are frozensets
    - Property descriptors keep declaration order (tuple)
    - Ordering for output is imposed by the documentation writer, not here
"""

from enum import Enum
from typing import FrozenSet, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class ExtensionType(str, Enum):
    """Category of extension component."""
    PROCESSOR = "PROCESSOR"
    CONTROLLER_SERVICE = "CONTROLLER_SERVICE"
    REPORTING_TASK = "REPORTING_TASK"
    FLOW_ANALYSIS_RULE = "FLOW_ANALYSIS_RULE"
    PARAMETER_PROVIDER = "PARAMETER_PROVIDER"
    FLOW_REGISTRY_CLIENT = "FLOW_REGISTRY_CLIENT"


class ResourceCardinality(str, Enum):
    """Number of resources a property value may reference."""
    SINGLE = "SINGLE"
    MULTIPLE = "MULTIPLE"


class ResourceType(str, Enum):
    """Kinds of external resource a property value may identify."""
    FILE = "FILE"
    DIRECTORY = "DIRECTORY"
    TEXT = "TEXT"
    URL = "URL"


class Relationship(BaseModel):
    """Named outcome an extension can route output to.

    Attributes:
        name: Relationship name, unique within one extension
        description: Human readable description
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Relationship name")
    description: str = Field("", description="Relationship description")


class DeprecationNotice(BaseModel):
    """Deprecation details for an extension.

    Attributes:
        reason: Optional reason; None means no reason was supplied, which is
            distinct from an empty string
        alternatives: Suggested replacement extensions, in author order
    """

    model_config = ConfigDict(frozen=True)

    reason: Optional[str] = Field(None, description="Reason for deprecation")
    alternatives: Tuple[str, ...] = Field(
        default=(),
        description="Alternative extensions in author-supplied order"
    )


class PropertyDependency(BaseModel):
    """Declares that a property is relevant only when another property is set.

    An empty ``dependent_values`` set means the dependency is satisfied by the
    referenced property having any value at all.
    """

    model_config = ConfigDict(frozen=True)

    property_name: str = Field(..., description="Name of the referenced property")
    dependent_values: FrozenSet[str] = Field(
        default=frozenset(),
        description="Values of the referenced property that satisfy the dependency"
    )


class ResourceDefinition(BaseModel):
    """External resource requirement of a property."""

    model_config = ConfigDict(frozen=True)

    cardinality: ResourceCardinality = Field(..., description="Single or multiple resources")
    resource_types: FrozenSet[ResourceType] = Field(
        default=frozenset(),
        description="Acceptable resource types"
    )


class PropertyDescriptor(BaseModel):
    """Configuration property of an extension.

    Attributes:
        name: Property name, unique within one extension
        dependencies: Properties this one depends on
        resource_definition: Present only if the property identifies an
            external resource
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Property name")
    dependencies: FrozenSet[PropertyDependency] = Field(
        default=frozenset(),
        description="Dependencies on other properties"
    )
    resource_definition: Optional[ResourceDefinition] = Field(
        None,
        description="External resource definition"
    )

    def depends_on(
        self,
        prop: Union["PropertyDescriptor", str],
        *dependent_values: str
    ) -> "PropertyDescriptor":
        """Return a copy of this descriptor with a dependency added.

        Each call adds its own dependency. Declaring a dependency on the same
        property twice keeps both entries, and every one of them must hold;
        the value sets are not merged.

        Args:
            prop: Referenced property descriptor or its name
            *dependent_values: Values that satisfy the dependency; none means
                the referenced property only has to be set

        Returns:
            New PropertyDescriptor

        Example:
            >>> first = PropertyDescriptor(name="First")
            >>> second = PropertyDescriptor(name="Second").depends_on(first, "a", "b")
            >>> sorted(next(iter(second.dependencies)).dependent_values)
            ['a', 'b']
        """
        property_name = prop.name if isinstance(prop, PropertyDescriptor) else prop
        dependency = PropertyDependency(
            property_name=property_name,
            dependent_values=frozenset(dependent_values),
        )
        return self.model_copy(update={"dependencies": self.dependencies | {dependency}})

    def identifies_external_resource(
        self,
        cardinality: ResourceCardinality,
        *resource_types: ResourceType
    ) -> "PropertyDescriptor":
        """Return a copy of this descriptor identifying an external resource.

        Raises:
            ValueError: If no resource type is given
        """
        if not resource_types:
            raise ValueError(
                f"Property '{self.name}' must accept at least one resource type"
            )
        definition = ResourceDefinition(
            cardinality=cardinality,
            resource_types=frozenset(resource_types),
        )
        return self.model_copy(update={"resource_definition": definition})


class ExtensionDescriptor(BaseModel):
    """Point-in-time snapshot of an extension's documentable metadata.

    Constructed once per documentation request and discarded afterwards.
    The writer relies on every accessor returning a stable value, which the
    frozen model guarantees.
    """

    model_config = ConfigDict(frozen=True)

    qualified_name: str = Field(..., description="Fully-qualified implementation class name")
    extension_type: ExtensionType = Field(..., description="Extension category")
    deprecation_notice: Optional[DeprecationNotice] = Field(
        None,
        description="Present only if the extension is deprecated"
    )
    relationships: FrozenSet[Relationship] = Field(
        default=frozenset(),
        description="Relationships (unordered)"
    )
    property_descriptors: Tuple[PropertyDescriptor, ...] = Field(
        default=(),
        description="Property descriptors in declaration order"
    )

    @property
    def deprecated(self) -> bool:
        """Whether the extension carries a deprecation notice."""
        return self.deprecation_notice is not None
