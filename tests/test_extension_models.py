"""Tests for extension descriptor models."""

import pytest
from pydantic import ValidationError

from extension_docs.models import (
    DeprecationNotice,
    ExtensionDescriptor,
    ExtensionType,
    PropertyDependency,
    PropertyDescriptor,
    Relationship,
    ResourceCardinality,
    ResourceType,
)


class TestPropertyDescriptor:
    """Test PropertyDescriptor copy helpers."""

    def test_depends_on_with_values(self):
        """Test conditional dependency records values."""
        first = PropertyDescriptor(name="First")
        second = PropertyDescriptor(name="Second").depends_on(first, "x", "z", "y")

        assert second.dependencies == frozenset({
            PropertyDependency(property_name="First", dependent_values=frozenset({"x", "y", "z"}))
        })
        # Original untouched
        assert first.dependencies == frozenset()

    def test_depends_on_without_values(self):
        """Test unconditional dependency has no values."""
        prop = PropertyDescriptor(name="Second").depends_on("First")

        dependency = next(iter(prop.dependencies))
        assert dependency.property_name == "First"
        assert dependency.dependent_values == frozenset()

    def test_depends_on_same_property_kept_separate(self):
        """Test repeated dependency on one property keeps separate entries."""
        prop = (
            PropertyDescriptor(name="Second")
            .depends_on("First", "a")
            .depends_on("First", "b")
            .depends_on("Other")
        )

        assert prop.dependencies == frozenset({
            PropertyDependency(property_name="First", dependent_values=frozenset({"a"})),
            PropertyDependency(property_name="First", dependent_values=frozenset({"b"})),
            PropertyDependency(property_name="Other"),
        })

    def test_depends_on_identical_call_collapses(self):
        """Test declaring the same dependency twice records it once."""
        prop = PropertyDescriptor(name="Second").depends_on("First", "a").depends_on("First", "a")

        assert len(prop.dependencies) == 1

    def test_identifies_external_resource(self):
        """Test resource definition is attached."""
        prop = PropertyDescriptor(name="Script").identifies_external_resource(
            ResourceCardinality.MULTIPLE, ResourceType.FILE, ResourceType.URL
        )

        assert prop.resource_definition.cardinality == ResourceCardinality.MULTIPLE
        assert prop.resource_definition.resource_types == frozenset(
            {ResourceType.FILE, ResourceType.URL}
        )

    def test_identifies_external_resource_requires_type(self):
        """Test at least one resource type is required."""
        with pytest.raises(ValueError, match="at least one resource type"):
            PropertyDescriptor(name="Script").identifies_external_resource(
                ResourceCardinality.SINGLE
            )


class TestExtensionDescriptor:
    """Test ExtensionDescriptor snapshot semantics."""

    def test_collections_coerced(self):
        """Test list inputs become frozenset and tuple."""
        descriptor = ExtensionDescriptor(
            qualified_name="example.Processor",
            extension_type="PROCESSOR",
            relationships=[Relationship(name="success")],
            property_descriptors=[PropertyDescriptor(name="B"), PropertyDescriptor(name="A")],
        )

        assert descriptor.extension_type == ExtensionType.PROCESSOR
        assert isinstance(descriptor.relationships, frozenset)
        assert [p.name for p in descriptor.property_descriptors] == ["B", "A"]

    def test_frozen(self):
        """Test descriptors cannot be mutated."""
        descriptor = ExtensionDescriptor(
            qualified_name="example.Processor",
            extension_type=ExtensionType.PROCESSOR,
        )

        with pytest.raises(ValidationError):
            descriptor.qualified_name = "example.Other"

    def test_deprecated_flag(self):
        """Test deprecated reflects the notice."""
        plain = ExtensionDescriptor(
            qualified_name="example.Processor",
            extension_type=ExtensionType.PROCESSOR,
        )
        deprecated = plain.model_copy(update={"deprecation_notice": DeprecationNotice()})

        assert plain.deprecated is False
        assert deprecated.deprecated is True

    def test_unknown_extension_type(self):
        """Test unknown extension type is rejected."""
        with pytest.raises(ValidationError):
            ExtensionDescriptor(qualified_name="example.X", extension_type="WIDGET")

    def test_deprecation_notice_keeps_alternative_order(self):
        """Test alternatives stay in given order."""
        notice = DeprecationNotice(alternatives=["b.Second", "a.First"])

        assert notice.alternatives == ("b.Second", "a.First")
        assert notice.reason is None
