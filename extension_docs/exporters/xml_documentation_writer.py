"""XML Documentation Writer for extension descriptors.

This module renders an ExtensionDescriptor into a canonical XML document used
to generate extension documentation. Output is deterministic: collections that
are unordered in the descriptor are sorted by their natural key immediately
before emission, so the same descriptor always produces identical bytes.

Architecture:
    - ExtensionDocumentationWriter: Abstract writer for one descriptor
    - XmlDocumentationWriter: Streams element events to an XmlSink
    - Helper methods for each document section (deprecation, relationships,
      properties)

Document layout:
    extension
      name, type
      deprecationNotice?  (reason, alternatives/alternative*)
      relationships       (relationship* sorted by name)
      properties          (property* in declaration order)

References:
    - XSD Schema: extension_docs/exporters/schemas/extension.xsd
"""

import io
import logging
import os
import tempfile
from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import FrozenSet, Iterator, List, Optional, Tuple, Union

from lxml import etree

from ..models.extension import (
    DeprecationNotice,
    ExtensionDescriptor,
    PropertyDependency,
    PropertyDescriptor,
    Relationship,
    ResourceDefinition,
)
from .sinks import SerializationError, StreamSink, XmlSink

logger = logging.getLogger(__name__)

DEFAULT_XSD_PATH = Path(__file__).parent / "schemas" / "extension.xsd"


class ExtensionDocumentationWriter(ABC):
    """Writes documentation for a single extension descriptor."""

    @abstractmethod
    def write(self, descriptor: ExtensionDescriptor) -> None:
        """Write documentation for ``descriptor``.

        Raises:
            SerializationError: If the documentation cannot be written
        """


class XmlDocumentationWriter(ExtensionDocumentationWriter):
    """Streams the XML documentation of an extension to a sink.

    Usage:
        sink = StreamSink(output)
        XmlDocumentationWriter(sink).write(descriptor)

    Every element is opened and closed in the same lexical scope through
    ``_element``; open elements are tracked on a frame stack so a mismatched
    close is reported instead of producing malformed output. On any failure
    the sink is aborted and nothing is delivered to its output.

    A writer holds state only for the duration of one ``write`` call. Use one
    writer and one sink per document.
    """

    def __init__(self, sink: XmlSink):
        """Initialize writer.

        Args:
            sink: Receiver of element events
        """
        self.sink = sink
        self._frames: List[str] = []

    def write(self, descriptor: ExtensionDescriptor) -> None:
        """Write the extension document for ``descriptor``.

        Args:
            descriptor: Extension metadata snapshot

        Raises:
            SerializationError: If the sink rejects a write or element nesting
                becomes unbalanced
        """
        logger.debug(f"Writing documentation for {descriptor.qualified_name}")
        self._frames = []

        try:
            with self._element("extension"):
                self._write_text_element("name", descriptor.qualified_name)
                self._write_text_element("type", descriptor.extension_type.name)
                if descriptor.deprecation_notice is not None:
                    self._write_deprecation_notice(descriptor.deprecation_notice)
                self._write_relationships(descriptor.relationships)
                self._write_properties(descriptor.property_descriptors)

            self.sink.end_document()
        except SerializationError:
            self.sink.abort()
            raise
        except (OSError, ValueError, etree.LxmlError) as exc:
            self.sink.abort()
            logger.error(
                f"Failed to write documentation for {descriptor.qualified_name}: {exc}"
            )
            raise SerializationError(
                f"Failed to write documentation for {descriptor.qualified_name}: {exc}"
            ) from exc
        finally:
            self._frames = []

        logger.debug(f"Wrote documentation for {descriptor.qualified_name}")

    @contextmanager
    def _element(self, name: str) -> Iterator[None]:
        """Open ``name``, run the enclosed block, then close ``name``.

        The frame is popped even when the block fails; the close event is only
        sent to the sink when the block completed.
        """
        self.sink.start_element(name)
        self._frames.append(name)
        try:
            yield
        finally:
            innermost = self._frames.pop() if self._frames else None
        if innermost != name:
            raise SerializationError(
                f"Unbalanced element nesting: closing '{name}' "
                f"while innermost open element is '{innermost}'"
            )
        self.sink.end_element(name)

    def _write_text_element(self, name: str, text: Optional[str]) -> None:
        """Write ``<name>text</name>``; a None text writes no text node."""
        with self._element(name):
            if text is not None:
                self.sink.characters(text)

    def _write_deprecation_notice(self, notice: DeprecationNotice) -> None:
        """Write deprecationNotice element.

        Note:
            - reason is always present; it carries a text node only when a
              reason was supplied (an empty string still writes a text node)
            - alternatives keep author order
        """
        with self._element("deprecationNotice"):
            self._write_text_element("reason", notice.reason)
            with self._element("alternatives"):
                for alternative in notice.alternatives:
                    self._write_text_element("alternative", alternative)

    def _write_relationships(self, relationships: FrozenSet[Relationship]) -> None:
        """Write relationships sorted by name; emitted even when empty."""
        with self._element("relationships"):
            for relationship in sorted(relationships, key=lambda r: r.name):
                with self._element("relationship"):
                    self._write_text_element("name", relationship.name)
                    self._write_text_element("description", relationship.description)

    def _write_properties(self, properties: Tuple[PropertyDescriptor, ...]) -> None:
        """Write properties in declaration order."""
        with self._element("properties"):
            for prop in properties:
                with self._element("property"):
                    self._write_text_element("name", prop.name)
                    if prop.dependencies:
                        self._write_dependencies(prop.dependencies)
                    if prop.resource_definition is not None:
                        self._write_resource_definition(prop.resource_definition)

    def _write_dependencies(self, dependencies: FrozenSet[PropertyDependency]) -> None:
        """Write dependencies sorted by property name, with sorted values.

        Dependencies on the same property are ordered by their sorted values,
        an unconditional dependency first.
        """
        with self._element("dependencies"):
            ordered = sorted(
                dependencies,
                key=lambda d: (d.property_name, sorted(d.dependent_values))
            )
            for dependency in ordered:
                with self._element("dependency"):
                    self._write_text_element("propertyName", dependency.property_name)
                    if dependency.dependent_values:
                        with self._element("dependentValues"):
                            for value in sorted(dependency.dependent_values):
                                self._write_text_element("value", value)

    def _write_resource_definition(self, definition: ResourceDefinition) -> None:
        """Write resourceDefinition with resource types sorted by name."""
        with self._element("resourceDefinition"):
            self._write_text_element("cardinality", definition.cardinality.name)
            with self._element("resourceTypes"):
                for resource_type in sorted(definition.resource_types, key=lambda t: t.name):
                    self._write_text_element("resourceType", resource_type.name)


def extension_documentation_bytes(
    descriptor: ExtensionDescriptor,
    pretty_print: Optional[bool] = None
) -> bytes:
    """Render the XML documentation of ``descriptor`` to bytes.

    Raises:
        SerializationError: If the document cannot be produced
    """
    buffer = io.BytesIO()
    XmlDocumentationWriter(StreamSink(buffer, pretty_print=pretty_print)).write(descriptor)
    return buffer.getvalue()


def validate_document(
    document: Union[Path, bytes, etree._Element],
    xsd_path: Optional[Path] = None
) -> None:
    """Validate an extension document against the XSD schema.

    Args:
        document: Path to an XML file, serialized bytes, or a root element
        xsd_path: Schema path (defaults to the bundled extension.xsd)

    Raises:
        FileNotFoundError: If XSD schema not found
        ValueError: If validation fails
    """
    xsd_path = xsd_path or DEFAULT_XSD_PATH
    if not xsd_path.exists():
        raise FileNotFoundError(f"XSD schema not found: {xsd_path}")

    schema = etree.XMLSchema(etree.parse(str(xsd_path)))

    if isinstance(document, Path):
        xml_doc = etree.parse(str(document))
    elif isinstance(document, bytes):
        xml_doc = etree.ElementTree(etree.fromstring(document))
    else:
        xml_doc = etree.ElementTree(document)

    if not schema.validate(xml_doc):
        raise ValueError(
            f"Extension documentation validation failed:\n"
            f"{schema.error_log}"
        )


def write_extension_documentation(
    descriptor: ExtensionDescriptor,
    output_path: Path,
    validate: bool = False
) -> None:
    """Convenience function to write extension documentation to a file.

    The document is rendered (and validated, if requested) before anything
    touches the file system. It is written to a temporary file next to
    ``output_path`` and moved into place, so a failure leaves no new or
    partial file behind and an existing file unchanged.

    Args:
        descriptor: Extension metadata snapshot
        output_path: Path where XML file will be written
        validate: Whether to validate against the XSD schema

    Raises:
        SerializationError: If rendering fails or the file cannot be written
        ValueError: If validation fails

    Example:
        >>> from extension_docs.core import describe
        >>> write_extension_documentation(describe(processor), Path("docs/processor.xml"))
    """
    document = extension_documentation_bytes(descriptor)

    if validate:
        validate_document(document)

    temp_path: Optional[Path] = None
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            dir=output_path.parent,
            prefix=f".{output_path.name}.",
            suffix=".tmp",
            delete=False,
        ) as temp_file:
            temp_path = Path(temp_file.name)
            temp_file.write(document)
        os.replace(temp_path, output_path)
    except OSError as exc:
        if temp_path is not None and temp_path.exists():
            temp_path.unlink()
        logger.error(f"Failed to write documentation to {output_path}: {exc}")
        raise SerializationError(
            f"Failed to write documentation to {output_path}: {exc}"
        ) from exc

    logger.info(f"Wrote documentation for {descriptor.qualified_name} to {output_path}")
