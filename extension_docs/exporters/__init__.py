"""Exporters for rendering extension descriptors as documentation.

Available Exporters:
    - XmlDocumentationWriter: Canonical, deterministically ordered XML
"""

from extension_docs.exporters.sinks import (
    SerializationError,
    StreamSink,
    TreeSink,
    XmlSink,
)
from extension_docs.exporters.xml_documentation_writer import (
    ExtensionDocumentationWriter,
    XmlDocumentationWriter,
    extension_documentation_bytes,
    validate_document,
    write_extension_documentation,
)

__all__ = [
    "ExtensionDocumentationWriter",
    "SerializationError",
    "StreamSink",
    "TreeSink",
    "XmlDocumentationWriter",
    "XmlSink",
    "extension_documentation_bytes",
    "validate_document",
    "write_extension_documentation",
]
