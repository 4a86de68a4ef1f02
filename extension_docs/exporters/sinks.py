"""XML event sinks for documentation writers.

Documentation writers emit a stream of start/characters/end events; a sink
turns those events into output. Sinks buffer the document until it is
complete, so a failed write never leaves a partial document in the caller's
stream.

Architecture:
    - XmlSink: event interface consumed by writers
    - TreeSink: builds an lxml element tree
    - StreamSink: TreeSink that serializes the finished tree to a binary stream
"""

import logging
from abc import ABC, abstractmethod
from typing import BinaryIO, List, Optional

from lxml import etree

from ..config.settings import get_option

logger = logging.getLogger(__name__)


class SerializationError(Exception):
    """Raised when a documentation document cannot be produced.

    Either the output stream rejected a write or element nesting became
    unbalanced. Callers must treat it as "no document produced".
    """
    pass


class XmlSink(ABC):
    """Receiver of XML element events."""

    @abstractmethod
    def start_element(self, name: str) -> None:
        """Open a child element of the current element."""

    @abstractmethod
    def characters(self, text: str) -> None:
        """Append text to the current element."""

    @abstractmethod
    def end_element(self, name: str) -> None:
        """Close the current element, which must be named ``name``."""

    @abstractmethod
    def end_document(self) -> None:
        """Complete the document; every element must be closed."""

    @abstractmethod
    def abort(self) -> None:
        """Discard everything buffered for the current document."""


class TreeSink(XmlSink):
    """Builds an lxml element tree from element events.

    Text is kept exactly as written: an element that received
    ``characters("")`` has ``text == ""`` while an element that received no
    characters keeps ``text is None``.
    """

    def __init__(self) -> None:
        self._root: Optional[etree._Element] = None
        self._stack: List[etree._Element] = []
        self._complete = False

    @property
    def result(self) -> etree._Element:
        """Root element of the completed document.

        Raises:
            SerializationError: If no complete document has been written
        """
        if not self._complete or self._root is None:
            raise SerializationError("No complete document has been written")
        return self._root

    def start_element(self, name: str) -> None:
        if self._stack:
            element = etree.SubElement(self._stack[-1], name)
        elif self._root is None:
            element = etree.Element(name)
            self._root = element
        else:
            raise SerializationError(
                f"Cannot open '{name}': document already has a root element"
            )
        self._stack.append(element)

    def characters(self, text: str) -> None:
        if not self._stack:
            raise SerializationError("Cannot write text outside the root element")
        element = self._stack[-1]
        if len(element):
            last = element[-1]
            last.tail = (last.tail or "") + text
        else:
            element.text = (element.text or "") + text

    def end_element(self, name: str) -> None:
        if not self._stack:
            raise SerializationError(f"Cannot close '{name}': no element is open")
        current = self._stack[-1].tag
        if current != name:
            raise SerializationError(
                f"Cannot close '{name}': innermost open element is '{current}'"
            )
        self._stack.pop()

    def end_document(self) -> None:
        if self._root is None:
            raise SerializationError("Cannot end an empty document")
        if self._stack:
            unclosed = ", ".join(element.tag for element in self._stack)
            raise SerializationError(f"Unclosed elements at end of document: {unclosed}")
        self._complete = True

    def abort(self) -> None:
        self._root = None
        self._stack = []
        self._complete = False


class StreamSink(TreeSink):
    """Serializes the completed document to a binary output stream.

    Nothing is written to ``output`` until ``end_document``; the document is
    then written with a single ``write`` call.

    Args:
        output: Writable binary stream
        pretty_print: Indent output (defaults to the 'pretty_print' option)
        xml_declaration: Emit an XML declaration (defaults to the
            'xml_declaration' option)
        encoding: Output encoding (defaults to the 'encoding' option)
    """

    def __init__(
        self,
        output: BinaryIO,
        pretty_print: Optional[bool] = None,
        xml_declaration: Optional[bool] = None,
        encoding: Optional[str] = None,
    ) -> None:
        super().__init__()
        self.output = output
        self.pretty_print = get_option('pretty_print') if pretty_print is None else pretty_print
        self.xml_declaration = (
            get_option('xml_declaration') if xml_declaration is None else xml_declaration
        )
        self.encoding = encoding or get_option('encoding')

    def end_document(self) -> None:
        super().end_document()
        document = etree.tostring(
            self.result,
            encoding=self.encoding,
            xml_declaration=self.xml_declaration,
            pretty_print=self.pretty_print,
        )

        try:
            self.output.write(document)
            self.output.flush()
        except (OSError, ValueError) as exc:
            # ValueError: write to a closed stream
            logger.error(f"Output stream rejected documentation write: {exc}")
            raise SerializationError(f"Output stream rejected write: {exc}") from exc
