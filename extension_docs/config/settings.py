"""
Output options for extension documentation

Options are controlled via environment variables so documentation builds can
change formatting without code changes. Values are read once at import time.

Usage:
    from extension_docs.config.settings import get_option

    if get_option('pretty_print'):
        ...

Environment Variables:
    EXTENSION_DOCS_PRETTY_PRINT=true/false     - Indent output documents
    EXTENSION_DOCS_XML_DECLARATION=true/false  - Emit <?xml ...?> declaration
    EXTENSION_DOCS_ENCODING=<name>             - Output encoding (default UTF-8)
"""

import os
from typing import Any, Dict


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == 'true'


# Output options with environment variable overrides
OUTPUT_OPTIONS: Dict[str, Any] = {
    # Indentation adds whitespace text nodes between elements
    'pretty_print': _env_flag('EXTENSION_DOCS_PRETTY_PRINT', 'false'),

    'xml_declaration': _env_flag('EXTENSION_DOCS_XML_DECLARATION', 'true'),

    'encoding': os.getenv('EXTENSION_DOCS_ENCODING', 'UTF-8'),
}


def get_option(name: str) -> Any:
    """
    Get the current value of an output option.

    Args:
        name: Option name (e.g., 'pretty_print')

    Returns:
        Option value

    Raises:
        KeyError: If option name is not recognized

    Example:
        >>> get_option('encoding')
        'UTF-8'  # Default
    """
    if name not in OUTPUT_OPTIONS:
        available = ', '.join(OUTPUT_OPTIONS.keys())
        raise KeyError(
            f"Unknown output option: '{name}'. "
            f"Available options: {available}"
        )

    return OUTPUT_OPTIONS[name]


def get_all_options() -> Dict[str, Any]:
    """
    Get all output options and their current values.

    Returns:
        Dictionary of option names to values
    """
    return OUTPUT_OPTIONS.copy()


def set_option(name: str, value: Any) -> None:
    """
    Programmatically set an output option (for testing only).

    Args:
        name: Option name
        value: New value

    Warning:
        This is for testing only. In production, use environment variables.
    """
    if name not in OUTPUT_OPTIONS:
        available = ', '.join(OUTPUT_OPTIONS.keys())
        raise KeyError(
            f"Unknown output option: '{name}'. "
            f"Available options: {available}"
        )

    OUTPUT_OPTIONS[name] = value
