"""Deprecation utilities for extension components."""

import logging
from typing import Callable, Iterable, Optional, Type

from ..models.extension import DeprecationNotice

logger = logging.getLogger(__name__)

_NOTICE_ATTRIBUTE = "__deprecation_notice__"


def deprecation_notice(
    reason: Optional[str] = None,
    alternatives: Iterable[str] = ()
) -> Callable[[Type], Type]:
    """Class decorator to mark an extension component as deprecated.

    Args:
        reason: Reason for deprecation (omit when none is given)
        alternatives: Qualified names of replacement components, in the order
            they should be suggested

    Example:
        @deprecation_notice(
            reason="Replaced by record-oriented processing",
            alternatives=["example.processors.ConvertRecord"]
        )
        class ConvertCsvToJson(Processor):
            ...
    """
    notice = DeprecationNotice(reason=reason, alternatives=tuple(alternatives))

    def decorator(cls: Type) -> Type:
        # Stored in the class namespace so subclasses are not marked
        setattr(cls, _NOTICE_ATTRIBUTE, notice)
        logger.debug(f"Marked {cls.__qualname__} as deprecated")
        return cls

    return decorator


def get_deprecation_notice(cls: Type) -> Optional[DeprecationNotice]:
    """Get the deprecation notice declared directly on a class.

    Args:
        cls: Component class to inspect

    Returns:
        DeprecationNotice or None if the class is not deprecated
    """
    return vars(cls).get(_NOTICE_ATTRIBUTE)


def is_deprecated(cls: Type) -> bool:
    """Check if a component class is marked as deprecated."""
    return get_deprecation_notice(cls) is not None
