"""
Core Layer - extension components and descriptor extraction

Modules:
- components: Typed component base classes and ``describe`` extraction
"""

from .components import (
    ConfigurableComponent,
    ControllerService,
    FlowAnalysisRule,
    FlowRegistryClient,
    ParameterProvider,
    Processor,
    ReportingTask,
    UnknownExtensionTypeError,
    describe,
    qualified_name,
)

__all__ = [
    'ConfigurableComponent',
    'ControllerService',
    'FlowAnalysisRule',
    'FlowRegistryClient',
    'ParameterProvider',
    'Processor',
    'ReportingTask',
    'UnknownExtensionTypeError',
    'describe',
    'qualified_name',
]
