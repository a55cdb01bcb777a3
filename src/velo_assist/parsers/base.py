from abc import ABC, abstractmethod

from velo_assist.models import ContextUsage, MethodDescriptor, PropertyDescriptor, TypeBinding


class BaseAnalyzer(ABC):
    """Abstract base class for language-specific Velo source analyzers."""

    @abstractmethod
    def find_type_bindings(self, source_code: str) -> list[TypeBinding]:
        """Find every Velo/state type pairing in the source code.

        Args:
            source_code: The full document text

        Returns:
            List of TypeBinding objects in line order
        """
        pass

    @abstractmethod
    def has_velo_import(self, source_code: str) -> bool:
        pass

    @abstractmethod
    def list_imports(self, source_code: str) -> list[str]:
        """Extract every imported path in order of appearance."""
        pass

    @abstractmethod
    def find_state_properties(self, source_code: str, class_name: str) -> list[PropertyDescriptor]:
        pass

    @abstractmethod
    def find_methods(self, source_code: str, class_name: str) -> list[MethodDescriptor]:
        pass

    @abstractmethod
    def find_context_usages(self, source_code: str) -> list[ContextUsage]:
        """Find dependency-injection accessor call sites."""
        pass
