"""Abstract capability interface every host type model implements."""

from abc import ABC, abstractmethod

from .models import Member, MethodInfo

__all__ = ["AbstractTypeModel"]


class AbstractTypeModel(ABC):
    """
    The only view of a host's type system the resolver needs.

    A concrete host (IDE, language server, static analyser, a JSON dump)
    enumerates one type's declared members on demand.  Nothing is cached
    between calls by the resolver itself.
    """

    @abstractmethod
    def list_fields(self, type_handle: str) -> list[Member]:
        """
        Return the type's declared fields, in declaration order.

        Raises:
            ModelUnavailableError: The type cannot be read right now.
        """
        ...

    @abstractmethod
    def list_methods(self, type_handle: str) -> list[MethodInfo]:
        """
        Return the type's declared methods (order is not significant).

        Raises:
            ModelUnavailableError: The type cannot be read right now.
        """
        ...
