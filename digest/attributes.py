# ============================================================================
# ATTRIBUTE STORES
# ============================================================================
# STATUS: Digest - Attribute access abstraction
# PURPOSE: Name/value attribute sets the digest filter can edit in place
# EXPORTS: AttributeStore, ParameterSet, ElementAttributeStore
# DEPENDENCIES: xml.etree.ElementTree
# ============================================================================
"""
Attribute Stores

The digest filter edits an operation's parameter set in place. The set is
owned by the caller; all the filter needs is get/set/remove by name and an
ordered list of names it can walk while removing.

Two adapters:
- ParameterSet: plain ordered name -> value mapping
- ElementAttributeStore: the attributes of an ElementTree element

Neither adapter locks. Callers sharing a store across threads serialize
access themselves.
"""

import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from typing import Dict, Iterator, List, Mapping, Optional


class AttributeStore(ABC):
    """
    Ordered, mutable set of string attributes.
    """

    @abstractmethod
    def get(self, name: str) -> Optional[str]:
        """Value of name, or None if absent."""

    @abstractmethod
    def set(self, name: str, value: str) -> None:
        """Set name, replacing any existing value."""

    @abstractmethod
    def remove(self, name: str) -> None:
        """Remove name; absent names are ignored."""

    @abstractmethod
    def names(self) -> List[str]:
        """
        Snapshot of attribute names in order.

        Removing attributes while walking the snapshot is safe.
        """

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self.names())

    def to_dict(self) -> Dict[str, str]:
        result = {}
        for name in self.names():
            value = self.get(name)
            if value is not None:
                result[name] = value
        return result


class ParameterSet(AttributeStore):
    """
    Dict-backed attribute store.

    Insertion order is kept, so a removed-then-set attribute moves to the
    end just as it would on an XML element.
    """

    def __init__(self, attributes: Optional[Mapping[str, str]] = None):
        self._attributes: Dict[str, str] = dict(attributes or {})

    @classmethod
    def wrap(cls, attributes: Dict[str, str]) -> "ParameterSet":
        """Edit an existing dict in place instead of copying it."""
        store = cls()
        store._attributes = attributes
        return store

    def get(self, name: str) -> Optional[str]:
        return self._attributes.get(name)

    def set(self, name: str, value: str) -> None:
        self._attributes[name] = value

    def remove(self, name: str) -> None:
        self._attributes.pop(name, None)

    def names(self) -> List[str]:
        return list(self._attributes)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AttributeStore):
            return self.to_dict() == other.to_dict()
        if isinstance(other, Mapping):
            return self.to_dict() == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"ParameterSet({self._attributes!r})"


class ElementAttributeStore(AttributeStore):
    """
    Attribute store over an ElementTree element.

    Edits go straight to element.attrib.
    """

    def __init__(self, element: ET.Element):
        self.element = element

    def get(self, name: str) -> Optional[str]:
        return self.element.get(name)

    def set(self, name: str, value: str) -> None:
        self.element.set(name, value)

    def remove(self, name: str) -> None:
        self.element.attrib.pop(name, None)

    def names(self) -> List[str]:
        return list(self.element.attrib)


__all__ = ["AttributeStore", "ParameterSet", "ElementAttributeStore"]
