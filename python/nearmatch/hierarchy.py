"""Declared nominal type hierarchies for type-to-type similarity.

Types are modelled as :class:`TypeTag` values, each naming its declared
supertype. Every chain ends at the shared root :data:`ANY`. Hierarchies are
declared explicitly rather than discovered by reflection, so the same model
serves Python classes, schema types, or names from another system.

Example:
    >>> from nearmatch import TypeHierarchy, similarity
    >>> types = TypeHierarchy()
    >>> number = types.declare("Number")
    >>> real = types.declare("Real", "Number")
    >>> integer = types.declare("Integer", "Real")
    >>> floating = types.declare("Float", "Real")
    >>> similarity(integer, floating)
    0.75
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Union

from nearmatch.exceptions import ValidationError

logger = logging.getLogger(__name__)

__all__ = ["ANY", "TypeTag", "TypeHierarchy"]


@dataclass(frozen=True)
class TypeTag:
    """A named type with an optional declared supertype."""

    name: str
    parent: Optional["TypeTag"] = None

    @property
    def supertype(self) -> "TypeTag":
        """The declared supertype; the root is its own supertype."""
        return self.parent if self.parent is not None else self

    def ancestors(self) -> List["TypeTag"]:
        """Return the supertype chain, nearest first, ending at the root.

        The tag itself is not included. The root's chain is just the root.
        """
        chain = [self.supertype]
        while chain[-1].parent is not None:
            chain.append(chain[-1].parent)
        return chain

    def is_subtype(self, other: "TypeTag") -> bool:
        return self == other or other in self.ancestors()

    def __repr__(self) -> str:
        return f"TypeTag({self.name!r})"


ANY = TypeTag("Any")
"""Root of every hierarchy."""


class TypeHierarchy:
    """A registry of :class:`TypeTag` values keyed by name.

    Parents must be declared before their children, which rules out cycles.
    """

    def __init__(self, root: TypeTag = ANY):
        self._root = root
        self._tags: Dict[str, TypeTag] = {root.name: root}

    @property
    def root(self) -> TypeTag:
        return self._root

    def declare(self, name: str, parent: Union[str, TypeTag, None] = None) -> TypeTag:
        """Declare ``name`` as a subtype of ``parent`` (the root by default).

        Re-declaring a name with the same parent returns the existing tag.

        Raises:
            ValidationError: If the parent is unknown, or the name was
                already declared under a different parent.
        """
        if parent is None:
            parent_tag = self._root
        elif isinstance(parent, TypeTag):
            parent_tag = parent
            if self._tags.get(parent.name) != parent:
                raise ValidationError(f"Parent type {parent.name!r} is not declared")
        else:
            if parent not in self._tags:
                raise ValidationError(f"Parent type {parent!r} is not declared")
            parent_tag = self._tags[parent]

        existing = self._tags.get(name)
        if existing is self._root:
            raise ValidationError(f"Cannot redeclare the root type {name!r}")
        if existing is not None:
            if existing.parent != parent_tag:
                raise ValidationError(
                    f"Type {name!r} is already declared under {existing.supertype.name!r}"
                )
            return existing

        tag = TypeTag(name, parent_tag)
        self._tags[name] = tag
        logger.debug("Declared type %s <: %s", name, parent_tag.name)
        return tag

    def get(self, name: str) -> TypeTag:
        try:
            return self._tags[name]
        except KeyError:
            raise ValidationError(f"Type {name!r} is not declared") from None

    def chain(self, name: str) -> List[str]:
        """Names of the supertypes of ``name``, nearest first."""
        return [tag.name for tag in self.get(name).ancestors()]

    @classmethod
    def from_classes(cls, *classes: type) -> "TypeHierarchy":
        """Build a hierarchy from Python classes.

        Each class is declared under its first base class; ``object`` maps to
        the root. Tags are named by the class's qualified name, prefixed with
        its module unless it is a builtin.

        Example:
            >>> types = TypeHierarchy.from_classes(KeyError, IndexError)
            >>> types.chain("KeyError")
            ['LookupError', 'Exception', 'BaseException', 'Any']
        """
        hierarchy = cls()
        for klass in classes:
            hierarchy.declare_class(klass)
        return hierarchy

    def declare_class(self, klass: type) -> TypeTag:
        """Declare ``klass`` and its first-base chain, returning its tag."""
        if klass is object:
            return self._root
        lineage = []
        current = klass
        while current is not object:
            lineage.append(current)
            current = current.__bases__[0] if current.__bases__ else object
        parent = self._root
        for member in reversed(lineage):
            parent = self.declare(_class_name(member), parent)
        return parent

    def __contains__(self, name: object) -> bool:
        return name in self._tags

    def __iter__(self) -> Iterator[TypeTag]:
        return iter(self._tags.values())

    def __len__(self) -> int:
        return len(self._tags)

    def __repr__(self) -> str:
        return f"TypeHierarchy(size={len(self._tags)})"


def _class_name(klass: type) -> str:
    if klass.__module__ == "builtins":
        return klass.__qualname__
    return f"{klass.__module__}.{klass.__qualname__}"
