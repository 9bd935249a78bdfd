"""Value and element data model for parsed KON documents.

Values form a closed set of variants (:data:`KonValue`); units likewise
(:data:`NumberUnit`). Everything here is immutable once constructed.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, ClassVar, Dict, Iterator, List, Mapping, Optional, Tuple, Union


@dataclass(frozen=True)
class PureUnit:
    """A number without a unit."""

    def __str__(self) -> str:
        return ""


@dataclass(frozen=True)
class NamedUnit:
    """A number followed by a bare-word unit such as ``px``."""

    name: str

    def __post_init__(self) -> None:
        """Validate unit name."""
        if not self.name:
            raise ValueError("Unit name cannot be empty")

    def __str__(self) -> str:
        return self.name


NumberUnit = Union[PureUnit, NamedUnit]

PURE = PureUnit()


@dataclass(frozen=True)
class KonNone:
    """Absence of a value."""

    def __str__(self) -> str:
        return ""

    def to_python(self) -> None:
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "none"}


KON_NONE = KonNone()


@dataclass(frozen=True)
class KonString:
    value: str

    def __str__(self) -> str:
        return f'"{self.value}"'

    def to_python(self) -> str:
        return self.value

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "string", "value": self.value}


@dataclass(frozen=True)
class KonSymbol:
    name: str

    def __str__(self) -> str:
        return self.name

    def to_python(self) -> str:
        return self.name

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "symbol", "value": self.name}


@dataclass(frozen=True, eq=False)
class KonNumber:
    """Numeric value with a unit.

    Equality and hashing look only at the magnitude and the unit, so an
    integer and a decimal of the same magnitude and unit compare equal.
    """

    value: Union[int, float]
    unit: NumberUnit = PURE

    kind: ClassVar[str] = "number"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KonNumber):
            return NotImplemented
        return self.value == other.value and self.unit == other.unit

    def __hash__(self) -> int:
        return hash(self.value) + 31 * hash(self.unit)

    def __str__(self) -> str:
        if isinstance(self.unit, NamedUnit):
            return f"{self.value} {self.unit.name}"
        return str(self.value)

    @property
    def unit_name(self) -> Optional[str]:
        if isinstance(self.unit, NamedUnit):
            return self.unit.name
        return None

    def to_python(self) -> Union[int, float]:
        return self.value

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.kind, "value": self.value, "unit": self.unit_name}


@dataclass(frozen=True, eq=False)
class KonInteger(KonNumber):
    kind: ClassVar[str] = "integer"


@dataclass(frozen=True, eq=False)
class KonDecimal(KonNumber):
    kind: ClassVar[str] = "decimal"


KonValue = Union[KonNone, KonString, KonSymbol, KonInteger, KonDecimal]


@dataclass(frozen=True)
class KonElement:
    """Named node of a KON document.

    Attributes are exposed as a read-only mapping and children as a tuple,
    both in the order they appeared in the source.
    """

    name: str
    attributes: Mapping[str, KonValue] = field(default_factory=dict)
    children: Tuple["KonElement", ...] = ()
    value: KonValue = KON_NONE

    def __post_init__(self) -> None:
        """Validate the element and freeze its containers."""
        if not self.name:
            raise ValueError("Element name cannot be empty")
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))
        object.__setattr__(self, "children", tuple(self.children))

    def __hash__(self) -> int:
        return hash((
            self.name,
            frozenset(self.attributes.items()),
            self.children,
            self.value,
        ))

    def __str__(self) -> str:
        attributes = ""
        if self.attributes:
            entries = ", ".join(f"{key} = {value}" for key, value in self.attributes.items())
            attributes = f"({entries})"

        children = ""
        if self.children:
            lines = []
            for child in self.children:
                lines.extend("\t" + line for line in str(child).split("\n"))
            children = " {\n" + "\n".join(lines) + "\n}"

        value = "" if self.value == KON_NONE else f" = {self.value}"
        return f"{self.name}{attributes}{children}{value}"

    @property
    def has_value(self) -> bool:
        return self.value != KON_NONE

    @property
    def depth(self) -> int:
        """Height of this subtree; a leaf element has depth 1."""
        if not self.children:
            return 1
        return 1 + max(child.depth for child in self.children)

    def get_attribute(self, name: str, default: Optional[KonValue] = None) -> Optional[KonValue]:
        """Get attribute value with optional default."""
        return self.attributes.get(name, default)

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes

    def find_child(self, name: str) -> Optional["KonElement"]:
        """Find first direct child with matching name."""
        for child in self.children:
            if child.name == name:
                return child
        return None

    def find_children(self, name: str) -> List["KonElement"]:
        """Find all direct children with matching name."""
        return [child for child in self.children if child.name == name]

    def find(self, name: str) -> Optional["KonElement"]:
        """Find first descendant (depth-first, in source order) with matching name."""
        for child in self.children:
            if child.name == name:
                return child
            found = child.find(name)
            if found is not None:
                return found
        return None

    def find_all(self, name: str) -> List["KonElement"]:
        """Find all descendants with matching name in document order."""
        results: List["KonElement"] = []
        for child in self.children:
            results.extend(
                element for element in child.iter_elements() if element.name == name
            )
        return results

    def iter_elements(self) -> Iterator["KonElement"]:
        """Iterate over this element and all descendants in pre-order."""
        yield self
        for child in self.children:
            yield from child.iter_elements()

    def to_dict(self) -> Dict[str, Any]:
        """Convert element to dictionary representation."""
        result: Dict[str, Any] = {
            "name": self.name,
            "attributes": {key: value.to_dict() for key, value in self.attributes.items()},
            "children": [child.to_dict() for child in self.children],
        }
        if self.has_value:
            result["value"] = self.value.to_dict()
        return result
