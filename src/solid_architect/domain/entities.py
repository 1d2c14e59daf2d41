"""Domain entities: declarations, the immutable design graph, and audit results."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, TypedDict

if TYPE_CHECKING:
    from solid_architect.domain.rules import Finding


class _ParseableEnum(Enum):
    """Enum whose members can be parsed from loose spellings (no_op, NoOp, no-op)."""

    @classmethod
    def parse(cls, raw: str) -> "_ParseableEnum | None":
        """Return the member matching raw, or None if nothing matches."""
        key = str(raw).replace("_", "").replace("-", "").replace(" ", "").lower()
        for member in cls:
            if member.value.replace("_", "").lower() == key:
                return member
        return None


class TypeKind(_ParseableEnum):
    """Whether a declared type is a concrete class or an abstraction."""

    CLASS = "class"
    INTERFACE = "interface"


class BodyBehavior(_ParseableEnum):
    """Declared runtime disposition of a method body."""

    NORMAL = "normal"
    # Unconditionally signals an "unsupported operation" failure.
    THROWS_UNSUPPORTED = "throws_unsupported"
    NO_OP = "no_op"
    # Branches on a type/category tag to select behavior.
    TYPE_SWITCH = "type_switch"

    @property
    def refuses_contract(self) -> bool:
        """True for bodies that do not perform the inherited contract."""
        return self in (BodyBehavior.THROWS_UNSUPPORTED, BodyBehavior.NO_OP)


class Principle(_ParseableEnum):
    """The five object-oriented design principles audited."""

    SRP = "SRP"
    OCP = "OCP"
    LSP = "LSP"
    ISP = "ISP"
    DIP = "DIP"


class Severity(_ParseableEnum):
    """Finding severity, ordered from least to most severe."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


# -----------------------------------------------------------------------------
# Declarations: raw listing records, validated by GraphBuilder.
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class FieldDecl:
    """A declared field on a type."""

    name: str
    type_name: str = ""


@dataclass(frozen=True)
class MethodDecl:
    """A declared method. owner is the name of the declaring type."""

    owner: str
    name: str
    arity: int = 0
    returns: str = "void"
    behavior: BodyBehavior = BodyBehavior.NORMAL


@dataclass(frozen=True)
class TypeDecl:
    """A declared class or interface."""

    name: str
    kind: TypeKind = TypeKind.CLASS
    fields: tuple[FieldDecl, ...] = ()
    service_layer: bool = False


@dataclass(frozen=True)
class InheritanceEdge:
    """child implements/extends parent."""

    child: str
    parent: str


@dataclass(frozen=True)
class Dependency:
    """owner directly constructs or owns an instance of target."""

    owner: str
    target: str


@dataclass(frozen=True)
class Declarations:
    """A complete declaration listing, as read from the input source."""

    types: tuple[TypeDecl, ...] = ()
    methods: tuple[MethodDecl, ...] = ()
    inheritance: tuple[InheritanceEdge, ...] = ()
    dependencies: tuple[Dependency, ...] = ()


# -----------------------------------------------------------------------------
# Design graph: built once per run, read-only afterwards.
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class Method:
    """A method owned by exactly one type; matched by (name, arity)."""

    owner: str
    name: str
    arity: int
    returns: str
    behavior: BodyBehavior

    @property
    def signature(self) -> tuple[str, int]:
        """Matching key used for overrides."""
        return (self.name, self.arity)


@dataclass(frozen=True)
class TypeNode:
    """A resolved type: methods and fields it declares, supertypes by name."""

    name: str
    kind: TypeKind
    methods: tuple[Method, ...] = ()
    fields: tuple[FieldDecl, ...] = ()
    supertypes: tuple[str, ...] = ()
    service_layer: bool = False

    @property
    def is_interface(self) -> bool:
        return self.kind is TypeKind.INTERFACE

    def get_method(self, name: str, arity: int) -> Method | None:
        """Return the method this type itself declares with that signature."""
        for method in self.methods:
            if method.name == name and method.arity == arity:
                return method
        return None


@dataclass(frozen=True)
class DesignGraph:
    """
    Immutable class/interface graph.

    Supertypes are weak references by name; every lookup goes through the
    type table. Safe to share between threads without locking.
    """

    types: Mapping[str, TypeNode] = field(
        default_factory=lambda: MappingProxyType({}))
    edges: tuple[InheritanceEdge, ...] = ()
    dependencies: tuple[Dependency, ...] = ()

    def get(self, name: str) -> TypeNode | None:
        """Return the type with that name, or None if undeclared."""
        return self.types.get(name)

    def iter_types(self) -> tuple[TypeNode, ...]:
        """All types, ordered by name."""
        return tuple(self.types[name] for name in sorted(self.types))

    def interfaces(self) -> tuple[TypeNode, ...]:
        return tuple(t for t in self.iter_types() if t.is_interface)

    def implementers(self, name: str) -> tuple[TypeNode, ...]:
        """Types with a direct edge to name, ordered by name."""
        children = sorted({e.child for e in self.edges if e.parent == name})
        return tuple(self.types[c] for c in children)

    def class_implementers(self, name: str) -> tuple[TypeNode, ...]:
        """Direct children of name that are classes; sub-interfaces are left out."""
        return tuple(t for t in self.implementers(name) if not t.is_interface)

    def dependencies_of(self, name: str) -> tuple[Dependency, ...]:
        return tuple(d for d in self.dependencies if d.owner == name)

    def ancestors(self, name: str) -> tuple[TypeNode, ...]:
        """Transitive supertypes in breadth-first order, nearest first."""
        seen: set[str] = set()
        ordered: list[TypeNode] = []
        node = self.get(name)
        queue = list(node.supertypes) if node else []
        while queue:
            current = queue.pop(0)
            if current in seen:
                continue
            seen.add(current)
            parent = self.get(current)
            if parent is None:
                continue
            ordered.append(parent)
            queue.extend(parent.supertypes)
        return tuple(ordered)

    def resolve_method(self, type_name: str, name: str, arity: int) -> Method | None:
        """Nearest definition of (name, arity) on type_name or its ancestors."""
        node = self.get(type_name)
        if node is None:
            return None
        own = node.get_method(name, arity)
        if own is not None:
            return own
        for ancestor in self.ancestors(type_name):
            inherited = ancestor.get_method(name, arity)
            if inherited is not None:
                return inherited
        return None


# -----------------------------------------------------------------------------
# Audit results
# -----------------------------------------------------------------------------


class FindingRecord(TypedDict):
    """Serialization shape for one finding."""

    id: str
    principle: str
    severity: str
    type: str
    member: str
    message: str


@dataclass(frozen=True)
class AuditReport:
    """Deduplicated, deterministically ordered findings of one run."""

    findings: tuple["Finding", ...] = ()
    type_count: int = 0

    def has_findings(self) -> bool:
        return bool(self.findings)

    def count_by_principle(self) -> dict[str, int]:
        """Finding counts keyed by principle, for every principle."""
        counts = {p.value: 0 for p in Principle}
        for finding in self.findings:
            counts[finding.principle.value] += 1
        return counts

    def to_records(self) -> list[FindingRecord]:
        """Ordered sequence of plain records."""
        return [f.to_record() for f in self.findings]
