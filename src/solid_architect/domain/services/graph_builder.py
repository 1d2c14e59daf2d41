"""
The Model Builder: turns a declaration listing into an immutable DesignGraph.

Validation fails fast with MalformedInputError naming the offending types:
unknown references, duplicate declarations, illegal inheritance shapes, and
inheritance cycles (depth-first traversal with visiting/visited colouring).
"""

import logging
from enum import Enum
from types import MappingProxyType

from solid_architect.domain.entities import (
    Declarations,
    Dependency,
    DesignGraph,
    InheritanceEdge,
    Method,
    TypeKind,
    TypeNode,
)
from solid_architect.domain.exceptions import MalformedInputError

logger = logging.getLogger(__name__)


class _Color(Enum):
    WHITE = 0  # unvisited
    GREY = 1  # on the current DFS path
    BLACK = 2  # fully explored


class GraphBuilder:
    """Builds and validates the design graph. Stateless; safe to reuse."""

    def build(self, declarations: Declarations) -> DesignGraph:
        """Build the graph or raise MalformedInputError."""
        type_decls = self._index_types(declarations)
        edges = self._unique(declarations.inheritance)
        dependencies = self._unique(declarations.dependencies)

        for edge in edges:
            missing = tuple(n for n in (edge.child, edge.parent) if n not in type_decls)
            if missing:
                raise MalformedInputError(
                    f"Inheritance edge {edge.child} -> {edge.parent} references "
                    f"unknown type(s): {', '.join(missing)}",
                    names=missing,
                )
        for dep in dependencies:
            if dep.owner not in type_decls:
                raise MalformedInputError(
                    f"Dependency {dep.owner} -> {dep.target} has unknown owner {dep.owner}",
                    names=(dep.owner,),
                )

        methods_by_owner: dict[str, list[Method]] = {name: [] for name in type_decls}
        for decl in declarations.methods:
            if decl.owner not in type_decls:
                raise MalformedInputError(
                    f"Method {decl.name} has unknown owner {decl.owner}",
                    names=(decl.owner, decl.name),
                )
            if decl.arity < 0:
                raise MalformedInputError(
                    f"Method {decl.owner}.{decl.name} has negative arity {decl.arity}",
                    names=(decl.owner, decl.name),
                )
            owned = methods_by_owner[decl.owner]
            if any(m.name == decl.name and m.arity == decl.arity for m in owned):
                raise MalformedInputError(
                    f"Method {decl.owner}.{decl.name}/{decl.arity} is declared twice",
                    names=(decl.owner, decl.name),
                )
            owned.append(
                Method(
                    owner=decl.owner,
                    name=decl.name,
                    arity=decl.arity,
                    returns=decl.returns,
                    behavior=decl.behavior,
                )
            )

        supertypes: dict[str, list[str]] = {name: [] for name in type_decls}
        for edge in edges:
            supertypes[edge.child].append(edge.parent)
        self._check_inheritance_shape(type_decls, supertypes)
        self._check_acyclic(supertypes)

        types = {
            name: TypeNode(
                name=name,
                kind=decl.kind,
                methods=tuple(methods_by_owner[name]),
                fields=decl.fields,
                supertypes=tuple(supertypes[name]),
                service_layer=decl.service_layer,
            )
            for name, decl in sorted(type_decls.items())
        }
        logger.debug(
            "Built design graph: %d types, %d edges, %d dependencies",
            len(types), len(edges), len(dependencies),
        )
        return DesignGraph(
            types=MappingProxyType(types),
            edges=edges,
            dependencies=dependencies,
        )

    def _index_types(self, declarations: Declarations) -> dict:
        index = {}
        for decl in declarations.types:
            if not decl.name:
                raise MalformedInputError("Type declared without a name")
            if decl.name in index:
                raise MalformedInputError(
                    f"Type {decl.name} is declared twice", names=(decl.name,))
            index[decl.name] = decl
        return index

    def _unique(self, items: tuple) -> tuple:
        """Drop repeated edges, keeping first-declared order."""
        return tuple(dict.fromkeys(items))

    def _check_inheritance_shape(self, type_decls: dict, supertypes: dict[str, list[str]]) -> None:
        """Interfaces extend only interfaces; classes extend at most one class."""
        for name, parents in supertypes.items():
            kind = type_decls[name].kind
            class_parents = [p for p in parents if type_decls[p].kind is TypeKind.CLASS]
            if kind is TypeKind.INTERFACE and class_parents:
                raise MalformedInputError(
                    f"Interface {name} cannot extend class(es): {', '.join(class_parents)}",
                    names=(name, *class_parents),
                )
            if kind is TypeKind.CLASS and len(class_parents) > 1:
                raise MalformedInputError(
                    f"Class {name} extends more than one class: {', '.join(class_parents)}",
                    names=(name, *class_parents),
                )

    def _check_acyclic(self, supertypes: dict[str, list[str]]) -> None:
        """Raise MalformedInputError carrying the cycle path if one exists."""
        color = {name: _Color.WHITE for name in supertypes}
        for root in sorted(supertypes):
            if color[root] is not _Color.WHITE:
                continue
            # Iterative DFS: (node, iterator over its parents)
            path: list[str] = [root]
            stack = [(root, iter(supertypes[root]))]
            color[root] = _Color.GREY
            while stack:
                node, parents = stack[-1]
                parent = next(parents, None)
                if parent is None:
                    color[node] = _Color.BLACK
                    stack.pop()
                    path.pop()
                    continue
                if color[parent] is _Color.GREY:
                    cycle = tuple(path[path.index(parent):] + [parent])
                    raise MalformedInputError(
                        f"Inheritance cycle detected: {' -> '.join(cycle)}",
                        names=cycle,
                    )
                if color[parent] is _Color.WHITE:
                    color[parent] = _Color.GREY
                    path.append(parent)
                    stack.append((parent, iter(supertypes[parent])))
