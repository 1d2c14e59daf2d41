"""Reads declaration listings (YAML or JSON) into domain Declarations."""

import json
import logging
from pathlib import Path

import yaml

from solid_architect.domain.entities import (
    BodyBehavior,
    Declarations,
    Dependency,
    FieldDecl,
    InheritanceEdge,
    MethodDecl,
    TypeDecl,
    TypeKind,
)
from solid_architect.domain.exceptions import DeclarationSourceError, MalformedInputError
from solid_architect.domain.protocols import DeclarationSourceProtocol

logger = logging.getLogger(__name__)


class DeclarationFileGateway(DeclarationSourceProtocol):
    """
    Parses the listing format:

        types:        [{name, kind, service_layer, extends|implements, fields, methods, depends_on}]
        methods:      [{owner, name, arity, returns, behavior}]
        inheritance:  [{child, parent}]
        dependencies: [{owner, target}]

    Nested and flat forms may be mixed; both end up in the same Declarations.
    Referential checks (unknown owners, cycles) belong to GraphBuilder.
    """

    def load(self, path: str) -> Declarations:
        """Read and parse the listing at path. ``.json`` files are decoded as JSON, anything else as YAML."""
        file_path = Path(path)
        if not file_path.is_file():
            raise DeclarationSourceError(f"Declaration listing not found: {path}", path=path)
        try:
            with open(file_path, encoding="utf-8") as f:
                if file_path.suffix.lower() == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except UnicodeDecodeError as e:
            raise MalformedInputError(f"Cannot decode {path} as UTF-8: {e}") from e
        except OSError as e:
            raise DeclarationSourceError(f"Cannot read {path}: {e}", path=path) from e
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise MalformedInputError(f"Cannot parse {path}: {e}") from e
        logger.debug("Loaded declaration listing %s", path)
        return self.parse(data)

    def parse(self, data: object) -> Declarations:
        """Convert an already-decoded document into Declarations."""
        if data is None:
            return Declarations()
        if not isinstance(data, dict):
            raise MalformedInputError("Declaration listing must be a mapping at the top level")

        types: list[TypeDecl] = []
        methods: list[MethodDecl] = []
        edges: list[InheritanceEdge] = []
        deps: list[Dependency] = []

        for raw in self._list(data, "types", "listing"):
            name = self._name(raw, "type")
            types.append(
                TypeDecl(
                    name=name,
                    kind=self._kind(raw.get("kind", "class"), name),
                    fields=tuple(self._field(f, name) for f in self._list(raw, "fields", name)),
                    service_layer=self._flag(raw, "service_layer", name),
                )
            )
            for parent in (*self._names(raw, "extends", name), *self._names(raw, "implements", name)):
                edges.append(InheritanceEdge(child=name, parent=parent))
            for m in self._list(raw, "methods", name):
                methods.append(self._method(m, owner=name))
            for target in self._names(raw, "depends_on", name):
                deps.append(Dependency(owner=name, target=target))

        for m in self._list(data, "methods", "listing"):
            owner = m.get("owner")
            if not isinstance(owner, str) or not owner:
                raise MalformedInputError(
                    f"Top-level method {m.get('name')!r} needs an 'owner'")
            methods.append(self._method(m, owner=owner))

        for e in self._list(data, "inheritance", "listing"):
            edges.append(
                InheritanceEdge(child=self._str(e, "child"), parent=self._str(e, "parent")))

        for d in self._list(data, "dependencies", "listing"):
            deps.append(Dependency(owner=self._str(d, "owner"), target=self._str(d, "target")))

        return Declarations(
            types=tuple(types),
            methods=tuple(methods),
            inheritance=tuple(edges),
            dependencies=tuple(deps),
        )

    def _list(self, container: dict, key: str, where: str) -> list[dict]:
        raw = container.get(key) or []
        if not isinstance(raw, list):
            raise MalformedInputError(f"'{key}' in {where} must be a list")
        for item in raw:
            if not isinstance(item, dict):
                raise MalformedInputError(f"Entries of '{key}' in {where} must be mappings")
        return raw

    def _names(self, container: dict, key: str, where: str) -> list[str]:
        raw = container.get(key) or []
        if isinstance(raw, str):
            raw = [raw]
        if not isinstance(raw, list) or not all(isinstance(n, str) and n for n in raw):
            raise MalformedInputError(
                f"'{key}' of {where} must be a list of type names", names=(where,))
        return raw

    def _str(self, container: dict, key: str) -> str:
        value = container.get(key)
        if not isinstance(value, str) or not value:
            raise MalformedInputError(f"Missing or empty '{key}' in {container!r}")
        return value

    def _flag(self, container: dict, key: str, where: str) -> bool:
        value = container.get(key, False)
        if not isinstance(value, bool):
            raise MalformedInputError(
                f"'{key}' of {where} must be true or false, got {value!r}", names=(where,))
        return value

    def _name(self, raw: dict, what: str) -> str:
        name = raw.get("name")
        if not isinstance(name, str) or not name:
            raise MalformedInputError(f"A {what} entry is missing its 'name': {raw!r}")
        return name

    def _kind(self, raw: object, name: str) -> TypeKind:
        kind = TypeKind.parse(str(raw))
        if kind is None:
            raise MalformedInputError(
                f"Type {name} has unknown kind {raw!r} (expected class or interface)",
                names=(name,),
            )
        return kind

    def _field(self, raw: dict, owner: str) -> FieldDecl:
        return FieldDecl(name=self._name(raw, f"field of {owner}"), type_name=str(raw.get("type", "")))

    def _method(self, raw: dict, owner: str) -> MethodDecl:
        name = self._name(raw, f"method of {owner}")
        arity = raw.get("arity", 0)
        if not isinstance(arity, int) or isinstance(arity, bool):
            raise MalformedInputError(
                f"Method {owner}.{name} has non-integer arity {arity!r}", names=(owner, name))
        tag = raw.get("behavior", "normal")
        behavior = BodyBehavior.parse(str(tag))
        if behavior is None:
            known = ", ".join(b.value for b in BodyBehavior)
            raise MalformedInputError(
                f"Method {owner}.{name} has unknown behavior {tag!r} (expected one of {known})",
                names=(owner, name),
            )
        return MethodDecl(
            owner=owner,
            name=name,
            arity=arity,
            returns=str(raw.get("returns", "void")),
            behavior=behavior,
        )
