from __future__ import annotations

import dataclasses
import operator
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Literal, Mapping, Protocol, get_origin, get_type_hints, runtime_checkable

from pydantic import BaseModel

MemberKind = Literal["property", "field"]


@dataclass(frozen=True)
class Member:
    """
    One publicly readable member of a row shape.

    ``kind`` decides which include-flag governs the member:

    - ``"property"``: declared attributes (dataclass / pydantic / NamedTuple
      fields, class annotations), ``property`` objects, pydantic computed
      fields and the keys of mapping rows
    - ``"field"``: undeclared instance attributes, only visible on a sample row
    """
    name: str
    value_type: Any
    kind: MemberKind
    getter: Callable[[Any], Any]


@runtime_checkable
class MemberProvider(Protocol):
    def describe(self, shape: type | None, sample: Any = None) -> list[Member]: ...


def _is_public(name: str) -> bool:
    return not name.startswith("_")


def _is_classvar(tp: Any) -> bool:
    if isinstance(tp, str):
        return tp.startswith("ClassVar") or tp.startswith("typing.ClassVar")
    return tp is ClassVar or get_origin(tp) is ClassVar


def _type_hints(obj: Any) -> dict[str, Any]:
    """
    Resolved annotations, falling back to the raw (possibly string)
    annotations when forward references cannot be resolved.
    """
    try:
        return get_type_hints(obj)
    except (NameError, TypeError):
        if isinstance(obj, type):
            raw: dict[str, Any] = {}
            for klass in reversed(obj.__mro__):
                raw.update(vars(klass).get("__annotations__", {}))
            return raw
        return dict(getattr(obj, "__annotations__", {}))


def _mapping_getter(key: Any) -> Callable[[Any], Any]:
    def get(row: Any) -> Any:
        return row.get(key)
    return get


class DefaultMemberProvider:
    """
    Describes row shapes with the introspection Python offers out of the box.
    """

    def describe(self, shape: type | None, sample: Any = None) -> list[Member]:
        if shape is None or shape is type(None) or not isinstance(shape, type):
            return []

        members: dict[str, Member] = {}

        def add(
            name: str,
            value_type: Any,
            kind: MemberKind,
            getter: Callable[[Any], Any] | None = None,
            check_public: bool = True,
        ) -> None:
            if name in members or (check_public and not _is_public(name)):
                return
            members[name] = Member(
                name=name,
                value_type=value_type,
                kind=kind,
                getter=getter or operator.attrgetter(name),
            )

        if isinstance(sample, Mapping):
            # keys are data, so underscore keys such as "_id" are kept
            for key, value in sample.items():
                add(
                    str(key),
                    Any if value is None else type(value),
                    "property",
                    _mapping_getter(key),
                    check_public=False,
                )
            return list(members.values())

        if issubclass(shape, BaseModel):
            for name, info in shape.model_fields.items():
                add(name, info.annotation, "property")
            for name, info in shape.model_computed_fields.items():
                add(name, info.return_type, "property")
        elif dataclasses.is_dataclass(shape):
            hints = _type_hints(shape)
            for f in dataclasses.fields(shape):
                add(f.name, hints.get(f.name, f.type), "property")
        elif issubclass(shape, tuple) and hasattr(shape, "_fields"):
            hints = _type_hints(shape)
            for name in shape._fields:
                add(name, hints.get(name, Any), "property")
        else:
            for name, tp in _type_hints(shape).items():
                if not _is_classvar(tp):
                    add(name, tp, "property")

        for klass in reversed(shape.__mro__):
            # pydantic's own properties (model_extra, ...) are not row data
            if klass is object or klass in BaseModel.__mro__:
                continue
            for name, attr in vars(klass).items():
                if isinstance(attr, property):
                    tp = _type_hints(attr.fget).get("return", Any) if attr.fget else Any
                    add(name, tp, "property")

        instance_attrs = getattr(sample, "__dict__", None)
        if isinstance(instance_attrs, dict):
            for name, value in instance_attrs.items():
                if callable(value):
                    continue
                add(name, Any if value is None else type(value), "field")

        return list(members.values())
