"""Data models for the type model — the canonical structure dump format."""

from dataclasses import dataclass, field
import json

__all__ = ["Member", "MethodInfo", "TypeInfo", "StructureDump"]


def _require_str(d: dict, key: str) -> str:
    """Return d[key], rejecting anything that is not a string."""
    value = d[key]
    if not isinstance(value, str):
        raise TypeError(f"{key!r} must be a string, got {type(value).__name__}: {value!r}")
    return value


@dataclass(frozen=True)
class Member:
    name:          str
    declared_type: str     # signature ("Z", "QString;") or simple name ("int")

    def to_dict(self) -> dict:
        return {"name": self.name, "type": self.declared_type}

    @classmethod
    def from_dict(cls, d: dict) -> "Member":
        return cls(name=_require_str(d, "name"), declared_type=_require_str(d, "type"))


@dataclass(frozen=True)
class MethodInfo:
    name:            str
    parameter_count: int = 0

    def to_dict(self) -> dict:
        d: dict = {"name": self.name}
        if self.parameter_count:
            d["params"] = self.parameter_count
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "MethodInfo":
        return cls(name=_require_str(d, "name"), parameter_count=int(d.get("params", 0)))


@dataclass
class TypeInfo:
    """One declared type: its fields in declaration order plus its methods."""
    name:    str
    fields:  list[Member]     = field(default_factory=list)
    methods: list[MethodInfo] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "name":    self.name,
            "fields":  [f.to_dict() for f in self.fields],
            "methods": [m.to_dict() for m in self.methods],
        }

    @classmethod
    def from_dict(cls, d: dict) -> "TypeInfo":
        return cls(
            name=_require_str(d, "name"),
            fields=[Member.from_dict(f) for f in d.get("fields", [])],
            methods=[MethodInfo.from_dict(m) for m in d.get("methods", [])],
        )


@dataclass
class StructureDump:
    """
    Serialisable snapshot of the types visible to a template.

    JSON layout::

        {"types": [
            {"name": "Person",
             "fields":  [{"name": "id", "type": "I"}],
             "methods": [{"name": "getId"}, {"name": "setId", "params": 1}]}
        ]}
    """
    types: list[TypeInfo] = field(default_factory=list)

    # ── Serialisation ─────────────────────────────────────────────────────────

    def to_dict(self) -> dict:
        return {"types": [t.to_dict() for t in self.types]}

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=indent)

    @classmethod
    def from_dict(cls, d: dict) -> "StructureDump":
        return cls(types=[TypeInfo.from_dict(t) for t in d.get("types", [])])

    @classmethod
    def from_json(cls, raw: str) -> "StructureDump":
        return cls.from_dict(json.loads(raw))

    # ── Convenience ───────────────────────────────────────────────────────────

    def find_type(self, name: str) -> TypeInfo | None:
        """Exact lookup by name, falling back to a case-insensitive match."""
        for info in self.types:
            if info.name == name:
                return info
        name_lower = name.lower()
        for info in self.types:
            if info.name.lower() == name_lower:
                return info
        return None
