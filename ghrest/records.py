import dataclasses
import json
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Mapping, Type, TypeVar, Union

from ghrest.errors import RecordDecodeError
from ghrest.optional import ABSENT, Opt, present
from ghrest.timestamps import format_timestamp, normalize_timestamp, parse_timestamp

R = TypeVar("R")


class Kind:
    """How one field's value is written to and read from JSON."""

    name = "any"

    def encode(self, value: Any) -> Any:
        return value

    def decode(self, raw: Any, where: str) -> Any:
        return raw

    def normalize(self, value: Any) -> Any:
        """Coerce a held value into the form a decode would produce."""
        return value

    def _mismatch(self, raw: Any, where: str) -> RecordDecodeError:
        return RecordDecodeError(
            f"{where}: expected {self.name}, got {type(raw).__name__}"
        )


class _Int(Kind):
    name = "int"

    def decode(self, raw, where):
        if isinstance(raw, bool) or not isinstance(raw, int):
            # JSON numbers like 3.0 still count when integral
            if isinstance(raw, float) and raw.is_integer():
                return int(raw)
            raise self._mismatch(raw, where)
        return raw


class _Str(Kind):
    name = "str"

    def encode(self, value):
        if isinstance(value, Enum):
            return value.value
        return value

    def decode(self, raw, where):
        if not isinstance(raw, str):
            raise self._mismatch(raw, where)
        return raw


class _Bool(Kind):
    name = "bool"

    def decode(self, raw, where):
        if not isinstance(raw, bool):
            raise self._mismatch(raw, where)
        return raw


class _Timestamp(Kind):
    name = "timestamp"

    def normalize(self, value):
        if isinstance(value, datetime):
            return normalize_timestamp(value)
        return value

    def encode(self, value: datetime) -> str:
        return format_timestamp(value)

    def decode(self, raw, where):
        # MalformedTimestampError propagates as-is so callers can tell
        # format drift apart from schema drift
        return parse_timestamp(raw)


class Nested(Kind):
    """A field holding another record."""

    def __init__(self, record_cls: type):
        self.record_cls = record_cls
        self.name = record_cls.__name__

    def encode(self, value):
        return encode(value)

    def decode(self, raw, where):
        if not isinstance(raw, Mapping):
            raise self._mismatch(raw, where)
        return decode(self.record_cls, raw, _where=where)


class ListOf(Kind):
    """A field holding a JSON array whose items share one kind."""

    def __init__(self, item: Kind):
        self.item = item
        self.name = f"list[{item.name}]"

    def encode(self, value):
        return [self.item.encode(v) for v in value]

    def decode(self, raw, where):
        if not isinstance(raw, list):
            raise self._mismatch(raw, where)
        return [self.item.decode(v, f"{where}[{i}]") for i, v in enumerate(raw)]

    def normalize(self, value):
        return [self.item.normalize(v) for v in value]


class EnumOf(Kind):
    """A string field restricted to the members of a str Enum."""

    def __init__(self, enum_cls: Type[Enum]):
        self.enum_cls = enum_cls
        self.name = enum_cls.__name__

    def encode(self, value):
        return self.normalize(value).value

    def decode(self, raw, where):
        if not isinstance(raw, str):
            raise self._mismatch(raw, where)
        try:
            return self.enum_cls(raw)
        except ValueError:
            raise RecordDecodeError(f"{where}: {raw!r} is not a valid {self.name}") from None

    def normalize(self, value):
        if isinstance(value, self.enum_cls):
            return value
        try:
            return self.enum_cls(value)
        except ValueError:
            raise RecordDecodeError(f"{value!r} is not a valid {self.name}") from None


INT = _Int()
STR = _Str()
BOOL = _Bool()
TIMESTAMP = _Timestamp()


def opt_field(kind: Kind, json_name: str = ""):
    """
    Declare a dataclass field holding an Opt. Defaults to absent.
    `json_name` overrides the wire key when it differs from the attribute.
    """
    return dataclasses.field(
        default=ABSENT, metadata={"kind": kind, "json_name": json_name}
    )


def _wire_fields(record_cls):
    for f in dataclasses.fields(record_cls):
        kind = f.metadata.get("kind")
        if kind is None:
            continue
        yield f, kind, f.metadata.get("json_name") or f.name


def encode(record) -> Dict[str, Any]:
    """
    Turn a record into a JSON-ready dict.

    Absent fields are left out entirely. Present fields are always written,
    zero values included.
    """
    out: Dict[str, Any] = {}
    for f, kind, key in _wire_fields(type(record)):
        holder: Opt = getattr(record, f.name)
        if not holder.is_present():
            continue
        value = holder.value()
        out[key] = None if value is None else kind.encode(value)
    return out


def decode(record_cls: Type[R], data: Mapping[str, Any], _where: str = "") -> R:
    """
    Build a record from a decoded JSON object.

    Missing keys and explicit nulls both decode to absent. Unknown keys are
    ignored.
    """
    where = _where or record_cls.__name__
    if not isinstance(data, Mapping):
        raise RecordDecodeError(
            f"{where}: expected object, got {type(data).__name__}"
        )
    values = {}
    for f, kind, key in _wire_fields(record_cls):
        if key not in data or data[key] is None:
            continue
        values[f.name] = present(kind.decode(data[key], f"{where}.{key}"))
    return record_cls(**values)


def _load(raw: Union[bytes, str]) -> Any:
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8")
    if not raw.strip():
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise RecordDecodeError(f"invalid JSON body: {e}") from e


def encode_json(record) -> bytes:
    return json.dumps(encode(record)).encode("utf-8")


def decode_json(record_cls: Type[R], raw: Union[bytes, str]) -> R:
    data = _load(raw)
    if data is None:
        return record_cls()
    return decode(record_cls, data)


def decode_json_list(record_cls: Type[R], raw: Union[bytes, str]) -> List[R]:
    """
    Decode a JSON array body into records, keeping wire order.
    An empty array or an empty/null body gives an empty list.
    """
    data = _load(raw)
    if data is None:
        return []
    if not isinstance(data, list):
        raise RecordDecodeError(
            f"{record_cls.__name__} list: expected array, got {type(data).__name__}"
        )
    return [
        decode(record_cls, item, _where=f"{record_cls.__name__}[{i}]")
        for i, item in enumerate(data)
    ]


class Record:
    """
    Base for wire records. Every wire field is declared with `opt_field`.

    Plain values passed to the constructor are wrapped for convenience:
    `None` becomes absent and anything else becomes present(value).
    Present values are then normalized per field kind, so a timestamp is
    held as aware UTC with whole seconds and a side as a `Side`.
    """

    def __post_init__(self):
        for f, kind, _key in _wire_fields(type(self)):
            current = getattr(self, f.name)
            if not isinstance(current, Opt):
                current = ABSENT if current is None else present(current)
            if current.is_present() and current.value() is not None:
                # held values must equal what a wire round trip gives back
                current = present(kind.normalize(current.value()))
            object.__setattr__(self, f.name, current)
