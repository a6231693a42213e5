from typing import Any, Generic, TypeVar

from ghrest.errors import ValueNotPresentError

T = TypeVar("T")


def _hash_key(value: Any) -> Any:
    # lists and dicts hash by content so equal holders hash alike
    if isinstance(value, (list, tuple)):
        return tuple(_hash_key(v) for v in value)
    if isinstance(value, dict):
        return frozenset((k, _hash_key(v)) for k, v in value.items())
    return value


class Opt(Generic[T]):
    """
    A field holder that is either absent or present(value).

    Absent means "not sent / not received". Present always carries a value,
    including zero values like 0, "" or False, so the two cases never collapse
    into each other when a record is encoded.
    """

    __slots__ = ("_present", "_value")

    def __init__(self, is_present: bool = False, value: Any = None):
        object.__setattr__(self, "_present", bool(is_present))
        object.__setattr__(self, "_value", value if is_present else None)

    def __setattr__(self, name, value):
        raise AttributeError("Opt is immutable")

    def is_present(self) -> bool:
        return self._present

    def value(self) -> T:
        if not self._present:
            raise ValueNotPresentError("optional field has no value")
        return self._value

    def get(self, default=None):
        return self._value if self._present else default

    def __bool__(self) -> bool:
        # truthiness is presence, never the held value
        return self._present

    def __eq__(self, other) -> bool:
        if not isinstance(other, Opt):
            return NotImplemented
        return self._present == other._present and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._present, _hash_key(self._value)))

    def __repr__(self) -> str:
        if self._present:
            return f"present({self._value!r})"
        return "absent()"


ABSENT: Opt = Opt()


def present(value: T) -> Opt[T]:
    return Opt(True, value)


def absent() -> Opt:
    return ABSENT
