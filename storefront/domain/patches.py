# storefront/domain/patches.py
from dataclasses import dataclass
from typing import Any, Mapping, Union


class InvalidField(ValueError):
    """Raised when a patch names a field that cannot be updated."""

    def __init__(self, field: str, reason: str = "unknown field"):
        super().__init__(f"Invalid field: {field} ({reason})")
        self.field = field
        self.reason = reason


@dataclass(frozen=True)
class SetPassword:
    value: str

    def __repr__(self) -> str:
        return "SetPassword(value='***')"


@dataclass(frozen=True)
class SetName:
    value: str


PatchOp = Union[SetPassword, SetName]

_FIELDS = {
    "password": SetPassword,
    "name": SetName,
}


def parse_patch(updates: Mapping[str, Any]) -> list[PatchOp]:
    """
    Turn a raw ``{field: value}`` mapping into patch operations.

    Keys are taken in the mapping's own order. The whole mapping is rejected
    on the first unknown key or non-string value, so nothing is built for a
    partially valid patch.
    """
    ops: list[PatchOp] = []
    for key, value in updates.items():
        op_type = _FIELDS.get(key)
        if op_type is None:
            raise InvalidField(key)
        if not isinstance(value, str):
            raise InvalidField(key, "expected a string value")
        ops.append(op_type(value))
    return ops
