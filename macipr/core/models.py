# macipr/core/models.py
from enum import Enum
from typing import Iterator, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class AddressKind(str, Enum):
    """The value domains an argument can be parsed into."""
    MAC = "mac"
    IPV4 = "ipv4"
    IPV6 = "ipv6"
    NUMBER = "number"

    @property
    def width(self) -> int:
        return ADDRESS_WIDTHS[self]

    @property
    def modulus(self) -> int:
        return 1 << ADDRESS_WIDTHS[self]


ADDRESS_WIDTHS = {
    AddressKind.MAC: 48,
    AddressKind.IPV4: 32,
    AddressKind.IPV6: 128,
    AddressKind.NUMBER: 64,
}


class Direction(str, Enum):
    FORWARD = "forward"
    BACKWARD = "backward"

    @property
    def step(self) -> int:
        return 1 if self is Direction.FORWARD else -1


class AddressValue(BaseModel):
    """
    A fixed-width unsigned integer tagged with the kind of address it holds.
    The integer always lies in [0, 2**width).
    """
    model_config = ConfigDict(frozen=True)

    kind: AddressKind
    value: int

    @model_validator(mode="after")
    def _check_width(self) -> "AddressValue":
        if not 0 <= self.value < self.kind.modulus:
            raise ValueError(
                f"{self.value} does not fit in {self.kind.width} bits ({self.kind.value})"
            )
        return self


class AddressCycle(BaseModel):
    """
    The resolved form of one range argument: `count` values starting at
    `start` and stepping once per row in `direction`, wrapping modulo the
    kind's width. After `count` values the cycle starts over.
    """
    model_config = ConfigDict(frozen=True)

    start: AddressValue
    direction: Direction = Direction.FORWARD
    count: int = 1

    @field_validator("count")
    @classmethod
    def _check_count(cls, count: int) -> int:
        # may exceed 2**64 for IPv6 spans
        if count < 1:
            raise ValueError(f"count must be at least 1, got {count}")
        return count

    @property
    def kind(self) -> AddressKind:
        return self.start.kind

    def value_at(self, index: int) -> AddressValue:
        """Returns the value emitted at `index` (taken modulo `count`)."""
        index %= self.count
        value = (self.start.value + self.direction.step * index) % self.kind.modulus
        return AddressValue(kind=self.kind, value=value)

    def values(self) -> Iterator[AddressValue]:
        """Yields one full pass over the cycle."""
        for index in range(self.count):
            yield self.value_at(index)


# --- Format tokens ---

class DirectiveKind(str, Enum):
    MAC = "m"
    IPV4 = "i"
    IPV6 = "x"
    IPV6_FULL = "X"

    @property
    def address_kind(self) -> AddressKind:
        if self is DirectiveKind.MAC:
            return AddressKind.MAC
        if self is DirectiveKind.IPV4:
            return AddressKind.IPV4
        return AddressKind.IPV6


class PadChar(str, Enum):
    SPACE = " "
    ZERO = "0"


class LiteralText(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str


class PercentLiteral(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str = "%"


class AddressDirective(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: DirectiveKind

    @property
    def address_kind(self) -> AddressKind:
        return self.kind.address_kind


class NumberDirective(BaseModel):
    """`%n`: a plain decimal number, optionally padded to `pad_width`."""
    model_config = ConfigDict(frozen=True)

    pad_width: int = Field(default=0, ge=0)
    pad_char: PadChar = PadChar.SPACE

    @property
    def address_kind(self) -> AddressKind:
        return AddressKind.NUMBER


Directive = Union[AddressDirective, NumberDirective]
FormatToken = Union[LiteralText, PercentLiteral, AddressDirective, NumberDirective]
