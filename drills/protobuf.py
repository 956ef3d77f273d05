"""A small decoder for the protobuf wire format."""

from __future__ import annotations

import argparse
import enum
from dataclasses import dataclass, field
from typing import Protocol, Sequence, TypeVar, Union

_MAX_VARINT_BYTES = 7


class ProtoError(ValueError):
    """Raised when protobuf data cannot be decoded."""


class WireType(enum.IntEnum):
    """A wire type as seen on the wire."""

    #: The value is a single varint.
    VARINT = 0
    #: The value is a varint length followed by exactly that many bytes.
    LEN = 2
    #: The value is four little-endian bytes holding a signed 32-bit integer.
    I32 = 5


@dataclass(frozen=True)
class FieldValue:
    """A field's value, typed by its wire type."""

    wire_type: WireType
    value: Union[int, bytes]

    def as_bytes(self) -> bytes:
        """Return the raw bytes of a length-delimited value."""
        if self.wire_type is not WireType.LEN:
            raise ProtoError("Unexpected wire-type")
        return bytes(self.value)

    def as_string(self) -> str:
        """Return a length-delimited value decoded as UTF-8."""
        data = self.as_bytes()
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as error:
            raise ProtoError("Invalid string (not UTF-8)") from error

    def as_u64(self) -> int:
        """Return the integer of a varint value."""
        if self.wire_type is not WireType.VARINT:
            raise ProtoError("Unexpected wire-type")
        return int(self.value)


@dataclass(frozen=True)
class Field:
    """A field number together with its value."""

    field_num: int
    value: FieldValue


class ProtoMessage(Protocol):
    """A message type that can be built up one field at a time."""

    def add_field(self, field: Field) -> None:
        ...


M = TypeVar("M", bound=ProtoMessage)


def parse_varint(data: bytes) -> tuple[int, bytes]:
    """Parse a varint, returning its value and the remaining bytes."""
    data = bytes(data)
    for index, byte in enumerate(data[:_MAX_VARINT_BYTES]):
        if not byte & 0x80:
            value = 0
            for part in reversed(data[: index + 1]):
                value = (value << 7) | (part & 0x7F)
            return value, data[index + 1 :]
    raise ProtoError("Invalid varint")


def unpack_tag(tag: int) -> tuple[int, WireType]:
    """Split a tag into its field number and wire type."""
    try:
        wire_type = WireType(tag & 0x7)
    except ValueError as error:
        raise ProtoError("Invalid wire-type") from error
    return tag >> 3, wire_type


def parse_field(data: bytes) -> tuple[Field, bytes]:
    """Parse one field, returning it and the remaining bytes."""
    tag, remainder = parse_varint(data)
    field_num, wire_type = unpack_tag(tag)
    if wire_type is WireType.VARINT:
        value, remainder = parse_varint(remainder)
        field_value = FieldValue(wire_type, value)
    elif wire_type is WireType.LEN:
        length, remainder = parse_varint(remainder)
        if len(remainder) < length:
            raise ProtoError("Unexpected EOF")
        field_value = FieldValue(wire_type, remainder[:length])
        remainder = remainder[length:]
    else:
        if len(remainder) < 4:
            raise ProtoError("Unexpected EOF")
        number = int.from_bytes(remainder[:4], "little", signed=True)
        field_value = FieldValue(wire_type, number)
        remainder = remainder[4:]
    return Field(field_num, field_value), remainder


def parse_message(data: bytes, message_type: type[M]) -> M:
    """Parse all of ``data`` into a new ``message_type``, field by field."""
    result = message_type()
    remainder = bytes(data)
    while remainder:
        parsed, remainder = parse_field(remainder)
        result.add_field(parsed)
    return result


@dataclass
class PhoneNumber:
    """A phone number and the kind of phone it belongs to."""

    number: str = ""
    kind: str = ""

    def add_field(self, field: Field) -> None:
        """Store a decoded field; unknown fields are skipped."""
        if field.field_num == 1:
            self.number = field.value.as_string()
        elif field.field_num == 2:
            self.kind = field.value.as_string()


@dataclass
class Person:
    """A person with a name, an id and any number of phone numbers."""

    name: str = ""
    id: int = 0
    phone: list[PhoneNumber] = field(default_factory=list)

    def add_field(self, field: Field) -> None:
        """Store a decoded field; unknown fields are skipped."""
        if field.field_num == 1:
            self.name = field.value.as_string()
        elif field.field_num == 2:
            self.id = field.value.as_u64()
        elif field.field_num == 3:
            self.phone.append(parse_message(field.value.as_bytes(), PhoneNumber))


_EXAMPLE = bytes(
    [
        0x0A, 0x07, 0x6D, 0x61, 0x78, 0x77, 0x65, 0x6C, 0x6C, 0x10, 0x2A, 0x1A,
        0x16, 0x0A, 0x0E, 0x2B, 0x31, 0x32, 0x30, 0x32, 0x2D, 0x35, 0x35, 0x35,
        0x2D, 0x31, 0x32, 0x31, 0x32, 0x12, 0x04, 0x68, 0x6F, 0x6D, 0x65, 0x1A,
        0x18, 0x0A, 0x0E, 0x2B, 0x31, 0x38, 0x30, 0x30, 0x2D, 0x38, 0x36, 0x37,
        0x2D, 0x35, 0x33, 0x30, 0x38, 0x12, 0x06, 0x6D, 0x6F, 0x62, 0x69, 0x6C,
        0x65,
    ]
)


def main(argv: Sequence[str] | None = None) -> int:
    """Decode a person message given in hex, or the built-in example, and print it."""
    parser = argparse.ArgumentParser(description="Decode a Person message.")
    parser.add_argument(
        "hex",
        nargs="?",
        help="the encoded message as hexadecimal digits (default: an example)",
    )
    args = parser.parse_args(argv)
    if args.hex is None:
        data = _EXAMPLE
    else:
        try:
            data = bytes.fromhex(args.hex)
        except ValueError:
            parser.error(f"not hexadecimal: {args.hex!r}")
    try:
        person = parse_message(data, Person)
    except ProtoError as error:
        print(f"error: {error}")
        return 1
    print(person)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())