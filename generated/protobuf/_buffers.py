# Generated by glide-protogen. DO NOT EDIT.
"""Buffer helpers for byte and string payloads of the generated messages."""

from typing import TypeVar, Union

from google.protobuf.message import Message

_M = TypeVar("_M", bound=Message)

Buffer = Union[bytes, bytearray, memoryview]


def parse(message_type: "type[_M]", data: Buffer) -> _M:
    """Decode ``data`` into a new ``message_type`` instance.

    Any buffer-protocol object is accepted, so a received buffer can be handed
    over as is instead of being copied into ``bytes`` first.
    """
    message = message_type()
    message.ParseFromString(data)
    return message


def payload_view(message: Message, field: str) -> memoryview:
    """Return a read-only view over a ``bytes`` or ``string`` field.

    ``bytes`` fields are viewed in place. ``string`` fields are UTF-8 encoded
    first, so the view is over a new copy of their contents.
    """
    value = getattr(message, field)
    if isinstance(value, str):
        value = value.encode("utf-8")
    if not isinstance(value, bytes):
        raise TypeError(
            f"{type(message).__name__}.{field} is not a bytes or string field"
        )
    return memoryview(value)
