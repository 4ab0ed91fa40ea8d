"""Columnar decoding of many same-type payloads into numpy structured arrays."""

import logging
from typing import Iterable

import numpy as np

from .errors import TruncatedPayloadError

logger = logging.getLogger(__name__)

# C type -> little-endian numpy type code
_NUMPY_TYPES = {
    "uint8_t": "<u1",
    "int8_t": "<i1",
    "uint16_t": "<u2",
    "int16_t": "<i2",
    "uint32_t": "<u4",
    "int32_t": "<i4",
    "uint64_t": "<u8",
    "int64_t": "<i8",
    "float": "<f4",
    "double": "<f8",
}


def message_dtype(message_cls: type) -> np.dtype:
    """
    Structured dtype matching a message's payload layout.

    Fields appear in wire order with no padding, so ``itemsize`` equals the
    message's ``payload_length``. ``char[N]`` fields map to ``S{N}``; numeric
    arrays become subarray fields of shape ``(N,)``.
    """
    spec = []
    for f in message_cls.WIRE_FIELDS:
        if f.is_text:
            spec.append((f.name, f"S{f.array_length}"))
        elif f.is_array:
            spec.append((f.name, _NUMPY_TYPES[f.base_type], (f.array_length,)))
        else:
            spec.append((f.name, _NUMPY_TYPES[f.base_type]))
    return np.dtype(spec)


def decode_batch(message_cls: type, payloads: Iterable[bytes]) -> np.ndarray:
    """
    Decode many payloads of one message type into a structured array.

    Bytes beyond the payload length are ignored, as in single-message decode.
    Enum fields stay plain integers.

    Args:
        message_cls: Message record class.
        payloads: Payload bytes, one per message.

    Returns:
        Array of shape (len(payloads),) with dtype ``message_dtype(message_cls)``.

    Raises:
        TruncatedPayloadError: If any payload is shorter than the layout.
    """
    dtype = message_dtype(message_cls)
    size = dtype.itemsize

    buffer = bytearray()
    count = 0
    for payload in payloads:
        if len(payload) < size:
            raise TruncatedPayloadError(
                needed=size,
                available=len(payload),
                message_name=message_cls.NAME,
            )
        buffer += payload[:size]
        count += 1

    if count == 0:
        return np.zeros(0, dtype=dtype)

    logger.debug(f"Decoded {count} {message_cls.NAME} payloads as a batch")
    return np.frombuffer(bytes(buffer), dtype=dtype, count=count).copy()
