"""Generic key/value and presentation-format conversions for SSHFP RDATA."""
from __future__ import annotations

from collections.abc import Iterator, KeysView, Mapping
from typing import Any, Protocol, runtime_checkable

from .errors import InvalidArgument
from .records import SSHFPRecord, builder


@runtime_checkable
class GenericAttributeView(Protocol):
    """RDATA that can be read as a string-keyed mapping.

    Serialization layers use this to treat different RDATA shapes uniformly.
    """

    def __getitem__(self, key: str) -> Any: ...

    def __iter__(self) -> Iterator[str]: ...

    def __len__(self) -> int: ...

    def keys(self) -> KeysView[str]: ...


def _as_int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key, 0)
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        raise InvalidArgument(f"{key} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(f"{key} must be an integer, got {value!r}") from exc


def from_mapping(data: Mapping[str, Any]) -> SSHFPRecord:
    """Build a record from a generic ``algorithm``/``fptype``/``fingerprint`` mapping.

    Keys other than those three are ignored. Absent integer keys behave like
    an unset builder field (0); an absent fingerprint fails in `build()`.

    Args:
        data: Mapping such as a decoded JSON object or another record.

    Returns:
        SSHFPRecord: Validated record.

    Raises:
        InvalidArgument: If an integer field is not numeric or is negative.
        MissingRequiredField: If ``fingerprint`` is absent or None.
    """
    fingerprint = data.get("fingerprint")
    return (
        builder()
        .algorithm(_as_int(data, "algorithm"))
        .fptype(_as_int(data, "fptype"))
        .fingerprint(None if fingerprint is None else str(fingerprint))
        .build()
    )


def to_presentation(record: SSHFPRecord) -> str:
    """Render RDATA in zone-file form, e.g. ``"2 1 123456789abcdef"``."""
    return f"{record.algorithm} {record.fptype} {record.fingerprint}"


def parse_presentation(text: str) -> SSHFPRecord:
    """Parse zone-file RDATA text.

    The fingerprint may be split over several whitespace separated chunks, as
    zone files allow; the chunks are joined.

    Raises:
        InvalidArgument: If the text does not hold two integers and a fingerprint.
    """
    parts = text.split()
    if len(parts) < 3:
        raise InvalidArgument(f"expected '<algorithm> <fptype> <fingerprint>', got {text!r}")
    return from_mapping({"algorithm": parts[0], "fptype": parts[1], "fingerprint": "".join(parts[2:])})
