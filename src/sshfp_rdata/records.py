"""SSHFP RDATA value object (RFC 4255)."""
from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, NoReturn

from .errors import InvalidArgument, MissingRequiredField, UnsupportedOperation

ALGORITHM_RSA = 1
ALGORITHM_DSA = 2
FPTYPE_SHA1 = 1

# Stable order for the mapping view.
KEYS: tuple[str, ...] = ("algorithm", "fptype", "fingerprint")


@dataclass(frozen=True)
class SSHFPRecord(Mapping[str, Any]):
    """SSHFP RDATA triple, readable as attributes or as a mapping.

    Instances are validated on construction and immutable afterwards. Obtain
    one through `builder()`, `create_rsa()` or `create_dsa()`.

    Attributes:
        algorithm (int): Public key algorithm, most often 1 (RSA) or 2 (DSA).
        fptype (int): Digest used for the fingerprint, most often 1 (SHA-1).
        fingerprint (str): Fingerprint calculated over the public key blob.
    """

    # _view is derived from the fields; __reduce__ rebuilds it on load.
    __slots__ = ("algorithm", "fptype", "fingerprint", "_view")

    algorithm: int
    fptype: int
    fingerprint: str

    def __post_init__(self) -> None:
        if self.algorithm < 0:
            raise InvalidArgument(f"algorithm of {self.fingerprint} must be unsigned")
        if self.fptype < 0:
            raise InvalidArgument(f"fptype of {self.fingerprint} must be unsigned")
        if self.fingerprint is None:
            raise MissingRequiredField("fingerprint")
        view = dict(zip(KEYS, (self.algorithm, self.fptype, self.fingerprint)))
        object.__setattr__(self, "_view", MappingProxyType(view))

    def __reduce__(self) -> tuple[Any, ...]:
        return type(self), (self.algorithm, self.fptype, self.fingerprint)

    def __getitem__(self, key: str) -> Any:
        return self._view[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._view)

    def __len__(self) -> int:
        return len(self._view)

    def _read_only(self, *args: Any, **kwargs: Any) -> NoReturn:
        raise UnsupportedOperation(f"{type(self).__name__} is read-only")

    __setitem__ = _read_only
    __delitem__ = _read_only
    clear = _read_only
    pop = _read_only
    popitem = _read_only
    setdefault = _read_only
    update = _read_only


class Builder:
    """Stages SSHFP fields; validation is deferred to `build()`.

    Setters return the builder so calls can be chained, and a later call
    overwrites an earlier one. The builder is not safe for concurrent use.
    """

    def __init__(self) -> None:
        self._algorithm = 0
        self._fptype = 0
        self._fingerprint: str | None = None

    def algorithm(self, algorithm: int) -> Builder:
        """See `SSHFPRecord.algorithm`."""
        self._algorithm = algorithm
        return self

    def fptype(self, fptype: int) -> Builder:
        """See `SSHFPRecord.fptype`."""
        self._fptype = fptype
        return self

    def fingerprint(self, fingerprint: str | None) -> Builder:
        """See `SSHFPRecord.fingerprint`."""
        self._fingerprint = fingerprint
        return self

    def build(self) -> SSHFPRecord:
        """Validate the staged fields and return a record.

        Returns:
            SSHFPRecord: Snapshot of the staged values.

        Raises:
            InvalidArgument: If algorithm or fptype is negative.
            MissingRequiredField: If no fingerprint was staged.
        """
        return SSHFPRecord(self._algorithm, self._fptype, self._fingerprint)  # type: ignore[arg-type]


def builder() -> Builder:
    """Return a fresh `Builder`."""
    return Builder()


def create_dsa(fingerprint: str) -> SSHFPRecord:
    """Build a DSA / SHA-1 record.

    Args:
        fingerprint: DSA SHA-1 fingerprint.
    """
    return builder().algorithm(ALGORITHM_DSA).fptype(FPTYPE_SHA1).fingerprint(fingerprint).build()


def create_rsa(fingerprint: str) -> SSHFPRecord:
    """Build an RSA / SHA-1 record.

    Args:
        fingerprint: RSA SHA-1 fingerprint.
    """
    return builder().algorithm(ALGORITHM_RSA).fptype(FPTYPE_SHA1).fingerprint(fingerprint).build()


@dataclass(slots=True)
class ZoneEntry:
    """SSHFP record published under an owner name.

    Attributes:
        name (str): Fully qualified owner name (must end with a dot).
        ttl (int): Time to live, in seconds.
        rdata (SSHFPRecord): Record data.
    """

    name: str
    ttl: int
    rdata: SSHFPRecord
