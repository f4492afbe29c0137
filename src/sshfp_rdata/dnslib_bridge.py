"""Conversion between `SSHFPRecord` and dnslib resource records.

dnslib owns the wire format; this module only maps fields across.
"""
from __future__ import annotations

from dnslib import QTYPE, RR, SSHFP, DNSLabel

from .errors import InvalidArgument
from .records import SSHFPRecord, builder

SSHFP_TYPE: int = QTYPE.SSHFP
OCTET_MAX = 255


def to_rd(record: SSHFPRecord) -> SSHFP:
    """Convert a record into dnslib RDATA.

    Args:
        record: Record whose fingerprint is hex text.

    Returns:
        SSHFP: dnslib RDATA with the fingerprint decoded to bytes.

    Raises:
        InvalidArgument: If algorithm or fptype does not fit in an octet,
            or the fingerprint is not hex.
    """
    for name, value in (("algorithm", record.algorithm), ("fptype", record.fptype)):
        if value > OCTET_MAX:
            raise InvalidArgument(f"{name} of {record.fingerprint} does not fit in an octet")
    try:
        raw = bytes.fromhex(record.fingerprint)
    except ValueError as exc:
        raise InvalidArgument(f"fingerprint {record.fingerprint!r} is not hex") from exc
    return SSHFP(record.algorithm, record.fptype, raw)


def from_rd(rd: SSHFP) -> SSHFPRecord:
    """Build a record from dnslib RDATA; the fingerprint becomes lower-case hex."""
    return builder().algorithm(rd.algorithm).fptype(rd.fp_type).fingerprint(rd.fingerprint.hex()).build()


def to_rr(name: str, record: SSHFPRecord, ttl: int) -> RR:
    """Wrap a record in a dnslib `RR` owned by `name`."""
    return RR(DNSLabel(name), SSHFP_TYPE, rdata=to_rd(record), ttl=ttl)
