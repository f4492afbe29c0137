"""CLI for inspecting SSHFP records."""
from __future__ import annotations

import argparse
import json
import logging
import sys

from .config import Zone
from .interchange import to_presentation
from .records import ZoneEntry, create_dsa, create_rsa

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        argparse.Namespace: Parsed CLI options:
            - config (str): Path to YAML config file.
            - name (str | None): Owner name filter.
            - rsa / dsa (str | None): Fingerprint for a one-off record.
            - format (str): Output format.
            - log_level (str): Logging level.
    """
    parser = argparse.ArgumentParser(
        description="Print SSHFP records (YAML-backed)",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--config", default="config.yaml", help="Path to YAML config")
    parser.add_argument("--name", help="Only print records owned by this FQDN")
    single = parser.add_mutually_exclusive_group()
    single.add_argument("--rsa", metavar="FINGERPRINT", help="Print an RSA/SHA-1 record instead of reading the config")
    single.add_argument("--dsa", metavar="FINGERPRINT", help="Print a DSA/SHA-1 record instead of reading the config")
    parser.add_argument("--format", default="text", choices=["text", "json"], help="Output format")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level",
    )
    return parser.parse_args(argv)


def render(entries: list[ZoneEntry], fmt: str) -> str:
    """Render entries as zone-file lines or a JSON list."""
    if fmt == "json":
        return json.dumps([{"name": e.name, "ttl": e.ttl, **e.rdata} for e in entries], indent=2)
    return "\n".join(f"{e.name} {e.ttl} IN SSHFP {to_presentation(e.rdata)}" for e in entries)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI entry point.

    Returns:
        int: Process exit status.
    """
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.rsa is not None or args.dsa is not None:
            rdata = create_rsa(args.rsa) if args.rsa is not None else create_dsa(args.dsa)
            entries = [ZoneEntry(name=args.name or "@", ttl=0, rdata=rdata)]
        else:
            zone = Zone(args.config)
            entries = zone.lookup(args.name) if args.name else zone.entries
    except (ValueError, OSError) as exc:
        logger.error("%s", exc)
        return 1

    output = render(entries, args.format)
    if output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
