"""Command-line entry point: split a secret into shares and combine them back."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from secret_sharing.config import SharingConfig, load_config
from secret_sharing.crypto import Secret
from secret_sharing.errors import SecretSharingError
from secret_sharing.share import ENCODINGS, Share, loads_share
from secret_sharing.utils import configure_logging, get_logger

logger = get_logger("cli")

EXIT_USAGE_ERROR = 1
EXIT_SHARING_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="secret-sharing",
        description="Split a secret into Shamir shares over GF(256) and combine them back",
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to a JSON config file")
    parser.add_argument("--log-level", default=None, help="Logging level (default: from config, INFO)")
    parser.add_argument("--json-logs", action="store_true", default=None, help="Emit logs as JSON")
    sub = parser.add_subparsers(dest="command", required=True)

    split = sub.add_parser("split", help="Split a secret into shares")
    split.add_argument("-t", "--threshold", type=int, default=None, help="Shares required to reconstruct")
    split.add_argument("-n", "--shares", type=int, default=None, help="Number of shares to create")
    split.add_argument("-i", "--input", type=Path, default=None, help="Secret file (default: stdin)")
    split.add_argument("--encoding", choices=ENCODINGS, default=None, help="Share encoding")
    split.add_argument("-o", "--output-dir", type=Path, default=None, help="Write one file per share here")

    combine = sub.add_parser("combine", help="Combine shares into the secret")
    combine.add_argument(
        "share_texts", metavar="SHARE", nargs="*", help="Text shares (default: one per line on stdin)"
    )
    combine.add_argument(
        "-f",
        "--share-file",
        type=Path,
        action="append",
        default=[],
        help="Binary share file; may be repeated",
    )
    combine.add_argument("-o", "--output", type=Path, default=None, help="Secret file (default: stdout)")
    return parser


def _run_split(args: argparse.Namespace, config: SharingConfig) -> None:
    if config.encoding == "binary" and args.output_dir is None:
        raise ValueError("binary encoding requires --output-dir")
    data = args.input.read_bytes() if args.input else sys.stdin.buffer.read()
    shares = Secret(data, threshold=config.threshold, shares=config.shares).split()
    if args.output_dir is None:
        for share in shares:
            print(share)
        return
    args.output_dir.mkdir(parents=True, exist_ok=True)
    for share in shares:
        if config.encoding == "binary":
            (args.output_dir / f"share-{share.index:03d}.bin").write_bytes(share.to_bytes())
        else:
            (args.output_dir / f"share-{share.index:03d}.txt").write_text(f"{share}\n")
    logger.info("Wrote %d shares to %s", len(shares), args.output_dir)


def _collect_shares(args: argparse.Namespace) -> List[Share]:
    texts = list(args.share_texts)
    if not texts and not args.share_file:
        texts = [line for line in sys.stdin.read().splitlines() if line.strip()]
    shares = [loads_share(text) for text in texts]
    shares.extend(loads_share(path.read_bytes()) for path in args.share_file)
    return shares


def _run_combine(args: argparse.Namespace) -> None:
    shares = _collect_shares(args)
    secret = Secret.combine(shares)
    if args.output:
        args.output.write_bytes(secret)
        logger.info("Wrote %d-byte secret to %s", len(secret), args.output)
    else:
        sys.stdout.buffer.write(secret)
        sys.stdout.flush()


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        config, _ = load_config(args.config)
        config = config.override(
            threshold=getattr(args, "threshold", None),
            shares=getattr(args, "shares", None),
            encoding=getattr(args, "encoding", None),
            log_level=args.log_level,
            json_logs=args.json_logs,
        )
        configure_logging(level=config.log_level, json_output=config.json_logs)
        if args.command == "split":
            _run_split(args, config)
        else:
            _run_combine(args)
    except SecretSharingError as exc:
        logger.error("%s: %s", type(exc).__name__, exc)
        return EXIT_SHARING_ERROR
    except (OSError, ValueError) as exc:
        logger.error("%s", exc)
        return EXIT_USAGE_ERROR
    return 0


if __name__ == "__main__":
    sys.exit(main())
