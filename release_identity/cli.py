from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List

from .config import config_with_defaults, load_config_file
from .errors import ReleaseIdentityError
from .logging_config import setup_logging
from .metadata import GitBranchClassifier, load_metadata
from .signals import signals_from_env

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _format_env(payload: Dict[str, Any], config: Dict[str, Any]) -> str:
    cfg = config_with_defaults(config)
    lines: List[str] = [
        f"{cfg['permalink_env_var']}={payload['permalink']}",
        f"{cfg['version_env_var']}={payload['version']}",
        f"COMMIT={payload['commit']}",
        f"IS_TAGGED_RELEASE={str(payload['is_tagged_release']).lower()}",
        f"SHOULD_PUBLISH_PERMALINK={str(payload['should_publish_permalink']).lower()}",
    ]
    return "\n".join(lines)


def _write_output(text: str, *, out_path: str | None) -> None:
    if out_path:
        Path(out_path).write_text(text + "\n", encoding="utf-8")
    else:
        print(text)


def cmd_resolve(args: argparse.Namespace) -> int:
    config = load_config_file(args.config)
    metadata = load_metadata(cwd=args.repo, config=config, export=args.export)
    payload = metadata.to_dict()

    if args.format == "json":
        text = json.dumps(payload, indent=2)
    elif args.format == "env":
        text = _format_env(payload, config)
    else:
        raise ValueError(f"Unknown format: {args.format}")

    _write_output(text, out_path=args.out)
    return 0


def cmd_branch(args: argparse.Namespace) -> int:
    channel = GitBranchClassifier(args.repo).classify(signals_from_env())
    print(channel)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="release-identity",
        description="Derive the version, commit and permalink of the current build.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--repo", default=None, help="Path to the git working copy (default: current directory).")
    common.add_argument("--log-level", choices=LOG_LEVELS, default="INFO", type=str.upper, help="Log level for stderr output.")

    r = sub.add_parser("resolve", parents=[common], help="Print the release metadata of the working copy.")
    r.add_argument("--config", help="Path to config YAML/JSON file (optional).", default=None)
    r.add_argument("--format", choices=["json", "env"], default="json", help="Output format.")
    r.add_argument("--out", default=None, help="Write output to a file instead of stdout.")
    r.add_argument("--export", action="store_true", help="Export PERMALINK and VERSION to the CI build provider.")
    r.set_defaults(func=cmd_resolve)

    b = sub.add_parser("branch", parents=[common], help="Print the channel: main, v*, or dev.")
    b.set_defaults(func=cmd_branch)

    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        return int(args.func(args))
    except ReleaseIdentityError as exc:
        print(str(exc), file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
