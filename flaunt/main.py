from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml

from flaunt.collect import collect_problems
from flaunt.config import FlauntConfig, load_config, load_settings
from flaunt.declarations import read_header
from flaunt.languages import comment_prefix_for_extension
from flaunt.render import render_report

logger = logging.getLogger(__name__)


def _existing_path(value: str) -> Path:
    p = Path(value)
    if not p.exists():
        raise argparse.ArgumentTypeError(f"path not found: {value}")
    return p


def _existing_dir(value: str) -> Path:
    p = _existing_path(value)
    if not p.is_dir():
        raise argparse.ArgumentTypeError(f"not a directory: {value}")
    return p


def _existing_file(value: str) -> Path:
    p = _existing_path(value)
    if not p.is_file():
        raise argparse.ArgumentTypeError(f"not a file: {value}")
    return p


def _configure_logging(*, debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="[%(name)s] %(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def _load_config_or_exit(path: Path | None) -> FlauntConfig:
    try:
        return load_config(path)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise SystemExit(f"invalid config {path}: {e}") from e


def _cmd_report(args: argparse.Namespace) -> int:
    folder = Path(args.folder)
    if not folder.is_dir():
        raise SystemExit(f"folder not found: {folder}")
    config = _load_config_or_exit(args.config)

    problems = collect_problems(folder, config=config)
    report = render_report(problems, url_template=config.problem_url)

    if args.output is None:
        sys.stdout.write(report)
        return 0
    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(report, encoding="utf-8")
    logger.info("wrote %s (%d problems)", args.output, len(problems))
    return 0


def _cmd_scan(args: argparse.Namespace) -> int:
    config = _load_config_or_exit(args.config)
    out: dict[str, object] = {}
    for path in args.files:
        prefix = args.prefix or comment_prefix_for_extension(
            path.suffix, overrides=config.comment_prefixes
        )
        content = path.read_text(encoding="utf-8-sig", errors="replace")
        header = read_header(
            content.splitlines(), prefix=prefix, policy=config.declaration_policy
        )
        out[str(path)] = {"declarations": header.declarations, "comment": header.comment}
    print(json.dumps(out, indent=2, sort_keys=True, ensure_ascii=False))
    return 0


def main(argv: list[str] | None = None) -> int:
    settings = load_settings()

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--debug", action="store_true", default=settings.debug, help="log DEBUG to stderr"
    )

    parser = argparse.ArgumentParser(prog="flaunt")
    sub = parser.add_subparsers(dest="cmd", required=True)

    report_p = sub.add_parser(
        "report", parents=[common], help="render the Markdown report for a solutions folder"
    )
    report_p.add_argument(
        "--folder",
        type=_existing_dir,
        default=settings.folder,
        help="folder containing hard/, medium/ and easy/ (default: $FLAUNT_FOLDER or .)",
    )
    report_p.add_argument("--config", type=_existing_file, default=settings.config_path)
    report_p.add_argument("--output", type=Path, default=None, help="write here instead of stdout")

    scan_p = sub.add_parser(
        "scan", parents=[common], help="print the metadata declared in file headers as JSON"
    )
    scan_p.add_argument("files", type=_existing_file, nargs="+")
    scan_p.add_argument("--prefix", type=str, default=None, help="override the comment prefix")
    scan_p.add_argument("--config", type=_existing_file, default=settings.config_path)

    args = parser.parse_args(argv)
    _configure_logging(debug=args.debug)

    if args.cmd == "report":
        return _cmd_report(args)
    if args.cmd == "scan":
        return _cmd_scan(args)

    raise AssertionError(f"unhandled cmd: {args.cmd}")
