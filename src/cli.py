"""Command-line interface for doclinks."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import orjson

from contract.validation import validate_metadata
from markup.tree import MarkupError, from_data, to_data
from markup.walker import link_markup
from refs.metadata import MetadataError
from rules.config import ConfigError, load_config, resolve_metadata_path
from session import open_session
from typespec.linkify import linkify_signature


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--root",
        default=".",
        help="Project root holding doclinks.toml (default: .)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )


def _add_context_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--module",
        default=None,
        help="Container being documented (local references resolve against it)",
    )
    parser.add_argument(
        "--id",
        default=None,
        help="Id of the documented item, used in diagnostics",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="doclinks")
    subparsers = parser.add_subparsers(dest="command", required=True)

    resolve_parser = subparsers.add_parser(
        "resolve", help="Resolve one reference to a URL"
    )
    resolve_parser.add_argument("ref", help="Reference text, e.g. String.upcase/2")
    resolve_parser.add_argument(
        "--custom-link",
        action="store_true",
        help="Parse as an explicit link target rather than inline code",
    )
    _add_common_options(resolve_parser)
    _add_context_options(resolve_parser)

    link_parser = subparsers.add_parser(
        "link", help="Autolink a JSON markup tree ('-' reads stdin)"
    )
    link_parser.add_argument("file", help="JSON markup tree file")
    _add_common_options(link_parser)
    _add_context_options(link_parser)

    typespec_parser = subparsers.add_parser(
        "typespec", help="Autolink a formatted type signature"
    )
    typespec_parser.add_argument("signature", help="Formatted signature text")
    _add_common_options(typespec_parser)
    _add_context_options(typespec_parser)

    validate_parser = subparsers.add_parser(
        "validate", help="Validate the metadata artifact"
    )
    validate_parser.add_argument(
        "file",
        nargs="?",
        default=None,
        help="Metadata file (default: config metadata path)",
    )
    validate_parser.add_argument(
        "--strict",
        action="store_true",
        help="Treat a missing schema_version as an error",
    )
    _add_common_options(validate_parser)

    return parser


def _log_level(verbose: bool) -> int:
    return logging.DEBUG if verbose else logging.INFO


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=_log_level(verbose),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _handle_resolve(root: Path, args: argparse.Namespace) -> int:
    session = open_session(root=root)
    context = session.context(args.module, id=args.id)
    mode = "custom_link" if args.custom_link else "regular"
    url = session.resolver.resolve_text(args.ref, context, mode)
    if url is None:
        return 1
    sys.stdout.write(f"{url}\n")
    return 0


def _handle_link(root: Path, args: argparse.Namespace) -> int:
    if args.file == "-":
        raw = sys.stdin.buffer.read()
    else:
        raw = Path(args.file).read_bytes()
    nodes = from_data(orjson.loads(raw))

    session = open_session(root=root)
    context = session.context(args.module, id=args.id)
    linked = link_markup(nodes, session.resolver, context)
    sys.stdout.write(orjson.dumps(to_data(linked)).decode("utf-8"))
    sys.stdout.write("\n")
    return 0


def _handle_typespec(root: Path, args: argparse.Namespace) -> int:
    session = open_session(root=root)
    context = session.context(args.module, id=args.id)
    sys.stdout.write(linkify_signature(args.signature, session.resolver, context))
    sys.stdout.write("\n")
    return 0


def _handle_validate(root: Path, args: argparse.Namespace) -> int:
    if args.file is None:
        config = load_config(root)
        path = resolve_metadata_path(root, config.metadata)
    else:
        path = Path(args.file).expanduser().resolve()

    result = validate_metadata(path, strict_schema_version=args.strict)
    for warning in result.warnings:
        sys.stderr.write(f"{warning.location()}: warning: {warning.message}\n")
    if result.errors:
        for error in result.errors:
            sys.stderr.write(f"{error.location()}: {error.message}\n")
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    root = Path(args.root).expanduser().resolve()

    handlers = {
        "resolve": _handle_resolve,
        "link": _handle_link,
        "typespec": _handle_typespec,
        "validate": _handle_validate,
    }
    handler = handlers.get(args.command)
    if handler is None:
        raise AssertionError(args.command)

    try:
        return handler(root, args)
    except (ConfigError, MetadataError, MarkupError) as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2
    except (OSError, orjson.JSONDecodeError) as exc:
        sys.stderr.write(f"error: {exc}\n")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
