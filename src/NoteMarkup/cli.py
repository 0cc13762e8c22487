from __future__ import annotations

import argparse
import logging
from pathlib import Path

from . import yaml_io
from .render import render_document
from .session import load_note, save_note
from .utils import configure_logging, read_text, resolve_output_path, write_text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="notemarkup",
        description="Convert notes between their persisted markup and structured trees.",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    commands = parser.add_subparsers(dest="command", required=True)

    parse_cmd = commands.add_parser("parse", help="Parse a persisted note into YAML")
    parse_cmd.add_argument("input", type=str, help="Path to the persisted note")
    parse_cmd.add_argument("-o", "--output", type=str, help="Output YAML path")
    parse_cmd.add_argument("--tree", action="store_true", help="Write the editor tree instead of blocks")

    save_cmd = commands.add_parser("save", help="Serialize an editor tree (YAML) into a persisted note")
    save_cmd.add_argument("input", type=str, help="Path to the editor tree YAML")
    save_cmd.add_argument("-o", "--output", type=str, help="Output note path")
    save_cmd.add_argument("--title", type=str, help="Override the title stored in the YAML")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)
    input_path = Path(args.input).expanduser()
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")

    if args.command == "parse":
        _parse(input_path, args)
    else:
        _save(input_path, args)


def _parse(input_path: Path, args: argparse.Namespace) -> None:
    output_path = resolve_output_path(input_path, args.output, ".yaml")
    logging.info("Reading %s", input_path)
    persisted = read_text(input_path).rstrip("\n")
    logging.debug("Note length: %d chars", len(persisted))

    logging.info("Parsing markup...")
    title, document = load_note(persisted)
    if args.tree:
        payload = yaml_io.dump_tree(render_document(document), title=title)
    else:
        payload = yaml_io.dump_document(document, title=title)

    write_text(output_path, payload)
    logging.info("Done. Saved to %s", output_path)


def _save(input_path: Path, args: argparse.Namespace) -> None:
    output_path = resolve_output_path(input_path, args.output, ".md")
    logging.info("Reading %s", input_path)
    title, tree = yaml_io.load_tree(read_text(input_path))
    if args.title is not None:
        title = args.title

    logging.info("Serializing tree...")
    persisted = save_note(title, tree)
    write_text(output_path, persisted + "\n" if persisted else "")
    logging.info("Done. Saved to %s", output_path)


if __name__ == "__main__":
    main()
