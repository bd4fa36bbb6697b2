"""CLI tool for avatarlink."""

from __future__ import annotations

import argparse
import logging
import sys

from avatarlink.config import config
from avatarlink.exceptions import InvalidRenderOptionError
from avatarlink.generator import Generator, hash_email
from avatarlink.logging_config import configure_logging

logger = logging.getLogger("avatarlink.cli")


def build_generator(
    base_url: str | None = None,
    host: str | None = None,
    extension: str | None = None,
) -> Generator:
    """Build a generator from CLI flags, falling back to the configuration."""
    generator = config.generator()
    if host:
        generator = Generator.for_host(host, file_extension=generator.file_extension)
    elif base_url:
        generator = generator.with_base_url(base_url)
    if extension is not None:
        generator = generator.with_file_extension(extension)
    return generator


def print_url(args: argparse.Namespace) -> None:
    generator = build_generator(args.base_url, args.host, args.extension)
    options = config.render_options(
        default=args.default,
        rating=args.rating,
        size=args.size,
        force_default=args.force_default,
    )
    logger.debug("Using base URL %s with options %s", generator.base_url, options)
    print(generator.generate_with_options(args.email, options))


def print_hash(args: argparse.Namespace) -> None:
    print(hash_email(args.email))


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Gravatar URL generator.")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # url
    url_parser = subparsers.add_parser("url", help="Print the avatar URL")
    url_parser.add_argument("email", help="Email address")
    target = url_parser.add_mutually_exclusive_group()
    target.add_argument("--base-url", help="Base URL the hash is appended to")
    target.add_argument(
        "--host", help="Gravatar compatible host, e.g. cdn.libravatar.org"
    )
    url_parser.add_argument("--default", help="Default image or fallback URL")
    url_parser.add_argument("--rating", help="Maximum rating (g, pg, r, x)")
    url_parser.add_argument("--size", type=int, help="Image size in pixels (1-2048)")
    url_parser.add_argument(
        "--force-default",
        action="store_true",
        help="Always return the default image",
    )
    url_parser.add_argument("--extension", help="File extension, e.g. .jpg")
    url_parser.set_defaults(handler=print_url)

    # hash
    hash_parser = subparsers.add_parser("hash", help="Print the email hash")
    hash_parser.add_argument("email", help="Email address")
    hash_parser.set_defaults(handler=print_hash)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(debug=args.debug or config.DEBUG)

    try:
        args.handler(args)
    except InvalidRenderOptionError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
