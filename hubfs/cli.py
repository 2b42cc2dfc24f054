"""
hubfs CLI - Command line interface for the GitHub filesystem adapter.
"""

import os
import sys
import logging
import argparse
from typing import Optional

from .adapter import GithubAdapter
from .client import GitHubClient
from .config import Config
from .settings import Settings, BRANCH_MASTER, REFERENCE_HEAD


def get_adapter(args) -> GithubAdapter:
    """Get GithubAdapter instance for the parsed arguments."""
    settings = Settings(
        args.repo,
        credentials=("token", args.token) if args.token else (),
        branch=args.branch or BRANCH_MASTER,
        reference=args.ref or REFERENCE_HEAD,
    )
    return GithubAdapter(GitHubClient.from_settings(settings), settings)


def cmd_ls(args):
    """List directory contents."""
    adapter = get_adapter(args)

    for entry in adapter.list_contents(args.path or "", recursive=args.recursive):
        suffix = "/" if entry["type"] == "dir" else ""
        print(f"{entry['path']}{suffix}")


def cmd_cat(args):
    """Display file contents."""
    adapter = get_adapter(args)

    try:
        data = adapter.read(args.path)
    except IsADirectoryError:
        print(f"Error: {args.path} is a directory", file=sys.stderr)
        sys.exit(1)

    sys.stdout.buffer.write(data["contents"])
    sys.stdout.flush()


def cmd_write(args):
    """Write content to a file (creates or updates)."""
    adapter = get_adapter(args)

    # Read content from stdin or argument
    if args.content is not None:
        content = args.content
    else:
        content = sys.stdin.read()

    config = Config()
    if args.message:
        config.set("message", args.message)

    if adapter.has(args.path):
        result = adapter.update(args.path, content, config)
    else:
        result = adapter.write(args.path, content, config)

    print(f"Successfully wrote to {args.path} ({result['commit']['sha'][:7]})")


def cmd_rm(args):
    """Delete a file."""
    adapter = get_adapter(args)

    config = Config()
    if args.message:
        config.set("message", args.message)

    adapter.delete(args.path, config)
    print(f"Deleted {args.path}")


def cmd_exists(args):
    """Check if path exists."""
    adapter = get_adapter(args)

    exists = adapter.has(args.path)

    if args.quiet:
        sys.exit(0 if exists else 1)
    else:
        if exists:
            print(f"✓ {args.path} exists")
        else:
            print(f"✗ {args.path} does not exist")
            sys.exit(1)


def cmd_info(args):
    """Display file metadata."""
    adapter = get_adapter(args)

    size = adapter.get_size(args.path)
    if size is False:
        print("Type: dir")
        print(f"Path: {args.path}")
    else:
        print(f"Type: {size['type']}")
        print(f"Path: {size['path']}")
        print(f"Size: {size['size']}")
        print(f"Mimetype: {adapter.get_mimetype(args.path)['mimetype']}")

    timestamp = adapter.get_timestamp(args.path)
    if timestamp:
        print(f"Timestamp: {timestamp['timestamp']}")
    print(f"Visibility: {adapter.get_visibility(args.path)}")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="hubfs",
        description="hubfs - Filesystem adapter for GitHub repositories",
    )
    parser.add_argument(
        "--token",
        "-t",
        help="GitHub token (or set GITHUB_TOKEN env var)",
        default=os.environ.get("GITHUB_TOKEN"),
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version="%(prog)s 0.1.0",
    )

    # Shared repository options
    repo_args = argparse.ArgumentParser(add_help=False)
    repo_args.add_argument("repo", help="Repository (owner/repo)")
    repo_args.add_argument("--branch", "-b", help="Branch to commit to")
    repo_args.add_argument("--ref", "-r", help="Reference to read from")

    subparsers = parser.add_subparsers(dest="command", required=True)

    # ls command
    ls_parser = subparsers.add_parser("ls", parents=[repo_args], help="List directory contents")
    ls_parser.add_argument("path", nargs="?", help="Path to list")
    ls_parser.add_argument("--recursive", "-R", action="store_true", help="List recursively")
    ls_parser.set_defaults(func=cmd_ls)

    # cat command
    cat_parser = subparsers.add_parser("cat", parents=[repo_args], help="Display file contents")
    cat_parser.add_argument("path", help="File path")
    cat_parser.set_defaults(func=cmd_cat)

    # write command
    write_parser = subparsers.add_parser("write", parents=[repo_args], help="Write to a file")
    write_parser.add_argument("path", help="File path")
    write_parser.add_argument("--content", "-c", help="Content to write")
    write_parser.add_argument("--message", "-m", help="Commit message")
    write_parser.set_defaults(func=cmd_write)

    # rm command
    rm_parser = subparsers.add_parser("rm", parents=[repo_args], help="Delete a file")
    rm_parser.add_argument("path", help="File path")
    rm_parser.add_argument("--message", "-m", help="Commit message")
    rm_parser.set_defaults(func=cmd_rm)

    # exists command
    exists_parser = subparsers.add_parser("exists", parents=[repo_args], help="Check if path exists")
    exists_parser.add_argument("path", help="Path to check")
    exists_parser.add_argument("--quiet", "-q", action="store_true")
    exists_parser.set_defaults(func=cmd_exists)

    # info command
    info_parser = subparsers.add_parser("info", parents=[repo_args], help="Display file metadata")
    info_parser.add_argument("path", help="Path to inspect")
    info_parser.set_defaults(func=cmd_info)

    return parser


def main(argv: Optional[list] = None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Only an invalid repository id exits with 2
    try:
        Settings(args.repo)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    try:
        args.func(args)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
