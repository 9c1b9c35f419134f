#!/usr/bin/env python3
"""CLI entry point for cidispatch.

Usage:
    python -m cidispatch <command> [options]
    cidispatch <command> [options]

Commands:
    parse-comment   Print the /ci targets found in a comment
    dispatch        Trigger CI workflows for explicit targets
    handle-comment  Handle an issue_comment event containing /ci commands
    update-comment  Create or update a marker-tagged PR comment
"""

from __future__ import annotations

import argparse
import sys

from cidispatch.commands import (
    cmd_dispatch,
    cmd_handle_comment,
    cmd_parse_comment,
    cmd_update_comment,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cidispatch",
        description="Trigger GitHub Actions workflows from /ci PR comment commands",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  parse-comment   Print the /ci targets found in a comment
  dispatch        Trigger CI workflows for explicit targets
  handle-comment  Handle an issue_comment event containing /ci commands
  update-comment  Create or update a marker-tagged PR comment

Examples:
  echo "/ci api" | cidispatch parse-comment
  cidispatch dispatch --target api --target frontend --ref feature/x --pr-number 123 --repo owner/repo
  cidispatch handle-comment --event-file "$GITHUB_EVENT_PATH"
  cidispatch update-comment --identifier ci-status --body "All green" --pr-number 123
        """,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # parse-comment command
    parser_parse = subparsers.add_parser(
        "parse-comment",
        help="Print the /ci targets found in a comment",
    )
    body_group = parser_parse.add_mutually_exclusive_group()
    body_group.add_argument(
        "--body",
        help="Comment text. If neither --body nor --body-file is given, reads from stdin",
    )
    body_group.add_argument(
        "--body-file",
        help="Path to a file containing the comment text",
    )
    parser_parse.add_argument(
        "--targets-file",
        help="YAML file mapping targets to workflow files (default: CI_TARGETS_FILE)",
    )

    # dispatch command
    parser_dispatch = subparsers.add_parser(
        "dispatch",
        help="Trigger CI workflows for explicit targets",
    )
    parser_dispatch.add_argument(
        "--target",
        dest="targets",
        action="append",
        required=True,
        help="CI target to dispatch (repeatable)",
    )
    parser_dispatch.add_argument(
        "--ref",
        required=True,
        help="Branch or commit to run the workflows on",
    )
    parser_dispatch.add_argument(
        "--pr-number",
        required=True,
        type=int,
        help="Originating PR number",
    )
    parser_dispatch.add_argument(
        "--repo",
        help="Repository in owner/repo format (default: GITHUB_REPOSITORY)",
    )
    parser_dispatch.add_argument(
        "--targets-file",
        help="YAML file mapping targets to workflow files (default: CI_TARGETS_FILE)",
    )

    # handle-comment command
    parser_handle = subparsers.add_parser(
        "handle-comment",
        help="Handle an issue_comment event containing /ci commands",
    )
    parser_handle.add_argument(
        "--event-file",
        help="Path to the event payload (default: GITHUB_EVENT_PATH)",
    )
    parser_handle.add_argument(
        "--repo",
        help="Repository in owner/repo format (default: the event's repository)",
    )
    parser_handle.add_argument(
        "--targets-file",
        help="YAML file mapping targets to workflow files (default: CI_TARGETS_FILE)",
    )
    parser_handle.add_argument(
        "--no-comment",
        action="store_true",
        help="Do not post the result comment to the PR",
    )
    parser_handle.add_argument(
        "--write-job-summary",
        action="store_true",
        help="Write dispatch results to GITHUB_STEP_SUMMARY",
    )

    # update-comment command
    parser_update = subparsers.add_parser(
        "update-comment",
        help="Create or update a marker-tagged PR comment",
    )
    parser_update.add_argument(
        "--identifier",
        required=True,
        help="Marker identifier used to find the comment to update",
    )
    parser_update.add_argument(
        "--body",
        required=True,
        help="Comment body (markdown supported)",
    )
    parser_update.add_argument(
        "--pr-number",
        required=True,
        type=int,
        help="PR number to comment on",
    )
    parser_update.add_argument(
        "--repo",
        help="Repository in owner/repo format (default: GITHUB_REPOSITORY)",
    )
    parser_update.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the gh commands without running them",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    # Route to command implementations with explicit parameters
    if args.command == "parse-comment":
        return cmd_parse_comment(
            body=args.body,
            body_file=args.body_file,
            targets_file=args.targets_file,
        )

    elif args.command == "dispatch":
        return cmd_dispatch(
            targets=args.targets,
            ref=args.ref,
            pr_number=args.pr_number,
            repo=args.repo,
            targets_file=args.targets_file,
        )

    elif args.command == "handle-comment":
        return cmd_handle_comment(
            event_file=args.event_file,
            repo=args.repo,
            targets_file=args.targets_file,
            post_comment=not args.no_comment,
            write_job_summary=args.write_job_summary,
        )

    elif args.command == "update-comment":
        return cmd_update_comment(
            identifier=args.identifier,
            body=args.body,
            pr_number=args.pr_number,
            repo=args.repo,
            dry_run=args.dry_run,
        )

    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
