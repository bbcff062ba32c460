"""Command line interface for the profile analyzer.

Usage:
    trustguard analyze --platform twitter --bio "..." --followers 120 --following 80
    trustguard analyze --platform instagram --json < form.json
    trustguard waitlist someone@example.com --interest dating
    trustguard init-db
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import TYPE_CHECKING

from rich import box
from rich.console import Console
from rich.table import Table

from trustguard_db import InterestArea, StorageError, init_db
from trustguard_scoring import Platform, analyze_profile
from trustguard_service.analysis import trust_level_for
from trustguard_service.intake import IntakeError, build_profile_input
from trustguard_service.storage import join_waitlist

if TYPE_CHECKING:
    from trustguard_scoring import AnalysisResult, TrustLevel

console = Console()

_LEVEL_STYLES = {"high": "green", "medium": "yellow", "low": "red"}


def render_result(result: AnalysisResult, trust_level: TrustLevel) -> None:
    """Print an analysis result as a table followed by its red flags."""
    style = _LEVEL_STYLES[trust_level]

    table = Table(title="Profile Analysis", box=box.ROUNDED)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("Trust score", f"[{style}]{result.trust_score}/100[/{style}]")
    table.add_row("Trust level", f"[{style}]{trust_level}[/{style}]")
    table.add_row("Confidence", f"{result.confidence}%")
    table.add_row("Image score", str(result.analysis.image_score))
    table.add_row("Text score", str(result.analysis.text_score))
    table.add_row("Behavior score", str(result.analysis.behavior_score))
    console.print(table)

    if not result.red_flags:
        console.print("[green]No red flags detected[/green]")
        return

    console.print("[red]Red flags:[/red]")
    for flag in result.red_flags:
        console.print(f"  - {flag}")


def _form_from_args(args: argparse.Namespace) -> dict:
    form: dict = {}
    if args.stdin:
        try:
            piped = json.load(sys.stdin)
        except json.JSONDecodeError as e:
            raise IntakeError.invalid_form(f"stdin is not valid JSON ({e.msg})") from e
        if not isinstance(piped, dict):
            raise IntakeError.invalid_form("stdin must hold a JSON object")
        form.update(piped)

    overrides = {
        "platform": args.platform,
        "username": args.username,
        "bio": args.bio,
        "followers_count": args.followers,
        "following_count": args.following,
        "posts_count": args.posts,
        "account_age_in_days": args.age,
        "profile_image_url": args.image_url,
    }
    form.update({key: value for key, value in overrides.items() if value is not None})
    if args.verified:
        form["is_verified"] = True
    return form


def cmd_analyze(args: argparse.Namespace) -> int:
    """Analyze one profile and print the result."""
    try:
        profile = build_profile_input(_form_from_args(args))
    except IntakeError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        return 2

    result = analyze_profile(profile)

    if args.json:
        print(json.dumps(result.to_payload(), indent=2))
    else:
        render_result(result, trust_level_for(result))
    return 0


def cmd_waitlist(args: argparse.Namespace) -> int:
    """Add an email to the waitlist."""
    try:
        interest = InterestArea(args.interest) if args.interest else None
        join_waitlist(args.email, args.name, interest)
    except StorageError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        return 1

    console.print(f"[green]Added {args.email} to the waitlist[/green]")
    return 0


def cmd_init_db(_args: argparse.Namespace) -> int:
    """Create missing database tables."""
    try:
        init_db()
    except StorageError as e:
        console.print(f"[red]Error:[/red] {e.message}")
        return 1

    console.print("[green]Database tables ready[/green]")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="trustguard",
        description="Estimate how trustworthy a social or dating profile looks",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Analyze command
    analyze_parser = subparsers.add_parser("analyze", help="Analyze a profile")
    analyze_parser.add_argument(
        "--platform",
        choices=[p.value for p in Platform],
        help="Platform the profile lives on (default: instagram)",
    )
    analyze_parser.add_argument("--username", help="Profile handle")
    analyze_parser.add_argument("--bio", help="Profile bio / description")
    analyze_parser.add_argument("--followers", help="Follower count")
    analyze_parser.add_argument("--following", help="Following count")
    analyze_parser.add_argument("--posts", help="Number of posts")
    analyze_parser.add_argument("--age", help="Account age in days (default: 30)")
    analyze_parser.add_argument("--image-url", help="Profile image URL")
    analyze_parser.add_argument(
        "--verified",
        action="store_true",
        help="Profile carries the platform's verified badge",
    )
    analyze_parser.add_argument(
        "--stdin",
        action="store_true",
        help="Read form fields as a JSON object from stdin; flags override them",
    )
    analyze_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )

    # Waitlist command
    waitlist_parser = subparsers.add_parser("waitlist", help="Join the early access waitlist")
    waitlist_parser.add_argument("email", help="Signup email")
    waitlist_parser.add_argument("--name", help="Display name")
    waitlist_parser.add_argument(
        "--interest",
        choices=[a.value for a in InterestArea],
        help="What you want to analyze (default: general)",
    )

    # Init DB command
    subparsers.add_parser("init-db", help="Create missing database tables")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the trustguard command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    handlers = {
        "analyze": cmd_analyze,
        "waitlist": cmd_waitlist,
        "init-db": cmd_init_db,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
