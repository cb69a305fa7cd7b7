"""
aws-auth CLI

A command-line utility for managing AWS credential profiles. Profiles are
kept in the AWS shared credentials and config files; the active profile is
the one stored under the name "default".
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .aws_profiles import (
    DefaultProfileProtectedError,
    FileProfileRepository,
    ProfileInfo,
    ProfileNotFoundError,
    ProfileStore,
    ValidationError,
    validate_profile,
    validate_profile_name,
    validate_region,
    validate_required,
)
from .aws_profiles.validation import DEFAULT_REGION
from .utils.paths import resolve_aws_paths
from .utils.prompts import ConsolePrompter

PROG = "aws-auth"

_COMMANDS = {"add", "use", "set", "list", "ls", "remove", "rm", "current", "validate"}
# Global options that consume the following argument
_OPTIONS_WITH_VALUE = {"--aws-dir"}


def build_store(aws_dir: Optional[Path] = None) -> ProfileStore:
    """Create a store over the credentials and config files."""
    credentials_path, config_path = resolve_aws_paths(aws_dir)
    return ProfileStore(FileProfileRepository(credentials_path, config_path))


def format_profile_list(profiles: List[ProfileInfo]) -> str:
    """Format profiles for display."""
    if not profiles:
        return ("No AWS profiles found.\n"
                f'Use "{PROG} add <profile-name>" to create a new profile.')

    output = []
    for p in profiles:
        marker = "* " if p.is_default else "  "
        output.append(f"{marker}{p}")

    if any(p.is_default for p in profiles):
        output.append("")
        output.append("* = currently active profile")

    return "\n".join(output)


def handle_add(args, store: ProfileStore, prompter: ConsolePrompter) -> int:
    """Handle the add command."""
    profile_name = validate_profile_name(args.profile)
    print(f"\nAdding AWS profile: {profile_name}\n")

    access_key_id = prompter.ask_text(
        "AWS Access Key ID:",
        validate=lambda value: validate_required(value, "Access Key ID"))
    secret_access_key = prompter.ask_secret(
        "AWS Secret Access Key:",
        validate=lambda value: validate_required(value, "Secret Access Key"))
    region = prompter.ask_text(
        "Default region (e.g., us-east-1):",
        default=DEFAULT_REGION,
        validate=validate_region)

    store.add(profile_name, access_key_id, secret_access_key, region)

    print(f"\n✅ Profile '{profile_name}' added successfully!")
    print(f"You can now use it with: {PROG} {profile_name}")
    return 0


def handle_use(args, store: ProfileStore, prompter: ConsolePrompter) -> int:
    """Handle the use command."""
    try:
        profile = store.use(args.profile)
    except ProfileNotFoundError as e:
        print(f"❌ {e}", file=sys.stderr)
        print("Available profiles:")
        handle_list(args, store, prompter)
        return 1

    print(f"✅ AWS profile set to '{args.profile}'")
    if profile.region:
        print(f"Region: {profile.region}")
    return 0


def handle_list(args, store: ProfileStore, prompter: ConsolePrompter) -> int:
    """Handle the list command."""
    profiles = store.list()
    if profiles:
        print("Available AWS profiles:")
        print("")
    print(format_profile_list(profiles))
    return 0


def handle_remove(args, store: ProfileStore, prompter: ConsolePrompter) -> int:
    """Handle the remove command."""
    profile_name = args.profile
    try:
        removed = store.remove(
            profile_name,
            confirm=lambda question: prompter.ask_confirm(question, default=False))
    except (DefaultProfileProtectedError, ProfileNotFoundError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 0

    if removed:
        print(f"✅ Profile '{profile_name}' removed successfully.")
    else:
        print("Profile removal cancelled.")
    return 0


def handle_current(args, store: ProfileStore, prompter: ConsolePrompter) -> int:
    """Handle the current command."""
    names = store.current()
    if names:
        print(f"Current AWS profile: {', '.join(names)}")
    else:
        print("The default profile does not match any named profile")
    return 0


def handle_validate(args, store: ProfileStore, prompter: ConsolePrompter) -> int:
    """Handle the validate command."""
    success, message = validate_profile(store, args.profile)

    if success:
        print(f"✅ {message}")
        return 0
    print(f"❌ {message}")
    return 1


# Verb used in "Error <verb> profile" messages
_ACTIONS = {
    handle_add: "adding",
    handle_use: "setting",
    handle_list: "listing",
    handle_remove: "removing",
    handle_current: "reading",
    handle_validate: "validating",
}


def _insert_default_command(argv: List[str]) -> List[str]:
    """Turn `aws-auth <profile>` into `aws-auth use <profile>`."""
    skip = False
    for i, arg in enumerate(argv):
        if skip:
            skip = False
            continue
        if arg.startswith("-"):
            skip = arg in _OPTIONS_WITH_VALUE
            continue
        if arg in _COMMANDS:
            return argv
        return argv[:i] + ["use"] + argv[i:]
    return argv


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="A CLI tool for managing AWS credentials and profiles"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--aws-dir", type=Path,
                        help="Directory holding the credentials and config files (default: ~/.aws)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Add command
    add_parser = subparsers.add_parser("add", help="Add a new AWS profile with interactive prompts")
    add_parser.add_argument("profile", help="Name of the profile to add")
    add_parser.set_defaults(func=handle_add)

    # Use command
    use_parser = subparsers.add_parser("use", aliases=["set"],
                                       help="Set the specified profile as the default AWS profile")
    use_parser.add_argument("profile", help="Profile name to use")
    use_parser.set_defaults(func=handle_use)

    # List command
    list_parser = subparsers.add_parser("list", aliases=["ls"], help="List all available AWS profiles")
    list_parser.set_defaults(func=handle_list)

    # Remove command
    remove_parser = subparsers.add_parser("remove", aliases=["rm"], help="Remove an AWS profile")
    remove_parser.add_argument("profile", help="Profile name to remove")
    remove_parser.set_defaults(func=handle_remove)

    # Current command
    current_parser = subparsers.add_parser("current", help="Show which profile is currently active")
    current_parser.set_defaults(func=handle_current)

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate a profile's credentials with AWS STS")
    validate_parser.add_argument("profile", nargs="?", default="default",
                                 help="Profile to validate (default: default)")
    validate_parser.set_defaults(func=handle_validate)

    return parser


def main(argv: Optional[List[str]] = None, prompter: Optional[ConsolePrompter] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(_insert_default_command(list(sys.argv[1:] if argv is None else argv)))

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 0

    store = build_store(args.aws_dir)
    try:
        return args.func(args, store, prompter or ConsolePrompter())
    except ValidationError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error {_ACTIONS[args.func]} profile: {e}", file=sys.stderr)
        return 1
    except (KeyboardInterrupt, EOFError):
        print("\nCancelled.", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
