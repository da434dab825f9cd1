#!/usr/bin/env python3
"""
CLI for LINE channel credentials in SSM Parameter Store.

Stores the channel secret and access token the webhook reads at cold
start, and checks that both resolve.
"""

import argparse
import asyncio
import sys

from healthybot.config import settings
from healthybot.exceptions import SecretResolutionError
from healthybot.repositories.parameter_repository import ParameterRepository


async def cmd_put(
    channel_secret: str | None,
    channel_access_token: str | None,
    overwrite: bool,
    repository: ParameterRepository | None = None,
) -> int:
    """
    Store the channel credentials.

    Args:
        channel_secret: Channel secret (skipped if None)
        channel_access_token: Channel access token (skipped if None)
        overwrite: Replace existing parameters
        repository: ParameterRepository instance (creates new if None)

    Returns:
        Process exit code
    """
    repository = repository or ParameterRepository()
    exit_code = 0

    for name, value in (
        (settings.channel_secret_parameter, channel_secret),
        (settings.channel_access_token_parameter, channel_access_token),
    ):
        if value is None:
            continue
        if await repository.put_value(name, value, overwrite=overwrite):
            print(f"✓ Stored parameter: {name}")
        else:
            print(f"→ Parameter already exists (use --overwrite): {name}")
            exit_code = 1

    return exit_code


async def cmd_check(repository: ParameterRepository | None = None) -> int:
    """
    Check that both credentials resolve, without printing their values.

    Args:
        repository: ParameterRepository instance (creates new if None)

    Returns:
        Process exit code
    """
    repository = repository or ParameterRepository()
    exit_code = 0

    for name in (
        settings.channel_secret_parameter,
        settings.channel_access_token_parameter,
    ):
        try:
            value = await repository.get_value(name, with_decryption=True)
        except SecretResolutionError as e:
            print(f"✗ {name}: {e.message}")
            exit_code = 1
            continue
        if not value:
            print(f"✗ {name}: empty")
            exit_code = 1
        else:
            print(f"✓ {name}: {len(value)} characters")

    return exit_code


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Manage HealthyBot LINE channel credentials",
        epilog=f"Region: {settings.aws_region}",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command")

    put_parser = subparsers.add_parser("put", help="Store channel credentials")
    put_parser.add_argument("--channel-secret", type=str, help="Channel secret")
    put_parser.add_argument(
        "--channel-access-token", type=str, help="Channel access token"
    )
    put_parser.add_argument(
        "--overwrite", action="store_true", help="Replace existing parameters"
    )

    subparsers.add_parser("check", help="Check that both credentials resolve")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == "put":
        sys.exit(
            asyncio.run(
                cmd_put(
                    args.channel_secret,
                    args.channel_access_token,
                    args.overwrite,
                )
            )
        )
    elif args.command == "check":
        sys.exit(asyncio.run(cmd_check()))


if __name__ == "__main__":
    main()
