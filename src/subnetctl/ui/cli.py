from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from subnetctl.app import DEFAULT_STATE_NAME, deploy_subnet, plan_subnet, remove_subnet
from subnetctl.config import ConfigurationError, configure_logging
from subnetctl.domain.subnet import SubnetSpec

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _add_spec_arguments(parser: argparse.ArgumentParser, *, required: bool) -> None:
    parser.add_argument(
        "--vpc-id",
        type=str,
        required=required,
        help="VPC the subnet belongs to",
    )
    parser.add_argument(
        "--availability-zone",
        type=str,
        required=required,
        help="Availability zone to place the subnet in",
    )
    parser.add_argument(
        "--cidr-block",
        type=str,
        required=required,
        help="IPv4 CIDR block of the subnet (EC2 rejects an IPv4 subnet without one)",
    )


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Reconcile an AWS VPC subnet")
    parser.add_argument(
        "--name",
        type=str,
        default=DEFAULT_STATE_NAME,
        help="State record to reconcile (default: %(default)s)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    deploy = subparsers.add_parser("deploy", help="Create or replace the subnet as needed")
    _add_spec_arguments(deploy, required=True)

    subparsers.add_parser("remove", help="Delete the subnet and clear its state")

    plan = subparsers.add_parser("plan", help="Show the action a deploy would take")
    _add_spec_arguments(plan, required=False)
    plan.add_argument(
        "--destroy",
        action="store_true",
        help="Show the action a remove would take instead",
    )

    return parser.parse_args(list(argv))


def _spec_from_args(args: argparse.Namespace, *, require_cidr_block: bool = False) -> SubnetSpec:
    vpc_id = (args.vpc_id or "").strip()
    availability_zone = (args.availability_zone or "").strip()
    if not vpc_id or not availability_zone:
        raise ValueError("Both --vpc-id and --availability-zone are required")
    cidr_block = (args.cidr_block or "").strip() or None
    if require_cidr_block and cidr_block is None:
        raise ValueError("--cidr-block must not be blank")
    return SubnetSpec(vpc_id=vpc_id, availability_zone=availability_zone, cidr_block=cidr_block)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    configure_logging()
    parsed_args: argparse.Namespace
    spec: SubnetSpec | None = None
    try:
        parsed_args = _parse_args(args_list)
        if parsed_args.verbose:
            configure_logging(level=logging.DEBUG, force=True)
        if parsed_args.command == "deploy":
            spec = _spec_from_args(parsed_args, require_cidr_block=True)
        elif parsed_args.command == "plan" and not parsed_args.destroy:
            spec = _spec_from_args(parsed_args)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command == "deploy" and spec is not None:
            result = deploy_subnet(spec, name=parsed_args.name)
            log.info("Subnet %s ready (%s)", result.subnet_id, result.decision)
        elif parsed_args.command == "remove":
            remove_subnet(name=parsed_args.name)
        elif parsed_args.command == "plan":
            decision = plan_subnet(spec, name=parsed_args.name)
            log.info("Planned action for %s: %s", parsed_args.name, decision)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during reconciliation")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
