"""
Command-line interface for EscalaFin.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date

from escalafin import (
    CalcType,
    ConfigError,
    Frequency,
    LoanCalculationRequest,
    build_amortization_schedule,
    calculate_loan_details,
    load_tariffs,
    validate_loan_params,
)
from escalafin.core.currency import MXN


def _build_request(args) -> LoanCalculationRequest:
    """Build a calculation request from parsed CLI arguments."""
    config = load_tariffs(args.tariffs) if args.tariffs else None
    return LoanCalculationRequest(
        loan_calculation_type=args.type,
        principal_amount=args.principal,
        number_of_payments=args.payments,
        start_date=date.fromisoformat(args.start) if args.start else date.today(),
        payment_frequency=args.frequency,
        annual_interest_rate=args.rate,
        weekly_interest_amount=args.weekly_interest,
        config=config,
    )


def _print_validation_error(error: str) -> None:
    print(f"Invalid loan parameters: {error}", file=sys.stderr)


def cmd_calculate(args) -> int:
    """Validate and calculate a loan, printing the result."""
    try:
        request = _build_request(args)
        check = validate_loan_params(request)
        if not check.valid:
            _print_validation_error(check.error)
            return 1

        result = calculate_loan_details(request)
        if args.json:
            json.dump(result.to_dict(), sys.stdout, indent=2, ensure_ascii=False)
            sys.stdout.write("\n")
        else:
            print(f"Payment amount: {MXN.format(result.payment_amount)}")
            print(f"Total amount:   {MXN.format(result.total_amount)}")
            print(f"End date:       {result.end_date.isoformat()}")
            if result.weekly_interest is not None:
                print(f"Weekly interest: {MXN.format(result.weekly_interest)}")
            if result.effective_rate is not None:
                print(f"Effective rate: {result.effective_rate:.2f}%")
        return 0

    except (ConfigError, OSError, ValueError) as e:
        print(f"Error calculating loan: {e}", file=sys.stderr)
        return 1


def cmd_validate(args) -> int:
    """Validate loan parameters only."""
    try:
        request = _build_request(args)
    except (ConfigError, OSError, ValueError) as e:
        print(f"Error validating loan: {e}", file=sys.stderr)
        return 1

    check = validate_loan_params(request)
    if args.json:
        json.dump(check.to_dict(), sys.stdout, indent=2, ensure_ascii=False)
        sys.stdout.write("\n")
    elif check.valid:
        print("✅ Loan parameters are valid")
    else:
        _print_validation_error(check.error)
    return 0 if check.valid else 1


def cmd_schedule(args) -> int:
    """Print or export the amortization table of a loan."""
    try:
        request = _build_request(args)
        check = validate_loan_params(request)
        if not check.valid:
            _print_validation_error(check.error)
            return 1

        schedule = build_amortization_schedule(request)
        frame = schedule.to_frame()
        if args.output:
            frame.to_csv(args.output)
            print(f"Schedule with {len(schedule)} payments written to {args.output}")
        else:
            print(frame.to_string())
            summary = schedule.summary()
            print()
            print(f"Total principal: {MXN.format(summary['totalPrincipal'])}")
            print(f"Total interest:  {MXN.format(summary['totalInterest'])}")
            print(f"Total paid:      {MXN.format(summary['totalPaid'])}")
        return 0

    except (ConfigError, OSError, ValueError) as e:
        print(f"Error building schedule: {e}", file=sys.stderr)
        return 1


def cmd_tariffs(args) -> int:
    """Dump the effective tariff configuration as JSON."""
    try:
        config = load_tariffs(args.tariffs)
    except (ConfigError, OSError) as e:
        print(f"Error loading tariffs: {e}", file=sys.stderr)
        return 1

    json.dump(config.to_dict(), sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


def _add_loan_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-t",
        "--type",
        required=True,
        choices=CalcType.all_types(),
        help="Loan calculation type",
    )
    parser.add_argument(
        "-p", "--principal", type=float, required=True, help="Principal amount"
    )
    parser.add_argument(
        "-n",
        "--payments",
        type=int,
        required=True,
        help="Number of payments (weeks for INTERES_SEMANAL)",
    )
    parser.add_argument(
        "-f",
        "--frequency",
        choices=Frequency.all_frequencies(),
        default=Frequency.MENSUAL,
        help="Payment frequency (default: MENSUAL)",
    )
    parser.add_argument(
        "--rate", type=float, help="Annual interest rate as a fraction (0.15 = 15%%)"
    )
    parser.add_argument(
        "--weekly-interest",
        type=float,
        help="Weekly interest amount; looked up in the rate table when omitted",
    )
    parser.add_argument(
        "--start", help="Disbursement date (YYYY-MM-DD, default: today)"
    )
    parser.add_argument(
        "--tariffs", help="Tariff configuration file (JSON or YAML)"
    )


def main(argv: list[str] | None = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="escalafin", description="EscalaFin loan calculation engine"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    subparsers.required = True

    # Calculate command
    calc_parser = subparsers.add_parser("calculate", help="Calculate a loan")
    _add_loan_arguments(calc_parser)
    calc_parser.add_argument(
        "--json", action="store_true", help="Output in JSON format"
    )
    calc_parser.set_defaults(func=cmd_calculate)

    # Validate command
    validate_parser = subparsers.add_parser(
        "validate", help="Validate loan parameters"
    )
    _add_loan_arguments(validate_parser)
    validate_parser.add_argument(
        "--json", action="store_true", help="Output in JSON format"
    )
    validate_parser.set_defaults(func=cmd_validate)

    # Schedule command
    schedule_parser = subparsers.add_parser(
        "schedule", help="Show the amortization table of a loan"
    )
    _add_loan_arguments(schedule_parser)
    schedule_parser.add_argument("-o", "--output", help="Write the table to a CSV file")
    schedule_parser.set_defaults(func=cmd_schedule)

    # Tariffs command
    tariffs_parser = subparsers.add_parser(
        "tariffs", help="Show the effective tariff configuration"
    )
    tariffs_parser.add_argument(
        "--tariffs", help="Tariff configuration file (default: built-in tariffs)"
    )
    tariffs_parser.set_defaults(func=cmd_tariffs)

    # Parse arguments and execute
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
