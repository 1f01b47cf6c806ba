#!/usr/bin/env python3
"""
Policy Values and Portfolio Valuation Demo.

Projects the prospective reserve of each policy in a small book year by
year, then values the in-force book at a reporting date.

Key Concepts:
- Policy value tV: EPV of future benefits less EPV of future net premiums
- Run-off: tV starts at 0, rises while premiums exceed the risk cost,
  and returns to 0 at maturity
- Snapshot: only Active policies carry a reserve

Usage:
    python examples/02_policy_values.py
    python examples/02_policy_values.py --date 2027-12-31 --parallel
    python examples/02_policy_values.py --csv reserves.csv
"""

import argparse
import logging
import sys
from datetime import date

# Add src to path if running as script
sys.path.insert(0, "src")

from term_assurance import Policy, PolicyStatus, ValuationService

SAMPLE_BOOK = [
    Policy("POL-8821", 45, 500_000, date(2020, 5, 15), holder_name="John Doe"),
    Policy("POL-9932", 32, 250_000, date(2022, 1, 10), holder_name="Sarah Smith"),
    Policy("POL-7310", 58, 150_000, date(2019, 9, 1)),
    Policy("POL-4410", 50, 100_000, date(2024, 3, 1), status=PolicyStatus.PENDING_DOC),
    Policy("POL-1207", 38, 300_000, date(2015, 7, 1), status=PolicyStatus.LAPSED),
]


def print_projection(service: ValuationService, policy: Policy) -> None:
    """Print the year-by-year reserve for one policy."""
    projection = service.project(policy)
    print(f"\n{policy.policy_id} (age {policy.issue_age}, {policy.sum_insured:,.0f})")
    print(f"  Net premium: {projection.net_premium:,.2f} p.a.")
    print(f"  {'Year':>6}{'Age':>6}{'Reserve':>14}")
    for row in projection.rows:
        print(f"  {row.year:>6}{row.age:>6}{row.reserve:>14,.2f}")


def main() -> None:
    """Run policy values demo."""
    parser = argparse.ArgumentParser(description="Term Assurance Valuation Demo")
    parser.add_argument(
        "--date",
        type=date.fromisoformat,
        default=date.today(),
        help="Valuation date YYYY-MM-DD (default: today)",
    )
    parser.add_argument("--parallel", action="store_true", help="Value policies in a process pool")
    parser.add_argument("--csv", default=None, help="Write the snapshot to this CSV file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show engine logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    service = ValuationService()

    print("\n" + "=" * 60)
    print("POLICY VALUE PROJECTIONS")
    print("=" * 60)
    for policy in SAMPLE_BOOK:
        if policy.is_in_force:
            print_projection(service, policy)

    snapshot = service.value_portfolio(SAMPLE_BOOK, args.date, parallel=args.parallel)

    print("\n" + "=" * 60)
    print(f"PORTFOLIO SNAPSHOT AT {snapshot.valuation_date.isoformat()}")
    print("=" * 60)
    print(snapshot.to_dataframe().to_string(index=False))
    print(f"\n  Policies valued:  {snapshot.n_policies} ({snapshot.n_excluded} not in force)")
    print(f"  Total reserve:    {snapshot.total_reserve:,.2f}")
    print(f"  Mean reserve:     {snapshot.mean_reserve:,.2f}")

    if args.csv:
        snapshot.to_dataframe().to_csv(args.csv, index=False)
        print(f"\nSnapshot saved to: {args.csv}")

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)


if __name__ == "__main__":
    main()
