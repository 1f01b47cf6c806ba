#!/usr/bin/env python3
"""
Underwriting Quote Demo.

Prices a level-premium term assurance for one applicant and shows how
smoking status and medical history load the premium:

    "What does a R500,000, 15-year cover cost a 45-year-old?"

Key Concepts:
- Net premium: the pure risk cost under the equivalence principle
- Gross premium: net cost plus the expense annuity and a fixed expense
- Risk loadings: additive multipliers for smokers and medical history
- Approval: cover must end before the limiting age

Usage:
    python examples/01_underwriting_quote.py
    python examples/01_underwriting_quote.py --age 58 --coverage 250000 --smoker --history minor
"""

import argparse
import sys

# Add src to path if running as script
sys.path.insert(0, "src")

from term_assurance import HistoryCategory, PremiumCalculator, Quote


def print_quote(quote: Quote, net: float) -> None:
    """Print one quote in display form."""
    data = quote.to_dict()
    print("\n" + "=" * 60)
    print("UNDERWRITING QUOTE")
    print("=" * 60)
    print(f"\nApplicant:")
    print(f"  Age:            {quote.age}")
    print(f"  Coverage:       {quote.coverage:,.0f}")
    print(f"  Term:           {quote.term} years")
    print(f"\nFactors:")
    print(f"  Assurance:      {data['assurance_factor']:.5f}")
    print(f"  Annuity:        {data['annuity_factor']:.5f}")
    print(f"  Annuity (exp):  {data['annuity_in_factor']:.5f}")
    print(f"\nPremiums:")
    print(f"  Net annual:     {net:,.2f}")
    print(f"  Base annual:    {data['base_annual_premium']:,.2f}")
    print(f"  Loading:        x{quote.loading_multiplier:.1f} ({data['risk_category']} risk)")
    print(f"  Annual:         {data['annual_premium']:,.2f}")
    print(f"  Monthly:        {data['monthly_premium']:,.2f}")
    print(f"\nDecision:         {'APPROVED' if quote.approved else 'DECLINED'}")


def print_loading_table(calculator: PremiumCalculator, age: float, coverage: float) -> None:
    """Print the monthly premium for every smoker/history combination."""
    print("\n" + "=" * 60)
    print("RISK LOADING TABLE")
    print("=" * 60)
    print(f"\n  {'Smoker':<8}{'History':<10}{'Multiplier':>12}{'Monthly':>14}")
    print("  " + "-" * 44)

    for smoker in (False, True):
        for history in HistoryCategory:
            quote = calculator.quote(age, coverage, smoker=smoker, history=history)
            print(
                f"  {'yes' if smoker else 'no':<8}{history.value:<10}"
                f"{quote.loading_multiplier:>12.1f}{quote.monthly_premium:>14,.2f}"
            )


def main() -> None:
    """Run underwriting quote demo."""
    parser = argparse.ArgumentParser(description="Term Assurance Underwriting Demo")
    parser.add_argument("--age", type=float, default=45, help="Age at issue (default: 45)")
    parser.add_argument(
        "--coverage", type=float, default=500_000, help="Sum insured (default: 500000)"
    )
    parser.add_argument("--term", type=float, default=None, help="Term in years (default: 15)")
    parser.add_argument("--smoker", action="store_true", help="Applicant smokes")
    parser.add_argument(
        "--history",
        choices=[h.value for h in HistoryCategory],
        default="clean",
        help="Medical history (default: clean)",
    )
    args = parser.parse_args()

    calculator = PremiumCalculator()
    quote = calculator.quote(
        args.age, args.coverage, args.term, smoker=args.smoker, history=args.history
    )
    print_quote(quote, calculator.net_premium(args.age, args.coverage, args.term))
    print_loading_table(calculator, args.age, args.coverage)

    print("\n" + "=" * 60)
    print("DEMO COMPLETE")
    print("=" * 60)


if __name__ == "__main__":
    main()
