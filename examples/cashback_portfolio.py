#!/usr/bin/env python3
"""
Cashback Portfolio Walkthrough

Buys one property a year with a loan approved above the purchase price,
invests the cashback and positive rental cash flow in a discounted stock
plan, then compares the plan against a slower acquisition pace.
"""

import sys
import traceback
from pathlib import Path

# Add src to path so we can import propertylab
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from propertylab.analysis import calculate_property_plan, create_snapshot
from propertylab.asset import PropertyAssumptions
from propertylab.reporting import build_context_message, compare_scenarios
from propertylab.stock import StockAssumptions, calculate_stock_reinvestment


def main():
    print("🏠 CASHBACK PROPERTY PORTFOLIO")
    print("=" * 50)
    print()

    assumptions = PropertyAssumptions(
        purchase_price=500_000,
        market_value=600_000,
        loan_amount=600_000,
        interest_rate=4,
        appreciation_rate=3,
        rental_yield=8,
        purchase_interval=1,
        max_properties=10,
        investor_age=35,
    )
    stock_assumptions = StockAssumptions(dividend_yield=6, discount=20, appreciation=5)

    try:
        plan = calculate_property_plan(assumptions)
        stock = calculate_stock_reinvestment(stock_assumptions, assumptions, plan)

        print("📊 Property Plan")
        print("-" * 30)
        print(f"   Monthly payment: RM {plan.monthly_payment:,.2f}")
        for years in (10, 20, 30):
            milestone = plan.milestone(years)
            print(
                f"   {years}Y net equity: RM {milestone.net_equity:,.0f} "
                f"({milestone.properties_owned} properties)"
            )
        print()

        print("📈 Stock Reinvestment")
        print("-" * 30)
        print(f"   Cashback per property: RM {stock.cashback_per_property:,.0f}")
        print(f"   Total cashback: RM {stock.total_cashback_all_properties:,.0f}")
        print(f"   30Y stock value: RM {stock.stock_30_year.portfolio_value:,.0f}")
        print(f"   30Y combined net worth: RM {stock.yearly_data[30].combined_net_worth:,.0f}")
        print()

        print("🔁 Every Second Year Instead")
        print("-" * 30)
        slower = assumptions.copy(updates={"purchase_interval": 2})
        comparison = compare_scenarios(assumptions, slower)
        print(comparison[["a", "b", "diff"]].to_string(float_format=lambda v: f"{v:,.0f}"))
        print()

        snapshot = create_snapshot("Yearly cashback plan", assumptions, stock_assumptions)
        print(f"💾 Snapshot '{snapshot.name}': {len(snapshot.to_json()):,} bytes of JSON")
        print()

        print(build_context_message(assumptions, plan, stock_assumptions, stock))

    except Exception as e:
        print(f"❌ Simulation failed: {e}")
        traceback.print_exc()
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
