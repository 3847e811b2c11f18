# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Plan summaries for collaborators.

``PortfolioSummary`` holds the quick-access numbers a saved-scenario list
shows per row. ``build_context_message`` renders the inputs and headline
results as the plain-text digest an advisory service reads before it
answers questions about the plan.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

from ..core.primitives import ExpenseTypeEnum, Model

if TYPE_CHECKING:
    from ..analysis.results import FullSimulationResult
    from ..asset.assumptions import PropertyAssumptions
    from ..stock.assumptions import StockAssumptions
    from ..stock.results import StockSimulationResult


class PortfolioSummary(Model):
    """Headline numbers of a plan; stock fields stay empty without an overlay."""

    purchase_price: float
    equity_10: float
    equity_20: float
    equity_30: float
    properties: int
    stock_value_30: Optional[float] = None
    combined_30: Optional[float] = None


def build_summary(
    assumptions: "PropertyAssumptions",
    result: "FullSimulationResult",
    stock_result: Optional["StockSimulationResult"] = None,
) -> PortfolioSummary:
    """Collect the summary metrics of a computed plan."""
    stock_value_30 = None
    combined_30 = None
    if stock_result is not None:
        stock_value_30 = stock_result.stock_30_year.portfolio_value
        combined_30 = stock_result.yearly_data[30].combined_net_worth

    return PortfolioSummary(
        purchase_price=assumptions.purchase_price,
        equity_10=result.results_10.net_equity,
        equity_20=result.results_20.net_equity,
        equity_30=result.results_30.net_equity,
        properties=result.results_30.properties_owned,
        stock_value_30=stock_value_30,
        combined_30=combined_30,
    )


def _money(value: float, currency: str) -> str:
    return f"{currency} {value:,.0f}"


def build_context_message(
    assumptions: "PropertyAssumptions",
    result: "FullSimulationResult",
    stock_assumptions: Optional["StockAssumptions"] = None,
    stock_result: Optional["StockSimulationResult"] = None,
    currency: str = "RM",
) -> str:
    """
    Render the plan as a markdown digest for an advisory service.

    Args:
        assumptions: Property inputs
        result: Computed property plan
        stock_assumptions: Stock inputs, when an overlay was run
        stock_result: Computed overlay, when one was run
        currency: Currency label for amounts

    Returns:
        Multi-line text with input parameters, key results and, when
        available, the stock reinvestment section
    """
    if assumptions.expense_type == ExpenseTypeEnum.FIXED:
        expense_basis = "fixed"
    else:
        expense_basis = f"{assumptions.expense_value:g}% of price"

    if assumptions.below_market_discount > 0:
        below_market = f"Yes ({assumptions.below_market_discount:g}% discount)"
    elif assumptions.is_below_market_value:
        below_market = f"Yes (market value {_money(result.market_value, currency)})"
    else:
        below_market = "No"

    loan_ratio = result.loan_amount / assumptions.purchase_price if assumptions.purchase_price else 0.0

    lines: List[str] = [
        "Here is my current property investment simulation:",
        "",
        "**Input Parameters:**",
        f"- Purchase Price: {_money(assumptions.purchase_price, currency)}",
        f"- Loan Amount: {_money(result.loan_amount, currency)} ({loan_ratio:.0%} of price)",
        f"- Max Properties: {assumptions.max_properties}",
        f"- Below Market Value: {below_market}",
        f"- Annual Appreciation: {assumptions.appreciation_rate:g}%",
        f"- Gross Rental Yield: {assumptions.rental_yield:g}%",
        f"- Loan Interest Rate: {assumptions.interest_rate:g}%",
        f"- Purchase Interval: Every {assumptions.purchase_interval} year(s)",
        f"- Starting Year: {assumptions.start_year}",
        f"- Loan Tenure: {assumptions.loan_tenure} years",
        f"- Annual Expense/Property: {_money(result.annual_expense_per_property, currency)} ({expense_basis})",
    ]
    if assumptions.investor_age is not None:
        lines.append(
            f"- Investor Age: {assumptions.investor_age} (age {assumptions.investor_age + 30} at year 30)"
        )

    lines += [
        "",
        "**Key Results:**",
        f"- 10-Year Net Equity: {_money(result.results_10.net_equity, currency)}",
        f"- 20-Year Net Equity: {_money(result.results_20.net_equity, currency)}",
        f"- 30-Year Net Equity: {_money(result.results_30.net_equity, currency)}",
        f"- Properties Owned (30Y): {result.results_30.properties_owned}",
        f"- Monthly Mortgage Payment: {_money(result.monthly_payment, currency)}",
        f"- Annual Rental Income/Property: {_money(result.annual_rental_income, currency)}",
        f"- Market Value/Property: {_money(result.market_value, currency)}",
        f"- 30-Year Cumulative Cash Flow: {_money(result.results_30.cumulative_cash_flow, currency)}",
        f"- 30-Year Total Asset Value: {_money(result.results_30.total_asset_value, currency)}",
        f"- 30-Year Total Loan Balance: {_money(result.results_30.total_loan_balance, currency)}",
    ]

    if stock_result is not None:
        lines += ["", "**Stock Reinvestment:**"]
        if stock_assumptions is not None:
            lines += [
                f"- Dividend Yield: {stock_assumptions.dividend_yield:g}%",
                f"- Purchase Discount: {stock_assumptions.discount:g}%",
                f"- Stock Appreciation: {stock_assumptions.appreciation:g}%",
                f"- DRIP: {'On' if stock_assumptions.reinvest_dividends else 'Off'}",
            ]
        lines += [
            f"- Cashback/Property: {_money(stock_result.cashback_per_property, currency)}",
            f"- Total Cashback: {_money(stock_result.total_cashback_all_properties, currency)}",
        ]
        for years in (10, 20, 30):
            milestone = stock_result.milestone(years)
            lines.append(
                f"- {years}-Year Stock Value: {_money(milestone.portfolio_value, currency)} "
                f"(invested {_money(milestone.total_invested, currency)}, "
                f"dividends {_money(milestone.total_dividends, currency)})"
            )
        lines.append(
            f"- 30-Year Combined Net Worth: "
            f"{_money(stock_result.yearly_data[30].combined_net_worth, currency)}"
        )

    lines += [
        "",
        "Please analyze my property investment plan and provide your professional assessment.",
    ]
    return "\n".join(lines)
