"""
Core loan math: monthly payment, total interest, extra-payment payoff time.

Key conventions:
- Rates are annual percentages (4.5 means 4.5%); the monthly rate is rate / 100 / 12.
- Primitives take the term in YEARS; calculate_loan takes it in MONTHS.
- Degenerate inputs (non-positive principal, term or payment) give 0, not an error.
  Callers are expected to run validate_loan_inputs first.
- Only calculate_loan rounds; the primitives return raw floats.
"""

import logging
import math

from calc_toolkit.data.defaults import MAX_SIMULATION_MONTHS, PAYOFF_BALANCE_EPSILON
from calc_toolkit.formatting import round_half_up
from calc_toolkit.models import LoanCalculation, LoanResult

logger = logging.getLogger(__name__)


def _monthly_rate(annual_rate_percent: float) -> float:
    return annual_rate_percent / 100 / 12


def calculate_monthly_payment(
    principal: float,
    annual_rate_percent: float,
    term_years: float,
) -> float:
    """
    Standard amortizing payment: P * r * (1+r)^n / ((1+r)^n - 1).
    Falls back to P / n at a zero rate, and when (1+r)^n is indistinguishable
    from 1 in floating point (a tiny rate or a tiny term).
    """
    if principal <= 0 or term_years <= 0:
        return 0.0

    n = term_years * 12
    if annual_rate_percent == 0:
        return principal / n

    r = _monthly_rate(annual_rate_percent)
    factor = (1 + r) ** n
    if factor == 1:
        return principal / n
    return principal * (r * factor) / (factor - 1)


def calculate_total_interest(
    monthly_payment: float,
    term_years: float,
    principal: float,
) -> float:
    """Interest over the full term, clamped at zero."""
    total_paid = monthly_payment * term_years * 12
    return max(0.0, total_paid - principal)


def calculate_payoff_time_with_extra(
    principal: float,
    annual_rate_percent: float,
    regular_payment: float,
    extra_payment: float = 0,
) -> float:
    """
    Months needed to clear the balance paying regular_payment + extra_payment.

    Returns math.inf when the combined payment does not cover the first
    month's interest. Otherwise the balance is simulated month by month until
    it drops to PAYOFF_BALANCE_EPSILON, capped at MAX_SIMULATION_MONTHS.
    """
    if principal <= 0 or regular_payment <= 0:
        return 0

    total_payment = regular_payment + extra_payment
    if annual_rate_percent == 0:
        return principal / total_payment

    r = _monthly_rate(annual_rate_percent)
    if total_payment <= principal * r:
        return math.inf

    balance = principal
    months = 0
    while balance > PAYOFF_BALANCE_EPSILON and months < MAX_SIMULATION_MONTHS:
        interest = balance * r
        principal_portion = min(total_payment - interest, balance)
        balance -= principal_portion
        months += 1

    return months


def calculate_loan(params: LoanCalculation) -> LoanResult:
    """
    Full loan calculation: payment, totals and, with an extra payment,
    the months saved against the scheduled term.
    """
    term_years = params.loan_term_months / 12

    monthly_payment = calculate_monthly_payment(
        params.loan_amount, params.annual_interest_rate, term_years
    )
    total_interest = calculate_total_interest(monthly_payment, term_years, params.loan_amount)
    # Computed from months directly, not re-derived from years
    total_paid = monthly_payment * params.loan_term_months
    payoff_time_months = params.loan_term_months

    payoff_time_savings = None
    if params.extra_monthly_payment > 0:
        payoff_with_extra = calculate_payoff_time_with_extra(
            params.loan_amount,
            params.annual_interest_rate,
            monthly_payment,
            params.extra_monthly_payment,
        )
        if math.isfinite(payoff_with_extra):
            savings = round_half_up(payoff_time_months - payoff_with_extra)
            if savings > 0:
                payoff_time_savings = savings

    logger.debug(
        "Loan %.2f at %.3f%% over %s months: payment %.2f, savings %s",
        params.loan_amount,
        params.annual_interest_rate,
        params.loan_term_months,
        monthly_payment,
        payoff_time_savings,
    )

    return LoanResult(
        monthly_payment=round_half_up(monthly_payment),
        total_interest=round_half_up(total_interest),
        total_paid=round_half_up(total_paid),
        payoff_time_months=payoff_time_months,
        payoff_time_savings=payoff_time_savings,
    )
