"""
Loan form state: raw text as typed by the user, and its conversion to a
LoanCalculation.

Text is read leniently: the longest numeric prefix counts ("12abc" is 12)
and anything unreadable is 0. Range checks are left to validate_loan_inputs.
"""

import re

from calc_toolkit.models import LoanCalculation, LoanFormData

EMPTY_FORM = LoanFormData()

_NUMBER_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_number(text: str) -> float:
    match = _NUMBER_PREFIX.match(text or "")
    if match is None:
        return 0.0
    return float(match.group(1)) or 0.0


def term_months(form: LoanFormData) -> float:
    term = parse_number(form.loan_term)
    return term if form.term_in_months else term * 12


def to_calculation(form: LoanFormData) -> LoanCalculation:
    return LoanCalculation(
        loan_amount=parse_number(form.loan_amount),
        annual_interest_rate=parse_number(form.annual_interest_rate),
        loan_term_months=term_months(form),
        extra_monthly_payment=parse_number(form.extra_monthly_payment),
    )


def _format_term(value: float) -> str:
    # 360.0 -> "360", 2.5 -> "2.5"
    return str(int(value)) if value.is_integer() else str(value)


def toggle_term_unit(form: LoanFormData) -> LoanFormData:
    """Switch the term between months and years, converting the typed value."""
    text = ""
    if form.loan_term.strip():
        current = parse_number(form.loan_term)
        text = _format_term(current / 12 if form.term_in_months else current * 12)
    return form.model_copy(
        update={
            "loan_term": text,
            "term_in_months": not form.term_in_months,
        }
    )


def is_submittable(form: LoanFormData) -> bool:
    """Quick check used to enable the Calculate action; full checks happen on submit."""
    calc = to_calculation(form)
    return calc.loan_amount > 0 and calc.annual_interest_rate >= 0 and calc.loan_term_months > 0
