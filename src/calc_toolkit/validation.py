"""
Loan input validation.

Every field is checked independently and every failing field is reported.
Within a field the lower-bound check wins: an amount of 0 gets the
"greater than $0" message only, never also the upper-bound one.
"""

from collections.abc import Mapping
from typing import Any, Union

from calc_toolkit.data.defaults import MAX_INTEREST_RATE, MAX_LOAN_AMOUNT, MAX_TERM_MONTHS
from calc_toolkit.models import FieldError, FormValidation, LoanCalculation, LoanInputs


def _as_inputs(params: Union[LoanInputs, LoanCalculation, Mapping[str, Any]]) -> LoanInputs:
    if isinstance(params, LoanInputs):
        return params
    if isinstance(params, LoanCalculation):
        return LoanInputs.model_validate(params.model_dump())
    return LoanInputs.model_validate(dict(params))


def validate_loan_inputs(
    params: Union[LoanInputs, LoanCalculation, Mapping[str, Any]],
) -> FormValidation:
    inputs = _as_inputs(params)
    errors: list[FieldError] = []

    amount = inputs.loan_amount
    if amount is None or amount <= 0:
        errors.append(FieldError(field="loan_amount", message="Loan amount must be greater than $0"))
    elif amount > MAX_LOAN_AMOUNT:
        errors.append(
            FieldError(field="loan_amount", message=f"Loan amount cannot exceed ${MAX_LOAN_AMOUNT:,}")
        )

    rate = inputs.annual_interest_rate
    if rate is None or rate < 0:
        errors.append(FieldError(field="annual_interest_rate", message="Interest rate cannot be negative"))
    elif rate > MAX_INTEREST_RATE:
        errors.append(
            FieldError(
                field="annual_interest_rate",
                message=f"Interest rate cannot exceed {MAX_INTEREST_RATE}%",
            )
        )

    term = inputs.loan_term_months
    if term is None or term <= 0:
        errors.append(
            FieldError(field="loan_term_months", message="Loan term must be greater than 0 months")
        )
    elif term > MAX_TERM_MONTHS:
        errors.append(
            FieldError(
                field="loan_term_months",
                message=f"Loan term cannot exceed {MAX_TERM_MONTHS} months ({MAX_TERM_MONTHS // 12} years)",
            )
        )

    extra = inputs.extra_monthly_payment
    if extra is not None and extra < 0:
        errors.append(
            FieldError(field="extra_monthly_payment", message="Extra payment cannot be negative")
        )

    return FormValidation(errors=tuple(errors))
