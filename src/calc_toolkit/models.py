"""Pydantic v2 models for the calculator tools."""

import math
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, computed_field, field_validator


class LoanCalculation(BaseModel):
    model_config = ConfigDict(frozen=True)

    loan_amount: float                  # Principal being borrowed
    annual_interest_rate: float         # Percent, e.g. 4.5 for 4.5%
    loan_term_months: float             # Scheduled number of monthly payments
    extra_monthly_payment: float = 0.0  # Paid on top of the regular installment


class LoanInputs(BaseModel):
    """
    Possibly incomplete loan inputs, as handed to validate_loan_inputs.

    Missing fields, NaN and values that cannot be read as numbers are all
    stored as None (absent). Unknown keys are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    loan_amount: Optional[float] = None
    annual_interest_rate: Optional[float] = None
    loan_term_months: Optional[float] = None
    extra_monthly_payment: Optional[float] = None

    @field_validator("*", mode="before")
    @classmethod
    def coerce_number(cls, v: Any) -> Optional[float]:
        if v is None or isinstance(v, bool):
            return None
        try:
            number = float(v)
        except (TypeError, ValueError):
            return None
        if math.isnan(number):
            return None
        return number


class LoanResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    monthly_payment: float                        # Rounded to cents
    total_interest: float                         # Rounded to cents, never negative
    total_paid: float                             # monthly_payment * term, rounded to cents
    payoff_time_months: float                     # The scheduled term, unchanged
    payoff_time_savings: Optional[float] = None   # Months saved by extra payments, if any


class FieldError(BaseModel):
    model_config = ConfigDict(frozen=True)

    field: str
    message: str


class FormValidation(BaseModel):
    model_config = ConfigDict(frozen=True)

    errors: tuple[FieldError, ...] = ()

    @computed_field
    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def error_map(self) -> dict[str, str]:
        """First message per field, keyed by field name."""
        mapping: dict[str, str] = {}
        for error in self.errors:
            mapping.setdefault(error.field, error.message)
        return mapping


class CronExplanation(BaseModel):
    model_config = ConfigDict(frozen=True)

    summary: str
    breakdown: tuple[str, ...] = ()   # "Label: description", one per field
    is_valid: bool


class RegexTestResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    matched: Optional[bool]           # None when the pattern did not compile
    message: str
    error: Optional[str] = None


class LoanFormData(BaseModel):
    """Raw text of the loan form, persisted between runs."""

    model_config = ConfigDict(frozen=True)

    loan_amount: str = ""
    annual_interest_rate: str = ""
    loan_term: str = ""
    extra_monthly_payment: str = ""
    term_in_months: bool = True
