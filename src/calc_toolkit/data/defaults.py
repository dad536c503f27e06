"""
Hard-coded configuration for the calculator tools.
Update these values when the supported input ranges change.
"""

from pathlib import Path

# ── Loan input limits ─────────────────────────────────────────────────────────
# Upper bounds enforced by validate_loan_inputs (lower bounds are 0)
MAX_LOAN_AMOUNT = 10_000_000        # dollars
MAX_INTEREST_RATE = 50              # annual percent
MAX_TERM_MONTHS = 600               # 50 years

# ── Payoff simulation ─────────────────────────────────────────────────────────
# The extra-payment simulator stops once the balance drops to the epsilon
# or after the month cap, whichever comes first.
PAYOFF_BALANCE_EPSILON = 0.01       # two cents
MAX_SIMULATION_MONTHS = 600

# ── Display ───────────────────────────────────────────────────────────────────
CURRENCY_SYMBOL = "$"
MONEY_DECIMALS = 2

# ── Cron explainer tables ─────────────────────────────────────────────────────
CRON_FIELD_COUNT = 6

# Labels in field order: second minute hour day-of-month month day-of-week
CRON_FIELD_NAMES: list[str] = ["Second", "Minute", "Hour", "Day", "Month", "Weekday"]

FIELD_REFERENCE: dict[str, str] = {
    "Second":  "Seconds (0-59)",
    "Minute":  "Minutes (0-59)",
    "Hour":    "Hours (0-23)",
    "Day":     "Day of month (1-31)",
    "Month":   "Month (1-12 or JAN-DEC)",
    "Weekday": "Day of week (0-7 or SUN-SAT)",
}

MONTH_NAMES: dict[str, str] = {
    "1": "January", "2": "February", "3": "March", "4": "April",
    "5": "May", "6": "June", "7": "July", "8": "August",
    "9": "September", "10": "October", "11": "November", "12": "December",
}

# (expression, short description) shown by the front end
COMMON_EXAMPLES: list[tuple[str, str]] = [
    ("0 0 * * * *",       "Every hour"),
    ("0 */30 * * * *",    "Every 30 minutes"),
    ("0 0 8 * * *",       "Every day at 8:00 AM"),
    ("0 0 9 * * MON-FRI", "Every weekday at 9:00 AM"),
    ("0 0 0 1 * *",       "At midnight on the 1st of every month"),
    ("0 0 0 * * SUN",     "Every Sunday at midnight"),
]

DEFAULT_CRON_EXPRESSION = "0 0 * * * *"

# ── Front end ─────────────────────────────────────────────────────────────────
# Form state is kept across runs in a small JSON file under the home directory
STORAGE_KEY = "loan-calculator-data"
STORAGE_PATH = Path.home() / ".calc_toolkit.json"

# Pause between submitting a calculation and showing it, so the
# "Calculating..." status is visible
CALCULATION_DELAY_S = 0.1
