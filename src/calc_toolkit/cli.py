"""
Interactive Rich CLI for the calculator tools.

Flow:
  1. Banner
  2. Tool menu (loan / cron / regex / quit), repeated until quit
  3. Loan: prompts pre-filled from the saved form, validation, result table,
     optional plain-text export
  4. Cron: examples + field reference, expression prompt, summary + breakdown
  5. Regex: pattern + test string, match result
"""

import logging
import sys
import time
from datetime import date
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm, Prompt
from rich.table import Table
from rich.text import Text

from calc_toolkit.calculator import calculate_loan
from calc_toolkit.cron import explain_cron
from calc_toolkit.data.defaults import (
    CALCULATION_DELAY_S,
    COMMON_EXAMPLES,
    CRON_FIELD_NAMES,
    DEFAULT_CRON_EXPRESSION,
    FIELD_REFERENCE,
    STORAGE_KEY,
    STORAGE_PATH,
)
from calc_toolkit.form import EMPTY_FORM, to_calculation, toggle_term_unit
from calc_toolkit.formatting import format_currency, format_percentage, format_timeperiod
from calc_toolkit.models import LoanCalculation, LoanFormData, LoanResult
from calc_toolkit.regex_tool import check_pattern
from calc_toolkit.storage import JsonFileBackend, LocalStore
from calc_toolkit.validation import validate_loan_inputs

logger = logging.getLogger(__name__)

console = Console()

TOOLS = ["loan", "cron", "regex", "quit"]

# Labels shown next to validation messages
FIELD_LABELS = {
    "loan_amount": "Loan amount",
    "annual_interest_rate": "Interest rate",
    "loan_term_months": "Loan term",
    "extra_monthly_payment": "Extra payment",
}

CALCULATION_ERROR = "An error occurred during calculation. Please check your inputs."


# ── Banner ────────────────────────────────────────────────────────────────────

def show_banner() -> None:
    title = Text("Calculator & Developer Tools", style="bold cyan")
    subtitle = Text(
        "Loan payment calculator  |  Spring Boot cron explainer  |  Regex tester",
        style="dim",
    )
    console.print(Panel(f"[bold]{title}[/bold]\n{subtitle}", expand=False, border_style="cyan"))
    console.print()


# ── Loan calculator ───────────────────────────────────────────────────────────

def prompt_loan_form(saved: LoanFormData) -> LoanFormData:
    console.print("[bold]Loan Payment Calculator[/bold]\n")

    form = saved
    unit = "months" if form.term_in_months else "years"
    if Confirm.ask(f"  Loan term is entered in {unit}. Switch unit?", default=False):
        form = toggle_term_unit(form)
        unit = "months" if form.term_in_months else "years"

    loan_amount = Prompt.ask("  Loan amount ($)", default=form.loan_amount or "300000")
    rate = Prompt.ask("  Annual interest rate (%)", default=form.annual_interest_rate or "4.5")
    term_default = form.loan_term or ("360" if form.term_in_months else "30")
    term = Prompt.ask(f"  Loan term ({unit})", default=term_default)
    extra = Prompt.ask(
        "  Extra monthly payment ($, optional)", default=form.extra_monthly_payment or "0"
    )
    console.print()

    return form.model_copy(
        update={
            "loan_amount": loan_amount.strip(),
            "annual_interest_rate": rate.strip(),
            "loan_term": term.strip(),
            "extra_monthly_payment": extra.strip(),
        }
    )


def show_validation_errors(errors: dict[str, str]) -> None:
    lines = [f"  [bold]{FIELD_LABELS.get(field, field)}:[/bold] {escape(msg)}" for field, msg in errors.items()]
    console.print(Panel("\n".join(lines), title="Please fix the following", border_style="red"))
    console.print()


def show_loan_result(params: LoanCalculation, result: LoanResult) -> None:
    table = Table(title="Loan Summary", border_style="blue", show_lines=True)
    table.add_column("Item", min_width=22)
    table.add_column("Value", justify="right", min_width=18)

    table.add_row("Monthly payment", f"[bold green]{format_currency(result.monthly_payment)}[/bold green]")
    table.add_row("Total interest", format_currency(result.total_interest))
    table.add_row("Total paid", format_currency(result.total_paid))
    table.add_row("Payoff time", format_timeperiod(result.payoff_time_months))
    if result.payoff_time_savings is not None:
        table.add_row(
            f"Time saved ({format_currency(params.extra_monthly_payment)}/mo extra)",
            f"[green]{format_timeperiod(result.payoff_time_savings)}[/green]",
        )

    console.print(table)
    console.print()


def generate_report_text(params: LoanCalculation, result: LoanResult) -> str:
    """Plain-text loan report, as written by the export step."""
    lines = [
        "Loan Payment Report",
        f"Generated: {date.today().isoformat()}",
        "=" * 60,
        "",
        "LOAN PARAMETERS",
        f"  Loan amount:        {format_currency(params.loan_amount)}",
        f"  Interest rate:      {format_percentage(params.annual_interest_rate)}",
        f"  Term:               {format_timeperiod(params.loan_term_months)}",
        f"  Extra payment:      {format_currency(params.extra_monthly_payment)}",
        "",
        "RESULTS",
        f"  Monthly payment:    {format_currency(result.monthly_payment)}",
        f"  Total interest:     {format_currency(result.total_interest)}",
        f"  Total paid:         {format_currency(result.total_paid)}",
        f"  Payoff time:        {format_timeperiod(result.payoff_time_months)}",
    ]
    if result.payoff_time_savings is not None:
        lines.append(f"  Time saved:         {format_timeperiod(result.payoff_time_savings)}")
    return "\n".join(lines)


def export_report(params: LoanCalculation, result: LoanResult) -> None:
    path = Path(Prompt.ask("  Output file path", default="loan_report.txt"))
    try:
        path.write_text(generate_report_text(params, result), encoding="utf-8")
    except OSError as exc:
        logger.warning("Failed to write report to %s: %s", path, exc)
        console.print(f"  [red]Could not save report to {escape(str(path))}: {escape(str(exc))}[/red]")
        return
    console.print(f"  [green]Report saved to {escape(str(path.resolve()))}[/green]")


def run_loan_calculator(store: LocalStore) -> None:
    saved = store.load_model(STORAGE_KEY, LoanFormData, EMPTY_FORM)
    form = prompt_loan_form(saved)
    store.save(STORAGE_KEY, form)

    params = to_calculation(form)
    validation = validate_loan_inputs(params)
    if not validation.is_valid:
        show_validation_errors(validation.error_map())
        return

    with console.status("[dim]Calculating...[/dim]"):
        time.sleep(CALCULATION_DELAY_S)
        try:
            result = calculate_loan(params)
        except Exception:
            logger.exception("Calculation error")
            console.print(f"[red]{CALCULATION_ERROR}[/red]\n")
            return

    show_loan_result(params, result)

    if Confirm.ask("  Export plain-text report?", default=False):
        export_report(params, result)
    if Confirm.ask("  Clear the saved form?", default=False):
        store.save(STORAGE_KEY, EMPTY_FORM)
    console.print()


# ── Cron explainer ────────────────────────────────────────────────────────────

def show_cron_reference() -> None:
    examples = Table(title="Common Examples", border_style="dim")
    examples.add_column("Expression", style="bold")
    examples.add_column("Meaning")
    for expr, desc in COMMON_EXAMPLES:
        examples.add_row(expr, desc)
    console.print(examples)

    reference = "\n".join(f"  [bold]{name}[/bold]: {FIELD_REFERENCE[name]}" for name in CRON_FIELD_NAMES)
    console.print(Panel(reference, title="Field Reference", border_style="blue", expand=False))
    console.print()


def show_cron_explanation(expression: str) -> None:
    explanation = explain_cron(expression)

    if not explanation.is_valid:
        console.print(Panel(f"[red]{escape(explanation.summary)}[/red]", title="Error", border_style="red"))
        console.print()
        return

    console.print(
        Panel(
            f"[bold green]{escape(explanation.summary)}[/bold green]",
            title="This cron job will run",
            border_style="green",
        )
    )

    table = Table(title="Field Breakdown", border_style="blue")
    table.add_column("Field", style="bold")
    table.add_column("Value", style="cyan")
    table.add_column("Meaning")
    for name, value, line in zip(CRON_FIELD_NAMES, expression.split(), explanation.breakdown):
        table.add_row(name, escape(value), escape(line.split(": ", 1)[1]))
    console.print(table)
    console.print()


def run_cron_explainer() -> None:
    console.print("[bold]Spring Boot Cron Explainer[/bold]\n")
    show_cron_reference()
    expression = Prompt.ask("  Cron expression", default=DEFAULT_CRON_EXPRESSION)
    console.print()
    show_cron_explanation(expression)


# ── Regex tester ──────────────────────────────────────────────────────────────

def run_regex_tester() -> None:
    console.print("[bold]Regex Tester[/bold]\n")
    pattern = Prompt.ask("  Pattern")
    text = Prompt.ask("  Test string", default="")
    result = check_pattern(pattern, text)

    if result.error is not None:
        console.print(f"  [red]{result.message}[/red] [dim]({escape(result.error)})[/dim]\n")
    elif result.matched:
        console.print(f"  [bold green]{result.message}[/bold green]\n")
    else:
        console.print(f"  [yellow]{result.message}[/yellow]\n")


# ── Main entry point ──────────────────────────────────────────────────────────

def main() -> None:
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    store = LocalStore(JsonFileBackend(STORAGE_PATH))

    try:
        show_banner()
        while True:
            tool = Prompt.ask("Tool", choices=TOOLS, default="loan")
            console.print()
            if tool == "quit":
                break
            if tool == "loan":
                run_loan_calculator(store)
            elif tool == "cron":
                run_cron_explainer()
            else:
                run_regex_tester()

        console.print("[bold cyan]Done.[/bold cyan]")

    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        sys.exit(0)


if __name__ == "__main__":
    main()
