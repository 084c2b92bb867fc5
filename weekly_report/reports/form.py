"""Form state for the report editor.

The whole state is recomputed from the reference date and the raw day inputs
on every edit. When the reference date moves, previously entered days are
kept by position, so Monday's entry stays on Monday of the new week.
"""

from dataclasses import dataclass
from datetime import date
from typing import Sequence, Union

from .aggregate import summarize_week
from .day_records import derive_day_record
from .limits import DEFAULT_FIELD_LIMITS, FieldLimits
from .models import DayDerivation, DayInput, DayRecord, DayTemplate, WeekComputation, WeekTotals
from .weeks import DAYS_PER_WEEK, compute_weeks_from_reference


@dataclass(frozen=True)
class FormState:
    reference_date: str
    weeks: WeekComputation
    prev_week_days: tuple[DayRecord, ...]
    current_week_days: tuple[DayRecord, ...]
    prev_week_errors: tuple[tuple[str, ...], ...]
    current_week_errors: tuple[tuple[str, ...], ...]
    prev_totals: WeekTotals


def seed_week_inputs() -> tuple[DayInput, ...]:
    return tuple(DayInput() for _ in range(DAYS_PER_WEEK))


def merge_day_inputs(
    templates: Sequence[DayTemplate], prior: Sequence[DayInput]
) -> tuple[DayInput, ...]:
    """Zip new templates with prior inputs by index, blank where none exists"""
    return tuple(
        prior[index] if index < len(prior) else DayInput()
        for index in range(len(templates))
    )


def _derive_week(
    templates: Sequence[DayTemplate], inputs: Sequence[DayInput], limits: FieldLimits
) -> tuple[tuple[DayRecord, ...], tuple[tuple[str, ...], ...]]:
    derived: list[tuple[DayRecord, DayDerivation]] = [
        derive_day_record(template.label, day, limits.content)
        for template, day in zip(templates, merge_day_inputs(templates, inputs))
    ]
    records = tuple(record for record, _ in derived)
    errors = tuple(derivation.errors for _, derivation in derived)
    return records, errors


def derive_form(
    reference_date: Union[str, date],
    prev_inputs: Sequence[DayInput] = (),
    current_inputs: Sequence[DayInput] = (),
    limits: FieldLimits = DEFAULT_FIELD_LIMITS,
) -> FormState:
    """Compute week templates and derived day fields from raw form values.

    Raises:
        InvalidDateError: if the reference date cannot be parsed

    """
    weeks = compute_weeks_from_reference(reference_date)
    prev_days, prev_errors = _derive_week(weeks.prev_week_days, prev_inputs, limits)
    current_days, current_errors = _derive_week(weeks.current_week_days, current_inputs, limits)

    return FormState(
        reference_date=str(reference_date),
        weeks=weeks,
        prev_week_days=prev_days,
        current_week_days=current_days,
        prev_week_errors=prev_errors,
        current_week_errors=current_errors,
        prev_totals=summarize_week(prev_days),
    )


def change_reference_date(
    state: FormState, reference_date: Union[str, date], limits: FieldLimits = DEFAULT_FIELD_LIMITS
) -> FormState:
    """Move the form to a new week, keeping entered days by position"""
    return derive_form(
        reference_date,
        prev_inputs=[_to_input(record) for record in state.prev_week_days],
        current_inputs=[_to_input(record) for record in state.current_week_days],
        limits=limits,
    )


def _to_input(record: DayRecord) -> DayInput:
    return DayInput(
        stay_start=record.stay_start,
        stay_end=record.stay_end,
        break_start=record.break_start,
        break_end=record.break_end,
        content=record.content,
    )
