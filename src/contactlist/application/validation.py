"""Console input validation. Returns Valid or Invalid instead of raising."""

from collections.abc import Iterable

from contactlist.application.dto import Invalid, Valid

EMPTY_INPUT = "Must enter an input."


def require_text(raw: str | None) -> Valid | Invalid:
    """Accept any non-blank input, trimmed."""
    value = (raw or "").strip()
    if not value:
        return Invalid(reason=EMPTY_INPUT)
    return Valid(value=value)


def optional_text(raw: str | None) -> str:
    """Trimmed input; empty means the field was skipped."""
    return (raw or "").strip()


def parse_choice(raw: str | None, choices: Iterable[str]) -> Valid | Invalid:
    """Accept raw only if, trimmed, it is one of choices."""
    choices = list(choices)
    value = (raw or "").strip()
    if value in choices:
        return Valid(value=value)
    return Invalid(
        reason=(
            "Operation invalid. Enter a new integer between "
            f"{choices[0]} to {choices[-1]} inclusive."
        )
    )
