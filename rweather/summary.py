"""Rule-based weather narrative.

Each rule takes :class:`~rweather.entities.SummaryFields` and returns a clause
(possibly empty).  :func:`summarize` concatenates the clauses of ``RULES`` in
order.
"""
from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from .entities import SummaryFields


DEGREE = "°"
CELSIUS_THRESHOLD = 20.0
FAHRENHEIT_THRESHOLD = 68.0

WRAP_UP = "If you're going outside i'd wrap up warm. "
NO_WARM_CLOTHES = "You should be ok without warm clothes today. "
UMBRELLA = "But don't forget to take an umbrella!"

_PRECIPITATION_WORDS = ("rain", "storm")


class MalformedNumeric(ValueError):
    """A temperature could not be read as a number."""


def _to_float(value: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise MalformedNumeric(f"temperature {value!r} is not numeric") from exc


def header(fields: SummaryFields) -> str:
    return (
        f"Weather summary for {fields.place}:\n"
        f"The weather in {fields.place} is {fields.condition.lower()}. "
    )


def forecast_divergence(fields: SummaryFields) -> str:
    upcoming = fields.next_condition
    if upcoming is None or upcoming == fields.condition:
        return ""
    return f"But the forecast says {upcoming.lower()}. "


def temperature(fields: SummaryFields) -> str:
    if fields.temp_c is not None and fields.temp_f is not None:
        reading = f"{fields.temp_c}{DEGREE}C ({fields.temp_f}{DEGREE}F)"
    elif fields.temp_c is not None:
        reading = f"{fields.temp_c}{DEGREE}C"
    elif fields.temp_f is not None:
        reading = f"{fields.temp_f}{DEGREE}F"
    else:
        return ""
    return f"The temperature is currently {reading}.\n"


def _reading(fields: SummaryFields) -> Tuple[float, float]:
    if fields.temp_c is not None:
        return _to_float(fields.temp_c), CELSIUS_THRESHOLD
    if fields.temp_f is not None:
        return _to_float(fields.temp_f), FAHRENHEIT_THRESHOLD
    raise MalformedNumeric("no temperature reported")


def temperature_advice(fields: SummaryFields) -> str:
    value, threshold = _reading(fields)
    if value < threshold:
        return WRAP_UP
    return NO_WARM_CLOTHES


def humidity(fields: SummaryFields) -> str:
    if fields.humidity is None:
        return ""
    return f"{fields.humidity}. "


def precipitation(fields: SummaryFields) -> str:
    for hint in fields.precipitation_hints:
        lowered = hint.lower()
        if any(word in lowered for word in _PRECIPITATION_WORDS):
            return UMBRELLA
    return ""


def footer(fields: SummaryFields) -> str:
    return "\n"


Rule = Callable[[SummaryFields], str]

RULES: List[Rule] = [
    header,
    forecast_divergence,
    temperature,
    temperature_advice,
    humidity,
    precipitation,
    footer,
]


def summarize(record, rules: Optional[List[Rule]] = None) -> str:
    """Build the narrative for ``record``.

    ``record`` is any weather record exposing ``summary_fields()``, or a
    :class:`SummaryFields` instance.  Raises :class:`MalformedNumeric` when the
    temperature is not a number.
    """
    fields = record if isinstance(record, SummaryFields) else record.summary_fields()
    return "".join(rule(fields) for rule in (rules or RULES))


__all__ = [
    "CELSIUS_THRESHOLD",
    "FAHRENHEIT_THRESHOLD",
    "MalformedNumeric",
    "RULES",
    "summarize",
]
