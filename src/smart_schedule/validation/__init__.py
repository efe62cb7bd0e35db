"""Trust boundary between model output and the export pipeline."""

from smart_schedule.validation.validator import parse_candidate, validate_events

__all__ = ["parse_candidate", "validate_events"]
