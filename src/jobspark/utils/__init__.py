"""Utility functions for JobSpark."""

from jobspark.utils.date_utils import describe_elapsed, is_ongoing, is_recent, parse_partial_date

__all__ = ["describe_elapsed", "is_ongoing", "is_recent", "parse_partial_date"]
