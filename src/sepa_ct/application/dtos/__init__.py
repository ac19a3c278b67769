"""Data transfer objects for the application layer."""

from sepa_ct.application.dtos.build_result import BuildResult

__all__ = ["BuildResult"]
