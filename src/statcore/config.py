"""Configuration dataclass for the analysis engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AnalysisConfig:
    """Policy constants shared by the reader, normalizer and engines.

    Attributes:
        max_rows: Rows kept after normalization; extra rows are dropped with a warning
        max_file_size_bytes: Largest file the reader accepts (default: 50MB)
        missing_rate_threshold: Missing fraction above which a column is flagged (default: 0.3)
        small_sample_threshold: Sample size below which results are flagged (default: 30)
        ci_alpha: Significance level of the mean-difference confidence interval (default: 0.05)
        levene_alpha: Threshold for the unequal-variance diagnostic (default: 0.05)
    """

    max_rows: int = 100_000
    max_file_size_bytes: int = 50 * 1024 * 1024
    missing_rate_threshold: float = 0.3
    small_sample_threshold: int = 30
    ci_alpha: float = 0.05
    levene_alpha: float = 0.05

    def __post_init__(self):
        """Validate configuration."""
        if self.max_rows < 1:
            raise ValueError(f"max_rows must be >= 1, got {self.max_rows}")

        if self.max_file_size_bytes < 1:
            raise ValueError(f"max_file_size_bytes must be >= 1, got {self.max_file_size_bytes}")

        if not 0 <= self.missing_rate_threshold <= 1:
            raise ValueError(
                f"missing_rate_threshold must be in [0, 1], got {self.missing_rate_threshold}"
            )

        if self.small_sample_threshold < 0:
            raise ValueError(
                f"small_sample_threshold must be >= 0, got {self.small_sample_threshold}"
            )

        for name in ("ci_alpha", "levene_alpha"):
            value = getattr(self, name)
            if value <= 0 or value >= 1:
                raise ValueError(f"{name} must be in (0, 1), got {value}")


DEFAULT_CONFIG = AnalysisConfig()
