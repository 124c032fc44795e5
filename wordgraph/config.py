"""
Configuration Module
====================

Centralized configuration for a word graph Session.

This module provides a dataclass-based configuration system for the parts
of the system that are meant to be tuned: the random walk's pacing and log
file, the random seed, and numerical guards. PageRank's damping factor and
sweep count are fixed and live in constants.py instead.

Example:
    from wordgraph import Session, WordGraphConfig

    # Reproducible walks without the pacing delay
    config = WordGraphConfig(random_seed=42, walk_delay_seconds=0.0)
    session = Session(config=config)

    # Or modify defaults
    config = WordGraphConfig()
    config.walk_log_path = "/tmp/walk_log.txt"
    session = Session(config=config)
"""

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass
class WordGraphConfig:
    """
    Configuration settings for a word graph Session.

    Attributes:
        walk_delay_seconds: Pause between random walk steps when the walk is
            started with the delay flag. The pause is cancellable.
        walk_log_path: File the random walk appends visited words and its
            terminator to. Relative paths resolve against the working directory.
        walk_log_encoding: Text encoding of the walk log.
        walk_join_timeout: Seconds to wait for a cancelled walk thread to
            finish before giving up.

        random_seed: Seed for the session's random generator. None draws
            from system entropy; an int makes bridge choice and walks
            reproducible.

        idf_epsilon: When the IDF seed weights sum to less than this (in
            absolute value), PageRank falls back to the uniform seed.
    """

    # Random walk settings
    walk_delay_seconds: float = 0.3
    walk_log_path: str = "walk_log.txt"
    walk_log_encoding: str = "utf-8"
    walk_join_timeout: float = 5.0

    # Randomness
    random_seed: Optional[int] = None

    # Numerical guards
    idf_epsilon: float = 1e-12

    def __post_init__(self):
        """Validate configuration values after initialization."""
        self._validate()

    def _validate(self):
        """
        Validate configuration values are within acceptable ranges.

        Raises:
            ValueError: If any configuration value is invalid.
        """
        if self.walk_delay_seconds < 0:
            raise ValueError(
                f"walk_delay_seconds must be non-negative, got {self.walk_delay_seconds}"
            )
        if not self.walk_log_path:
            raise ValueError("walk_log_path must be a non-empty path")
        if not self.walk_log_encoding:
            raise ValueError("walk_log_encoding must be a non-empty encoding name")
        if self.walk_join_timeout <= 0:
            raise ValueError(
                f"walk_join_timeout must be positive, got {self.walk_join_timeout}"
            )

        if self.random_seed is not None and (
            isinstance(self.random_seed, bool) or not isinstance(self.random_seed, int)
        ):
            raise ValueError(
                f"random_seed must be an int or None, got {type(self.random_seed).__name__}"
            )

        if self.idf_epsilon <= 0:
            raise ValueError(
                f"idf_epsilon must be positive, got {self.idf_epsilon}"
            )

    def copy(self) -> 'WordGraphConfig':
        """
        Create a copy of this configuration.

        Returns:
            A new WordGraphConfig instance with the same values.
        """
        return WordGraphConfig(**self.to_dict())

    def to_dict(self) -> Dict:
        """
        Convert configuration to a dictionary for serialization.

        Returns:
            Dictionary representation of the configuration.
        """
        return {
            'walk_delay_seconds': self.walk_delay_seconds,
            'walk_log_path': self.walk_log_path,
            'walk_log_encoding': self.walk_log_encoding,
            'walk_join_timeout': self.walk_join_timeout,
            'random_seed': self.random_seed,
            'idf_epsilon': self.idf_epsilon,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'WordGraphConfig':
        """
        Create configuration from a dictionary.

        Args:
            data: Dictionary with configuration values.

        Returns:
            WordGraphConfig instance.
        """
        return cls(**data)


def get_default_config() -> WordGraphConfig:
    """
    Get a new instance of the default configuration.

    Returns:
        WordGraphConfig with default values.
    """
    return WordGraphConfig()
