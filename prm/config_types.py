"""Typed configuration dataclasses for path-rank-matcher.

Provides strongly-typed configuration objects that can be used throughout
the application for better type safety and IDE support.
"""
from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import List, Dict, Any, Optional


@dataclass
class ScanConfig:
    """Directory scan configuration."""
    extensions: List[str] = field(default_factory=list)  # empty = every file
    output: str = "scan_result.txt"
    ignore_patterns: List[str] = field(default_factory=list)
    follow_symlinks: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class RankConfig:
    """Pattern ranking configuration (aligned with _DEFAULTS)."""
    top_k: int = 20
    min_pattern_length: int = 3
    matcher_kind: str = "path"
    workers: int = 1
    timeout: float = 0  # seconds, 0 disables
    output: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class LoggingConfig:
    """Progress logging configuration."""
    progress_enabled: bool = True
    progress_interval: int = 1000

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class AppConfig:
    """Root application configuration with all subsections."""
    log_level: str = "INFO"
    scan: ScanConfig = field(default_factory=ScanConfig)
    rank: RankConfig = field(default_factory=RankConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to nested dictionary.

        Returns:
            Nested dict structure matching config format
        """
        return {
            "log_level": self.log_level,
            "scan": self.scan.to_dict(),
            "rank": self.rank.to_dict(),
            "logging": self.logging.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> AppConfig:
        """Create typed config from dictionary.

        Args:
            data: Dictionary config (from load_config)

        Returns:
            Typed AppConfig instance
        """
        return cls(
            log_level=data.get("log_level", "INFO"),
            scan=ScanConfig(**data.get("scan", {})),
            rank=RankConfig(**data.get("rank", {})),
            logging=LoggingConfig(**data.get("logging", {})),
        )


__all__ = [
    "AppConfig",
    "ScanConfig",
    "RankConfig",
    "LoggingConfig",
]
