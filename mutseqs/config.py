from __future__ import annotations
import logging
from dataclasses import dataclass, asdict, replace
from typing import Optional

logger = logging.getLogger(__name__)

MISSING_FIELD_POLICIES = ('raise', 'skip')


@dataclass
class SeqConfig:
    """library-wide defaults, overridable per call"""
    seed: Optional[int] = None  # default sampler seed, None draws fresh entropy
    reflect_fields: bool = True  # fall back to introspection for unregistered fields
    missing_field: str = 'raise'  # raise, skip
    log_level: str = 'WARNING'

    def __post_init__(self):
        if self.missing_field not in MISSING_FIELD_POLICIES:
            raise ValueError(f"missing_field must be one of {MISSING_FIELD_POLICIES}, got '{self.missing_field}'")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"unknown log level '{self.log_level}'")


_active = SeqConfig()


def get_config() -> SeqConfig:
    """the configuration used when a call does not pass one"""
    return _active


def set_config(config: SeqConfig) -> SeqConfig:
    """replace the active configuration, returning the previous one"""
    global _active
    previous, _active = _active, config
    logger.debug(f"config: {asdict(config)}")
    return previous


def configure(**overrides) -> SeqConfig:
    """update selected fields of the active configuration"""
    set_config(replace(_active, **overrides))
    return _active


def resolve(config: Optional[SeqConfig]) -> SeqConfig:
    return config if config is not None else _active


def configure_logging(level: Optional[str] = None) -> None:
    """minimal logging setup for applications and scripts"""
    level_name = (level or _active.log_level).upper()
    logging.basicConfig(level=getattr(logging, level_name), format='%(asctime)s - %(message)s')
    logging.getLogger('mutseqs').setLevel(level_name)
