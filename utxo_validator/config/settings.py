"""
Configuration settings for the transaction validator
"""

import os
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError as SchemaError, field_validator

from utxo_validator.crypto.signatures import SUPPORTED_CURVES, SUPPORTED_HASHES
from utxo_validator.encoding.canonical import CANONICAL_ENCODING_VERSION, SUPPORTED_VERSIONS
from utxo_validator.exceptions import ConfigError

logger = logging.getLogger('utxo_validator.config')

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class CryptoConfig(BaseModel):
    model_config = {'validate_assignment': True}

    curve: str = Field(default="secp256k1")
    hash_algorithm: str = Field(default="sha256")

    @field_validator('curve')
    @classmethod
    def check_curve(cls, value: str) -> str:
        value = value.lower()
        if value not in SUPPORTED_CURVES:
            raise ValueError(f"unsupported curve {value!r}")
        return value

    @field_validator('hash_algorithm')
    @classmethod
    def check_hash(cls, value: str) -> str:
        value = value.lower()
        if value not in SUPPORTED_HASHES:
            raise ValueError(f"unsupported hash algorithm {value!r}")
        return value


class EncodingConfig(BaseModel):
    model_config = {'validate_assignment': True}

    version: int = Field(default=CANONICAL_ENCODING_VERSION)

    @field_validator('version')
    @classmethod
    def check_version(cls, value: int) -> int:
        if value not in SUPPORTED_VERSIONS:
            raise ValueError(f"unsupported canonical encoding version {value}")
        return value


class LoggingConfig(BaseModel):
    model_config = {'validate_assignment': True}

    level: str = Field(default="INFO")
    file: Optional[str] = Field(default=None)
    max_size: int = Field(default=10 * 1024 * 1024, ge=0)  # 10MB
    backup_count: int = Field(default=5, ge=0)
    json_format: bool = Field(default=False)
    format: str = Field(default="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    @field_validator('level')
    @classmethod
    def check_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return value


class Settings(BaseModel):
    """Complete validator settings"""
    crypto: CryptoConfig = Field(default_factory=CryptoConfig)
    encoding: EncodingConfig = Field(default_factory=EncodingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {'validate_assignment': True}

    @classmethod
    def from_dict(cls, config_dict: Optional[Dict[str, Any]]) -> 'Settings':
        try:
            return cls(**(config_dict or {}))
        except SchemaError as e:
            raise ConfigError(f"Invalid configuration: {e}")

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> 'Settings':
        """Load settings from a YAML file"""
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")

        try:
            with open(config_path, 'r') as f:
                config_data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Failed to load config: {e}")

        if config_data is not None and not isinstance(config_data, dict):
            raise ConfigError(f"Config file must contain a mapping: {config_path}")

        settings = cls.from_dict(config_data)
        logger.debug(f"Loaded settings from {config_path}")
        return settings

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()

    def save_to_file(self, config_path: Union[str, Path]) -> None:
        config_path = Path(config_path)
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(config_path, 'w') as f:
                yaml.safe_dump(self.to_dict(), f, default_flow_style=False, indent=2)
        except OSError as e:
            raise ConfigError(f"Failed to save config: {e}")

    def apply_env_overrides(self, environ: Optional[Dict[str, str]] = None) -> 'Settings':
        """Apply UTXO_VALIDATOR_* environment variables in place"""
        environ = os.environ if environ is None else environ

        try:
            if level := environ.get('UTXO_VALIDATOR_LOG_LEVEL'):
                self.logging.level = level
            if log_file := environ.get('UTXO_VALIDATOR_LOG_FILE'):
                self.logging.file = log_file
            if curve := environ.get('UTXO_VALIDATOR_CURVE'):
                self.crypto.curve = curve
            if hash_algorithm := environ.get('UTXO_VALIDATOR_HASH'):
                self.crypto.hash_algorithm = hash_algorithm
        except SchemaError as e:
            raise ConfigError(f"Invalid environment override: {e}")

        return self


def load_settings(config_path: Optional[Union[str, Path]] = None) -> Settings:
    """Load settings from an optional YAML file, then apply environment overrides"""
    settings = Settings.from_file(config_path) if config_path else Settings()
    return settings.apply_env_overrides()
