"""YAML configuration loading for match sorter runs."""

import hashlib
import time
from pathlib import Path
from typing import NoReturn

import yaml
from pydantic import ValidationError

from matchsorter.config.schemas import MatchSorterConfig
from matchsorter.observability import get_logger


logger = get_logger(__name__)

ErrorRecord = dict[str, str]


class ConfigValidationError(Exception):
    """Raised when a configuration file cannot be loaded or validated.

    Attributes:
        errors: One ``{"loc", "msg", "type"}`` record per problem.
        file_path: Path of the offending file.
    """

    def __init__(self, errors: list[ErrorRecord], file_path: str) -> None:
        self.errors = errors
        self.file_path = file_path
        super().__init__(f"Validation failed for {file_path}: {len(errors)} errors")


def _records_from_validation_error(error: ValidationError) -> list[ErrorRecord]:
    return [
        {
            "loc": ".".join(str(part) for part in detail["loc"]) or "config",
            "msg": detail["msg"],
            "type": detail["type"],
        }
        for detail in error.errors()
    ]


class ConfigLoader:
    """Reads a YAML file into a validated MatchSorterConfig.

    The loader remembers the checksum of the last file it loaded and the
    errors of the last failed attempt, so callers can report both.
    """

    def __init__(self) -> None:
        self._checksum: str | None = None
        self._errors: list[ErrorRecord] = []
        self._duration_ms = 0.0

    @property
    def file_checksum(self) -> str | None:
        """SHA-256 of the last successfully loaded file."""
        return self._checksum

    @property
    def validation_errors(self) -> list[ErrorRecord]:
        """Errors of the last load attempt (empty after a success)."""
        return list(self._errors)

    @property
    def validation_duration_ms(self) -> float:
        """Time the last successful load took, in milliseconds."""
        return self._duration_ms

    def load(self, config_path: Path) -> MatchSorterConfig:
        """Load and validate a configuration file.

        An empty file is treated as an empty mapping, so every default
        applies.

        Args:
            config_path: Path to the YAML configuration.

        Returns:
            Validated configuration.

        Raises:
            ConfigValidationError: If the file is missing, is not UTF-8,
                is not valid YAML, or fails schema validation.
        """
        started = time.perf_counter()
        self._errors = []
        log = logger.bind(component="config", file_path=str(config_path))

        try:
            raw = config_path.read_bytes()
        except FileNotFoundError as e:
            log.error("config_file_not_found", error=str(e))
            record = {"loc": "file", "msg": str(e), "type": "file_not_found"}
            self._fail(config_path, [record], e)

        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            log.error("config_file_encoding_error", error=str(e))
            record = {"loc": "file", "msg": str(e), "type": "file_encoding"}
            self._fail(config_path, [record], e)

        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as e:
            log.error("config_yaml_parse_error", error=str(e))
            record = {"loc": "yaml", "msg": str(e), "type": "yaml_parse_error"}
            self._fail(config_path, [record], e)

        try:
            config = MatchSorterConfig.model_validate(data)
        except ValidationError as e:
            records = _records_from_validation_error(e)
            log.error(
                "config_validation_failed",
                validation_error_count=len(records),
                errors=records,
            )
            self._fail(config_path, records, e)

        self._checksum = hashlib.sha256(raw).hexdigest()
        self._duration_ms = (time.perf_counter() - started) * 1000

        log.info(
            "config_loaded",
            file_sha256=self._checksum,
            key_count=len(config.keys),
            threshold=config.threshold,
            config_validation_duration_ms=self._duration_ms,
        )
        return config

    def _fail(
        self, config_path: Path, records: list[ErrorRecord], cause: Exception
    ) -> NoReturn:
        self._errors = records
        raise ConfigValidationError(self.validation_errors, str(config_path)) from cause


def load_config(config_path: Path) -> MatchSorterConfig:
    """Load a configuration file with a fresh loader."""
    return ConfigLoader().load(config_path)
