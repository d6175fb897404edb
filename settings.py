import logging
from configparser import ConfigParser, Error as ConfigParserError
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from policy import FixedBitPolicy, parse_enum
from qr_capacity import ErrorCorrection

DEFAULT_CONFIG = "config.ini"


@dataclass(frozen=True)
class Settings:
    fixed_bit_policy: FixedBitPolicy = FixedBitPolicy.LENIENT
    qr_error_correction: ErrorCorrection = ErrorCorrection.M
    log_level: int = logging.WARNING
    log_file: Optional[str] = None


def parse_log_level(value: str) -> int:
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Invalid value '{value}' for key 'Logging.Level'")
    return level


def load_settings(path: Optional[Union[str, Path]] = None) -> Settings:
    """
    Reads the INI configuration. Without `path`, ./config.ini is read if it exists;
    a missing section or key keeps the defaults.

        [Codec]
        FixedBitPolicy = lenient | warning | strict
        [Qr]
        ErrorCorrection = L | M | Q | H
        [Logging]
        Level = WARNING
        File = /var/log/qr-url-uuid4.log

    :raises ValueError: if the file given as `path` cannot be read, the file is not
        valid INI, or a value cannot be interpreted
    """
    config = ConfigParser()
    try:
        if path is None:
            config.read(DEFAULT_CONFIG, encoding="utf-8")
        else:
            with open(path, encoding="utf-8") as f:
                config.read_file(f)
    except OSError as e:
        raise ValueError(f"Cannot read configuration file '{path}': {e.strerror}") from e
    except ConfigParserError as e:
        raise ValueError(f"Malformed configuration: {e}") from e
    defaults = Settings()

    policy = defaults.fixed_bit_policy
    if config.has_option("Codec", "FixedBitPolicy"):
        policy = parse_enum(FixedBitPolicy, config["Codec"]["FixedBitPolicy"], "Codec.FixedBitPolicy")

    level = defaults.qr_error_correction
    if config.has_option("Qr", "ErrorCorrection"):
        level = parse_enum(ErrorCorrection, config["Qr"]["ErrorCorrection"], "Qr.ErrorCorrection")

    log_level = defaults.log_level
    if config.has_option("Logging", "Level"):
        log_level = parse_log_level(config["Logging"]["Level"])

    log_file = config.get("Logging", "File", fallback="").strip() or None

    return Settings(fixed_bit_policy=policy, qr_error_correction=level,
                    log_level=log_level, log_file=log_file)
