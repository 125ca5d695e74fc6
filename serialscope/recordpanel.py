"""Recording options: file naming, column separator, timestamps and their settings."""

from __future__ import annotations

import enum
import logging
import os
import re
from collections.abc import MutableMapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

logger = logging.getLogger(__name__)

SETTINGS_GROUP = "Record"
KEY_AUTO_INCREMENT = "autoIncrement"
KEY_RECORD_PAUSED = "recordPaused"
KEY_STOP_ON_CLOSE = "stopOnClose"
KEY_HEADER = "header"
KEY_DISABLE_BUFFERING = "disableBuffering"
KEY_SEPARATOR = "separator"
KEY_DECIMALS = "decimals"
KEY_TIMESTAMP = "timestamp"
KEY_TIMESTAMP_FORMAT = "timestampFormat"

_NUMBER_PATTERN = re.compile(r"(.*?)(\d+)(?!.*\d)(.*)")


class TimestampOption(enum.Enum):
    """How each recorded row is timestamped."""

    DISABLED = "disabled"
    SECONDS = "seconds"
    SECONDS_PRECISION = "seconds_with_precision"
    MILLISECONDS = "milliseconds"


def format_timestamp(template: str, when: datetime | None = None) -> str:
    """Expand the ``strftime`` directives of ``template`` with local time ``when``."""
    if when is None:
        when = datetime.now()
    return when.strftime(template)


def increment_file_name(path: str) -> str:
    """The next file name in a numbered series.

    The last number in the base name is incremented; a name without a number
    gets ``_1`` appended. The extension is kept.
    """
    directory, name = os.path.split(path)
    if "." in name:
        base, _, suffix = name.rpartition(".")
    else:
        base, suffix = name, ""

    match = _NUMBER_PATTERN.match(base)
    if match:
        prefix, number, rest = match.groups()
        base = f"{prefix}{int(number) + 1}{rest}"
    else:
        base += "_1"

    if suffix:
        suffix = "." + suffix
    return os.path.join(directory or ".", base + suffix)


def parse_separator(text: str) -> str:
    """The column separator for ``text``, with ``\\t`` turned into a TAB.

    An empty separator is an error.
    """
    if not text:
        raise ValueError("Column separator cannot be empty! Please select a separator.")
    return text.replace("\\t", "\t")


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() not in ("", "0", "false")
    return bool(value)


@dataclass
class RecordOptions:
    """Options of the recording panel."""

    auto_increment: bool = True
    record_paused: bool = True
    stop_on_close: bool = True
    header: bool = True
    disable_buffering: bool = False
    separator: str = ","
    decimals: int = 6
    timestamp: bool = False
    timestamp_format: TimestampOption = TimestampOption.SECONDS

    def __post_init__(self) -> None:
        if self.timestamp_format is TimestampOption.DISABLED:
            raise ValueError("timestamp format must be a timestamp option, not DISABLED")

    def timestamp_option(self) -> TimestampOption:
        """The selected timestamp format, or ``DISABLED`` when timestamps are off."""
        return self.timestamp_format if self.timestamp else TimestampOption.DISABLED

    def save_settings(self, settings: MutableMapping[str, Any]) -> None:
        """Store the options under the record group of ``settings``."""
        if self.timestamp_format is TimestampOption.DISABLED:
            raise ValueError("timestamp format must be a timestamp option, not DISABLED")
        settings[SETTINGS_GROUP] = {
            KEY_AUTO_INCREMENT: self.auto_increment,
            KEY_RECORD_PAUSED: self.record_paused,
            KEY_STOP_ON_CLOSE: self.stop_on_close,
            KEY_HEADER: self.header,
            KEY_DISABLE_BUFFERING: self.disable_buffering,
            KEY_SEPARATOR: self.separator,
            KEY_DECIMALS: str(self.decimals),
            KEY_TIMESTAMP: self.timestamp,
            KEY_TIMESTAMP_FORMAT: self.timestamp_format.value,
        }

    def load_settings(self, settings: MutableMapping[str, Any]) -> None:
        """Load the options from the record group of ``settings``.

        Missing options keep their current value; invalid ones are logged.
        """
        group = settings.get(SETTINGS_GROUP) or {}
        self.auto_increment = _to_bool(group.get(KEY_AUTO_INCREMENT, self.auto_increment))
        self.record_paused = _to_bool(group.get(KEY_RECORD_PAUSED, self.record_paused))
        self.stop_on_close = _to_bool(group.get(KEY_STOP_ON_CLOSE, self.stop_on_close))
        self.header = _to_bool(group.get(KEY_HEADER, self.header))
        self.disable_buffering = _to_bool(
            group.get(KEY_DISABLE_BUFFERING, self.disable_buffering)
        )
        self.separator = str(group.get(KEY_SEPARATOR, self.separator))

        decimals = group.get(KEY_DECIMALS, self.decimals)
        try:
            self.decimals = int(str(decimals).strip())
        except ValueError:
            logger.error("Invalid decimals setting: %s", decimals)

        self.timestamp = _to_bool(group.get(KEY_TIMESTAMP, self.timestamp))

        format_text = str(group.get(KEY_TIMESTAMP_FORMAT, "") or "")
        if format_text:
            try:
                option = TimestampOption(format_text)
            except ValueError:
                option = None
            if option is None or option is TimestampOption.DISABLED:
                logger.error("Invalid timestamp format option: %s", format_text)
            else:
                self.timestamp_format = option