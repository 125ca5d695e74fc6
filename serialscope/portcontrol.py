"""Serial port selection, configuration and opening."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable, MutableMapping
from dataclasses import dataclass
from typing import Any

import serial

from serialscope.portlist import PortList, PortListItem

logger = logging.getLogger(__name__)

SETTINGS_GROUP = "Port"
KEY_SELECTED_PORT = "selectedPort"
KEY_BAUD_RATE = "baudRate"
KEY_PARITY = "parity"
KEY_DATA_BITS = "dataBits"
KEY_STOP_BITS = "stopBits"
KEY_FLOW_CONTROL = "flowControl"

DEFAULT_BAUD_RATE = 9600


class Parity(str, enum.Enum):
    """Parity options; values are the serial library's parity codes."""

    NONE = serial.PARITY_NONE
    ODD = serial.PARITY_ODD
    EVEN = serial.PARITY_EVEN

    @property
    def setting_text(self) -> str:
        return _PARITY_TEXT[self]

    @classmethod
    def from_setting_text(cls, text: str) -> Parity:
        for parity, parity_text in _PARITY_TEXT.items():
            if parity_text == text:
                return parity
        raise ValueError(f"invalid parity setting: {text!r}")


_PARITY_TEXT = {Parity.NONE: "none", Parity.ODD: "odd", Parity.EVEN: "even"}


class DataBits(enum.IntEnum):
    """Number of data bits in a frame."""

    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8


class StopBits(enum.Enum):
    """Number of stop bits in a frame."""

    ONE = 1
    ONE_POINT_FIVE = 1.5
    TWO = 2


class FlowControl(str, enum.Enum):
    """Flow control options; values are the texts stored in settings."""

    NONE = "none"
    HARDWARE = "hardware"
    SOFTWARE = "software"


@dataclass
class PortConfig:
    """Line settings applied to the port when it is opened."""

    baud_rate: int = DEFAULT_BAUD_RATE
    parity: Parity = Parity.NONE
    data_bits: DataBits = DataBits.EIGHT
    stop_bits: StopBits = StopBits.ONE
    flow_control: FlowControl = FlowControl.NONE
    dtr: bool = True
    rts: bool = True


def max_bit_rate(baud_rate: float, data_bits: Any, parity: Any, stop_bits: Any) -> int:
    """Maximum rate of payload bits per second for the given line settings.

    A frame is one start bit, the data bits, an optional parity bit and the
    stop bits.
    """
    data = float(getattr(data_bits, "value", data_bits))
    parity_bits = 0.0 if parity == Parity.NONE else 1.0
    stop = float(getattr(stop_bits, "value", stop_bits))
    frame_size = 1.0 + data + parity_bits + stop
    return int(float(baud_rate) / frame_size)


def _parse_baud(text: Any) -> int | None:
    try:
        value = int(str(text).strip())
    except ValueError:
        return None
    return value if value > 0 else None


class PortControl:
    """Selects, configures, opens and closes a serial port.

    ``port`` is an unopened ``serial.Serial`` (or an object with the same
    interface). ``on_toggled`` is called with ``True`` after the port opens and
    ``False`` after it closes. ``port_text`` is the entered or selected port
    text, as shown in the port list.
    """

    def __init__(
        self,
        port: Any,
        port_list: PortList | None = None,
        on_toggled: Callable[[bool], None] | None = None,
    ) -> None:
        self.port = port
        self.port_list = port_list if port_list is not None else PortList()
        self._on_toggled = on_toggled
        self.config = PortConfig()
        self.port_text = self.port_list[0].text if len(self.port_list) else ""

    def selected_port_name(self) -> str:
        """The port name for the current text; the text itself if not listed."""
        index = self.port_list.index_of(self.port_text)
        if index is None:
            return self.port_text
        return self.port_list[index].port_name

    def select_port(self, port_name: str) -> None:
        """Select ``port_name``, adding it to the list if needed.

        If another port is open it is closed and the new one opened.
        """
        index = self.port_list.index_of_name(port_name)
        if index is None:
            self.port_list.append(PortListItem(port_name))
            index = len(self.port_list) - 1
        self.port_text = self.port_list[index].text
        self._select_listed_port(port_name)

    def _select_listed_port(self, port_name: str) -> None:
        port_name = port_name.split(" ")[0]
        if self.port_list.index_of_name(port_name) is None:
            logger.warning("Device doesn't exist: %s", port_name)
        if port_name != self.port.port and self.port.is_open:
            self.toggle_port()
            self.toggle_port()

    def select_baudrate(self, baud_rate: Any) -> None:
        """Select a baud rate, applying it at once if the port is open."""
        value = _parse_baud(baud_rate)
        if value is None:
            raise ValueError(f"invalid baud rate: {baud_rate!r}")
        self.config.baud_rate = value
        if self.port.is_open:
            self._set(lambda: setattr(self.port, "baudrate", value), "Can't set baud rate!")

    def toggle_port(self) -> None:
        """Close the port if it is open, otherwise open the selected port."""
        if self.port.is_open:
            self.port.close()
            logger.debug("Closed port: %s", self.port.port)
            self._emit(False)
            return

        port_text = self.port_text.strip()
        if not port_text:
            logger.warning("Select or enter a port name!")
            return

        index = self.port_list.index_of(port_text)
        if index is None:
            self.port_list.append(PortListItem(port_text))
            self.port_text = port_text
            port_name = port_text
        else:
            port_name = self.port_list[index].port_name

        try:
            self.port.port = port_name
            self.port.open()
        except (serial.SerialException, OSError, ValueError) as error:
            logger.error("Can't open port %s: %s", port_name, error)
            return

        if self.port.is_open:
            self._apply_config()
            logger.debug("Opened port: %s", self.port.port)
            self._emit(True)

    def open_port(self) -> None:
        """Open the selected port unless a port is already open."""
        if not self.port.is_open:
            self.toggle_port()

    def max_bit_rate(self) -> int:
        """Maximum payload bit rate for the port's current settings."""
        return max_bit_rate(
            self.port.baudrate, self.port.bytesize, self.port.parity, self.port.stopbits
        )

    def save_settings(self, settings: MutableMapping[str, Any]) -> None:
        """Store port settings under the port group of ``settings``."""
        stop = self.config.stop_bits.value
        settings[SETTINGS_GROUP] = {
            KEY_SELECTED_PORT: self.selected_port_name(),
            KEY_BAUD_RATE: str(self.config.baud_rate),
            KEY_PARITY: self.config.parity.setting_text,
            KEY_DATA_BITS: int(self.config.data_bits),
            KEY_STOP_BITS: int(stop) if float(stop).is_integer() else stop,
            KEY_FLOW_CONTROL: self.config.flow_control.value,
        }

    def load_settings(self, settings: MutableMapping[str, Any]) -> None:
        """Load port settings from ``settings``, closing the port if open.

        Missing settings keep their current value; invalid ones are logged.
        """
        if self.port.is_open:
            self.toggle_port()

        group = settings.get(SETTINGS_GROUP) or {}

        port_name = str(group.get(KEY_SELECTED_PORT, "") or "")
        if port_name:
            index = self.port_list.index_of_name(port_name)
            if index is not None:
                self.port_text = self.port_list[index].text

        baud_text = group.get(KEY_BAUD_RATE, str(self.config.baud_rate))
        baud = _parse_baud(baud_text)
        if baud is None:
            logger.error("Invalid baud setting: %s", baud_text)
        else:
            self.config.baud_rate = baud

        parity_text = str(group.get(KEY_PARITY, self.config.parity.setting_text))
        try:
            self.config.parity = Parity.from_setting_text(parity_text)
        except ValueError:
            pass

        try:
            data_bits = int(group.get(KEY_DATA_BITS, int(self.config.data_bits)))
        except (TypeError, ValueError):
            data_bits = 0
        if 5 <= data_bits <= 8:
            self.config.data_bits = DataBits(data_bits)

        try:
            stop_bits = int(group.get(KEY_STOP_BITS, 0))
        except (TypeError, ValueError):
            stop_bits = 0
        if stop_bits == 1:
            self.config.stop_bits = StopBits.ONE
        elif stop_bits == 2:
            self.config.stop_bits = StopBits.TWO

        flow_text = str(group.get(KEY_FLOW_CONTROL, self.config.flow_control.value))
        if flow_text == FlowControl.HARDWARE.value:
            self.config.flow_control = FlowControl.HARDWARE
        elif flow_text == FlowControl.SOFTWARE.value:
            self.config.flow_control = FlowControl.SOFTWARE
        else:
            self.config.flow_control = FlowControl.NONE

    def _apply_config(self) -> None:
        config = self.config
        port = self.port
        self._set(lambda: setattr(port, "baudrate", config.baud_rate), "Can't set baud rate!")
        self._set(lambda: setattr(port, "parity", config.parity.value),
                  "Can't set parity option!")
        self._set(lambda: setattr(port, "bytesize", int(config.data_bits)),
                  "Can't set number of data bits!")
        self._set(lambda: setattr(port, "stopbits", config.stop_bits.value),
                  "Can't set number of stop bits!")

        def flow() -> None:
            port.rtscts = config.flow_control is FlowControl.HARDWARE
            port.xonxoff = config.flow_control is FlowControl.SOFTWARE

        self._set(flow, "Can't set flow control option!")
        self._set(lambda: setattr(port, "dtr", config.dtr), "Can't set DTR!")
        self._set(lambda: setattr(port, "rts", config.rts), "Can't set RTS!")

    @staticmethod
    def _set(action: Callable[[], None], message: str) -> None:
        try:
            action()
        except (serial.SerialException, OSError, ValueError) as error:
            logger.error("%s %s", message, error)

    def _emit(self, is_open: bool) -> None:
        if self._on_toggled is not None:
            self._on_toggled(is_open)