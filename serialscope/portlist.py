"""A list of serial ports available for selection, including user-entered ones."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from serial.tools import list_ports


class PortIcon(enum.Enum):
    """Kind of icon shown next to a port."""

    USB = "usb"
    BLUETOOTH = "bluetooth"
    RS232 = "rs232"


class PortListItem:
    """One entry of the port list: its display text and the actual port name."""

    def __init__(self, name: str, description: str = "", vid: int = 0, pid: int = 0) -> None:
        text = name
        if description:
            text += " " + description
        # internal or RS232 ports may report a VID and PID as well
        if vid and pid and "tty" not in name:
            text += f"[{vid:04x}:{pid:04x}]"
            self.icon = PortIcon.USB
        elif "rfcomm" in name:
            self.icon = PortIcon.BLUETOOTH
        else:
            self.icon = PortIcon.RS232
        self.text = text
        self.port_name = name

    @classmethod
    def from_port_info(cls, info: Any) -> PortListItem:
        """Create an item from a port description as returned by ``comports()``."""
        device = info.device
        pid = getattr(info, "pid", None)
        if pid is None:
            return cls(device)
        description = getattr(info, "description", "") or ""
        if description == "n/a":
            description = ""
        return cls(device, description, getattr(info, "vid", 0) or 0, pid)

    def __repr__(self) -> str:
        return f"PortListItem(text={self.text!r}, port_name={self.port_name!r})"


def _system_ports() -> Iterable[Any]:
    return list_ports.comports()


class PortList:
    """Ports found on the system followed by ports the user has entered.

    ``port_source`` returns port descriptions with ``device``, ``description``,
    ``vid`` and ``pid`` attributes; by default the system's serial ports.
    """

    def __init__(self, port_source: Callable[[], Iterable[Any]] | None = None) -> None:
        self._port_source = port_source or _system_ports
        self._items: list[PortListItem] = []
        self._user_entered: list[str] = []
        self.load_port_list()

    def load_port_list(self) -> None:
        """Reload the list from the port source, keeping user-entered ports."""
        self._items = [PortListItem.from_port_info(info) for info in self._port_source()]
        self._items.extend(PortListItem(name) for name in self._user_entered)

    def append(self, item: PortListItem) -> None:
        """Add a user-entered port; its display text becomes its port name."""
        item.port_name = item.text
        self._items.append(item)
        self._user_entered.append(item.text)

    def index_of(self, port_text: str) -> int | None:
        """Index of the item displayed as ``port_text``, or ``None``."""
        return next((i for i, item in enumerate(self._items) if item.text == port_text), None)

    def index_of_name(self, port_name: str) -> int | None:
        """Index of the item for the port ``port_name``, or ``None``."""
        return next(
            (i for i, item in enumerate(self._items) if item.port_name == port_name), None
        )

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> PortListItem:
        return self._items[index]

    def __iter__(self) -> Iterator[PortListItem]:
        return iter(self._items)