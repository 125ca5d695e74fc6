"""View options of the plot: grid, background, legend, multi plot and symbols."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable, MutableMapping
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

SETTINGS_GROUP = "Plot"
KEY_DARK_BACKGROUND = "darkBackground"
KEY_GRID = "grid"
KEY_MINOR_GRID = "minorGrid"
KEY_LEGEND = "legend"
KEY_MULTI_PLOT = "multiPlot"
KEY_SYMBOLS = "symbols"
KEY_LEGEND_POSITION = "legendPosition"


class ShowSymbols(enum.Enum):
    """When curve symbols are drawn."""

    AUTO = "auto"
    SHOW = "show"
    HIDE = "hide"


class LegendPosition(enum.Enum):
    """Corner of the plot where the legend is placed."""

    TOP_LEFT = "topleft"
    TOP_RIGHT = "topright"
    BOTTOM_RIGHT = "bottomright"
    BOTTOM_LEFT = "bottomleft"


@dataclass
class PlotViewSettings:
    """A bundle of view options, used to move them between menus."""

    show_grid: bool = False
    show_minor_grid: bool = False
    dark_background: bool = False
    show_legend: bool = True
    show_multi: bool = False
    show_symbols: ShowSymbols = ShowSymbols.AUTO


def _to_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() not in ("", "0", "false")
    return bool(value)


class PlotMenu:
    """State of the plot view menu.

    ``on_symbols_changed`` is called when a different symbol option is selected,
    ``on_legend_changed`` when a legend position is selected or loaded.
    """

    def __init__(
        self,
        view: PlotViewSettings | None = None,
        on_symbols_changed: Callable[[ShowSymbols], None] | None = None,
        on_legend_changed: Callable[[LegendPosition], None] | None = None,
    ) -> None:
        self._on_symbols_changed = on_symbols_changed
        self._on_legend_changed = on_legend_changed
        defaults = PlotViewSettings()
        self.show_grid = defaults.show_grid
        self.show_minor_grid = defaults.show_minor_grid
        self.dark_background = defaults.dark_background
        self.show_legend = defaults.show_legend
        self.show_multi = defaults.show_multi
        self.show_symbols = defaults.show_symbols
        self.legend_position = LegendPosition.TOP_LEFT
        # minor grid can only be toggled while the major grid is shown
        self.minor_grid_enabled = False
        if view is not None:
            self.show_grid = view.show_grid
            self.show_minor_grid = view.show_minor_grid
            self.dark_background = view.dark_background
            self.show_legend = view.show_legend
            self.show_multi = view.show_multi
            self.select_symbols(view.show_symbols)

    def set_show_grid(self, checked: bool) -> None:
        """Show or hide the grid as the user does from the menu."""
        self.show_grid = checked
        self.minor_grid_enabled = checked

    def select_symbols(self, shown: ShowSymbols) -> None:
        """Select a symbol option; listeners are told only of a change."""
        if shown == self.show_symbols:
            return
        self.show_symbols = shown
        if self._on_symbols_changed is not None:
            self._on_symbols_changed(shown)

    def select_legend_position(self, position: LegendPosition) -> None:
        """Select a legend position and tell listeners."""
        self.legend_position = position
        self._emit_legend()

    def view_settings(self) -> PlotViewSettings:
        """The current menu selections."""
        return PlotViewSettings(
            show_grid=self.show_grid,
            show_minor_grid=self.show_minor_grid,
            dark_background=self.dark_background,
            show_legend=self.show_legend,
            show_multi=self.show_multi,
            show_symbols=self.show_symbols,
        )

    def save_settings(self, settings: MutableMapping[str, Any]) -> None:
        """Store the options under the plot group of ``settings``."""
        settings[SETTINGS_GROUP] = {
            KEY_DARK_BACKGROUND: self.dark_background,
            KEY_GRID: self.show_grid,
            KEY_MINOR_GRID: self.show_minor_grid,
            KEY_LEGEND: self.show_legend,
            KEY_MULTI_PLOT: self.show_multi,
            KEY_SYMBOLS: self.show_symbols.value,
            KEY_LEGEND_POSITION: self.legend_position.value,
        }

    def load_settings(self, settings: MutableMapping[str, Any]) -> None:
        """Load the options from the plot group of ``settings``.

        Missing options keep their current value; invalid ones are logged.
        """
        group = settings.get(SETTINGS_GROUP) or {}
        self.dark_background = _to_bool(group.get(KEY_DARK_BACKGROUND, self.dark_background))
        self.show_grid = _to_bool(group.get(KEY_GRID, self.show_grid))
        self.show_minor_grid = _to_bool(group.get(KEY_MINOR_GRID, self.show_minor_grid))
        self.minor_grid_enabled = self.show_grid
        self.show_legend = _to_bool(group.get(KEY_LEGEND, self.show_legend))
        self.show_multi = _to_bool(group.get(KEY_MULTI_PLOT, self.show_multi))

        symbols_text = str(group.get(KEY_SYMBOLS, "") or "")
        if symbols_text:
            try:
                self.select_symbols(ShowSymbols(symbols_text))
            except ValueError:
                logger.error("Invalid symbol setting: %s", symbols_text)

        legend_text = str(group.get(KEY_LEGEND_POSITION, "") or "")
        if legend_text:
            try:
                self.legend_position = LegendPosition(legend_text)
            except ValueError:
                logger.error("Invalid legend position setting: %s", legend_text)

        self._emit_legend()

    def _emit_legend(self) -> None:
        if self._on_legend_changed is not None:
            self._on_legend_changed(self.legend_position)