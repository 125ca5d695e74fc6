"""Ring buffers, sample packs, port selection, view and recording options for plotting serial-port data."""

__version__ = "0.1.0"