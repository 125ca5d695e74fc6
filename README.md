# serialscope

The non-graphical core of a serial-port plotter. It holds the data
structures and the decision logic, so any front end can use them.

## Contents

- `serialscope.framebuffer`: the abstract frame buffers (`FrameBuffer`,
  `ResizableBuffer`, `WFrameBuffer`, `XFrameBuffer`) and `Range`, which holds
  the minimum and maximum of a buffer's values. Every `FrameBuffer` can be
  iterated over.
- `serialscope.ringbuffer`: `RingBuffer`, a fixed-size buffer that keeps the
  newest samples. Index 0 is the oldest sample. It caches its limits.
  Resizing keeps the newest values and pads with zeros at the start.
- `serialscope.samplepack`: `SamplePack`, a zero-filled block of samples for
  several channels, with optional X data. `copy()` returns an independent copy.
- `serialscope.samplecounter`: `SampleCounter`, which counts fed samples and
  calls `on_sps` with the samples-per-second rate once more than a second has
  passed. The clock can be injected.
- `serialscope.portlist`: `PortListItem` and `PortList`. A `PortList` holds the
  serial ports that pyserial finds, or those of any `port_source` you give it,
  followed by the ports the user has entered. Each item has a `text` for
  display, a `port_name` and an `icon` (`PortIcon.USB`, `BLUETOOTH` or
  `RS232`).
- `serialscope.plotmenu`: `PlotMenu`, which holds the view options: grid, minor
  grid, dark background, legend and its `LegendPosition`, multi plot and
  `ShowSymbols`. `PlotViewSettings` bundles these options. `save_settings` and
  `load_settings` store them under the `"Plot"` key of a settings mapping.
- `serialscope.portcontrol`: `PortControl`, which selects, opens, closes and
  configures a `serial.Serial` port from a `PortConfig` (baud rate, `Parity`,
  `DataBits`, `StopBits`, `FlowControl`, DTR and RTS). It also has
  `max_bit_rate` for the payload bit rate, and saves and loads its settings
  under the `"Port"` key.
- `serialscope.recordpanel`: `RecordOptions` with `TimestampOption`, which are
  saved and loaded under the `"Record"` key. It also has the helpers
  `format_timestamp` (strftime expansion), `increment_file_name` (bumps the
  last number in the base name or appends `_1`) and `parse_separator` (turns
  `\t` into a TAB and rejects an empty separator).
- `serialscope.scalepicker`: `ScaleMap`, a linear value-to-pixel map, and
  `ScalePicker`. The picker turns press, move and release events along an axis
  scale into a picked range, snapping to ticks unless Shift is held, and it
  places the tracker text.
- `serialscope.snapshotoverlay`: `SnapshotFlash`, the 500 ms fading frame shown
  when a snapshot is taken, with the helpers `fade_alpha` and `overlay_rect`.

## Installation

```
pip install .
```

## Example

```python
from serialscope.ringbuffer import RingBuffer

buf = RingBuffer(10)
buf.add_samples([1, 2, 3, 4, 5, 6, 7, 8, 9, 10])
buf.add_samples([11])
print(buf.sample(0), buf.sample(9))   # 2.0 11.0
print(buf.limits())                   # Range(start=2.0, end=11.0)
```

## What it does not do

- It has no graphical interface and no command to run.
- It does not read data from a port into buffers.
- It does not write recording files. `RecordOptions` only holds the options
  for recording.
- It has no frozen snapshot buffer. A `RingBuffer` can be copied sample by
  sample with `list(buf)`.

## Tests

```
pip install .[test]
pytest
```