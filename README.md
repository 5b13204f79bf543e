# frameutils

Small building blocks for programs that process video frames:

- `frameutils.baselog` sets up a shared core logger with a console sink
  and/or a size-rotated log file.
- `frameutils.frame_converter` maps every element of an 8-bit array
  through a 256-entry look-up table of float values, for example BGR
  values to linear sRGB or luminance values.
- `frameutils.json_wrapper` loads one or more JSON files (comments allowed),
  merges them in order, and reads and writes parameters by section.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Logging

```python
from frameutils.baselog import BaseLog, RotatingFileSinkParams

BaseLog.init()  # console only, every level, "[time] [thread] [level]: message"
log = BaseLog.get_core_logger()
log.info("started")

BaseLog.init_core_logger(
    console=True,
    file=True,
    level=2,  # info and above
    params=RotatingFileSinkParams("run.log"),
    pattern=None,  # keep the default "[date time.ms] [name] [level] message"
)
BaseLog.shut_down()  # flush and close every sink
```

`level` is a number from 0 to 6: trace, debug, info, warning, error,
critical, off. Any other number raises `ValueError`, as does `file=True`
without parameters or with an empty file name.

A pattern is made of `%`-flags: `%v` message, `%l` level name, `%L` its
first letter, `%n` logger name, `%t` thread id, `%P` process id, `%T`
time, `%Y %m %d %H %M %S` date and time parts, `%e` milliseconds, `%%` a
percent sign. `%^` and `%$` mark the range that the console sink colours by
level when it writes to a terminal.

`RotatingFileSinkParams` defaults to files of at most 1 MiB, five backups,
and rotation of a non-empty file when it is opened.
`BaseLog.set_logger_file` replaces a logger's last sink with a new rotating
file sink; `BaseLog.console_sink`, `BaseLog.rotating_file_sink` and
`BaseLog.basic_file_sink` build single sinks (`logging.Handler` objects).

## Look-up-table conversion

```python
import numpy as np
from frameutils.frame_converter import FrameConverter, FrameConverterParams

table = [i / 255.0 for i in range(256)]
converter = FrameConverter(table)
frame = np.zeros((720, 1280, 3), dtype=np.uint8)
converted = converter.convert(frame)   # float32 array of the same shape
converter.table                        # the table as a (256, 1) float32 column

converter = FrameConverter.from_params(FrameConverterParams(table))
```

`convert` raises `TypeError` for arrays that are not `uint8` and
`ValueError` when the table does not hold exactly 256 values.

## JSON configuration

```python
from frameutils.json_wrapper import JsonWrapper

config = JsonWrapper()
config.open_files(["defaults.json", "overrides.json"])  # later files win
fps = config.get_param("FrameRate", section="Video")
config.set_param("Threshold", 0.1, section="Flash")
config.set_vector("Flash", "Table", [0.0, 0.5, 1.0])
if config.contains_param("Threshold", section="Flash"):
    config.write_file("merged.json")
```

Each later file replaces the top-level keys of the earlier ones. Files that
cannot be read or parsed are reported on the core logger and skipped, as are
failed writes. `get_param` and `get_vector` raise `KeyError` for missing
entries (and `get_vector` `TypeError` for a value that is not a list);
`write_file` writes compact JSON with sorted keys.

Line (`//`) and block (`/* */`) comments outside strings are removed before
parsing. The same is available on its own as `strip_json_comments`.

## What it does not do

The package is a library only: it has no command-line program, and it does
not read, decode or analyse video itself; frames are passed in as NumPy
arrays.