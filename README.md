# anticheat

A small supervisor. It starts a target program, checks whether the program
is still running, and terminates it if it is.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
anticheat [TARGET]
```

`TARGET` is the executable to launch. It defaults to
`C:\Windows\System32\notepad.exe`. The program is started without
arguments. On a system where that path does not exist, give a target
explicitly, for example:

```
anticheat /usr/bin/yes
```

The command prints a banner to standard output and then launches the
target. It logs that the target was launched. If the target is still
running, the command terminates it, and then logs that the target was
terminated. Log lines go to standard error in the form
`[LEVEL] message`, and debug messages are included.

The exit status is 0 on success. It is 1 if any step raised a
`ControllerError`. In that case the command logs a critical message
`Anti-Cheat failed` followed by the error as `CODE: message`, for
example `INTERNAL: ...` when the target could not be started.

## Library use

### `anticheat.controller.ProcessController`

`ProcessController` wraps one target program:

```python
from anticheat.controller import ProcessController
from anticheat.errors import ControllerError

controller = ProcessController("/usr/bin/yes")
try:
    controller.launch()
    if controller.is_running():
        controller.terminate()
except ControllerError as exc:
    print(f"failed: {exc.describe()}")
```

- `launch()` starts the program at `path`. It raises `InternalError` if
  the program cannot be started, and the message includes the error code.
  If the controller already held a started process, it releases its
  handle on that process and keeps the new one.
- `is_running()` returns `True` while the program has not exited.
- `terminate()` asks the program to stop. If the program has already
  exited, it only logs that the step was skipped.
- Calling `is_running()` or `terminate()` before `launch()` raises
  `FailedPreconditionError`.

### `anticheat.errors`

`ControllerError` is the base class. It has two subclasses,
`InternalError` (code `INTERNAL`) and `FailedPreconditionError` (code
`FAILED_PRECONDITION`). `describe()` returns the error as
`CODE: message`.

### `anticheat.app`

- `print_logo(stream=None)` writes the banner to `stream`, or to standard
  output if no stream is given.
- `main_loop(target_path=DEFAULT_TARGET)` launches the target and
  terminates it if it is still running.
- `run(target_path=DEFAULT_TARGET, stream=None)` prints the banner and
  then calls `main_loop`.

### `anticheat.handle.Handle`

`Handle(raw, closer)` owns a resource together with the function that
releases it.

- `get()` returns the resource, or `None` once it has been released.
- `is_valid()` tells whether the handle still holds the resource.
- `close()` calls `closer` at most once. Later calls do nothing. A `with`
  block closes the handle when it ends, and so does garbage collection.
- `take()` gives up ownership and returns the resource without closing
  it. This leaves the handle invalid.

## What it does not do

The package does not inspect the target in any way. It does not scan
memory, detect cheats or watch the target over time. Between launching
the target and terminating it, no other work is done. The command has no
options beyond the target path.