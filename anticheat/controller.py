"""Launching, polling and terminating a target process."""

from __future__ import annotations

import logging
import subprocess

from anticheat.errors import FailedPreconditionError, InternalError
from anticheat.handle import Handle

logger = logging.getLogger(__name__)


def _release(process: subprocess.Popen) -> None:
    # Reap the child if it has already exited; a running child is left alone.
    process.poll()


class ProcessController:
    """Controls a single target process started from an executable path."""

    def __init__(self, path: str) -> None:
        logger.debug("ProcessController(%r) created", path)
        self.path = path
        self._handle: Handle | None = None

    def launch(self) -> None:
        """Start the target; raise InternalError if it cannot be started."""
        logger.debug("ProcessController.launch() called")
        try:
            process = subprocess.Popen([self.path])
        except OSError as exc:
            code = exc.errno if exc.errno is not None else 0
            raise InternalError(
                f"ProcessController.launch() failed: CreateProcess({self.path}) "
                f"failed with error code {code}"
            ) from exc
        if self._handle is not None:
            self._handle.close()
        self._handle = Handle(process, _release)

    def is_running(self) -> bool:
        """Return whether the launched target is still alive."""
        logger.debug("ProcessController.is_running() called")
        process = self._target("ProcessController.is_running()")
        try:
            return process.poll() is None
        except OSError as exc:
            raise InternalError(
                "ProcessController.is_running() failed: wait failed with error "
                f"code {exc.errno if exc.errno is not None else 0}"
            ) from exc

    def terminate(self) -> None:
        """Terminate the target unless it has already exited."""
        logger.debug("ProcessController.terminate() called")
        if not self.is_running():
            logger.info(
                "ProcessController.terminate() skipped: Target already terminated"
            )
            return
        process = self._target("ProcessController.terminate()")
        try:
            process.terminate()
        except OSError as exc:
            raise InternalError(
                "ProcessController.terminate() failed: TerminateProcess() failed "
                f"with error code {exc.errno if exc.errno is not None else 0}"
            ) from exc

    def _target(self, caller: str) -> subprocess.Popen:
        if self._handle is None or not self._handle.is_valid():
            raise FailedPreconditionError(f"{caller} failed: Invalid process handle")
        return self._handle.get()