from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List

import pytest

from keepalive.local.supervisor import process_utils


class FakeProc:
    """Stands in for psutil.Popen; exits with a preset status when waited on."""

    _next_pid = 1000

    def __init__(self, returncode: int = 0) -> None:
        FakeProc._next_pid += 1
        self.pid = FakeProc._next_pid
        self.returncode = returncode
        self.running = True

    def wait(self) -> int:
        self.running = False
        return self.returncode


class ProcessRecorder:
    """Records launches and lets tests script what each wait does."""

    def __init__(self) -> None:
        self.launches: List[FakeProc] = []
        self.launch_cwds: List[Path] = []
        self.on_wait = None

    def running(self) -> List[FakeProc]:
        return [p for p in self.launches if p.running]

    def launch(self, executable, cwd) -> FakeProc:
        proc = FakeProc()
        self.launches.append(proc)
        self.launch_cwds.append(Path(cwd))
        return proc

    def wait(self, proc: FakeProc) -> int:
        if self.on_wait is not None:
            self.on_wait(self, proc)
        return proc.wait()


@pytest.fixture()
def executable(tmp_path: Path) -> Path:
    app_dir = tmp_path / "srv" / "app"
    app_dir.mkdir(parents=True)
    path = app_dir / "run"
    path.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
    path.chmod(0o644)
    return path


@pytest.fixture()
def recorder(monkeypatch: pytest.MonkeyPatch) -> ProcessRecorder:
    rec = ProcessRecorder()
    monkeypatch.setattr(process_utils, "launch_process", rec.launch)
    monkeypatch.setattr(process_utils, "wait_for_exit", rec.wait)
    return rec


@pytest.fixture()
def exit_codes() -> List[int]:
    return []


@pytest.fixture()
def restore_root_logger() -> Iterator[logging.Logger]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
