import logging
import stat
import sys

from anticheat.cli import main


def _script(tmp_path, name, body):
    path = tmp_path / name
    path.write_text(f"#!{sys.executable}\n{body}\n")
    path.chmod(path.stat().st_mode | stat.S_IXUSR)
    return str(path)


def test_main_fails_for_missing_target(tmp_path, caplog, capsys):
    with caplog.at_level(logging.DEBUG, logger="anticheat"):
        code = main([str(tmp_path / "missing")])
    assert code == 1
    critical = [r for r in caplog.records if r.levelno == logging.CRITICAL]
    assert len(critical) == 1
    assert critical[0].getMessage().startswith("Anti-Cheat failed\nINTERNAL: ")
    assert "+====" in capsys.readouterr().out


def test_main_succeeds_with_running_target(tmp_path, caplog):
    path = _script(tmp_path, "sleeper.py", "import time\ntime.sleep(60)")
    with caplog.at_level(logging.DEBUG, logger="anticheat"):
        code = main([path])
    assert code == 0
    messages = [r.getMessage() for r in caplog.records]
    assert messages[0] == "Anti-Cheat started"
    assert messages[-1] == "Anti-Cheat exiting"