import io
import json
import os
from pathlib import Path

import pytest

from petreport.core.models import (
    Architecture,
    EnvManager,
    EnvManagerType,
    PythonEnvironment,
    PythonEnvironmentCategory as C,
)
from petreport.core.report import EnvironmentReport
from petreport.output.jsonout import to_json
from petreport.output.text import print_report, write_report


def pyenv_report() -> EnvironmentReport:
    return EnvironmentReport.from_environment(
        PythonEnvironment(
            display_name="3.10.13 (venv-a)",
            category=C.PyenvVirtualEnv,
            executable=Path("/home/u/.pyenv/versions/venv-a/bin/python"),
            version="3.10.13",
            manager=EnvManager(Path("/usr/bin/pyenv"), EnvManagerType.Pyenv, "2.3.0"),
            arch=Architecture.X86,
            symlinks=[Path("/home/u/.pyenv/versions/venv-a/bin/python3")],
        )
    )


def test_json_uses_camel_case_and_null():
    data = json.loads(to_json(pyenv_report()))
    assert list(data) == [
        "displayName",
        "name",
        "executable",
        "category",
        "version",
        "prefix",
        "manager",
        "project",
        "arch",
        "symlinks",
    ]
    assert data["displayName"] == "3.10.13 (venv-a)"
    assert data["category"] == "pyenv-virtualenv"
    assert data["arch"] == "x86"
    assert data["name"] is None
    assert data["prefix"] is None
    assert data["project"] is None
    assert data["manager"] == {"executable": "/usr/bin/pyenv", "version": "2.3.0", "tool": "pyenv"}
    assert data["symlinks"] == ["/home/u/.pyenv/versions/venv-a/bin/python3"]


def test_json_list_of_reports():
    empty = EnvironmentReport.from_environment(PythonEnvironment())
    data = json.loads(to_json([pyenv_report(), empty]))
    assert [d["category"] for d in data] == ["pyenv-virtualenv", "unknown"]


def test_write_report_matches_str():
    buf = io.StringIO()
    r = pyenv_report()
    write_report(r, buf)
    assert buf.getvalue() == str(r)


class FlakySink:
    def __init__(self, fail_on):
        self.fail_on = fail_on
        self.lines = []

    def write(self, s):
        if self.fail_on in s:
            raise OSError("broken pipe")
        self.lines.append(s)


def test_sink_errors_are_skipped_per_line():
    sink = FlakySink("Version")
    write_report(pyenv_report(), sink)
    text = "".join(sink.lines)
    assert text.startswith("Environment (pyenv-virtualenv)\n")
    assert "Version" not in text
    assert "   Manager     : pyenv, /usr/bin/pyenv\n" in text


def test_encode_errors_are_skipped():
    class AsciiSink(FlakySink):
        def write(self, s):
            s.encode("ascii")
            self.lines.append(s)

    sink = AsciiSink(None)
    r = EnvironmentReport.from_environment(PythonEnvironment(name="naïve", version="3.9.1"))
    write_report(r, sink)
    assert sink.lines == ["Environment (unknown)\n", "   Version     : 3.9.1\n"]


def test_print_report_defaults_to_stdout(capsys):
    print_report(pyenv_report())
    assert capsys.readouterr().out.splitlines()[0] == "Environment (pyenv-virtualenv)"


@pytest.mark.skipif(os.name == "nt", reason="surrogate-escaped paths are a POSIX concern")
def test_json_with_undecodable_paths_is_valid_utf8():
    bad = Path(os.fsdecode(b"/tmp/py\xff"))
    r = EnvironmentReport.from_environment(
        PythonEnvironment(
            executable=bad,
            prefix=bad,
            project=bad,
            manager=EnvManager(bad, EnvManagerType.Conda),
            symlinks=[bad, Path("/usr/bin/python3")],
        )
    )
    data = json.loads(to_json(r).encode("utf-8"))
    assert data["executable"] == ""
    assert data["prefix"] == ""
    assert data["project"] == ""
    assert data["manager"]["executable"] == ""
    assert data["symlinks"] == ["", "/usr/bin/python3"]


@pytest.mark.skipif(os.name == "nt", reason="surrogate-escaped paths are a POSIX concern")
def test_utf8_sink_drops_only_the_undecodable_project_line():
    buf = io.BytesIO()
    sink = io.TextIOWrapper(buf, encoding="utf-8", errors="strict")
    r = EnvironmentReport.from_environment(
        PythonEnvironment(project=Path(os.fsdecode(b"/home/u/p\xff")), version="3.11.4")
    )
    write_report(r, sink)
    sink.flush()
    assert buf.getvalue() == b"Environment (unknown)\n   Version     : 3.11.4\n"
