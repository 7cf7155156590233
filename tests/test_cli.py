"""Tests for the javadecl command line."""

import json
import logging

import pytest

from javadecl.main import main


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    logger = logging.getLogger("javadecl")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def project(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("JAVADECL_CONFIG", raising=False)
    monkeypatch.delenv("JAVADECL_OUTPUT", raising=False)

    src = tmp_path / "Foo.java"
    src.write_text("public class Foo { private int x; public void bar() {} }", encoding="utf-8")
    config = tmp_path / "src" / "JSON" / "filePath.json"
    config.parent.mkdir(parents=True)
    config.write_text(json.dumps({"filePaths": ["Foo.java"]}), encoding="utf-8")
    return tmp_path


class TestMain:
    """Tests for main()."""

    def test_default_locations(self, project, capsys):
        assert main([]) == 0

        data = json.loads((project / "output.json").read_text(encoding="utf-8"))
        assert data == [{
            "filePath": "Foo.java",
            "details": [
                "public     Class                Foo",
                "public     Method               bar()",
                "private    Variable             x",
            ],
        }]

        out = capsys.readouterr().out
        assert "Processing file: Foo.java" in out
        assert "bar()" in out
        assert "Extraction Complete" in out

    def test_explicit_output(self, project):
        target = project / "results" / "decls.json"

        assert main(["--output", str(target)]) == 0
        assert target.exists()
        assert not (project / "output.json").exists()

    def test_quiet_suppresses_echo(self, project, capsys):
        assert main(["-q"]) == 0

        out = capsys.readouterr().out
        assert "Processing file" not in out
        assert (project / "output.json").exists()

    def test_missing_config_exits_non_zero(self, project, capsys):
        assert main(["--config", str(project / "nope.json")]) == 1

        assert "Error:" in capsys.readouterr().out
        assert not (project / "output.json").exists()

    def test_missing_source_exits_non_zero(self, project, capsys):
        config = project / "bad.json"
        config.write_text(json.dumps({"filePaths": ["Foo.java", "Gone.java"]}), encoding="utf-8")

        assert main(["-c", str(config)]) == 1

        out = capsys.readouterr().out
        assert "Error:" in out
        assert "Gone.java" in out
        assert not (project / "output.json").exists()

    def test_long_descriptor_stays_on_one_line(self, project, capsys):
        params = ", ".join(
            f"java.util.concurrent.ConcurrentHashMap<String, Integer> m{i}" for i in range(4)
        )
        (project / "Wide.java").write_text(f"class Wide {{ void process({params}) {{}} }}", encoding="utf-8")
        config = project / "wide.json"
        config.write_text(json.dumps({"filePaths": ["Wide.java"]}), encoding="utf-8")
        detail = "%-10s %-20s %s" % (
            "other", "Method", "process(" + ", ".join(["java.util.concurrent.ConcurrentHashMap"] * 4) + ")",
        )
        assert len(detail) > 80

        assert main(["-c", str(config)]) == 0

        lines = capsys.readouterr().out.splitlines()
        assert detail in lines
        assert "Processing file: Wide.java" in lines
        assert "other      Class                Wide" in lines
