"""Tests for the CLI dispatcher."""

import json
import logging

import pytest

from hlopts.cli import main


class TestCLIDispatch:
    def test_no_command_shows_help(self, capsys):
        ret = main([])
        assert ret == 1
        out = capsys.readouterr().out
        assert "options" in out
        assert "highlight" in out

    def test_missing_action_shows_skill_help(self, capsys):
        with pytest.raises(SystemExit):
            main(["options"])
        assert "resolve" in capsys.readouterr().out


class TestOptionsCLI:
    def test_site(self, site, capsys):
        ret = main(["options", "site", "--source", str(site)])
        assert ret == 0
        output = json.loads(capsys.readouterr().out)
        assert output["pygments_options"] == {"startinline": True, "linenos": "table"}

    def test_site_without_config(self, tmp_path, capsys):
        ret = main(["options", "site", "--source", str(tmp_path)])
        assert ret == 0
        assert json.loads(capsys.readouterr().out) == {"pygments_options": {}}

    def test_resolve_merges(self, site, capsys):
        ret = main(["options", "resolve", "php linenos", "--source", str(site)])
        assert ret == 0
        output = json.loads(capsys.readouterr().out)
        assert output["lang"] == "php"
        assert output["local_options"] == {"linenos": "inline"}
        assert output["options"] == {"startinline": True, "linenos": "inline"}

    def test_resolve_safe_flag(self, site, capsys):
        ret = main(["options", "resolve", "ruby noclasses", "--source", str(site), "--safe"])
        assert ret == 0
        output = json.loads(capsys.readouterr().out)
        assert "noclasses" not in output["options"]
        assert output["options"]["encoding"] == "utf-8"

    def test_resolve_safe_from_config(self, tmp_path, capsys):
        (tmp_path / "_config.yml").write_text("safe: true\n")
        ret = main(["options", "resolve", "ruby noclasses", "--source", str(tmp_path)])
        assert ret == 0
        assert json.loads(capsys.readouterr().out)["options"] == {"encoding": "utf-8"}

    def test_comma_separated_configs(self, tmp_path, capsys):
        (tmp_path / "a.yml").write_text("pygments_options:\n  linenos: table\n")
        (tmp_path / "b.yml").write_text("pygments_options:\n  cssclass: code\n")
        configs = f"{tmp_path / 'a.yml'},{tmp_path / 'b.yml'}"
        ret = main(["options", "site", "--config", configs])
        assert ret == 0
        assert json.loads(capsys.readouterr().out)["pygments_options"] == {"cssclass": "code"}

    def test_bad_markup_reports_error(self, tmp_path, capsys):
        ret = main(["options", "resolve", "ruby !!!", "--source", str(tmp_path)])
        assert ret == 2
        assert "Syntax error" in json.loads(capsys.readouterr().out)["error"]

    def test_missing_config_reports_error(self, tmp_path, capsys):
        ret = main(["options", "site", "--config", str(tmp_path / "nope.yml")])
        assert ret == 2
        assert "not found" in json.loads(capsys.readouterr().out)["error"]


class TestHighlightCLI:
    def test_render(self, site, code_file, capsys):
        ret = main(["highlight", "render", "python", str(code_file), "--source", str(site)])
        assert ret == 0
        output = json.loads(capsys.readouterr().out)
        assert output["lang"] == "python"
        assert output["options"]["linenos"] == "table"
        assert 'data-lang="python"' in output["html"]
        assert "highlighttable" in output["html"]

    def test_render_missing_file(self, tmp_path, capsys):
        ret = main(["highlight", "render", "python", str(tmp_path / "missing.py"),
                    "--source", str(tmp_path)])
        assert ret == 2
        assert "error" in json.loads(capsys.readouterr().out)

    def test_verbose_logs_merge(self, site, capsys, caplog):
        with caplog.at_level(logging.DEBUG, logger="hlopts"):
            ret = main(["--verbose", "options", "resolve", "python", "--source", str(site)])
        assert ret == 0
        assert any("Merged options" in r.getMessage() for r in caplog.records)

    def test_render_latin1_file(self, tmp_path, capsys):
        source = tmp_path / "latin1.py"
        source.write_bytes('name = "caf\xe9"\n'.encode("latin-1"))
        ret = main(["highlight", "render", "python encoding=latin-1", str(source),
                    "--source", str(tmp_path)])
        assert ret == 0
        assert "caf\xe9" in json.loads(capsys.readouterr().out)["html"]

    def test_render_undecodable_file_reports_error(self, tmp_path, capsys):
        source = tmp_path / "latin1.py"
        source.write_bytes('name = "caf\xe9"\n'.encode("latin-1"))
        ret = main(["highlight", "render", "python encoding=utf-8", str(source),
                    "--source", str(tmp_path)])
        assert ret == 2
        assert "decode" in json.loads(capsys.readouterr().out)["error"]

    def test_render_bad_tag_option_reports_error(self, tmp_path, code_file, capsys):
        ret = main(["highlight", "render", "python linenostart=abc", str(code_file),
                    "--source", str(tmp_path)])
        assert ret == 2
        assert "linenostart" in json.loads(capsys.readouterr().out)["error"]

    def test_render_bad_site_style_reports_error(self, tmp_path, code_file, capsys):
        (tmp_path / "_config.yml").write_text("pygments_options:\n  style: nosuchstyle\n")
        ret = main(["highlight", "render", "python", str(code_file), "--source", str(tmp_path)])
        assert ret == 2
        assert "error" in json.loads(capsys.readouterr().out)


class TestConfigArguments:
    def test_empty_config_list_skips_default_file(self, site, capsys):
        ret = main(["options", "site", "--source", str(site), "--config", ","])
        assert ret == 0
        assert json.loads(capsys.readouterr().out) == {"pygments_options": {}}
