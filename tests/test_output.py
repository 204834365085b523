"""Tests for coolover.output."""

import json

from rich.text import Text

from coolover.output import emit, emit_error, emit_json, emit_styled, json_mode, set_json_mode


class TestEmit:
    def test_text_mode(self, capsys):
        emit("OK", "Done")
        assert capsys.readouterr().out.strip() == "OK Done"

    def test_json_mode(self, capsys):
        set_json_mode(True)
        assert json_mode()
        emit("DONE", "2 files", data={"files": ["a", "b"]})
        output = json.loads(capsys.readouterr().out)
        assert output == {"status": "done", "message": "2 files", "files": ["a", "b"]}


class TestEmitJson:
    def test_outputs_json(self, capsys):
        emit_json({"foo": "bar"})
        assert json.loads(capsys.readouterr().out) == {"foo": "bar"}


class TestEmitStyled:
    def test_long_lines_are_not_wrapped(self, capsys):
        line = "x" * 300
        emit_styled(Text(line, style="magenta"))
        assert line in capsys.readouterr().out


class TestEmitError:
    def test_text_mode(self, capsys):
        emit_error("broken")
        assert "ERR broken" in capsys.readouterr().err

    def test_json_mode(self, capsys):
        set_json_mode(True)
        emit_error("broken")
        output = json.loads(capsys.readouterr().err)
        assert output == {"status": "error", "message": "broken"}
