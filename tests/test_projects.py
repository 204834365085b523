"""Tests for coolover.projects."""

import json

import responses

from coolover.output import set_json_mode
from coolover.projects import cmd_list_projects, format_projects

BASE = "https://jira.example.com"
V2 = "/rest/api/2"

PROJECTS = [
    {"key": "ABC", "name": "Alphabet", "id": "1"},
    {"key": "OPS", "name": "Operations", "id": "2"},
]


class TestFormatProjects:
    def test_name_then_key(self):
        assert format_projects(PROJECTS) == ["Alphabet - ABC", "Operations - OPS"]


class TestCmdListProjects:
    @responses.activate
    def test_lists(self, mock_session, config, capsys):
        responses.add(responses.GET, f"{BASE}{V2}/project", json=PROJECTS)
        cmd_list_projects(mock_session, config)
        assert capsys.readouterr().out == "Alphabet - ABC\nOperations - OPS\n"

    @responses.activate
    def test_json_output(self, mock_session, config, capsys):
        responses.add(responses.GET, f"{BASE}{V2}/project", json=PROJECTS)
        set_json_mode(True)
        cmd_list_projects(mock_session, config)
        assert json.loads(capsys.readouterr().out) == [
            {"key": "ABC", "name": "Alphabet"},
            {"key": "OPS", "name": "Operations"},
        ]
