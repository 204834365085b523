"""Project listing."""

from coolover.http import api_get
from coolover.output import emit_json, json_mode
from coolover.query import api_url


def get_projects(session, base):
    return api_get(session, api_url(base, 'project'))


def format_projects(projects):
    return [f'{p.get("name", "")} - {p.get("key", "")}' for p in projects]


def cmd_list_projects(session, config):
    projects = get_projects(session, config.url)
    if json_mode():
        emit_json([{'key': p.get('key'), 'name': p.get('name')} for p in projects])
        return
    for line in format_projects(projects):
        print(line)
