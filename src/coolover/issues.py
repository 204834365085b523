"""Issue lookup, search and display for the REST API v2."""

from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Optional

from rich.text import Text

from coolover.errors import CooloverError
from coolover.http import api_get, api_post
from coolover.output import emit_json, emit_styled, json_mode
from coolover.query import api_url, build_query, build_search_body

SOURCE_DATE_FORMAT = '%Y-%m-%dT%H:%M:%S.%f%z'
DISPLAY_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class DateFormatError(CooloverError):
    pass


@dataclass(frozen=True)
class DisplayIssue:
    title: str
    summary: Optional[str]
    description: Optional[str]
    created: Optional[str]
    updated: Optional[str]
    browse_url: str


def format_date(value):
    """Reformat an API timestamp (``2015-01-02T10:20:30.000+0000``) as UTC ``2015-01-02 10:20:30``."""
    if value is None:
        return None
    try:
        parsed = datetime.strptime(value, SOURCE_DATE_FORMAT)
    except (TypeError, ValueError) as e:
        raise DateFormatError(f'Unexpected timestamp {value!r}') from e
    return parsed.astimezone(timezone.utc).strftime(DISPLAY_DATE_FORMAT)


def browse_url(base, issue_key):
    return f'{base}/browse/{issue_key}'


def project_issue(issue, base):
    """Project a raw API issue onto the fields shown to the user."""
    fields = issue.get('fields') or {}
    return DisplayIssue(
        title=issue['key'],
        summary=fields.get('summary'),
        description=fields.get('description'),
        created=format_date(fields.get('created')),
        updated=format_date(fields.get('updated')),
        browse_url=browse_url(base, issue['key']),
    )


def render_issue(display):
    return Text.assemble(
        (display.title, 'green'), ': ',
        (display.summary or '', 'yellow'), ' [',
        display.description or '', ']\n<',
        (display.created or '', 'cyan'), ' - ',
        (display.updated or '', 'cyan'), '>\n',
        (display.browse_url, 'magenta'),
    )


def get_issue(session, base, issue_key):
    return api_get(session, api_url(base, f'issue/{issue_key}'))


def search_issues(session, base, query, max_results):
    data = api_post(session, api_url(base, 'search'), build_search_body(query, max_results))
    return data.get('issues', [])


def find_project_issues(session, base, project, order_by, max_results):
    query = build_query({'project': project}, order_by)
    return search_issues(session, base, query, max_results)


def print_issues(issues, base):
    displays = [project_issue(issue, base) for issue in issues]
    if json_mode():
        emit_json([asdict(d) for d in displays])
        return
    for display in displays:
        emit_styled(render_issue(display))
        print()


def cmd_show_issue(session, config, issue_key):
    print_issues([get_issue(session, config.url, issue_key)], config.url)


def cmd_list_issues(session, config, project, order_by, max_results):
    issues = find_project_issues(session, config.url, project, order_by, max_results)
    print_issues(issues, config.url)
