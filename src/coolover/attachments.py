"""Attachment download for issues."""

import os
import sys

from coolover.http import fetch_bytes
from coolover.issues import find_project_issues, get_issue
from coolover.output import emit


def extract_attachment_links(issue):
    """Return the content URLs of an issue's attachments, in order."""
    attachments = (issue.get('fields') or {}).get('attachment') or []
    return [a['content'] for a in attachments if a.get('content')]


def basename(url):
    """Return the text after the last '/', or the whole string if there is none."""
    return url[url.rfind('/') + 1:]


def download_attachments(session, base, issues, path_prefix):
    """Fetch each issue in full and write its attachments under ``path_prefix``.

    Search results carry only partial fields, so every issue is re-read by
    key. Downloads run one at a time in issue order, then attachment order.
    The first failure propagates; files already written are left in place.
    """
    links = []
    for issue in issues:
        issue_links = extract_attachment_links(get_issue(session, base, issue['key']))
        if issue_links:
            links.extend(issue_links)

    os.makedirs(path_prefix, exist_ok=True)
    written = []
    for link in links:
        path = os.path.join(path_prefix, basename(link))
        content = fetch_bytes(session, link)
        with open(path, 'wb') as f:
            f.write(content)
        print(f'GET {link} -> {path}', file=sys.stderr)
        written.append(path)
    return written


def cmd_download_attachments(session, config, project, order_by, max_results, dir):
    issues = find_project_issues(session, config.url, project, order_by, max_results)
    written = download_attachments(session, config.url, issues, dir)
    emit('DONE', f'{len(written)} attachments from {len(issues)} issues -> {dir}',
         data={'files': written})
