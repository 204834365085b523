"""JQL and REST resource builders."""

import json

API_SUFFIX = 'rest/api/2'


def build_query(fields, order_by):
    """Join ``field = value`` clauses with ``and`` and append the order clause.

    Clauses keep the insertion order of ``fields``.
    """
    clauses = ' and '.join(f'{name} = {value}' for name, value in fields.items())
    return f'{clauses} order by {order_by}'


def build_search_body(query, max_results):
    return json.dumps({'jql': query, 'maxResults': max_results})


def resource_url(base, api_suffix, resource_name):
    return f'{base}/{api_suffix}/{resource_name}'


def api_url(base, resource_name):
    return resource_url(base, API_SUFFIX, resource_name)
