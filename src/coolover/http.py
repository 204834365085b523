"""Shared HTTP helpers for REST calls in the coolover package.

Responses with a non-2xx status raise APIError rather than being decoded
as data. There is no retry: one request per call.
"""

import json

import requests

from coolover.errors import CooloverError


class NetworkError(CooloverError):
    pass


class APIError(NetworkError):
    def __init__(self, status, body):
        self.status = status
        self.body = body
        super().__init__(status, body)

    def __str__(self):
        return f'HTTP {self.status}: {self.body[:200]}'


class JsonParseError(CooloverError):
    pass


def request(session, url, body=None):
    """GET ``url``, or POST the JSON string ``body`` to it when one is given."""
    try:
        if body is None:
            response = session.get(url)
        else:
            response = session.post(url, data=body.encode('utf-8'),
                                    headers={'Content-Type': 'application/json'})
    except requests.RequestException as e:
        raise NetworkError(f'{url}: {e}') from e
    if not response.ok:
        raise APIError(response.status_code, response.text)
    return response


def _decode(response):
    try:
        return response.json()
    except ValueError as e:
        raise JsonParseError(f'Invalid JSON from {response.url}: {e}') from e


def api_get(session, url):
    return _decode(request(session, url))


def api_post(session, url, data):
    if not isinstance(data, str):
        data = json.dumps(data)
    return _decode(request(session, url, data))


def fetch_bytes(session, url):
    """Download raw content, e.g. an attachment."""
    return request(session, url).content
