# This file is part of the TileGate project.
# Copyright (C) 2026 TileGate contributors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Service responses.
"""


class Response(object):
    charset = 'utf-8'
    default_content_type = 'text/plain'

    def __init__(self, response, status=None, content_type=None, mimetype=None):
        self.response = response
        if status is None:
            status = 200
        self.status = status
        self.headers = {}
        if mimetype:
            if mimetype.startswith('text/'):
                content_type = mimetype + '; charset=' + self.charset
            else:
                content_type = mimetype
        if content_type is None:
            content_type = self.default_content_type
        self.headers['Content-type'] = content_type

    def _status_set(self, status):
        if isinstance(status, int):
            status = status_code(status)
        self._status = status

    def _status_get(self):
        return self._status

    status = property(_status_get, _status_set)

    @property
    def content_type(self):
        return self.headers['Content-type']

    @property
    def data(self):
        if isinstance(self.response, str):
            return self.response.encode(self.charset)
        return self.response

    def __call__(self, environ, start_response):
        if not self.response:
            resp_iter = iter([])
        else:
            data = self.data
            self.headers['Content-length'] = str(len(data))
            resp_iter = iter([data])

        start_response(self.status, list(self.headers.items()))
        return resp_iter


# http://www.faqs.org/rfcs/rfc2616.html
_status_codes = {
    200: 'OK',
    301: 'Moved Permanently',
    400: 'Bad Request',
    401: 'Unauthorized',
    403: 'Forbidden',
    404: 'Not Found',
    405: 'Method Not Allowed',
    500: 'Internal Server Error',
    501: 'Not Implemented',
    502: 'Bad Gateway',
    503: 'Service Unavailable',
}


def status_code(code):
    return str(code) + ' ' + _status_codes[code]
