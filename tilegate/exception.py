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
Service exception handling.
"""
from tilegate.response import Response


class RequestError(Exception):
    """
    Exception for all request related errors.

    :ivar status: the HTTP status code of the rendered error response
    :ivar internal: True if the error was an internal error, ie. the request itself
                    was valid
    """
    status = 500
    internal = False

    def __init__(self, message, status=None, request=None):
        Exception.__init__(self, message)
        self.msg = message
        self.request = request
        if status is not None:
            self.status = status

    def render(self):
        """
        Return a plain-text response with the error message and status.

        :rtype: `Response`
        """
        if self.internal:
            return Response('internal error: %s' % self.msg, status=self.status,
                            mimetype='text/plain')
        return Response(self.msg, status=self.status, mimetype='text/plain')

    def __str__(self):
        return '%s("%s", status=%r)' % (self.__class__.__name__, self.msg, self.status)


class NotFound(RequestError):
    """
    The requested path does not match any configured service.
    """
    status = 404


class UnsupportedDemo(RequestError):
    """
    The selected service can not provide a demo page (e.g. the demo itself).
    """
    status = 400


class AllocationFailure(RequestError):
    """
    The document could not be assembled because memory ran out.
    """
    status = 500
    internal = True
