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

from tilegate.request import NoCaseMultiDict, Request, url_decode


def environ(path='/', **kw):
    env = {
        'PATH_INFO': path,
        'SCRIPT_NAME': '',
        'QUERY_STRING': '',
        'SERVER_NAME': 'localhost',
        'SERVER_PORT': '80',
        'wsgi.url_scheme': 'http',
    }
    env.update(kw)
    return env


class TestNoCaseMultiDict(object):
    def test_from_list(self):
        d = NoCaseMultiDict([('A', 'b'), ('a', 'c'), ('B', 'f')])
        assert d['a'] == 'b'
        assert d['A'] == 'b'
        assert d.get_all('a') == ['b', 'c']
        assert d.get_all('missing') == []
        assert 'b' in d

    def test_get_type_func(self):
        d = NoCaseMultiDict({'level': '3', 'name': 'x'})
        assert d.get('LEVEL', type_func=int) == 3
        assert d.get('name', 0, type_func=int) == 0
        assert d.get('missing', 'default') == 'default'

    def test_url_decode(self):
        d = url_decode('Foo=1&foo=2&bar=')
        assert d.get_all('FOO') == ['1', '2']
        assert d['bar'] == ''


class TestRequest(object):
    def test_pop_path(self):
        req = Request(environ('/demo/wms/foo'))
        assert req.pop_path() == 'demo'
        assert req.path == '/wms/foo'
        assert req.environ['SCRIPT_NAME'] == '/demo'
        assert req.pop_path() == 'wms'
        assert req.path == '/foo'

    def test_pop_path_last_segment(self):
        req = Request(environ('/demo'))
        assert req.pop_path() == 'demo'
        assert req.path == ''

    def test_pop_path_root(self):
        req = Request(environ('/'))
        assert req.pop_path() == ''
        assert req.environ['SCRIPT_NAME'] == ''

    def test_root_url(self):
        req = Request(environ('/demo/wms', SCRIPT_NAME='/gate'))
        req.pop_path()
        assert req.environ['SCRIPT_NAME'] == '/gate/demo'
        assert req.root_url == 'http://localhost/gate'

    def test_host_port(self):
        req = Request(environ(SERVER_PORT='8080'))
        assert req.host_url == 'http://localhost:8080/'
        req = Request(environ(HTTP_HOST='example.org:80'))
        assert req.host == 'example.org'

    def test_forwarded(self):
        req = Request(environ(HTTP_X_FORWARDED_HOST='proxy.example.org, other',
                              HTTP_X_FORWARDED_PROTO='https'))
        assert req.host_url == 'https://proxy.example.org/'

    def test_script_name_header(self):
        req = Request(environ('/gate/demo/', HTTP_X_SCRIPT_NAME='/gate'))
        assert req.path == '/demo/'
        assert req.pop_path() == 'demo'
        assert req.root_url == 'http://localhost/gate'

    def test_args(self):
        req = Request(environ(QUERY_STRING='a=1&B=2'))
        assert req.args['b'] == '2'
        assert Request(environ()).args.get('a') is None
