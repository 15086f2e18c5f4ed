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

import pytest

from tilegate.util.yaml import YAMLError, load_yaml, load_yaml_file


class TestLoadYAML(object):
    def test_dict(self):
        assert load_yaml('a: [1, 2]\n') == {'a': [1, 2]}

    def test_no_dict(self):
        with pytest.raises(YAMLError):
            load_yaml('- 1\n- 2\n')

    def test_invalid(self):
        with pytest.raises(YAMLError):
            load_yaml('a: [1, 2\n')

    def test_file(self, tmp_path):
        filename = tmp_path / 'conf.yaml'
        filename.write_text('services:\n  demo:\n')
        assert load_yaml_file(str(filename)) == {'services': {'demo': None}}
        with open(str(filename), 'rb') as f:
            assert load_yaml_file(f) == {'services': {'demo': None}}
