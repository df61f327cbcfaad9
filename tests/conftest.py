#!/usr/bin/env python3
#-*- coding: utf-8 -*-
#
# Sortable Section Encoding
# Copyright (C) 2025 [Your Name/Institution]
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
#
# Filename: tests/conftest.py

import os
import sys

import pytest

# Add the 'src' directory to the Python path so tests can import modules
# like 'sequence_codec' directly, matching how the modules import each other.
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
src_path = os.path.join(project_root, 'src')

if src_path not in sys.path:
    sys.path.insert(0, src_path)


@pytest.fixture
def mock_config_file(tmp_path):
    """A fixture to create a temporary config.ini for testing."""
    def _create_file(content):
        config_path = tmp_path / "config.ini"
        config_path.write_text(content)
        return str(config_path)
    return _create_file

# === End of tests/conftest.py ===
