#    Copyright 2026 Two Sigma Open Source, LLC
#
#    Licensed under the Apache License, Version 2.0 (the "License");
#    you may not use this file except in compliance with the License.
#    You may obtain a copy of the License at
#
#        http://www.apache.org/licenses/LICENSE-2.0
#
#    Unless required by applicable law or agreed to in writing, software
#    distributed under the License is distributed on an "AS IS" BASIS,
#    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
#    See the License for the specific language governing permissions and
#    limitations under the License.

"""Packaging checks: the core library installs without the simulation stack."""

from pathlib import Path

import pytest

import ramgen

ROOT = Path(__file__).resolve().parent.parent


def test_core_sources_do_not_import_cocotb():
    for path in Path(ramgen.__file__).parent.rglob("*.py"):
        text = path.read_text()
        assert "import cocotb" not in text, path
        assert "from cocotb" not in text, path


def test_cocotb_is_an_optional_extra():
    tomllib = pytest.importorskip("tomllib")
    project = tomllib.loads((ROOT / "pyproject.toml").read_text())["project"]
    assert not any(dep.startswith("cocotb") for dep in project["dependencies"])
    assert any(dep.startswith("cocotb") for dep in project["optional-dependencies"]["cosim"])
    assert project["readme"] == "README.md"
