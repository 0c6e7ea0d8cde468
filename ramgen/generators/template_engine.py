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

"""Jinja2 environment for the SystemVerilog templates.

Templates live in ``ramgen/templates`` as ``*.sv.j2`` files. The environment
uses ``StrictUndefined`` so a renderer that forgets to pass a value fails
loudly instead of emitting an empty string into the HDL.

Verilog replication (``{N{x}}``) collides with Jinja2's expression syntax,
so templates avoid it and zero-fill wide registers explicitly instead.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from ramgen.exceptions import GenerationError
from ramgen.utils.memory_utils import format_hex
from ramgen.utils.verilog_utils import sv_bin, sv_hex, sv_string

log = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"


@lru_cache(maxsize=None)
def get_environment() -> Environment:
    """Return the shared template environment (created on first use)."""
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
        autoescape=False,
    )
    env.filters["sv_hex"] = sv_hex
    env.filters["sv_bin"] = sv_bin
    env.filters["sv_string"] = sv_string
    env.filters["hex"] = format_hex
    return env


def render_template(template_name: str, **context: Any) -> str:
    """Render one template.

    Args:
        template_name: File name under the template directory
        **context: Template variables

    Returns:
        Rendered text

    Raises:
        GenerationError: If the template is missing or fails to render
    """
    log.debug("Rendering %s", template_name)
    try:
        return get_environment().get_template(template_name).render(**context)
    except TemplateError as e:
        raise GenerationError(
            f"Failed to render {template_name}: {e}", template=template_name
        ) from e
