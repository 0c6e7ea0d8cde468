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

"""Parameter derivation, dispatch and rendering of HDL text.

Modules
-------
parameters
    ``derive``: the only source of numbers for every generator

dispatch
    Ordered structural precedence table and methodology -> renderer table

structural
    Five module generators (standard, ECC, dual-port, pipelined, AXI4)

testbenches
    Four testbench renderers (directed, coverage, randomized, UVM)

template_engine
    Jinja2 environment over ``ramgen/templates``

consistency
    Checks generated parameter declarations against derived values
"""

from ramgen.generators.dispatch import (
    select_structural_generator,
    select_testbench_renderer,
)
from ramgen.generators.parameters import derive

__all__ = [
    "derive",
    "select_structural_generator",
    "select_testbench_renderer",
]
