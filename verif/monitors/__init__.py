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

"""Runtime monitors for generated RAM outputs.

Monitors
--------
ram_monitor
    ``CompletionMonitor`` watches ``ready`` on simple-port modules and
    checks every completion, in order, against a queue of expected read
    data filled by the test.

How Monitors Work
-----------------
Monitors are started with ``cocotb.start_soon()`` after reset and run in
parallel with the stimulus loop:

1. Test loop computes the expected result with a reference model
2. Test loop queues the expectation and drives the request
3. Monitor waits for the completion and compares

This decoupled approach handles variable pipeline latency gracefully.

Usage
-----
::

    from monitors.ram_monitor import CompletionMonitor

    monitor = CompletionMonitor(dut, expected_queue)
    cocotb.start_soon(monitor.run())
"""

from monitors.ram_monitor import CompletionMonitor

__all__ = ["CompletionMonitor"]
