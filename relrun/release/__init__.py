"""Runner glue around release-please.

- inputs: environment variables -> RunnerInputs
- config_file: release-please config loading and overrides
- manifest: manifest loading, strategy resolution, version planning
- orchestrator: ReleaseOrchestrator protocol and the release-please CLI adapter
- outputs: key=value lines for CI
- runner: the end-to-end run
"""

from __future__ import annotations
