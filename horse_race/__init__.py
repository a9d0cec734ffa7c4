"""
Horse Race

Core modules:
- engine: advance distribution and race rules
- models: core dataclasses
- renderer: in-place terminal rendering of the race
- race: the interactive race loop
- trace: helpers for replaying a race as per-tick snapshots (no terminal)
"""
