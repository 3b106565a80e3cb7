"""Pydantic Schemas — wire contracts for presets and jobs.

Invariants:
    - JSON keys are camelCase; Python attributes are snake_case
    - Unset optional fields are omitted from responses

Design Decisions:
    - Schemas double as the storage value type: storage backends receive and
      return these models, never ORM rows
"""
