"""Domain layer — options, numeric parsing, messages, and rules.

This layer depends only on stdlib and pydantic.
It must never import from the validator, config, or package root.
"""
