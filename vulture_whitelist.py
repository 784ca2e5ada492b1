"""Vulture whitelist for false positives.

This file contains code that vulture incorrectly flags as unused
but is actually used by frameworks (Pydantic) that static analysis cannot detect.
"""
# pylint: disable=all
# Pydantic field validator - used by framework via @field_validator decorator
_.normalize_alphabet  # noqa: F821  # unused method (heterogrampy/core/config.py)

# Pydantic model validator - used by framework via @model_validator decorator
_.validate_cross_fields  # noqa: F821  # unused method (heterogrampy/core/config.py)

# Pydantic model_config class variables - read by framework at class definition time
# Required to allow WordRegistry, AdjacencyIndex and Group in stage result models
model_config  # noqa: F821  # unused variable (heterogrampy/processing/stages/data_models.py)

# Context manager protocol of GroupExpander - used by the with statement
__enter__  # noqa: F821
__exit__  # noqa: F821
