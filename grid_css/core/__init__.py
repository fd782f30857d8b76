"""grid_css.core — Foundation layer.

Contains the measurement units, error taxonomy, value types, environment
loading and declaration formatting.
This module has NO dependencies on grid_css.validators, grid_css.sinks or
grid_css.generator. Only the stdlib is allowed here.
"""
