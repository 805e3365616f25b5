"""Test suite for the stepkit package.

This package contains unit and integration tests validating step
construction, execution outcomes, factory categories, the runner and
the command-line utilities.
"""
