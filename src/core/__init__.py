"""
Core domain models, summation and contracts.

This module contains the building blocks shared by the validator and the
parser: the Roman digit table, error types and positional summation.
"""
