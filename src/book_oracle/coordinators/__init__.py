"""Coordinators - Orchestration layer connecting UI with business logic."""

from .oracle_controller import OracleController

__all__ = [
    "OracleController",
]
