# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Team Directory Service — CRUD over team member records."""

__version__ = "1.0.0"
