"""
Theater Kernel

Pure domain layer for theater billing:
- Immutable play, performance and invoice values
- Catalog lookup
- Billing terms (pricing constants)
- Typed exceptions and structured logging
"""

__version__ = "0.1.0"
