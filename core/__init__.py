"""
Core module for shared domain infrastructure.

This module contains:
- Domain exceptions and value objects
- Middleware components
- Observability (tracing, metrics) and health checks
"""
