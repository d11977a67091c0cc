"""
gRPC scenario harness generator.

Turns a ServiceDescription (package, service, methods) into a Go test runner
that replays JSON scenario files against a gRPC client.
"""

__version__ = "1.0.0"
