"""
Application layer.

Harness bindings built on the boundary clients, and the binding registry.
"""
