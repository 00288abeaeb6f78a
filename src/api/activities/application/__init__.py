"""Activities application layer.

Use cases, the ownership gate, read models and observability probes.
"""
