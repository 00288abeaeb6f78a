"""Shared Kernel module.

Components every layer may depend on. Currently only the observation
context that probes attach to their events.
"""
