"""State/store layer.

This package is the single source of truth for which reports are currently
live. Creation paths hand finished reports to the store; expiry is decided by
the policy module and applied by the store.
"""
