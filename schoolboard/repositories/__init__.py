"""
Persistence adapters.

These modules encapsulate how the board document is stored and retrieved
(today a single JSON file). Services depend on this layer rather than
touching the file themselves.
"""
