"""
primkit CLI - canonical JSON, deep equality and query filtering from the shell

Commands:
- primkit json canon/equal - Deterministic JSON operations
- primkit filter - Filter a JSON array by a search query
- primkit uuid - Generate v4/v7 UUIDs
- primkit version - Show version information
"""

__version__ = "0.1.0"
