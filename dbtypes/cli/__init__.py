"""
dbtypes CLI — inspect the per-backend type registries.

Usage:
    dbtypes backends
    dbtypes -d mongodb types
    dbtypes -d sql validations String
    dbtypes -d cassandra check String pattern
"""

__cli_name__ = "dbtypes"


def main():
    """Wrapper to avoid eager import of __main__ which causes warnings with -m."""
    from .__main__ import main as _main
    return _main()
