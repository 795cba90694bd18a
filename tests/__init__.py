"""Multi-calendar test suite."""
