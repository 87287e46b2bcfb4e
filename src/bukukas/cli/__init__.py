"""Command line interface for bukukas."""
