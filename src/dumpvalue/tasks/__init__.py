"""Build tasks backed by the exporter."""

from dumpvalue.tasks.dump_value import DumpValueTask

__all__ = ["DumpValueTask"]
