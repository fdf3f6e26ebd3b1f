"""Command modules of the colorcue command line.

Every public module here defines a module-level `command`, found by
colorcue.registry. The module docstring is the command's long help.
"""
