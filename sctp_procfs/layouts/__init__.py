"""
Layout definitions sub-package for sctp-procfs.

Contains one YAML file per /proc/net/sctp table describing its fixed
prefix columns, its address region and its fixed suffix columns. The
loader module (layout_registry.py in the parent package) reads these
files at runtime.
"""
