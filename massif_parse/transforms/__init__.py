"""
Transforms sub-package for massif-parse.

Contains the steps that turn a parsed MassifDocument into exportable
tables. The parser itself never converts units or builds tables; these
modules do it afterwards.

  - frame.py: Build the snapshot and _header DataFrames.
  - units.py: Convert byte counts to KiB/MiB/GiB, for values or columns.
"""
