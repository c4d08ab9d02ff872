"""Configuration package for vecmath.

Plain constants modules; the showcase CLI overrides some of them from the
command line.
"""
