"""Bundled data files for histsweep."""
