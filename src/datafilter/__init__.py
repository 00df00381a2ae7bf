"""datafilter: sort text lines into integer, float and string output files."""

__version__ = "0.1.0"
