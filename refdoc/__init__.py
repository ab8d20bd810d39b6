"""Symbol metadata for C and C++ code, with XML and Asciidoc reference documentation generators."""

__version__ = "0.1.0"