"""Convert Metin2 server text files into m2-json-schemas documents."""

__version__ = "0.1.0"
