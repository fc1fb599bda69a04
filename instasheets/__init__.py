"""Pull Instagram API resources into two-column spreadsheet rows."""

__version__ = "0.1.0"
