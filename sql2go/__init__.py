"""sql2go - Go row types and scanners generated from database schemas."""

__version__ = "0.1.0"
