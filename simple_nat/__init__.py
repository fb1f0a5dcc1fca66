"""Simple NAT: static address translation table."""
__version__ = "1.0.0"
