"""Bit-by-bit text messaging between processes over SIGUSR1 and SIGUSR2, with small text helpers."""

__version__ = "0.1.0"
__all__ = ["client", "lines", "printf", "protocol", "server", "textutil"]