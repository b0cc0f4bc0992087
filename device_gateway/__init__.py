"""Device gateway: one device abstraction over relay boards, irrigation hosts and TVs."""

__version__ = "0.1.0"
