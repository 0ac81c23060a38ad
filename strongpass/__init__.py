"""StrongPass: policy-driven password generator and strength checker."""

__version__ = "0.1.0"
