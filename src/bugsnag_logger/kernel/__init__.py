"""Kernel – error hierarchy and pure helpers shared by every layer."""
