"""Kernel – error hierarchy and clock port shared by every levellog module."""
