"""
MinHypr - window minimization manager for Hyprland
"""

__version__ = "0.3.0"
