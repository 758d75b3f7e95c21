"""Helpers for reading MAAS VLAN and zone responses and building request URLs."""

__version__ = "0.1.0"
__all__ = ["schema", "urlparams", "util", "version", "vlan", "zone"]