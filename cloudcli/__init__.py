"""Building blocks for APISIX gateway deployments: configuration, commands, certificates and options."""

__version__ = "0.1.0"