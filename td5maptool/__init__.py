"""Read, inspect, tune and project Td5 engine control map tables."""

__version__ = "0.1.0"