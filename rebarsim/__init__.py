"""Reinforcement design, cost estimation and section drawings for concrete bridge girders."""

__version__ = "0.1.0"

__all__ = ["design", "drawing", "cli"]