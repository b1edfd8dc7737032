"""Core primitives shared by every layer: errors, logging, health."""
