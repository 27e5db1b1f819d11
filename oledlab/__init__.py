"""Lab exercises: ball physics, LED tasks, ball sprites, cube rendering, touch patterns, I2C registers, OTA checks and HTTP helpers."""

__version__ = "0.1.0"