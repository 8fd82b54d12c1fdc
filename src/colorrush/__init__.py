"""Color Rush - tap the color that does not match the announced one."""

__version__ = "0.1.0"
