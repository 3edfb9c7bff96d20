"""Run the ESP-IDF toolchain container and the RFC2217 serial bridge."""

__version__ = "0.3.0"
