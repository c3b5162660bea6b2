"""A real-time tower defense game against waves of vikings, built on pygame."""

__version__ = "1.0.0"