"""Article Reader: render a web page and return its title and visible text."""

__version__ = "0.1.0"
