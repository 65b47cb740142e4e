"""Small tools and libraries for text, data, HTML and the web, images and bzip2 compression."""

__version__ = "0.1.0"