"""hlopts – site-wide Pygments options for highlight blocks."""
