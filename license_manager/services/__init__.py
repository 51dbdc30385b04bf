"""Services that collect, filter and report dependency licenses."""
