"""Random News - random article navigator.

A small browser automation agent that asks a local server for a random
article URL and sends the browser there, either after a page has been on
screen for a while or immediately on a keypress.
"""

__version__ = "0.1.0"
