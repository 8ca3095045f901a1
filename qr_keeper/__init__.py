"""
QR Keeper - QR Code Generator & Scanner History

Generates scannable codes from arbitrary text, decodes codes captured by a
camera, and keeps a durable, favoritable log of both activities.
"""

__version__ = "1.0.0"
__author__ = "QR Keeper Contributors"
