"""
ipnav - IPv4 Address Navigation Utilities

A command-line toolkit for network engineers covering IPv4 address
validation, representation conversion, subnet calculation and
address sequencing.
"""

__version__ = "1.0.0"
__author__ = "ipnav contributors"
