"""Building blocks for Mumble voice chat clients and a UDP server ping tool."""

__version__ = "0.1.0"