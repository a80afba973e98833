"""Admiral Business Group Resolver.

Resolves short IDs and labels typed at the command line to the full IDs of
Admiral business groups, reporting precisely why an input is ambiguous.
"""

__version__ = "0.1.0"
