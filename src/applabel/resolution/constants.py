"""Shared constants for label resolution.

The declaration template mirrors the Dart constants file the mobile app
ships with; `{symbol}` is substituted with the escaped constant name.
"""

DEFAULT_LABEL = "Crypto Price Tracker"
DEFAULT_NAME_SYMBOL = "appName"
DEFAULT_VERSION_SYMBOL = "appVersion"

# One capture group: the first quoted value after the declaration, non-greedy.
DECLARATION_TEMPLATE = r'static const String {symbol} = "(.*?)";'
