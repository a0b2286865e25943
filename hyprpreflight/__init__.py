"""
hyprpreflight - pre-installation environment validation for the Hyprland
desktop installer on Debian.
"""

VERSION = "0.3.0"
__version__ = VERSION
