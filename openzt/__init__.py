"""Zoo Tycoon file-format tools: INI configuration, ZTAF animations and a console client."""

__version__ = "0.1.0"

__all__ = ["animation", "console", "ini", "inidefaults", "iniformat", "inivalues"]